from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from apps.catalog.models import Store, Product
from apps.catalog.serializers import StoreMinimalSerializer, ProductMinimalSerializer
from .models import Ticket, TicketItem, RequestedPaymentMethod


# =============================================================================
# INPUT SERIALIZERS (for query params and request validation)
# =============================================================================

class TicketFilterSerializer(serializers.Serializer):
    """
    Validates query parameters for the ticket list.

    Query Parameters:
        date (date): Only tickets of this calendar day
    """
    date = serializers.DateField(required=False)


class DayQuerySerializer(serializers.Serializer):
    """Validates the day for the navigation endpoint; defaults to today."""
    date = serializers.DateField(required=False)


class TicketItemInputSerializer(serializers.Serializer):
    """One line item of a new ticket."""
    product = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(),
        required=False,
        allow_null=True
    )
    description = serializers.CharField(max_length=255, required=False, allow_blank=True)
    quantity = serializers.IntegerField(min_value=1)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    temporary_item = serializers.BooleanField(required=False, default=False)
    metadata = serializers.DictField(required=False)


class TicketCreateSerializer(serializers.Serializer):
    """Validates a new ticket with nested items."""
    store = serializers.PrimaryKeyRelatedField(
        queryset=Store.objects.all(),
        required=False,
        allow_null=True
    )
    date = serializers.DateField()
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    payment_method = serializers.ChoiceField(choices=RequestedPaymentMethod.choices)
    installments = serializers.IntegerField(min_value=1, required=False, default=1)
    metadata = serializers.DictField(required=False)
    items = TicketItemInputSerializer(many=True, allow_empty=False)


class TicketUpdateSerializer(serializers.Serializer):
    """Validates a partial ticket update. Items are not editable here."""
    store = serializers.PrimaryKeyRelatedField(
        queryset=Store.objects.all(),
        required=False,
        allow_null=True
    )
    date = serializers.DateField(required=False)
    total_amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=0,
        required=False
    )
    payment_method = serializers.ChoiceField(
        choices=RequestedPaymentMethod.choices,
        required=False
    )
    installments = serializers.IntegerField(min_value=1, required=False)
    current_installment = serializers.IntegerField(min_value=1, required=False)
    metadata = serializers.DictField(required=False)


# =============================================================================
# OUTPUT SERIALIZERS
# =============================================================================

class TicketItemSerializer(serializers.ModelSerializer):
    """Line item with its product expanded."""

    product = ProductMinimalSerializer(read_only=True)

    class Meta:
        model = TicketItem
        fields = [
            'id',
            'product',
            'description',
            'quantity',
            'unit_price',
            'total_price',
            'temporary_item',
            'metadata',
        ]
        read_only_fields = fields


class TicketSerializer(serializers.ModelSerializer):
    """Full ticket representation."""

    user = UserMinimalSerializer(read_only=True)
    store = StoreMinimalSerializer(read_only=True)
    items = TicketItemSerializer(many=True, read_only=True)
    original_payment_method = serializers.CharField(read_only=True, allow_null=True)

    class Meta:
        model = Ticket
        fields = [
            'id',
            'workspace',
            'user',
            'store',
            'date',
            'total_amount',
            'payment_method',
            'original_payment_method',
            'installments',
            'current_installment',
            'metadata',
            'items',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class TicketListSerializer(serializers.ModelSerializer):
    """Lightweight ticket for lists and reports."""

    store = StoreMinimalSerializer(read_only=True)
    item_count = serializers.SerializerMethodField()

    class Meta:
        model = Ticket
        fields = [
            'id',
            'store',
            'date',
            'total_amount',
            'payment_method',
            'installments',
            'current_installment',
            'item_count',
        ]
        read_only_fields = fields

    def get_item_count(self, obj):
        return len(obj.items.all())


class TicketDayGroupSerializer(serializers.Serializer):
    date = serializers.DateField()
    ticket_count = serializers.IntegerField()
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    tickets = TicketListSerializer(many=True)


class DayNavigationSerializer(serializers.Serializer):
    date = serializers.DateField()
    previous = serializers.DateField()
    next = serializers.DateField()
