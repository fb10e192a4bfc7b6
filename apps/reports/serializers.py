"""
Serializers for reports app.

Input Serializers:
    ReportQuerySerializer - Validates period and date range parameters

Response Serializers:
    ReportSummarySerializer - Serialized ReportSummary
"""

from datetime import date, timedelta

from rest_framework import serializers

from apps.tickets.serializers import TicketListSerializer


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class ReportQuerySerializer(serializers.Serializer):
    """
    Validate period and date range query parameters.

    Query Parameters:
        period (str): Month period in YYYY-MM format (e.g., '2025-01')
        start_date (date): Start of date range (inclusive)
        end_date (date): End of date range (inclusive)

    Note:
        'period' takes precedence and is converted to the full month.
        start_date and end_date must be given together. With neither,
        the view falls back to the current month.
    """

    period = serializers.RegexField(
        regex=r'^\d{4}-(0[1-9]|1[0-2])$',
        required=False,
        allow_blank=True,
        help_text='Month period in YYYY-MM format'
    )
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):
        """Parse period into date range if provided."""
        period = attrs.get('period')

        if period:
            year, month = (int(part) for part in period.split('-'))
            attrs['start_date'] = date(year, month, 1)
            next_month = (attrs['start_date'] + timedelta(days=32)).replace(day=1)
            attrs['end_date'] = next_month - timedelta(days=1)

        start = attrs.get('start_date')
        end = attrs.get('end_date')
        if (start is None) != (end is None):
            raise serializers.ValidationError(
                'start_date and end_date must be provided together'
            )
        if start and end and start > end:
            raise serializers.ValidationError({
                'start_date': 'Start date must be before end date'
            })

        return attrs


# =============================================================================
# Response Serializers
# =============================================================================

class StoreTotalSerializer(serializers.Serializer):
    store_id = serializers.UUIDField()
    store_name = serializers.CharField()
    category_name = serializers.CharField(allow_null=True)
    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    ticket_count = serializers.IntegerField()


class CategoryTotalSerializer(serializers.Serializer):
    category_id = serializers.UUIDField()
    category_name = serializers.CharField()
    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    ticket_count = serializers.IntegerField()


class PaymentMethodTotalsSerializer(serializers.Serializer):
    Debito = serializers.DecimalField(max_digits=14, decimal_places=2)
    Credito = serializers.DecimalField(max_digits=14, decimal_places=2)


class ReportSummarySerializer(serializers.Serializer):
    """ReportSummary with amounts as decimal strings."""
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    ticket_count = serializers.IntegerField()
    store_count = serializers.IntegerField()
    average_ticket_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    by_payment_method = PaymentMethodTotalsSerializer()
    by_store = StoreTotalSerializer(many=True)
    by_category = CategoryTotalSerializer(many=True)
    recent_tickets = TicketListSerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    """Standard error response serializer."""
    error = serializers.CharField()
