from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class PaymentMethod(models.TextChoices):
    """Payment methods the tickets table accepts."""
    DEBITO = 'Debito', 'Débito'
    CREDITO = 'Credito', 'Crédito'


class RequestedPaymentMethod(models.TextChoices):
    """Payment methods a client may ask for; see ``tickets.payments``."""
    DEBITO = 'Debito', 'Débito'
    CREDITO = 'Credito', 'Crédito'
    EFECTIVO = 'Efectivo', 'Efectivo'
    TRANSFERENCIA = 'Transferencia', 'Transferencia'


class Ticket(models.Model):
    """Purchase receipt recorded in a workspace."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    workspace = models.ForeignKey(
        'workspaces.Workspace',
        on_delete=models.CASCADE,
        related_name='tickets'
    )
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tickets'
    )
    store = models.ForeignKey(
        'catalog.Store',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tickets'
    )

    # Calendar day of the purchase
    date = models.DateField()

    # Caller supplied, never recomputed from items
    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    payment_method = models.CharField(
        max_length=20,
        choices=PaymentMethod.choices,
        default=PaymentMethod.DEBITO
    )
    installments = models.PositiveSmallIntegerField(
        default=1,
        validators=[MinValueValidator(1)]
    )
    current_installment = models.PositiveSmallIntegerField(
        default=1,
        validators=[MinValueValidator(1)]
    )
    metadata = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tickets'
        indexes = [
            models.Index(fields=['workspace', 'date'], name='tickets_workspace_date_idx'),
            models.Index(fields=['store', 'date'], name='tickets_store_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        store = self.store.name if self.store else "No store"
        return f"{store} - {self.total_amount} ({self.date})"

    @property
    def original_payment_method(self):
        """Method the user picked, when it was stored as Debito."""
        if self.payment_method != PaymentMethod.DEBITO:
            return None
        return (self.metadata or {}).get('original_payment_method')


class TicketItem(models.Model):
    """Line item of a ticket."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    ticket = models.ForeignKey(
        Ticket,
        on_delete=models.CASCADE,
        related_name='items'
    )
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='ticket_items'
    )
    position = models.PositiveIntegerField(default=0)
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    total_price = models.DecimalField(max_digits=14, decimal_places=2, editable=False)
    description = models.CharField(max_length=255, blank=True)
    temporary_item = models.BooleanField(default=False)
    metadata = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = 'ticket_items'
        ordering = ['position']

    def __str__(self):
        return f"{self.quantity} x {self.description or self.product} @ {self.unit_price}"

    def compute_total_price(self):
        return Decimal(self.quantity) * Decimal(self.unit_price)

    def save(self, *args, **kwargs):
        """Keep total_price = quantity x unit_price."""
        self.total_price = self.compute_total_price()
        super().save(*args, **kwargs)
