"""
Ticket Services Module
======================

Business logic for recording tickets (purchase receipts) in a workspace.

Classes:
    TicketService: Create, update, delete and query tickets.

Example:
    Recording a cash purchase::

        from apps.tickets.services import TicketService
        from decimal import Decimal

        ticket = TicketService.create_ticket(
            workspace_id=workspace.id,
            user=request.user,
            date=date(2025, 3, 4),
            total_amount=Decimal('42.50'),
            payment_method='Efectivo',
            store=store,
            items=[
                {'description': 'Milk', 'quantity': 2, 'unit_price': Decimal('1.25')},
            ],
        )
        ticket.payment_method           # 'Debito'
        ticket.original_payment_method  # 'Efectivo'
"""

import logging

from django.db import transaction

from apps.catalog.services import record_ticket_prices
from .exceptions import (
    InvalidInstallmentError,
    InvalidTicketReferenceError,
    TicketNotFoundError,
)
from .models import Ticket, TicketItem
from .payments import normalize_payment_method

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    'store',
    'date',
    'total_amount',
    'payment_method',
    'installments',
    'current_installment',
    'metadata',
)


class TicketService:
    """
    Service for ticket persistence.

    The ticket total is whatever the caller supplies; item totals are
    computed per item and never summed into it.
    """

    @staticmethod
    def _check_workspace(obj, workspace_id, label):
        if obj is not None and str(obj.workspace_id) != str(workspace_id):
            raise InvalidTicketReferenceError(f"{label} belongs to another workspace")

    @staticmethod
    def _build_item(ticket, position, data):
        item = TicketItem(
            ticket=ticket,
            position=position,
            product=data.get('product'),
            quantity=data['quantity'],
            unit_price=data['unit_price'],
            description=data.get('description') or '',
            temporary_item=data.get('temporary_item', False),
            metadata=data.get('metadata') or {},
        )
        # bulk_create skips save()
        item.total_price = item.compute_total_price()
        return item

    @staticmethod
    def create_ticket(
        *,
        workspace_id,
        user,
        date,
        total_amount,
        payment_method,
        items,
        store=None,
        installments=1,
        metadata=None
    ):
        """
        Create a ticket with its items.

        Unit prices of linked, non-temporary items are added to the
        product price history of the store when they changed.

        Args:
            workspace_id (UUID): Owning workspace.
            user (User): Author of the ticket.
            date (date): Calendar day of the purchase.
            total_amount (Decimal): Ticket total as printed on the receipt.
            payment_method (str): Requested method; Efectivo and
                Transferencia are stored as Debito.
            items (list[dict]): ``quantity``, ``unit_price`` and optional
                ``description``, ``product``, ``temporary_item``, ``metadata``.
            store (Store, optional): Where the purchase was made.
            installments (int): Number of installments, defaults to 1.
            metadata (dict, optional): Free-form ticket metadata.

        Returns:
            Ticket: The created ticket, ``current_installment`` set to 1.

        Raises:
            InvalidTicketReferenceError: Store or product from another workspace.
        """
        TicketService._check_workspace(store, workspace_id, 'Store')
        for data in items:
            TicketService._check_workspace(data.get('product'), workspace_id, 'Product')

        normalized = normalize_payment_method(payment_method, metadata)

        with transaction.atomic():
            ticket = Ticket.objects.create(
                workspace_id=workspace_id,
                user=user,
                store=store,
                date=date,
                total_amount=total_amount,
                payment_method=normalized.payment_method,
                installments=installments or 1,
                current_installment=1,
                metadata=normalized.metadata,
            )
            TicketItem.objects.bulk_create([
                TicketService._build_item(ticket, position, data)
                for position, data in enumerate(items)
            ])
            record_ticket_prices(ticket=ticket, recorded_by=user)

        logger.info(
            "Created ticket %s in workspace %s (%s items, %s %s)",
            ticket.id, workspace_id, len(items), ticket.total_amount, ticket.payment_method
        )
        return ticket

    @staticmethod
    def get_ticket(*, workspace_id, ticket_id):
        """Fetch one ticket of a workspace or raise TicketNotFoundError."""
        try:
            return TicketService.get_tickets(workspace_id=workspace_id).get(id=ticket_id)
        except Ticket.DoesNotExist:
            raise TicketNotFoundError()

    @staticmethod
    @transaction.atomic
    def update_ticket(*, workspace_id, ticket_id, **changes):
        """
        Update the supplied fields of a ticket.

        Only keys in ``UPDATABLE_FIELDS`` are applied; id, workspace and
        author never change. When ``payment_method`` is supplied it goes
        through the normalizer, which merges ``original_payment_method``
        into the new metadata (or the current one when none is given).

        Raises:
            TicketNotFoundError: No such ticket in the workspace.
            InvalidTicketReferenceError: Store from another workspace.
            InvalidInstallmentError: current_installment > installments.
        """
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

        try:
            ticket = Ticket.objects.select_for_update().get(
                id=ticket_id,
                workspace_id=workspace_id
            )
        except Ticket.DoesNotExist:
            raise TicketNotFoundError()

        if 'store' in changes:
            TicketService._check_workspace(changes['store'], workspace_id, 'Store')

        if 'payment_method' in changes:
            normalized = normalize_payment_method(
                changes['payment_method'],
                changes.get('metadata', ticket.metadata)
            )
            changes['payment_method'] = normalized.payment_method
            changes['metadata'] = normalized.metadata
        elif 'metadata' in changes:
            changes['metadata'] = dict(changes['metadata'] or {})

        installments = changes.get('installments', ticket.installments)
        current = changes.get('current_installment', ticket.current_installment)
        if current > installments:
            raise InvalidInstallmentError(
                f"Installment {current} exceeds the {installments} installments of the ticket"
            )

        for field, value in changes.items():
            setattr(ticket, field, value)
        ticket.save()

        logger.info("Updated ticket %s (%s)", ticket.id, ', '.join(sorted(changes)) or 'no changes')
        return ticket

    @staticmethod
    def delete_ticket(*, workspace_id, ticket_id):
        """
        Hard delete a ticket and its items.

        Raises:
            TicketNotFoundError: No ticket with this id in the workspace.
        """
        deleted, _ = Ticket.objects.filter(id=ticket_id, workspace_id=workspace_id).delete()
        if not deleted:
            raise TicketNotFoundError()
        logger.info("Deleted ticket %s from workspace %s", ticket_id, workspace_id)

    @staticmethod
    def get_tickets(*, workspace_id, date=None):
        """
        Tickets of a workspace, newest first, joined with store and items.

        Args:
            workspace_id (UUID): Workspace to read.
            date (date, optional): Restrict to one calendar day.
        """
        queryset = Ticket.objects.filter(workspace_id=workspace_id).select_related(
            'user',
            'store',
            'store__category',
        ).prefetch_related(
            'items',
            'items__product',
        ).order_by('-date', '-created_at')

        if date is not None:
            queryset = queryset.filter(date=date)
        return queryset
