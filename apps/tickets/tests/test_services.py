"""
Service layer unit tests for tickets app.

Tests cover:
- Payment normalization on create and update
- Item totals and ticket totals
- Workspace scoping of every operation
"""

import pytest
from datetime import date
from decimal import Decimal
from uuid import uuid4

from apps.tickets.exceptions import (
    InvalidInstallmentError,
    InvalidTicketReferenceError,
    TicketNotFoundError,
)
from apps.tickets.models import Ticket, TicketItem, PaymentMethod
from apps.tickets.services import TicketService


@pytest.mark.django_db
class TestCreateTicket:

    def test_create_ticket_with_items(self, make_ticket, product, store, user):
        ticket = make_ticket(
            total_amount=Decimal('99.99'),
            items=[
                {'description': 'Milk', 'product': product, 'quantity': 3, 'unit_price': Decimal('1.25')},
                {'description': 'Bag', 'quantity': 1, 'unit_price': Decimal('0.10'), 'temporary_item': True},
            ],
        )

        assert ticket.store == store
        assert ticket.user == user
        assert ticket.current_installment == 1
        assert ticket.installments == 1
        # Never recomputed from the items
        assert ticket.total_amount == Decimal('99.99')

        items = list(ticket.items.all())
        assert [i.description for i in items] == ['Milk', 'Bag']
        assert items[0].total_price == Decimal('3.75')
        assert items[0].product == product
        assert items[1].temporary_item is True

    def test_cash_is_stored_as_debit(self, make_ticket):
        ticket = make_ticket(payment_method='Efectivo', metadata={'note': 'market'})
        ticket.refresh_from_db()

        assert ticket.payment_method == PaymentMethod.DEBITO
        assert ticket.metadata == {'note': 'market', 'original_payment_method': 'Efectivo'}
        assert ticket.original_payment_method == 'Efectivo'

    def test_credit_with_installments(self, make_ticket):
        ticket = make_ticket(payment_method='Credito', installments=6)

        assert ticket.payment_method == PaymentMethod.CREDITO
        assert ticket.installments == 6
        assert ticket.current_installment == 1
        assert ticket.metadata == {}

    def test_store_from_other_workspace_rejected(self, make_ticket, foreign_store):
        with pytest.raises(InvalidTicketReferenceError):
            make_ticket(store=foreign_store)

        assert Ticket.objects.count() == 0

    def test_ticket_without_store(self, make_ticket):
        ticket = make_ticket(store=None)
        assert ticket.store is None


@pytest.mark.django_db
class TestUpdateTicket:

    def test_only_supplied_fields_change(self, make_ticket, workspace):
        ticket = make_ticket(total_amount=Decimal('10.00'))

        updated = TicketService.update_ticket(
            workspace_id=workspace.id,
            ticket_id=ticket.id,
            total_amount=Decimal('12.50'),
        )

        assert updated.total_amount == Decimal('12.50')
        assert updated.date == date(2025, 3, 4)
        assert updated.payment_method == PaymentMethod.DEBITO

    def test_payment_normalized_and_metadata_kept(self, make_ticket, workspace):
        ticket = make_ticket(metadata={'note': 'keep me'})

        updated = TicketService.update_ticket(
            workspace_id=workspace.id,
            ticket_id=ticket.id,
            payment_method='Transferencia',
        )

        assert updated.payment_method == PaymentMethod.DEBITO
        assert updated.metadata == {'note': 'keep me', 'original_payment_method': 'Transferencia'}

    def test_installment_cannot_exceed_total(self, make_ticket, workspace):
        ticket = make_ticket(payment_method='Credito', installments=3)

        with pytest.raises(InvalidInstallmentError):
            TicketService.update_ticket(
                workspace_id=workspace.id,
                ticket_id=ticket.id,
                current_installment=4,
            )

        updated = TicketService.update_ticket(
            workspace_id=workspace.id,
            ticket_id=ticket.id,
            current_installment=3,
        )
        assert updated.current_installment == 3

    def test_immutable_fields_rejected(self, make_ticket, workspace, other_workspace):
        ticket = make_ticket()

        with pytest.raises(ValueError):
            TicketService.update_ticket(
                workspace_id=workspace.id,
                ticket_id=ticket.id,
                workspace=other_workspace,
            )

    def test_update_in_other_workspace_not_found(self, make_ticket, other_workspace):
        ticket = make_ticket()

        with pytest.raises(TicketNotFoundError):
            TicketService.update_ticket(
                workspace_id=other_workspace.id,
                ticket_id=ticket.id,
                total_amount=Decimal('1.00'),
            )


@pytest.mark.django_db
class TestDeleteTicket:

    def test_delete_cascades_items(self, make_ticket, workspace):
        ticket = make_ticket()

        TicketService.delete_ticket(workspace_id=workspace.id, ticket_id=ticket.id)

        assert not Ticket.objects.filter(id=ticket.id).exists()
        assert not TicketItem.objects.filter(ticket_id=ticket.id).exists()

    def test_delete_scoped_to_workspace(self, make_ticket, other_workspace):
        ticket = make_ticket()

        with pytest.raises(TicketNotFoundError):
            TicketService.delete_ticket(workspace_id=other_workspace.id, ticket_id=ticket.id)

        assert Ticket.objects.filter(id=ticket.id).exists()

    def test_delete_unknown(self, workspace):
        with pytest.raises(TicketNotFoundError):
            TicketService.delete_ticket(workspace_id=workspace.id, ticket_id=uuid4())


@pytest.mark.django_db
class TestGetTickets:

    def test_newest_first_and_date_filter(self, make_ticket, workspace):
        older = make_ticket(date=date(2025, 3, 1))
        newer = make_ticket(date=date(2025, 3, 9))
        middle = make_ticket(date=date(2025, 3, 5))

        tickets = list(TicketService.get_tickets(workspace_id=workspace.id))
        assert tickets == [newer, middle, older]

        filtered = list(TicketService.get_tickets(workspace_id=workspace.id, date=date(2025, 3, 5)))
        assert filtered == [middle]

    def test_scoped_to_workspace(self, make_ticket, other_workspace):
        make_ticket()
        assert list(TicketService.get_tickets(workspace_id=other_workspace.id)) == []
