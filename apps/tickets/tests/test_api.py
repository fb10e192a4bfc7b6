import pytest
from datetime import date
from decimal import Decimal
from django.urls import reverse
from rest_framework import status

from apps.tickets.models import Ticket


def ws_url(name, workspace, **kwargs):
    return reverse(name, kwargs={'workspace_id': workspace.id, **kwargs})


@pytest.fixture
def ticket_payload(store, product):
    return {
        'store': str(store.id),
        'date': '2025-03-04',
        'total_amount': '42.50',
        'payment_method': 'Transferencia',
        'items': [
            {'product': str(product.id), 'description': 'Milk', 'quantity': 2, 'unit_price': '1.50'},
            {'description': 'Eggs', 'quantity': 1, 'unit_price': '3.20'},
        ],
    }


# =============================================================================
# Ticket CRUD Tests
# =============================================================================

@pytest.mark.django_db
class TestTicketCreate:
    """Tests for POST /api/workspaces/{id}/tickets/"""

    def test_create_ticket(self, authenticated_client, workspace, ticket_payload):
        response = authenticated_client.post(
            ws_url('tickets:ticket-list', workspace),
            ticket_payload,
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['payment_method'] == 'Debito'
        assert response.data['original_payment_method'] == 'Transferencia'
        assert response.data['total_amount'] == '42.50'
        assert response.data['current_installment'] == 1
        assert response.data['store']['name'] == 'Corner Market'
        assert [i['total_price'] for i in response.data['items']] == ['3.00', '3.20']

    def test_unknown_payment_method(self, authenticated_client, workspace, ticket_payload):
        ticket_payload['payment_method'] = 'Bitcoin'
        response = authenticated_client.post(
            ws_url('tickets:ticket-list', workspace),
            ticket_payload,
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'payment_method' in response.data

    def test_items_required(self, authenticated_client, workspace, ticket_payload):
        ticket_payload['items'] = []
        response = authenticated_client.post(
            ws_url('tickets:ticket-list', workspace),
            ticket_payload,
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_foreign_store(self, authenticated_client, workspace, ticket_payload, foreign_store):
        ticket_payload['store'] = str(foreign_store.id)
        response = authenticated_client.post(
            ws_url('tickets:ticket-list', workspace),
            ticket_payload,
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_non_member_forbidden(self, other_client, workspace, ticket_payload):
        response = other_client.post(
            ws_url('tickets:ticket-list', workspace),
            ticket_payload,
            format='json'
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestTicketList:
    """Tests for GET /api/workspaces/{id}/tickets/"""

    def test_paginated_by_ten(self, authenticated_client, workspace, make_ticket):
        for day in range(1, 13):
            make_ticket(date=date(2025, 3, day))

        response = authenticated_client.get(ws_url('tickets:ticket-list', workspace))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 12
        assert len(response.data['results']) == 10
        assert response.data['results'][0]['date'] == '2025-03-12'

    def test_filter_by_date(self, authenticated_client, workspace, make_ticket):
        make_ticket(date=date(2025, 3, 4))
        make_ticket(date=date(2025, 3, 5))

        response = authenticated_client.get(
            ws_url('tickets:ticket-list', workspace),
            {'date': '2025-03-05'}
        )

        assert response.data['count'] == 1
        assert response.data['results'][0]['date'] == '2025-03-05'

    def test_invalid_date_filter(self, authenticated_client, workspace):
        response = authenticated_client.get(
            ws_url('tickets:ticket-list', workspace),
            {'date': 'yesterday'}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestTicketDetail:
    """Tests for /api/workspaces/{id}/tickets/{ticket_id}/"""

    def test_retrieve(self, authenticated_client, workspace, make_ticket):
        ticket = make_ticket()
        response = authenticated_client.get(ws_url('tickets:ticket-detail', workspace, pk=ticket.id))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(ticket.id)
        assert len(response.data['items']) == 1

    def test_partial_update(self, authenticated_client, workspace, make_ticket):
        ticket = make_ticket()
        response = authenticated_client.patch(
            ws_url('tickets:ticket-detail', workspace, pk=ticket.id),
            {'payment_method': 'Efectivo', 'total_amount': '11.00'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        ticket.refresh_from_db()
        assert ticket.payment_method == 'Debito'
        assert ticket.metadata['original_payment_method'] == 'Efectivo'
        assert ticket.total_amount == Decimal('11.00')

    def test_switch_to_credit_hides_original_method(self, authenticated_client, workspace, make_ticket):
        ticket = make_ticket(payment_method='Efectivo')
        response = authenticated_client.patch(
            ws_url('tickets:ticket-detail', workspace, pk=ticket.id),
            {'payment_method': 'Credito'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['payment_method'] == 'Credito'
        assert response.data['original_payment_method'] is None
        # Metadata itself is left as it was
        assert response.data['metadata']['original_payment_method'] == 'Efectivo'

    def test_partial_update_bad_installment(self, authenticated_client, workspace, make_ticket):
        ticket = make_ticket()
        response = authenticated_client.patch(
            ws_url('tickets:ticket-detail', workspace, pk=ticket.id),
            {'current_installment': 2},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete(self, authenticated_client, workspace, make_ticket):
        ticket = make_ticket()
        url = ws_url('tickets:ticket-detail', workspace, pk=ticket.id)

        response = authenticated_client.delete(url)
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Ticket.objects.filter(id=ticket.id).exists()

        response = authenticated_client.delete(url)
        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Grouping and Day Navigation Tests
# =============================================================================

@pytest.mark.django_db
class TestTicketGrouped:
    """Tests for GET /api/workspaces/{id}/tickets/grouped/"""

    def test_grouped_by_day(self, authenticated_client, workspace, make_ticket):
        make_ticket(date=date(2025, 3, 4), total_amount=Decimal('10.00'))
        make_ticket(date=date(2025, 3, 5), total_amount=Decimal('5.00'))
        make_ticket(date=date(2025, 3, 4), total_amount=Decimal('2.50'))

        response = authenticated_client.get(ws_url('tickets:ticket-grouped', workspace))

        assert response.status_code == status.HTTP_200_OK
        assert [g['date'] for g in response.data] == ['2025-03-05', '2025-03-04']
        assert response.data[1]['ticket_count'] == 2
        assert response.data[1]['total_amount'] == '12.50'


@pytest.mark.django_db
class TestTicketDays:
    """Tests for GET /api/workspaces/{id}/tickets/days/"""

    def test_days(self, authenticated_client, workspace):
        response = authenticated_client.get(
            ws_url('tickets:ticket-days', workspace),
            {'date': '2025-03-01'}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            'date': '2025-03-01',
            'previous': '2025-02-28',
            'next': '2025-03-02',
        }
