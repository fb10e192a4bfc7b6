import pytest
from decimal import Decimal
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.catalog.models import StoreCategory, Store, Product
from apps.tickets.services import TicketService
from apps.workspaces.services import create_workspace


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='tickets@example.com',
        password='TestPass123!',
        display_name='Ticket Keeper',
    )


@pytest.fixture
def other_user(db):
    """Create and return a user outside the workspace."""
    return User.objects.create_user(
        email='stranger@example.com',
        password='TestPass123!',
        display_name='Stranger',
    )


@pytest.fixture
def authenticated_client(user):
    """Return API client authenticated as user."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def other_client(other_user):
    """Return API client authenticated as other_user."""
    client = APIClient()
    refresh = RefreshToken.for_user(other_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def workspace(user):
    return create_workspace(name='Household', owner=user)


@pytest.fixture
def other_workspace(other_user):
    return create_workspace(name='Elsewhere', owner=other_user)


@pytest.fixture
def store(workspace):
    category = StoreCategory.objects.create(workspace=workspace, name='Supermarkets')
    return Store.objects.create(workspace=workspace, name='Corner Market', category=category)


@pytest.fixture
def foreign_store(other_workspace):
    return Store.objects.create(workspace=other_workspace, name='Far Away')


@pytest.fixture
def product(workspace):
    return Product.objects.create(workspace=workspace, name='Milk')


@pytest.fixture
def make_ticket(workspace, user, store):
    """Factory creating tickets through the service."""
    def _make(**overrides):
        kwargs = {
            'workspace_id': workspace.id,
            'user': user,
            'date': date(2025, 3, 4),
            'total_amount': Decimal('10.00'),
            'payment_method': 'Debito',
            'store': store,
            'items': [{'description': 'Bread', 'quantity': 1, 'unit_price': Decimal('10.00')}],
        }
        kwargs.update(overrides)
        return TicketService.create_ticket(**kwargs)
    return _make
