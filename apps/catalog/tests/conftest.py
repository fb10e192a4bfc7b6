import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.catalog.models import StoreCategory, Store, ProductCategory, Brand, Product
from apps.workspaces.services import create_workspace


@pytest.fixture
def user(db):
    """Create and return a workspace owner."""
    return User.objects.create_user(
        email='shopper@example.com',
        password='TestPass123!',
        display_name='Shopper',
    )


@pytest.fixture
def other_user(db):
    """Create and return a user with a workspace of their own."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        display_name='Other Shopper',
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
def supermarkets(workspace):
    return StoreCategory.objects.create(workspace=workspace, name='Supermarkets')


@pytest.fixture
def store(workspace, supermarkets):
    return Store.objects.create(workspace=workspace, name='Corner Market', category=supermarkets)


@pytest.fixture
def dairy(workspace):
    return ProductCategory.objects.create(workspace=workspace, name='Dairy')


@pytest.fixture
def products(workspace, dairy):
    """A few products, deliberately not in alphabetical order."""
    return [
        Product.objects.create(workspace=workspace, name='Oat milk', category=dairy),
        Product.objects.create(workspace=workspace, name='Milk', category=dairy),
        Product.objects.create(workspace=workspace, name='Bread'),
        Product.objects.create(workspace=workspace, name='Milky Way', enabled=False),
    ]


@pytest.fixture
def second_store(workspace):
    return Store.objects.create(workspace=workspace, name='Night Shop')


@pytest.fixture
def foreign_store(other_workspace):
    return Store.objects.create(workspace=other_workspace, name='Far Away')


@pytest.fixture
def brand(workspace):
    return Brand.objects.create(workspace=workspace, name='Farmhouse')
