import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.workspaces.services import create_workspace


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='reports@example.com',
        password='TestPass123!',
        display_name='Report Reader',
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        email='nosy@example.com',
        password='TestPass123!',
        display_name='Nosy',
    )


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def authenticated_client(user):
    """Return API client authenticated as user."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def other_client(other_user):
    client = APIClient()
    refresh = RefreshToken.for_user(other_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def workspace(user):
    return create_workspace(name='Household', owner=user)
