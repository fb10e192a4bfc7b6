import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.workspaces.models import WorkspaceRole
from apps.workspaces.services import create_workspace, add_member


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def owner(db):
    """Create and return the workspace owner."""
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        display_name='Workspace Owner',
    )


@pytest.fixture
def collaborator(db):
    """Create and return a collaborator."""
    return User.objects.create_user(
        email='collaborator@example.com',
        password='TestPass123!',
        display_name='Collaborator',
    )


@pytest.fixture
def outsider(db):
    """Create and return a user outside the workspace."""
    return User.objects.create_user(
        email='outsider@example.com',
        password='TestPass123!',
        display_name='Outsider',
    )


@pytest.fixture
def owner_client(owner):
    """Return API client authenticated as owner."""
    return _client_for(owner)


@pytest.fixture
def collaborator_client(collaborator):
    """Return API client authenticated as collaborator."""
    return _client_for(collaborator)


@pytest.fixture
def outsider_client(outsider):
    """Return API client authenticated as outsider."""
    return _client_for(outsider)


@pytest.fixture
def workspace(owner, collaborator):
    """Workspace owned by owner with one collaborator."""
    workspace = create_workspace(name='Home', owner=owner)
    add_member(
        workspace_id=workspace.id,
        user=owner,
        email=collaborator.email,
        role=WorkspaceRole.COLLABORATOR,
    )
    return workspace
