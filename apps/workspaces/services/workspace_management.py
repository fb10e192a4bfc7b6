"""
Workspace management service.

Handles workspace CRUD operations with proper transaction safety.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Prefetch

from apps.accounts.models import User
from apps.workspaces.models import Workspace, WorkspaceMember, WorkspaceRole

from .exceptions import (
    WorkspaceNotFoundError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def create_workspace(*, name: str, owner: User) -> Workspace:
    """
    Create a new workspace and add the creator as owner.

    Args:
        name: Workspace name
        owner: User who will own the workspace

    Returns:
        Created Workspace instance
    """
    workspace = Workspace.objects.create(name=name, owner=owner)

    WorkspaceMember.objects.create(
        user=owner,
        workspace=workspace,
        role=WorkspaceRole.OWNER
    )

    logger.info("Workspace %s created by %s", workspace.id, owner.email)
    return workspace


def get_workspace_by_id(*, workspace_id: UUID) -> Workspace:
    """
    Get a workspace by ID with its members prefetched.

    Raises:
        WorkspaceNotFoundError: If workspace doesn't exist
    """
    try:
        return (
            Workspace.objects
            .select_related('owner')
            .prefetch_related(
                Prefetch(
                    'members',
                    queryset=WorkspaceMember.objects.select_related('user')
                )
            )
            .get(id=workspace_id)
        )
    except Workspace.DoesNotExist:
        raise WorkspaceNotFoundError(f"Workspace with ID {workspace_id} not found")


@transaction.atomic
def update_workspace(
    *,
    workspace_id: UUID,
    user: User,
    name: Optional[str] = None
) -> Workspace:
    """
    Update workspace details (owner only).

    Raises:
        WorkspaceNotFoundError: If workspace doesn't exist
        InsufficientPermissionsError: If user is not the owner
    """
    try:
        workspace = Workspace.objects.select_for_update().get(id=workspace_id)
    except Workspace.DoesNotExist:
        raise WorkspaceNotFoundError(f"Workspace with ID {workspace_id} not found")

    if not workspace.is_owner(user):
        raise InsufficientPermissionsError("Only the workspace owner can update the workspace")

    update_fields = ['updated_at']

    if name is not None:
        workspace.name = name
        update_fields.append('name')

    workspace.save(update_fields=update_fields)

    return workspace


@transaction.atomic
def delete_workspace(*, workspace_id: UUID, user: User) -> None:
    """
    Delete a workspace (owner only).

    Cascading deletes remove memberships, stores, categories, products
    and tickets of the workspace.

    Raises:
        WorkspaceNotFoundError: If workspace doesn't exist
        InsufficientPermissionsError: If user is not the owner
    """
    try:
        workspace = Workspace.objects.select_for_update().get(id=workspace_id)
    except Workspace.DoesNotExist:
        raise WorkspaceNotFoundError(f"Workspace with ID {workspace_id} not found")

    if not workspace.is_owner(user):
        raise InsufficientPermissionsError("Only the workspace owner can delete the workspace")

    logger.info("Workspace %s deleted by %s", workspace.id, user.email)
    workspace.delete()
