"""
Membership management service.

Handles workspace membership operations. Only the owner manages members;
the owner membership itself is immutable.
"""

import logging
from typing import List
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.workspaces.models import Workspace, WorkspaceMember, WorkspaceRole

from .exceptions import (
    WorkspaceNotFoundError,
    MemberNotFoundError,
    AlreadyMemberError,
    NotMemberError,
    CannotChangeOwnerRoleError,
    CannotRemoveOwnerError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


def _get_owned_workspace(workspace_id: UUID, user: User, action: str) -> Workspace:
    try:
        workspace = Workspace.objects.get(id=workspace_id)
    except Workspace.DoesNotExist:
        raise WorkspaceNotFoundError(f"Workspace with ID {workspace_id} not found")

    if not workspace.is_owner(user):
        raise InsufficientPermissionsError(f"Only the workspace owner can {action}")

    return workspace


@transaction.atomic
def add_member(
    *,
    workspace_id: UUID,
    user: User,
    email: str,
    role: str = WorkspaceRole.COLLABORATOR
) -> WorkspaceMember:
    """
    Add an existing user to the workspace by e-mail (owner only).

    Raises:
        WorkspaceNotFoundError: If workspace doesn't exist
        InsufficientPermissionsError: If user is not the owner
        MemberNotFoundError: If no user has that e-mail
        AlreadyMemberError: If the user already belongs to the workspace
    """
    workspace = _get_owned_workspace(workspace_id, user, 'add members')

    try:
        new_member = User.objects.get(email__iexact=email)
    except User.DoesNotExist:
        raise MemberNotFoundError(f"No user registered with e-mail {email}")

    if WorkspaceMember.objects.filter(workspace=workspace, user=new_member).exists():
        raise AlreadyMemberError("User is already a member of this workspace")

    membership = WorkspaceMember.objects.create(
        user=new_member,
        workspace=workspace,
        role=role
    )
    logger.info("User %s added to workspace %s as %s", new_member.email, workspace.id, membership.role)
    return membership


@transaction.atomic
def update_member_role(
    *,
    workspace_id: UUID,
    user: User,
    member_id: UUID,
    role: str
) -> WorkspaceMember:
    """
    Update a member's role (owner only). The owner's role cannot change.

    Args:
        workspace_id: UUID of the workspace
        user: User performing the update (must be owner)
        member_id: UUID of the user whose role to update
        role: New role

    Raises:
        WorkspaceNotFoundError: If workspace doesn't exist
        InsufficientPermissionsError: If user is not the owner
        NotMemberError: If target user is not a member
        CannotChangeOwnerRoleError: If target is the owner
        ValueError: If role is invalid
    """
    if role not in WorkspaceRole.values:
        raise ValueError(f"Invalid role. Must be one of: {WorkspaceRole.values}")

    workspace = _get_owned_workspace(workspace_id, user, 'update member roles')

    try:
        membership = (
            WorkspaceMember.objects
            .select_for_update()
            .get(workspace=workspace, user_id=member_id)
        )
    except WorkspaceMember.DoesNotExist:
        raise NotMemberError("User is not a member of this workspace")

    if membership.role == WorkspaceRole.OWNER or role == WorkspaceRole.OWNER:
        raise CannotChangeOwnerRoleError("Cannot change the owner's role")

    membership.role = role
    membership.save(update_fields=['role'])

    return membership


@transaction.atomic
def remove_member(*, workspace_id: UUID, user: User, member_id: UUID) -> None:
    """
    Remove a member from the workspace (owner only).

    Raises:
        WorkspaceNotFoundError: If workspace doesn't exist
        InsufficientPermissionsError: If user is not the owner
        NotMemberError: If target user is not a member
        CannotRemoveOwnerError: If target is the owner
    """
    workspace = _get_owned_workspace(workspace_id, user, 'remove members')

    try:
        membership = WorkspaceMember.objects.get(workspace=workspace, user_id=member_id)
    except WorkspaceMember.DoesNotExist:
        raise NotMemberError("User is not a member of this workspace")

    if membership.role == WorkspaceRole.OWNER:
        raise CannotRemoveOwnerError("Cannot remove the workspace owner")

    membership.delete()
    logger.info("User %s removed from workspace %s", member_id, workspace.id)


def get_workspace_members(*, workspace_id: UUID) -> List[WorkspaceMember]:
    """
    List the members of a workspace, oldest first.

    Raises:
        WorkspaceNotFoundError: If workspace doesn't exist
    """
    if not Workspace.objects.filter(id=workspace_id).exists():
        raise WorkspaceNotFoundError(f"Workspace with ID {workspace_id} not found")

    return list(
        WorkspaceMember.objects
        .filter(workspace_id=workspace_id)
        .select_related('user')
        .order_by('created_at')
    )
