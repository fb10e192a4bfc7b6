"""
Service layer unit tests for workspaces app.

Tests cover:
- Workspace CRUD and ownership checks
- Membership rules (owner immutable, duplicates rejected)
"""

import pytest
from uuid import uuid4

from apps.accounts.models import User
from apps.workspaces.models import Workspace, WorkspaceMember, WorkspaceRole
from apps.workspaces.services import (
    create_workspace,
    get_workspace_by_id,
    update_workspace,
    delete_workspace,
    add_member,
    update_member_role,
    remove_member,
    get_workspace_members,
)
from apps.workspaces.services.exceptions import (
    WorkspaceNotFoundError,
    MemberNotFoundError,
    AlreadyMemberError,
    NotMemberError,
    CannotChangeOwnerRoleError,
    CannotRemoveOwnerError,
    InsufficientPermissionsError,
)


# =============================================================================
# Workspace Management Service Tests
# =============================================================================

@pytest.mark.django_db
class TestWorkspaceManagement:
    """Tests for workspace_management.py service functions."""

    def test_create_workspace_adds_owner_membership(self, owner):
        """Creating a workspace also creates the owner membership."""
        workspace = create_workspace(name='Family', owner=owner)

        assert workspace.name == 'Family'
        assert workspace.owner == owner
        membership = WorkspaceMember.objects.get(workspace=workspace, user=owner)
        assert membership.role == WorkspaceRole.OWNER

    def test_get_workspace_by_id(self, workspace):
        assert get_workspace_by_id(workspace_id=workspace.id) == workspace

    def test_get_workspace_by_id_not_found(self):
        with pytest.raises(WorkspaceNotFoundError):
            get_workspace_by_id(workspace_id=uuid4())

    def test_update_workspace_by_owner(self, workspace, owner):
        updated = update_workspace(workspace_id=workspace.id, user=owner, name='Flat')
        assert updated.name == 'Flat'

    def test_update_workspace_by_collaborator_denied(self, workspace, collaborator):
        with pytest.raises(InsufficientPermissionsError):
            update_workspace(workspace_id=workspace.id, user=collaborator, name='Mine')

        workspace.refresh_from_db()
        assert workspace.name == 'Home'

    def test_delete_workspace_cascades_memberships(self, workspace, owner):
        delete_workspace(workspace_id=workspace.id, user=owner)

        assert not Workspace.objects.filter(id=workspace.id).exists()
        assert not WorkspaceMember.objects.filter(workspace_id=workspace.id).exists()

    def test_delete_workspace_by_collaborator_denied(self, workspace, collaborator):
        with pytest.raises(InsufficientPermissionsError):
            delete_workspace(workspace_id=workspace.id, user=collaborator)

        assert Workspace.objects.filter(id=workspace.id).exists()


# =============================================================================
# Membership Management Service Tests
# =============================================================================

@pytest.mark.django_db
class TestMembershipManagement:
    """Tests for membership_management.py service functions."""

    def test_add_member_by_email(self, workspace, owner, outsider):
        membership = add_member(
            workspace_id=workspace.id,
            user=owner,
            email='OUTSIDER@example.com',
        )

        assert membership.user == outsider
        assert membership.role == WorkspaceRole.COLLABORATOR
        assert workspace.has_member(outsider)

    def test_add_member_unknown_email(self, workspace, owner):
        with pytest.raises(MemberNotFoundError):
            add_member(workspace_id=workspace.id, user=owner, email='nobody@example.com')

    def test_add_member_twice(self, workspace, owner, collaborator):
        with pytest.raises(AlreadyMemberError):
            add_member(workspace_id=workspace.id, user=owner, email=collaborator.email)

    def test_add_member_requires_owner(self, workspace, collaborator, outsider):
        with pytest.raises(InsufficientPermissionsError):
            add_member(workspace_id=workspace.id, user=collaborator, email=outsider.email)

    def test_update_member_role_cannot_touch_owner(self, workspace, owner):
        with pytest.raises(CannotChangeOwnerRoleError):
            update_member_role(
                workspace_id=workspace.id,
                user=owner,
                member_id=owner.id,
                role=WorkspaceRole.COLLABORATOR,
            )

    def test_update_member_role_cannot_promote_to_owner(self, workspace, owner, collaborator):
        with pytest.raises(CannotChangeOwnerRoleError):
            update_member_role(
                workspace_id=workspace.id,
                user=owner,
                member_id=collaborator.id,
                role=WorkspaceRole.OWNER,
            )

    def test_update_member_role_invalid_role(self, workspace, owner, collaborator):
        with pytest.raises(ValueError):
            update_member_role(
                workspace_id=workspace.id,
                user=owner,
                member_id=collaborator.id,
                role='admin',
            )

    def test_update_member_role_not_member(self, workspace, owner, outsider):
        with pytest.raises(NotMemberError):
            update_member_role(
                workspace_id=workspace.id,
                user=owner,
                member_id=outsider.id,
                role=WorkspaceRole.COLLABORATOR,
            )

    def test_remove_member(self, workspace, owner, collaborator):
        remove_member(workspace_id=workspace.id, user=owner, member_id=collaborator.id)
        assert not workspace.has_member(collaborator)

    def test_remove_owner_rejected(self, workspace, owner):
        with pytest.raises(CannotRemoveOwnerError):
            remove_member(workspace_id=workspace.id, user=owner, member_id=owner.id)

    def test_remove_member_requires_owner(self, workspace, collaborator, owner):
        with pytest.raises(InsufficientPermissionsError):
            remove_member(workspace_id=workspace.id, user=collaborator, member_id=owner.id)

    def test_get_workspace_members(self, workspace, owner, collaborator):
        members = get_workspace_members(workspace_id=workspace.id)
        assert {m.user for m in members} == {owner, collaborator}

    def test_get_workspace_members_not_found(self):
        with pytest.raises(WorkspaceNotFoundError):
            get_workspace_members(workspace_id=uuid4())

    def test_owner_membership_role_forced(self, owner):
        """A membership for the workspace owner is always stored as owner."""
        workspace = Workspace.objects.create(name='Raw', owner=owner)
        membership = WorkspaceMember.objects.create(
            workspace=workspace,
            user=owner,
            role=WorkspaceRole.COLLABORATOR,
        )
        assert membership.role == WorkspaceRole.OWNER
