"""
Workspaces app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations run inside a transaction.
"""

from .exceptions import (
    WorkspacesServiceError,
    WorkspaceNotFoundError,
    MemberNotFoundError,
    AlreadyMemberError,
    NotMemberError,
    CannotChangeOwnerRoleError,
    CannotRemoveOwnerError,
    InsufficientPermissionsError,
)

from .workspace_management import (
    create_workspace,
    update_workspace,
    delete_workspace,
    get_workspace_by_id,
)

from .membership_management import (
    add_member,
    update_member_role,
    remove_member,
    get_workspace_members,
)


__all__ = [
    # Exceptions
    'WorkspacesServiceError',
    'WorkspaceNotFoundError',
    'MemberNotFoundError',
    'AlreadyMemberError',
    'NotMemberError',
    'CannotChangeOwnerRoleError',
    'CannotRemoveOwnerError',
    'InsufficientPermissionsError',

    # Workspace Management
    'create_workspace',
    'update_workspace',
    'delete_workspace',
    'get_workspace_by_id',

    # Membership Management
    'add_member',
    'update_member_role',
    'remove_member',
    'get_workspace_members',
]
