"""
Domain-specific exceptions for workspaces app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class WorkspacesServiceError(Exception):
    """Base exception for all workspaces service errors."""
    pass


class WorkspaceNotFoundError(WorkspacesServiceError):
    """Raised when a workspace does not exist or is inaccessible."""
    pass


class MemberNotFoundError(WorkspacesServiceError):
    """Raised when the user to add or update does not exist."""
    pass


class AlreadyMemberError(WorkspacesServiceError):
    """Raised when adding a user that already belongs to the workspace."""
    pass


class NotMemberError(WorkspacesServiceError):
    """Raised when a user tries to perform an action requiring membership."""
    pass


class CannotChangeOwnerRoleError(WorkspacesServiceError):
    """Raised when attempting to change the owner's role."""
    pass


class CannotRemoveOwnerError(WorkspacesServiceError):
    """Raised when attempting to remove the workspace owner."""
    pass


class InsufficientPermissionsError(WorkspacesServiceError):
    """Raised when a user lacks required permissions for an action."""
    pass
