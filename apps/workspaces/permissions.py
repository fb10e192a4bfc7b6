"""
Custom permission classes for workspace-scoped endpoints.

Workspace-scoped URLs carry the workspace id as the ``workspace_id`` URL
kwarg, so list/create endpoints can be checked before any object is loaded.
"""

from rest_framework.permissions import BasePermission

from .models import Workspace


class IsWorkspaceMember(BasePermission):
    """
    Permission: user must be a member of the workspace in the URL.

    Checks ``view.kwargs['workspace_id']`` for nested resources, and the
    object itself when the view operates on a Workspace instance.
    """

    message = 'You must be a member of this workspace.'

    def has_permission(self, request, view):
        workspace_id = view.kwargs.get('workspace_id')

        # Not a nested route (e.g. /api/workspaces/{pk}/)
        if not workspace_id:
            return True

        try:
            workspace = Workspace.objects.get(id=workspace_id)
        except Workspace.DoesNotExist:
            return False
        return workspace.has_member(request.user)

    def has_object_permission(self, request, view, obj):
        if isinstance(obj, Workspace):
            return obj.has_member(request.user)
        return obj.workspace.has_member(request.user)


class IsWorkspaceOwner(BasePermission):
    """
    Permission: user must be the workspace owner.
    """

    message = 'Only the workspace owner can perform this action.'

    def has_object_permission(self, request, view, obj):
        # obj is a Workspace instance
        return obj.owner == request.user
