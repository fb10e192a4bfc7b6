from django.shortcuts import get_object_or_404
from rest_framework.permissions import IsAuthenticated

from .models import Workspace
from .permissions import IsWorkspaceMember


class WorkspaceScopedMixin:
    """
    ViewSet mixin for resources nested under ``/api/workspaces/<workspace_id>/``.

    Restricts the queryset to the workspace in the URL, requires membership,
    and stamps the workspace on created objects.
    """

    permission_classes = [IsAuthenticated, IsWorkspaceMember]

    def get_workspace(self):
        if not hasattr(self, '_workspace'):
            self._workspace = get_object_or_404(Workspace, id=self.kwargs['workspace_id'])
        return self._workspace

    def get_queryset(self):
        return super().get_queryset().filter(workspace_id=self.kwargs['workspace_id'])

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['workspace_id'] = self.kwargs.get('workspace_id')
        return context

    def perform_create(self, serializer):
        serializer.save(workspace=self.get_workspace())
