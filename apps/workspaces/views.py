from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination

from .models import Workspace
from .serializers import (
    WorkspaceSerializer,
    WorkspaceCreateSerializer,
    WorkspaceMemberSerializer,
    AddMemberSerializer,
    UpdateMemberRoleSerializer,
    RemoveMemberSerializer,
)
from .permissions import IsWorkspaceMember, IsWorkspaceOwner

from apps.workspaces.services import (
    create_workspace,
    update_workspace,
    delete_workspace,
    add_member,
    update_member_role,
    remove_member,
    get_workspace_members,
    # Exceptions
    MemberNotFoundError,
    AlreadyMemberError,
    NotMemberError,
    CannotChangeOwnerRoleError,
    CannotRemoveOwnerError,
    InsufficientPermissionsError,
)


class WorkspacePagination(PageNumberPagination):
    """Custom pagination for workspaces."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class WorkspaceViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Workspace CRUD operations.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get all workspaces the user belongs to
    create: Create a new workspace (creator becomes owner)
    retrieve: Get a specific workspace
    update: Rename a workspace (owner only)
    partial_update: Rename a workspace (owner only)
    destroy: Delete a workspace (owner only)
    """

    serializer_class = WorkspaceSerializer
    permission_classes = [IsAuthenticated, IsWorkspaceMember]
    pagination_class = WorkspacePagination
    http_method_names = ['get', 'post', 'put', 'patch', 'delete', 'head', 'options']

    def get_queryset(self):
        """Return only workspaces where user is a member."""
        return Workspace.objects.filter(
            members__user=self.request.user
        ).select_related('owner').prefetch_related('members').distinct()

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return WorkspaceCreateSerializer
        return WorkspaceSerializer

    def get_permissions(self):
        """Set permissions based on action."""
        if self.action in ['update', 'partial_update', 'destroy',
                           'add_member', 'update_member_role', 'remove_member']:
            return [IsAuthenticated(), IsWorkspaceOwner()]
        return [IsAuthenticated(), IsWorkspaceMember()]

    def create(self, request, *args, **kwargs):
        """Create a new workspace."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        workspace = create_workspace(
            name=serializer.validated_data['name'],
            owner=request.user,
        )

        output_serializer = WorkspaceSerializer(workspace, context={'request': request})
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """Rename a workspace."""
        workspace = self.get_object()
        serializer = self.get_serializer(data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)

        try:
            workspace = update_workspace(
                workspace_id=workspace.id,
                user=request.user,
                name=serializer.validated_data.get('name'),
            )
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        output_serializer = WorkspaceSerializer(workspace, context={'request': request})
        return Response(output_serializer.data)

    def destroy(self, request, *args, **kwargs):
        """Delete a workspace."""
        workspace = self.get_object()
        try:
            delete_workspace(workspace_id=workspace.id, user=request.user)
            return Response(status=status.HTTP_204_NO_CONTENT)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    @action(detail=True, methods=['get'])
    def members(self, request, pk=None):
        """Get all members of the workspace."""
        workspace = self.get_object()
        memberships = get_workspace_members(workspace_id=workspace.id)
        serializer = WorkspaceMemberSerializer(memberships, many=True)
        return Response(serializer.data)

    @action(detail=True, methods=['post'])
    def add_member(self, request, pk=None):
        """Add an existing user as collaborator (owner only)."""
        workspace = self.get_object()
        serializer = AddMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            membership = add_member(
                workspace_id=workspace.id,
                user=request.user,
                email=serializer.validated_data['email'],
                role=serializer.validated_data['role'],
            )
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except MemberNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except AlreadyMemberError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        output_serializer = WorkspaceMemberSerializer(membership)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['post'])
    def update_member_role(self, request, pk=None):
        """Update member's role (owner only)."""
        workspace = self.get_object()
        serializer = UpdateMemberRoleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            membership = update_member_role(
                workspace_id=workspace.id,
                user=request.user,
                member_id=serializer.validated_data['user_id'],
                role=serializer.validated_data['role'],
            )
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except (NotMemberError, CannotChangeOwnerRoleError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        output_serializer = WorkspaceMemberSerializer(membership)
        return Response(output_serializer.data)

    @action(detail=True, methods=['delete'])
    def remove_member(self, request, pk=None):
        """Remove a member from the workspace (owner only)."""
        workspace = self.get_object()
        serializer = RemoveMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            remove_member(
                workspace_id=workspace.id,
                user=request.user,
                member_id=serializer.validated_data['user_id'],
            )
            return Response(status=status.HTTP_204_NO_CONTENT)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except (CannotRemoveOwnerError, NotMemberError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
