from rest_framework import serializers
from .models import Workspace, WorkspaceMember, WorkspaceRole
from apps.accounts.serializers import UserMinimalSerializer


class WorkspaceSerializer(serializers.ModelSerializer):
    """Main serializer for workspaces."""

    owner = UserMinimalSerializer(read_only=True)
    member_count = serializers.SerializerMethodField()
    user_role = serializers.SerializerMethodField()

    class Meta:
        model = Workspace
        fields = [
            'id',
            'name',
            'owner',
            'member_count',
            'user_role',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'owner', 'created_at', 'updated_at']

    def get_member_count(self, obj):
        """Get number of members in the workspace."""
        return obj.members.count()

    def get_user_role(self, obj):
        """Get current user's role in the workspace."""
        request = self.context.get('request')
        if request and request.user.is_authenticated:
            return obj.get_user_role(request.user)
        return None


class WorkspaceCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating and renaming workspaces."""

    class Meta:
        model = Workspace
        fields = ['name']


class WorkspaceMemberSerializer(serializers.ModelSerializer):
    """Detailed member information."""

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = WorkspaceMember
        fields = ['id', 'user', 'role', 'created_at']
        read_only_fields = fields


class AddMemberSerializer(serializers.Serializer):
    """Input for adding an existing user to a workspace."""

    email = serializers.EmailField()
    role = serializers.ChoiceField(
        choices=[WorkspaceRole.COLLABORATOR],
        default=WorkspaceRole.COLLABORATOR
    )


class UpdateMemberRoleSerializer(serializers.Serializer):
    """Input for changing a member's role."""

    user_id = serializers.UUIDField()
    role = serializers.ChoiceField(choices=WorkspaceRole.choices)


class RemoveMemberSerializer(serializers.Serializer):
    """Input for removing a member."""

    user_id = serializers.UUIDField()
