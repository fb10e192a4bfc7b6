from django.db import models
import uuid


class WorkspaceRole(models.TextChoices):
    OWNER = 'owner', 'Owner'
    COLLABORATOR = 'collaborator', 'Collaborator'


class Workspace(models.Model):
    """Tenant that scopes stores, categories, products and tickets."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='owned_workspaces')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'workspaces'
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='workspaces_owner_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def has_member(self, user):
        return self.members.filter(user=user).exists()

    def get_user_role(self, user):
        try:
            return self.members.get(user=user).role
        except WorkspaceMember.DoesNotExist:
            return None

    def is_owner(self, user):
        return self.owner_id == getattr(user, 'id', None)


class WorkspaceMember(models.Model):
    """User membership in a workspace with role."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='workspace_memberships')
    workspace = models.ForeignKey(Workspace, on_delete=models.CASCADE, related_name='members')
    role = models.CharField(max_length=20, choices=WorkspaceRole.choices, default=WorkspaceRole.COLLABORATOR)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'workspace_members'
        unique_together = [['user', 'workspace']]
        indexes = [
            models.Index(fields=['workspace', 'role'], name='ws_members_workspace_role_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.user.get_display_name()} in {self.workspace.name} ({self.role})"

    def save(self, *args, **kwargs):
        if self.workspace.owner_id == self.user_id:
            self.role = WorkspaceRole.OWNER
        super().save(*args, **kwargs)
