from django.contrib import admin
from .models import Workspace, WorkspaceMember


class WorkspaceMemberInline(admin.TabularInline):
    """Inline admin for members within a workspace."""
    model = WorkspaceMember
    extra = 0
    fields = ['user', 'role', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Workspace)
class WorkspaceAdmin(admin.ModelAdmin):
    list_display = ['name', 'owner', 'get_member_count', 'created_at']
    search_fields = ['name', 'owner__email']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [WorkspaceMemberInline]

    def get_member_count(self, obj):
        return obj.members.count()
    get_member_count.short_description = 'Members'
