from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'workspaces'

router = SimpleRouter()
router.register(r'', views.WorkspaceViewSet, basename='workspace')

urlpatterns = [
    # Workspace ViewSet routes
    # GET    /api/workspaces/                          - List user's workspaces
    # POST   /api/workspaces/                          - Create workspace
    # GET    /api/workspaces/{id}/                     - Get workspace details
    # PATCH  /api/workspaces/{id}/                     - Rename workspace (owner)
    # DELETE /api/workspaces/{id}/                     - Delete workspace (owner)

    # Custom workspace actions
    # GET    /api/workspaces/{id}/members/             - List members
    # POST   /api/workspaces/{id}/add_member/          - Add member by e-mail (owner)
    # POST   /api/workspaces/{id}/update_member_role/  - Update member role (owner)
    # DELETE /api/workspaces/{id}/remove_member/       - Remove member (owner)
    path('', include(router.urls)),
]
