"""
URL configuration for the Expense Tracker project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/

Workspace-scoped resources (catalog, tickets, reports) are mounted under
``api/workspaces/<workspace_id>/`` so every view receives the workspace
explicitly from the URL.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from config.views import health_check

workspace_patterns = [
    path('', include('apps.catalog.urls')),
    path('tickets/', include('apps.tickets.urls')),
    path('reports/', include('apps.reports.urls')),
]

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication (tokens only, identity is managed elsewhere)
    path('api/auth/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # API endpoints
    path('api/workspaces/', include('apps.workspaces.urls')),
    path('api/workspaces/<uuid:workspace_id>/', include(workspace_patterns)),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
