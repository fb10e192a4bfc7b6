from django.urls import path
from . import views

app_name = 'reports'

urlpatterns = [
    path('summary/', views.report_summary, name='summary'),
]
