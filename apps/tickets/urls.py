from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import TicketViewSet

app_name = 'tickets'

router = SimpleRouter()
router.register(r'', TicketViewSet, basename='ticket')

urlpatterns = [
    path('', include(router.urls)),
]
