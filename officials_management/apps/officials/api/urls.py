from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import OfficialEventViewSet, OfficialViewSet

router = DefaultRouter()
router.register(r'officials', OfficialViewSet, basename='official')
router.register(r'events', OfficialEventViewSet, basename='official-event')

urlpatterns = [
    path('', include(router.urls)),
]
