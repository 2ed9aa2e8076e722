from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import OfficialRoleViewSet, SystemViewSet

router = DefaultRouter()
router.register(r'systems', SystemViewSet, basename='system')
router.register(r'roles', OfficialRoleViewSet, basename='official-role')

urlpatterns = [
    path('', include(router.urls)),
]
