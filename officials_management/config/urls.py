from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include
from django.views.decorators.cache import cache_page
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

urlpatterns = [
    path("admin/", admin.site.urls),

    # JWT Authentication
    path("api/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),

    # API Documentation
    path('docs', SpectacularSwaggerView.as_view(url_name='schema'), name='docs'),
    path('redoc', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),

    # API Schema (cached to avoid heavy regen on each request):
    path('api/schema/', cache_page(60 * 60)(SpectacularAPIView.as_view()), name='schema'),

    # API Endpoints:
    path("api/officials/", include("officials_management.apps.officials.api.urls")),
    path("api/systems/", include("officials_management.apps.systems.api.urls")),
    path("api/inventory/", include("officials_management.apps.inventory.api.urls")),
    path("api/dashboard/", include("officials_management.apps.dashboard.api.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
