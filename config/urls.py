"""
URL configuration for the FreshMarket backend.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from shared.interfaces.health_views import HealthCheckView, LivenessCheckView, ReadinessCheckView

urlpatterns = [
    path('admin/', admin.site.urls),

    # Health probes
    path('health/', HealthCheckView.as_view(), name='health'),
    path('health/live/', LivenessCheckView.as_view(), name='health-live'),
    path('health/ready/', ReadinessCheckView.as_view(), name='health-ready'),

    # API schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    # Authentication
    path('api/v1/auth/token/', TokenObtainPairView.as_view(), name='token-obtain'),
    path('api/v1/auth/token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),

    # Orders
    path('api/v1/orders/', include('apps.orders.interfaces.api.urls')),
    path('api/v1/producer/orders/', include('apps.orders.interfaces.api.producer_urls')),
]
