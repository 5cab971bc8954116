"""
Root URL configuration.
"""
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView

from shared.interfaces.health_views import (
    HealthCheckView,
    LivenessCheckView,
    ReadinessCheckView,
)

api_v1_patterns = [
    path('catalog/', include('apps.catalog.interfaces.api.urls')),
    path('cart/', include('apps.cart.interfaces.api.urls')),
    path('checkout/', include('apps.checkout.interfaces.api.urls')),
]

urlpatterns = [
    # Health
    path('health/', HealthCheckView.as_view(), name='health'),
    path('health/live/', LivenessCheckView.as_view(), name='health-live'),
    path('health/ready/', ReadinessCheckView.as_view(), name='health-ready'),

    # API
    path('api/v1/', include(api_v1_patterns)),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
]
