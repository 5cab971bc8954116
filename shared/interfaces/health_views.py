"""
Health check views.
"""
from django.conf import settings
from django.core.cache import caches
from django.db import connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.catalog.infrastructure.providers import get_catalog_view


class HealthCheckView(APIView):
    """Basic health check endpoint."""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'healthy'}, status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe - checks the session cache and the database."""
    permission_classes = [AllowAny]

    def get(self, request):
        checks = {
            'database': self._check_database(),
            'session_cache': self._check_session_cache(),
        }

        all_healthy = all(check['healthy'] for check in checks.values())
        status_code = status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE

        return Response(
            {
                'status': 'ready' if all_healthy else 'not_ready',
                'checks': checks,
                'catalog_loaded': bool(getattr(get_catalog_view(), 'is_loaded', True)),
            },
            status=status_code,
        )

    def _check_database(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            return {'healthy': True}
        except Exception as e:
            return {'healthy': False, 'error': str(e)}

    def _check_session_cache(self):
        try:
            cache = caches[settings.SESSION_CACHE_ALIAS]
            cache.set('health_check', 'ok', 10)
            value = cache.get('health_check')
            return {'healthy': value == 'ok'}
        except Exception as e:
            return {'healthy': False, 'error': str(e)}


class LivenessCheckView(APIView):
    """Liveness probe - basic application check."""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'alive'}, status=status.HTTP_200_OK)
