"""
Health Check Endpoints

Provides endpoints for:
- Liveness checks (is the app running?)
- Readiness checks (can the app serve requests?)
- Deep health checks (database, cache, record counts)
"""

import time
import logging
from django.http import JsonResponse
from django.db import connection
from django.core.cache import cache
from django.views.decorators.http import require_GET
from django.views.decorators.csrf import csrf_exempt

from core.constants import Resource

logger = logging.getLogger(__name__)


def _check_database():
    """Run a trivial query, returning latency in ms"""
    start = time.time()
    with connection.cursor() as cursor:
        cursor.execute('SELECT 1')
        cursor.fetchone()
    return round((time.time() - start) * 1000, 2)


def _check_cache(cache_key):
    """Write, read and delete a cache key, returning latency in ms"""
    start = time.time()
    cache.set(cache_key, 'ok', 10)
    result = cache.get(cache_key)
    cache.delete(cache_key)
    if result != 'ok':
        raise RuntimeError('Failed to read/write')
    return round((time.time() - start) * 1000, 2)


@csrf_exempt
@require_GET
def health_check(request):
    """
    Basic health check - returns 200 if app is running.
    """
    return JsonResponse({
        'status': 'healthy',
        'timestamp': time.time(),
    })


@csrf_exempt
@require_GET
def readiness_check(request):
    """
    Readiness check - verifies database and cache connectivity.
    """
    checks = {
        'database': False,
        'cache': False,
    }
    errors = []

    try:
        _check_database()
        checks['database'] = True
    except Exception as e:
        errors.append(f'Database: {str(e)}')
        logger.error(f'Health check - Database error: {e}')

    try:
        _check_cache('health_check_test')
        checks['cache'] = True
    except Exception as e:
        errors.append(f'Cache: {str(e)}')
        logger.error(f'Health check - Cache error: {e}')

    all_healthy = all(checks.values())
    status_code = 200 if all_healthy else 503

    return JsonResponse({
        'status': 'ready' if all_healthy else 'not_ready',
        'timestamp': time.time(),
        'checks': checks,
        'errors': errors if errors else None,
    }, status=status_code)


@csrf_exempt
@require_GET
def deep_health_check(request):
    """
    Deep health check - database, cache and the row count of every record table.
    """
    from logs_acesso.models import LogAcesso
    from permissoes.models import Permissao
    from politicas.models import Politica
    from trilhas_auditoria.models import TrilhaAuditoria

    checks = {
        'database': {'status': False, 'latency_ms': None},
        'cache': {'status': False, 'latency_ms': None},
        'models': {'status': False, 'details': {}},
    }
    errors = []

    try:
        checks['database'] = {'status': True, 'latency_ms': _check_database()}
    except Exception as e:
        errors.append(f'Database: {str(e)}')
        logger.error(f'Deep health check - Database error: {e}')

    try:
        checks['cache'] = {'status': True, 'latency_ms': _check_cache('deep_health_check_test')}
    except Exception as e:
        errors.append(f'Cache: {str(e)}')
        logger.error(f'Deep health check - Cache error: {e}')

    # Verifies the schema is in place
    try:
        model_checks = {
            Resource.LOGS_ACESSO: LogAcesso.objects.count(),
            Resource.PERMISSOES: Permissao.objects.count(),
            Resource.POLITICAS: Politica.objects.count(),
            Resource.TRILHAS_AUDITORIA: TrilhaAuditoria.objects.count(),
        }
        checks['models'] = {'status': True, 'details': model_checks}
    except Exception as e:
        errors.append(f'Models: {str(e)}')
        logger.error(f'Deep health check - Model error: {e}')

    critical_checks = [checks['database']['status'], checks['cache']['status']]
    all_healthy = all(critical_checks)
    status_code = 200 if all_healthy else 503

    return JsonResponse({
        'status': 'healthy' if all_healthy else 'unhealthy',
        'timestamp': time.time(),
        'checks': checks,
        'errors': errors if errors else None,
        'version': '1.0.0',
    }, status=status_code)


def get_health_urls():
    """
    Returns URL patterns for health endpoints.
    """
    from django.urls import path

    return [
        path('health/', health_check, name='health_check'),
        path('health/ready/', readiness_check, name='readiness_check'),
        path('health/deep/', deep_health_check, name='deep_health_check'),
    ]
