import logging

from django.db import DatabaseError, connections
from django.http import JsonResponse

from clinic.services.context import get_service_context

logger = logging.getLogger(__name__)


def healthz(request):
    """Database round-trip plus the namespaces of the record stores."""
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            db_ok = tuple(c.fetchone() or ()) == (1,)
    except DatabaseError as e:
        logger.warning('health check failed: %s', e)
        return JsonResponse({'ok': False, 'error': str(e)}, status=503)
    stores = sorted(s.namespace for s in get_service_context().stores.values())
    return JsonResponse({'ok': db_ok, 'db': db_ok, 'stores': stores})
