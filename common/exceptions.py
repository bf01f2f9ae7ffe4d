"""
REST framework exception handler.

Maps the application exceptions to HTTP responses:

- core ValidationError -> 400
- NotFoundError -> 404
- anything DRF already knows (serializer errors, parse errors, 405...) -> DRF's response
- everything else, InternalError included -> 500
"""
import logging

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from core.constants import INTERNAL_ERROR_PREFIX
from core.exceptions import InternalError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def internal_error_detail(exc):
    """
    Body text for a 500. Echoes the failure message unless
    EXPOSE_INTERNAL_ERRORS is off, in which case it stays opaque.
    """
    if not getattr(settings, 'EXPOSE_INTERNAL_ERRORS', True):
        return f"{INTERNAL_ERROR_PREFIX}."
    message = exc.message if isinstance(exc, InternalError) else str(exc)
    return f"{INTERNAL_ERROR_PREFIX}: {message}"


def api_exception_handler(exc, context):
    if isinstance(exc, ValidationError):
        set_rollback()
        return Response(
            {'detail': exc.message, **exc.details},
            status=status.HTTP_400_BAD_REQUEST
        )

    if isinstance(exc, NotFoundError):
        set_rollback()
        return Response({'detail': exc.message}, status=status.HTTP_404_NOT_FOUND)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get('view')
    request = context.get('request')
    logger.error(
        f"Internal error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
        exc_info=exc,
        extra={'request_id': getattr(request, 'request_id', None)}
    )
    set_rollback()
    return Response(
        {'detail': internal_error_detail(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
