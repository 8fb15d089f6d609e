"""
DRF Exception Handler
=====================

Custom exception handler that catches StorefrontError subtypes and returns
consistent ``{error, message, detail}`` JSON responses.

Registered in ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.
"""

import logging
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

from .base import StorefrontError

logger = logging.getLogger(__name__)


def storefront_exception_handler(exc, context):
    """
    Custom DRF exception handler.

    - Catches any ``StorefrontError`` subtype → structured JSON response.
    - Falls back to DRF's default handler for standard DRF exceptions.
    - Logs unhandled exceptions that slip through both layers.
    """

    if isinstance(exc, StorefrontError):
        logger.warning(
            "StorefrontError [%s]: %s %s",
            exc.error_code,
            exc.message,
            exc.details or "",
        )
        return Response(
            exc.to_dict(),
            status=exc.status_code,
        )

    response = drf_exception_handler(exc, context)

    if response is None:
        logger.exception("Unhandled exception in %s", context.get("view", "unknown"))

    return response
