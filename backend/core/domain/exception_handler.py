"""
core.domain.exception_handler — DRF-compatible global exception handler.

Maps domain exceptions from ``core.domain.exceptions`` (and raw database
failures) to JSON ``Response`` objects so that views don't need
per-endpoint try/except boilerplate.  Every error body has the shape::

    {"message": "<human readable reason>"}

Validation failures additionally carry the field-level reasons::

    {"message": "Invalid input.", "errors": {"status": ["..."]}}

Registered in ``settings.py``::

    REST_FRAMEWORK = {
        ...
        'EXCEPTION_HANDLER': 'core.domain.exception_handler.domain_exception_handler',
    }
"""

from __future__ import annotations

import logging

from django.db import DatabaseError
from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_default_handler

from core.domain.exceptions import (
    AuthenticationRequired,
    Conflict,
    DomainError,
    NotFound,
    PermissionDenied,
    StoreError,
)

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Internal server error."

# Domain exception → HTTP status code
_STATUS_MAP: dict[type, int] = {
    StoreError:             500,
    AuthenticationRequired: 401,
    PermissionDenied:       403,
    NotFound:               404,
    Conflict:               409,
    DomainError:            400,  # catch-all base class last
}


def _flatten_detail(detail) -> str:
    """Pick a single readable string out of a DRF ``detail`` payload."""
    if isinstance(detail, list) and detail:
        return _flatten_detail(detail[0])
    if isinstance(detail, dict) and detail:
        return _flatten_detail(next(iter(detail.values())))
    return str(detail)


def domain_exception_handler(exc: Exception, context: dict) -> Response:
    """
    DRF exception handler that also handles ``core.domain.exceptions``.

    The default DRF handler is called first and its payload is reshaped
    into ``{"message": ...}``.  If it returns ``None`` (meaning DRF
    doesn't recognise the exception), domain exceptions and database
    errors are translated here.  Anything else is logged with its
    traceback and answered with a generic JSON 500.
    """
    view = context.get("view", "unknown")

    # Let DRF handle its own exceptions (ValidationError, AuthN, etc.)
    response = drf_default_handler(exc, context)
    if response is not None:
        if isinstance(exc, drf_exceptions.ValidationError):
            response.data = {"message": "Invalid input.", "errors": response.data}
        else:
            response.data = {"message": _flatten_detail(response.data.get("detail", response.data))}
        return response

    # Check domain exceptions (order matters — most specific first)
    for exc_class, status_code in _STATUS_MAP.items():
        if isinstance(exc, exc_class):
            if status_code >= 500:
                logger.error("Store failure in %s: %s", view, exc, exc_info=exc)
                return Response({"message": GENERIC_SERVER_ERROR}, status=status_code)
            logger.warning(
                "Domain exception [%s] in %s: %s",
                exc_class.__name__,
                view,
                exc,
            )
            return Response({"message": str(exc)}, status=status_code)

    if isinstance(exc, DatabaseError):
        logger.error("Database error in %s", view, exc_info=exc)
        return Response({"message": GENERIC_SERVER_ERROR}, status=500)

    logger.error("Unhandled exception in %s", view, exc_info=exc)
    return Response({"message": GENERIC_SERVER_ERROR}, status=500)
