from __future__ import annotations

import logging
from typing import Any

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """
    Base class for errors raised by the service layer.

    Carries the HTTP status it maps to and a short, user-facing message.
    Services never build HTTP responses themselves; the API exception
    handler below renders these as ``{"error": message}``.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request could not be processed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ServiceError):
    """Malformed, missing or non-positive request parameters."""
    default_message = "Missing required parameters"


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalFailure(ServiceError):
    """Unexpected storage/transport failure. Details are logged, never returned."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"


def _flatten_detail(detail: Any) -> str:
    """Collapse DRF's nested error detail into one readable line."""
    if isinstance(detail, dict):
        parts = []
        for field, value in detail.items():
            text = _flatten_detail(value)
            parts.append(text if field in ("non_field_errors", "detail") else f"{field}: {text}")
        return "; ".join(parts)
    if isinstance(detail, (list, tuple)):
        return "; ".join(_flatten_detail(item) for item in detail)
    return str(detail)


def api_exception_handler(exc: Exception, context: dict) -> Response:
    """
    DRF ``EXCEPTION_HANDLER``: every API failure is rendered as
    ``{"error": "<message>"}``.

    - ServiceError subclasses keep their own status and message.
    - DRF validation/parse errors become 400 with the flattened detail.
    - Anything else is logged with traceback and returned as a generic 500.
    """
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if isinstance(exc, ServiceError):
        if exc.status_code >= 500:
            logger.error("%s failed: %s", view_name, exc, exc_info=exc)
        return Response({"error": exc.message}, status=exc.status_code)

    if isinstance(exc, (Http404, PermissionDenied, drf_exceptions.APIException)):
        response = exception_handler(exc, context)
        if response is not None:
            response.data = {"error": _flatten_detail(response.data)}
            return response

    logger.error("Unhandled error in %s: %s", view_name, exc, exc_info=exc)
    return Response(
        {"error": InternalFailure.default_message},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
