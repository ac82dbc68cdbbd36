from __future__ import annotations

import logging
from typing import Callable

from django.conf import settings
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import DatabaseError
from django.http import Http404, HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from core.exceptions import ServiceError

logger = logging.getLogger(__name__)
error_logger = logging.getLogger("django.request")

API_PREFIXES = ("/api/",)


class ErrorHandlingMiddleware(MiddlewareMixin):
    """
    Last-resort handler for exceptions escaping plain Django views on API
    paths. DRF views are covered by ``core.exceptions.api_exception_handler``;
    this keeps the ``{"error": ...}`` contract for everything else.
    Non-API paths fall through to Django's default handling.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response
        super().__init__(get_response)

    def process_exception(self, request: HttpRequest, exception: Exception) -> HttpResponse | None:
        if not self._is_api_request(request):
            return None

        context = f"{request.method} {request.get_full_path()} from {self._get_client_ip(request)}"

        if isinstance(exception, ServiceError):
            if exception.status_code >= 500:
                error_logger.error("Service failure: %s - %s", context, exception, exc_info=exception)
            return JsonResponse({"error": exception.message}, status=exception.status_code)

        if isinstance(exception, Http404):
            logger.info("404 Not Found: %s", context)
            return JsonResponse({"error": "Not found"}, status=404)

        if isinstance(exception, PermissionDenied):
            logger.warning("403 Forbidden: %s - %s", context, exception)
            return JsonResponse({"error": "Forbidden"}, status=403)

        if isinstance(exception, ValidationError):
            logger.warning("400 Bad Request: %s - %s", context, exception)
            return JsonResponse({"error": "; ".join(exception.messages)}, status=400)

        if isinstance(exception, DatabaseError):
            error_logger.error("Database Error: %s - %s", context, exception, exc_info=exception)
        else:
            error_logger.error("500 Internal Server Error: %s - %s", context, exception, exc_info=exception)

        # Don't expose internal details in production
        message = str(exception) if settings.DEBUG else "Internal server error"
        return JsonResponse({"error": message}, status=500)

    def _is_api_request(self, request: HttpRequest) -> bool:
        return request.path.startswith(API_PREFIXES)

    def _get_client_ip(self, request: HttpRequest) -> str:
        """
        Get the client's IP address, considering proxy headers.
        """
        x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
        if x_forwarded_for:
            return x_forwarded_for.split(",")[0].strip()
        return request.META.get("REMOTE_ADDR", "unknown")
