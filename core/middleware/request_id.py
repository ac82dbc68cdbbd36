import logging
import re
import uuid
from threading import local

from django.utils.deprecation import MiddlewareMixin

# Thread-local storage for request ID
_thread_locals = local()

REQUEST_ID_HEADER = "HTTP_X_REQUEST_ID"

# Incoming IDs end up in log lines and a response header
VALID_REQUEST_ID_RE = re.compile(r"[A-Za-z0-9\-]{1,64}")


class RequestIDMiddleware(MiddlewareMixin):
    """
    Tags each request with an ID, reusing an incoming ``X-Request-ID`` header
    when a proxy supplied a well-formed one (letters, digits and hyphens, at
    most 64 characters) and generating a fresh UUID otherwise. The ID is
    exposed to logging for the whole request lifecycle.
    """

    def process_request(self, request):
        incoming = request.META.get(REQUEST_ID_HEADER, "")
        if VALID_REQUEST_ID_RE.fullmatch(incoming):
            request.request_id = incoming
        else:
            request.request_id = str(uuid.uuid4())
        _thread_locals.request_id = request.request_id
        return None

    def process_response(self, request, response):
        if hasattr(request, "request_id"):
            response["X-Request-ID"] = request.request_id

        if hasattr(_thread_locals, "request_id"):
            delattr(_thread_locals, "request_id")

        return response


def get_request_id():
    """Current request ID, or None outside a request."""
    return getattr(_thread_locals, "request_id", None)


class RequestIDFilter(logging.Filter):
    """
    Logging filter that adds request ID to log records.
    """

    def filter(self, record):
        record.request_id = get_request_id() or "no-request-id"
        return True
