import json
import logging
from unittest import mock

import pytest
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import OperationalError
from django.http import Http404
from rest_framework import exceptions as drf_exceptions

from core.exceptions import InternalFailure, api_exception_handler
from core.middleware.errors import ErrorHandlingMiddleware
from core.middleware.request_id import RequestIDFilter, get_request_id
from reservations.exceptions import LeadTimeViolation, SlotConflict


@pytest.fixture
def middleware():
    return ErrorHandlingMiddleware(lambda request: None)


def _json(response):
    return json.loads(response.content)


@pytest.mark.parametrize(
    "exc, status, message",
    [
        (SlotConflict(), 400, "Table is already booked for this time"),
        (LeadTimeViolation(), 400, "Reservations must be made at least 24 hours in advance"),
        (Http404("gone"), 404, "Not found"),
        (PermissionDenied(), 403, "Forbidden"),
        (ValidationError("Bad value"), 400, "Bad value"),
        (OperationalError("database is locked"), 500, "Internal server error"),
        (RuntimeError("boom"), 500, "Internal server error"),
    ],
)
def test_middleware_maps_exceptions_on_api_paths(middleware, rf, settings, exc, status, message):
    settings.DEBUG = False
    request = rf.get("/api/anything")

    response = middleware.process_exception(request, exc)

    assert response.status_code == status
    assert _json(response) == {"error": message}


def test_middleware_leaves_non_api_paths_to_django(middleware, rf):
    request = rf.get("/admin/")

    assert middleware.process_exception(request, RuntimeError("boom")) is None


def test_middleware_shows_detail_only_in_debug(middleware, rf, settings):
    settings.DEBUG = True
    request = rf.get("/api/anything")

    response = middleware.process_exception(request, RuntimeError("boom"))

    assert _json(response) == {"error": "boom"}


def test_client_ip_prefers_forwarded_header(middleware, rf):
    request = rf.get("/api/x", HTTP_X_FORWARDED_FOR="203.0.113.7, 10.0.0.1", REMOTE_ADDR="10.0.0.1")

    assert middleware._get_client_ip(request) == "203.0.113.7"


def test_exception_handler_renders_service_errors():
    response = api_exception_handler(SlotConflict(), {"view": None})

    assert response.status_code == 400
    assert response.data == {"error": "Table is already booked for this time"}


def test_exception_handler_logs_internal_failures():
    with mock.patch("core.exceptions.logger") as logger:
        response = api_exception_handler(InternalFailure("Failed to create reservation"), {"view": None})

    assert response.status_code == 500
    assert response.data == {"error": "Failed to create reservation"}
    logger.error.assert_called_once()


def test_exception_handler_flattens_drf_validation_errors():
    exc = drf_exceptions.ValidationError({"partySize": ["Ensure this value is greater than or equal to 1."]})

    response = api_exception_handler(exc, {"view": None})

    assert response.status_code == 400
    assert response.data == {"error": "partySize: Ensure this value is greater than or equal to 1."}


def test_exception_handler_hides_unexpected_errors():
    response = api_exception_handler(KeyError("secret"), {"view": None})

    assert response.status_code == 500
    assert response.data == {"error": "Internal server error"}


def test_request_id_filter_outside_request():
    record = logging.LogRecord("core", logging.INFO, __file__, 1, "msg", None, None)

    assert get_request_id() is None
    assert RequestIDFilter().filter(record) is True
    assert record.request_id == "no-request-id"
