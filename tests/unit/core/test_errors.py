"""Unit tests for ServiceError → HTTP translation."""

from __future__ import annotations

import pytest
from rest_framework.exceptions import ParseError

from modules.core.errors import UNEXPECTED_DETAIL, error_response, exception_handler
from shared.domain.result import ErrorKind, ServiceError

pytestmark = pytest.mark.unit


class TestErrorResponse:
    @pytest.mark.parametrize(
        ("kind", "status_code"),
        [
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.FIELD_VALIDATION, 400),
            (ErrorKind.UNIQUE_EMAIL, 409),
            (ErrorKind.INVALID_AREA_CODE, 400),
            (ErrorKind.CONFLICT, 409),
            (ErrorKind.UNEXPECTED, 500),
        ],
    )
    def test_status_by_kind(self, kind, status_code):
        response = error_response(ServiceError(kind=kind, message="boom"))
        assert response.status_code == status_code

    def test_field_errors_are_the_body(self):
        response = error_response(
            ServiceError(
                kind=ErrorKind.UNIQUE_EMAIL, message="taken", fields={"email": "in use"}
            )
        )
        assert response.data == {"email": "in use"}

    def test_envelope_without_fields(self):
        response = error_response(ServiceError(kind=ErrorKind.NOT_FOUND, message="nope"))
        assert response.data == {
            "type": "client_error",
            "errors": [{"code": "not_found", "detail": "nope", "attr": None}],
        }

    def test_unexpected_hides_message(self):
        response = error_response(
            ServiceError(kind=ErrorKind.UNEXPECTED, message="password=hunter2 at db")
        )
        assert response.data["type"] == "server_error"
        assert response.data["errors"][0]["detail"] == UNEXPECTED_DETAIL


class TestExceptionHandler:
    def test_api_exception_uses_envelope(self):
        response = exception_handler(ParseError("JSON parse error"), {})
        assert response.status_code == 400
        assert response.data["type"] == "client_error"
        assert response.data["errors"][0]["code"] == "parse_error"
        assert response.data["errors"][0]["detail"] == "JSON parse error"

    def test_unknown_exception_becomes_generic_500(self):
        response = exception_handler(RuntimeError("secret internals"), {"view": None})
        assert response.status_code == 500
        assert response.data["type"] == "server_error"
        assert "secret internals" not in str(response.data)
