"""HTTP error bodies.

Two shapes leave the API:

* field-level failures: ``{"<field>": "<message>", ...}``
* everything else, the envelope::

    {"type": "client_error", "errors": [{"code": ..., "detail": ..., "attr": null}]}

``error_response`` is the only place a ``ServiceError`` becomes an HTTP
status.  ``exception_handler`` is installed as DRF's ``EXCEPTION_HANDLER``
so framework errors and unhandled exceptions use the same envelope.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from shared.domain.result import ErrorKind, ServiceError

logger = structlog.get_logger(__name__)

UNEXPECTED_DETAIL = "An unexpected error occurred whilst processing the request"

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FIELD_VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNIQUE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_AREA_CODE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_envelope(
    code: str, detail: str, status_code: int, attr: Optional[str] = None
) -> Dict[str, Any]:
    return {
        "type": "server_error" if status_code >= 500 else "client_error",
        "errors": [{"code": code, "detail": detail, "attr": attr}],
    }


def error_response(error: ServiceError) -> Response:
    """Translate a ``ServiceError`` into its HTTP response."""
    status_code = STATUS_BY_KIND[error.kind]
    if error.kind == ErrorKind.UNEXPECTED:
        body = error_envelope(str(error.kind), UNEXPECTED_DETAIL, status_code)
    elif error.fields:
        body = dict(error.fields)
    else:
        body = error_envelope(str(error.kind), error.message, status_code)
    return Response(body, status=status_code)


def exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF exception handler producing the standard envelope.

    Unknown exceptions are logged and answered with a generic 500; their
    message never reaches the client.
    """
    response = drf_exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        if detail is None:
            detail = getattr(exc, "default_detail", "Invalid request.")
        code = getattr(detail, "code", None) or getattr(exc, "default_code", "error")
        response.data = error_envelope(str(code), str(detail), response.status_code)
        return response

    view = context.get("view")
    logger.exception(
        "unhandled_exception",
        view=type(view).__name__ if view is not None else None,
        exc_type=type(exc).__name__,
    )
    return Response(
        error_envelope(
            "unexpected", UNEXPECTED_DETAIL, status.HTTP_500_INTERNAL_SERVER_ERROR
        ),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
