import time
import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger(__name__)


class CorrelationIdMiddleware:
    """Bind a correlation ID to every log line of a request.

    Uses the incoming ``X-Request-ID`` header or a fresh UUID4, stores it in
    a ContextVar and in structlog's contextvars, and echoes it back in the
    ``X-Request-ID`` response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        token = correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        log = logger.bind(method=request.method, path=request.path)
        log.info("request_started")
        start = time.monotonic()
        try:
            response = self.get_response(request)
        finally:
            correlation_id_var.reset(token)

        log.info(
            "request_finished",
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )
        response["X-Request-ID"] = cid
        return response
