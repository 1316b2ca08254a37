"""Request logging middleware.

Every request runs inside a correlation_scope() seeded from the inbound
X-Correlation-ID header; the ID in effect is echoed on the response. One
request_completed event is logged per request, at a level chosen by the
status class, so denied and failed registrations stand out from routine
polling.
"""

import time
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from case_registry.infrastructure.observability.correlation import (
    CORRELATION_HEADER,
    correlation_scope,
)

USER_ID_HEADER = "X-User-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def _log_completed(
    log: structlog.BoundLogger, status_code: int, duration_ms: float
) -> None:
    if status_code >= 500:
        emit = log.error
    elif status_code >= 400:
        emit = log.warning
    else:
        emit = log.info
    emit("request_completed", status_code=status_code, duration_ms=duration_ms)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Correlates and logs each request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as cid:
            log = structlog.get_logger(__name__).bind(
                correlation_id=cid,
                method=request.method,
                path=request.url.path,
                user_id=request.headers.get(USER_ID_HEADER),
            )
            started = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception:
                log.exception("request_failed", duration_ms=_elapsed_ms(started))
                raise

            _log_completed(log, response.status_code, _elapsed_ms(started))
            response.headers[CORRELATION_HEADER] = cid
            return response
