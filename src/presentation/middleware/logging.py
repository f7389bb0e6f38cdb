"""Access logging middleware with timing."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.get_logger(__name__)

QUIET_PATHS = frozenset({"/health", "/metrics"})


def client_address(request: Request) -> str:
    """Best-effort caller address, honouring X-Forwarded-For."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one access line per request with status and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        path = request.url.path

        log = logger.bind(
            method=request.method,
            path=path,
            client=client_address(request),
            user_agent=request.headers.get("User-Agent"),
        )

        try:
            response = await call_next(request)
        except Exception as e:
            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        if path in QUIET_PATHS:
            log.debug("request_completed", status_code=response.status_code, duration_ms=duration_ms)
        else:
            log.info("request_completed", status_code=response.status_code, duration_ms=duration_ms)

        return response
