"""Request context middleware for tracing."""

import uuid
from contextvars import ContextVar
from typing import Callable, Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Get the current request ID from context."""
    return request_id_var.get()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that sets up request context.

    Reuses the caller's X-Request-ID (Salesforce can pass its own) or
    generates one, binds it to structlog and echoes it on the response.
    When ``on_error`` is given, unexpected exceptions are turned into a
    response while the request id is still bound.
    """

    HEADER_NAME = "X-Request-ID"

    def __init__(
        self,
        app,
        on_error: Optional[Callable[[Exception], Response]] = None,
    ):
        super().__init__(app)
        self.on_error = on_error

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid.uuid4())

        token = request_id_var.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            try:
                response = await call_next(request)
            except Exception as e:
                if self.on_error is None:
                    raise
                response = self.on_error(e)
            response.headers[self.HEADER_NAME] = request_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
            request_id_var.reset(token)
