"""Middleware for request processing."""

from .error_handler import error_handler_middleware, internal_error_response
from .request_context import RequestContextMiddleware
from .logging import LoggingMiddleware
from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "error_handler_middleware",
    "internal_error_response",
    "RequestContextMiddleware",
    "LoggingMiddleware",
    "SecurityHeadersMiddleware",
]
