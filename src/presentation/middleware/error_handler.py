"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from src.core.config import get_settings
from src.domain.exceptions import (
    DomainException,
    MissingCredentialException,
    ServerMisconfiguredException,
    InvalidCredentialException,
    InvalidInputException,
    NotConfiguredException,
    UpstreamHTTPException,
    UpstreamNetworkException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(
    status_code: int,
    code: str,
    message: str | None,
    details=None,
    **extra,
) -> JSONResponse:
    content = {
        "error": code,
        "message": message,
        "details": details,
        "request_id": get_request_id(),
    }
    content.update(extra)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def upstream_status_code(status_code: int | None) -> int:
    """Preserve the upstream error status, defaulting to 500."""
    if status_code is not None and 400 <= status_code <= 599:
        return status_code
    return 500


def internal_error_response(exc: Exception) -> JSONResponse:
    """
    Log an unexpected exception and build the 500 response.

    The message is withheld in production.
    """
    logger.exception(
        "unhandled_exception",
        request_id=get_request_id(),
        error=str(exc),
        error_type=type(exc).__name__,
    )
    message = (
        "An unexpected error occurred."
        if get_settings().is_production
        else str(exc)
    )
    return _error_response(500, "INTERNAL_ERROR", message)


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(MissingCredentialException)
    async def missing_credential_handler(
        request: Request,
        exc: MissingCredentialException,
    ) -> JSONResponse:
        """Handle requests without an API key."""
        return _error_response(401, exc.code, exc.message)

    @app.exception_handler(ServerMisconfiguredException)
    async def server_misconfigured_handler(
        request: Request,
        exc: ServerMisconfiguredException,
    ) -> JSONResponse:
        """Handle a missing partner key allow-list."""
        return _error_response(500, exc.code, exc.message)

    @app.exception_handler(InvalidCredentialException)
    async def invalid_credential_handler(
        request: Request,
        exc: InvalidCredentialException,
    ) -> JSONResponse:
        """Handle unknown API keys."""
        return _error_response(403, exc.code, exc.message)

    @app.exception_handler(InvalidInputException)
    async def invalid_input_handler(
        request: Request,
        exc: InvalidInputException,
    ) -> JSONResponse:
        """Handle invalid partner input."""
        return _error_response(400, exc.code, exc.message, {"field": exc.field})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed request bodies and parameters."""
        return _error_response(
            400,
            "INVALID_INPUT",
            "Request could not be parsed",
            exc.errors(),
        )

    @app.exception_handler(NotConfiguredException)
    async def not_configured_handler(
        request: Request,
        exc: NotConfiguredException,
    ) -> JSONResponse:
        """Handle an incomplete Navitas signing identity."""
        logger.error(
            "navitas_not_configured",
            request_id=get_request_id(),
            path=request.url.path,
        )
        return _error_response(503, exc.code, exc.message)

    @app.exception_handler(UpstreamHTTPException)
    async def upstream_http_handler(
        request: Request,
        exc: UpstreamHTTPException,
    ) -> JSONResponse:
        """Handle non-2xx Navitas responses, including Cloudflare blocks."""
        logger.error(
            "upstream_http_error",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
            status_code=exc.status_code,
            url=exc.url,
        )
        return _error_response(
            upstream_status_code(exc.status_code),
            exc.code,
            exc.message,
            exc.data,
            success=False,
            is_cloudflare=exc.is_cloudflare,
        )

    @app.exception_handler(UpstreamNetworkException)
    async def upstream_network_handler(
        request: Request,
        exc: UpstreamNetworkException,
    ) -> JSONResponse:
        """Handle Navitas calls that produced no response."""
        logger.error(
            "upstream_network_error",
            request_id=get_request_id(),
            message=exc.message,
            reason=exc.reason,
            url=exc.url,
        )
        return _error_response(
            500,
            exc.code,
            exc.message,
            success=False,
            is_cloudflare=False,
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Handle routing errors such as unknown paths."""
        code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
        return _error_response(exc.status_code, code, exc.detail)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions raised outside the request context."""
        return internal_error_response(exc)
