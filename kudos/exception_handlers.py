"""
Name: FastAPI Exception Handlers

Responsibilities:
  - Convert typed KudosError exceptions into HTTP responses
  - Structured error responses (RFC 7807 style)
  - Centralized logging of errors with correlation IDs

Collaborators:
  - main.py: Registers these handlers
  - exceptions.py: KudosError, AuthenticationError
  - error_responses.py: Problem Details builders

Constraints:
  - All responses use RFC 7807 Problem Details format
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    generic_exception_handler,
    request_validation_handler,
)
from .exceptions import AuthenticationError, KudosError
from .logger import logger


async def authentication_error_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    """Handle unresolved caller identity."""
    logger.info(
        "Authentication required", extra={"error_id": exc.error_id}
    )
    app_exc = AppHTTPException(
        status_code=401,
        code=ErrorCode.UNAUTHORIZED,
        detail=exc.message,
        errors=[{"error_id": exc.error_id}],
        headers={"WWW-Authenticate": "Bearer"},
    )
    return await app_exception_handler(request, app_exc)


async def kudos_error_handler(request: Request, exc: KudosError) -> JSONResponse:
    """Handle any other KudosError that escaped a use case."""
    logger.error(
        "Kudos error",
        extra={
            "error_id": exc.error_id,
            "error_code": exc.error_code,
            "error_message": exc.message,
        },
    )
    app_exc = AppHTTPException(
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail=exc.message,
        errors=[exc.to_response().to_dict()],
    )
    return await app_exception_handler(request, app_exc)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", exc_info=exc)
    return await generic_exception_handler(request, exc)


def register_exception_handlers(app) -> None:
    """
    Register all exception handlers on the FastAPI app.

    Usage:
        from .exception_handlers import register_exception_handlers
        register_exception_handlers(app)
    """
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(KudosError, kudos_error_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
