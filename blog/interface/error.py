"""Interface layer errors and their HTTP mapping.

Every failure leaves the API as ``{"error": "<message>"}`` with a non-2xx
status. Handlers are registered once on the app by ``register_error_handlers``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog.adapter.error import AdapterError
from blog.domain.error import (
    DomainError,
    InvalidCredentialError,
    NotAuthorizedError,
    NotFoundError,
    StoreFailureError,
    UnauthenticatedError,
    ValidationError,
)
from blog.util.logging import get_logger

logger = get_logger(__name__)

# Provider and driver details stay in the logs
INTERNAL_ERROR_MESSAGE = "Internal server error"

# Most specific first: the first matching class wins
STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (InvalidCredentialError, status.HTTP_403_FORBIDDEN),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_403_FORBIDDEN),
    (StoreFailureError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (DomainError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error body."""
    return JSONResponse(status_code=status_code, content={"error": message})


def status_for(error: Exception) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def message_for(error: Exception) -> str:
    """User-facing message for a domain error."""
    if isinstance(error, NotFoundError):
        return f"{error.resource} not found"
    if isinstance(error, NotAuthorizedError):
        return f"You are not allowed to change this {error.resource.lower()}"
    if isinstance(error, StoreFailureError):
        return "Something went wrong, please try again"
    return str(error)


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error=str(exc),
        )
    return error_response(status_code, message_for(exc))


async def handle_adapter_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error("External provider failed", path=request.url.path, error=str(exc))
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the error-to-status mapping to the app."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(AdapterError, handle_adapter_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
