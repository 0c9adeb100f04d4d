"""Exception handlers mapping domain errors to HTTP responses.

Every error body has the shape ``{"message": "..."}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from journal.domain.error import (
    DomainError,
    NotFoundError,
    StorageError,
    UploadError,
    ValidationError,
)


def _message(status_code: int, error: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": str(error)})


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logfire.warn("Journal entry validation error", path=request.url.path, error=str(exc))
    return _message(status.HTTP_400_BAD_REQUEST, exc)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed form fields the same way as missing ones."""
    message = "; ".join(str(error.get("msg", "")) for error in exc.errors())
    logfire.warn("Malformed journal request", path=request.url.path, error=message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message or "Invalid request"},
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.warn("Journal entry not found", path=request.url.path, error=str(exc))
    return _message(status.HTTP_404_NOT_FOUND, exc)


async def handle_upload_error(request: Request, exc: UploadError) -> JSONResponse:
    logfire.error("Error uploading to media host", path=request.url.path, error=str(exc))
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


async def handle_storage_error(request: Request, exc: StorageError) -> JSONResponse:
    logfire.error("Journal storage error", path=request.url.path, error=str(exc))
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    logfire.error("Unhandled domain error", path=request.url.path, error=str(exc))
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception("Unexpected error", path=request.url.path, error=str(exc))
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app.

    Starlette picks the handler registered for the most specific class in
    the exception's MRO, so DomainError only catches what the others don't.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(UploadError, handle_upload_error)
    app.add_exception_handler(StorageError, handle_storage_error)
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
