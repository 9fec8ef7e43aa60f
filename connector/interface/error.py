"""Mapping of domain errors to HTTP responses.

Every error response has the body ``{"kind": ..., "msg": ...}``. Request
validation failures add ``"errors"`` with one entry per invalid field.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from connector.domain.error import DomainError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_400_BAD_REQUEST,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ENTRY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ALREADY_LIKED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_LIKED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.USER_EXISTS: status.HTTP_400_BAD_REQUEST,
    ErrorKind.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorKind.STORAGE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.EXTERNAL_SERVICE_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: DomainError) -> int:
    """Return the HTTP status code for a domain error."""
    return STATUS_BY_KIND.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _validation_errors(errors: list) -> list[dict]:
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in errors
    ]


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error."""
    code = status_for(exc)
    if code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            kind=exc.kind.value,
            error_type=type(exc).__name__,
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            kind=exc.kind.value,
            status_code=code,
        )
    return JSONResponse(
        status_code=code, content={"kind": exc.kind.value, "msg": exc.message}
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render a request body, path or header validation failure."""
    logfire.info("Request validation failed", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(
            {
                "kind": ErrorKind.VALIDATION_ERROR.value,
                "msg": "Invalid request",
                "errors": _validation_errors(exc.errors()),
            }
        ),
    )


async def handle_model_validation_error(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    """Render a domain model rejecting a value the request model accepted."""
    logfire.info("Model validation failed", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(
            {
                "kind": ErrorKind.VALIDATION_ERROR.value,
                "msg": "Invalid request",
                "errors": _validation_errors(exc.errors()),
            }
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(PydanticValidationError, handle_model_validation_error)
