"""Global exception handlers that map domain exceptions to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.errors import (
    DUPLICATE_RESOURCE,
    INVALID_RENTAL_STATE,
    NO_STOCK_AVAILABLE,
    NOT_FOUND,
    REFERENCE_NOT_FOUND,
    STORAGE_ERROR,
    VALIDATION_ERROR,
    CapacityExceededError,
    DomainValidationError,
    DuplicateResourceError,
    NotFoundError,
    ReferentialError,
    RentalStateError,
    StorageError,
)
from app.schemas.error import ErrorResponse, FieldError
from app.schemas.validation import field_errors

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error, please try again later"


def _error_response(
    status_code: int,
    detail: str,
    code: str,
    errors: list[FieldError] | None = None,
) -> JSONResponse:
    """Return a standardized error response with detail and machine-readable code."""
    body = ErrorResponse(detail=detail, code=code, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request",
        VALIDATION_ERROR,
        errors=field_errors(exc.errors()),
    )


def domain_validation_error_handler(
    _request: Request, exc: DomainValidationError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        VALIDATION_ERROR,
    )


def referential_error_handler(_request: Request, exc: ReferentialError) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        REFERENCE_NOT_FOUND,
    )


def capacity_exceeded_error_handler(
    _request: Request, exc: CapacityExceededError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        NO_STOCK_AVAILABLE,
    )


def rental_state_error_handler(_request: Request, exc: RentalStateError) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        INVALID_RENTAL_STATE,
    )


def duplicate_resource_error_handler(
    _request: Request, exc: DuplicateResourceError
) -> JSONResponse:
    return _error_response(
        status.HTTP_409_CONFLICT,
        str(exc),
        DUPLICATE_RESOURCE,
    )


def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        str(exc),
        NOT_FOUND,
    )


def storage_error_handler(_request: Request, exc: StorageError) -> JSONResponse:
    # Logged with traceback where it was raised
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_ERROR_DETAIL,
        STORAGE_ERROR,
    )


def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "Database error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_ERROR_DETAIL,
        STORAGE_ERROR,
    )


def register_exception_handlers(app):
    """Register domain exception handlers on the FastAPI app."""
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(DomainValidationError, domain_validation_error_handler)
    app.add_exception_handler(ReferentialError, referential_error_handler)
    app.add_exception_handler(CapacityExceededError, capacity_exceeded_error_handler)
    app.add_exception_handler(RentalStateError, rental_state_error_handler)
    app.add_exception_handler(DuplicateResourceError, duplicate_resource_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
