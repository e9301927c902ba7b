# Standard library imports
import logging
from typing import Dict

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

# Local application imports
from ..domain.exceptions import (
    MalformedIdentifierError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from ..domain.validation.user_validation import FIELD_LABELS

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No user found with given id"
INVALID_ID_MESSAGE = "Supplied id is invalid"


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": exc.errors},
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are reported like field validation failures (400, not 422)."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        if error.get("type") == "json_invalid" or not location:
            field_name = "body"
        else:
            field_name = location[-1]
        if field_name in FIELD_LABELS and error.get("type") == "string_type":
            message = f"{FIELD_LABELS[field_name]} must be a string"
        else:
            message = error.get("msg", "Invalid value")
        errors.setdefault(field_name, message)
    logger.warning(f"{request.method} {request.url.path} malformed request: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": errors},
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> PlainTextResponse:
    return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)


async def handle_malformed_identifier(request: Request, exc: MalformedIdentifierError) -> PlainTextResponse:
    return PlainTextResponse(INVALID_ID_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)


async def handle_persistence_error(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"name": type(exc).__name__, "message": exc.message},
    )


def register_exception_handlers(application: FastAPI) -> None:
    """
    Register translations from domain errors to HTTP responses
    
    Args:
        application: FastAPI application to configure
    """
    application.add_exception_handler(ValidationError, handle_validation_error)
    application.add_exception_handler(RequestValidationError, handle_request_validation_error)
    application.add_exception_handler(NotFoundError, handle_not_found)
    application.add_exception_handler(MalformedIdentifierError, handle_malformed_identifier)
    application.add_exception_handler(PersistenceError, handle_persistence_error)
