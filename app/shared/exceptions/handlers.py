"""
Exception handlers for the FastAPI application.

Map dispatch errors raised by the mediator and handlers onto standardized
HTTP error responses.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from ..responses import error_response, ErrorDetail, HTTPStatusCodes
from ...core.request_context import get_request_id
from .cqrs_exceptions import (
    CQRSError,
    HandlerNotFoundError,
    ValidationError,
    OperationCancelledError,
    StoreUnavailableError
)

logger = logging.getLogger(__name__)

# Most specific first
_STATUS_BY_ERROR = (
    (HandlerNotFoundError, HTTPStatusCodes.BAD_REQUEST),
    (ValidationError, HTTPStatusCodes.UNPROCESSABLE_ENTITY),
    (OperationCancelledError, HTTPStatusCodes.GATEWAY_TIMEOUT),
    (StoreUnavailableError, HTTPStatusCodes.SERVICE_UNAVAILABLE),
)


def status_code_for(exc: CQRSError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return HTTPStatusCodes.INTERNAL_SERVER_ERROR


def _extract_validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """
    Extract and format validation errors from RequestValidationError.

    Args:
        exc: RequestValidationError instance

    Returns:
        List of formatted error dictionaries
    """
    errors = []
    for error in exc.errors():
        field_path = ".".join(str(loc) for loc in error["loc"][1:])  # Skip 'body'

        input_value = error.get("input")
        if input_value is not None and len(str(input_value)) > 100:
            input_value = str(input_value)[:100] + "..."

        errors.append({
            "code": "VALIDATION_ERROR",
            "message": error["msg"],
            "field": field_path or "unknown",
            "context": {
                "type": error["type"],
                "value": input_value
            }
        })
    return errors


async def cqrs_exception_handler(request: Request, exc: CQRSError) -> JSONResponse:
    """
    Handle errors raised while dispatching a command or query.
    """
    status_code = status_code_for(exc)
    request_id = get_request_id()

    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"Dispatch error [{request_id}]: {exc.error_code} - {exc.message}",
        extra={
            "path": str(request.url.path),
            "method": request.method,
            "status_code": status_code,
            "error_code": exc.error_code
        }
    )

    field = getattr(exc, "field_name", None)
    return error_response(
        errors=[ErrorDetail(code=exc.error_code, message=exc.message, field=field, context=exc.details or None)],
        message=exc.message,
        status_code=status_code,
        request_id=request_id,
        error_type=exc.error_code
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle request body validation failures.
    """
    errors = _extract_validation_errors(exc)
    logger.warning(f"Request validation failed [{get_request_id()}]: {len(errors)} error(s)")

    return error_response(
        errors=errors,
        message="Request validation failed",
        status_code=HTTPStatusCodes.UNPROCESSABLE_ENTITY,
        request_id=get_request_id(),
        error_type="VALIDATION_ERROR"
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle anything not covered by the specific handlers.
    """
    logger.error(f"Unhandled Exception: {type(exc).__name__} - {str(exc)}", exc_info=exc)

    return error_response(
        errors=[ErrorDetail(code="INTERNAL_SERVER_ERROR", message="An unexpected error occurred")],
        message="An unexpected error occurred",
        status_code=HTTPStatusCodes.INTERNAL_SERVER_ERROR,
        request_id=get_request_id(),
        error_type="INTERNAL_SERVER_ERROR"
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CQRSError, cqrs_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
