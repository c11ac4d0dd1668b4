"""
Standard HTTP response formats and status code system.

Provides consistent response structures for the product endpoints and the
exception handlers.
"""

from typing import Any, Dict, List, Optional, Union, Generic, TypeVar
from datetime import datetime, timezone
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from fastapi import status
from fastapi.responses import JSONResponse

# Type variable for generic responses
T = TypeVar('T')


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


class ResponseStatus(str, Enum):
    """Standard response status values."""
    SUCCESS = "success"
    ERROR = "error"


class BaseResponse(BaseModel, Generic[T]):
    """
    Standard base response format for all API endpoints.

    Provides a consistent structure with success indicator,
    data payload, message, and optional metadata.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "data": [{"id": 1, "name": "Test Product 1"}],
                "message": "Request processed successfully",
                "timestamp": "2024-01-25T12:00:00Z"
            }
        }
    )

    success: bool = Field(..., description="Indicates if the request was successful")
    data: Optional[T] = Field(None, description="Response data payload")
    message: Optional[str] = Field(None, description="Human-readable message")
    timestamp: str = Field(default_factory=_utc_timestamp, description="Response timestamp in ISO format")
    status: ResponseStatus = Field(default=ResponseStatus.SUCCESS, description="Response status indicator")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Additional metadata (request ID, counts, etc.)")


class ErrorDetail(BaseModel):
    """Detailed error information."""
    code: str = Field(..., description="Error code for programmatic handling")
    message: str = Field(..., description="Human-readable error message")
    field: Optional[str] = Field(None, description="Field name for validation errors")
    context: Optional[Dict[str, Any]] = Field(None, description="Additional error context")


class ErrorResponse(BaseModel):
    """
    Standard error response format.

    Used for routing failures, validation errors and cancelled dispatches.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "errors": [
                    {
                        "code": "HANDLER_NOT_FOUND",
                        "message": "No handler registered for request type: AddProductCommand"
                    }
                ],
                "message": "No handler registered for request type: AddProductCommand",
                "timestamp": "2024-01-25T12:00:00Z",
                "request_id": "req_0123456789ab"
            }
        }
    )

    success: bool = Field(default=False, description="Always false for errors")
    errors: List[ErrorDetail] = Field(..., description="List of error details")
    message: str = Field(..., description="Summary error message")
    timestamp: str = Field(default_factory=_utc_timestamp, description="Error timestamp")
    status: ResponseStatus = Field(default=ResponseStatus.ERROR, description="Always 'error' for error responses")
    request_id: Optional[str] = Field(None, description="Request tracking ID")
    error_type: Optional[str] = Field(None, description="Error classification")


class CreatedResponse(BaseModel, Generic[T]):
    """Response format for resource creation (201 Created)."""
    success: bool = Field(default=True)
    data: T = Field(..., description="Created resource data")
    message: str = Field(default="Resource created successfully")
    location: str = Field(..., description="Location of the created resource")
    timestamp: str = Field(default_factory=_utc_timestamp)
    status: ResponseStatus = Field(default=ResponseStatus.SUCCESS)


# HTTP Status Code Mapping
class HTTPStatusCodes:
    """Status codes used by the product API and its error handlers."""

    # Success codes (2xx)
    OK = status.HTTP_200_OK
    CREATED = status.HTTP_201_CREATED

    # Client error codes (4xx)
    BAD_REQUEST = status.HTTP_400_BAD_REQUEST  # Routing failure
    UNPROCESSABLE_ENTITY = status.HTTP_422_UNPROCESSABLE_CONTENT  # Validation error

    # Server error codes (5xx)
    INTERNAL_SERVER_ERROR = status.HTTP_500_INTERNAL_SERVER_ERROR
    SERVICE_UNAVAILABLE = status.HTTP_503_SERVICE_UNAVAILABLE  # Store down
    GATEWAY_TIMEOUT = status.HTTP_504_GATEWAY_TIMEOUT  # Dispatch deadline exceeded


# Response factory functions
def success_response(
    data: Any = None,
    message: str = "Request processed successfully",
    status_code: int = HTTPStatusCodes.OK,
    **kwargs
) -> JSONResponse:
    """
    Create a standard success response.

    Args:
        data: Response data payload
        message: Success message
        status_code: HTTP status code (default 200)
        **kwargs: Additional response fields
    """
    response = BaseResponse(
        success=True,
        data=data,
        message=message,
        status=ResponseStatus.SUCCESS,
        **kwargs
    )
    return JSONResponse(
        content=response.model_dump(mode="json", exclude_none=True),
        status_code=status_code
    )


def created_response(
    data: Any,
    location: str,
    message: str = "Resource created successfully"
) -> JSONResponse:
    """Create a 201 response with a Location header."""
    response = CreatedResponse(
        data=data,
        location=location,
        message=message
    )
    return JSONResponse(
        content=response.model_dump(mode="json", exclude_none=True),
        status_code=HTTPStatusCodes.CREATED,
        headers={"Location": location}
    )


def error_response(
    errors: List[Union[ErrorDetail, Dict[str, Any]]],
    message: str = "Request failed",
    status_code: int = HTTPStatusCodes.BAD_REQUEST,
    **kwargs
) -> JSONResponse:
    """
    Create a standard error response.

    Args:
        errors: List of error details
        message: Error summary message
        status_code: HTTP status code (default 400)
        **kwargs: Additional response fields
    """
    error_details = [
        ErrorDetail(**error) if isinstance(error, dict) else error
        for error in errors
    ]

    response = ErrorResponse(
        success=False,
        errors=error_details,
        message=message,
        status=ResponseStatus.ERROR,
        **kwargs
    )
    return JSONResponse(
        content=response.model_dump(mode="json", exclude_none=True),
        status_code=status_code
    )
