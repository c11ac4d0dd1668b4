"""
CQRS exception classes.

Errors raised by the mediator, request handlers and the data store.
Handlers raise them, the mediator lets them through untouched, and the
HTTP layer decides how they look to the client.
"""

from typing import Optional, Dict, Any


class CQRSError(Exception):
    """Base exception for all command/query dispatch errors"""

    default_error_code = "CQRS_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}

    def __str__(self):
        return self.message


class DuplicateRegistrationError(CQRSError):
    """A handler is already bound to the request type"""

    default_error_code = "DUPLICATE_REGISTRATION"

    def __init__(self, request_type: type, existing_handler: Any = None):
        super().__init__(
            f"Handler already registered for request type: {request_type.__name__}",
            details={
                "request_type": request_type.__name__,
                "existing_handler": type(existing_handler).__name__ if existing_handler else None
            }
        )
        self.request_type = request_type


class RegistryFrozenError(CQRSError):
    """Registration attempted after the registry was frozen"""

    default_error_code = "REGISTRY_FROZEN"

    def __init__(self, request_type: type):
        super().__init__(
            f"Handler registry is frozen; cannot register {request_type.__name__}",
            details={"request_type": request_type.__name__}
        )
        self.request_type = request_type


class HandlerNotFoundError(CQRSError):
    """No handler is bound to the dispatched request type"""

    default_error_code = "HANDLER_NOT_FOUND"

    def __init__(self, request_type: type):
        super().__init__(
            f"No handler registered for request type: {request_type.__name__}",
            details={"request_type": request_type.__name__}
        )
        self.request_type = request_type


class ValidationError(CQRSError):
    """Request payload is malformed"""

    default_error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Request validation failed",
        field_name: Optional[str] = None,
        value: Any = None
    ):
        details = {}
        if field_name:
            details["field"] = field_name
            details["value"] = value
        super().__init__(message, details=details)
        self.field_name = field_name


class StoreUnavailableError(CQRSError):
    """Backing store cannot serve the request"""

    default_error_code = "STORE_UNAVAILABLE"

    def __init__(self, message: str = "Data store is unavailable", store_name: Optional[str] = None):
        super().__init__(message, details={"store": store_name} if store_name else None)
        self.store_name = store_name


class OperationCancelledError(CQRSError):
    """Dispatch aborted by its cancellation token"""

    default_error_code = "OPERATION_CANCELLED"

    def __init__(self, message: str = "Operation was cancelled", deadline_exceeded: bool = False):
        super().__init__(message, details={"deadline_exceeded": deadline_exceeded})
        self.deadline_exceeded = deadline_exceeded
