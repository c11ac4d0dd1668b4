"""
Shared exceptions for the CQRS products API.

Defines the dispatch error taxonomy and its HTTP handlers.
"""

from .cqrs_exceptions import *
from .handlers import (
    cqrs_exception_handler,
    validation_exception_handler,
    general_exception_handler,
    register_exception_handlers
)

__all__ = [
    # Dispatch Exceptions
    'CQRSError',
    'DuplicateRegistrationError',
    'RegistryFrozenError',
    'HandlerNotFoundError',
    'ValidationError',
    'StoreUnavailableError',
    'OperationCancelledError',

    # Exception Handlers
    'cqrs_exception_handler',
    'validation_exception_handler',
    'general_exception_handler',
    'register_exception_handlers'
]
