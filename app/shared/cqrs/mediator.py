"""
Mediator implementation.

Routes commands and queries to their registered handlers so callers never
reference a handler directly.
"""

import logging
from typing import Dict, Type, Any, Optional, Tuple

from .cancellation import CancellationToken
from .commands import Command, CommandHandler
from .queries import Query, QueryHandler
from .requests import Request, RequestHandler
from ..exceptions.cqrs_exceptions import (
    DuplicateRegistrationError,
    HandlerNotFoundError,
    RegistryFrozenError
)

logger = logging.getLogger(__name__)


class Mediator:
    """
    Single entry point for request dispatch.

    Handlers are registered explicitly during initialization, after which
    ``freeze()`` makes the registry read-only. Lookups never lock: the
    registry is not mutated once dispatching starts.
    """

    def __init__(self, handlers: Optional[Dict[Type[Request], RequestHandler]] = None):
        self._handlers: Dict[Type[Request], RequestHandler] = {}
        self._frozen = False

        for request_type, handler in (handlers or {}).items():
            self.register(request_type, handler)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def register(self, request_type: Type[Request], handler: RequestHandler) -> None:
        """
        Bind a handler to a request type.

        Args:
            request_type: Concrete command or query class
            handler: Handler instance

        Raises:
            RegistryFrozenError: If the registry was already frozen
            DuplicateRegistrationError: If the type already has a handler;
                the existing binding is kept
            TypeError: If the request type and handler kind don't match
        """
        if self._frozen:
            raise RegistryFrozenError(request_type)

        _check_binding(request_type, handler)

        existing = self._handlers.get(request_type)
        if existing is not None:
            raise DuplicateRegistrationError(request_type, existing)

        self._handlers[request_type] = handler
        logger.info(
            f"Registered handler {type(handler).__name__} "
            f"for request: {request_type.__name__}"
        )

    def freeze(self) -> None:
        """Close the registry to further registration."""
        self._frozen = True
        logger.info(f"Handler registry frozen with {len(self._handlers)} bindings")

    def registered_requests(self) -> Tuple[Type[Request], ...]:
        """Get registered request types."""
        return tuple(self._handlers)

    def handler_for(self, request_type: Type[Request]) -> RequestHandler:
        handler = self._handlers.get(request_type)
        if handler is None:
            raise HandlerNotFoundError(request_type)
        return handler

    async def dispatch(
        self,
        request: Request,
        cancellation: Optional[CancellationToken] = None
    ) -> Any:
        """
        Dispatch a request to its registered handler.

        Args:
            request: Command or query instance
            cancellation: Token passed on to the handler

        Returns:
            The handler's result; ``None`` for commands

        Raises:
            HandlerNotFoundError: If no handler is bound to ``type(request)``
            OperationCancelledError: If the token is already cancelled
            Anything the handler raises, unchanged
        """
        request_type = type(request)
        handler = self.handler_for(request_type)

        if cancellation is not None:
            cancellation.raise_if_cancelled()

        logger.debug(
            f"Dispatching {request_type.__name__} "
            f"(ID: {request.request_id}) to {type(handler).__name__}"
        )

        try:
            result = await handler.handle(request, cancellation)
        except Exception as e:
            logger.debug(
                f"Handler failed for {request_type.__name__} "
                f"(ID: {request.request_id}): {type(e).__name__}: {e}"
            )
            raise

        logger.debug(f"Dispatched {request_type.__name__} (ID: {request.request_id})")
        return result

    async def send(
        self,
        command: Command,
        cancellation: Optional[CancellationToken] = None
    ) -> None:
        """Dispatch a command."""
        if not isinstance(command, Command):
            raise TypeError(f"send() expects a Command, got {type(command).__name__}")
        await self.dispatch(command, cancellation)

    async def ask(
        self,
        query: Query,
        cancellation: Optional[CancellationToken] = None
    ) -> Any:
        """Dispatch a query and return its result."""
        if not isinstance(query, Query):
            raise TypeError(f"ask() expects a Query, got {type(query).__name__}")
        return await self.dispatch(query, cancellation)


def _check_binding(request_type: Type[Request], handler: RequestHandler) -> None:
    if not (isinstance(request_type, type) and issubclass(request_type, Request)):
        raise TypeError(f"{request_type!r} is not a Request type")
    if not isinstance(handler, RequestHandler):
        raise TypeError(f"{type(handler).__name__} is not a RequestHandler")
    if issubclass(request_type, Command) and not isinstance(handler, CommandHandler):
        raise TypeError(
            f"Command {request_type.__name__} needs a CommandHandler, "
            f"got {type(handler).__name__}"
        )
    if issubclass(request_type, Query) and not isinstance(handler, QueryHandler):
        raise TypeError(
            f"Query {request_type.__name__} needs a QueryHandler, "
            f"got {type(handler).__name__}"
        )
