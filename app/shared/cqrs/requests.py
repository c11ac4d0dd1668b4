"""
Request and handler base types shared by commands and queries.

A request is an immutable value routed by the mediator to the single handler
bound to its concrete type.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import TypeVar, Generic, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field

from .cancellation import CancellationToken

# Type variables
TResult = TypeVar('TResult')
TRequest = TypeVar('TRequest', bound='Request')


class Request(BaseModel, ABC):
    """
    Base request class.

    Carries tracing metadata only; routing is done on the concrete type.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # Request metadata
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    correlation_id: Optional[str] = None

    @classmethod
    def request_name(cls) -> str:
        return cls.__name__


class RequestHandler(ABC, Generic[TRequest, TResult]):
    """
    Abstract base class for request handlers.

    Each request type has exactly one handler instance bound to it.
    """

    @abstractmethod
    async def handle(
        self,
        request: TRequest,
        cancellation: Optional[CancellationToken] = None
    ) -> TResult:
        """
        Handle the request and return its result.

        Args:
            request: The request to handle
            cancellation: Token to observe at suspension points

        Raises:
            Any business logic or validation exceptions; they reach the
            caller unchanged.
        """
        pass
