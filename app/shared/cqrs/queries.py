"""
Query pattern implementation for CQRS.

Queries represent read operations that don't change system state.
"""

from abc import abstractmethod
from typing import TypeVar, Optional

from .cancellation import CancellationToken
from .requests import Request, RequestHandler, TResult

TQuery = TypeVar('TQuery', bound='Query')


class Query(Request):
    """
    Base query class.

    Queries represent read operations that don't change system state.
    They should be immutable and contain all necessary parameters.
    """


class QueryHandler(RequestHandler[TQuery, TResult]):
    """
    Abstract base class for query handlers.

    Each query should have exactly one handler that processes it.
    """

    @abstractmethod
    async def handle(
        self,
        query: TQuery,
        cancellation: Optional[CancellationToken] = None
    ) -> TResult:
        """
        Handle the query and return result.

        Args:
            query: The query to handle
            cancellation: Token to observe at suspension points

        Returns:
            Query execution result
        """
        pass
