"""
Cancellation tokens for command and query dispatch.

A token is created by the caller, handed to ``Mediator.dispatch`` and passed
on to the handler, which checks it at every suspension point.
"""

import asyncio
import time
from typing import Optional, Awaitable, TypeVar

from ..exceptions.cqrs_exceptions import OperationCancelledError

T = TypeVar('T')


class CancellationToken:
    """
    Cooperative cancellation signal with an optional deadline.

    The deadline is measured on ``time.monotonic()``. A token is considered
    cancelled once ``cancel()`` was called or the deadline has passed.
    """

    def __init__(self, deadline: Optional[float] = None):
        self._deadline = deadline
        self._cancelled = False

    @classmethod
    def none(cls) -> 'CancellationToken':
        """Token that is never cancelled."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: Optional[float]) -> 'CancellationToken':
        """Token that expires ``seconds`` from now. ``None`` means no deadline."""
        if seconds is None:
            return cls()
        if seconds < 0:
            raise ValueError("timeout must not be negative")
        return cls(deadline=time.monotonic() + seconds)

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled or self.deadline_exceeded

    @property
    def deadline_exceeded(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def cancel(self) -> None:
        self._cancelled = True

    def remaining(self) -> Optional[float]:
        """Seconds left until the deadline, or ``None`` without a deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise OperationCancelledError()
        if self.deadline_exceeded:
            raise OperationCancelledError("Operation deadline exceeded", deadline_exceeded=True)

    async def wait(self, awaitable: Awaitable[T]) -> T:
        """
        Await ``awaitable`` bounded by the remaining time.

        Raises:
            OperationCancelledError: If the token is already cancelled or the
                deadline passes while waiting
        """
        try:
            self.raise_if_cancelled()
        except OperationCancelledError:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise
        try:
            return await asyncio.wait_for(awaitable, timeout=self.remaining())
        except asyncio.TimeoutError:
            raise OperationCancelledError(
                "Operation deadline exceeded", deadline_exceeded=True
            ) from None

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self._cancelled}, remaining={self.remaining()})"
