"""
Command pattern implementation for CQRS.

Commands represent write operations that change system state.
"""

from abc import abstractmethod
from typing import TypeVar, Optional

from .cancellation import CancellationToken
from .requests import Request, RequestHandler

TCommand = TypeVar('TCommand', bound='Command')


class Command(Request):
    """
    Base command class.

    Commands represent operations that change system state.
    They are immutable and carry all data the mutation needs.
    Dispatching a command yields no value; success is the absence of an error.
    """


class CommandHandler(RequestHandler[TCommand, None]):
    """
    Abstract base class for command handlers.

    Each command should have exactly one handler that processes it.
    """

    @abstractmethod
    async def handle(
        self,
        command: TCommand,
        cancellation: Optional[CancellationToken] = None
    ) -> None:
        """
        Apply the command's effect.

        Args:
            command: The command to handle
            cancellation: Token to observe at suspension points

        Raises:
            Any business logic or validation exceptions
        """
        pass
