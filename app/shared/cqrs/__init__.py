"""
CQRS (Command Query Responsibility Segregation) pattern implementation.

Provides clear separation between read (Query) and write (Command) operations
routed through a single in-process mediator.
"""

from .cancellation import CancellationToken
from .requests import Request, RequestHandler
from .commands import Command, CommandHandler
from .queries import Query, QueryHandler
from .mediator import Mediator

__all__ = [
    # Base interfaces
    'Request',
    'Command',
    'Query',
    'RequestHandler',
    'CommandHandler',
    'QueryHandler',

    # Dispatch
    'Mediator',
    'CancellationToken'
]
