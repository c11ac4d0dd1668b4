"""
Product boundary service.

Turns boundary payloads into requests and sends them through the mediator.
It knows request types only, never handlers.
"""

import logging
from typing import List, Optional

from .commands import AddProductCommand
from .models import Product
from .queries import GetProductsQuery
from ...core.request_context import get_request_id
from ...shared.cqrs.cancellation import CancellationToken
from ...shared.cqrs.mediator import Mediator

logger = logging.getLogger(__name__)


class ProductService:
    """Submits product commands and queries on behalf of the HTTP layer"""

    def __init__(self, mediator: Mediator, dispatch_timeout: Optional[float] = None):
        self.mediator = mediator
        self.dispatch_timeout = dispatch_timeout

    def _token(self) -> CancellationToken:
        return CancellationToken.with_timeout(self.dispatch_timeout)

    async def submit_command(self, payload: Product) -> None:
        """
        Add a product.

        Raises:
            HandlerNotFoundError: If no handler is bound to AddProductCommand
            ValidationError: If the handler rejects the payload
            OperationCancelledError: If the dispatch deadline passes
        """
        command = AddProductCommand(product=payload, correlation_id=get_request_id())
        await self.mediator.send(command, self._token())

    async def submit_query(self) -> List[Product]:
        """List all products."""
        query = GetProductsQuery(correlation_id=get_request_id())
        return await self.mediator.ask(query, self._token())
