"""
Product command and query handlers.

Both handlers receive the shared ``ProductDataStore`` at construction.
"""

import logging
from typing import List, Optional

from .commands import AddProductCommand
from .models import Product
from .queries import GetProductsQuery
from .store import ProductDataStore
from ...shared.cqrs.cancellation import CancellationToken
from ...shared.cqrs.commands import CommandHandler
from ...shared.cqrs.queries import QueryHandler
from ...shared.exceptions.cqrs_exceptions import ValidationError

logger = logging.getLogger(__name__)


class AddProductHandler(CommandHandler[AddProductCommand]):
    """
    Appends the command's product to the store.

    Duplicate commands append duplicate records. Name validation is off
    unless ``validate_names`` is set.
    """

    def __init__(self, store: ProductDataStore, validate_names: bool = False):
        self.store = store
        self.validate_names = validate_names

    async def handle(
        self,
        command: AddProductCommand,
        cancellation: Optional[CancellationToken] = None
    ) -> None:
        product = command.product

        if self.validate_names and not product.name.strip():
            raise ValidationError(
                "Product name must not be blank",
                field_name="name",
                value=product.name
            )

        await self.store.add(product, cancellation)
        logger.info(f"Product added: id={product.id}, name={product.name!r}")


class GetProductsHandler(QueryHandler[GetProductsQuery, List[Product]]):
    """Returns a snapshot of every stored product."""

    def __init__(self, store: ProductDataStore):
        self.store = store

    async def handle(
        self,
        query: GetProductsQuery,
        cancellation: Optional[CancellationToken] = None
    ) -> List[Product]:
        return await self.store.list_all(cancellation)
