"""
In-memory product data store.

Holds the single authoritative product sequence for the process. The store
is constructed once at startup and shared by reference with every handler.
"""

import asyncio
import logging
from typing import Iterable, List, Optional

from .models import Product, SAMPLE_PRODUCTS
from ...shared.cqrs.cancellation import CancellationToken

logger = logging.getLogger(__name__)


class ProductDataStore:
    """
    Append-only product sequence.

    Writers are serialised by an ``asyncio.Lock``; readers copy the list
    without taking the lock, which is safe because the append itself never
    suspends.
    """

    def __init__(self, seed: Optional[Iterable[Product]] = None):
        self._products: List[Product] = list(seed or ())
        self._lock = asyncio.Lock()

    @classmethod
    def with_sample_products(cls) -> 'ProductDataStore':
        return cls(seed=SAMPLE_PRODUCTS)

    async def add(self, product: Product, cancellation: Optional[CancellationToken] = None) -> None:
        """
        Append a product.

        Raises:
            OperationCancelledError: If the token fires before the append;
                nothing is appended in that case
        """
        token = cancellation or CancellationToken.none()

        await token.wait(self._lock.acquire())
        try:
            token.raise_if_cancelled()
            self._products.append(product)
        finally:
            self._lock.release()

        logger.debug(f"Product added: id={product.id} (total: {len(self._products)})")

    async def list_all(self, cancellation: Optional[CancellationToken] = None) -> List[Product]:
        """Return a point-in-time copy of all products in insertion order."""
        if cancellation is not None:
            cancellation.raise_if_cancelled()
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)
