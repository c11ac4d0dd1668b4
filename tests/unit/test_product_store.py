"""
Unit tests for the in-memory product store.
"""

import asyncio

import pytest

from app.domains.products.models import Product
from app.domains.products.store import ProductDataStore
from app.shared.cqrs import CancellationToken
from app.shared.exceptions import OperationCancelledError


class TestProductDataStore:
    """Test add/list_all semantics."""

    @pytest.mark.asyncio
    async def test_empty_store(self, empty_store):
        assert await empty_store.list_all() == []
        assert len(empty_store) == 0

    @pytest.mark.asyncio
    async def test_sample_seed(self, store, sample_products):
        assert await store.list_all() == sample_products

    @pytest.mark.asyncio
    async def test_seed_is_copied(self):
        seed = [Product(id=1, name="a")]
        store = ProductDataStore(seed=seed)
        seed.append(Product(id=2, name="b"))

        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_add_preserves_insertion_order(self, empty_store):
        for product_id in (3, 1, 2):
            await empty_store.add(Product(id=product_id, name=f"p{product_id}"))

        assert [p.id for p in await empty_store.list_all()] == [3, 1, 2]

    @pytest.mark.asyncio
    async def test_duplicates_allowed(self, empty_store):
        product = Product(id=1, name="dup")
        await empty_store.add(product)
        await empty_store.add(product)

        assert await empty_store.list_all() == [product, product]

    @pytest.mark.asyncio
    async def test_no_validation(self, empty_store):
        await empty_store.add(Product(id=-5, name=""))

        assert len(empty_store) == 1

    @pytest.mark.asyncio
    async def test_list_all_returns_snapshot(self, store):
        snapshot = await store.list_all()
        snapshot.clear()

        assert len(await store.list_all()) == 3

    @pytest.mark.asyncio
    async def test_snapshot_does_not_see_later_adds(self, store):
        snapshot = await store.list_all()
        await store.add(Product(id=4, name="Widget"))

        assert len(snapshot) == 3
        assert len(store) == 4

    @pytest.mark.asyncio
    async def test_concurrent_adds_are_not_lost(self, store):
        products = [Product(id=100 + i, name=f"concurrent {i}") for i in range(50)]

        await asyncio.gather(*(store.add(p) for p in products))

        stored = await store.list_all()
        assert len(stored) == 3 + 50
        assert {p.id for p in stored[3:]} == {p.id for p in products}

    @pytest.mark.asyncio
    async def test_queued_writers_all_land(self, store):
        """Writers blocked on the lock are applied once it is released."""
        products = [Product(id=200 + i, name=f"queued {i}") for i in range(20)]

        await store._lock.acquire()
        tasks = [asyncio.create_task(store.add(p)) for p in products]
        try:
            await asyncio.sleep(0.01)
            assert len(store) == 3
            assert not any(task.done() for task in tasks)
        finally:
            store._lock.release()

        await asyncio.gather(*tasks)

        stored = await store.list_all()
        assert len(stored) == 3 + 20
        assert [p.id for p in stored[3:]] == [p.id for p in products]


class TestStoreCancellation:
    """Test that aborted adds leave the store untouched."""

    @pytest.mark.asyncio
    async def test_cancelled_token_does_not_append(self, store):
        token = CancellationToken()
        token.cancel()

        with pytest.raises(OperationCancelledError):
            await store.add(Product(id=4, name="Widget"), token)

        assert len(store) == 3

    @pytest.mark.asyncio
    async def test_deadline_while_waiting_for_lock(self, store):
        """A writer blocked past its deadline gives up without appending."""
        await store._lock.acquire()
        try:
            with pytest.raises(OperationCancelledError) as exc_info:
                await store.add(Product(id=4, name="Widget"), CancellationToken.with_timeout(0.05))
        finally:
            store._lock.release()

        assert exc_info.value.deadline_exceeded is True
        assert len(store) == 3

        # The lock is usable again after the aborted wait
        await store.add(Product(id=5, name="After"))
        assert len(store) == 4

    @pytest.mark.asyncio
    async def test_list_all_observes_cancellation(self, store):
        token = CancellationToken()
        token.cancel()

        with pytest.raises(OperationCancelledError):
            await store.list_all(token)

    @pytest.mark.asyncio
    async def test_list_all_does_not_wait_for_writer_lock(self, store):
        await store._lock.acquire()
        try:
            products = await asyncio.wait_for(store.list_all(), timeout=1)
        finally:
            store._lock.release()

        assert len(products) == 3
