"""
Unit tests for cancellation tokens.
"""

import asyncio

import pytest

from app.shared.cqrs import CancellationToken
from app.shared.exceptions import OperationCancelledError


class TestCancellationToken:

    def test_none_token_never_cancels(self):
        token = CancellationToken.none()

        assert token.deadline is None
        assert token.remaining() is None
        assert not token.is_cancelled
        token.raise_if_cancelled()

    def test_cancel(self):
        token = CancellationToken()
        token.cancel()

        assert token.is_cancelled
        with pytest.raises(OperationCancelledError) as exc_info:
            token.raise_if_cancelled()
        assert exc_info.value.deadline_exceeded is False

    def test_with_timeout_none(self):
        assert CancellationToken.with_timeout(None).deadline is None

    def test_negative_timeout_rejected(self):
        with pytest.raises(ValueError):
            CancellationToken.with_timeout(-1)

    def test_expired_deadline(self):
        token = CancellationToken.with_timeout(0)

        assert token.deadline_exceeded
        assert token.remaining() == 0.0
        with pytest.raises(OperationCancelledError) as exc_info:
            token.raise_if_cancelled()
        assert exc_info.value.deadline_exceeded is True

    def test_future_deadline(self):
        token = CancellationToken.with_timeout(60)

        assert not token.is_cancelled
        assert 0 < token.remaining() <= 60

    @pytest.mark.asyncio
    async def test_wait_returns_result(self):
        async def answer():
            return 42

        assert await CancellationToken.with_timeout(5).wait(answer()) == 42

    @pytest.mark.asyncio
    async def test_wait_times_out(self):
        token = CancellationToken.with_timeout(0.05)

        with pytest.raises(OperationCancelledError) as exc_info:
            await token.wait(asyncio.sleep(1))
        assert exc_info.value.deadline_exceeded is True

    @pytest.mark.asyncio
    async def test_wait_on_cancelled_token_does_not_start(self):
        started = []

        async def work():
            started.append(True)

        token = CancellationToken()
        token.cancel()

        with pytest.raises(OperationCancelledError):
            await token.wait(work())
        assert started == []
