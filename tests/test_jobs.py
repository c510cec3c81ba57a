"""Tests for the periodic hotel data refresh."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from booking_assistant.jobs import refresh_periodically
from booking_assistant.schemas.hotel import Provenance


async def test_refresh_runs_until_cancelled():
    inventory = MagicMock()
    inventory.refresh = AsyncMock(return_value=Provenance.live)

    task = asyncio.create_task(refresh_periodically(inventory, 0.01))
    await asyncio.sleep(0.05)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert inventory.refresh.await_count >= 2


async def test_refresh_failure_does_not_stop_loop():
    inventory = MagicMock()
    inventory.refresh = AsyncMock(side_effect=[RuntimeError("boom"), Provenance.fallback, Provenance.live])

    task = asyncio.create_task(refresh_periodically(inventory, 0.01))
    while inventory.refresh.await_count < 2:
        await asyncio.sleep(0.01)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
