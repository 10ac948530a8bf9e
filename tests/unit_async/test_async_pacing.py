from __future__ import annotations

import asyncio

import pytest

from alpha_vantage_client.core.async_pacing import AsyncTokenBucketPacer
from tests.shared.clock import FakeClock


@pytest.mark.asyncio
async def test_async_pacer_spreads_calls():
    clock = FakeClock()
    pacer = AsyncTokenBucketPacer(60, clock=clock, sleeper=clock.async_sleep)
    for _ in range(120):
        await pacer.wait()
    assert clock.slept == pytest.approx(119.0)


@pytest.mark.asyncio
async def test_async_pacer_serves_concurrent_waiters():
    clock = FakeClock()
    pacer = AsyncTokenBucketPacer(120, burst=2, clock=clock, sleeper=clock.async_sleep)
    await asyncio.gather(*(pacer.wait() for _ in range(6)))
    assert clock.slept == pytest.approx(2.0)


@pytest.mark.asyncio
async def test_disabled_async_pacer_returns_immediately():
    clock = FakeClock()
    pacer = AsyncTokenBucketPacer(None, clock=clock, sleeper=clock.async_sleep)
    assert not pacer.enabled
    await pacer.wait()
    assert clock.sleeps == []


@pytest.mark.asyncio
async def test_task_cancellation_propagates_while_waiting():
    pacer = AsyncTokenBucketPacer(1)
    await pacer.wait()
    task = asyncio.create_task(pacer.wait())
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
