from __future__ import annotations

import threading
import time

import pytest

from alpha_vantage_client.core.cancellation import CancelToken
from alpha_vantage_client.core.errors import AlphaVantageCancelledError
from alpha_vantage_client.core.pacing import (
    RequestsPerMinute,
    TokenBucket,
    TokenBucketPacer,
    parse_requests_per_minute,
)
from tests.shared.clock import FakeClock


def test_first_call_is_not_delayed():
    clock = FakeClock()
    pacer = TokenBucketPacer(60, clock=clock, sleeper=clock.sleep)
    pacer.wait()
    assert clock.sleeps == []


def test_pacer_spreads_calls_over_the_minute():
    clock = FakeClock()
    pacer = TokenBucketPacer(60, clock=clock, sleeper=clock.sleep)
    for _ in range(120):
        pacer.wait()
    assert clock.slept == pytest.approx(119.0)
    assert clock.slept >= 60.0


def test_burst_allows_immediate_calls_up_to_capacity():
    clock = FakeClock()
    pacer = TokenBucketPacer(60, burst=3, clock=clock, sleeper=clock.sleep)
    for _ in range(3):
        pacer.wait()
    assert clock.sleeps == []
    pacer.wait()
    assert clock.sleeps == [pytest.approx(1.0)]


def test_idle_time_refills_the_bucket():
    clock = FakeClock()
    pacer = TokenBucketPacer(75, clock=clock, sleeper=clock.sleep)
    pacer.wait()
    clock.now += 10.0
    pacer.wait()
    assert clock.sleeps == []


def test_disabled_pacer_never_sleeps():
    clock = FakeClock()
    for rate in (None, 0):
        pacer = TokenBucketPacer(rate, clock=clock, sleeper=clock.sleep)
        assert not pacer.enabled
        for _ in range(10):
            pacer.wait()
    assert clock.sleeps == []


def test_bucket_reports_seconds_until_next_token():
    clock = FakeClock()
    bucket = TokenBucket(120, clock=clock)
    assert bucket.try_acquire() == 0.0
    assert bucket.try_acquire() == pytest.approx(0.5)
    clock.now = 0.25
    assert bucket.try_acquire() == pytest.approx(0.25)
    assert bucket.tokens == pytest.approx(0.5)


@pytest.mark.parametrize(("rate", "burst"), [(0, 1), (-1, 1), (60, 0)])
def test_bucket_rejects_invalid_settings(rate, burst):
    with pytest.raises(ValueError):
        TokenBucket(rate, burst=burst)


def test_cancelled_token_stops_waiting_before_a_token_is_taken():
    clock = FakeClock()
    pacer = TokenBucketPacer(60, clock=clock, sleeper=clock.sleep)
    token = CancelToken()
    token.cancel()
    with pytest.raises(AlphaVantageCancelledError):
        pacer.wait(token)
    pacer.wait()
    assert clock.sleeps == []


def test_cancellation_interrupts_a_long_wait():
    pacer = TokenBucketPacer(1)
    pacer.wait()
    with pytest.raises(AlphaVantageCancelledError):
        pacer.wait(CancelToken(timeout=0.05))


@pytest.mark.parametrize(("text", "expected"), [("75", 75), (" 600 ", 600), ("0", 0)])
def test_parse_requests_per_minute(text, expected):
    assert parse_requests_per_minute(text) == expected


@pytest.mark.parametrize("text", ["", "-5", "1.5", "fast"])
def test_parse_requests_per_minute_rejects_garbage(text):
    with pytest.raises(ValueError, match="non-negative integer"):
        parse_requests_per_minute(text)


def test_premium_plan_rates():
    assert [int(plan) for plan in RequestsPerMinute] == [75, 150, 300, 600, 1200]


def test_concurrent_threads_share_the_rate():
    pacer = TokenBucketPacer(RequestsPerMinute.PLAN_1200)
    grants: list[float] = []
    lock = threading.Lock()

    def worker():
        for _ in range(5):
            pacer.wait()
            with lock:
                grants.append(time.monotonic())

    threads = [threading.Thread(target=worker) for _ in range(4)]
    started = time.monotonic()
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert len(grants) == 20
    # 1200/min is one grant every 50ms after the first.
    assert max(grants) - started >= 19 * 0.05 * 0.9
