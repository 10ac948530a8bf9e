from __future__ import annotations

import pytest

from alpha_vantage_client.core.cancellation import CancelToken
from alpha_vantage_client.core.errors import AlphaVantageCancelledError


def test_token_starts_active():
    token = CancelToken()
    assert not token.cancelled
    token.raise_if_cancelled()


def test_cancel_is_idempotent_and_observable():
    token = CancelToken()
    token.cancel()
    token.cancel()
    assert token.cancelled
    with pytest.raises(AlphaVantageCancelledError, match="operation cancelled"):
        token.raise_if_cancelled()


def test_non_positive_timeout_is_already_cancelled():
    assert CancelToken(timeout=0).cancelled


def test_timeout_cancels_automatically():
    token = CancelToken(timeout=0.01)
    assert token.wait(5.0) is True
    assert token.cancelled


def test_wait_returns_false_when_not_cancelled():
    assert CancelToken().wait(0.01) is False


def test_cancelled_error_carries_cause():
    exc = AlphaVantageCancelledError()
    assert exc.cause == "cancelled"
