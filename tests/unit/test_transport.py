from __future__ import annotations

import logging

import httpx
import pytest

from alpha_vantage_client.core.cancellation import CancelToken
from alpha_vantage_client.core.errors import (
    AlphaVantageCancelledError,
    AlphaVantageHTTPStatusError,
    AlphaVantageTransportError,
)
from alpha_vantage_client.core.pacing import TokenBucketPacer
from alpha_vantage_client.core.transport import SyncTransport
from alpha_vantage_client.core.transport_shared import (
    build_query_string,
    compose_url,
    describe_host,
    format_status_error,
)
from alpha_vantage_client.functions import GlobalQuoteQuery
from tests.shared.clock import FakeClock
from tests.shared.payloads import GLOBAL_QUOTE_CSV
from tests.shared.transport import (
    API_KEY,
    FALLBACK_URL,
    SequencedHandler,
    build_config,
    connect_error,
    csv_response,
    sync_http_client,
)


def _transport(handler: SequencedHandler, **overrides) -> SyncTransport:
    return SyncTransport(build_config(**overrides), client=sync_http_client(handler))


def test_send_streams_body_and_appends_api_key():
    handler = SequencedHandler([csv_response(GLOBAL_QUOTE_CSV)])
    transport = _transport(handler)

    with transport.send(GlobalQuoteQuery("IBM").data_type_csv()) as body:
        assert body.read().decode("utf-8") == GLOBAL_QUOTE_CSV

    (request,) = handler.requests
    assert request.url.path == "/query"
    assert request.url.host == "primary.test"
    assert dict(request.url.params) == {
        "function": "GLOBAL_QUOTE",
        "symbol": "IBM",
        "datatype": "csv",
        "apikey": API_KEY,
    }


def test_query_api_key_takes_precedence():
    handler = SequencedHandler([csv_response(GLOBAL_QUOTE_CSV)])
    transport = _transport(handler)
    transport.send(GlobalQuoteQuery("IBM").api_key("override")).close()
    assert handler.requests[0].url.params.get_list("apikey") == ["override"]


def test_network_error_falls_back_once():
    handler = SequencedHandler([connect_error(), csv_response(GLOBAL_QUOTE_CSV)])
    transport = _transport(handler, fallback_base_url=FALLBACK_URL)
    transport.send(GlobalQuoteQuery("IBM")).close()
    assert [request.url.host for request in handler.requests] == ["primary.test", "fallback.test"]


def test_network_error_without_fallback_raises_transport_error():
    handler = SequencedHandler([connect_error()])
    transport = _transport(handler)
    with pytest.raises(AlphaVantageTransportError) as exc_info:
        transport.send(GlobalQuoteQuery("IBM"))
    assert exc_info.value.cause == "network"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert handler.calls == 1


def test_both_hosts_failing_raises_after_two_attempts():
    handler = SequencedHandler([connect_error(), connect_error()])
    transport = _transport(handler, fallback_base_url=FALLBACK_URL)
    with pytest.raises(AlphaVantageTransportError):
        transport.send(GlobalQuoteQuery("IBM"))
    assert handler.calls == 2


def test_http_status_error_is_not_retried_on_fallback():
    handler = SequencedHandler([httpx.Response(503, content=b"x" * 4000)])
    transport = _transport(handler, fallback_base_url=FALLBACK_URL)
    with pytest.raises(AlphaVantageHTTPStatusError) as exc_info:
        transport.send(GlobalQuoteQuery("IBM"))
    error = exc_info.value
    assert error.http_status == 503
    assert str(error) == "unexpected HTTP status 503"
    assert error.body_excerpt == "x" * 1024
    assert handler.calls == 1


def test_each_send_takes_one_pacer_token():
    clock = FakeClock()
    handler = SequencedHandler([csv_response(GLOBAL_QUOTE_CSV) for _ in range(3)])
    transport = SyncTransport(
        build_config(),
        client=sync_http_client(handler),
        pacer=TokenBucketPacer(60, clock=clock, sleeper=clock.sleep),
    )
    for _ in range(3):
        transport.send(GlobalQuoteQuery("IBM")).close()
    assert clock.slept == pytest.approx(2.0)


def test_cancelled_token_prevents_request():
    handler = SequencedHandler([csv_response(GLOBAL_QUOTE_CSV)])
    transport = _transport(handler)
    token = CancelToken()
    token.cancel()
    with pytest.raises(AlphaVantageCancelledError):
        transport.send(GlobalQuoteQuery("IBM"), cancel=token)
    assert handler.calls == 0


def test_closed_transport_rejects_send():
    transport = _transport(SequencedHandler([]))
    transport.close()
    transport.close()
    with pytest.raises(AlphaVantageTransportError, match="already closed"):
        transport.send(GlobalQuoteQuery("IBM"))


def test_injected_client_is_not_closed_by_transport():
    http = sync_http_client(SequencedHandler([]))
    SyncTransport(build_config(), client=http).close()
    assert not http.is_closed


def test_api_key_never_reaches_log_records(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="alpha_vantage_client")
    handler = SequencedHandler([connect_error(), httpx.Response(500)])
    transport = _transport(handler, fallback_base_url=FALLBACK_URL)
    with pytest.raises(AlphaVantageHTTPStatusError):
        transport.send(GlobalQuoteQuery("IBM"))
    messages = [r.getMessage() for r in caplog.records if r.name == "alpha_vantage_client"]
    assert messages
    assert all(API_KEY not in message for message in messages)
    assert any("trying fallback" in message for message in messages)


def test_query_string_helpers():
    query = GlobalQuoteQuery("IBM")
    assert build_query_string(query, "a b&c") == "function=GLOBAL_QUOTE&symbol=IBM&apikey=a%20b%26c"
    assert build_query_string(query, None) == "function=GLOBAL_QUOTE&symbol=IBM"
    assert compose_url("https://x.test/", "a=1") == "https://x.test/query?a=1"
    assert describe_host("https://x.test:8443/base") == "x.test:8443"
    assert format_status_error(429, "é".encode("utf-8") * 600) == (
        "unexpected HTTP status 429",
        ("é" * 512),
    )
