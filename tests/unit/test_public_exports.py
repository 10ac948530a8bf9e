from __future__ import annotations

import alpha_vantage_client
import alpha_vantage_client.functions as functions


def test_package_exports_clients_models_and_errors():
    expected = {
        "AlphaVantageClient",
        "AsyncAlphaVantageClient",
        "AlphaVantageClientConfig",
        "CancelToken",
        "RequestsPerMinute",
        "Quote",
        "CompanyOverview",
        "ETFProfile",
        "AlphaVantageError",
        "AlphaVantageRateLimitError",
    }
    assert expected.issubset(set(alpha_vantage_client.__all__))
    for name in alpha_vantage_client.__all__:
        assert hasattr(alpha_vantage_client, name)


def test_transports_stay_internal():
    assert "SyncTransport" not in alpha_vantage_client.__all__
    assert not hasattr(alpha_vantage_client, "SyncTransport")


def test_functions_package_exports_every_query_and_row():
    exported = set(functions.__all__)
    assert {"QUERY_TYPES", "ROW_TYPES"} <= exported
    for query_cls in functions.QUERY_TYPES.values():
        assert query_cls.__name__ in exported
    for row_cls in functions.ROW_TYPES.values():
        assert row_cls.__name__ in exported
