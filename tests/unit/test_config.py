from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from alpha_vantage_client.config import (
    DEFAULT_BASE_URL,
    AlphaVantageClientConfig,
    PacingConfig,
    TransportConfig,
)


def test_config_validate_rejects_empty_base_url():
    cfg = AlphaVantageClientConfig(base_url="")
    with pytest.raises(ValueError):
        cfg.validate()


def test_config_validate_rejects_non_http_fallback():
    cfg = AlphaVantageClientConfig(fallback_base_url="ftp://mirror.example")
    with pytest.raises(ValueError, match="fallback_base_url"):
        cfg.validate()


def test_config_is_immutable():
    cfg = AlphaVantageClientConfig()
    with pytest.raises(FrozenInstanceError):
        cfg.pacing = PacingConfig(requests_per_minute=75)


def test_config_defaults():
    cfg = AlphaVantageClientConfig()
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.fallback_base_url is None
    assert cfg.pacing.requests_per_minute is None
    assert cfg.pacing.burst == 1
    cfg.validate()


def test_config_repr_hides_api_key():
    cfg = AlphaVantageClientConfig(api_key="very-secret")
    assert "very-secret" not in repr(cfg)


@pytest.mark.parametrize(
    ("section", "field", "value"),
    [
        ("pacing", "requests_per_minute", -1),
        ("pacing", "burst", 0),
        ("transport", "timeout_connect_seconds", 0.0),
        ("transport", "timeout_read_seconds", 0.0),
        ("transport", "timeout_write_seconds", 0.0),
        ("transport", "timeout_pool_seconds", 0.0),
    ],
)
def test_config_validate_rejects_invalid_numeric_values(section, field, value):
    kwargs = {field: value}
    cfg = AlphaVantageClientConfig(
        pacing=PacingConfig(**kwargs) if section == "pacing" else PacingConfig(),
        transport=TransportConfig(**kwargs) if section == "transport" else TransportConfig(),
    )
    with pytest.raises(ValueError, match=f"{section}.{field}"):
        cfg.validate()


def test_from_env_reads_all_variables():
    cfg = AlphaVantageClientConfig.from_env(
        {
            "ALPHA_VANTAGE_TOKEN": "env-key",
            "ALPHA_VANTAGE_REQUESTS_PER_MINUTE": "150",
            "ALPHA_VANTAGE_API_URL": "http://127.0.0.1:8080",
            "ALPHA_VANTAGE_FALLBACK_API_URL": "https://mirror.example",
        }
    )
    assert cfg.api_key == "env-key"
    assert cfg.pacing.requests_per_minute == 150
    assert cfg.base_url == "http://127.0.0.1:8080"
    assert cfg.fallback_base_url == "https://mirror.example"


def test_from_env_ignores_empty_values_and_applies_overrides():
    cfg = AlphaVantageClientConfig.from_env(
        {"ALPHA_VANTAGE_TOKEN": "", "ALPHA_VANTAGE_API_URL": ""},
        api_key="explicit",
    )
    assert cfg.api_key == "explicit"
    assert cfg.base_url == DEFAULT_BASE_URL


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv("ALPHA_VANTAGE_TOKEN", "from-process")
    assert AlphaVantageClientConfig.from_env().api_key == "from-process"


def test_from_env_rejects_malformed_rate():
    with pytest.raises(ValueError, match="requests per minute"):
        AlphaVantageClientConfig.from_env({"ALPHA_VANTAGE_REQUESTS_PER_MINUTE": "fast"})
