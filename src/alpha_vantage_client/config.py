"""Client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from .core.pacing import parse_requests_per_minute

DEFAULT_BASE_URL = "https://www.alphavantage.co"

ENV_API_KEY = "ALPHA_VANTAGE_TOKEN"
ENV_REQUESTS_PER_MINUTE = "ALPHA_VANTAGE_REQUESTS_PER_MINUTE"
ENV_BASE_URL = "ALPHA_VANTAGE_API_URL"
ENV_FALLBACK_BASE_URL = "ALPHA_VANTAGE_FALLBACK_API_URL"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 60.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class PacingConfig:
    """Request pacing settings; ``None`` or ``0`` disables pacing."""

    requests_per_minute: int | None = None
    burst: int = 1

    def validate(self) -> None:
        if self.requests_per_minute is not None and self.requests_per_minute < 0:
            raise ValueError("pacing.requests_per_minute must be >= 0")
        if self.burst < 1:
            raise ValueError("pacing.burst must be >= 1")


@dataclass(slots=True, frozen=True)
class AlphaVantageClientConfig:
    """Runtime configuration for the Alpha Vantage client."""

    api_key: str | None = field(default=None, repr=False)
    base_url: str = DEFAULT_BASE_URL
    fallback_base_url: str | None = None
    user_agent: str = "alpha-vantage-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    pacing: PacingConfig = field(default_factory=PacingConfig)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> "AlphaVantageClientConfig":
        """Build a configuration from the ``ALPHA_VANTAGE_*`` variables.

        Keyword ``overrides`` take precedence over the environment.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        if env.get(ENV_API_KEY):
            values["api_key"] = env[ENV_API_KEY]
        if env.get(ENV_BASE_URL):
            values["base_url"] = env[ENV_BASE_URL]
        if env.get(ENV_FALLBACK_BASE_URL):
            values["fallback_base_url"] = env[ENV_FALLBACK_BASE_URL]
        if env.get(ENV_REQUESTS_PER_MINUTE):
            values["pacing"] = PacingConfig(
                requests_per_minute=parse_requests_per_minute(env[ENV_REQUESTS_PER_MINUTE])
            )
        values.update(overrides)
        return cls(**values)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        if self.fallback_base_url is not None and not self.fallback_base_url.startswith(
            ("http://", "https://")
        ):
            raise ValueError("fallback_base_url must be an http(s) URL")
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")
        self.transport.validate()
        self.pacing.validate()


__all__ = [
    "DEFAULT_BASE_URL",
    "ENV_API_KEY",
    "ENV_REQUESTS_PER_MINUTE",
    "ENV_BASE_URL",
    "ENV_FALLBACK_BASE_URL",
    "TransportConfig",
    "PacingConfig",
    "AlphaVantageClientConfig",
]
