"""Public package exports for the Alpha Vantage client."""

__version__ = "0.1.0"

from .async_client import AsyncAlphaVantageClient
from .client import AlphaVantageClient
from .config import AlphaVantageClientConfig, PacingConfig, TransportConfig
from .core.cancellation import CancelToken
from .core.errors import (
    AlphaVantageCancelledError,
    AlphaVantageClientClosedError,
    AlphaVantageDecodeError,
    AlphaVantageError,
    AlphaVantageHTTPStatusError,
    AlphaVantageMissingParameterError,
    AlphaVantageRateLimitError,
    AlphaVantageServiceError,
    AlphaVantageTransportError,
    AlphaVantageUnknownFunctionError,
    AlphaVantageValidationError,
)
from .core.pacing import RequestsPerMinute
from .models import CompanyOverview, ETFProfile, Quote, QuoteFunction

__all__ = [
    "__version__",
    "AlphaVantageClient",
    "AsyncAlphaVantageClient",
    "AlphaVantageClientConfig",
    "PacingConfig",
    "TransportConfig",
    "CancelToken",
    "RequestsPerMinute",
    "CompanyOverview",
    "ETFProfile",
    "Quote",
    "QuoteFunction",
    "AlphaVantageError",
    "AlphaVantageValidationError",
    "AlphaVantageMissingParameterError",
    "AlphaVantageUnknownFunctionError",
    "AlphaVantageTransportError",
    "AlphaVantageHTTPStatusError",
    "AlphaVantageServiceError",
    "AlphaVantageRateLimitError",
    "AlphaVantageDecodeError",
    "AlphaVantageCancelledError",
    "AlphaVantageClientClosedError",
]
