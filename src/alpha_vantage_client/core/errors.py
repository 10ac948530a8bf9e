"""Error types and in-band error classification."""

from __future__ import annotations

from collections.abc import Mapping

SERVICE_ERROR_KEYS = ("Error Message", "Note", "Information")
_RATE_LIMIT_MARKERS = ("call frequency", "rate limit")


class AlphaVantageError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.cause = cause


class AlphaVantageValidationError(AlphaVantageError):
    """A query or configuration was rejected before any request was sent."""

    def __init__(self, message: str, *, parameter: str | None = None) -> None:
        super().__init__(message, cause="validation")
        self.parameter = parameter


class AlphaVantageMissingParameterError(AlphaVantageValidationError):
    """A required parameter was not supplied to a by-name call."""


class AlphaVantageUnknownFunctionError(AlphaVantageError):
    """The requested function is not part of the catalogue."""

    def __init__(self, function: str) -> None:
        super().__init__(f"unknown function: {function}", cause="unknown_function")
        self.function = function


class AlphaVantageTransportError(AlphaVantageError):
    """Network/transport-level failure."""


class AlphaVantageHTTPStatusError(AlphaVantageTransportError):
    """The service answered with a non-2xx HTTP status."""

    def __init__(self, message: str, *, http_status: int, body_excerpt: str = "") -> None:
        super().__init__(message, http_status=http_status, cause="http_status")
        self.body_excerpt = body_excerpt


class AlphaVantageServiceError(AlphaVantageError):
    """The service reported an error inside a successful response body."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        http_status: int | None = None,
    ) -> None:
        super().__init__(message, http_status=http_status, cause="service")
        self.key = key


class AlphaVantageRateLimitError(AlphaVantageServiceError):
    """The service refused the call because the plan's call frequency was exceeded."""


class AlphaVantageDecodeError(AlphaVantageError):
    """A CSV response could not be mapped onto the record type."""

    def __init__(
        self,
        message: str,
        *,
        row: int | None = None,
        column: int | None = None,
        column_name: str | None = None,
    ) -> None:
        super().__init__(message, cause="decode")
        self.row = row
        self.column = column
        self.column_name = column_name


class AlphaVantageCancelledError(AlphaVantageError):
    """The caller's cancel token fired before the operation completed."""

    def __init__(self, message: str = "operation cancelled") -> None:
        super().__init__(message, cause="cancelled")


class AlphaVantageClientClosedError(AlphaVantageError):
    """Raised when client is used after close."""


def classify_service_payload(
    payload: object,
    *,
    http_status: int | None = None,
) -> AlphaVantageServiceError | None:
    """Map the JSON error envelope to an exception, or ``None`` for ordinary data."""

    if not isinstance(payload, Mapping):
        return None
    for key in SERVICE_ERROR_KEYS:
        if key not in payload:
            continue
        message = str(payload[key])
        if key != "Error Message" and _mentions_rate_limit(message):
            return AlphaVantageRateLimitError(message, key=key, http_status=http_status)
        return AlphaVantageServiceError(message, key=key, http_status=http_status)
    return None


def _mentions_rate_limit(message: str) -> bool:
    lowered = message.lower()
    return any(marker in lowered for marker in _RATE_LIMIT_MARKERS)


__all__ = [
    "SERVICE_ERROR_KEYS",
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
    "classify_service_payload",
]
