from __future__ import annotations

from collections.abc import Sequence

import httpx

from alpha_vantage_client.config import AlphaVantageClientConfig

PRIMARY_URL = "https://primary.test"
FALLBACK_URL = "https://fallback.test"
API_KEY = "secret-key"

Step = httpx.Response | Exception


class SequencedHandler:
    """``httpx.MockTransport`` handler replaying one step per request."""

    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.requests: list[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    async def handle_async(self, request: httpx.Request) -> httpx.Response:
        return self(request)


def build_config(**overrides: object) -> AlphaVantageClientConfig:
    values: dict[str, object] = {"api_key": API_KEY, "base_url": PRIMARY_URL}
    values.update(overrides)
    cfg = AlphaVantageClientConfig(**values)
    cfg.validate()
    return cfg


def sync_http_client(handler: SequencedHandler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def async_http_client(handler: SequencedHandler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler.handle_async))


def csv_response(body: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=body.encode("utf-8"),
        headers={"content-type": "application/x-download"},
    )


def json_response(payload: object, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json=payload)


def connect_error(message: str = "connection refused") -> httpx.ConnectError:
    return httpx.ConnectError(message)
