from __future__ import annotations

from pathlib import Path

import httpx

from alpha_vantage_client.specification.testdata import (
    find_example,
    load_example_index,
    resolve_example_path,
)

_CONTENT_TYPES = {
    ".csv": "application/x-download",
    ".json": "application/json",
}


class ExampleReplayHandler:
    """Serves recorded example bodies for equivalent requests; 404 otherwise.

    Recordings are always fetched as CSV, so ``datatype`` is ignored when
    matching.
    """

    def __init__(self, index_path: Path):
        self.index_path = index_path
        self.entries = load_example_index(index_path)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        params: dict[str, list[str]] = {}
        for key, value in request.url.params.multi_items():
            if key != "datatype":
                params.setdefault(key, []).append(value)
        entry = find_example(self.entries, params)
        if entry is None:
            return httpx.Response(404, text="no recorded example")
        path = resolve_example_path(self.index_path, entry)
        return httpx.Response(
            200,
            content=path.read_bytes(),
            headers={"content-type": _CONTENT_TYPES[path.suffix]},
        )

    async def handle_async(self, request: httpx.Request) -> httpx.Response:
        return self(request)
