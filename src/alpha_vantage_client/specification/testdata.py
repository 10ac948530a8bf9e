"""Recorded example responses used by the replay tests.

The index is a JSON list of ``{"ID", "path", "fetched", "url"}`` objects kept
sorted by ID. ``path`` is relative to the directory holding the index.
"""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from pathlib import Path
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx

from ..core.errors import AlphaVantageHTTPStatusError, AlphaVantageTransportError
from ..query.base import API_KEY_PARAMETER

logger = logging.getLogger("alpha_vantage_client")

MAX_EXAMPLE_AGE = timedelta(days=7)
JSON_INDENT = "  "
_EXTENSIONS = {
    "application/json": ".json",
    "application/x-download": ".csv",
    "text/csv": ".csv",
}


@dataclass(slots=True, frozen=True)
class ExampleIndexEntry:
    id: str
    path: str
    fetched: datetime
    url: str

    @classmethod
    def from_json(cls, raw: Mapping[str, str]) -> "ExampleIndexEntry":
        return cls(
            id=raw["ID"],
            path=raw["path"],
            fetched=datetime.fromisoformat(raw["fetched"]),
            url=raw["url"],
        )

    def to_json(self) -> dict[str, str]:
        return {
            "ID": self.id,
            "path": self.path,
            "fetched": self.fetched.isoformat(),
            "url": self.url,
        }

    @property
    def function(self) -> str:
        return self.id.rsplit("_", 1)[0]

    def is_stale(self, now: datetime, *, max_age: timedelta = MAX_EXAMPLE_AGE) -> bool:
        return self.fetched < now - max_age


def example_id(function: str, url: str) -> str:
    """``<FUNCTION>_<first 8 hex digits of sha256(url)>``."""
    return f"{function}_{hashlib.sha256(url.encode('utf-8')).hexdigest()[:8]}"


def load_example_index(path: Path) -> list[ExampleIndexEntry]:
    if not path.exists():
        return []
    with path.open(encoding="utf-8") as handle:
        return [ExampleIndexEntry.from_json(item) for item in json.load(handle)]


def save_example_index(path: Path, entries: Sequence[ExampleIndexEntry]) -> None:
    ordered = sorted(entries, key=lambda entry: entry.id)
    text = json.dumps([entry.to_json() for entry in ordered], indent=JSON_INDENT)
    path.write_text(text + "\n", encoding="utf-8", newline="\n")


def normalize_parameters(
    params: Mapping[str, str | Sequence[str]],
) -> dict[str, tuple[str, ...]]:
    """Comparable form of request parameters: no API key, comma lists expanded."""
    normalized: dict[str, tuple[str, ...]] = {}
    for key, raw in params.items():
        if key == API_KEY_PARAMETER:
            continue
        values = [raw] if isinstance(raw, str) else list(raw)
        expanded = [part for value in values for part in value.split(",")]
        normalized[key] = tuple(sorted(expanded))
    return normalized


def url_parameters(url: str) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for key, value in parse_qsl(urlsplit(url).query, keep_blank_values=True):
        grouped.setdefault(key, []).append(value)
    return grouped


def find_example(
    entries: Sequence[ExampleIndexEntry],
    params: Mapping[str, str | Sequence[str]],
) -> ExampleIndexEntry | None:
    """Entry recorded for an equivalent request, if any."""
    wanted = normalize_parameters(params)
    for entry in entries:
        if normalize_parameters(url_parameters(entry.url)) == wanted:
            return entry
    return None


def resolve_example_path(index_path: Path, entry: ExampleIndexEntry) -> Path:
    return index_path.parent / Path(entry.path)


def prune_missing(index_path: Path, entries: Sequence[ExampleIndexEntry]) -> list[ExampleIndexEntry]:
    """Drop entries whose recorded body no longer exists."""
    return [entry for entry in entries if resolve_example_path(index_path, entry).is_file()]


def fetch_example(
    url: str,
    *,
    api_key: str,
    target: Path,
    client: httpx.Client | None = None,
) -> Path:
    """Download the CSV form of ``url`` to ``target`` plus the served extension."""
    parts = urlsplit(url)
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    query["datatype"] = "csv"
    query[API_KEY_PARAMETER] = api_key
    request_url = urlunsplit(parts._replace(query=urlencode(sorted(query.items()))))

    owns_client = client is None
    http = client or httpx.Client(timeout=60.0)
    try:
        try:
            response = http.get(request_url)
        except httpx.RequestError as exc:
            raise AlphaVantageTransportError(
                "failed to download example",
                cause="network",
            ) from exc
    finally:
        if owns_client:
            http.close()

    if response.status_code != 200:
        raise AlphaVantageHTTPStatusError(
            f"unexpected HTTP status {response.status_code}",
            http_status=response.status_code,
            body_excerpt=response.text[:1024],
        )
    content_type = response.headers.get("content-type", "").split(";", 1)[0].strip()
    extension = _EXTENSIONS.get(content_type)
    if extension is None:
        raise AlphaVantageTransportError(f"unexpected content type: {content_type or '<none>'}")

    path = target.with_suffix(extension)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(response.content)
    return path


def refresh_example(
    index_path: Path,
    entries: Sequence[ExampleIndexEntry],
    *,
    function: str,
    group: str,
    url: str,
    api_key: str,
    now: datetime | None = None,
    client: httpx.Client | None = None,
) -> tuple[list[ExampleIndexEntry], Path]:
    """Return the updated index and the body path for ``url``.

    Missing or stale entries are downloaded again; fresh ones are reused.
    """
    current = now or datetime.now(timezone.utc)
    identifier = example_id(function, url)
    updated = list(entries)
    position = next((i for i, entry in enumerate(updated) if entry.id == identifier), None)
    if position is not None and not updated[position].is_stale(current):
        return updated, resolve_example_path(index_path, updated[position])

    reason = "missing" if position is None else "stale"
    logger.info("fetching example id=%s reason=%s", identifier, reason)
    body = fetch_example(
        url,
        api_key=api_key,
        target=index_path.parent / group / identifier,
        client=client,
    )
    relative = body.relative_to(index_path.parent).as_posix()
    if position is None:
        updated.append(ExampleIndexEntry(id=identifier, path=relative, fetched=current, url=url))
    else:
        updated[position] = replace(updated[position], path=relative, fetched=current, url=url)
    return updated, body


__all__ = [
    "MAX_EXAMPLE_AGE",
    "ExampleIndexEntry",
    "example_id",
    "load_example_index",
    "save_example_index",
    "normalize_parameters",
    "url_parameters",
    "find_example",
    "resolve_example_path",
    "prune_missing",
    "fetch_example",
    "refresh_example",
]
