from __future__ import annotations

import io
from pathlib import Path

import httpx
import pytest

from alpha_vantage_client import AlphaVantageClient
from alpha_vantage_client.cli import build_config, installed_version, main, render_help
from alpha_vantage_client.config import AlphaVantageClientConfig
from alpha_vantage_client.core.streams import BodyStream
from tests.shared.client_fakes import RecordingTransport
from tests.shared.payloads import GLOBAL_QUOTE_CSV


class FactoryRecorder:
    def __init__(self, *bodies: bytes):
        self.transport = RecordingTransport(*bodies)
        self.configs: list[AlphaVantageClientConfig] = []

    def __call__(self, config: AlphaVantageClientConfig) -> AlphaVantageClient:
        self.configs.append(config)
        return AlphaVantageClient(config=config, transport=self.transport)


class DroppedConnectionTransport(RecordingTransport):
    """Serves a CSV head, then fails while the body is still streaming."""

    def send(self, query, *, cancel=None) -> BodyStream:
        self.queries.append(query)

        def chunks():
            yield b"timestamp,close\r\n" + b"2025-06-20,1.0\r\n" * 400
            raise httpx.ReadError("connection reset")

        return BodyStream(chunks())


class DroppedConnectionFactory(FactoryRecorder):
    def __init__(self):
        super().__init__()
        self.transport = DroppedConnectionTransport()

def _run(argv: list[str], factory: FactoryRecorder | None = None) -> tuple[int, bytes, str]:
    stdout = io.BytesIO()
    stderr = io.StringIO()
    code = main(argv, stdout=stdout, stderr=stderr, client_factory=factory or FactoryRecorder())
    return code, stdout.getvalue(), stderr.getvalue()


def test_function_call_writes_body_to_stdout():
    factory = FactoryRecorder(GLOBAL_QUOTE_CSV.encode())
    code, out, err = _run(
        ["--apikey", "cli-key", "GLOBAL_QUOTE", "--symbol", "IBM", "--datatype", "csv"],
        factory,
    )
    assert (code, err) == (0, "")
    assert out == GLOBAL_QUOTE_CSV.encode()
    assert factory.configs[0].api_key == "cli-key"
    (query,) = factory.transport.queries
    assert query.values() == {
        "function": ["GLOBAL_QUOTE"],
        "symbol": ["IBM"],
        "datatype": ["csv"],
    }
    assert factory.transport.closed


def test_output_flag_writes_file(tmp_path: Path):
    target = tmp_path / "quote.csv"
    factory = FactoryRecorder(GLOBAL_QUOTE_CSV.encode())
    code, out, _ = _run(["--output", str(target), "GLOBAL_QUOTE", "--symbol", "IBM"], factory)
    assert code == 0
    assert out == b""
    assert target.read_bytes() == GLOBAL_QUOTE_CSV.encode()


def test_missing_required_flag_fails_before_any_request():
    factory = FactoryRecorder()
    code, _, err = _run(["GLOBAL_QUOTE"], factory)
    assert code == 1
    assert err == 'av: required flag(s) "--symbol" not set\n'
    assert factory.configs == []


def test_unknown_flag_is_rejected():
    code, _, err = _run(["GLOBAL_QUOTE", "--symbol", "IBM", "--colour", "red"])
    assert code == 1
    assert "unrecognized arguments: --colour red" in err


def test_unknown_function_is_rejected():
    code, _, err = _run(["NOT_A_FUNCTION"])
    assert code == 1
    assert err == "av: unknown function: NOT_A_FUNCTION\n"


def test_service_error_is_reported():
    factory = FactoryRecorder(b'{"Error Message": "Invalid API call."}')
    code, out, err = _run(["GLOBAL_QUOTE", "--symbol", "IBM"], factory)
    assert code == 1
    assert out == b""
    assert err == "av: Invalid API call.\n"


def test_missing_command_prints_help_to_stderr():
    code, out, err = _run([])
    assert code == 1
    assert out == b""
    assert "Alpha Vantage CLI" in err
    assert err.endswith("av: missing command\n")


def test_help_lists_functions():
    code, out, _ = _run(["help"])
    text = out.decode("utf-8")
    assert code == 0
    assert "Commands:" in text
    assert "Functions:" in text
    assert "GLOBAL_QUOTE" in text
    assert "TIME_SERIES_DAILY_ADJUSTED" in text


def test_help_for_one_function_lists_its_flags():
    code, out, _ = _run(["help", "SMA"])
    text = out.decode("utf-8")
    assert code == 0
    for flag in ("--symbol", "--interval", "--time_period", "--series_type", "--month"):
        assert flag in text


def test_help_for_unknown_function():
    code, _, err = _run(["help", "NOPE"])
    assert code == 1
    assert err == "av: unknown function: NOPE\n"


def test_version_prints_installed_version():
    code, out, _ = _run(["version"])
    assert code == 0
    assert out == f"{installed_version()}\n".encode()


def test_render_help_is_stable():
    assert render_help() == render_help()
    assert render_help("GLOBAL_QUOTE").startswith("usage: av GLOBAL_QUOTE")


def test_build_config_prefers_flags_over_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ALPHA_VANTAGE_TOKEN", "env-key")
    monkeypatch.setenv("ALPHA_VANTAGE_REQUESTS_PER_MINUTE", "75")
    assert build_config(api_key=None, requests_per_minute=None).api_key == "env-key"
    config = build_config(api_key="flag-key", requests_per_minute="150")
    assert config.api_key == "flag-key"
    assert config.pacing.requests_per_minute == 150


def test_invalid_requests_per_minute():
    code, _, err = _run(["--requests-per-minute", "fast", "GLOBAL_QUOTE", "--symbol", "IBM"])
    assert code == 1
    assert "non-negative integer" in err


def test_service_error_leaves_no_output_file(tmp_path: Path):
    target = tmp_path / "quote.csv"
    factory = FactoryRecorder(b'{"Error Message": "Invalid API call."}')
    code, _, err = _run(["--output", str(target), "GLOBAL_QUOTE", "--symbol", "IBM"], factory)
    assert code == 1
    assert err == "av: Invalid API call.\n"
    assert not target.exists()


def test_interrupted_body_removes_partial_output_file(tmp_path: Path):
    target = tmp_path / "daily.csv"
    factory = DroppedConnectionFactory()
    code, _, err = _run(["--output", str(target), "TIME_SERIES_DAILY", "--symbol", "IBM"], factory)
    assert code == 1
    assert err.startswith("av: failed to read response body")
    assert not target.exists()
    assert factory.transport.closed
