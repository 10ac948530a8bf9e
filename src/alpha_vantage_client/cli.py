"""Command-line entrypoint: ``av [global flags] <FUNCTION|help|version> [--param VALUE ...]``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from contextlib import ExitStack
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import BinaryIO, TextIO

from . import __version__
from .catalogue import describe, function_names
from .client import AlphaVantageClient
from .config import AlphaVantageClientConfig, PacingConfig
from .core.errors import AlphaVantageError, AlphaVantageUnknownFunctionError
from .core.pacing import parse_requests_per_minute
from .dispatch import build_query, copy_body

DISTRIBUTION_NAME = "alpha-vantage-client"
PROGRAM_NAME = "av"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

ClientFactory = Callable[[AlphaVantageClientConfig], AlphaVantageClient]

logger = logging.getLogger("alpha_vantage_client")


class CommandLineError(Exception):
    """Invalid command-line usage."""


class _CommandLineParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise CommandLineError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _CommandLineParser(
        prog=PROGRAM_NAME,
        description="Alpha Vantage CLI",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--output", help="Write the response body to this file (default stdout)")
    parser.add_argument("--apikey", help="API key (default $ALPHA_VANTAGE_TOKEN)")
    parser.add_argument(
        "--requests-per-minute",
        help="Pace requests to this many per minute (default $ALPHA_VANTAGE_REQUESTS_PER_MINUTE)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("command", nargs="?", help="Function name, help or version")
    parser.add_argument("arguments", nargs=argparse.REMAINDER)
    return parser


def _build_function_parser(function: str) -> argparse.ArgumentParser:
    description = describe(function)
    parser = _CommandLineParser(
        prog=f"{PROGRAM_NAME} {function}",
        description=description.summary,
        add_help=False,
        allow_abbrev=False,
    )
    for name in description.required:
        parser.add_argument(f"--{name}", dest=name, metavar="VALUE", help="required")
    for name in description.optional:
        parser.add_argument(f"--{name}", dest=name, metavar="VALUE")
    return parser


def render_help(function: str | None = None) -> str:
    if function is not None:
        return _build_function_parser(function).format_help()
    lines = [_build_parser().format_help().rstrip(), "", "Commands:"]
    lines.append("  help [FUNCTION]\tPrint this message or the flags of FUNCTION")
    lines.append("  version\t\tPrint the installed version")
    lines.append("")
    lines.append("Functions:")
    for name in function_names():
        summary = describe(name).summary
        lines.append(f"  {name:<36} {summary}".rstrip())
    return "\n".join(lines) + "\n"


def installed_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return __version__


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
    # Request URLs carry the API key; keep the HTTP libraries' own records out.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_config(
    *,
    api_key: str | None,
    requests_per_minute: str | None,
) -> AlphaVantageClientConfig:
    overrides: dict[str, object] = {}
    if api_key:
        overrides["api_key"] = api_key
    if requests_per_minute is not None:
        try:
            rate = parse_requests_per_minute(requests_per_minute)
        except ValueError as exc:
            raise CommandLineError(str(exc)) from exc
        overrides["pacing"] = PacingConfig(requests_per_minute=rate)
    return AlphaVantageClientConfig.from_env(**overrides)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdout: BinaryIO | None = None,
    stderr: TextIO | None = None,
    client_factory: ClientFactory | None = None,
) -> int:
    """Run the CLI and return the process exit code."""
    err = stderr or sys.stderr
    try:
        return _run(
            list(sys.argv[1:] if argv is None else argv),
            stdout=stdout,
            stderr=err,
            client_factory=client_factory or AlphaVantageClient,
        )
    except (CommandLineError, AlphaVantageError, OSError) as exc:
        print(f"{PROGRAM_NAME}: {exc}", file=err)
        return 1


def _run(
    argv: list[str],
    *,
    stdout: BinaryIO | None,
    stderr: TextIO,
    client_factory: ClientFactory,
) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.verbose)
    out = stdout or sys.stdout.buffer

    if args.command is None:
        stderr.write(render_help())
        raise CommandLineError("missing command")
    if args.command == "help":
        topic = args.arguments[0] if args.arguments else None
        if topic is not None and topic not in function_names():
            raise AlphaVantageUnknownFunctionError(topic)
        out.write(render_help(topic).encode("utf-8"))
        return 0
    if args.command == "version":
        out.write(f"{installed_version()}\n".encode("utf-8"))
        return 0

    function = args.command
    if function not in function_names():
        raise AlphaVantageUnknownFunctionError(function)
    params = {
        name: value
        for name, value in vars(_build_function_parser(function).parse_args(args.arguments)).items()
        if value is not None
    }
    query = build_query(function, params)

    config = build_config(api_key=args.apikey, requests_per_minute=args.requests_per_minute)
    with ExitStack() as stack:
        client = client_factory(config)
        stack.callback(client.close)
        body = stack.enter_context(client.stream(query))
        if args.output:
            written = _write_file(body, Path(args.output))
        else:
            written = copy_body(body, out)
            out.flush()
    logger.info("wrote %s bytes for function=%s", written, function)
    return 0


def _write_file(body: BinaryIO, target: Path) -> int:
    # Opened only once the response is accepted; a failed copy leaves no file.
    try:
        with target.open("wb") as sink:
            return copy_body(body, sink)
    except BaseException:
        target.unlink(missing_ok=True)
        raise


__all__ = [
    "CommandLineError",
    "render_help",
    "installed_version",
    "configure_logging",
    "build_config",
    "main",
]
