from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture(scope="session")
def examples_dir() -> Path:
    return ROOT / "tests" / "fixtures" / "examples"


@pytest.fixture(scope="session")
def example_index_path(examples_dir: Path) -> Path:
    return examples_dir / "index.json"


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ALPHA_VANTAGE_TOKEN",
        "ALPHA_VANTAGE_REQUESTS_PER_MINUTE",
        "ALPHA_VANTAGE_API_URL",
        "ALPHA_VANTAGE_FALLBACK_API_URL",
    ):
        monkeypatch.delenv(name, raising=False)
