"""Regenerate the query catalogue from the specification corpus."""

from __future__ import annotations

from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from alpha_vantage_client.specification import load_corpus
from alpha_vantage_client.specification._catalogue_codegen import write_catalogue


def main() -> None:
    target_dir = SRC_ROOT / "alpha_vantage_client" / "functions"
    for path in write_catalogue(load_corpus(), target_dir):
        print(path.relative_to(REPO_ROOT))


if __name__ == "__main__":
    main()
