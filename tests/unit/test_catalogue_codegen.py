from __future__ import annotations

import ast
from pathlib import Path

from alpha_vantage_client.specification import load_corpus
from alpha_vantage_client.specification._catalogue_codegen import (
    GENERATED_HEADER_PREFIX,
    generate_catalogue,
    write_catalogue,
)

ROOT = Path(__file__).resolve().parents[2]
FUNCTIONS_DIR = ROOT / "src" / "alpha_vantage_client" / "functions"


def test_generated_catalogue_is_in_sync_with_checked_in_modules():
    generated = generate_catalogue(load_corpus())
    checked_in = {path.name for path in FUNCTIONS_DIR.glob("*.py")}
    assert set(generated) == checked_in
    for name, source in generated.items():
        assert (FUNCTIONS_DIR / name).read_text(encoding="utf-8") == source, name


def test_generation_is_deterministic():
    corpus = load_corpus()
    assert generate_catalogue(corpus) == generate_catalogue(corpus)


def test_generated_modules_start_with_header_and_parse():
    for name, source in generate_catalogue(load_corpus()).items():
        assert source.startswith(GENERATED_HEADER_PREFIX), name
        assert "DO NOT EDIT." in source.splitlines()[0]
        assert "\r" not in source
        ast.parse(source)


def test_write_catalogue_emits_lf_files(tmp_path: Path):
    written = write_catalogue(load_corpus(), tmp_path)
    assert {path.name for path in written} == {path.name for path in FUNCTIONS_DIR.glob("*.py")}
    for path in written:
        assert b"\r\n" not in path.read_bytes()
