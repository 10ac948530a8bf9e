from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from alpha_vantage_client.query.enums import PARAMETER_ENUMS
from alpha_vantage_client.specification import (
    DEFAULT_CORPUS_DIR,
    PARAMETER_TYPES,
    SpecificationError,
    load_corpus,
    validate_corpus,
)


def test_packaged_corpus_is_valid():
    corpus = load_corpus(validate=False)
    assert validate_corpus(corpus) == []
    assert len(corpus.functions) >= 100


def test_function_names_are_unique():
    names = [spec.name for spec in load_corpus().functions]
    assert len(names) == len(set(names))


def test_required_and_optional_are_disjoint_and_declared():
    corpus = load_corpus()
    for spec in corpus.functions:
        assert not set(spec.required) & set(spec.optional), spec.name
        for name in spec.parameters:
            assert name in corpus.parameters, (spec.name, name)


def test_parameter_types_and_formats():
    for param in load_corpus().parameters.values():
        assert param.type in PARAMETER_TYPES
        if param.type == "time":
            assert param.format
        else:
            assert param.format is None
        if param.type in ("enum", "comma_separated_enum"):
            assert param.values


def test_examples_call_their_function():
    for spec in load_corpus().functions:
        for example in spec.examples:
            assert f"function={spec.name}" in example


def test_enum_classes_match_corpus():
    corpus = load_corpus()
    assert set(PARAMETER_ENUMS) == set(corpus.enums)
    for name, values in corpus.enums.items():
        assert PARAMETER_ENUMS[name].wire_values() == values, name


def test_bulk_quotes_symbol_cap():
    spec = load_corpus().function("REALTIME_BULK_QUOTES")
    assert spec.max_items == {"symbol": 100}


def test_csv_only_functions_support_csv():
    corpus = load_corpus()
    csv_only = {spec.name for spec in corpus.functions if spec.csv_only}
    assert {"LISTING_STATUS", "EARNINGS_CALENDAR", "IPO_CALENDAR"} <= csv_only
    for name in csv_only:
        assert corpus.function(name).supports_csv()


def test_unknown_function_lookup_raises():
    with pytest.raises(SpecificationError):
        load_corpus().function("NOT_A_FUNCTION")


def _copy_corpus(tmp_path: Path) -> Path:
    target = tmp_path / "corpus"
    shutil.copytree(DEFAULT_CORPUS_DIR, target, ignore=shutil.ignore_patterns("*.py", "__pycache__"))
    return target


def test_load_corpus_reports_overlapping_parameters(tmp_path: Path):
    root = _copy_corpus(tmp_path)
    path = root / "functions" / "time_series.json"
    functions = json.loads(path.read_text(encoding="utf-8"))
    functions[0]["optional"].append(functions[0]["required"][0])
    path.write_text(json.dumps(functions), encoding="utf-8")

    with pytest.raises(SpecificationError) as exc_info:
        load_corpus(root)
    assert any("both required and optional" in problem for problem in exc_info.value.problems)


def test_load_corpus_reports_foreign_example(tmp_path: Path):
    root = _copy_corpus(tmp_path)
    path = root / "functions" / "forex.json"
    functions = json.loads(path.read_text(encoding="utf-8"))
    functions[0]["examples"] = ["https://www.alphavantage.co/query?function=SOMETHING_ELSE"]
    path.write_text(json.dumps(functions), encoding="utf-8")

    problems = validate_corpus(load_corpus(root, validate=False))
    assert any("does not call" in problem for problem in problems)
