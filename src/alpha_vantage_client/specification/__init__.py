"""Machine-readable description of every Alpha Vantage function.

The corpus is the single source of truth for the generated query catalogue.
It lives next to this module as JSON:

* ``enums.json`` maps enum class names to their permitted wire values;
* ``query_parameters.json`` lists every parameter with its value type;
* ``identifiers.json`` maps wire names to ``[ExportedName, snake_name]``;
* ``functions/<group>.json`` lists the functions of one documentation group.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import parse_qs, urlsplit

DEFAULT_CORPUS_DIR = Path(__file__).resolve().parent

PARAMETER_TYPES = frozenset(
    {
        "string",
        "int",
        "float",
        "bool",
        "time",
        "enum",
        "comma_separated_enum",
        "comma_separated_list",
    }
)
COLUMN_TYPES = frozenset({"string", "int", "float", "time"})
DATATYPE_PARAMETER = "datatype"


class SpecificationError(ValueError):
    """Raised when the corpus cannot be loaded or violates an invariant."""

    def __init__(self, message: str, *, problems: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.problems = tuple(problems)


@dataclass(slots=True, frozen=True)
class ParameterSpec:
    name: str
    type: str
    values: tuple[str, ...] = ()
    enum: str | None = None
    format: str | None = None
    ma_type: bool = False


@dataclass(slots=True, frozen=True)
class CSVColumn:
    name: str
    type: str
    layout: str | None = None


@dataclass(slots=True, frozen=True)
class FunctionSpec:
    name: str
    group: str
    description: str
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    enum_types: dict[str, str] = field(default_factory=dict)
    max_items: dict[str, int] = field(default_factory=dict)
    csv_only: bool = False
    csv_columns: tuple[CSVColumn, ...] = ()
    examples: tuple[str, ...] = ()

    @property
    def parameters(self) -> tuple[str, ...]:
        return self.required + self.optional

    def has_datatype_parameter(self) -> bool:
        return DATATYPE_PARAMETER in self.parameters

    def supports_csv(self) -> bool:
        return self.csv_only or self.has_datatype_parameter()

    def has_rows(self) -> bool:
        return self.supports_csv() and bool(self.csv_columns)


@dataclass(slots=True, frozen=True)
class SpecificationCorpus:
    enums: dict[str, tuple[str, ...]]
    parameters: dict[str, ParameterSpec]
    identifiers: dict[str, tuple[str, str]]
    functions: tuple[FunctionSpec, ...]

    def groups(self) -> tuple[str, ...]:
        return tuple(sorted({spec.group for spec in self.functions}))

    def functions_in(self, group: str) -> tuple[FunctionSpec, ...]:
        return tuple(spec for spec in self.functions if spec.group == group)

    def function(self, name: str) -> FunctionSpec:
        for spec in self.functions:
            if spec.name == name:
                return spec
        raise SpecificationError(f"unknown function {name!r}")

    def parameter(self, name: str) -> ParameterSpec:
        try:
            return self.parameters[name]
        except KeyError:
            raise SpecificationError(f"unknown parameter {name!r}") from None

    def enum_for(self, function: FunctionSpec, parameter: str) -> str | None:
        """Enum class used by ``function`` for ``parameter`` (interval families differ)."""
        override = function.enum_types.get(parameter)
        if override is not None:
            return override
        return self.parameter(parameter).enum

    def identifier(self, name: str) -> tuple[str, str]:
        try:
            return self.identifiers[name]
        except KeyError:
            raise SpecificationError(f"no identifier mapping for {name!r}") from None


def load_corpus(root: Path | None = None, *, validate: bool = True) -> SpecificationCorpus:
    """Load the corpus from ``root`` (the packaged copy by default)."""
    base = root or DEFAULT_CORPUS_DIR
    enums_payload = _read_json(base / "enums.json")
    enums = {name: tuple(values) for name, values in enums_payload.items()}

    parameters: dict[str, ParameterSpec] = {}
    for raw in _read_json(base / "query_parameters.json"):
        enum_name = raw.get("enum")
        parameters[raw["name"]] = ParameterSpec(
            name=raw["name"],
            type=raw["type"],
            values=enums.get(enum_name, ()) if enum_name else (),
            enum=enum_name,
            format=raw.get("format"),
            ma_type=bool(raw.get("ma_type", False)),
        )

    identifiers = {
        name: (pair[0], pair[1]) for name, pair in _read_json(base / "identifiers.json").items()
    }

    functions: list[FunctionSpec] = []
    for path in sorted((base / "functions").glob("*.json")):
        group = path.stem
        for raw in _read_json(path):
            functions.append(_function_from_payload(raw, group=group))

    corpus = SpecificationCorpus(
        enums=enums,
        parameters=parameters,
        identifiers=identifiers,
        functions=tuple(functions),
    )
    if validate:
        problems = validate_corpus(corpus)
        if problems:
            raise SpecificationError(
                f"specification corpus has {len(problems)} problem(s): {problems[0]}",
                problems=problems,
            )
    return corpus


def validate_corpus(corpus: SpecificationCorpus) -> list[str]:
    """Return every invariant violation found in ``corpus``."""
    problems: list[str] = []
    problems.extend(_parameter_problems(corpus))

    seen: set[str] = set()
    for spec in corpus.functions:
        if spec.name in seen:
            problems.append(f"{spec.name}: duplicate function name")
        seen.add(spec.name)
        problems.extend(_function_problems(corpus, spec))
    return problems


def _parameter_problems(corpus: SpecificationCorpus) -> list[str]:
    problems: list[str] = []
    for name, param in corpus.parameters.items():
        if param.type not in PARAMETER_TYPES:
            problems.append(f"parameter {name}: unknown type {param.type!r}")
        if param.type == "time" and not param.format:
            problems.append(f"parameter {name}: time parameters require a format")
        if param.format and param.type != "time":
            problems.append(f"parameter {name}: format is only valid on time parameters")
        if param.type in ("enum", "comma_separated_enum"):
            if param.enum not in corpus.enums:
                problems.append(f"parameter {name}: unknown enum {param.enum!r}")
            elif not param.values:
                problems.append(f"parameter {name}: enum parameters require values")
        if param.ma_type and param.type != "int":
            problems.append(f"parameter {name}: moving average types must be int parameters")
        if name not in corpus.identifiers:
            problems.append(f"parameter {name}: missing identifier")
    return problems


def _function_problems(corpus: SpecificationCorpus, spec: FunctionSpec) -> list[str]:
    problems: list[str] = []
    prefix = spec.name
    if spec.name not in corpus.identifiers:
        problems.append(f"{prefix}: missing identifier")

    overlap = sorted(set(spec.required) & set(spec.optional))
    if overlap:
        problems.append(f"{prefix}: parameters both required and optional: {', '.join(overlap)}")

    for name in spec.parameters:
        param = corpus.parameters.get(name)
        if param is None:
            problems.append(f"{prefix}: unknown parameter {name!r}")
            continue
        if param.type == "enum":
            enum_name = spec.enum_types.get(name, param.enum)
            for value in corpus.enums.get(enum_name or "", ()):
                if value not in corpus.identifiers:
                    problems.append(f"{prefix}: missing identifier for enum value {value!r}")

    for name, enum_name in spec.enum_types.items():
        param = corpus.parameters.get(name)
        if param is None or name not in spec.parameters:
            problems.append(f"{prefix}: enum override for undeclared parameter {name!r}")
            continue
        subset = corpus.enums.get(enum_name)
        if subset is None:
            problems.append(f"{prefix}: unknown enum {enum_name!r}")
            continue
        extra = [value for value in subset if value not in param.values]
        if extra:
            problems.append(
                f"{prefix}: {enum_name} values {extra} are not valid for parameter {name}"
            )

    for name in spec.max_items:
        if name not in spec.parameters:
            problems.append(f"{prefix}: max_items for undeclared parameter {name!r}")

    for column in spec.csv_columns:
        if column.type not in COLUMN_TYPES:
            problems.append(f"{prefix}: column {column.name!r} has unknown type {column.type!r}")
        if column.layout and column.type != "time":
            problems.append(f"{prefix}: column {column.name!r} has a layout but is not a time")
        if column.name not in corpus.identifiers:
            problems.append(f"{prefix}: missing identifier for column {column.name!r}")

    for example in spec.examples:
        functions = parse_qs(urlsplit(example).query).get("function", [])
        if functions != [spec.name]:
            problems.append(f"{prefix}: example {example!r} does not call {spec.name}")
    return problems


def _function_from_payload(raw: dict, *, group: str) -> FunctionSpec:
    return FunctionSpec(
        name=raw["name"],
        group=group,
        description=raw.get("description", ""),
        required=tuple(raw.get("required", ())),
        optional=tuple(raw.get("optional", ())),
        enum_types=dict(raw.get("enum_types", {})),
        max_items={name: int(limit) for name, limit in raw.get("max_items", {}).items()},
        csv_only=bool(raw.get("csv_only", False)),
        csv_columns=tuple(
            CSVColumn(name=column["name"], type=column["type"], layout=column.get("layout"))
            for column in raw.get("csv_columns", ())
        ),
        examples=tuple(raw.get("examples", ())),
    )


def _read_json(path: Path):
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise SpecificationError(f"failed to read {path.name}: {exc}") from exc


__all__ = [
    "DEFAULT_CORPUS_DIR",
    "PARAMETER_TYPES",
    "COLUMN_TYPES",
    "SpecificationError",
    "ParameterSpec",
    "CSVColumn",
    "FunctionSpec",
    "SpecificationCorpus",
    "load_corpus",
    "validate_corpus",
]
