"""Code generation for the query catalogue under ``alpha_vantage_client.functions``."""

from __future__ import annotations

from pathlib import Path

from . import FunctionSpec, SpecificationCorpus

GENERATED_HEADER_PREFIX = "# AUTO-GENERATED FROM"
REGISTRY_SOURCE = "specification/functions/*.json"
MA_TYPE_ENUM = "MovingAverageType"
TECHNICAL_GROUP_PREFIX = "technical_"

_COLUMN_ANNOTATIONS = {
    "string": ("str", '""'),
    "int": ("int", "0"),
    "float": ("float", "0.0"),
    "time": ("datetime | None", "None"),
}


def generated_header(source: str) -> str:
    return f"{GENERATED_HEADER_PREFIX} {source}. DO NOT EDIT."


def generate_catalogue(corpus: SpecificationCorpus) -> dict[str, str]:
    """Render every catalogue module, keyed by file name inside the package."""
    files: dict[str, str] = {}
    for group in corpus.groups():
        files[f"{group}.py"] = generate_group_module(corpus, group)
    files["__init__.py"] = generate_registry_module(corpus)
    files["rows.py"] = generate_rows_module(corpus)
    return files


def write_catalogue(corpus: SpecificationCorpus, target_dir: Path) -> list[Path]:
    written: list[Path] = []
    target_dir.mkdir(parents=True, exist_ok=True)
    for name, source in generate_catalogue(corpus).items():
        path = target_dir / name
        # Always emit LF to keep generated output stable across platforms.
        path.write_text(source, encoding="utf-8", newline="\n")
        written.append(path)
    return written


def generate_group_module(corpus: SpecificationCorpus, group: str) -> str:
    functions = _group_functions(corpus, group)
    names: list[str] = []
    blocks: list[str] = []
    for spec in functions:
        blocks.append(_query_class(corpus, spec))
        names.append(query_class_name(corpus, spec))
        if spec.has_rows():
            blocks.append(_row_class(corpus, spec))
            names.append(row_class_name(corpus, spec))

    lines = [
        generated_header(f"specification/functions/{group}.json"),
        "",
        f'"""Query types and CSV rows for the ``{group}`` function group."""',
        "",
        "from __future__ import annotations",
        "",
    ]
    lines.extend(_group_imports(corpus, functions))
    return "\n".join(lines) + "\n\n\n" + "\n\n\n".join(blocks) + "\n\n\n" + _dunder_all(names)


def generate_registry_module(corpus: SpecificationCorpus) -> str:
    lines = [
        generated_header(REGISTRY_SOURCE),
        "",
        '"""Registry of generated query and row types keyed by wire function name."""',
        "",
        "from __future__ import annotations",
        "",
        "from ..query.base import Query",
    ]
    exported: list[str] = []
    for group in corpus.groups():
        names: list[str] = []
        for spec in _group_functions(corpus, group):
            names.append(query_class_name(corpus, spec))
            if spec.has_rows():
                names.append(row_class_name(corpus, spec))
        lines.extend(_from_import(f".{group}", names))
        exported.extend(names)

    ordered = sorted(corpus.functions, key=lambda spec: spec.name)
    lines.extend(["", "", "QUERY_TYPES: dict[str, type[Query]] = {"])
    for spec in ordered:
        lines.append(f'    "{spec.name}": {query_class_name(corpus, spec)},')
    lines.extend(["}", "", "ROW_TYPES: dict[str, type] = {"])
    for spec in ordered:
        if spec.has_rows():
            lines.append(f'    "{spec.name}": {row_class_name(corpus, spec)},')
    lines.append("}")
    return "\n".join(lines) + "\n\n\n" + _dunder_all(["QUERY_TYPES", "ROW_TYPES", *exported])


def generate_rows_module(corpus: SpecificationCorpus) -> str:
    lines = [
        generated_header(REGISTRY_SOURCE),
        "",
        '"""Typed operations that fetch CSV responses and decode them into rows."""',
        "",
        "from __future__ import annotations",
        "",
        "from datetime import tzinfo",
        "from typing import TypeVar",
        "",
        "from ..core.cancellation import CancelToken",
        "from ..query.base import Query",
    ]
    for group in corpus.groups():
        names: list[str] = []
        for spec in _group_functions(corpus, group):
            if spec.has_rows():
                names.extend([query_class_name(corpus, spec), row_class_name(corpus, spec)])
        if names:
            lines.extend(_from_import(f".{group}", names))
    lines.extend(["", 'RowT = TypeVar("RowT")'])

    with_rows = sorted(
        (spec for spec in corpus.functions if spec.has_rows()),
        key=lambda spec: _snake(corpus, spec.name),
    )

    sync_lines = [
        "class CSVRowsMixin:",
        '    """``<function>_rows`` helpers built on ``collect_rows``."""',
        "",
        "    def collect_rows(",
        "        self,",
        "        query: Query,",
        "        record_type: type[RowT],",
        "        *,",
        "        tz: tzinfo | None = None,",
        "        cancel: CancelToken | None = None,",
        "    ) -> list[RowT]:",
        "        raise NotImplementedError",
    ]
    async_lines = [
        "class AsyncCSVRowsMixin:",
        '    """Async ``<function>_rows`` helpers built on ``collect_rows``."""',
        "",
        "    async def collect_rows(",
        "        self,",
        "        query: Query,",
        "        record_type: type[RowT],",
        "        *,",
        "        tz: tzinfo | None = None,",
        "    ) -> list[RowT]:",
        "        raise NotImplementedError",
    ]
    for spec in with_rows:
        sync_lines.extend(_rows_method(corpus, spec, is_async=False))
        async_lines.extend(_rows_method(corpus, spec, is_async=True))

    blocks = ["\n".join(sync_lines), "\n".join(async_lines)]
    return (
        "\n".join(lines)
        + "\n\n\n"
        + "\n\n\n".join(blocks)
        + "\n\n\n"
        + _dunder_all(["CSVRowsMixin", "AsyncCSVRowsMixin"])
    )


def query_class_name(corpus: SpecificationCorpus, spec: FunctionSpec) -> str:
    return corpus.identifier(spec.name)[0] + "Query"


def row_class_name(corpus: SpecificationCorpus, spec: FunctionSpec) -> str:
    return corpus.identifier(spec.name)[0] + "Row"


def _group_functions(corpus: SpecificationCorpus, group: str) -> list[FunctionSpec]:
    return sorted(corpus.functions_in(group), key=lambda spec: corpus.identifier(spec.name)[0])


def _snake(corpus: SpecificationCorpus, name: str) -> str:
    return corpus.identifier(name)[1]


def _sorted_parameters(corpus: SpecificationCorpus, names: tuple[str, ...]) -> list[str]:
    return sorted(names, key=lambda name: _snake(corpus, name))


def _annotation(corpus: SpecificationCorpus, spec: FunctionSpec, name: str) -> str:
    param = corpus.parameter(name)
    if param.type == "enum":
        return f"{corpus.enum_for(spec, name)} | str"
    if param.type == "int":
        return f"{MA_TYPE_ENUM} | int" if param.ma_type else "int"
    if param.type == "float":
        return "float"
    if param.type == "bool":
        return "bool"
    if param.type == "time":
        return "datetime" if "%H" in (param.format or "") else "date"
    return "str"


def _group_imports(corpus: SpecificationCorpus, functions: list[FunctionSpec]) -> list[str]:
    has_rows = any(spec.has_rows() for spec in functions)
    datetime_names: set[str] = set()
    enum_names: set[str] = set()
    for spec in functions:
        for name in spec.parameters:
            param = corpus.parameter(name)
            if param.type == "time":
                datetime_names.add(_annotation(corpus, spec, name))
            elif param.type == "enum":
                enum_names.add(corpus.enum_for(spec, name) or "")
            elif param.ma_type:
                enum_names.add(MA_TYPE_ENUM)
        if spec.has_rows() and any(column.type == "time" for column in spec.csv_columns):
            datetime_names.add("datetime")

    stdlib: list[str] = []
    if has_rows:
        stdlib.append("from dataclasses import dataclass")
    if datetime_names:
        stdlib.append(f"from datetime import {', '.join(sorted(datetime_names))}")

    local: list[str] = []
    if has_rows:
        local.append("from ..core.csv_decoder import csv_column")
    local.append("from ..query.base import Query")
    if enum_names:
        local.extend(_from_import("..query.enums", sorted(enum_names)))
    return stdlib + ([""] if stdlib else []) + local


def _from_import(module: str, names: list[str]) -> list[str]:
    if len(names) == 1:
        return [f"from {module} import {names[0]}"]
    return [f"from {module} import ("] + [f"    {name}," for name in names] + [")"]


def _tuple(names: list[str]) -> str:
    if not names:
        return "()"
    if len(names) == 1:
        return f'("{names[0]}",)'
    return "(" + ", ".join(f'"{name}"' for name in names) + ")"


def _query_class(corpus: SpecificationCorpus, spec: FunctionSpec) -> str:
    class_name = query_class_name(corpus, spec)
    required = _sorted_parameters(corpus, spec.required)
    optional = _sorted_parameters(corpus, spec.optional)
    every = _sorted_parameters(corpus, spec.parameters)

    lines = [
        f"class {class_name}(Query):",
        f'    """{spec.description}"""',
        "",
        f'    function = "{spec.name}"',
        f"    required = {_tuple(required)}",
        f"    optional = {_tuple(optional)}",
    ]
    enums = [name for name in every if corpus.parameter(name).type == "enum"]
    if enums:
        lines.append("    enums = {")
        lines.extend(f'        "{name}": {corpus.enum_for(spec, name)},' for name in enums)
        lines.append("    }")
    booleans = [name for name in every if corpus.parameter(name).type == "bool"]
    if booleans:
        lines.append(f"    booleans = {_tuple(booleans)}")
    ma_types = [name for name in every if corpus.parameter(name).ma_type]
    if ma_types:
        lines.append(f"    ma_types = {_tuple(ma_types)}")
    if spec.max_items:
        lines.append("    max_items = {")
        lines.extend(f'        "{name}": {spec.max_items[name]},' for name in sorted(spec.max_items))
        lines.append("    }")

    if required:
        lines.extend(["", "    def __init__(", "        self,"])
        for name in required:
            lines.append(f"        {_snake(corpus, name)}: {_annotation(corpus, spec, name)},")
        lines.extend(["    ) -> None:", "        super().__init__()"])
        for name in required:
            lines.append(f"        {_store(corpus, name, _snake(corpus, name))}")

    for name in optional:
        lines.extend(_setters(corpus, spec, name, class_name))
    return "\n".join(lines)


def _store(corpus: SpecificationCorpus, name: str, value: str) -> str:
    param = corpus.parameter(name)
    if param.type == "time":
        return f'self._put_time("{name}", {value}, "{param.format}")'
    return f'self._put("{name}", {value})'


def _setters(
    corpus: SpecificationCorpus,
    spec: FunctionSpec,
    name: str,
    class_name: str,
) -> list[str]:
    param = corpus.parameter(name)
    method = _snake(corpus, name)
    lines = [
        "",
        f"    def {method}(self, value: {_annotation(corpus, spec, name)}) -> {class_name}:",
        f"        return {_store(corpus, name, 'value')}",
    ]
    if param.type in ("float", "time"):
        lines.extend(
            [
                "",
                f"    def {method}_string(self, value: str) -> {class_name}:",
                f'        return self._put("{name}", value)',
            ]
        )
    if param.type == "enum":
        for value in corpus.enums[corpus.enum_for(spec, name) or ""]:
            lines.extend(
                [
                    "",
                    f"    def {method}_{_snake(corpus, value)}(self) -> {class_name}:",
                    f'        return self._put("{name}", "{value}")',
                ]
            )
    return lines


def _row_fields(corpus: SpecificationCorpus, spec: FunctionSpec) -> list[str]:
    columns = spec.csv_columns
    if spec.group.startswith(TECHNICAL_GROUP_PREFIX) and len(columns) == 2:
        return [_snake(corpus, columns[0].name), "value"]
    return [_snake(corpus, column.name) for column in columns]


def _row_class(corpus: SpecificationCorpus, spec: FunctionSpec) -> str:
    lines = [
        "@dataclass(slots=True)",
        f"class {row_class_name(corpus, spec)}:",
        f'    """CSV row of ``{spec.name}``."""',
        "",
    ]
    for field_name, column in zip(_row_fields(corpus, spec), spec.csv_columns):
        annotation, default = _COLUMN_ANNOTATIONS[column.type]
        arguments = f'"{column.name}", {default}'
        if column.layout:
            arguments += f', time_layout="{column.layout}"'
        lines.append(f"    {field_name}: {annotation} = csv_column({arguments})")
    return "\n".join(lines)


def _rows_method(corpus: SpecificationCorpus, spec: FunctionSpec, *, is_async: bool) -> list[str]:
    query_name = query_class_name(corpus, spec)
    row_name = row_class_name(corpus, spec)
    query_expr = "query"
    if spec.has_datatype_parameter():
        query_expr = f"query.{_snake(corpus, 'datatype')}_{_snake(corpus, 'csv')}()"
    prefix = "async def" if is_async else "def"
    call = "await self.collect_rows(" if is_async else "self.collect_rows("
    lines = [
        "",
        f"    {prefix} {_snake(corpus, spec.name)}_rows(",
        "        self,",
        f"        query: {query_name},",
        "        *,",
        "        tz: tzinfo | None = None,",
    ]
    if not is_async:
        lines.append("        cancel: CancelToken | None = None,")
    lines.extend(
        [
            f"    ) -> list[{row_name}]:",
            f'        """Fetch ``{spec.name}`` as CSV and decode every row."""',
            f"        return {call}",
            f"            {query_expr},",
            f"            {row_name},",
            "            tz=tz,",
        ]
    )
    if not is_async:
        lines.append("            cancel=cancel,")
    lines.append("        )")
    return lines


def _dunder_all(names: list[str]) -> str:
    return "__all__ = [\n" + "".join(f'    "{name}",\n' for name in names) + "]\n"


__all__ = [
    "GENERATED_HEADER_PREFIX",
    "generated_header",
    "generate_catalogue",
    "write_catalogue",
    "generate_group_module",
    "generate_registry_module",
    "generate_rows_module",
    "query_class_name",
    "row_class_name",
]
