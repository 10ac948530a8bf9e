from __future__ import annotations

import inspect
from datetime import date, datetime
from urllib.parse import parse_qsl

import pytest

from alpha_vantage_client.core.errors import AlphaVantageValidationError
from alpha_vantage_client.functions import QUERY_TYPES
from alpha_vantage_client.query import Query

SETTER_VALUES: dict[str, object] = {
    "date": date(2024, 3, 1),
    "datetime": datetime(2024, 3, 1, 9, 30),
    "int": 5,
    "float": 1.5,
    "bool": True,
}

FUNCTIONS = sorted(QUERY_TYPES)
ENUM_PARAMETERS = [
    (function, name)
    for function in FUNCTIONS
    for name in sorted(QUERY_TYPES[function].enums)
]
REQUIRED_PARAMETERS = [
    (function, name)
    for function in FUNCTIONS
    for name in QUERY_TYPES[function].required
]


def _valid_value(query_cls: type[Query], name: str) -> str:
    if name in query_cls.enums:
        return str(next(iter(query_cls.enums[name])).value)
    if name in query_cls.booleans:
        return "true"
    if name in query_cls.ma_types:
        return "0"
    return "IBM"


def _valid_query(query_cls: type[Query], **overrides: str) -> Query:
    params = {name: _valid_value(query_cls, name) for name in query_cls.required}
    params.update(overrides)
    return query_cls.from_params(params)


def _setters(query_cls: type[Query]):
    for name, member in sorted(vars(query_cls).items()):
        if name.startswith("_") or not inspect.isfunction(member):
            continue
        parameters = list(inspect.signature(member).parameters.values())[1:]
        if not parameters:
            yield name, ()
            continue
        annotation = str(parameters[0].annotation).split(" | ")[0]
        yield name, (SETTER_VALUES.get(annotation, "x"),)


@pytest.mark.parametrize("function", FUNCTIONS)
def test_query_with_required_values_validates(function):
    _valid_query(QUERY_TYPES[function]).validate()


@pytest.mark.parametrize(("function", "name"), REQUIRED_PARAMETERS)
@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_required_value_fails_validation(function, name, blank):
    query = _valid_query(QUERY_TYPES[function], **{name: blank})
    with pytest.raises(AlphaVantageValidationError) as exc_info:
        query.validate()
    assert exc_info.value.parameter == name


@pytest.mark.parametrize(("function", "name"), ENUM_PARAMETERS)
def test_every_declared_enum_value_is_accepted(function, name):
    query_cls = QUERY_TYPES[function]
    for member in query_cls.enums[name]:
        _valid_query(query_cls, **{name: str(member.value)}).validate()


@pytest.mark.parametrize(("function", "name"), ENUM_PARAMETERS)
def test_undeclared_enum_value_is_rejected(function, name):
    query = _valid_query(QUERY_TYPES[function], **{name: "not-a-member"})
    with pytest.raises(AlphaVantageValidationError) as exc_info:
        query.validate()
    assert exc_info.value.parameter == name


@pytest.mark.parametrize("function", FUNCTIONS)
def test_setters_are_idempotent(function):
    query_cls = QUERY_TYPES[function]
    for name, args in _setters(query_cls):
        once = _valid_query(query_cls)
        twice = _valid_query(query_cls)
        assert getattr(once, name)(*args) is once
        getattr(twice, name)(*args)
        getattr(twice, name)(*args)
        assert once == twice, name
        assert once.values() == twice.values(), name


@pytest.mark.parametrize("function", FUNCTIONS)
def test_encoding_decodes_back_to_the_values(function):
    query_cls = QUERY_TYPES[function]
    query = _valid_query(query_cls).api_key("demo")
    if query_cls.optional:
        query = query_cls.from_params({**query.values(), query_cls.optional[0]: ""})

    pairs = parse_qsl(query.encode(), keep_blank_values=True)
    keys = [key for key, _ in pairs]
    assert keys == sorted(keys)
    decoded: dict[str, list[str]] = {}
    for key, value in pairs:
        decoded.setdefault(key, []).append(value)
    assert decoded == query.values()
