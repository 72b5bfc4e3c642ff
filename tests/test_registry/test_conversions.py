from datetime import datetime
from enum import Enum
from typing import Literal

import pytest

from argtree.exceptions import ConversionError, UnknownTypeError
from argtree.registry import (
    ConversionRegistry,
    coerce_bool,
    coerce_enum,
    type_name,
    value_type,
)


class Color(Enum):
    RED = 1
    GREEN = 2


class Planet(Enum):
    EARTH = "earth"
    MARS = "mars"


@pytest.fixture
def registry():
    return ConversionRegistry()


@pytest.mark.parametrize(
    "tag, raw, expected",
    [
        (str, "hello", "hello"),
        ("string", "", ""),
        (int, "42", 42),
        ("integer", "-7", -7),
        (float, "3.5", 3.5),
        ("double", "12400", 12400.0),
        (bool, "true", True),
        ("boolean", "FALSE", False),
    ],
)
def test_builtin_conversions(registry, tag, raw, expected):
    assert registry.convert(tag, raw) == expected


@pytest.mark.parametrize("raw", ["true", "True", "t", "yes", "Y", "on", "1"])
def test_coerce_bool_true(raw):
    assert coerce_bool(raw) is True


@pytest.mark.parametrize("raw", ["false", "F", "no", "n", "off", "0"])
def test_coerce_bool_false(raw):
    assert coerce_bool(raw) is False


def test_coerce_bool_rejects_other_text():
    with pytest.raises(ValueError):
        coerce_bool("maybe")


@pytest.mark.parametrize(
    "tag, raw",
    [(int, "4.2"), (int, "abc"), (float, "twelve"), (bool, "maybe")],
)
def test_builtin_conversion_failures(registry, tag, raw):
    with pytest.raises(ConversionError) as excinfo:
        registry.convert(tag, raw)
    assert excinfo.value.raw == raw
    assert excinfo.value.type_tag is tag
    assert raw in str(excinfo.value)
    assert type_name(tag) in str(excinfo.value)


def test_enum_by_name_and_value(registry):
    assert registry.convert(Planet, "MARS") is Planet.MARS
    assert registry.convert(Planet, "mars") is Planet.MARS
    assert registry.convert(Color, "2") is Color.GREEN
    assert coerce_enum("red", Color) is Color.RED


def test_enum_failure_lists_members(registry):
    with pytest.raises(ConversionError) as excinfo:
        registry.convert(Planet, "venus")
    assert "earth" in str(excinfo.value) and "mars" in str(excinfo.value)


def test_literal(registry):
    tag = Literal["fast", "slow"]
    assert registry.convert(tag, "fast") == "fast"
    with pytest.raises(ConversionError):
        registry.convert(tag, "medium")


def test_datetime(registry):
    assert registry.convert(datetime, "2024-05-01") == datetime(2024, 5, 1)
    with pytest.raises(ConversionError):
        registry.convert(datetime, "not a date")


def test_register_custom_type(registry):
    def parse_pair(raw):
        left, _, right = raw.partition(":")
        if not right:
            raise ValueError("expected left:right")
        return left, right

    registry.register("pair", parse_pair)
    assert "pair" in registry
    assert registry.convert("pair", "a:b") == ("a", "b")
    with pytest.raises(ConversionError) as excinfo:
        registry.convert("pair", "ab")
    assert "expected left:right" in str(excinfo.value)


def test_register_replaces_existing(registry):
    registry.register(str, lambda raw: raw.strip())
    assert registry.convert(str, "  padded ") == "padded"


def test_register_rejects_non_callable(registry):
    with pytest.raises(TypeError):
        registry.register("bad", "not callable")


def test_unknown_type(registry):
    assert "mystery" not in registry
    with pytest.raises(UnknownTypeError):
        registry.convert("mystery", "x")


def test_registry_without_builtins():
    registry = ConversionRegistry(include_builtins=False)
    assert str not in registry
    with pytest.raises(UnknownTypeError):
        registry.lookup(int)


def test_type_name():
    assert type_name(int) == "int"
    assert type_name("double") == "double"
    assert type_name(Planet) == "{earth,mars}"
    assert type_name(Literal["a", "b"]) == "{a,b}"


def test_any_converter_exception_is_conversion_error(registry):
    codes = {"a": 1, "b": 2}
    registry.register("code", codes.__getitem__)
    assert registry.convert("code", "b") == 2
    with pytest.raises(ConversionError) as excinfo:
        registry.convert("code", "z")
    assert isinstance(excinfo.value.__cause__, KeyError)
    assert "expected code, got 'z'" in str(excinfo.value)


def test_value_type():
    assert value_type("double") is float
    assert value_type(int) is int
    assert value_type(Planet) is Planet
    assert value_type(Literal["a", "b"]) is str
    assert value_type("location") is None
