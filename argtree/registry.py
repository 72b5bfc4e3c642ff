# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Conversion registry: turns raw token text into typed values.

Every argument declares a type tag. At bind time the registry looks the tag up
and calls the matching converter with the raw token. A converter is any callable
taking one `str` and returning the converted value. Any exception it raises
(`ValueError`, `KeyError` from an `Enum[...]` or dict lookup, ...) is read as
bad input and wrapped into a `ConversionError` that names the type and the
offending text.

Built-in converters:
- `str` / "str" / "string"
- `int` / "int" / "integer"
- `float` / "float" / "double"
- `bool` / "bool" / "boolean" (see `coerce_bool` for the accepted literals)

Tags that are not registered explicitly are still understood when they are:
- an `Enum` subclass (matched by member name, then by value)
- a `typing.Literal[...]` of strings
- `datetime.datetime` (parsed with `python-dateutil`)

Example:
    registry = ConversionRegistry()
    registry.register("location", Location.from_code)
    registry.convert("location", "lhc")
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum, EnumMeta
from typing import Any, Callable, Literal, get_args, get_origin

from dateutil import parser as date_parser

from argtree.exceptions import ConversionError, UnknownTypeError
from argtree.logger import logger

Converter = Callable[[str], Any]

TRUE_LITERALS = frozenset({"true", "t", "yes", "y", "on", "1"})
FALSE_LITERALS = frozenset({"false", "f", "no", "n", "off", "0"})


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts 'true'/'false', 't'/'f', 'yes'/'no', 'y'/'n', 'on'/'off' and '1'/'0',
    in any letter case.

    Raises:
        ValueError: If the text is not one of the accepted literals.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_LITERALS:
        return True
    if normalized in FALSE_LITERALS:
        return False
    raise ValueError(f"'{value}' is not a boolean (expected true or false)")


def coerce_enum(value: str, enum_type: EnumMeta) -> Any:
    """
    Convert a string to an Enum member.

    Tries the member name exactly, then case-insensitively, then the member values
    (coerced to the type of the first member's value).

    Raises:
        ValueError: If the value cannot be resolved to a member.
    """
    if isinstance(value, enum_type):
        return value

    try:
        return enum_type[value]
    except KeyError:
        pass

    for name, member in enum_type.__members__.items():
        if name.lower() == value.lower():
            return member

    base_type = type(next(iter(enum_type)).value)
    try:
        return enum_type(base_type(value))
    except (ValueError, TypeError):
        names = [member.name.lower() for member in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(names)}}}") from None


def coerce_literal(value: str, literal_type: Any) -> str:
    """Accept `value` only if it is one of the strings listed in `literal_type`."""
    choices = get_args(literal_type)
    if value not in choices:
        raise ValueError(
            f"'{value}' should be one of {{{', '.join(str(c) for c in choices)}}}"
        )
    return value


def coerce_datetime(value: str) -> datetime:
    """Parse a date or timestamp using `dateutil`."""
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ValueError(f"'{value}' could not be parsed as a datetime") from error


def type_name(type_tag: Any) -> str:
    """Human-readable name for a type tag, used in help and diagnostics."""
    if isinstance(type_tag, str):
        return type_tag
    if get_origin(type_tag) is Literal:
        return "{" + ",".join(str(arg) for arg in get_args(type_tag)) + "}"
    if isinstance(type_tag, EnumMeta):
        return "{" + ",".join(member.name.lower() for member in type_tag) + "}"
    return getattr(type_tag, "__name__", repr(type_tag))


BUILTIN_VALUE_TYPES: dict[Any, type] = {
    str: str,
    "str": str,
    "string": str,
    int: int,
    "int": int,
    "integer": int,
    float: float,
    "float": float,
    "double": float,
    bool: bool,
    "bool": bool,
    "boolean": bool,
    datetime: datetime,
    "datetime": datetime,
}


def value_type(type_tag: Any) -> type | None:
    """
    Python type of the values a tag converts to.

    Known for the built-in tags, `Enum` subclasses and `Literal[...]` (`str`).
    Returns None for tags whose converter is supplied by the caller.
    """
    if get_origin(type_tag) is Literal:
        return str
    if isinstance(type_tag, EnumMeta):
        return type_tag
    try:
        return BUILTIN_VALUE_TYPES.get(type_tag)
    except TypeError:
        return None


class ConversionRegistry:
    """
    Mapping from type tag to converter.

    A registry starts with the built-in converters. Callers add their own with
    `register()` before parsing begins; the registry is only read while binding.

    Attributes:
        converters (dict[Any, Converter]): Registered converters by type tag.
    """

    def __init__(self, include_builtins: bool = True) -> None:
        self.converters: dict[Any, Converter] = {}
        if include_builtins:
            self._register_builtins()

    def _register_builtins(self) -> None:
        for tags, converter in (
            ((str, "str", "string"), str),
            ((int, "int", "integer"), int),
            ((float, "float", "double"), float),
            ((bool, "bool", "boolean"), coerce_bool),
            ((datetime, "datetime"), coerce_datetime),
        ):
            for tag in tags:
                self.converters[tag] = converter

    def register(self, type_tag: Any, converter: Converter) -> None:
        """
        Register (or replace) the converter for `type_tag`.

        Args:
            type_tag (Any): A Python type or any hashable tag, usually a string.
            converter (Callable[[str], Any]): Parses raw text, raising any exception
                on bad input.

        Raises:
            TypeError: If `converter` is not callable.
        """
        if not callable(converter):
            raise TypeError(f"Converter for {type_name(type_tag)!r} must be callable")
        if type_tag in self.converters:
            logger.debug("Replacing converter for type '%s'.", type_name(type_tag))
        self.converters[type_tag] = converter

    def __contains__(self, type_tag: Any) -> bool:
        try:
            self.lookup(type_tag)
        except UnknownTypeError:
            return False
        return True

    def lookup(self, type_tag: Any) -> Converter:
        """
        Return the converter for `type_tag`.

        Raises:
            UnknownTypeError: If nothing is registered for the tag and it is not an
                Enum or Literal type.
        """
        try:
            converter = self.converters.get(type_tag)
        except TypeError:
            converter = None
        if converter is not None:
            return converter
        if isinstance(type_tag, EnumMeta) and issubclass(type_tag, Enum):
            return lambda value: coerce_enum(value, type_tag)
        if get_origin(type_tag) is Literal:
            return lambda value: coerce_literal(value, type_tag)
        raise UnknownTypeError(
            f"No converter registered for type '{type_name(type_tag)}'"
        )

    def convert(self, type_tag: Any, raw: str) -> Any:
        """
        Convert `raw` with the converter registered for `type_tag`.

        Raises:
            ConversionError: If the converter rejects the text.
            UnknownTypeError: If no converter exists for the tag.
        """
        converter = self.lookup(type_tag)
        try:
            value = converter(raw)
        except Exception as error:
            logger.debug(
                "Conversion of '%s' to %s failed: %s", raw, type_name(type_tag), error
            )
            raise ConversionError(
                f"expected {type_name(type_tag)}, got '{raw}' ({error})",
                type_tag=type_tag,
                raw=raw,
            ) from error
        return value
