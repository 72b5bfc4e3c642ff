# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
`ParameterBag`: the read-only result of binding, handed to a command's handler.

Each value is stored as a `TaggedValue` holding the type tag it was bound with,
so reads can be checked. Reading a name that is absent, or reading a value as a
type it was not bound with, is a programming mistake and raises a
`BagAccessError` subclass. User input problems never reach this point; they are
rendered before the bag exists.

Example:
    if "discount" in bag:
        price *= 1 - bag.get("discount", float)
    if bag.flag("receipt"):
        print_receipt()
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from argtree.exceptions import MissingValueError, ValueTypeError
from argtree.registry import type_name


@dataclass(frozen=True)
class TaggedValue:
    """A bound value together with the type tag it was converted with."""

    type: Any
    value: Any


class ParameterBag:
    """
    Immutable mapping of argument name to typed value.

    Only the binder builds bags. Handlers read them with `contains()` / `in`,
    `get()`, and `flag()`.
    """

    def __init__(self, values: Mapping[str, TaggedValue] | None = None) -> None:
        self._values: Mapping[str, TaggedValue] = MappingProxyType(dict(values or {}))

    def contains(self, name: str) -> bool:
        """Return True if `name` was bound (supplied or defaulted)."""
        return name in self._values

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def _tagged(self, name: str) -> TaggedValue:
        try:
            return self._values[name]
        except KeyError:
            raise MissingValueError(
                f"'{name}' is not in the parameter bag; check contains() first"
            ) from None

    def get(self, name: str, expected: Any = None) -> Any:
        """
        Return the value bound to `name`.

        Args:
            name (str): Argument name.
            expected (Any): Optional type check. A Python type is checked with
                `isinstance`; any other tag must equal the tag the value was bound
                with.

        Raises:
            MissingValueError: If `name` is not in the bag.
            ValueTypeError: If the value does not match `expected`.
        """
        tagged = self._tagged(name)
        if expected is None or expected == tagged.type:
            return tagged.value
        # bool is an int subclass; a switch must not read back as an integer
        if (
            isinstance(expected, type)
            and isinstance(tagged.value, expected)
            and not (expected is int and isinstance(tagged.value, bool))
        ):
            return tagged.value
        raise ValueTypeError(
            f"'{name}' holds a {type_name(tagged.type)} value, "
            f"not {type_name(expected)}"
        )

    def flag(self, name: str) -> bool:
        """Return the state of a boolean flag."""
        return self.get(name, bool)

    def type_of(self, name: str) -> Any:
        """Return the type tag `name` was bound with."""
        return self._tagged(name).type

    def as_dict(self) -> dict[str, Any]:
        """Plain `{name: value}` copy of the bag."""
        return {name: tagged.value for name, tagged in self._values.items()}

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterBag):
            return NotImplemented
        return dict(self._values) == dict(other._values)

    def __repr__(self) -> str:
        items = ", ".join(f"{name}={value!r}" for name, value in self.as_dict().items())
        return f"ParameterBag({items})"
