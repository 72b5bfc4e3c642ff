# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Argument`, the immutable description of one positional argument or flag,
and `ArgumentKind`, the enum selecting how the binder treats it.

Arguments are created through `Command.add_positional_argument()` and
`Command.add_flag()`; they are never built directly by callers.

Key Attributes:
- `name`: Key in the parameter bag, and the long alias (`--name`) of a flag
- `kind`: `ArgumentKind.POSITIONAL`, `STORE` (typed flag) or `STORE_TRUE` (switch)
- `type`: Type tag looked up in the `ConversionRegistry`
- `short`: Optional one-character alias (`-n`) for flags
- `default`: Declared default, or `MISSING`
- `position`: Rank among the command's positionals
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from argtree.registry import type_name

LONG_PREFIX = "--"
SHORT_PREFIX = "-"


class _Missing:
    """Sentinel type for "no default declared"."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class ArgumentKind(Enum):
    """
    How the binder fills an argument.

    Members:
        POSITIONAL: Filled by the next unclaimed non-flag token.
        STORE: A flag that consumes the following token as its value.
        STORE_TRUE: A boolean switch; present means `True`, absent means `False`.
    """

    POSITIONAL = "positional"
    STORE = "store"
    STORE_TRUE = "store_true"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Argument:
    """
    Represents one declared command argument.

    Attributes:
        name (str): Bag key; also the long alias of a flag.
        kind (ArgumentKind): Positional, typed flag or boolean switch.
        type (Any): Type tag for conversion. `bool` for switches.
        help (str): Help text shown in usage listings.
        short (str | None): One-character short alias for flags.
        default (Any): Declared default value, or `MISSING`.
        position (int | None): Declaration rank for positionals.
    """

    name: str
    kind: ArgumentKind
    type: Any = str
    help: str = ""
    short: str | None = None
    default: Any = MISSING
    position: int | None = None

    @property
    def positional(self) -> bool:
        return self.kind == ArgumentKind.POSITIONAL

    @property
    def is_boolean(self) -> bool:
        return self.kind == ArgumentKind.STORE_TRUE

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @property
    def long_flag(self) -> str | None:
        if self.positional:
            return None
        return f"{LONG_PREFIX}{self.name}"

    @property
    def short_flag(self) -> str | None:
        if self.positional or not self.short:
            return None
        return f"{SHORT_PREFIX}{self.short}"

    @property
    def flags(self) -> tuple[str, ...]:
        """All token forms that select this flag, long alias first."""
        return tuple(flag for flag in (self.long_flag, self.short_flag) if flag)

    def get_choice_text(self) -> str:
        """Placeholder text for the value, e.g. `PRICE` for a typed flag."""
        if self.positional:
            return self.name
        if self.is_boolean:
            return ""
        return self.name.upper().replace("-", "_")

    def get_usage_text(self) -> str:
        """The argument as it appears on a usage line."""
        if self.positional:
            return f"<{self.name}>"
        choice_text = self.get_choice_text()
        flag = self.short_flag or self.long_flag
        text = f"{flag} {choice_text}" if choice_text else f"{flag}"
        return f"[{text}]"

    def get_type_text(self) -> str:
        return type_name(self.type)

    def to_definition(self) -> dict[str, Any]:
        """Serializable description of the argument."""
        definition: dict[str, Any] = {
            "name": self.name,
            "kind": self.kind.value,
            "type": self.get_type_text(),
            "help": self.help,
        }
        if self.positional:
            definition["position"] = self.position
        else:
            definition["short"] = self.short
            if self.has_default:
                definition["default"] = self.default
        return definition
