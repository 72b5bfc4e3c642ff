# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argtree.

Errors fall into two families:

- Build-time errors (`BuildError` and friends) are programmer mistakes found while
  the command tree is being declared, or at the latest when the first parse checks
  the finished tree. They are never caught by argtree itself.
- Usage errors (`UsageError` and friends) describe malformed user input. They are
  raised by the resolver, the binder and the conversion registry, and are caught
  by `Program.run()`, which renders a diagnostic instead of crashing.

Exception Hierarchy:
- ArgTreeError
    ├── BuildError
    │   ├── InvalidNameError
    │   ├── DuplicateNameError
    │   ├── DuplicateAliasError
    │   ├── InvalidHandlerError
    │   ├── InvalidDefaultError
    │   ├── UnknownTypeError
    │   └── TreeFrozenError
    ├── ConfigError
    ├── BagAccessError
    │   ├── MissingValueError
    │   └── ValueTypeError
    └── UsageError
        ├── ResolutionError
        │   ├── UnknownCommandError
        │   └── MissingCommandError
        ├── BindingError
        │   ├── MissingPositionalError
        │   ├── ExtraArgumentError
        │   ├── UnrecognizedFlagError
        │   └── MissingFlagValueError
        └── ConversionError
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from argtree.argument import Argument
    from argtree.command import Command, CommandGroup


class ArgTreeError(Exception):
    """Base exception for argtree."""


class BuildError(ArgTreeError):
    """Raised when the command tree is declared incorrectly."""


class InvalidNameError(BuildError):
    """Raised when a group, command, argument or alias name is not usable."""


class DuplicateNameError(BuildError):
    """Raised when two siblings (or two arguments of a command) share a name."""


class DuplicateAliasError(BuildError):
    """Raised when a flag alias is already taken within the same command."""


class InvalidHandlerError(BuildError):
    """Raised when a command handler is not callable."""


class InvalidDefaultError(BuildError):
    """Raised when a flag default is not a value of the flag's type."""


class UnknownTypeError(BuildError):
    """Raised when no converter is registered for a type tag."""


class TreeFrozenError(BuildError):
    """Raised when the tree is modified after parsing has started."""


class ConfigError(ArgTreeError):
    """Raised when a declarative tree file cannot be loaded."""


class BagAccessError(ArgTreeError):
    """Raised when a parameter bag is read in a way its contents do not allow."""


class MissingValueError(BagAccessError, KeyError):
    """Raised when reading a name that is not present in the bag."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ValueTypeError(BagAccessError, TypeError):
    """Raised when a bag value is read as a different type than it was bound with."""


class UsageError(ArgTreeError):
    """Base class for errors caused by malformed user input."""

    kind: str = "usage error"


class ResolutionError(UsageError):
    """Raised when the token stream does not lead to a command."""

    kind = "unknown command"

    def __init__(
        self, message: str, node: CommandGroup, token: str | None = None
    ) -> None:
        super().__init__(message)
        self.node = node
        self.token = token


class UnknownCommandError(ResolutionError):
    """Raised when a token does not name any child of the current group."""

    kind = "unknown command"


class MissingCommandError(ResolutionError):
    """Raised when the tokens run out before a command is reached."""

    kind = "missing command"


class BindingError(UsageError):
    """Raised when the remaining tokens do not fit the command's arguments."""

    kind = "binding error"

    def __init__(
        self,
        message: str,
        command: Command,
        argument: Argument | None = None,
        token: str | None = None,
    ) -> None:
        super().__init__(message)
        self.command = command
        self.argument = argument
        self.token = token


class MissingPositionalError(BindingError):
    """Raised when fewer positional tokens than declared positionals were given."""

    kind = "missing positional argument"


class ExtraArgumentError(BindingError):
    """Raised when more positional tokens than declared positionals were given."""

    kind = "unexpected extra argument"


class UnrecognizedFlagError(BindingError):
    """Raised when a flag token matches no flag of the command."""

    kind = "unrecognized flag"


class MissingFlagValueError(BindingError):
    """Raised when a typed flag is the last token and has no value."""

    kind = "missing flag value"


class ConversionError(UsageError):
    """Raised when raw text cannot be converted to the declared type."""

    kind = "invalid value"

    def __init__(
        self,
        message: str,
        type_tag: Any,
        raw: str,
        argument: Argument | None = None,
        command: Command | None = None,
    ) -> None:
        super().__init__(message)
        self.type_tag = type_tag
        self.raw = raw
        self.argument = argument
        self.command = command
