# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the two node types of a command tree.

- `CommandGroup` is an internal node. It owns an ordered list of children
  (groups or commands), stored as indices into the tree's node arena.
- `Command` is a leaf. It carries the handler plus the ordered positional
  arguments and the flags the binder fills.

Nodes are created through the builder methods (`add_command_group()`,
`add_command()`) on `Program`, on the tree root, or on another group; each
method validates names immediately and raises a `BuildError` subclass on any
conflict.

Example:
    trading = program.add_command_group("trading", "Buy and sell")
    sell = trading.add_command("sell", "Sell an item", handle_sell)
    sell.add_positional_argument("name", "Buyer name")
    sell.add_positional_argument("price", "Asking price", type=float)
    sell.add_flag("discount", "Apply a discount", short="d", type=float, default=0.0)
    sell.add_flag("receipt", "Print a receipt", short="r")
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Literal, get_args, get_origin

from argtree.argument import MISSING, Argument, ArgumentKind
from argtree.exceptions import (
    BuildError,
    DuplicateAliasError,
    DuplicateNameError,
    InvalidDefaultError,
    InvalidHandlerError,
    InvalidNameError,
)
from argtree.logger import logger
from argtree.registry import type_name, value_type

if TYPE_CHECKING:
    from argtree.bag import ParameterBag
    from argtree.tree import CommandTree

Handler = Callable[["ParameterBag"], "int | None"]

HELP_FLAG = "help"
HELP_SHORT = "h"


def validate_name(name: Any, what: str) -> str:
    """Ensure `name` is usable as a node, argument or flag name."""
    if not isinstance(name, str) or not name:
        raise InvalidNameError(f"{what} name must be a non-empty string")
    if name.startswith("-"):
        raise InvalidNameError(f"{what} name '{name}' must not start with '-'")
    if any(char.isspace() for char in name):
        raise InvalidNameError(f"{what} name '{name}' must not contain whitespace")
    return name


def check_default(name: str, type_tag: Any, default: Any) -> Any:
    """
    Return `default` as a value of `type_tag`, or raise `InvalidDefaultError`.

    An `int` default of a float-typed flag is widened to `float`. Tags with a
    caller-supplied converter are not checked.
    """
    expected = value_type(type_tag)
    if default is MISSING or expected is None:
        return default
    if expected is float and type(default) is int:
        return float(default)
    valid = isinstance(default, expected) and not (
        expected is int and isinstance(default, bool)
    )
    if valid and get_origin(type_tag) is Literal:
        valid = default in get_args(type_tag)
    if not valid:
        raise InvalidDefaultError(
            f"Default {default!r} for flag '{name}' is not a {type_name(type_tag)} value"
        )
    return default


class Node:
    """Fields shared by groups and commands."""

    def __init__(
        self,
        tree: CommandTree,
        index: int,
        name: str,
        description: str = "",
        parent: int | None = None,
    ) -> None:
        self._tree = tree
        self.index = index
        self.name = name
        self.description = description
        self.parent = parent

    @property
    def path(self) -> tuple[str, ...]:
        """Names from the first level below the root down to this node."""
        names: list[str] = []
        node: Node | None = self
        while node is not None and node.parent is not None:
            names.append(node.name)
            node = self._tree.node(node.parent)
        return tuple(reversed(names))

    @property
    def is_group(self) -> bool:
        return False


class CommandGroup(Node):
    """
    Internal tree node grouping commands and nested groups under one name.

    Children keep declaration order, which is also the order they are listed in
    help output.
    """

    def __init__(
        self,
        tree: CommandTree,
        index: int,
        name: str,
        description: str = "",
        parent: int | None = None,
    ) -> None:
        super().__init__(tree, index, name, description, parent)
        self.child_indices: list[int] = []

    @property
    def is_group(self) -> bool:
        return True

    @property
    def children(self) -> list[CommandGroup | Command]:
        return [self._tree.node(index) for index in self.child_indices]

    def get_child(self, name: str) -> CommandGroup | Command | None:
        """Return the child called `name`, or None."""
        for index in self.child_indices:
            child = self._tree.node(index)
            if child.name == name:
                return child
        return None

    def _validate_child_name(self, name: str, what: str) -> str:
        self._tree.ensure_mutable()
        validate_name(name, what)
        if self.get_child(name) is not None:
            where = f"group '{self.name}'" if self.parent is not None else "the root"
            raise DuplicateNameError(f"'{name}' is already defined in {where}")
        return name

    def add_command_group(self, name: str, description: str = "") -> CommandGroup:
        """
        Add a nested group.

        Raises:
            InvalidNameError: If the name is empty or looks like a flag.
            DuplicateNameError: If a sibling already uses the name.
        """
        self._validate_child_name(name, "Group")
        group = self._tree.add_node(CommandGroup, name, description, parent=self.index)
        self.child_indices.append(group.index)
        logger.debug("Added group '%s' under '%s'.", name, self.name)
        return group

    def add_command(
        self, name: str, description: str = "", handler: Handler | None = None
    ) -> Command:
        """
        Add a command bound to `handler`.

        Raises:
            InvalidNameError: If the name is empty or looks like a flag.
            DuplicateNameError: If a sibling already uses the name.
            InvalidHandlerError: If `handler` is not callable.
        """
        self._validate_child_name(name, "Command")
        if handler is None or not callable(handler):
            raise InvalidHandlerError(f"Handler for command '{name}' must be callable")
        command = self._tree.add_node(
            Command, name, description, parent=self.index, handler=handler
        )
        self.child_indices.append(command.index)
        logger.debug("Added command '%s' under '%s'.", name, self.name)
        return command

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "group",
            "name": self.name,
            "description": self.description,
            "children": [child.to_dict() for child in self.children],
        }

    def __repr__(self) -> str:
        return (
            f"CommandGroup(name={self.name!r}, index={self.index}, "
            f"children={len(self.child_indices)})"
        )


class Command(Node):
    """
    Leaf node of the tree, bound to a handler.

    Positional arguments are bound in declaration order. Flags are matched by
    `--name` or `-s` anywhere among the tokens that follow the command name.
    """

    def __init__(
        self,
        tree: CommandTree,
        index: int,
        name: str,
        description: str = "",
        parent: int | None = None,
        handler: Handler | None = None,
    ) -> None:
        super().__init__(tree, index, name, description, parent)
        self.handler = handler
        self._positional: list[Argument] = []
        self._flags: dict[str, Argument] = {}
        self._flag_map: dict[str, Argument] = {}

    @property
    def positionals(self) -> tuple[Argument, ...]:
        return tuple(self._positional)

    @property
    def flags(self) -> tuple[Argument, ...]:
        return tuple(self._flags.values())

    @property
    def arguments(self) -> tuple[Argument, ...]:
        return self.positionals + self.flags

    def get_argument(self, name: str) -> Argument | None:
        """Return the positional or flag called `name`, or None."""
        if name in self._flags:
            return self._flags[name]
        return next((arg for arg in self._positional if arg.name == name), None)

    def match_flag(self, token: str) -> Argument | None:
        """Return the flag selected by `token` (`--long` or `-s`), or None."""
        return self._flag_map.get(token)

    def _check_argument_name(self, name: str, what: str) -> None:
        self._tree.ensure_mutable()
        validate_name(name, what)
        if self.get_argument(name) is not None:
            raise DuplicateNameError(
                f"Argument '{name}' is already defined on command '{self.name}'"
            )

    def add_positional_argument(
        self, name: str, help: str = "", type: Any = str
    ) -> Command:
        """
        Declare the next mandatory positional argument.

        Args:
            name (str): Bag key for the value.
            help (str): Help text for usage listings.
            type (Any): Type tag used for conversion (default `str`).

        Returns:
            Command: `self`, so declarations can be chained.
        """
        self._check_argument_name(name, "Positional argument")
        argument = Argument(
            name=name,
            kind=ArgumentKind.POSITIONAL,
            type=type,
            help=help,
            position=len(self._positional),
        )
        self._positional.append(argument)
        return self

    def add_flag(
        self,
        name: str,
        help: str = "",
        short: str | None = None,
        type: Any = None,
        default: Any = MISSING,
    ) -> Command:
        """
        Declare an optional flag.

        Without a `type` the flag is a boolean switch: `--name` sets it to True and
        it defaults to False. With a `type` the flag consumes the next token as its
        value; it is left out of the bag unless supplied, or unless a `default` is
        given.

        Args:
            name (str): Long alias (`--name`) and bag key.
            help (str): Help text for usage listings.
            short (str | None): Single-character short alias (`-s`).
            type (Any): Type tag of the value, or None for a switch.
            default (Any): Value used when the flag is not supplied.

        Returns:
            Command: `self`, so declarations can be chained.

        Raises:
            DuplicateAliasError: If the long or short alias is taken, or reserved.
            BuildError: If a default is given for a switch.
            InvalidDefaultError: If the default is not a value of `type`.
        """
        self._check_argument_name(name, "Flag")
        if short is not None:
            if not isinstance(short, str) or len(short) != 1 or short == "-":
                raise InvalidNameError(
                    f"Short alias for flag '{name}' must be a single character"
                )
            if short.isspace():
                raise InvalidNameError(
                    f"Short alias for flag '{name}' must not be whitespace"
                )
        if self._tree.help_enabled:
            if name == HELP_FLAG:
                raise DuplicateAliasError("Flag '--help' is reserved for help output")
            if short == HELP_SHORT:
                raise DuplicateAliasError("Flag '-h' is reserved for help output")

        if type is None:
            if default is not MISSING:
                raise BuildError(
                    f"Flag '{name}' is a boolean switch and cannot declare a default"
                )
            argument = Argument(
                name=name,
                kind=ArgumentKind.STORE_TRUE,
                type=bool,
                help=help,
                short=short,
                default=False,
            )
        else:
            argument = Argument(
                name=name,
                kind=ArgumentKind.STORE,
                type=type,
                help=help,
                short=short,
                default=check_default(name, type, default),
            )

        for flag in argument.flags:
            if flag in self._flag_map:
                existing = self._flag_map[flag]
                raise DuplicateAliasError(
                    f"Flag '{flag}' is already used by argument '{existing.name}'"
                )
        self._flags[name] = argument
        for flag in argument.flags:
            self._flag_map[flag] = argument
        return self

    def get_usage(self, program: str | None = None) -> str:
        """Plain usage line, e.g. `prog trading sell <name> <price> [-d DISCOUNT]`."""
        parts = [program] if program else []
        parts.extend(self.path)
        parts.extend(arg.get_usage_text() for arg in self._positional)
        parts.extend(arg.get_usage_text() for arg in self._flags.values())
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "command",
            "name": self.name,
            "description": self.description,
            "positionals": [arg.to_definition() for arg in self._positional],
            "flags": [arg.to_definition() for arg in self._flags.values()],
        }

    def __repr__(self) -> str:
        return (
            f"Command(name={self.name!r}, index={self.index}, "
            f"positional={len(self._positional)}, flags={len(self._flags)})"
        )
