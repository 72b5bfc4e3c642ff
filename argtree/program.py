# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main class for declaring and running an argtree program.

`Program` owns the command tree, the conversion registry and the help renderer,
and acts as the dispatcher:

- `parse()` resolves the tokens to a command and binds its arguments, raising
  on malformed input.
- `run()` calls `parse()`, renders help or diagnostics when it fails, and
  otherwise calls the command's handler with the parameter bag, returning the
  handler's status.
- `main()` runs and exits the process with that status.

Example:
    program = Program("shop")
    trading = program.add_command_group("trading", "Buy and sell")
    sell = trading.add_command("sell", "Sell an item", handle_sell)
    sell.add_positional_argument("name").add_positional_argument("price", type=float)

    if __name__ == "__main__":
        program.main()
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, NoReturn, Sequence

from rich.console import Console

from argtree.bag import ParameterBag
from argtree.binder import Binder
from argtree.command import Command, CommandGroup, Handler
from argtree.config import ProgramSettings
from argtree.exceptions import UnknownTypeError, UsageError
from argtree.logger import logger
from argtree.registry import ConversionRegistry, Converter, type_name
from argtree.renderer import HelpRenderer
from argtree.resolver import resolve
from argtree.signals import HelpSignal
from argtree.tree import CommandTree
from argtree.utils import get_program_invocation


@dataclass(frozen=True)
class Invocation:
    """A fully resolved and bound command, ready to dispatch."""

    command: Command
    bag: ParameterBag
    path: tuple[str, ...]

    def __call__(self) -> int:
        assert self.command.handler is not None, "commands always carry a handler"
        status = self.command.handler(self.bag)
        return 0 if status is None else int(status)


class Program:
    """
    Root of an argtree command-line interface.

    Args:
        program (str | None): Program name on usage lines.
        description (str): Text shown above the top-level listing.
        settings (ProgramSettings | None): Full settings object.
        registry (ConversionRegistry | None): Converters; built-ins when omitted.
        console (Console | None): Console for help and error output.
        **overrides: Individual settings (`width`, `error_exit_code`, ...) that take
            precedence over `settings`.
    """

    def __init__(
        self,
        program: str | None = None,
        description: str = "",
        *,
        settings: ProgramSettings | None = None,
        registry: ConversionRegistry | None = None,
        console: Console | None = None,
        **overrides: Any,
    ) -> None:
        settings = settings or ProgramSettings()
        if program is not None:
            overrides.setdefault("program", program)
        if description:
            overrides.setdefault("description", description)
        if overrides:
            settings = ProgramSettings(**{**settings.model_dump(), **overrides})
        self.settings: ProgramSettings = settings
        self.registry: ConversionRegistry = registry or ConversionRegistry()
        self.tree: CommandTree = CommandTree(help_enabled=settings.help_enabled)
        self.tree.root.description = settings.description
        self.binder: Binder = Binder(self.registry, help_enabled=settings.help_enabled)
        self.renderer: HelpRenderer = HelpRenderer(
            console=console,
            width=settings.width,
            program=settings.program or get_program_invocation(),
            help_enabled=settings.help_enabled,
        )

    @property
    def root(self) -> CommandGroup:
        return self.tree.root

    def add_command_group(self, name: str, description: str = "") -> CommandGroup:
        """Add a top-level group."""
        return self.tree.root.add_command_group(name, description)

    def add_command(
        self, name: str, description: str = "", handler: Handler | None = None
    ) -> Command:
        """Add a top-level command."""
        return self.tree.root.add_command(name, description, handler)

    def register_type(self, type_tag: Any, converter: Converter) -> None:
        """Register a converter for a custom type tag."""
        self.tree.ensure_mutable()
        self.registry.register(type_tag, converter)

    def find(self, *path: str) -> CommandGroup | Command | None:
        return self.tree.find(*path)

    def check_types(self) -> None:
        """
        Ensure every declared argument has a registered converter.

        Raises:
            UnknownTypeError: For the first argument whose type tag is unknown.
        """
        for command in self.tree.commands():
            for argument in command.arguments:
                if argument.type not in self.registry:
                    raise UnknownTypeError(
                        f"Argument '{argument.name}' of '{' '.join(command.path)}' "
                        f"has type '{type_name(argument.type)}' with no registered "
                        "converter"
                    )

    def parse(self, tokens: Sequence[str]) -> Invocation:
        """
        Resolve and bind `tokens` without dispatching.

        The first call checks the finished tree's types and freezes it.

        Raises:
            UnknownTypeError: An argument's type tag has no converter.
            UsageError: Any resolution, binding or conversion failure.
            HelpSignal: `-h` / `--help` was given.
        """
        if not self.tree.frozen:
            self.check_types()
            self.tree.freeze()
        tokens = [str(token) for token in tokens]
        logger.debug("Parsing tokens: %s", tokens)
        resolution = resolve(self.tree, tokens)
        bag = self.binder.bind(resolution.command, resolution.remaining)
        return Invocation(command=resolution.command, bag=bag, path=resolution.path)

    def run(self, tokens: Sequence[str] | None = None) -> int:
        """
        Parse `tokens` (default `sys.argv[1:]`) and dispatch.

        Returns:
            int: The handler's status, or `help_exit_code` / `error_exit_code` when
            help or a diagnostic was rendered instead.
        """
        if tokens is None:
            tokens = sys.argv[1:]
        try:
            invocation = self.parse(tokens)
        except HelpSignal as signal:
            self.renderer.render_help(signal.node)
            return self.settings.help_exit_code
        except UsageError as error:
            logger.info("Usage error (%s): %s", error.kind, error)
            self.renderer.render_error(error)
            return self.settings.error_exit_code

        logger.info("Dispatching '%s'.", " ".join(invocation.path))
        status = invocation()
        logger.debug("'%s' returned %d.", " ".join(invocation.path), status)
        return status

    def main(self, tokens: Sequence[str] | None = None) -> NoReturn:
        """Run and exit the process with the resulting status."""
        sys.exit(self.run(tokens))

    def __repr__(self) -> str:
        return f"Program(program={self.settings.program!r}, tree={self.tree!r})"
