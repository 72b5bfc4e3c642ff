# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help and error rendering using Rich.

`HelpRenderer` is used by `Program.run()` in two situations:

- A help token (`-h` / `--help`) was given: `render_help()` lists the children of
  a group, or the usage, positionals and flags of a command.
- Resolution or binding failed: `render_error()` prints a diagnostic naming the
  failure kind, then the same listing for the group or command where parsing
  stopped, so the user can see the valid next candidates.

All output is laid out within `width` columns.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from argtree.argument import Argument
from argtree.command import HELP_FLAG, HELP_SHORT, Command, CommandGroup
from argtree.console import console as default_console
from argtree.exceptions import (
    BindingError,
    ConversionError,
    ResolutionError,
    UsageError,
)
from argtree.logger import logger
from argtree.themes import get_theme

NAME_COLUMN_WIDTH = 30


class HelpRenderer:
    """
    Formats diagnostics and candidate listings.

    Args:
        console (Console | None): Target console. Defaults to the shared console.
        width (int): Maximum number of columns used for the layout.
        program (str | None): Program name shown on usage lines.
        help_enabled (bool): List `-h, --help` among a command's flags.
    """

    def __init__(
        self,
        console: Console | None = None,
        width: int = 80,
        program: str | None = None,
        help_enabled: bool = True,
    ) -> None:
        self.console: Console = console or default_console
        self.width: int = width
        self.program: str | None = program
        self.help_enabled: bool = help_enabled
        self.theme: Theme = get_theme()

    def _print(self, renderable: object = "", **kwargs) -> None:
        with self.console.use_theme(self.theme):
            self.console.print(renderable, width=self.width, **kwargs)

    def _usage_prefix(self, node: CommandGroup | Command) -> str:
        parts = [self.program] if self.program else []
        parts.extend(node.path)
        return " ".join(parts)

    def _listing_table(self) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(no_wrap=True, min_width=2)
        table.add_column(
            no_wrap=True, max_width=min(NAME_COLUMN_WIDTH, self.width // 2)
        )
        table.add_column(overflow="fold")
        return table

    def render_error(self, error: UsageError) -> None:
        """Print `error` followed by the candidates for the node where it happened."""
        logger.debug("Rendering %s: %s", type(error).__name__, error)
        self._print(
            f"[argtree.error]❌ {escape(error.kind)}:[/] {escape(str(error))}"
        )
        if isinstance(error, ResolutionError):
            self._print()
            self.render_group(error.node)
        elif isinstance(error, BindingError):
            self._print()
            self.render_command(error.command)
        elif isinstance(error, ConversionError) and error.command is not None:
            self._print()
            self.render_command(error.command)

    def render_help(self, node: CommandGroup | Command) -> None:
        """Print the listing for a group or a command."""
        if isinstance(node, Command):
            self.render_command(node)
        else:
            self.render_group(node)

    def render_group(self, group: CommandGroup) -> None:
        """List the commands and groups directly under `group`."""
        prefix = self._usage_prefix(group)
        usage = f"{prefix} <command> ..." if prefix else "<command> ..."
        self._print(f"[bold]usage:[/bold] {escape(usage)}")
        if group.description:
            self._print()
            self._print(escape(group.description))

        children = group.children
        if not children:
            self._print()
            self._print("No commands available.", style="argtree.dim")
            return

        groups = [child for child in children if isinstance(child, CommandGroup)]
        commands = [child for child in children if isinstance(child, Command)]
        if groups:
            self._print()
            self._print("[bold]groups:[/bold]")
            table = self._listing_table()
            for child in groups:
                table.add_row(
                    "",
                    f"[argtree.group]{escape(child.name)}[/]",
                    escape(child.description),
                )
            self._print(table)
        if commands:
            self._print()
            self._print("[bold]commands:[/bold]")
            table = self._listing_table()
            for child in commands:
                table.add_row(
                    "",
                    f"[argtree.command]{escape(child.name)}[/]",
                    escape(child.description),
                )
            self._print(table)

    def _flag_text(self, argument: Argument) -> str:
        flags = ", ".join(
            flag for flag in (argument.short_flag, argument.long_flag) if flag
        )
        choice_text = argument.get_choice_text()
        return f"{flags} {choice_text}" if choice_text else flags

    def _flag_help(self, argument: Argument) -> str:
        help_text = argument.help
        if not argument.is_boolean:
            details = [argument.get_type_text()]
            if argument.has_default:
                details.append(f"default: {argument.default!r}")
            help_text = f"{help_text} ({', '.join(details)})".strip()
        return help_text

    def render_command(self, command: Command) -> None:
        """Print usage, positional arguments and flags of `command`."""
        usage = command.get_usage(self.program)
        self._print(f"[bold]usage:[/bold] {escape(usage)}")
        if command.description:
            self._print()
            self._print(escape(command.description))

        if command.positionals:
            self._print()
            self._print("[bold]positional:[/bold]")
            table = self._listing_table()
            for argument in command.positionals:
                help_text = f"{argument.help} ({argument.get_type_text()})".strip()
                table.add_row(
                    "",
                    f"[argtree.positional]{escape(argument.name)}[/]",
                    escape(help_text),
                )
            self._print(table)

        if command.flags or self.help_enabled:
            self._print()
            self._print("[bold]options:[/bold]")
            table = self._listing_table()
            if self.help_enabled:
                table.add_row(
                    "",
                    f"[argtree.flag]-{HELP_SHORT}, --{HELP_FLAG}[/]",
                    "Show this help message.",
                )
            for argument in command.flags:
                table.add_row(
                    "",
                    f"[argtree.flag]{escape(self._flag_text(argument))}[/]",
                    escape(self._flag_help(argument)),
                )
            self._print(table)
