# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by argtree.

Signals interrupt parsing without being treated as errors. They inherit from
`FlowSignal`, a subclass of `BaseException`, so they pass through ordinary
`except Exception` blocks untouched.

Signals:
- HelpSignal: An explicit help request (`-h` / `--help`) was found.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argtree.command import Command, CommandGroup


class FlowSignal(BaseException):
    """Base class for all flow control signals in argtree.

    These are not errors. They carry control back to `Program.run()`.
    """


class HelpSignal(FlowSignal):
    """Raised to display help for the group or command in `node`."""

    def __init__(
        self,
        node: Command | CommandGroup,
        message: str = "Help signal received.",
    ):
        super().__init__(message)
        self.node = node
