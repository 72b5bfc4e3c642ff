# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolver: walks the command tree along the leading tokens to find the command.

Starting at the root, each token is matched by exact name against the children
of the current group. A group match descends; a command match stops the walk
and every remaining token is left for the binder.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from argtree.command import HELP_FLAG, HELP_SHORT, Command, CommandGroup
from argtree.exceptions import MissingCommandError, UnknownCommandError
from argtree.logger import logger
from argtree.signals import HelpSignal
from argtree.tree import CommandTree

HELP_TOKENS = (f"--{HELP_FLAG}", f"-{HELP_SHORT}")


@dataclass(frozen=True)
class Resolution:
    """Outcome of a successful walk."""

    command: Command
    remaining: tuple[str, ...]
    path: tuple[str, ...]


def resolve(tree: CommandTree, tokens: Sequence[str]) -> Resolution:
    """
    Find the command named by the leading tokens.

    Args:
        tree (CommandTree): The program's command tree.
        tokens (Sequence[str]): Tokens after the program name.

    Returns:
        Resolution: The command, the tokens left for the binder, and the path taken.

    Raises:
        UnknownCommandError: If a token names no child of the current group.
        MissingCommandError: If the tokens end while still at a group.
        HelpSignal: If a help token is found while still at a group.
    """
    node: CommandGroup = tree.root
    path: list[str] = []
    for position, token in enumerate(tokens):
        if tree.help_enabled and token in HELP_TOKENS:
            logger.debug("Help requested at group '%s'.", node.name or "<root>")
            raise HelpSignal(node)
        child = node.get_child(token)
        if child is None:
            where = f"in '{' '.join(path)}'" if path else "at the top level"
            raise UnknownCommandError(
                f"Unknown command or group '{token}' {where}", node=node, token=token
            )
        path.append(child.name)
        if isinstance(child, Command):
            logger.debug("Resolved command '%s'.", " ".join(path))
            return Resolution(
                command=child,
                remaining=tuple(tokens[position + 1 :]),
                path=tuple(path),
            )
        logger.debug("Descending into group '%s'.", child.name)
        node = child

    where = f"'{' '.join(path)}'" if path else "the top level"
    raise MissingCommandError(f"Expected a command after {where}", node=node)
