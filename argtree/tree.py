# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
`CommandTree` stores every group and command of a program in a flat arena.

Nodes refer to each other by index: a group keeps the ordered indices of its
children and every node keeps the index of its parent. Index 0 is always the
unnamed root group. The tree is built once at startup and frozen the first
time it is parsed; later changes raise `TreeFrozenError`.
"""
from __future__ import annotations

from typing import Any, Iterator, TypeVar

from argtree.command import Command, CommandGroup, Node
from argtree.exceptions import TreeFrozenError

NodeT = TypeVar("NodeT", bound=Node)


class CommandTree:
    """
    Arena of command tree nodes.

    Attributes:
        nodes (list[CommandGroup | Command]): All nodes, root first.
        help_enabled (bool): Whether `-h` / `--help` are reserved for help output.
    """

    def __init__(self, help_enabled: bool = True) -> None:
        self.help_enabled: bool = help_enabled
        self.nodes: list[CommandGroup | Command] = []
        self._frozen: bool = False
        self.root: CommandGroup = self.add_node(CommandGroup, "", "")

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Mark the tree read-only. Called when parsing starts."""
        self._frozen = True

    def ensure_mutable(self) -> None:
        if self._frozen:
            raise TreeFrozenError("The command tree cannot change once parsing starts")

    def add_node(
        self,
        node_type: type[NodeT],
        name: str,
        description: str = "",
        parent: int | None = None,
        **kwargs: Any,
    ) -> NodeT:
        self.ensure_mutable()
        node = node_type(
            self, len(self.nodes), name, description, parent=parent, **kwargs
        )
        self.nodes.append(node)  # type: ignore[arg-type]
        return node

    def node(self, index: int) -> CommandGroup | Command:
        return self.nodes[index]

    def commands(self) -> Iterator[Command]:
        """Yield every command in declaration order."""
        for node in self.nodes:
            if isinstance(node, Command):
                yield node

    def find(self, *path: str) -> CommandGroup | Command | None:
        """Follow `path` from the root; returns None if any name is missing."""
        node: CommandGroup | Command = self.root
        for name in path:
            if not isinstance(node, CommandGroup):
                return None
            child = node.get_child(name)
            if child is None:
                return None
            node = child
        return node

    def to_dict(self) -> dict[str, Any]:
        """Serialize the tree (without handlers) for inspection and tests."""
        return self.root.to_dict()

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        commands = sum(1 for _ in self.commands())
        return f"CommandTree(nodes={len(self.nodes)}, commands={commands})"
