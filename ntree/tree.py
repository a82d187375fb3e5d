"""A generic N-ary tree whose nodes keep an ordered list of child slots."""

from __future__ import annotations

import sys
from collections import deque
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

__all__ = ["TreeError", "TreeNode", "GenericTree"]


class TreeError(RuntimeError):
    """Raised when a tree operation is used in a way the tree cannot honour."""


class TreeNode(Generic[T]):
    """A node holding one data item and an ordered list of child slots.

    A child slot may hold ``None`` after a subtree has been deleted; such
    empty slots stay until :meth:`GenericTree.compress` removes them.
    """

    __slots__ = ("data", "parent", "children")

    def __init__(self, data: T, parent: Optional["TreeNode[T]"] = None) -> None:
        self.data: T = data
        self.parent: Optional[TreeNode[T]] = parent
        self.children: list[Optional[TreeNode[T]]] = []

    def add_child(self, data: T) -> "TreeNode[T]":
        """Append a new rightmost child holding ``data`` and return it."""
        child = TreeNode(data, self)
        self.children.append(child)
        return child

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r})"


def _label(node: Optional[TreeNode[Any]]) -> str:
    return "[null]" if node is None else str(node.data)


class GenericTree(Generic[T]):
    """An N-ary tree with an optional root node.

    ``GenericTree()`` makes an empty tree; ``GenericTree(data)`` makes a tree
    whose root holds ``data``.
    """

    def __init__(self, *args: T, show_debug_messages: bool = False) -> None:
        if len(args) > 1:
            raise TypeError(
                f"GenericTree takes at most one root value ({len(args)} given)"
            )
        self.show_debug_messages = show_debug_messages
        self._root: Optional[TreeNode[T]] = None
        if args:
            self.create_root(args[0])

    def create_root(self, root_data: T) -> TreeNode[T]:
        """Create the root node; the tree must not already have one."""
        if self._root is not None:
            raise TreeError("Tried to createRoot when root already exists")
        self._root = TreeNode(root_data)
        return self._root

    @property
    def root(self) -> Optional[TreeNode[T]]:
        """The root node, or ``None`` when the tree is empty."""
        return self._root

    def _debug(self, prefix: str, node: Optional[TreeNode[T]]) -> None:
        if self.show_debug_messages:
            print(f"{prefix}{_label(node)}", file=sys.stderr)

    def _explore(self, start: TreeNode[T]) -> Iterator[TreeNode[T]]:
        """Yield the nodes below ``start`` depth first, rightmost branch first."""
        pending: list[Optional[TreeNode[T]]] = [start]
        while pending:
            node = pending.pop()
            self._debug("Exploring node: ", node)
            if node is None:
                continue
            yield node
            pending.extend(node.children)

    def delete_subtree(self, target: Optional[TreeNode[T]]) -> None:
        """Remove ``target`` and all its descendants from the tree.

        The parent's slot for ``target`` is left holding ``None``. Deleting
        the root empties the tree. ``None`` is accepted and does nothing.
        """
        if target is None:
            return

        top = target
        while top.parent is not None:
            top = top.parent
        if top is not self._root:
            raise TreeError("Tried to delete a node from a different tree")

        whole_tree = target is self._root

        parent = target.parent
        if parent is not None:
            for slot, child in enumerate(parent.children):
                if child is target:
                    parent.children[slot] = None
                    break
            else:
                raise TreeError(
                    "Target node to delete was not listed as a child of its parent"
                )

        doomed = list(self._explore(target))
        for node in reversed(doomed):
            self._debug("Deleting node: ", node)
            node.children = []
            node.parent = None

        if whole_tree:
            self._root = None

    def compress(self) -> None:
        """Drop every empty (``None``) child slot throughout the tree."""
        if self._root is None:
            return
        queue: deque[TreeNode[T]] = deque([self._root])
        while queue:
            node = queue.popleft()
            node.children = [child for child in node.children if child is not None]
            queue.extend(node.children)

    def clear(self) -> None:
        """Delete every node, leaving an empty tree."""
        self.delete_subtree(self._root)
        if self._root is not None:
            raise TreeError(
                "clear() detected that deleteSubtree() had not reset rootNodePtr"
            )