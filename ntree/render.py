"""Vertical text rendering of a :class:`~ntree.tree.GenericTree`."""

from __future__ import annotations

import io
import sys
from typing import Any, Optional, TextIO

from ntree.tree import GenericTree, TreeNode

__all__ = ["write_tree", "format_tree"]

_EMPTY = "[empty tree]"
_NULL = "[null]"


def _label(node: Optional[TreeNode[Any]]) -> str:
    return _NULL if node is None else str(node.data)


def _margin_rows(margin: list[bool]) -> str:
    """Return the two margin rows drawn before a node's data."""
    if not margin:
        return ""
    *inner, _last = margin
    prefix = "".join("|  " if stem else "   " for stem in inner)
    # The last column always holds a stem: a plain "|" row for spacing,
    # then the "|_ " row that leads into the data item.
    symbol = "|" if margin[-1] else " "
    spacer = f"{prefix}{symbol}\n" if margin[-1] else f"{prefix}\n"
    return f"{spacer}{prefix}{symbol}_ "


def write_tree(
    tree: GenericTree[Any],
    stream: Optional[TextIO] = None,
    debug_stream: Optional[TextIO] = None,
) -> TextIO:
    """Write ``tree`` to ``stream`` as vertical text art and return the stream.

    Leftmost children appear first, at the top. When the tree's
    ``show_debug_messages`` flag is set, each node is reported instead as
    ``Depth: N`` on ``stream`` followed by `` Data: X`` on ``debug_stream``.
    """
    out = sys.stdout if stream is None else stream
    err = sys.stderr if debug_stream is None else debug_stream

    root = tree.root
    if root is None:
        out.write(f"{_EMPTY}\n")
        return out

    pending: list[tuple[Optional[TreeNode[Any]], int, list[bool], list[bool]]] = [
        (root, 0, [], [])
    ]
    while pending:
        node, depth, margin, trailing = pending.pop()

        if tree.show_debug_messages:
            out.write(f"Depth: {depth}")
            err.write(f" Data: {_label(node)}\n")
        else:
            out.write(f"{_margin_rows(margin)}{_label(node)}\n")

        if node is None or not node.children:
            continue

        last = len(node.children) - 1
        for position in range(last, -1, -1):
            child = node.children[position]
            pending.append(
                (
                    child,
                    depth + 1,
                    trailing + [True],
                    trailing + [position != last],
                )
            )

    return out


def format_tree(tree: GenericTree[Any]) -> str:
    """Return the text that :func:`write_tree` would write for ``tree``."""
    buffer = io.StringIO()
    write_tree(tree, buffer)
    return buffer.getvalue()