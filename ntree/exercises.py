"""Helpers built on :class:`~ntree.tree.GenericTree`.

Includes a factory for a fixed sample tree, null-slot counters and a
level-order traversal.
"""

from __future__ import annotations

import sys
from collections import deque
from typing import Any, Optional, TextIO, TypeVar

from ntree.render import write_tree
from ntree.tree import GenericTree, TreeNode

T = TypeVar("T")

__all__ = [
    "tree_factory",
    "count_null_children_recursive",
    "count_null_children_iterative",
    "traverse_levels",
    "tree_factory_demo",
    "traversal_demo",
]

_RULE = "-" * 30


def tree_factory(tree: GenericTree[int]) -> None:
    """Replace the contents of ``tree`` with the sample integer tree.

    The result, as rendered::

        4
        |
        |_ 8
        |  |
        |  |_ 16
        |  |  |
        |  |  |_ 42
        |  |
        |  |_ 23
        |
        |_ 15
    """
    tree.clear()
    root = tree.create_root(4)
    eight = root.add_child(8)
    eight.add_child(16).add_child(42)
    eight.add_child(23)
    root.add_child(15)


def count_null_children_recursive(subtree_root: Optional[TreeNode[Any]]) -> int:
    """Count the empty child slots in the subtree rooted at ``subtree_root``.

    An empty ``subtree_root`` counts as one empty slot itself.
    """
    if subtree_root is None:
        return 1
    return sum(count_null_children_recursive(child) for child in subtree_root.children)


def count_null_children_iterative(subtree_root: Optional[TreeNode[Any]]) -> int:
    """Count empty child slots like :func:`count_null_children_recursive`, without recursion."""
    count = 0
    pending: list[Optional[TreeNode[Any]]] = [subtree_root]
    while pending:
        node = pending.pop()
        if node is None:
            count += 1
            continue
        pending.extend(node.children)
    return count


def traverse_levels(tree: GenericTree[T]) -> list[T]:
    """Return the tree's data in level order, children left to right.

    Empty child slots contribute nothing.
    """
    root = tree.root
    if root is None:
        return []
    results: list[T] = []
    queue: deque[TreeNode[T]] = deque([root])
    while queue:
        node = queue.popleft()
        results.append(node.data)
        queue.extend(child for child in node.children if child is not None)
    return results


def _build_example_tree1() -> GenericTree[str]:
    tree: GenericTree[str] = GenericTree("A")
    node_a = tree.root
    assert node_a is not None
    node_b = node_a.add_child("B")
    node_b.add_child("C")
    node_b.add_child("D")
    node_e = node_a.add_child("E")
    node_e.add_child("F")
    node_e.add_child("G")
    return tree


def _build_example_tree2() -> GenericTree[str]:
    tree: GenericTree[str] = GenericTree("A")
    node_a = tree.root
    assert node_a is not None
    node_a.add_child("B").add_child("C")
    node_d = node_a.add_child("D")
    node_e = node_d.add_child("E")
    node_e.add_child("F")
    node_e.add_child("G").add_child("H")
    node_d.add_child("I")
    node_a.add_child("J")
    node_l = node_a.add_child("K").add_child("L")
    node_l.add_child("M")
    return tree


def tree_factory_demo(stream: Optional[TextIO] = None) -> None:
    """Build the sample tree with :func:`tree_factory` and print it."""
    out = sys.stdout if stream is None else stream
    out.write(f"\n{_RULE}\n")
    out.write("EXERCISE 1: treeFactoryTest\n")
    out.write("The output should match what you see in the code comments\n\n")
    tree: GenericTree[int] = GenericTree(9999)
    tree_factory(tree)
    write_tree(tree, out)
    out.write("\n")


def _report(out: TextIO, title: str, expected: str, results: list[Any]) -> None:
    out.write(f"{title} Expected output:\n{expected}\n")
    out.write("Your traverseLevels output:\n")
    out.write("".join(f"{item} " for item in results))
    out.write("\n\n")


def traversal_demo(stream: Optional[TextIO] = None) -> None:
    """Run :func:`traverse_levels` on three sample trees and print the results."""
    out = sys.stdout if stream is None else stream
    out.write(f"\n{_RULE}\n")
    out.write("EXERCISE 2: traversalTest\n")
    out.write("Testing your traverseLevels function\n\n")

    _report(
        out,
        "[Test 1]",
        "A B E C D F G",
        traverse_levels(_build_example_tree1()),
    )
    _report(
        out,
        "[Test 2]",
        "A B D J K C E I L F G M H",
        traverse_levels(_build_example_tree2()),
    )

    tree3: GenericTree[int] = GenericTree(9999)
    tree_factory(tree3)
    _report(out, "[Test 3]", "4 8 15 16 23 42", traverse_levels(tree3))