"""Command that demonstrates building, printing, pruning and traversing trees."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from ntree.exercises import (
    count_null_children_iterative,
    count_null_children_recursive,
    traversal_demo,
    tree_factory_demo,
)
from ntree.render import write_tree
from ntree.tree import GenericTree

__all__ = ["example_tree1", "example_tree2", "main"]

_RULE = "-" * 30


def example_tree1(stream: Optional[TextIO] = None) -> None:
    """Build a small tree and print it normally, then in debug form.

    Debug details and the node-by-node teardown go to standard error.
    """
    out = sys.stdout if stream is None else stream
    out.write(f"\n{_RULE}\nEXAMPLE TREE 1\n\n")

    tree: GenericTree[str] = GenericTree("A")
    node_a = tree.root
    assert node_a is not None
    node_b = node_a.add_child("B")
    node_b.add_child("C")
    node_b.add_child("D")
    node_e = node_a.add_child("E")
    node_e.add_child("F")
    node_e.add_child("G")

    out.write(
        "Here's a small example tree. (The leftmost branches are displayed\n"
        " highest in the vertical display format for the terminal.)\n"
    )
    write_tree(tree, out, sys.stderr)
    out.write("\n")

    out.write("Debug display of the depth information per node:\n")
    tree.show_debug_messages = True
    write_tree(tree, out, sys.stderr)
    out.write("\n")

    out.write(
        "Now, when the tree goes out of scope and is destroyed, you can see the order\n"
        " in which the nodes are explored and destroyed for cleanup:\n"
    )
    tree.clear()


def example_tree2(stream: Optional[TextIO] = None) -> None:
    """Build a larger tree, delete two subtrees, count empty slots and compress."""
    out = sys.stdout if stream is None else stream
    out.write(f"\n{_RULE}\nEXAMPLE TREE 2\n\n")
    out.write("Here's a larger tree:\n\n")

    tree: GenericTree[str] = GenericTree("X")
    tree.clear()
    node_a = tree.create_root("A")

    node_a.add_child("B").add_child("C")
    node_d = node_a.add_child("D")
    node_e = node_d.add_child("E")
    node_e.add_child("F")
    node_e.add_child("G").add_child("H")
    node_d.add_child("I")
    node_a.add_child("J")
    node_l = node_a.add_child("K").add_child("L")
    node_l.add_child("M")

    write_tree(tree, out)
    out.write("\n")

    out.write("Let's delete the subtrees rooted at D and at L:\n\n")
    tree.delete_subtree(node_d)
    tree.delete_subtree(node_l)

    write_tree(tree, out)
    out.write("\n")

    out.write(
        "Let's try some helper functions to count how many null children are left\n"
        " over in the tree:\n\n"
    )
    count = count_null_children_recursive(tree.root)
    out.write(f"Null children counted recursively: {count}\n")
    count = count_null_children_iterative(tree.root)
    out.write(f"Null children counted iteratively: {count}\n")

    out.write("\n")
    out.write("Now let's compress the tree to remove the null children pointers:\n\n")

    tree.compress()
    out.write("After compressing:\n")
    write_tree(tree, out)
    out.write("\n")
    count = count_null_children_iterative(tree.root)
    out.write(f"Null children remaining: {count}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the example trees and the exercise demonstrations."""
    parser = argparse.ArgumentParser(
        prog="ntree",
        description="Show example N-ary trees and run the tree exercises.",
    )
    parser.parse_args(argv)

    example_tree1()
    example_tree2()
    tree_factory_demo()
    traversal_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())