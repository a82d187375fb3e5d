"""Generic N-ary trees with subtree deletion, level-order traversal and text rendering."""

__version__ = "0.1.0"
__all__ = ["tree", "render", "exercises", "cli"]