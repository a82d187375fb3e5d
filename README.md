# ntree

A small library for generic N-ary trees. Each node holds one piece of data
and an ordered list of children, leftmost first. A child slot may be left
empty (`None`) after a subtree is deleted, until the tree is compressed.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Building a tree

```python
from ntree.tree import GenericTree

tree = GenericTree("A")
a = tree.root
b = a.add_child("B")
b.add_child("C")
b.add_child("D")
e = a.add_child("E")
e.add_child("F")
e.add_child("G")
```

`GenericTree()` makes an empty tree and `GenericTree(data)` makes one whose
root holds `data`. `create_root(data)` adds the root and returns it. It
raises `TreeError` if the tree already has a root. `tree.root` is the root
node, or `None` for an empty tree. Each `TreeNode` has `data`, `parent` and
`children` attributes. `add_child(data)` appends a new rightmost child and
returns it. `clear()` empties the tree.

## Deleting and compressing

`delete_subtree(node)` removes a node and all its descendants. Its slot in
the parent's `children` list becomes `None`. Passing `None` does nothing.
Passing a node from another tree raises `TreeError`. Deleting the root
empties the tree. `compress()` removes every empty slot in the tree.

```python
from ntree.exercises import count_null_children_iterative

tree.delete_subtree(e)
count_null_children_iterative(tree.root)   # 1
tree.compress()
count_null_children_iterative(tree.root)   # 0
```

`count_null_children_recursive` gives the same count by recursion. Both
count an empty starting node as one slot.

If a tree is made with `show_debug_messages=True`, `delete_subtree` and
`clear` report each node they explore and delete on standard error.

## Rendering

`ntree.render.format_tree(tree)` returns the tree drawn vertically as text,
with the leftmost branches first:

```
A
|
|_ B
|  |
|  |_ C
|  |
|  |_ D
|
|_ E
   |
   |_ F
   |
   |_ G
```

An empty tree renders as `[empty tree]` and an empty child slot as
`[null]`. `write_tree(tree, stream=None, debug_stream=None)` writes the same
text to `stream` (standard output by default) and returns the stream. When
the tree's `show_debug_messages` flag is set, it writes `Depth: N` for each
node to `stream` and ` Data: X` to `debug_stream` (standard error by
default) in place of the drawing.

## Traversal

`ntree.exercises.traverse_levels(tree)` returns the node data in level
order, left to right, skipping empty child slots. `tree_factory(tree)`
clears a tree and fills it with the sample integer tree with root 4,
children 8 and 15, grandchildren 16 and 23 under 8, and 42 under 16.
`tree_factory_demo(stream=None)` and `traversal_demo(stream=None)` print
these on sample trees.

## Demo

```
ntree-demo
```

This prints two example trees, a debug view, the effect of deleting and
compressing subtrees, the null-slot counts, and the output of the factory
and traversal demos. The same output is available from
`ntree.cli.example_tree1(stream=None)`, `example_tree2(stream=None)` and
`main()`.

## What it does not do

Trees live only in memory. There is no way to save or load them, no copying
of trees or subtrees, and no rendering format other than the vertical text
shown above. The demo command takes no options beyond `--help`.