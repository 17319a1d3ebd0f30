# treekit

Small, dependency-free tree data structures for Python:

- **`treekit.avl.AVLTree`** – a self-balancing binary search tree holding a
  set of distinct, ordered keys.
- **`treekit.static_segment_tree.SegmentTree`** – a segment tree built once
  over a list of numbers, supporting "add a value to every element in a
  range" and range sums.
- **`treekit.dynamic_segment_tree.DynamicSegmentTree`** – a sparse segment
  tree over the indices `0 .. size-1`, starting at all zeros, in which every
  change creates a new version and earlier versions stay queryable.

## Installation

```
pip install treekit
```

To run the test suite:

```
pip install "treekit[test]"
pytest
```

## AVL tree

```python
from treekit.avl import AVLTree

tree = AVLTree([10, 20, 30, 40, 50, 25])

list(tree)              # [10, 20, 25, 30, 40, 50] – ascending order
list(tree.preorder())   # keys root first, then left and right subtrees
25 in tree              # True
len(tree)               # 6
tree.height()           # height of the whole tree, 0 when empty

tree.insert(35)
tree.delete(10)
```

Inserting a key that is already present leaves the tree unchanged, and so
does deleting a key that is absent. The tree rebalances itself after every
insertion and deletion. Keys may be of any type that supports `<` and `>`.
The nodes are `AVLNode` objects, reachable through `tree.root`; each has
`key`, `left`, `right`, `height` and a `balance_factor` property.

## Static segment tree

```python
from treekit.static_segment_tree import SegmentTree

tree = SegmentTree([1, 2, 3, 4, 5])

tree.get_sum(0, 4)            # 15
tree.update_range(1, 3, 10)   # add 10 to elements 1..3 (inclusive)
tree.get_sum(0, 4)            # 45
len(tree)                     # 5
```

Range bounds are inclusive indices into the original list; parts of a range
that fall outside the list are ignored. Building from an empty sequence
raises `ValueError`.

## Dynamic segment tree

```python
from treekit.dynamic_segment_tree import DynamicSegmentTree

tree = DynamicSegmentTree(100)   # indices 0..99, all zero; version 0

tree.insert(1, 5)                # add 5 at index 1        -> version 1
tree.insert(2, 10)               # add 10 at index 2       -> version 2
tree.update_range(1, 2, 3)       # add 3 to indices 1..2   -> version 3

tree.get_sum(1, 2)               # 21, in the latest version
tree.get_sum(1, 2, version=1)    # 5, as it was after the first insert
tree.version()                   # 3
```

- `size` must be positive, otherwise `ValueError` is raised.
- `insert` raises `IndexError` for an index outside `0 .. size-1`.
- `update_range` and `get_sum` clip their range to the array; a range that
  lies wholly outside it changes nothing (but still creates a new version)
  or sums to `0`.
- `get_sum` raises `IndexError` for a version that does not exist.

Versions share all unchanged nodes, so each change costs only the nodes on
the paths it touches.

## Command-line demonstrations

Each structure comes with a short demonstration command:

```
treekit-avl [KEY ...]
treekit-segment-tree
treekit-dynamic-segment-tree
```

`treekit-avl` builds a tree from the integer keys given (or from
`10 20 30 40 50 25` when none are given) and reports that it was built; it
exits with status 2 on a key that is not an integer. It does not print the
tree itself. The two segment-tree commands run a fixed sequence of updates
and print the resulting sums.

## What treekit does not do

The structures live in memory only: there is no saving to or loading from
files. Segment trees support range addition and range sums only, not range
minimum or maximum queries.