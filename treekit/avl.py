"""Self-balancing AVL search tree."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Sequence

DEFAULT_KEYS = (10, 20, 30, 40, 50, 25)


@dataclass
class AVLNode:
    """A tree node holding a key, its children and the height of its subtree."""

    key: Any
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    height: int = 1

    @property
    def balance_factor(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return _height(self.left) - _height(self.right)


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node else 0


def _refresh(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    _refresh(node)
    factor = node.balance_factor
    if factor > 1:
        assert node.left is not None
        if node.left.balance_factor < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        assert node.right is not None
        if node.right.balance_factor > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """A set of distinct, ordered keys kept in a height-balanced tree."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: Optional[AVLNode] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add a key; a key already present is left as it is."""
        self.root = self._insert(self.root, key)

    def _insert(self, node: Optional[AVLNode], key: Any) -> AVLNode:
        if node is None:
            self._size += 1
            return AVLNode(key)
        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node
        return _rebalance(node)

    def delete(self, key: Any) -> None:
        """Remove a key; a key that is absent is ignored."""
        self.root = self._delete(self.root, key)

    def _delete(self, node: Optional[AVLNode], key: Any) -> Optional[AVLNode]:
        if node is None:
            return None
        if key < node.key:
            node.left = self._delete(node.left, key)
        elif key > node.key:
            node.right = self._delete(node.right, key)
        elif node.left is None or node.right is None:
            self._size -= 1
            return node.left or node.right
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key = successor.key
            node.right = self._delete(node.right, successor.key)
        return _rebalance(node)

    def __contains__(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Height of the whole tree; zero when empty."""
        return _height(self.root)

    def preorder(self) -> Iterator[Any]:
        """Yield the keys root first, then the left and right subtrees."""
        stack = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            yield node.key
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a tree from the integer arguments, or from a default set of keys."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        keys = [int(arg) for arg in args] or list(DEFAULT_KEYS)
    except ValueError as exc:
        print(f"invalid key: {exc}", file=sys.stderr)
        return 2
    AVLTree(keys)
    print("AVL Tree constructed successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())