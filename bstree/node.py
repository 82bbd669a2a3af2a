"""Tree node and the recursive walks over it.

A Node exclusively owns its children: no parent pointers, no sharing.
Child slots go from empty to occupied and are never reassigned.
"""

from typing import Any

from loguru import logger

from .exceptions import UnorderableKeyError


def compare_keys(key: Any, other: Any) -> int:
    """Three-way compare two keys.

    Returns:
        -1 if key < other, 0 if equal, 1 if key > other

    Raises:
        UnorderableKeyError: if the keys do not support ordering
    """
    try:
        if key < other:
            return -1
        if key > other:
            return 1
        if key == other:
            return 0
    except TypeError as e:
        logger.debug("BST: unorderable key {!r} vs {!r}", key, other)
        raise UnorderableKeyError(key, other) from e
    # neither less, greater nor equal, e.g. float("nan")
    logger.debug("BST: unorderable key {!r} vs {!r}", key, other)
    raise UnorderableKeyError(key, other)


class Node:
    """A single tree element holding one key and up to two children."""

    __slots__ = ("_key", "left", "right")

    def __init__(self, key: Any):
        self._key = key
        self.left: Node | None = None
        self.right: Node | None = None

    @property
    def key(self) -> Any:
        return self._key

    def insert(self, key: Any) -> bool:
        """Place key in this subtree. Returns False for a duplicate."""
        cmp = compare_keys(key, self._key)
        if cmp < 0:
            if self.left is None:
                self.left = Node(key)
                return True
            return self.left.insert(key)
        if cmp > 0:
            if self.right is None:
                self.right = Node(key)
                return True
            return self.right.insert(key)
        return False

    def search(self, key: Any) -> bool:
        cmp = compare_keys(key, self._key)
        if cmp == 0:
            return True
        child = self.left if cmp < 0 else self.right
        return child.search(key) if child is not None else False

    def inorder_traversal(self, result: list[Any]) -> None:
        """Append this subtree's keys to result in ascending order."""
        if self.left is not None:
            self.left.inorder_traversal(result)
        result.append(self._key)
        if self.right is not None:
            self.right.inorder_traversal(result)

    def height(self) -> int:
        left_height = self.left.height() if self.left is not None else 0
        right_height = self.right.height() if self.right is not None else 0
        return 1 + max(left_height, right_height)

    def __repr__(self) -> str:
        return f"Node({self._key!r})"
