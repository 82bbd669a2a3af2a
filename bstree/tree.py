"""Unbalanced binary search tree.

The tree is a handle to an optional root Node. Each public operation is
forwarded to the root, either through the recursive Node methods or the
iterative walkers in bstree.walk, depending on the tree's TraversalMode.
"""

from collections.abc import Iterable, Iterator
from typing import Any, Self

from loguru import logger

from . import walk
from .modes import TraversalMode
from .node import Node


class BinarySearchTree:
    """
    Ordered set of keys stored in an unbalanced BST.

    Duplicate keys are discarded. No rebalancing is done, so the shape
    (and height) depends entirely on insertion order.
    """

    def __init__(self, mode: TraversalMode | str | None = None):
        self._root: Node | None = None
        self._size = 0
        self._mode = (
            TraversalMode(mode) if mode is not None else TraversalMode.RECURSIVE
        )
        logger.debug("BST: created tree mode={}", self._mode)

    @classmethod
    def from_iterable(
        cls, keys: Iterable[Any], mode: TraversalMode | str | None = None
    ) -> Self:
        """Build a tree by inserting keys in iteration order."""
        tree = cls(mode)
        for key in keys:
            tree.insert(key)
        return tree

    @property
    def mode(self) -> TraversalMode:
        return self._mode

    @property
    def root(self) -> Node | None:
        return self._root

    def insert(self, key: Any) -> bool:
        """
        Insert key, keeping the BST invariant.

        Returns:
            True if a node was added, False if key was already present
        """
        if self._root is None:
            self._root = Node(key)
            added = True
        elif self._mode is TraversalMode.ITERATIVE:
            added = walk.insert_iterative(self._root, key)
        else:
            added = self._root.insert(key)

        if added:
            self._size += 1
        else:
            logger.debug("BST: duplicate key {!r} ignored", key)
        return added

    def search(self, key: Any) -> bool:
        """Check whether key is present."""
        if self._root is None:
            return False
        if self._mode is TraversalMode.ITERATIVE:
            return walk.search_iterative(self._root, key)
        return self._root.search(key)

    def inorder_traversal(self) -> list[Any]:
        """Return all keys in ascending order as a new list."""
        if self._mode is TraversalMode.ITERATIVE:
            return walk.inorder_iterative(self._root)
        result: list[Any] = []
        if self._root is not None:
            self._root.inorder_traversal(result)
        return result

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        if self._mode is TraversalMode.ITERATIVE:
            return walk.height_iterative(self._root)
        return self._root.height()

    def is_valid(self) -> bool:
        """Check the BST invariant over every node."""
        return walk.is_valid(self._root)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder_traversal())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder_traversal()!r})"
