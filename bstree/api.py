"""Function-style API over BinarySearchTree."""

from typing import Any

from .modes import TraversalMode
from .tree import BinarySearchTree


def new(mode: TraversalMode | str | None = None) -> BinarySearchTree:
    """Construct an empty tree."""
    return BinarySearchTree(mode)


def insert(tree: BinarySearchTree, key: Any) -> bool:
    return tree.insert(key)


def search(tree: BinarySearchTree, key: Any) -> bool:
    return tree.search(key)


def inorder_traversal(tree: BinarySearchTree) -> list[Any]:
    return tree.inorder_traversal()


def height(tree: BinarySearchTree) -> int:
    return tree.height()
