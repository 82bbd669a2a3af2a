"""In-memory unbalanced binary search tree."""

from .api import height, inorder_traversal, insert, new, search
from .exceptions import UnorderableKeyError
from .modes import TraversalMode
from .node import Node
from .tree import BinarySearchTree

__all__ = [
    "BinarySearchTree",
    "Node",
    "TraversalMode",
    "UnorderableKeyError",
    "height",
    "inorder_traversal",
    "insert",
    "new",
    "search",
]
