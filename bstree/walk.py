"""Iterative walks over a Node subtree.

Same results as the recursive Node methods, but driven by a loop or an
explicit stack so tree depth is not bounded by the interpreter's
recursion limit.
"""

from typing import Any

from .node import Node, compare_keys


def insert_iterative(root: Node, key: Any) -> bool:
    """Place key under root. Returns False for a duplicate."""
    node = root
    while True:
        cmp = compare_keys(key, node.key)
        if cmp == 0:
            return False
        if cmp < 0:
            if node.left is None:
                node.left = Node(key)
                return True
            node = node.left
        else:
            if node.right is None:
                node.right = Node(key)
                return True
            node = node.right


def search_iterative(root: Node | None, key: Any) -> bool:
    node = root
    while node is not None:
        cmp = compare_keys(key, node.key)
        if cmp == 0:
            return True
        node = node.left if cmp < 0 else node.right
    return False


def inorder_iterative(root: Node | None) -> list[Any]:
    result: list[Any] = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.key)
        node = node.right
    return result


def height_iterative(root: Node | None) -> int:
    """Longest root-to-leaf path, counted in nodes."""
    if root is None:
        return 0
    best = 0
    stack: list[tuple[Node, int]] = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        best = max(best, depth)
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))
    return best


def is_valid(root: Node | None) -> bool:
    """Check the BST ordering invariant over the whole subtree."""
    # (node, lower bound node, upper bound node); None = unbounded
    stack: list[tuple[Node, Any, Any]] = []
    if root is not None:
        stack.append((root, None, None))
    while stack:
        node, low, high = stack.pop()
        if low is not None and compare_keys(node.key, low.key) <= 0:
            return False
        if high is not None and compare_keys(node.key, high.key) >= 0:
            return False
        if node.left is not None:
            stack.append((node.left, low, node))
        if node.right is not None:
            stack.append((node.right, node, high))
    return True
