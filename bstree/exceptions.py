"""Exceptions raised by the binary search tree."""

from typing import Any


class UnorderableKeyError(TypeError):
    """A key could not be ordered against a key already in the tree."""

    def __init__(self, key: Any, existing: Any):
        self.key = key
        self.existing = existing
        super().__init__(
            f"Cannot order key {key!r} ({type(key).__name__}) against "
            f"{existing!r} ({type(existing).__name__})"
        )
