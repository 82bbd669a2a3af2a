"""How a tree walks its nodes."""

from enum import StrEnum


class TraversalMode(StrEnum):
    RECURSIVE = "recursive"
    ITERATIVE = "iterative"
