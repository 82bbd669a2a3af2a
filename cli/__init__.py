"""Command-line example driver for the binary search tree."""

from .demo import build_parser, main, run

__all__ = ["build_parser", "main", "run"]
