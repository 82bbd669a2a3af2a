"""Build a tree from integers and report search, traversal and height."""

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from loguru import logger

from bstree import BinarySearchTree, TraversalMode
from config.logging_config import configure_logging
from config.settings import get_settings

DEFAULT_KEYS = (10, 5, 20, 3, 7, 15, 25)
DEFAULT_SEARCHES = (7, 30)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bstree-demo",
        description="Insert integer keys into a binary search tree and query it.",
    )
    parser.add_argument(
        "keys",
        nargs="*",
        type=int,
        help=f"keys to insert (default: {' '.join(map(str, DEFAULT_KEYS))})",
    )
    parser.add_argument(
        "--search",
        nargs="+",
        type=int,
        metavar="KEY",
        help=f"keys to look up (default: {' '.join(map(str, DEFAULT_SEARCHES))})",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in TraversalMode],
        help="traversal mode (default: BSTREE_TRAVERSAL_MODE, else recursive)",
    )
    return parser


def run(
    keys: Sequence[int],
    searches: Sequence[int],
    mode: TraversalMode | str | None = None,
    out: TextIO | None = None,
) -> BinarySearchTree:
    """Build the tree and print the report lines to out (stdout by default)."""
    out = out if out is not None else sys.stdout
    tree = BinarySearchTree.from_iterable(keys, mode=mode)
    logger.info(
        "Built tree: {} keys inserted, {} distinct, mode={}",
        len(keys),
        len(tree),
        tree.mode,
    )

    for key in searches:
        print(f"Search for {key}: {str(tree.search(key)).lower()}", file=out)
    print(f"In-order traversal: {tree.inorder_traversal()}", file=out)
    print(f"Height of the tree: {tree.height()}", file=out)
    return tree


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_file)

    keys = args.keys or list(DEFAULT_KEYS)
    searches = args.search or list(DEFAULT_SEARCHES)
    try:
        run(keys, searches, mode=args.mode or settings.traversal_mode)
    except RecursionError:
        logger.error("Tree too deep for recursive mode; retry with --mode iterative")
        return 1
    return 0
