"""Functional-style binary search tree over integer keys.

Each operation takes a root node (or None for an empty tree) and returns the
new root.
"""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

EMPTY_KEY = -1
_INITIAL_KEYS = 10
_KEY_LIMIT = 100


@dataclass(slots=True)
class Node:
    """A tree node holding a key and two optional children."""

    key: int
    left: Optional[Node] = None
    right: Optional[Node] = None


def insert(root: Optional[Node], key: int) -> Node:
    """Insert ``key`` below ``root``; duplicates are ignored. Returns the root."""
    if root is None:
        return Node(key)
    if key < root.key:
        root.left = insert(root.left, key)
    elif key > root.key:
        root.right = insert(root.right, key)
    return root


def erase(root: Optional[Node], key: int) -> Optional[Node]:
    """Remove ``key`` from the tree under ``root`` if present. Returns the root."""
    if root is None:
        return None
    if key > root.key:
        root.right = erase(root.right, key)
    elif key < root.key:
        root.left = erase(root.left, key)
    elif root.left is None or root.right is None:
        return root.left if root.left is not None else root.right
    else:
        predecessor = root.left
        while predecessor.right is not None:
            predecessor = predecessor.right
        root.key = predecessor.key
        root.left = erase(root.left, predecessor.key)
    return root


def in_order(root: Optional[Node]) -> list[int]:
    """Keys in ascending order."""
    if root is None:
        return []
    return [*in_order(root.left), root.key, *in_order(root.right)]


def _key(node: Optional[Node]) -> int:
    return node.key if node is not None else EMPTY_KEY


def describe(root: Optional[Node]) -> str:
    """Pre-order ``(key;left,right)`` groups; -1 marks a missing child."""
    if root is None:
        return ""
    head = f"({root.key};{_key(root.left)},{_key(root.right)})"
    return head + describe(root.left) + describe(root.right)


def _read_ints(stream: TextIO) -> Iterator[int]:
    for token in stream.read().split():
        try:
            yield int(token)
        except ValueError:
            return


def _format_keys(root: Optional[Node]) -> str:
    return "".join(f"{key} " for key in in_order(root))


def main(argv=None) -> int:
    """Build a tree from random keys, then erase keys read from stdin."""
    parser = argparse.ArgumentParser(
        description="Insert random keys into a search tree, then erase keys from stdin."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    root: Optional[Node] = None
    for _ in range(_INITIAL_KEYS):
        key = rng.randrange(_KEY_LIMIT)
        print(f"insert key {key} to BST")
        root = insert(root, key)
    print(describe(root))
    print(f"in order : {_format_keys(root)}")
    for x in _read_ints(sys.stdin):
        print(f"erase {x} from BST")
        root = erase(root, x)
        print(_format_keys(root))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())