"""Self-balancing AVL search tree over integer keys.

Rotations and rebalancing cases can be reported through a ``log`` callable,
which receives one message string per event.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, TextIO

EMPTY_KEY = -1


@dataclass(slots=True)
class _Node:
    key: int
    height: int = 1
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _key(node: Optional[_Node]) -> int:
    return node.key if node is not None else EMPTY_KEY


def _update_height(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _ignore(_message: str) -> None:
    pass


class AVLTree:
    """An AVL tree; duplicate keys are ignored on insertion."""

    def __init__(self, log: Optional[Callable[[str], None]] = None):
        self._root: Optional[_Node] = None
        self._log = log if log is not None else _ignore

    def _rotate_left(self, node: _Node) -> _Node:
        self._log(f"left rotate : {node.key}")
        pivot = node.right
        node.right = pivot.left
        pivot.left = node
        _update_height(node)
        _update_height(pivot)
        return pivot

    def _rotate_right(self, node: _Node) -> _Node:
        self._log(f"right rotate : {node.key}")
        pivot = node.left
        node.left = pivot.right
        pivot.right = node
        _update_height(node)
        _update_height(pivot)
        return pivot

    def _maintain(self, node: _Node) -> _Node:
        left_h, right_h = _height(node.left), _height(node.right)
        if abs(left_h - right_h) <= 1:
            return node
        if left_h > right_h:
            if _height(node.left.right) > _height(node.left.left):
                node.left = self._rotate_left(node.left)
                kind = "LR"
            else:
                kind = "LL"
            node = self._rotate_right(node)
        else:
            if _height(node.right.left) > _height(node.right.right):
                node.right = self._rotate_right(node.right)
                kind = "RL"
            else:
                kind = "RR"
            node = self._rotate_left(node)
        self._log(f"maintain type : {kind}")
        return node

    def _insert(self, node: Optional[_Node], key: int) -> _Node:
        if node is None:
            return _Node(key)
        if key == node.key:
            return node
        if key < node.key:
            node.left = self._insert(node.left, key)
        else:
            node.right = self._insert(node.right, key)
        _update_height(node)
        return self._maintain(node)

    def _erase(self, node: Optional[_Node], key: int) -> Optional[_Node]:
        if node is None:
            return None
        if key > node.key:
            node.right = self._erase(node.right, key)
        elif key < node.key:
            node.left = self._erase(node.left, key)
        elif node.left is None or node.right is None:
            return node.left if node.left is not None else node.right
        else:
            predecessor = node.left
            while predecessor.right is not None:
                predecessor = predecessor.right
            node.key = predecessor.key
            node.left = self._erase(node.left, predecessor.key)
        _update_height(node)
        return self._maintain(node)

    def insert(self, key: int) -> None:
        """Add ``key`` and rebalance."""
        self._root = self._insert(self._root, key)

    def erase(self, key: int) -> None:
        """Remove ``key`` if present and rebalance."""
        self._root = self._erase(self._root, key)

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def describe(self) -> list[str]:
        """Pre-order lines of the form ``(key[height] | left right)``; -1 marks a missing child."""
        lines: list[str] = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            lines.append(
                f"({node.key}[{node.height}] | {_key(node.left)} {_key(node.right)})"
            )
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return lines


def _read_ints(stream: TextIO) -> Iterator[int]:
    for token in stream.read().split():
        try:
            yield int(token)
        except ValueError:
            return


def _until_sentinel(values: Iterator[int]) -> Iterator[int]:
    for value in values:
        if value == -1:
            return
        yield value


def main(argv=None) -> int:
    """Read insert, erase and find phases from stdin, each ended by -1."""
    parser = argparse.ArgumentParser(
        description="Insert, erase and look up integers in an AVL tree read from stdin."
    )
    parser.parse_args(argv)
    tree = AVLTree(log=print)
    values = _read_ints(sys.stdin)
    for x in _until_sentinel(values):
        print(f"Insert {x} to avl tree")
        tree.insert(x)
        for line in tree.describe():
            print(line)
    for x in _until_sentinel(values):
        print(f"erase {x} from avl tree")
        tree.erase(x)
        for line in tree.describe():
            print(line)
    for x in _until_sentinel(values):
        print(f"find {x} in avl : {int(x in tree)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())