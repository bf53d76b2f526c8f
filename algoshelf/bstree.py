"""Unbalanced binary search tree with iterative insert, lookup and erase."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class _Node:
    key: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BSTree:
    """A set of ordered keys stored in a plain binary search tree."""

    def __init__(self):
        self._root: Optional[_Node] = None

    def insert(self, key) -> bool:
        """Add ``key``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(key)
            return True
        parent = None
        cur = self._root
        while cur is not None:
            if cur.key > key:
                parent, cur = cur, cur.left
            elif cur.key < key:
                parent, cur = cur, cur.right
            else:
                return False
        if parent.key < key:
            parent.right = _Node(key)
        else:
            parent.left = _Node(key)
        return True

    def __contains__(self, key) -> bool:
        cur = self._root
        while cur is not None:
            if cur.key < key:
                cur = cur.right
            elif cur.key > key:
                cur = cur.left
            else:
                return True
        return False

    def _replace_child(self, parent, old, new) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def erase(self, key) -> bool:
        """Remove ``key``; return False if it was not present."""
        parent = None
        cur = self._root
        while cur is not None:
            if cur.key < key:
                parent, cur = cur, cur.right
            elif cur.key > key:
                parent, cur = cur, cur.left
            else:
                break
        else:
            return False

        if cur.left is None:
            self._replace_child(parent, cur, cur.right)
        elif cur.right is None:
            self._replace_child(parent, cur, cur.left)
        else:
            min_parent = cur
            smallest = cur.right
            while smallest.left is not None:
                min_parent, smallest = smallest, smallest.left
            cur.key = smallest.key
            if min_parent.left is smallest:
                min_parent.left = smallest.right
            else:
                min_parent.right = smallest.right
        return True

    def inorder(self) -> list:
        """Keys in ascending order."""
        result = []
        stack = []
        cur = self._root
        while cur is not None or stack:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            result.append(cur.key)
            cur = cur.right
        return result