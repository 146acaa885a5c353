"""In-memory B+ tree: sorted keys in linked leaves under interior routing nodes."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Any, Iterator, Union

_Node = Union["LeafNode", "InteriorNode"]


class LeafNode:
    """A leaf holding sorted keys with their values, linked to its right sibling."""

    def __init__(self, fanout: int) -> None:
        self.fanout = fanout
        self.keys: list[Any] = []
        self.values: list[Any] = []
        self.next: LeafNode | None = None

    is_leaf = True

    def search(self, key: Any) -> Any | None:
        """The value stored under ``key``, or None."""
        idx = bisect_left(self.keys, key)
        if idx < len(self.keys) and self.keys[idx] == key:
            return self.values[idx]
        return None

    def _upsert(self, key: Any, value: Any) -> tuple[bool, Any]:
        idx = bisect_left(self.keys, key)
        if idx < len(self.keys) and self.keys[idx] == key:
            old = self.values[idx]
            self.values[idx] = value
            return False, old
        self.keys.insert(idx, key)
        self.values.insert(idx, value)
        return True, None

    def insert(self, key: Any, value: Any) -> Any | None:
        """Store ``value`` under ``key``; return the replaced value, or None."""
        return self._upsert(key, value)[1]

    def is_full(self) -> bool:
        return len(self.keys) >= self.fanout

    def __len__(self) -> int:
        return len(self.keys)

    def split(self) -> tuple[Any, LeafNode]:
        """Move the upper half into a new right sibling; return its first key and it."""
        mid = len(self.keys) // 2
        right = LeafNode(self.fanout)
        right.keys = self.keys[mid:]
        right.values = self.values[mid:]
        del self.keys[mid:]
        del self.values[mid:]
        right.next = self.next
        self.next = right
        return right.keys[0], right

    def remove(self, key: Any) -> Any | None:
        """Remove ``key`` and return its value, or None if it was absent."""
        idx = bisect_left(self.keys, key)
        if idx < len(self.keys) and self.keys[idx] == key:
            del self.keys[idx]
            return self.values.pop(idx)
        return None


class InteriorNode:
    """A routing node: ``children[i]`` holds keys below ``keys[i]``."""

    def __init__(self, fanout: int) -> None:
        self.fanout = fanout
        self.keys: list[Any] = []
        self.children: list[_Node] = []

    is_leaf = False

    def _child_index(self, key: Any) -> int:
        return bisect_right(self.keys, key)

    def search(self, key: Any) -> Any | None:
        child = self.get_child(key)
        return None if child is None else child.search(key)

    def insert_child(self, key: Any, child: _Node) -> None:
        """Add a separator ``key`` with ``child`` immediately to its right."""
        idx = self._child_index(key)
        self.keys.insert(idx, key)
        self.children.insert(idx + 1, child)

    def is_full(self) -> bool:
        return len(self.keys) >= self.fanout

    def split(self) -> tuple[Any, InteriorNode]:
        """Move the upper half into a new node; return the promoted key and the node."""
        mid = len(self.keys) // 2
        middle_key = self.keys.pop(mid)
        right = InteriorNode(self.fanout)
        right.keys = self.keys[mid:]
        right.children = self.children[mid + 1:]
        del self.keys[mid:]
        del self.children[mid + 1:]
        return middle_key, right

    def get_child(self, key: Any) -> _Node | None:
        """The child subtree that would hold ``key``, or None."""
        idx = self._child_index(key)
        return self.children[idx] if idx < len(self.children) else None


class BPTree:
    """An ordered map with a fixed node fanout."""

    def __init__(self, fanout: int) -> None:
        if fanout < 3:
            raise ValueError("fanout must be at least 3")
        self.fanout = fanout
        self._root: _Node = LeafNode(fanout)
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def get(self, key: Any) -> Any | None:
        """The value stored under ``key``, or None."""
        return self._root.search(key)

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        split, is_new = self._insert(self._root, key, value)
        if is_new:
            self._len += 1
        if split is not None:
            split_key, new_child = split
            root = InteriorNode(self.fanout)
            root.keys.append(split_key)
            root.children.extend([self._root, new_child])
            self._root = root

    def _insert(self, node: _Node, key: Any, value: Any):
        if isinstance(node, LeafNode):
            is_new, _ = node._upsert(key, value)
            return (node.split() if node.is_full() else None), is_new
        child = node.children[node._child_index(key)]
        split, is_new = self._insert(child, key, value)
        if split is not None:
            node.insert_child(*split)
            if node.is_full():
                return node.split(), is_new
        return None, is_new

    def remove(self, key: Any) -> Any | None:
        """Remove ``key`` and return its value, or None if it was absent."""
        node: _Node | None = self._root
        while isinstance(node, InteriorNode):
            node = node.get_child(key)
        if node is None:
            return None
        idx = bisect_left(node.keys, key)
        if idx < len(node.keys) and node.keys[idx] == key:
            self._len -= 1
            return node.remove(key)
        return None

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """All (key, value) pairs in key order."""
        node: _Node | None = self._root
        while isinstance(node, InteriorNode):
            node = node.children[0] if node.children else None
        leaf = node
        while leaf is not None:
            yield from zip(list(leaf.keys), list(leaf.values))
            leaf = leaf.next

    def range(self, start: Any, end: Any) -> Iterator[tuple[Any, Any]]:
        """(key, value) pairs with ``start <= key < end``, in key order."""
        node: _Node | None = self._root
        while isinstance(node, InteriorNode):
            node = node.get_child(start)
        if node is None:
            return
        leaf: LeafNode | None = node
        idx = bisect_left(leaf.keys, start)
        while leaf is not None:
            for key, value in zip(leaf.keys[idx:], leaf.values[idx:]):
                if key >= end:
                    return
                yield key, value
            leaf = leaf.next
            idx = 0