"""Nodes, leaves and ordered iterators of the radix tree."""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple, Union

WalkFn = Callable[[bytes, Any], bool]
"""Called with a key and a value while walking; returning True stops the walk."""

KeyValue = Tuple[bytes, Any]


@dataclass(eq=False)
class LeafNode:
    """A stored key/value pair, linked to its neighbours in key order."""

    key: bytes
    value: Any = None
    next_leaf: Optional[LeafNode] = field(default=None, repr=False)
    prev_leaf: Optional[LeafNode] = field(default=None, repr=False)


@dataclass(eq=False)
class Edge:
    """A labelled link from a node to one of its children."""

    label: int
    node: Node


@dataclass(eq=False)
class Node:
    """A node of the radix tree; edges are kept sorted by label."""

    leaf: Optional[LeafNode] = None
    min_leaf: Optional[LeafNode] = field(default=None, repr=False)
    max_leaf: Optional[LeafNode] = field(default=None, repr=False)
    prefix: bytes = b""
    edges: list[Edge] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return self.leaf is not None

    def _edge_index(self, label: int) -> int:
        return bisect.bisect_left([e.label for e in self.edges], label)

    def update_min_max_leaves(self) -> None:
        """Recompute the smallest and largest leaf under this node."""
        self.min_leaf = None
        self.max_leaf = None
        if self.leaf is not None:
            self.min_leaf = self.leaf
        elif self.edges:
            self.min_leaf = self.edges[0].node.min_leaf
        if self.edges:
            self.max_leaf = self.edges[-1].node.max_leaf
        if self.max_leaf is None and self.leaf is not None:
            self.max_leaf = self.leaf

    def compute_links(self) -> None:
        """Refresh min/max leaves and the leaf chain across this node's children."""
        self.update_min_max_leaves()
        if self.edges:
            first_min = self.edges[0].node.min_leaf
            if self.min_leaf is not first_min:
                self.min_leaf.next_leaf = first_min
                if first_min is not None:
                    first_min.prev_leaf = self.min_leaf
        for current, following in zip(self.edges, self.edges[1:] + [None]):
            last = current.node.maximum_leaf()
            first = following.node.minimum_leaf() if following is not None else None
            if last is not None:
                last.next_leaf = first
            if first is not None:
                first.prev_leaf = last

    def add_edge(self, edge: Edge) -> None:
        """Insert an edge, keeping the edges sorted by label."""
        self.edges.insert(self._edge_index(edge.label), edge)

    def replace_edge(self, edge: Edge) -> None:
        """Point the existing edge with the same label at a new node."""
        idx = self._edge_index(edge.label)
        if idx < len(self.edges) and self.edges[idx].label == edge.label:
            self.edges[idx].node = edge.node
            return
        raise KeyError("replacing missing edge")

    def get_edge(self, label: int) -> Optional[Tuple[int, Node]]:
        """Return (index, child) for the edge with this label, or None."""
        idx = self._edge_index(label)
        if idx < len(self.edges) and self.edges[idx].label == label:
            return idx, self.edges[idx].node
        return None

    def get_lower_bound_edge(self, label: int) -> Optional[Tuple[int, Node]]:
        """Return (index, child) for the first edge whose label is >= label, or None."""
        idx = self._edge_index(label)
        if idx < len(self.edges):
            return idx, self.edges[idx].node
        return None

    def del_edge(self, label: int) -> None:
        """Remove the edge with this label, if there is one."""
        idx = self._edge_index(label)
        if idx < len(self.edges) and self.edges[idx].label == label:
            del self.edges[idx]

    def minimum_leaf(self) -> Optional[LeafNode]:
        return self.min_leaf

    def maximum_leaf(self) -> Optional[LeafNode]:
        return self.max_leaf

    def get(self, key: bytes) -> Any:
        """Return the value stored at key; raise KeyError if absent."""
        node: Optional[Node] = self
        search = bytes(key)
        while node is not None:
            if not search:
                if node.leaf is not None:
                    return node.leaf.value
                break
            found = node.get_edge(search[0])
            if found is None:
                break
            node = found[1]
            if not search.startswith(node.prefix):
                break
            search = search[len(node.prefix):]
        raise KeyError(key)

    def longest_prefix(self, key: bytes) -> Optional[KeyValue]:
        """Return (key, value) of the longest stored key that prefixes key."""
        last: Optional[LeafNode] = None
        node = self
        search = bytes(key)
        while True:
            if node.leaf is not None:
                last = node.leaf
            if not search:
                break
            found = node.get_edge(search[0])
            if found is None:
                break
            node = found[1]
            if not search.startswith(node.prefix):
                break
            search = search[len(node.prefix):]
        if last is None:
            return None
        return last.key, last.value

    def minimum(self) -> Optional[KeyValue]:
        node = self
        while True:
            if node.leaf is not None:
                return node.leaf.key, node.leaf.value
            if not node.edges:
                return None
            node = node.edges[0].node

    def maximum(self) -> Optional[KeyValue]:
        node = self
        while True:
            if node.edges:
                node = node.edges[-1].node
                continue
            if node.leaf is not None:
                return node.leaf.key, node.leaf.value
            return None

    def iterator(self) -> Iterator:
        return Iterator(self)

    def reverse_iterator(self) -> ReverseIterator:
        return ReverseIterator(self)

    def walk(self, fn: WalkFn) -> None:
        _recursive_walk(self, fn)

    def walk_backwards(self, fn: WalkFn) -> None:
        _reverse_recursive_walk(self, fn)

    def walk_prefix(self, prefix: bytes, fn: WalkFn) -> None:
        """Walk every entry whose key starts with prefix."""
        node = self
        search = bytes(prefix)
        while True:
            if not search:
                _recursive_walk(node, fn)
                return
            found = node.get_edge(search[0])
            if found is None:
                return
            node = found[1]
            if search.startswith(node.prefix):
                search = search[len(node.prefix):]
            elif node.prefix.startswith(search):
                _recursive_walk(node, fn)
                return
            else:
                return

    def walk_path(self, path: bytes, fn: WalkFn) -> None:
        """Walk the entries on the way from this node down towards path."""
        node = self
        search = bytes(path)
        while True:
            if node.leaf is not None and fn(node.leaf.key, node.leaf.value):
                return
            if not search:
                return
            found = node.get_edge(search[0])
            if found is None:
                return
            node = found[1]
            if not search.startswith(node.prefix):
                return
            search = search[len(node.prefix):]


def _recursive_walk(node: Node, fn: WalkFn) -> bool:
    if node.leaf is not None and fn(node.leaf.key, node.leaf.value):
        return True
    return any(_recursive_walk(e.node, fn) for e in node.edges)


def _reverse_recursive_walk(node: Node, fn: WalkFn) -> bool:
    if node.leaf is not None and fn(node.leaf.key, node.leaf.value):
        return True
    return any(_reverse_recursive_walk(e.node, fn) for e in reversed(node.edges))


def _seek(node: Optional[Node], prefix: bytes) -> Optional[Node]:
    """Return the node under which every key starting with prefix lives."""
    search = prefix
    while search and node is not None:
        found = node.get_edge(search[0])
        if found is None:
            return None
        node = found[1]
        if search.startswith(node.prefix):
            search = search[len(node.prefix):]
        elif node.prefix.startswith(search):
            return node
        else:
            return None
    return node


class Iterator:
    """Yields (key, value) pairs in ascending key order."""

    def __init__(self, node: Optional[Node]) -> None:
        self._node = node
        self._leaf: Optional[LeafNode] = None
        self._key = b""
        self._pattern: Optional[re.Pattern] = None

    def pattern_match(self, regex: Union[str, bytes, re.Pattern]) -> None:
        """Yield only keys the regex matches, scanning on to the last leaf."""
        self._pattern = re.compile(regex) if isinstance(regex, (str, bytes)) else regex

    def seek_prefix(self, prefix: bytes) -> None:
        """Restrict iteration to keys starting with prefix."""
        self._key = bytes(prefix)
        self._node = _seek(self._node, self._key)

    def __iter__(self) -> Iterator:
        return self

    def _matches(self, key: bytes) -> bool:
        if isinstance(self._pattern.pattern, bytes):
            return self._pattern.search(key) is not None
        return self._pattern.search(key.decode("utf-8", "replace")) is not None

    def _step(self, leaf: LeafNode) -> None:
        self._leaf = leaf.next_leaf
        if self._leaf is None:
            self._node = None

    def __next__(self) -> KeyValue:
        if self._node is not None and self._leaf is None:
            self._leaf = self._node.minimum_leaf()
        if self._pattern is not None:
            while self._leaf is not None:
                current = self._leaf
                self._step(current)
                if self._matches(current.key):
                    return current.key, current.value
        else:
            current = self._leaf
            if current is not None and current.key.startswith(self._key):
                self._step(current)
                return current.key, current.value
        self._leaf = None
        self._node = None
        raise StopIteration


class ReverseIterator:
    """Yields (key, value) pairs in descending key order."""

    def __init__(self, node: Optional[Node]) -> None:
        self._node = node
        self._leaf: Optional[LeafNode] = None
        self._key = b""

    def seek_prefix(self, prefix: bytes) -> None:
        """Restrict iteration to keys starting with prefix."""
        self._key = bytes(prefix)
        self._node = _seek(self._node, self._key)

    def __iter__(self) -> ReverseIterator:
        return self

    def __next__(self) -> KeyValue:
        if self._leaf is None and self._node is not None:
            self._leaf = self._node.max_leaf
        current = self._leaf
        if current is not None and current.key.startswith(self._key):
            self._leaf = current.prev_leaf
            if self._leaf is None:
                self._node = None
            return current.key, current.value
        self._leaf = None
        self._node = None
        raise StopIteration