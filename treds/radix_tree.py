"""A radix tree keyed by bytes, with transactions for batched changes."""

from __future__ import annotations

from typing import Any, Optional, Tuple, Union

from .radix_node import Edge, LeafNode, Node

KeyLike = Union[bytes, bytearray, memoryview, str]


def _as_bytes(key: KeyLike) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


def common_prefix_length(k1: bytes, k2: bytes) -> int:
    """Return the length of the prefix shared by k1 and k2."""
    length = 0
    for a, b in zip(k1, k2):
        if a != b:
            break
        length += 1
    return length


def _count_leaves(node: Node) -> int:
    own = 1 if node.leaf is not None else 0
    return own + sum(_count_leaves(e.node) for e in node.edges)


class Txn:
    """A set of changes to a tree, turned into a new tree by commit()."""

    def __init__(self, root: Node, size: int) -> None:
        self._root = root
        self._size = size

    @property
    def root(self) -> Node:
        """The current root, valid for reads until the next change."""
        return self._root

    def __len__(self) -> int:
        return self._size

    def clone(self) -> Txn:
        """Return a transaction starting from this one's current state."""
        return Txn(self._root, self._size)

    def _merge_child(self, node: Node) -> None:
        child = node.edges[0].node
        node.prefix = node.prefix + child.prefix
        node.leaf = child.leaf
        node.edges = list(child.edges)
        node.compute_links()

    def _insert(
        self, node: Node, key: bytes, search: bytes, value: Any
    ) -> Tuple[Any, bool]:
        if not search:
            old_value = None
            updated = False
            if node.leaf is not None:
                old_value = node.leaf.value
                updated = True
            node.leaf = LeafNode(key, value)
            node.compute_links()
            return old_value, updated

        found = node.get_edge(search[0])
        if found is None:
            leaf = LeafNode(key, value)
            node.add_edge(
                Edge(
                    search[0],
                    Node(leaf=leaf, min_leaf=leaf, max_leaf=leaf, prefix=search),
                )
            )
            node.compute_links()
            return None, False

        idx, child = found
        common = common_prefix_length(search, child.prefix)
        if common == len(child.prefix):
            old_value, updated = self._insert(child, key, search[common:], value)
            node.edges[idx].node = child
            node.compute_links()
            return old_value, updated

        split = Node(prefix=search[:common])
        node.replace_edge(Edge(search[0], split))
        split.add_edge(Edge(child.prefix[common], child))
        child.prefix = child.prefix[common:]

        leaf = LeafNode(key, value)
        search = search[common:]
        if not search:
            split.leaf = leaf
            split.min_leaf = leaf
            split.max_leaf = leaf
            split.compute_links()
            node.compute_links()
            return None, False

        split.add_edge(
            Edge(search[0], Node(leaf=leaf, min_leaf=leaf, max_leaf=leaf, prefix=search))
        )
        split.compute_links()
        node.compute_links()
        return None, False

    def _prune_child(self, node: Node, idx: int, label: int, child: Node) -> None:
        if child.leaf is None and not child.edges:
            node.del_edge(label)
            if node is not self._root and len(node.edges) == 1 and node.leaf is None:
                self._merge_child(node)
        else:
            node.edges[idx].node = child
        node.compute_links()

    def _delete(self, node: Node, search: bytes) -> Optional[LeafNode]:
        if not search:
            if node.leaf is None:
                return None
            old_leaf = node.leaf
            node.leaf = None
            node.min_leaf = None
            node.max_leaf = None
            if node is not self._root and len(node.edges) == 1:
                self._merge_child(node)
            else:
                node.compute_links()
            return old_leaf

        label = search[0]
        found = node.get_edge(label)
        if found is None or not search.startswith(found[1].prefix):
            return None
        idx, child = found
        leaf = self._delete(child, search[len(child.prefix):])
        if leaf is None:
            return None
        self._prune_child(node, idx, label, child)
        return leaf

    def _delete_prefix(self, node: Node, search: bytes) -> Optional[int]:
        if not search:
            deleted = _count_leaves(node)
            node.leaf = None
            node.edges = []
            node.compute_links()
            return deleted

        label = search[0]
        found = node.get_edge(label)
        if found is None:
            return None
        idx, child = found
        if not child.prefix.startswith(search) and not search.startswith(child.prefix):
            return None
        rest = b"" if len(child.prefix) > len(search) else search[len(child.prefix):]
        deleted = self._delete_prefix(child, rest)
        if deleted is None:
            return None
        self._prune_child(node, idx, label, child)
        return deleted

    def insert(self, key: KeyLike, value: Any) -> Tuple[Any, bool]:
        """Add or update key; return (previous value, whether one was set)."""
        k = _as_bytes(key)
        old_value, updated = self._insert(self._root, k, k, value)
        if not updated:
            self._size += 1
        return old_value, updated

    def delete(self, key: KeyLike) -> Tuple[Any, bool]:
        """Remove key; return (old value, whether the key was present)."""
        leaf = self._delete(self._root, _as_bytes(key))
        if leaf is None:
            return None, False
        self._size -= 1
        return leaf.value, True

    def delete_prefix(self, prefix: KeyLike) -> int:
        """Remove every key starting with prefix; return how many were removed."""
        deleted = self._delete_prefix(self._root, _as_bytes(prefix)) or 0
        self._size -= deleted
        return deleted

    def get(self, key: KeyLike) -> Any:
        """Return the value at key; raise KeyError if absent."""
        return self._root.get(_as_bytes(key))

    def commit(self) -> Tree:
        """Finish the transaction and return the resulting tree."""
        return self.commit_only()

    def commit_only(self) -> Tree:
        """Return the resulting tree without any further notification."""
        return Tree(self._root, self._size)


class Tree:
    """An ordered map from byte strings to values, with prefix queries."""

    def __init__(self, root: Optional[Node] = None, size: int = 0) -> None:
        self._root = root if root is not None else Node()
        self._size = size

    @property
    def root(self) -> Node:
        """The root node, for iteration and richer queries."""
        return self._root

    def __len__(self) -> int:
        return self._size

    def txn(self) -> Txn:
        """Start a transaction on this tree."""
        return Txn(self._root, self._size)

    def insert(self, key: KeyLike, value: Any) -> Tuple[Tree, Any, bool]:
        """Return (new tree, previous value, whether one was set)."""
        txn = self.txn()
        old_value, updated = txn.insert(key, value)
        return txn.commit(), old_value, updated

    def delete(self, key: KeyLike) -> Tuple[Tree, Any, bool]:
        """Return (new tree, old value, whether the key was present)."""
        txn = self.txn()
        old_value, deleted = txn.delete(key)
        return txn.commit(), old_value, deleted

    def delete_prefix(self, prefix: KeyLike) -> Tuple[Tree, int]:
        """Return (new tree, number of keys removed under prefix)."""
        txn = self.txn()
        deleted = txn.delete_prefix(prefix)
        return txn.commit(), deleted

    def get(self, key: KeyLike) -> Any:
        """Return the value at key; raise KeyError if absent."""
        return self._root.get(_as_bytes(key))