import re

import pytest

from treds.radix_node import Edge, LeafNode, Node


def _leaf_node(prefix, key, value):
    leaf = LeafNode(key=key, value=value)
    return Node(leaf=leaf, min_leaf=leaf, max_leaf=leaf, prefix=prefix)


@pytest.fixture
def root():
    # Keys: a, ab, b, bc
    ab = _leaf_node(b"b", b"ab", 2)
    a = _leaf_node(b"a", b"a", 1)
    a.add_edge(Edge(ord("b"), ab))
    a.compute_links()
    bc = _leaf_node(b"c", b"bc", 4)
    b = _leaf_node(b"b", b"b", 3)
    b.add_edge(Edge(ord("c"), bc))
    b.compute_links()
    top = Node()
    top.add_edge(Edge(ord("b"), b))
    top.add_edge(Edge(ord("a"), a))
    top.compute_links()
    return top


ALL = [(b"a", 1), (b"ab", 2), (b"b", 3), (b"bc", 4)]


def test_edges_are_sorted(root):
    assert [e.label for e in root.edges] == [ord("a"), ord("b")]


def test_iterate_all(root):
    assert list(root.iterator()) == ALL


def test_reverse_iterate_all(root):
    assert list(root.reverse_iterator()) == list(reversed(ALL))


def test_seek_prefix_forward(root):
    it = root.iterator()
    it.seek_prefix(b"a")
    assert list(it) == [(b"a", 1), (b"ab", 2)]


def test_seek_prefix_reverse(root):
    it = root.reverse_iterator()
    it.seek_prefix(b"b")
    assert list(it) == [(b"bc", 4), (b"b", 3)]


def test_seek_missing_prefix(root):
    it = root.iterator()
    it.seek_prefix(b"x")
    assert list(it) == []


def test_seek_empty_prefix(root):
    it = root.iterator()
    it.seek_prefix(b"")
    assert list(it) == ALL


def test_pattern_match_compiled(root):
    it = root.iterator()
    it.pattern_match(re.compile("c$"))
    assert list(it) == [(b"bc", 4)]


def test_pattern_match_string(root):
    it = root.iterator()
    it.pattern_match("^a")
    assert list(it) == [(b"a", 1), (b"ab", 2)]


def test_empty_node_iterates_nothing():
    assert list(Node().iterator()) == []
    assert list(Node().reverse_iterator()) == []


def test_get(root):
    assert root.get(b"ab") == 2
    assert root.get(b"bc") == 4


@pytest.mark.parametrize("key", [b"c", b"", b"abc", b"bx"])
def test_get_missing(root, key):
    with pytest.raises(KeyError):
        root.get(key)


def test_longest_prefix(root):
    assert root.longest_prefix(b"abz") == (b"ab", 2)
    assert root.longest_prefix(b"b") == (b"b", 3)
    assert root.longest_prefix(b"z") is None


def test_minimum_and_maximum(root):
    assert root.minimum() == ALL[0]
    assert root.maximum() == ALL[-1]
    assert Node().minimum() is None
    assert Node().maximum() is None


def test_min_max_leaves(root):
    assert root.minimum_leaf().key == b"a"
    assert root.maximum_leaf().key == b"bc"
    assert Node().minimum_leaf() is None


def test_leaf_chain_is_ordered(root):
    forward = []
    leaf = root.minimum_leaf()
    while leaf is not None:
        forward.append(leaf.key)
        leaf = leaf.next_leaf
    backward = []
    leaf = root.maximum_leaf()
    while leaf is not None:
        backward.append(leaf.key)
        leaf = leaf.prev_leaf
    assert forward == [k for k, _ in ALL]
    assert backward == list(reversed(forward))


def test_walk_and_stop(root):
    seen = []
    root.walk(lambda k, v: seen.append((k, v)) or False)
    assert seen == ALL
    stopped = []
    root.walk(lambda k, v: stopped.append(k) or len(stopped) == 2)
    assert stopped == [b"a", b"ab"]


def test_walk_backwards(root):
    seen = []
    root.walk_backwards(lambda k, v: seen.append(k) or False)
    assert seen == [b"b", b"bc", b"a", b"ab"]


@pytest.mark.parametrize(
    "prefix, expected",
    [(b"a", [b"a", b"ab"]), (b"", [b"a", b"ab", b"b", b"bc"]), (b"z", []), (b"bc", [b"bc"])],
)
def test_walk_prefix(root, prefix, expected):
    seen = []
    root.walk_prefix(prefix, lambda k, v: seen.append(k) or False)
    assert seen == expected


def test_walk_path(root):
    seen = []
    root.walk_path(b"abc", lambda k, v: seen.append(k) or False)
    assert seen == [b"a", b"ab"]


def test_get_edge(root):
    idx, child = root.get_edge(ord("b"))
    assert idx == 1
    assert child.leaf.key == b"b"
    assert root.get_edge(ord("z")) is None


def test_get_lower_bound_edge(root):
    idx, child = root.get_lower_bound_edge(0)
    assert idx == 0
    assert child.prefix == b"a"
    assert root.get_lower_bound_edge(ord("c")) is None


def test_del_edge(root):
    root.del_edge(ord("a"))
    root.del_edge(ord("q"))
    assert [e.label for e in root.edges] == [ord("b")]


def test_replace_edge(root):
    replacement = _leaf_node(b"a", b"a", 99)
    root.replace_edge(Edge(ord("a"), replacement))
    assert root.get(b"a") == 99
    with pytest.raises(KeyError):
        root.replace_edge(Edge(ord("z"), replacement))


def test_update_min_max_with_only_leaf():
    node = Node(leaf=LeafNode(key=b"k", value="v"))
    node.update_min_max_leaves()
    assert node.min_leaf is node.leaf
    assert node.max_leaf is node.leaf