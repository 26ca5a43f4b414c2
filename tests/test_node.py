# tests/test_node.py - TrieNode bookkeeping

from prefix_trie.core.node import TrieNode


def test_new_node_defaults():
    n = TrieNode("a")
    assert n.key == "a"
    assert n.children == {}
    assert n.is_word is False
    assert n.count == 0
    assert n.is_leaf()


def test_child_or_create_reuses_existing_child():
    n = TrieNode("a")
    first = n.child_or_create("b")
    second = n.child_or_create("b")
    assert first is second
    assert list(n.children) == ["b"]
    assert not n.is_leaf()


def test_set_child_uses_node_key():
    n = TrieNode("a")
    child = n.set_child(TrieNode("xy"))
    assert n.get("xy") is child
    assert n.get("zz") is None


def test_iter_children_is_sorted():
    n = TrieNode("r")
    for k in ["t", "a", "m"]:
        n.child_or_create(k)
    assert [k for k, _ in n.iter_children()] == ["a", "m", "t"]


def test_counter_and_marker():
    n = TrieNode("a")
    n.mark_word()
    assert n.increase() == 1
    assert n.increase() == 2
    assert n.decrease() == 1
    n.unmark_word()
    assert n.is_word is False


def test_decrease_never_goes_negative():
    n = TrieNode("a")
    assert n.decrease() == 0
    assert n.count == 0
