# node.py
# Single vertex of the token trie.
# A node is keyed by one fragment (char, fixed-size chunk or separator piece)
# and keeps an occurrence counter so repeated inserts behave like a multiset.

from __future__ import annotations
from typing import Dict, Iterator, Optional, Tuple


class TrieNode:
    """
    A single node in the Trie.
    key: fragment this node stands for
    children: fragment -> TrieNode
    is_word: True when an inserted value ends exactly here
    count: how many times that value was added minus removed
    """

    __slots__ = ("key", "children", "is_word", "count")

    def __init__(self, key: str) -> None:
        self.key = key
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False
        self.count = 0

    def __repr__(self) -> str:
        return (
            f"TrieNode(key={self.key!r}, is_word={self.is_word}, "
            f"count={self.count}, children={len(self.children)})"
        )

    # children -----------------------------------------------------------
    def get(self, key: str) -> Optional[TrieNode]:
        return self.children.get(key)

    def set_child(self, node: TrieNode) -> TrieNode:
        """Attach `node` under its own key and return it."""
        self.children[node.key] = node
        return node

    def child_or_create(self, key: str) -> TrieNode:
        node = self.children.get(key)
        if node is None:
            node = self.set_child(TrieNode(key))
        return node

    def is_leaf(self) -> bool:
        return not self.children

    def iter_children(self) -> Iterator[Tuple[str, TrieNode]]:
        """Children in key order, so walks are deterministic."""
        for key in sorted(self.children):
            yield key, self.children[key]

    # word marker / counter ----------------------------------------------
    def mark_word(self) -> None:
        self.is_word = True

    def unmark_word(self) -> None:
        self.is_word = False

    def increase(self) -> int:
        self.count += 1
        return self.count

    def decrease(self) -> int:
        # never below zero, even if a caller skips the is_word check
        if self.count > 0:
            self.count -= 1
        return self.count
