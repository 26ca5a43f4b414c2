# trie.py
# Token trie with multiset counts, near-match lookup and two whole-trie analyses.
# Values are lower-cased and cut into fragments by the configured Tokenizer
# (characters, fixed-size chunks or a separator), then stored one fragment per node.

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from prefix_trie.core.constants import DelimiterType
from prefix_trie.core.errors import PathNotFound
from prefix_trie.core.node import TrieNode
from prefix_trie.core.tokenizer import Delimiter, Tokenizer

logger = logging.getLogger(__name__)


class Trie:
    """
    Prefix tree keyed by token fragments.
     - add/remove keep a per-value occurrence count (re-adding never reshapes the tree)
     - near_match returns every stored word below a query prefix, sorted
     - word_count / longest_word / longest_compound_word work off the insertion log

    Removal never prunes nodes: emptied branches stay as scaffolding.
    Not thread-safe; share an instance across threads only behind a lock.
    """

    def __init__(self, delimiter: Any = None) -> None:
        # raises InvalidDelimiter before any state exists
        self._tokenizer = Tokenizer.from_delimiter(delimiter)
        self._roots: Dict[str, TrieNode] = {}
        self._first_keys: List[str] = []

    def __repr__(self) -> str:
        return (
            f"Trie(delimiter={self.delimiter!r}, roots={len(self._roots)}, "
            f"adds={self.word_count()})"
        )

    # configuration -----------------------------------------------------------
    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    @property
    def delimiter(self) -> Delimiter:
        return self._tokenizer.delimiter

    @property
    def delimiter_type(self) -> DelimiterType:
        return self._tokenizer.kind

    @property
    def has_delimiter(self) -> bool:
        return self._tokenizer.kind is not DelimiterType.NONE

    def tokenize(self, value: str) -> List[str]:
        """Lower-case `value` and split it with the configured strategy."""
        if not value:
            return []
        return self._tokenizer.split(value.lower())

    # insertion -----------------------------------------------------------
    def add(self, value: str) -> None:
        """
        Insert a value. Empty input is ignored.
        The terminal node is marked as a word and its count bumped by one,
        so adding the same value k times leaves count == k.
        """
        tokens = self.tokenize(value)
        if not tokens:
            return

        first = tokens[0]
        self._first_keys.append(first)

        node = self._roots.get(first)
        if node is None:
            node = self._roots[first] = TrieNode(first)
        for token in tokens[1:]:
            node = node.child_or_create(token)
        node.mark_word()
        node.increase()
        logger.debug("added %r (count=%d)", value, node.count)

    def add_all(self, values: Optional[Iterable[str]]) -> None:
        """Add each value in order."""
        if not values:
            return
        for value in values:
            self.add(value)

    # removal -----------------------------------------------------------
    def remove(self, value: str) -> None:
        """
        Drop one occurrence of `value`.
        Only a node currently marked as a word is touched: with count 1 the
        word flag is cleared and the count goes to 0, with count > 1 only the
        count goes down. Unknown values are ignored. Nodes are kept.
        """
        node = self._walk(self.tokenize(value))
        if node is None or not node.is_word:
            return
        if node.count == 1:
            node.unmark_word()
        node.decrease()
        logger.debug("removed %r (count=%d)", value, node.count)

    def remove_all(self, values: Optional[Iterable[str]]) -> None:
        """Remove each value in order."""
        if not values:
            return
        for value in values:
            self.remove(value)

    # search/traversal ---------------------------------------------------------
    def near_match(self, value: str) -> List[str]:
        """
        Return all stored words reachable from the query prefix, sorted.

        The query is tokenized like an insert. While walking, reaching a child
        with no children of its own ends the search right away with that
        child's text as the only result, even if query tokens are left over
        (or no result when that leaf's word was removed).
        Once the query is used up, the node itself (if a word) and every word
        below it are returned.

        An unknown first fragment gives []; an unknown fragment deeper down
        raises PathNotFound.
        """
        return self._near_match_tokens(self.tokenize(value))

    def near_match_all(self, values: Optional[Iterable[str]]) -> List[str]:
        """
        near_match for each value, concatenated in input order.
        Duplicates are dropped keeping the first occurrence (no re-sort).
        """
        if not values:
            return []
        out: Dict[str, None] = {}
        for value in values:
            for word in self.near_match(value):
                out.setdefault(word)
        return list(out)

    def _near_match_tokens(self, tokens: List[str]) -> List[str]:
        return sorted(self._match_counts(tokens))

    def near_match_counts(self, value: str) -> List[Tuple[str, int]]:
        """Like near_match, paired with each word's occurrence count."""
        return sorted(self._match_counts(self.tokenize(value)).items())

    def _match_counts(self, tokens: List[str]) -> Dict[str, int]:
        """Matched text -> occurrence count, unsorted."""
        if not tokens:
            return {}
        node = self._roots.get(tokens[0])
        if node is None:
            return {}

        path = [tokens[0]]
        for token in tokens[1:]:
            child = node.get(token)
            if child is None:
                raise PathNotFound(token, self._text(path))
            path.append(token)
            if child.is_leaf():
                # a removed word leaves its leaf behind as scaffolding
                return {self._text(path): child.count} if child.is_word else {}
            node = child

        found: Dict[str, int] = {}
        if node.is_word:
            self._record(found, path, node)
        self._collect(node, path, found)
        return found

    # subtree collector ---------------------------------------------------------
    def _collect(self, node: TrieNode, path: List[str], found: Dict[str, int]) -> None:
        """
        DFS adding the text of every word-marked descendant of `node`.
        Explicit stack of (node, depth): word length is not bounded by the recursion limit.
        """
        base = len(path)
        stack = [(child, base) for _, child in reversed(list(node.iter_children()))]
        while stack:
            child, depth = stack.pop()
            del path[depth:]
            path.append(child.key)
            if child.is_word:
                self._record(found, path, child)
            stack.extend((c, depth + 1) for _, c in reversed(list(child.iter_children())))
        del path[base:]

    def _record(self, found: Dict[str, int], path: List[str], node: TrieNode) -> None:
        # trimming can fold two paths onto one text; their counts add up
        text = self._text(path)
        found[text] = found.get(text, 0) + node.count

    def _walk(self, tokens: List[str]) -> Optional[TrieNode]:
        """Node at the end of `tokens`, or None if the path is missing."""
        if not tokens:
            return None
        node = self._roots.get(tokens[0])
        for token in tokens[1:]:
            if node is None:
                return None
            node = node.get(token)
        return node

    def _text(self, path: List[str]) -> str:
        return self._tokenizer.join(path)

    # aggregates -----------------------------------------------------
    def word_count(self) -> int:
        """Number of add() calls that stored something. Removes don't lower it."""
        return len(self._first_keys)

    def _branches(self) -> Iterable[List[str]]:
        """near_match of every distinct first fragment, in first-insert order."""
        for key in dict.fromkeys(self._first_keys):
            yield self._near_match_tokens([key])

    def longest_word(self) -> str:
        """Longest string reachable under any root branch (first seen wins ties)."""
        longest = ""
        for matches in self._branches():
            for word in matches:
                if len(word) > len(longest):
                    longest = word
        return longest

    def longest_compound_word(self) -> str:
        """
        Longest match of any branch once the branch's first (base) match is dropped.
        Heuristic only: the remainder is not checked to be made of stored words.
        """
        longest = ""
        for matches in self._branches():
            # a single match means nothing was built on top of the base word
            for word in matches[1:]:
                if len(word) > len(longest):
                    longest = word
        return longest

    # convenience/debugging -----------------------------------------------------
    def occurrences(self, value: str) -> int:
        """Current count of the exact value, 0 when it is not stored."""
        node = self._walk(self.tokenize(value))
        if node is None or not node.is_word:
            return 0
        return node.count

    def __contains__(self, value: str) -> bool:
        node = self._walk(self.tokenize(value))
        return node is not None and node.is_word

    def __len__(self) -> int:
        """
        Count distinct values currently marked as words.
        (Slow: O(N) walk. For inspection, not runtime.)
        """
        total = 0
        stack = list(self._roots.values())
        while stack:
            node = stack.pop()
            if node.is_word:
                total += 1
            stack.extend(node.children.values())
        return total
