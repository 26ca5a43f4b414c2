"""
prefix_trie.core

The trie engine:
 - TrieNode: one vertex (fragment, children, word flag, count)
 - Tokenizer: character / fixed-count / separator splitting
 - Trie: insertion, removal, near match and aggregate analyses
 - errors and delimiter constants
"""

from .constants import DelimiterType
from .errors import InvalidDelimiter, PathNotFound, TrieError
from .node import TrieNode
from .tokenizer import Tokenizer
from .trie import Trie

__all__ = [
    "DelimiterType",
    "InvalidDelimiter",
    "PathNotFound",
    "TrieError",
    "TrieNode",
    "Tokenizer",
    "Trie",
]
