"""
prefix_trie

In-memory token trie with occurrence counts, near-match lookup and
longest / longest-compound word analyses.
"""

from .core import (
    DelimiterType,
    InvalidDelimiter,
    PathNotFound,
    Tokenizer,
    Trie,
    TrieError,
    TrieNode,
)

__all__ = [
    "DelimiterType",
    "InvalidDelimiter",
    "PathNotFound",
    "Tokenizer",
    "Trie",
    "TrieError",
    "TrieNode",
]

__version__ = "0.1.0"
