# tokenizer.py
# Turns an input string into the ordered key fragments the trie is keyed by.
# The strategy is picked once from the constructor's delimiter and never changes.

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterable, List, Union

from prefix_trie.core.constants import DelimiterType
from prefix_trie.core.errors import invalid_delimiter

Delimiter = Union[str, int, None]


@dataclass(frozen=True)
class Tokenizer:
    """
    Closed variant over the three split strategies:
     - NONE: one fragment per character
     - COUNT_MATCH(n): chunks of n characters, last chunk may be shorter
     - STR_MATCH(s): literal split on s
    """

    kind: DelimiterType = DelimiterType.NONE
    count: int = 0
    separator: str = ""

    @classmethod
    def from_delimiter(cls, delimiter: Any = None) -> "Tokenizer":
        """
        Pick a strategy from a user supplied delimiter.
        Falsy or NaN -> NONE, number >= 1 -> COUNT_MATCH, number < 1 -> InvalidDelimiter,
        anything else -> STR_MATCH on its string form.
        """
        if not delimiter or (isinstance(delimiter, float) and math.isnan(delimiter)):
            return cls()
        if isinstance(delimiter, Real) and not isinstance(delimiter, bool):
            if not math.isfinite(delimiter):
                invalid_delimiter(delimiter)
            n = int(delimiter)
            if n < 1:
                invalid_delimiter(delimiter)
            return cls(kind=DelimiterType.COUNT_MATCH, count=n)
        return cls(kind=DelimiterType.STR_MATCH, separator=str(delimiter))

    @property
    def delimiter(self) -> Delimiter:
        if self.kind is DelimiterType.COUNT_MATCH:
            return self.count
        if self.kind is DelimiterType.STR_MATCH:
            return self.separator
        return None

    def split(self, value: str) -> List[str]:
        """Fragments of `value` as-is (no case folding here)."""
        if not value:
            return []
        if self.kind is DelimiterType.COUNT_MATCH:
            return split_by_count(value, self.count)
        if self.kind is DelimiterType.STR_MATCH:
            return value.split(self.separator)
        return list(value)

    def join(self, fragments: Iterable[str]) -> str:
        """Rebuild display text from stored fragments."""
        glue = self.separator if self.kind is DelimiterType.STR_MATCH else ""
        return glue.join(fragments).strip()


def split_by_count(value: str, count: int) -> List[str]:
    """Cut `value` into consecutive `count`-sized chunks."""
    if not value or count < 1:
        return []
    return [value[i:i + count] for i in range(0, len(value), count)]
