# errors.py - exceptions raised by the trie engine

from __future__ import annotations

import logging
from typing import Any, NoReturn

logger = logging.getLogger(__name__)


class TrieError(Exception):
    """Base class for every error the trie raises."""


class InvalidDelimiter(TrieError, ValueError):
    """A numeric delimiter below 1 was given to the constructor."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"invalid delimiter {value!r}: a count delimiter must be a positive integer"
        )


class PathNotFound(TrieError, KeyError):
    """A near-match query left the stored structure below the root level."""

    def __init__(self, fragment: str, prefix: str) -> None:
        self.fragment = fragment
        self.prefix = prefix
        super().__init__(fragment)

    def __str__(self) -> str:
        return f"no fragment {self.fragment!r} below {self.prefix!r}"


def invalid_delimiter(value: Any) -> NoReturn:
    """Report a bad delimiter and abort construction."""
    logger.error("rejected delimiter %r", value)
    raise InvalidDelimiter(value)
