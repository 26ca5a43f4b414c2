# constants.py - delimiter tags shared by the tokenizer and the trie

from enum import Enum


class DelimiterType(Enum):
    """How an input string is cut into key fragments."""

    NONE = "none"  # one fragment per character
    COUNT_MATCH = "count"  # fixed-size chunks
    STR_MATCH = "separator"  # split on a literal separator


# display names for the CLI banner
DELIMITER_LABELS = {
    DelimiterType.NONE: "characters",
    DelimiterType.COUNT_MATCH: "fixed count",
    DelimiterType.STR_MATCH: "separator",
}
