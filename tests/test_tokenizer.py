# tests/test_tokenizer.py - delimiter selection and splitting

import pytest

from prefix_trie import InvalidDelimiter, Trie
from prefix_trie.core.constants import DelimiterType
from prefix_trie.core.tokenizer import Tokenizer, split_by_count


# -----------------------------------
# strategy selection
# -----------------------------------
@pytest.mark.parametrize("delimiter", [None, "", 0])
def test_falsy_delimiter_splits_characters(delimiter):
    tok = Tokenizer.from_delimiter(delimiter)
    assert tok.kind is DelimiterType.NONE
    assert tok.delimiter is None
    assert tok.split("abc") == ["a", "b", "c"]


def test_positive_int_is_fixed_count():
    tok = Tokenizer.from_delimiter(3)
    assert tok.kind is DelimiterType.COUNT_MATCH
    assert tok.delimiter == 3
    assert tok.split("abcdefg") == ["abc", "def", "g"]


def test_float_count_is_truncated():
    tok = Tokenizer.from_delimiter(2.9)
    assert tok.kind is DelimiterType.COUNT_MATCH
    assert tok.count == 2


def test_string_is_separator():
    tok = Tokenizer.from_delimiter("-")
    assert tok.kind is DelimiterType.STR_MATCH
    assert tok.delimiter == "-"
    assert tok.split("ab-cd-e") == ["ab", "cd", "e"]


def test_multichar_separator_is_literal():
    tok = Tokenizer.from_delimiter("..")
    assert tok.split("a..b.c") == ["a", "b.c"]


@pytest.mark.parametrize("bad", [-1, -3, 0.5])
def test_count_below_one_is_rejected(bad):
    with pytest.raises(InvalidDelimiter) as exc:
        Tokenizer.from_delimiter(bad)
    assert exc.value.value == bad
    # also a ValueError for callers that don't know the trie errors
    assert isinstance(exc.value, ValueError)


# -----------------------------------
# split / join helpers
# -----------------------------------
def test_split_empty_is_empty():
    assert Tokenizer().split("") == []
    assert Tokenizer.from_delimiter(2).split("") == []


def test_split_by_count_exact_multiple():
    assert split_by_count("abcdef", 2) == ["ab", "cd", "ef"]
    assert split_by_count("abc", 0) == []


def test_join_only_inserts_separator_for_separator_mode():
    assert Tokenizer.from_delimiter("-").join(["ab", "cd"]) == "ab-cd"
    assert Tokenizer.from_delimiter(2).join(["ab", "cd"]) == "abcd"
    assert Tokenizer().join(["a", "b"]) == "ab"


def test_join_trims_whitespace():
    assert Tokenizer.from_delimiter(" ").join(["hello", "world", ""]) == "hello world"


# -----------------------------------
# Trie.tokenize lower-cases first
# -----------------------------------
def test_trie_tokenize_lowercases():
    assert Trie(3).tokenize("ABCdefG") == ["abc", "def", "g"]
    assert Trie("-").tokenize("Ab-CD-e") == ["ab", "cd", "e"]
    assert Trie().tokenize("AbC") == ["a", "b", "c"]
    assert Trie().tokenize("") == []


def test_nan_selects_characters():
    assert Tokenizer.from_delimiter(float("nan")).kind is DelimiterType.NONE


@pytest.mark.parametrize("bad", [float("inf"), float("-inf")])
def test_infinite_count_is_rejected(bad):
    with pytest.raises(InvalidDelimiter):
        Tokenizer.from_delimiter(bad)
