# tests/conftest.py - shared fixtures

import logging

import pytest

from prefix_trie import Trie


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """setup_logging() swaps handlers on the package logger; undo it after each test."""
    log = logging.getLogger("prefix_trie")
    handlers, level, propagate = list(log.handlers), log.level, log.propagate
    yield
    for h in list(log.handlers):
        if h not in handlers:
            log.removeHandler(h)
            h.close()
    log.setLevel(level)
    log.propagate = propagate


@pytest.fixture
def trie():
    return Trie()


@pytest.fixture
def words_trie():
    t = Trie()
    t.add_all(["cat", "car", "care", "dog", "dot"])
    return t
