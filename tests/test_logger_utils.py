# tests/test_logger_utils.py - logging setup and timer

import logging
from unittest.mock import MagicMock

import pytest

from prefix_trie.utils import logger_utils
from prefix_trie.utils.logger_utils import Log, setup_logging


def test_setup_logging_sets_level():
    log = setup_logging("debug")
    assert log.level == logging.DEBUG
    assert len(log.handlers) == 1


def test_setup_logging_replaces_handlers():
    setup_logging("INFO")
    log = setup_logging("INFO")
    assert len(log.handlers) == 1


def test_setup_logging_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD")


def test_bare_file_name_goes_to_log_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    log = setup_logging("INFO", "trie.log")
    log.info("hello")
    for h in log.handlers:
        h.flush()
    assert "hello" in (tmp_path / "logs" / "trie.log").read_text(encoding="utf-8")


def test_time_block_records_metric(monkeypatch):
    fake = MagicMock()
    monkeypatch.setattr(logger_utils, "logger", fake)
    with Log.time_block("build") as t:
        pass
    assert t.elapsed >= 0
    fake.info.assert_called_once()
    assert fake.info.call_args[0][1] == "build done"
