# logger_utils.py - logging setup and timing helpers for the trie tools

import logging
import os
import time
from typing import Optional, Union

# Directory where log files go when a bare file name is given
LOG_DIR = "logs"

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("prefix_trie")


def setup_logging(level: Union[str, int] = "WARNING", path: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger: console handler always, file handler when `path` is set.
    Calling it again replaces the previous handlers instead of stacking them.
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {name}")

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)

    if path:
        if not os.path.dirname(path):
            os.makedirs(LOG_DIR, exist_ok=True)  # create the folder only when a file log is asked for
            path = os.path.join(LOG_DIR, path)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger


class Log:
    """Small helpers on top of the package logger."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts).
        Example: build trie done: 0.123s
        """
        logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("load words"):
                trie.add_all(words)
        It logs how long the block took.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """On exit compute the duration and record it as a metric."""
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")
