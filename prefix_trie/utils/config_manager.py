# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "delimiter": None,  # None -> characters, int -> fixed count, str -> separator
    "max_results": 20,
    "log_level": "WARNING",
    "log_file": None,
}


def parse_delimiter(val):
    """Delimiter typed on the command line: digits -> int, 'none'/'' -> None, else str."""
    if val is None or isinstance(val, int):
        return val
    text = str(val)
    if text.strip().lower() in ("", "none", "null"):
        return None
    try:
        return int(text)
    except ValueError:
        return text


class Config:
    def __init__(self, path="prefix_trie.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("could not read config %s, using defaults: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object, using defaults", self.path)
            return
        for k, v in loaded.items():
            if k in self.data:
                self.data[k] = v
            else:
                logger.warning("ignoring unknown config option %r", k)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def rows(self):
        return list(self.data.items())

    def set(self, key, val):
        """Set an option, coercing it to the type of its default. Raises KeyError on unknown keys."""
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        if key == "delimiter":
            self.data[key] = parse_delimiter(val)
        elif key == "log_file":
            self.data[key] = None if str(val).lower() in ("", "none", "null") else str(val)
        elif key == "log_level":
            name = str(val).upper()
            if not isinstance(logging.getLevelName(name), int):
                raise ValueError(f"unknown log level: {val}")
            self.data[key] = name
        elif key == "max_results":
            n = int(val)
            if n < 1:
                raise ValueError(f"max_results must be at least 1, got {n}")
            self.data[key] = n
        else:
            self.data[key] = type(DEFAULTS[key])(val)
        self.save()
