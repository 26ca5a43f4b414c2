# prefix_trie/utils/__init__.py
# logging setup and JSON config used by the CLI

from .config_manager import Config
from .logger_utils import Log, setup_logging

__all__ = ["Config", "Log", "setup_logging"]
