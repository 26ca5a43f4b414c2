from prefix_trie.cli.cli import CLI, main

__all__ = ["CLI", "main"]
