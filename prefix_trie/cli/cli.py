"""
cli.py - interactive shell around the token trie
Features:
- Type a prefix to see every stored word below it (near match)
- Slash commands to add/remove words, bulk-load a word list and run the analyses
- JSON config for the delimiter, result limit and logging
- Uses Rich for tables and formatting
"""

import argparse
import os
import sys
from typing import Dict, Iterable, List, Optional, Tuple

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box

from prefix_trie.core.constants import DELIMITER_LABELS
from prefix_trie.core.errors import TrieError
from prefix_trie.core.trie import Trie
from prefix_trie.utils.config_manager import Config, parse_delimiter
from prefix_trie.utils.logger_utils import Log, logger, setup_logging

# initialise console for rich output
console = Console()

HELP = """\
<prefix>            near match for a prefix
/add w1 w2 ...      add words
/remove w1 w2 ...   remove one occurrence of each word
/match w1 w2 ...    near match for several prefixes (merged, first-seen order)
/longest            longest stored word
/compound           longest compound word
/count              number of adds so far
/load FILE          add every line of FILE
/config             show configuration
/set KEY VALUE      change a config option (delimiter applies to a new, empty trie)
/help               this text
/quit               exit"""


def read_words(path: str) -> List[str]:
    """One value per line, blank lines skipped."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


class CLI:
    """Command-line interface class to drive a Trie interactively."""
    def __init__(self, cfg: Config, trie: Optional[Trie] = None, out: Optional[Console] = None):
        """
        - keeps the Config around for /config and /set
        - builds the Trie from the configured delimiter unless one is passed in
        """
        self.cfg = cfg
        self.console = out or console
        self.trie = trie if trie is not None else Trie(delimiter=cfg.get("delimiter"))
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - prompt for input
        - slash commands are dispatched, anything else is a near-match query
        """
        self.console.rule("[bold magenta]Prefix Trie[/bold magenta]")
        self.console.print(
            f"[cyan]Mode: {DELIMITER_LABELS[self.trie.delimiter_type]}"
            f" (delimiter={self.trie.delimiter!r}). Type /help for commands.[/cyan]\n"
        )
        while self.running:
            try:
                line = Prompt.ask("[green]trie[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            self.handle(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def handle(self, line: str):
        """Run one line of input; trie errors are reported and the loop goes on."""
        line = line.strip()
        if not line:
            return
        try:
            if line.startswith("/"):
                self._handle_command(line)
            else:
                self._show_matches(line, self.trie.near_match_counts(line))
        except TrieError as e:
            logger.debug("command %r failed: %s", line, e)
            self.console.print(f"[red]Error:[/red] {e}")

    def _handle_command(self, cmd: str):
        name, _, rest = cmd.partition(" ")
        args = rest.split()

        if name == "/quit":
            self._exit()
        elif name == "/help":
            self.console.print(Panel(HELP, title="Commands", border_style="cyan"))
        elif name == "/add":
            self.trie.add_all(args)
            self.console.print(f"[green]Added {len(args)} value(s).[/green]")
        elif name == "/remove":
            self.trie.remove_all(args)
            self.console.print(f"[yellow]Removed {len(args)} value(s).[/yellow]")
        elif name == "/match":
            self._show_matches(" ".join(args), self._match_all(args))
        elif name == "/longest":
            self._show_value("Longest word", self.trie.longest_word())
        elif name == "/compound":
            self._show_value("Longest compound word", self.trie.longest_compound_word())
        elif name == "/count":
            self._show_value("Word count", str(self.trie.word_count()))
        elif name == "/load":
            self.load(rest.strip())
        elif name == "/config":
            self._show_config()
        elif name == "/set":
            self._set_option(args)
        else:
            self.console.print(f"[red]Unknown command:[/red] {cmd}")

    # ACTIONS -------------------------------------------------------------------------
    def load(self, path: str):
        """Bulk add a word list file."""
        if not path:
            self.console.print("[red]Usage:[/red] /load FILE")
            return
        try:
            words = read_words(path)
        except OSError as e:
            self.console.print(f"[red]Load failed:[/red] {e}")
            return
        with Log.time_block(f"load {os.path.basename(path)}"):
            self.trie.add_all(words)
        self.console.print(f"[green]Loaded {len(words)} value(s) from {path}.[/green]")

    def _set_option(self, args: List[str]):
        if len(args) < 2:
            self.console.print("[red]Usage:[/red] /set KEY VALUE")
            return
        key, val = args[0], " ".join(args[1:])
        fresh = None
        if key == "delimiter":
            # the tokenizer is fixed per trie; build the new one before saving the option
            fresh = Trie(delimiter=parse_delimiter(val))
        try:
            self.cfg.set(key, val)
        except (KeyError, ValueError) as e:
            self.console.print(f"[red]Cannot set {key}:[/red] {e}")
            return
        if fresh is not None:
            self.trie = fresh
            self.console.print("[yellow]Delimiter changed, trie reset.[/yellow]")
        elif key in ("log_level", "log_file"):
            try:
                setup_logging(self.cfg.get("log_level"), self.cfg.get("log_file"))
            except (OSError, ValueError) as e:
                self.console.print(f"[red]Logging not updated:[/red] {e}")
                return
        self.console.print(f"[green]{key} = {self.cfg.get(key)!r}[/green]")

    # DISPLAY -------------------------------------------------------------------------------
    def _match_all(self, args: List[str]) -> List[Tuple[str, int]]:
        """near_match_counts per argument, merged in first-seen order."""
        merged: Dict[str, int] = {}
        for arg in args:
            for word, count in self.trie.near_match_counts(arg):
                merged.setdefault(word, count)
        return list(merged.items())

    def _show_matches(self, query: str, matches: List[Tuple[str, int]]):
        if not matches:
            self.console.print("[dim](no matches)[/dim]")
            return
        limit = self.cfg.get("max_results")
        table = Table(title=f"Matches for {query!r}", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Count", justify="right", style="magenta")
        for i, (word, count) in enumerate(matches[:limit], 1):
            table.add_row(str(i), word, str(count))
        self.console.print(table)
        if len(matches) > limit:
            self.console.print(f"[dim]... {len(matches) - limit} more[/dim]")

    def _show_value(self, label: str, value: str):
        self.console.print(f"[cyan]{label}:[/cyan] {value or '(none)'}")

    def _show_config(self):
        table = Table(title="Configuration", box=box.MINIMAL)
        table.add_column("Option", style="cyan")
        table.add_column("Value")
        for k, v in self.cfg.rows():
            table.add_row(k, repr(v))
        self.console.print(table)

    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="prefix-trie", description="Interactive token trie shell.")
    p.add_argument("--config", default="prefix_trie.json", help="JSON config file")
    p.add_argument("--delimiter", help="separator string, or a positive chunk size")
    p.add_argument("--load", action="append", default=[], metavar="FILE",
                   help="word list to add at start-up (repeatable)")
    p.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return p


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    cfg = Config(args.config)
    if args.delimiter is not None:
        cfg.data["delimiter"] = parse_delimiter(args.delimiter)
    if args.log_level:
        cfg.data["log_level"] = args.log_level
    try:
        setup_logging(cfg.get("log_level"), cfg.get("log_file"))
    except (OSError, ValueError) as e:
        console.print(f"[yellow]Logging config ignored:[/yellow] {e}")
        setup_logging("WARNING")

    try:
        cli = CLI(cfg)
    except TrieError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 2
    for path in args.load:
        cli.load(path)
    cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
