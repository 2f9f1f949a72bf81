"""
cli.py - interactive shell around a Trie
Features:
- add words inline or from a file (one word per line)
- exact lookup, prefix completion and ranked fuzzy search
- per-command latency stats
- JSON config for default limits / thread safety
- Uses Rich for tables and formatting
"""

import argparse
import shlex
import time
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from trie_search.core.trie import Trie
from trie_search.utils.config_manager import Config
from trie_search.utils.logger_utils import Log
from trie_search.utils.metrics_tracker import Metrics

HELP = """\
/add <word>...            insert words (a bare line does the same)
/has <word>               exact lookup
/suggest <prefix> [n]     prefix completions (n=0: all)
/search <query> [n]       ranked fuzzy search (n=0: all)
/load <file>              insert one word per line
/size                     number of distinct words
/stats                    average latencies
/config [key value]       show or change options
/quit                     leave"""


def read_words(path: str) -> List[str]:
    """Non-blank lines of `path`, trailing newline/whitespace stripped."""
    with open(path, "r", encoding="utf8") as f:
        return [ln.strip() for ln in f if ln.strip()]


class CLI:
    """Command loop: parses slash commands and prints results with Rich."""

    def __init__(
        self,
        trie: Optional[Trie] = None,
        cfg: Optional[Config] = None,
        console: Optional[Console] = None,
        log: Optional[Log] = None,
    ):
        self.cfg = cfg or Config()
        self.trie = trie or Trie(thread_safe=self.cfg.get("thread_safe"))
        self.console = console or Console()
        self.log = log or Log(self.cfg.get("log_path"), echo=False)
        self.metrics = Metrics()
        self.running = True

    def run(self):
        self.console.rule("[bold magenta]trie-search[/bold magenta]")
        self.console.print("[cyan]Type words to add them, /help for commands.[/cyan]")
        while self.running:
            try:
                line = Prompt.ask("[green]>[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.running = False
                break
            self.handle(line)
        self.console.print("bye.")

    # COMMAND HANDLING -----------------------------------------------------------
    def handle(self, line: str):
        line = line.strip()
        if not line:
            return
        if not line.startswith("/"):
            self._add(line.split())
            return

        try:
            p = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Bad input:[/red] {escape(str(e))}")
            return
        c, args = p[0].lower(), p[1:]

        if c in ("/q", "/quit", "/exit"):
            self.running = False
        elif c == "/help":
            self.console.print(Panel(HELP, title="Commands", border_style="cyan"))
        elif c == "/add" and args:
            self._add(args)
        elif c == "/has" and len(args) == 1:
            self._has(args[0])
        elif c == "/suggest" and 1 <= len(args) <= 2:
            self._suggest(args[0], self._limit(args, "suggest_limit"))
        elif c == "/search" and 1 <= len(args) <= 2:
            self._search(args[0], self._limit(args, "ranked_limit"))
        elif c == "/load" and len(args) == 1:
            self._load(args[0])
        elif c == "/size":
            self.console.print(f"{len(self.trie)} words")
        elif c == "/stats":
            self._show_stats()
        elif c == "/config":
            self._config(args)
        else:
            self.console.print(f"[red]Unknown command or bad arguments:[/red] {escape(line)}")

    def _limit(self, args: List[str], key: str) -> Optional[int]:
        if len(args) < 2:
            return self.cfg.get(key)
        try:
            n = int(args[1])
        except ValueError:
            n = -1
        if n < 0:
            self.console.print(f"[red]limit must be a non-negative integer:[/red] {escape(args[1])}")
            return None
        return n

    # COMMANDS -----------------------------------------------------------------
    def _add(self, words: Sequence[str]):
        self.trie.insert_many(words)
        self.console.print(f"[green]added[/green] {len(words)} word(s)")

    def _has(self, word: str):
        found = self.trie.contains(word)
        style = "green" if found else "red"
        self.console.print(f"[{style}]{escape(word)}: {'yes' if found else 'no'}[/{style}]")

    def _suggest(self, prefix: str, limit: Optional[int]):
        if limit is None:
            return
        t0 = time.perf_counter()
        out = self.trie.suggest(prefix, limit)
        self.metrics.record("suggest_time", time.perf_counter() - t0)
        if not out:
            self.console.print("[dim](no suggestions)[/dim]")
            return
        table = Table(title=f"Completions of {escape(repr(prefix))}", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Freq", justify="right", style="magenta")
        for i, w in enumerate(out, 1):
            table.add_row(str(i), Text(w), str(self.trie.frequency(w)))
        self.console.print(table)

    def _search(self, query: str, limit: Optional[int]):
        if limit is None:
            return
        t0 = time.perf_counter()
        out = self.trie.search_ranked_with_scores(query, limit)
        self.metrics.record("search_time", time.perf_counter() - t0)
        if not out:
            self.console.print("[dim](no words stored)[/dim]")
            return
        show_scores = self.cfg.get("show_scores")
        table = Table(title=f"Ranked matches for {escape(repr(query))}", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        if show_scores:
            table.add_column("Score", justify="right", style="magenta")
        for i, (w, score) in enumerate(out, 1):
            row = [str(i), Text(w)]
            if show_scores:
                row.append(f"{score:.3f}")
            table.add_row(*row)
        self.console.print(table)

    def _load(self, path: str):
        try:
            with self.log.time_block(f"load {path}"):
                words = read_words(path)
                self.trie.insert_many(words)
        except OSError as e:
            self.log.error(f"load {path}: {e}")
            self.console.print(f"[red]Load failed:[/red] {escape(str(e))}")
            return
        self.console.print(f"[green]loaded[/green] {len(words)} word(s) from {escape(path)}")

    def _show_stats(self):
        table = Table(title="Latency", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Calls", justify="right")
        table.add_column("Avg (ms)", justify="right")
        for k in self.metrics.keys():
            table.add_row(k, str(self.metrics.count(k)), f"{self.metrics.avg(k) * 1000:.3f}")
        self.console.print(table)

    def _config(self, args: List[str]):
        if not args:
            table = Table(title="Config", box=box.MINIMAL)
            table.add_column("Key", style="cyan")
            table.add_column("Value")
            for k, v in self.cfg.items():
                table.add_row(k, Text(str(v)))
            self.console.print(table)
            return
        if len(args) != 2:
            self.console.print("usage: /config [key value]")
            return
        try:
            self.cfg.set(args[0], args[1])
        except KeyError:
            self.console.print(f"[red]No such option:[/red] {escape(args[0])}")
            return
        except ValueError as e:
            self.console.print(f"[red]Bad value:[/red] {escape(str(e))}")
            return
        self.console.print(escape(f"{args[0]} = {self.cfg.get(args[0])}"))


def main(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(prog="trie-search", description="Interactive prefix tree shell")
    parser.add_argument("--words", help="file with one word per line to preload")
    parser.add_argument("--config", default="config.json", help="JSON config path")
    parser.add_argument("--thread-safe", action="store_true", help="lock every trie operation")
    args = parser.parse_args(argv)

    cfg = Config(args.config)
    trie = Trie(thread_safe=args.thread_safe or cfg.get("thread_safe"))
    cli = CLI(trie=trie, cfg=cfg)
    if args.words:
        cli.handle(f"/load {shlex.quote(args.words)}")
    cli.run()


if __name__ == "__main__":
    main()
