# logger_utils.py - app-level logging of messages and timing metrics for the CLI and tools

import os
import time
from datetime import datetime
from typing import Optional

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

# Default log file, can be overridden per Log instance (or via config "log_path")
DEFAULT_LOG_PATH = os.path.join("logs", "trie_search.log")


class Log:
    """Lightweight logger writing to a file and echoing to the console."""

    COLORS = {
        "DEBUG": Style.DIM,
        "INFO": Fore.BLUE,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "METRIC": Fore.CYAN,
    }

    def __init__(self, path: Optional[str] = None, use_color: bool = True, echo: bool = True):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.echo = echo

    def _append(self, line: str) -> None:
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)  # created on first write only
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

    def write(self, level: str, msg: str) -> None:
        """
        Append a line to the log file and echo it.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        self._append(line)

        if not self.echo:
            return
        if self.use_color and level in self.COLORS:
            print(self.COLORS[level] + line + Style.RESET_ALL)
        else:
            print(line)

    def debug(self, msg: str) -> None:
        self.write("DEBUG", msg)

    def info(self, msg: str) -> None:
        self.write("INFO", msg)

    def warning(self, msg: str) -> None:
        self.write("WARNING", msg)

    def error(self, msg: str) -> None:
        self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timing, counts, ...).
        Example line: [2024-01-01 12:45:02] METRIC  | suggest: 0.123s
        """
        self.write("METRIC", f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Measure a block and record it as a metric:
            with log.time_block("load words"):
                trie.insert_many(words)
        """
        return _Timer(self, label)


class _Timer:
    """Context manager behind Log.time_block."""

    def __init__(self, log: Log, label: str):
        self.log = log
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
        return False
