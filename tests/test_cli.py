# tests/test_cli.py - command handling of the interactive shell
import io

import pytest
from rich.console import Console
from rich.prompt import Prompt

from trie_search.cli import cli as cli_mod
from trie_search.cli.cli import CLI, read_words
from trie_search.core.trie import Trie
from trie_search.utils.config_manager import Config
from trie_search.utils.logger_utils import Log


@pytest.fixture
def shell(tmp_path):
    out = io.StringIO()
    console = Console(file=out, width=120, force_terminal=False, color_system=None)
    cfg = Config(str(tmp_path / "config.json"))
    log = Log(str(tmp_path / "cli.log"), echo=False)
    c = CLI(trie=Trie(), cfg=cfg, console=console, log=log)
    c.out = out
    return c


def output(shell):
    text = shell.out.getvalue()
    shell.out.seek(0)
    shell.out.truncate()
    return text


def test_bare_line_adds_words(shell):
    shell.handle("alice alicia bob")
    assert shell.trie.contains("alice")
    assert shell.trie.contains("bob")
    assert "added 3 word(s)" in output(shell)


def test_has(shell):
    shell.handle("/add alice")
    output(shell)
    shell.handle("/has alice")
    assert "alice: yes" in output(shell)
    shell.handle("/has ali")
    assert "ali: no" in output(shell)


def test_suggest_and_search(shell):
    shell.handle("/add alice alicia bob hello hallo")
    output(shell)

    shell.handle("/suggest ali")
    text = output(shell)
    assert "alice" in text and "alicia" in text and "bob" not in text

    shell.handle("/suggest zz")
    assert "no suggestions" in output(shell)

    shell.handle("/search helo 1")
    text = output(shell)
    assert "hello" in text and "hallo" not in text
    assert "0.650" in text
    assert shell.metrics.count("suggest_time") == 2
    assert shell.metrics.count("search_time") == 1


def test_search_hides_scores_when_configured(shell):
    shell.handle("/add hello")
    shell.handle("/config show_scores false")
    output(shell)
    shell.handle("/search helo")
    text = output(shell)
    assert "hello" in text and "Score" not in text


def test_bad_limit_reported(shell):
    shell.handle("/add a aa")
    output(shell)
    shell.handle("/suggest a -1")
    assert "non-negative" in output(shell)
    shell.handle("/search a x")
    assert "non-negative" in output(shell)
    assert shell.metrics.keys() == []


def test_unknown_command(shell):
    shell.handle("/bogus")
    assert "Unknown command" in output(shell)
    shell.handle("/has")
    assert "Unknown command" in output(shell)
    assert shell.running


def test_config_command(shell):
    shell.handle("/config ranked_limit 3")
    assert shell.cfg.get("ranked_limit") == 3
    assert "ranked_limit = 3" in output(shell)
    shell.handle("/config nope 1")
    assert "No such option" in output(shell)
    shell.handle("/config ranked_limit many")
    assert "Bad value" in output(shell)
    shell.handle("/config")
    assert "suggest_limit" in output(shell)


def test_load(shell, tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("apple\n\napp\n  banana  \n", encoding="utf8")
    assert read_words(str(p)) == ["apple", "app", "banana"]

    shell.handle(f"/load {p}")
    assert "loaded 3 word(s)" in output(shell)
    assert shell.trie.contains("banana")
    shell.handle("/size")
    assert "3 words" in output(shell)


def test_load_missing_file_is_logged(shell, tmp_path):
    shell.handle(f"/load {tmp_path / 'missing.txt'}")
    assert "Load failed" in output(shell)
    assert "ERROR" in (tmp_path / "cli.log").read_text(encoding="utf-8")


def test_quit_and_stats(shell):
    shell.handle("/suggest a")
    shell.handle("/stats")
    assert "suggest_time" in output(shell)
    shell.handle("/quit")
    assert not shell.running


def test_main_runs_until_eof(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    words = tmp_path / "words.txt"
    words.write_text("hello\nhelp\n", encoding="utf8")
    lines = iter(["/suggest hel", "/quit"])

    def fake_ask(*args, **kwargs):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(Prompt, "ask", fake_ask)
    cli_mod.main(["--words", str(words), "--config", str(tmp_path / "c.json"), "--thread-safe"])
    out = capsys.readouterr().out
    assert "loaded 2 word(s)" in out
    assert "hello" in out and "help" in out
    assert "bye." in out


def test_markup_like_words_are_printed_verbatim(shell):
    shell.handle("/add [/b] [red]x")
    assert shell.trie.contains("[/b]")
    output(shell)

    shell.handle("/suggest [")
    text = output(shell)
    assert "[/b]" in text and "[red]x" in text

    shell.handle("/has [/b]")
    assert "[/b]: yes" in output(shell)

    shell.handle("/search [/b] 1")
    assert "[/b]" in output(shell)

    shell.handle("/nope [/i]")
    assert "[/i]" in output(shell)
    assert shell.running
