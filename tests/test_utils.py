# tests/test_utils.py - config, metrics and log helpers
import json

import pytest

from trie_search.utils.config_manager import DEFAULTS, Config
from trie_search.utils.logger_utils import Log
from trie_search.utils.metrics_tracker import Metrics


def test_config_creates_file_with_defaults(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    assert cfg.data == DEFAULTS
    assert json.loads(p.read_text(encoding="utf8")) == DEFAULTS


def test_config_merges_and_coerces(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"ranked_limit": "5", "thread_safe": "yes", "bogus": 1}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("ranked_limit") == 5
    assert cfg.get("thread_safe") is True
    assert "bogus" not in cfg.data
    assert cfg.get("suggest_limit") == 0


def test_config_malformed_file_keeps_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf8")
    assert Config(str(p)).data == DEFAULTS

    p.write_text("[1, 2]", encoding="utf8")
    assert Config(str(p)).data == DEFAULTS


def test_config_set(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    cfg.set("show_scores", "off")
    cfg.set("suggest_limit", "7")
    assert cfg.get("show_scores") is False
    assert Config(str(p)).get("suggest_limit") == 7

    with pytest.raises(KeyError):
        cfg.set("nope", "1")
    with pytest.raises(ValueError):
        cfg.set("ranked_limit", "-2")
    with pytest.raises(ValueError):
        cfg.set("thread_safe", "maybe")


def test_metrics_in_memory():
    m = Metrics()
    assert m.avg("x") == 0.0
    m.record("x", 1.0)
    m.record("x", 3.0)
    assert m.avg("x") == pytest.approx(2.0)
    assert m.count("x") == 2
    assert m.keys() == ["x"]


def test_metrics_persist(tmp_path):
    p = tmp_path / "metrics.json"
    m = Metrics(str(p))
    m.record("suggest_time", 0.5)
    again = Metrics(str(p))
    assert again.avg("suggest_time") == pytest.approx(0.5)


def test_log_writes_file_lazily(tmp_path, capsys):
    p = tmp_path / "sub" / "app.log"
    log = Log(str(p), use_color=False)
    assert not p.parent.exists()
    log.info("hello")
    log.error("bad thing")
    lines = p.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "INFO    | hello" in lines[0]
    assert "ERROR   | bad thing" in lines[1]
    assert "hello" in capsys.readouterr().out


def test_log_time_block_records_metric(tmp_path):
    p = tmp_path / "app.log"
    log = Log(str(p), echo=False)
    with log.time_block("work") as timer:
        sum(range(100))
    assert timer.elapsed >= 0
    text = p.read_text(encoding="utf-8")
    assert "METRIC" in text
    assert "work done:" in text
