# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "thread_safe": False,     # lock every trie call
    "suggest_limit": 0,       # 0 = all completions
    "ranked_limit": 10,
    "show_scores": True,      # print scores next to /search results
    "log_path": os.path.join("logs", "trie_search.log"),
}

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def _coerce(default, val):
    """Cast `val` to the type of `default`."""
    if isinstance(default, bool):
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ValueError(f"not a boolean: {val!r}")
    if isinstance(default, int):
        v = int(val)
        if v < 0:
            raise ValueError(f"must be >= 0: {val!r}")
        return v
    return type(default)(val)


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            self.save()
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("config %s unreadable, using defaults: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object, using defaults", self.path)
            return
        for k, v in loaded.items():
            if k not in DEFAULTS:
                logger.warning("ignoring unknown config key %r", k)
                continue
            try:
                self.data[k] = _coerce(DEFAULTS[k], v)
            except (TypeError, ValueError) as e:
                logger.warning("bad value for %r (%s), keeping default", k, e)

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def set(self, key, val):
        """Set and persist one option. Unknown key -> KeyError, bad value -> ValueError."""
        if key not in self.data:
            raise KeyError(key)
        self.data[key] = _coerce(DEFAULTS[key], val)
        self.save()

    def items(self):
        return self.data.items()
