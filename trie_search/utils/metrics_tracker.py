# metrics_tracker.py - running averages of timings (in memory, optionally saved as JSON)

import json
import logging
import os
from collections import defaultdict
from typing import List, Optional

logger = logging.getLogger(__name__)


class Metrics:
    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                d = json.load(f)
            for k, v in d.items():
                self.m[k] = float(v["sum"])
                self.n[k] = int(v["count"])
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("metrics file %s ignored: %s", self.path, e)

    def save(self):
        if not self.path:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key: str, val: float):
        self.m[key] += val
        self.n[key] += 1
        self.save()

    def avg(self, key: str) -> float:
        if self.n.get(key, 0) == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def count(self, key: str) -> int:
        return self.n.get(key, 0)

    def keys(self) -> List[str]:
        return sorted(self.m)
