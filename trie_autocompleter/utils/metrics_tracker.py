# metrics_tracker.py

import json
import logging
import os
from collections import defaultdict

from rich import box
from rich.table import Table

logger = logging.getLogger(__name__)


class Metrics:
    """Running sum/count per key. Persisted as JSON only when a path is set."""

    def __init__(self, path=None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        if path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                d = json.load(f)
            for k, v in d.items():
                self.m[k] = v["sum"]
                self.n[k] = v["count"]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("metrics %s unreadable, starting fresh: %s", self.path, e)

    def save(self):
        if not self.path:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def count(self, key):
        return self.n.get(key, 0)

    def avg(self, key):
        if self.n.get(key, 0) == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def table(self):
        t = Table(title="Command timings", box=box.MINIMAL)
        t.add_column("Command", style="cyan")
        t.add_column("Calls", justify="right")
        t.add_column("Avg (ms)", justify="right", style="magenta")
        t.add_column("Total (ms)", justify="right")
        for k in sorted(self.m):
            t.add_row(k, str(self.n[k]), f"{self.avg(k) * 1000:.3f}", f"{self.m[k] * 1000:.3f}")
        return t
