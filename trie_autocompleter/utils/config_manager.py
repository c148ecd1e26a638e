# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_word_length": 50,
    "not_found_message": "No words found",
    "load_error_message": "Failed to open file",
    "log_level": "WARNING",
    "log_file": None,
    "color": True,
    "record_metrics": False,
    "metrics_file": None,
}


class Config:
    """
    Defaults overlaid with an optional JSON file.
    path=None keeps everything in memory (nothing is written).
    """

    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        if path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("config %s unreadable, using defaults: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object, using defaults", self.path)
            return
        for key, val in loaded.items():
            if key not in self.data:
                logger.warning("config %s: unknown option %r ignored", self.path, key)
                continue
            self.data[key] = val

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def set(self, key, val, persist=True):
        """Set an option, coercing to the type of its default.
        persist=False changes it for this run only (e.g. command line flags)."""
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        default = DEFAULTS[key]
        if default is None or val is None:
            self.data[key] = val
        elif isinstance(default, bool) and isinstance(val, str):
            self.data[key] = val.strip().lower() in ("1", "true", "yes", "on")
        else:
            self.data[key] = type(default)(val)
        if persist:
            self.save()
