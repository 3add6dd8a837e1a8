# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_PATH = os.path.join(os.path.expanduser("~"), ".placefinder.json")
ENV_VAR = "PLACEFINDER_CONFIG"


class Config:
    DEFAULTS = {
        "max_suggestions": 10,
        "full_scan_fallback": False,  # rank whole vocabulary when the prefix walk breaks
        "log_level": "WARNING",
        "time_format": "%a, %d %b %Y %I:%M:%S %p",
    }

    def __init__(self, path=None):
        self.path = path or os.environ.get(ENV_VAR) or DEFAULT_PATH
        self.data = dict(self.DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                stored = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(stored, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return
        for k, v in stored.items():
            if k in self.data:
                self.data[k] = v
            else:
                logger.debug("unknown config key %r in %s", k, self.path)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def __getitem__(self, key):
        return self.data[key]

    def set(self, key, val):
        """Set and persist one option, coerced to the type of its default."""
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        kind = type(self.DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        else:
            val = kind(val)
        if key == "max_suggestions" and val < 1:
            raise ValueError("max_suggestions must be at least 1")
        self.data[key] = val
        self.save()
        return val
