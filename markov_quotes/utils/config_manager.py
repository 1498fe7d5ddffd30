# config_manager.py - JSON config manager for training/generation settings

import json
import logging
import os
from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table
from rich import box

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "corpus_path": "quotes.txt",
    "context_size": 3,  # words of history per prediction
    "bucket_count": 420,  # hash table size, fixed for the model's lifetime
    "max_quote_length": 50,
    "quote_count": 1,
    "skip_marker": "-",
    "terminators": ".!?",
    "seed": None,
}

_POSITIVE_INTS = ("context_size", "bucket_count", "max_quote_length", "quote_count")


class ConfigError(ValueError):
    """Raised for unknown keys, bad values or an unreadable config file."""


class Config:
    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        if path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            logger.debug("config %s not found, using defaults", self.path)
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"malformed config {self.path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"unable to read config {self.path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"config {self.path} must hold a JSON object")
        for key, val in loaded.items():
            if key not in DEFAULTS:
                logger.warning("ignoring unknown config option %r", key)
                continue
            self.data[key] = val
        self.validate()

    def save(self, path: Optional[str] = None):
        path = path or self.path
        if not path:
            raise ConfigError("no config path to save to")
        with open(path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        if key not in self.data:
            raise ConfigError(f"No such option: {key}")
        return self.data[key]

    def set(self, key: str, val: Any):
        """Set an option, coercing strings to the type of its default."""
        if key not in self.data:
            raise ConfigError(f"No such option: {key}")
        default = DEFAULTS[key]
        if val is not None and default is not None and not isinstance(val, type(default)):
            try:
                val = type(default)(val)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"bad value for {key}: {val!r}") from e
        elif key == "seed" and val is not None:
            try:
                val = int(val)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"bad value for seed: {val!r}") from e
        self.data[key] = val
        self.validate()

    def update(self, overrides: Dict[str, Any]):
        """Apply several options at once; None values are left alone."""
        for key, val in overrides.items():
            if val is not None:
                self.set(key, val)

    def validate(self):
        for key in _POSITIVE_INTS:
            val = self.data[key]
            if isinstance(val, bool) or not isinstance(val, int) or val < 1:
                raise ConfigError(f"{key} must be a positive integer, got {val!r}")
        if not isinstance(self.data["terminators"], str) or not self.data["terminators"]:
            raise ConfigError("terminators must be a non-empty string")
        if not isinstance(self.data["skip_marker"], str):
            raise ConfigError("skip_marker must be a string")
        seed = self.data["seed"]
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ConfigError(f"seed must be an integer or null, got {seed!r}")

    def show(self, console: Optional[Console] = None):
        table = Table(title="Configuration", box=box.SIMPLE)
        table.add_column("Option", style="cyan")
        table.add_column("Value")
        for k, v in self.data.items():
            table.add_row(k, repr(v))
        (console or Console()).print(table)
