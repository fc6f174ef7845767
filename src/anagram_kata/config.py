"""Demo configuration: built-in defaults with an optional JSON override."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Tuple

from .loader import DEMO_WORDS

DEFAULT_CONFIG_PATH = "resources/config.json"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DemoConfig:
    """Settings for the demonstration run.

    Attributes:
        log_level: Console log level name
        log_file: Optional path for a rotating DEBUG log
        seed_words: Words loaded into the store first
        word_list: Optional UTF-8 word file loaded after the seed words
        extra_words: Words inserted one by one after seeding
        queries: Words looked up and reported at the end
    """
    log_level: str = "INFO"
    log_file: Optional[str] = None
    seed_words: Tuple[str, ...] = DEMO_WORDS
    word_list: Optional[str] = None
    extra_words: Tuple[str, ...] = ("Kayak", "kayak", "C\tA\tT\t", "***Cat***", "dog", "###")
    queries: Tuple[str, ...] = ("KAYAK", "cat", "act", "GOD", "unknown", "###")

    def __post_init__(self) -> None:
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        self.log_level = self.log_level.upper()

    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def _as_words(name: str, value: object) -> Tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"Config field '{name}' must be a list of strings")
    return tuple(value)


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> DemoConfig:
    """Load demo settings from JSON; a missing file yields the defaults.

    Raises:
        ValueError: If the file is not a JSON object or a field has the wrong type
    """
    path = Path(path)
    if not path.exists():
        return DemoConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}")
    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a JSON object: {path}")

    known = {f.name for f in fields(DemoConfig)}
    overrides = {}
    for name, value in data.items():
        if name not in known:
            continue
        if name in ("seed_words", "extra_words", "queries"):
            value = _as_words(name, value)
        elif name != "log_level" and value is not None and not isinstance(value, str):
            raise ValueError(f"Config field '{name}' must be a string path")
        overrides[name] = value
    return DemoConfig(**overrides)
