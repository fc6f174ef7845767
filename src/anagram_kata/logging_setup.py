"""Process-wide logging configuration for the demo driver.

Library modules only ever call ``logging.getLogger``; handlers are attached
here, once, at startup.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d | %(message)s"


def configure_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> logging.Logger:
    """Configure root handlers and return the package logger.

    Args:
        level: Minimum level for console output
        log_file: Optional path for a DEBUG-level rotating log
        max_bytes: Max log file size before rotation
        backup_count: Number of rotated files to keep
    """
    # Clear existing handlers to avoid duplicate lines on repeated calls
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(min(level, logging.DEBUG) if log_file is not None else level)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(ch)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(fh)

    logger = logging.getLogger("anagram_kata")
    logger.debug(
        "Logging configured (level=%s, file=%s)",
        logging.getLevelName(level),
        str(log_file) if log_file is not None else "None",
    )
    return logger
