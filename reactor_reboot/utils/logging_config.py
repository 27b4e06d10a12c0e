"""Centralized logging configuration for reactor_reboot.

Usage:
    from reactor_reboot.utils.logging_config import setup_logging

    # stderr only:
    setup_logging()

    # With debug level:
    setup_logging(debug=True)

    # Also write to a rotating log file:
    setup_logging(log_file="logs/reactor_reboot.log")
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Log rotation defaults
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: str | None = None,
    fmt: str = DEFAULT_FORMAT,
    max_bytes: int = MAX_BYTES,
    backup_count: int = BACKUP_COUNT,
    *,
    debug: bool = False,
) -> None:
    """Configure root logger with consistent format and optional file output.

    Call this once at the start of each entry point.
    """
    if debug:
        level = logging.DEBUG

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
        )
    logging.basicConfig(level=level, format=fmt, handlers=handlers, force=True)

    if log_file:
        logging.getLogger().info("logging to %s", log_file)
