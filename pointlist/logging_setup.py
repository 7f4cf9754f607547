"""Logging configuration for Pointlist.

The CLI logs to stderr. The TUI draws on the terminal, so it logs to a
file instead.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | int = logging.WARNING, log_file: Optional[Path] = None) -> None:
    """Configure the ``pointlist`` logger.

    Safe to call more than once; earlier handlers are replaced.

    Args:
        level: Level name or number for the package logger.
        log_file: Log to this file instead of stderr.
    """
    root = logging.getLogger("pointlist")
    root.setLevel(level)

    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
    root.propagate = False
