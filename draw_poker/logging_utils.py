from __future__ import annotations

import logging
import os
from typing import Optional

# LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL, log_file: Optional[str] = None) -> None:
    """
    Call once at program start.

    The TUI owns the terminal, so without a log file records are dropped
    rather than written over the screen.
    """
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.NullHandler()
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=[handler],
    )
