"""Structured colored logging for the CLI and the matching engine.

Messages go to stderr so command output on stdout stays pipeable.
"""

import logging
import re
import sys
from datetime import datetime

from game_sync.config import settings

GREEN = "\x1b[32m"
RED = "\x1b[31m"
YELLOW = "\x1b[33m"
DIM = "\x1b[2m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


class CollectionFormatter(logging.Formatter):
    LEVEL_COLORS = {
        logging.DEBUG: DIM,
        logging.INFO: "",
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: RED + BOLD,
    }

    def __init__(self, color: bool = True):
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        if not self.color:
            return f"[{ts}] {_ANSI.sub('', record.getMessage())}"
        color = self.LEVEL_COLORS.get(record.levelno, "")
        return f"{DIM}[{ts}]{RESET} {color}{record.getMessage()}{RESET}"


def get_logger(name: str = "game_sync", level: str | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(CollectionFormatter(color=settings.color))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, (level or settings.log_level).upper(), logging.INFO))
    return logger
