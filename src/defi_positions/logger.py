"""Console logging for defi-positions.

Log records go to stderr so that stdout carries only the report, which keeps
``--format json`` output machine-readable.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

# Below DEBUG; also shows urllib3 connection chatter
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# ANSI color per numeric level; unknown levels are left uncolored
LEVEL_COLORS: dict[int, str] = {
    TRACE: "\033[90m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}
_BOLD = "\033[1m"
_RESET = "\033[0m"


class LevelColorFormatter(logging.Formatter):
    """Formatter painting the level name of each record.

    The record itself is left untouched, so other handlers still see the
    plain level name.
    """

    def __init__(self, use_color: bool = True) -> None:
        super().__init__(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
        self.use_color = use_color

    def formatMessage(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno)
        if not self.use_color or color is None:
            return super().formatMessage(record)
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{_BOLD}{record.levelname}{_RESET}"
        return super().formatMessage(colored)


def resolve_level(log_level: str | None = None) -> int:
    """Translate a level name into a numeric logging level.

    Falls back to the LOG_LEVEL environment variable, then INFO. Unknown
    names resolve to INFO.
    """
    name = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if name == "TRACE":
        return TRACE
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(log_level: str | None = None, stream: TextIO | None = None) -> None:
    """Install a single colored console handler on the root logger.

    Args:
        log_level: Level name; see :func:`resolve_level`
        stream: Destination, stderr by default. Colors are only used when
            the stream is a terminal.
    """
    level = resolve_level(log_level)
    stream = stream or sys.stderr

    handler = logging.StreamHandler(stream)
    use_color = hasattr(stream, "isatty") and stream.isatty()
    handler.setFormatter(LevelColorFormatter(use_color=use_color))
    logging.basicConfig(level=level, handlers=[handler], force=True)

    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(TRACE if level == TRACE else logging.WARNING)
