# topmark:header:start
#
#   project      : PhpGen
#   file         : logging.py
#   file_relpath : src/phpgen/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""PhpGen logging with a TRACE level.

PhpGen modules log through `PhpgenLogger`, which adds ``trace()`` below DEBUG
for line-resolution and alias-reuse chatter. Nothing is printed unless an
application (or the CLI) calls `setup_logging`; the CLI takes its level from
``PHPGEN_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from typing import Final, cast

from yachalk import chalk

from phpgen.constants import PHPGEN_LOG_LEVEL_ENV

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

logging.addLevelName(TRACE_LEVEL, "TRACE")


class PhpgenLogger(logging.Logger):
    """Logger with a ``trace()`` method for the TRACE level."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.setLoggerClass(PhpgenLogger)

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Highest threshold first; the first one not above the record level wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by its severity."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return message


def resolve_env_log_level() -> int | None:
    """Return the level named by ``PHPGEN_LOG_LEVEL``, or None.

    Accepts level names (``"TRACE"``, ``"debug"``, ...) and numbers (``"10"``).
    Unset, empty and unknown values resolve to None.
    """
    raw: str = os.environ.get(PHPGEN_LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level: object = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Route all records to stderr through `ChalkFormatter`.

    Args:
        level (int | None): Root logger level. When None, ``PHPGEN_LOG_LEVEL`` is
            consulted, and CRITICAL (effectively silent) is the fallback.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> PhpgenLogger:
    """Return the `PhpgenLogger` called ``name``."""
    return cast("PhpgenLogger", logging.getLogger(name))
