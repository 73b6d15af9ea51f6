# === FILE: build_scout/logger.py ===
"""Logging setup for **BuildScout**.

One project logger (``BuildScout``) with children per component, e.g.
``BuildScout.extractor``. Console output goes to stderr so that the CLI can keep
stdout for report JSON; an optional rotating log file can be added.

The comparator never imports this module: the engine hands :data:`logger` to it
as a sink, so the diff itself stays free of logging side effects.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, TextIO, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "BuildScout"
LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3

_LevelT = Union[int, str]


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """(Re)configure the project logger, replacing any previous handlers.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Extra rotating log file; *None* → console only.
    log_format
        Format string shared by all handlers.
    stream
        Console stream; looked up as ``sys.stderr`` at call time when omitted,
        so a CLI runner that swaps the streams gets the messages.
    """
    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )

    lg = logging.getLogger(LOGGER_NAME)
    for old in list(lg.handlers):
        lg.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)

    lg.setLevel(level)
    lg.propagate = False
    return lg


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Entry used by the CLI group callback."""
    return configure(level=level, log_file=log_file, log_format=log_format)


def get_logger(name: str) -> logging.Logger:
    """Child of the project logger, e.g. ``get_logger("storage")``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "get_logger", "LOGGER_NAME"]
