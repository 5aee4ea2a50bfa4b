"""Logging setup for the ``lsviewer`` command line."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, log_file: str | Path | None = None) -> logging.Logger:
    """Route ``lsviewer`` log records to stdout and, optionally, to ``log_file``.

    Handlers from an earlier call are closed and replaced.
    """

    logger = logging.getLogger("lsviewer")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
