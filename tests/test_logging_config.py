from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from lsviewer.logging_config import setup_logging


@pytest.fixture
def logger() -> Iterator[logging.Logger]:
    yield logging.getLogger("lsviewer")
    package_logger = logging.getLogger("lsviewer")
    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


def test_console_handler(logger: logging.Logger) -> None:
    configured = setup_logging(logging.DEBUG)
    assert configured is logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_repeated_setup_does_not_duplicate_handlers(logger: logging.Logger) -> None:
    setup_logging()
    setup_logging()
    assert len(logger.handlers) == 1


def test_file_handler(logger: logging.Logger, tmp_path: Path) -> None:
    log_file = tmp_path / "lsviewer.log"
    setup_logging(logging.INFO, str(log_file))
    logging.getLogger("lsviewer.builder").info("hello from builder")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    text = log_file.read_text(encoding="utf-8")
    assert "[INFO] lsviewer.builder: hello from builder" in text
