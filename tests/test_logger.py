"""Tests for gbkconv.logger.configure_logging."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from gbkconv.logger import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only_by_default(restore_root_logger: logging.Logger) -> None:
    configure_logging(level="warning")

    assert restore_root_logger.level == logging.WARNING
    assert not any(isinstance(h, RotatingFileHandler) for h in restore_root_logger.handlers)


def test_log_directory_adds_rotating_file(restore_root_logger: logging.Logger, tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    configure_logging(log_dir=log_dir, level="INFO")

    logging.getLogger("gbkconv.test").info("converted main.c")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert "converted main.c" in (log_dir / "gbkconv.log").read_text(encoding="utf-8")
