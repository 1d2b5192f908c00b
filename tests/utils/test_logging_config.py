"""
Tests for logging setup.
"""

import logging

import pytest

import movies_api.utils as utils
from movies_api.utils.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_file_handler_writes_lazy_messages(tmp_path, restore_root_logger):
    setup_logging(log_file="api.log", level="debug", log_dir=str(tmp_path))
    logging.getLogger("movies_api.database.store").info("Inserted movie %s", "m1")
    for handler in logging.getLogger().handlers:
        handler.flush()

    text = (tmp_path / "api.log").read_text(encoding="utf-8")
    assert "Logging to file:" in text
    assert "movies_api.database.store - INFO - Inserted movie m1" in text
    assert logging.getLogger().level == logging.DEBUG


def test_console_only_without_file(tmp_path, restore_root_logger):
    setup_logging(level="WARNING", log_dir=str(tmp_path / "logs"))
    assert len(logging.getLogger().handlers) == 1
    assert not (tmp_path / "logs").exists()


def test_exports():
    assert utils.__all__ == ["setup_logging", "configure_api_logging"]
