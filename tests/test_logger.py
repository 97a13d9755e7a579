"""Tests for the loguru configuration."""

import os

import pytest
from loguru import logger

from typeahead.logger import get_logger, setup_logger
from typeahead.utils import get_project_root


@pytest.fixture
def restore_default_logging():
    yield
    # Closing the sinks flushes them; then go back to the project default.
    logger.remove()
    setup_logger(log_file=os.path.join(get_project_root(), "typeahead.log"))


def test_records_carry_the_logger_name(tmp_path, restore_default_logging):
    log_file = tmp_path / "typeahead-test.log"
    setup_logger(log_file=str(log_file), log_level="DEBUG")

    get_logger("catalog").debug("Loaded 3 catalog item(s)")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "| DEBUG    | catalog:" in text
    assert "Loaded 3 catalog item(s)" in text


def test_log_file_from_environment(tmp_path, monkeypatch, restore_default_logging):
    log_file = tmp_path / "from-env.log"
    monkeypatch.setenv("TYPEAHEAD_LOG_FILE", str(log_file))
    setup_logger(log_level="INFO")

    get_logger().info("hello")
    get_logger().debug("filtered out")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "typeahead:" in text
    assert "filtered out" not in text
