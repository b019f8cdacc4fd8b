"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from axis6.config import BaseConfig
from axis6.logging_config import JSONFormatter, get_logger, setup_logging


def _record(**overrides) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=overrides.pop("level", logging.INFO),
        pathname="test.py",
        lineno=42,
        msg=overrides.pop("msg", "Test message"),
        args=(),
        exc_info=overrides.pop("exc_info", None),
    )
    record.module = "test_module"
    record.funcName = "test_function"
    for key, value in overrides.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    """JSONFormatter emits the standard fields."""
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(_record(level=logging.ERROR, exc_info=exc_info)))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_json_formatter_includes_extra_fields():
    log_data = json.loads(JSONFormatter().format(_record(user_id="u-1", current_streak=3)))

    assert log_data["extra"] == {"user_id": "u-1", "current_streak": 3}


def test_json_formatter_ignores_console_asctime():
    """A record already rendered by a text formatter carries no asctime extra."""
    record = _record(attempt=2)
    logging.Formatter("%(asctime)s %(message)s").format(record)

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data["extra"] == {"attempt": 2}


@pytest.fixture
def log_config(tmp_path, monkeypatch):
    monkeypatch.setenv("AXIS6_DATA_DIR", str(tmp_path))
    return BaseConfig()


def test_setup_logging(log_config, tmp_path):
    """setup_logging writes JSON lines to a rotating file."""
    logger = setup_logging(log_config)

    assert logger.name == "axis6"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = tmp_path.resolve() / "logs" / "axis6.log"
    assert log_file.exists()

    get_logger("tests").warning("Streak write lost a race", extra={"attempt": 1})
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    entries = [json.loads(line) for line in lines]
    assert entries[0]["message"] == "Logging initialized"
    assert entries[-1]["logger"] == "axis6.tests"
    assert entries[-1]["extra"] == {"attempt": 1}


def test_setup_logging_is_repeatable(log_config):
    setup_logging(log_config)
    logger = setup_logging(log_config)

    assert len(logger.handlers) == 2


def test_get_logger():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")

    assert logger1.name == "axis6.module1"
    assert logger2.name == "axis6.module2"
    assert logger1 != logger2


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(log_config, dev_mode):
    """Console logging level adjusts based on dev mode."""
    log_config.DEV_MODE = dev_mode

    logger = setup_logging(log_config)

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )
    expected_level = logging.INFO if dev_mode else logging.WARNING
    assert console_handler.level == expected_level
