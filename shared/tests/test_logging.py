"""
Tests for shared logging helpers.
"""

import json
import logging
from datetime import datetime

import pytest
import structlog

from shared.logging import (
    add_correlation_context, add_service_context, clear_context,
    configure_logging, get_logger, get_run_id, set_run_id
)


@pytest.fixture(autouse=True)
def reset_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    clear_context()
    yield
    clear_context()
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("transition_engine").setLevel(logging.NOTSET)


def test_set_run_id_generates_uuid():
    run_id = set_run_id()

    assert get_run_id() == run_id
    assert len(run_id) == 36


def test_clear_context():
    set_run_id("abc")
    clear_context()

    assert get_run_id() is None


def test_service_context_from_logger_name():
    event = add_service_context(None, "info", {"logger": "transition_engine.engine"})

    assert event["service"] == "transition_engine"


def test_correlation_context():
    set_run_id("run-1")

    event = add_correlation_context(None, "info", {})

    assert event == {"run_id": "run-1"}


def test_json_output(capsys):
    """Test configured loggers emit JSON with context."""
    configure_logging("transition_engine", "info")
    set_run_id("run-7")

    get_logger("transition_engine.test").info("hello", answer=42)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["event"] == "hello"
    assert payload["answer"] == 42
    assert payload["run_id"] == "run-7"
    assert payload["service"] == "transition_engine"
    assert payload["level"] == "info"


def test_level_filtering(capsys):
    """Test events below the configured level are dropped."""
    configure_logging("transition_engine", "warning")

    get_logger("transition_engine.test").info("hidden")

    assert "hidden" not in capsys.readouterr().out
    assert logging.getLogger("transition_engine").level == logging.WARNING


def test_iso_timestamp_is_kept(capsys):
    """Test the ISO timestamp survives alongside epoch seconds."""
    configure_logging("transition_engine", "info")

    get_logger("transition_engine.test").info("stamped")

    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert isinstance(payload["timestamp"], str)
    assert datetime.fromisoformat(payload["timestamp"].replace("Z", "+00:00"))
    assert isinstance(payload["ts"], float)
