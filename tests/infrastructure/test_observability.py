"""Structured logging: JSON shape, extra fields, handler installation."""

import json
import logging
import sys

import pytest

from app.infrastructure import observability
from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.services.event_pipeline", logging.INFO, __file__, 1,
        "Event created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.services.event_pipeline"
    assert payload["message"] == "Event created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras():
    payload = json.loads(JSONFormatter().format(
        _record(slug="react-summit-2025", error_code="DUPLICATE_SLUG", unrelated="x"),
    ))
    assert payload["slug"] == "react-summit-2025"
    assert payload["error_code"] == "DUPLICATE_SLUG"
    assert "unrelated" not in payload


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in payload["exception"]


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    if observability._handler is not None:
        root.removeHandler(observability._handler)
        observability._handler = None
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_is_idempotent(restore_root_logger):
    before = len(logging.getLogger().handlers)
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    root = logging.getLogger()
    assert len(root.handlers) == before + 1
    assert root.level == logging.WARNING
    assert not isinstance(observability._handler.formatter, JSONFormatter)
