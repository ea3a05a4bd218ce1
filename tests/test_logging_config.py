import json
import logging
import sys

from site_spec_drafter.logging_config import StructuredFormatter, get_trace_id, set_trace_id


def _record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("site_spec_drafter.test", logging.INFO, __file__, 10, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_extras_as_json_fields():
    payload = json.loads(StructuredFormatter().format(_record("Generated", session_id="s1", placement_count=12)))
    assert payload["message"] == "Generated"
    assert payload["severity"] == "INFO"
    assert payload["logger"] == "site_spec_drafter.test"
    assert payload["session_id"] == "s1"
    assert payload["placement_count"] == 12
    assert "args" not in payload


def test_formatter_includes_trace_id():
    set_trace_id("sess_123")
    try:
        assert get_trace_id() == "sess_123"
        payload = json.loads(StructuredFormatter().format(_record("traced")))
        assert payload["logging.googleapis.com/trace"] == "sess_123"
    finally:
        set_trace_id(None)


def test_formatter_renders_exception():
    try:
        raise ValueError("bad stat")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    payload = json.loads(StructuredFormatter().format(record))
    assert "ValueError: bad stat" in payload["exception"]
