from __future__ import annotations

import io
import json

from openhours.infrastructure.logging import StructuredLogger, get_logger


def _events(buffer: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in buffer.getvalue().splitlines()]


def test_events_are_json_lines_with_trace_id():
    buffer = io.StringIO()
    logger = StructuredLogger(trace_id="abc12345", output=buffer)

    logger.start("cli", timezone="America/Vancouver")
    logger.evaluation("9am-5pm", kind="window", is_open=True)
    logger.summary("cli", total=1)

    start, evaluation, summary = _events(buffer)
    assert start["event"] == "start"
    assert evaluation == {
        "event": "evaluation",
        "hours": "9am-5pm",
        "kind": "window",
        "is_open": True,
        "trace_id": "abc12345",
        "timestamp": evaluation["timestamp"],
    }
    assert summary["total"] == 1
    assert summary["duration_ms"] >= 0
    assert {event["trace_id"] for event in (start, evaluation, summary)} == {"abc12345"}


def test_unserialisable_payload_falls_back_to_stderr(capsys):
    buffer = io.StringIO()
    logger = StructuredLogger(output=buffer)

    logger.warning("cli", "bad", payload={1, 2}, nested={("a", "b"): 1})

    assert buffer.getvalue() == ""
    assert "logger_internal_error" in capsys.readouterr().err


def test_get_logger_reuses_instance_until_trace_changes():
    first = get_logger()

    assert get_logger() is first
    assert get_logger(trace_id="other") is not first
