"""Structured logging: one JSON object per line."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional


class StructuredLogger:
    """Writes JSON line events tagged with a trace id."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(line + "\n")
            self._output.flush()
        except (TypeError, ValueError, OSError) as exc:
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "timestamp": time.time(),
                "error": str(exc),
            }
            sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
            sys.stderr.flush()

    def start(self, name: str, **extra: Any) -> None:
        self._timers[name] = time.time()
        self._emit({"event": "start", "name": name, **extra})

    def evaluation(self, hours: str | None, *, kind: str, is_open: bool | None, **extra: Any) -> None:
        self._emit({"event": "evaluation", "hours": hours, "kind": kind, "is_open": is_open, **extra})

    def error(self, name: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "name": name, "error": error, **extra})

    def warning(self, name: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "name": name, "message": message, **extra})

    def summary(self, name: str = "", **extra: Any) -> None:
        start = self._timers.pop(name, None)
        if start is not None:
            extra["duration_ms"] = round((time.time() - start) * 1000, 1)
        self._emit({"event": "summary", "name": name, **extra})


_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        _logger = StructuredLogger(trace_id=trace_id)
    return _logger


def reset_logger() -> None:
    global _logger
    _logger = None
