"""结构化日志 — JSON line 格式，每个事件一行"""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional


class StructuredLogger:
    """结构化日志器，输出 JSON line，附带 trace_id。"""

    def __init__(self, trace_id: Optional[str] = None, output=None, *, enabled: bool = True):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self.enabled = enabled
        self._output = output
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        if not self.enabled:
            return
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        output = self._output or sys.stderr
        try:
            output.write(json.dumps(data, ensure_ascii=False, default=str) + "\n")
            output.flush()
        except (OSError, ValueError) as exc:
            # Last-resort fallback when the configured stream is unusable.
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "timestamp": time.time(),
                "error": str(exc),
            }
            sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")

    def step_start(self, step: str, **extra: Any) -> None:
        self._timers[step] = time.time()
        self._emit({"event": "step_start", "step": step, **extra})

    def step_end(self, step: str, **extra: Any) -> None:
        start = self._timers.pop(step, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({"event": "step_end", "step": step, "duration_ms": duration_ms, **extra})

    def warning(self, step: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "step": step, "message": message, **extra})

    def error(self, step: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "step": step, "error": error, **extra})

    def summary(self, **extra: Any) -> None:
        self._emit({"event": "summary", **extra})


_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        from trip_optimizer.config.settings import log_events_enabled

        _logger = StructuredLogger(trace_id=trace_id, enabled=log_events_enabled())
    return _logger


def reset_logger() -> None:
    global _logger
    _logger = None
