"""Structured logger tests."""

from __future__ import annotations

import io
import json

from trip_optimizer.infrastructure.logging import StructuredLogger, get_logger, reset_logger


def _events(sink: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in sink.getvalue().splitlines()]


def test_events_are_json_lines_with_trace_id():
    sink = io.StringIO()
    logger = StructuredLogger(trace_id="abc", output=sink)
    logger.step_start("build_graph", total_pois=3)
    logger.step_end("build_graph", nodes=3)
    logger.warning("partition_days", "oversized stop")
    logger.error("balance_days", "boom")

    events = _events(sink)
    assert [e["event"] for e in events] == ["step_start", "step_end", "warning", "error"]
    assert all(e["trace_id"] == "abc" and "timestamp" in e for e in events)
    assert events[0]["total_pois"] == 3
    assert events[1]["duration_ms"] >= 0
    assert events[2]["message"] == "oversized stop"


def test_disabled_logger_writes_nothing():
    sink = io.StringIO()
    StructuredLogger(output=sink, enabled=False).summary(total_pois=1)
    assert sink.getvalue() == ""


def test_get_logger_is_a_singleton_per_trace():
    reset_logger()
    first = get_logger()
    assert get_logger() is first
    other = get_logger("trace-2")
    assert other is not first
    assert other.trace_id == "trace-2"


def test_get_logger_honours_env_switch():
    # conftest turns structured events off for the test session
    reset_logger()
    assert get_logger().enabled is False
