"""Infrastructure helpers."""

from trip_optimizer.infrastructure.logging import StructuredLogger, get_logger, reset_logger

__all__ = ["StructuredLogger", "get_logger", "reset_logger"]
