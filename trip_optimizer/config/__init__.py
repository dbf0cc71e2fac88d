"""Runtime configuration helpers."""

from trip_optimizer.config.settings import (
    OptimizerConfig,
    load_config,
    log_events_enabled,
    resolve_category,
    resolve_strategy,
)

__all__ = [
    "OptimizerConfig",
    "load_config",
    "log_events_enabled",
    "resolve_category",
    "resolve_strategy",
]
