"""Observability package for the Job Board messaging backend."""

from src.observability.metrics import (
    increment_active_connections,
    decrement_active_connections,
    increment_auth_failure,
    increment_messages_relayed,
    observe_relay_latency,
    increment_notification,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
    NotificationOutcome,
)

__all__ = [
    "increment_active_connections",
    "decrement_active_connections",
    "increment_auth_failure",
    "increment_messages_relayed",
    "observe_relay_latency",
    "increment_notification",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
    "NotificationOutcome",
]
