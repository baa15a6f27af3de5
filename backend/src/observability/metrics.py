"""
Prometheus Metrics for the Job Board messaging backend.

DEPENDENCY:
    pip install prometheus-client

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Gauge: Value goes up/down (current count, e.g., open sockets)
    - Counter: Value only goes up (total count, e.g., relayed messages)
    - Histogram: Distribution (for percentiles like P95, e.g., relay latency)
"""

from prometheus_client import (
    Gauge,
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
WS_ACTIVE_CONNECTIONS = Gauge(
    "jobboard_ws_active_connections", "Number of authenticated sockets currently open"
)

WS_AUTH_FAILURES_TOTAL = Counter(
    "jobboard_ws_auth_failures_total",
    "Socket upgrades rejected with close code 1008",
)

MESSAGES_RELAYED_TOTAL = Counter(
    "jobboard_messages_relayed_total",
    "Chat messages persisted by the relay, by whether the recipient was online",
    ["recipient"],
)

RELAY_LATENCY = Histogram(
    "jobboard_relay_latency_seconds",
    "Time from frame receipt to sender confirmation",
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5],
)

NOTIFICATIONS_TOTAL = Counter(
    "jobboard_notifications_total",
    "Invitation notification outcomes",
    ["outcome"],
)

ERRORS_TOTAL = Counter(
    "jobboard_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class MetricsErrorType:
    """Error type labels for jobboard_errors_total metric."""

    MALFORMED_PAYLOAD = "malformed_payload"
    STORAGE_FAILED = "storage_failed"
    PUSH_FAILED = "push_failed"
    CONNECTION_ERROR = "connection_error"


class NotificationOutcome:
    """Outcome labels for jobboard_notifications_total metric."""

    DELIVERED = "delivered"
    OFFLINE = "offline"
    MISSING_REFERENCE = "missing_reference"
    STORAGE_FAILURE = "storage_failure"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def increment_active_connections():
    """Call when a socket is registered. Integration point: presentation/api/realtime.py"""
    WS_ACTIVE_CONNECTIONS.inc()


def decrement_active_connections():
    """Call when a socket is unregistered (in finally block)."""
    WS_ACTIVE_CONNECTIONS.dec()


def increment_auth_failure():
    WS_AUTH_FAILURES_TOTAL.inc()


def increment_messages_relayed(recipient_online: bool):
    """Call after a message is persisted. Integration point: commands/chat/relay_message.py"""
    MESSAGES_RELAYED_TOTAL.labels(
        recipient="online" if recipient_online else "offline"
    ).inc()


def observe_relay_latency(duration: float):
    RELAY_LATENCY.observe(duration)


def increment_notification(outcome: str):
    """Call with a NotificationOutcome label. Integration point: commands/notifications/notify_invitation.py"""
    NOTIFICATIONS_TOTAL.labels(outcome=outcome).inc()


def increment_error(error_type: str):
    """
    Call to record an error occurrence.

    Integration points:
        - presentation/api/realtime.py: malformed_payload, storage_failed, connection_error
        - infrastructure/realtime/notification_dispatcher.py: push_failed

    Args:
        error_type: A MetricsErrorType label
    """
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


# =============================================================================
# EXPORTS
# =============================================================================
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
