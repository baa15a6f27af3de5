"""
Prometheus Metrics Endpoint.

DATA FLOW:
    observability/metrics.py         This file                    Observability Stack
    ────────────────────────         ─────────                    ───────────────────
    Socket/relay/notify metrics ───► /metrics endpoint ──────────► Prometheus ──► Grafana

Exposed series: jobboard_ws_active_connections, jobboard_ws_auth_failures_total,
jobboard_messages_relayed_total, jobboard_relay_latency_seconds,
jobboard_notifications_total, jobboard_errors_total.

    curl http://localhost:5001/metrics
"""

from fastapi import APIRouter, Response
from src.observability.metrics import get_metrics_content


router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    """Prometheus text format, scraped periodically."""
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
