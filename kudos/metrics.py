"""
Name: Prometheus Metrics

Responsibilities:
  - Define and expose Prometheus metrics
  - Provide /metrics endpoint handler
  - Record request latency/count plus feed counters (recognitions,
    fan-out deliveries, notifications, batch flushes)

Collaborators:
  - middleware.py: Records request metrics
  - infrastructure.events: Records publish/notify/flush counters
  - application.use_cases.create_recognition: Records creations

Constraints:
  - Low cardinality labels only (endpoint, method, status, visibility,
    topic kind, outcome). Never user_id or team_id.

Notes:
  - Metrics live on a private CollectorRegistry
  - Histogram buckets chosen for typical in-memory latencies
"""

import re

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

_registry = CollectorRegistry()

# R: Request counter with endpoint and status labels
_requests_total = Counter(
    "kudos_requests_total",
    "Total HTTP requests",
    ["endpoint", "method", "status"],
    registry=_registry,
)

# R: Request latency histogram (seconds)
_request_latency = Histogram(
    "kudos_request_latency_seconds",
    "HTTP request latency in seconds",
    ["endpoint", "method"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
    registry=_registry,
)

_recognitions_created = Counter(
    "kudos_recognitions_created_total",
    "Recognitions accepted into the feed",
    ["visibility"],
    registry=_registry,
)

_events_published = Counter(
    "kudos_events_published_total",
    "Recognition events published per topic kind",
    ["topic"],
    registry=_registry,
)

_events_delivered = Counter(
    "kudos_events_delivered_total",
    "Recognition events handed to live subscriptions",
    ["topic"],
    registry=_registry,
)

_notifications_total = Counter(
    "kudos_notifications_total",
    "External notification attempts by outcome",
    ["mode", "outcome"],
    registry=_registry,
)

_batch_flush_size = Histogram(
    "kudos_batch_flush_size",
    "Notifications drained per batch flush",
    buckets=(0, 1, 5, 10, 25, 50, 100, 250),
    registry=_registry,
)

_notification_queue_depth = Gauge(
    "kudos_notification_queue_depth",
    "Notifications waiting for the next batch flush",
    registry=_registry,
)


def record_request_metrics(
    endpoint: str,
    method: str,
    status_code: int,
    latency_seconds: float,
) -> None:
    """
    R: Record HTTP request metrics.

    Args:
        endpoint: Request path (e.g., "/v1/recognitions")
        method: HTTP method (e.g., "POST")
        status_code: Response status code
        latency_seconds: Request duration in seconds
    """
    normalized = _normalize_endpoint(endpoint)
    _requests_total.labels(
        endpoint=normalized,
        method=method,
        status=_status_bucket(status_code),
    ).inc()
    _request_latency.labels(endpoint=normalized, method=method).observe(
        latency_seconds
    )


def record_recognition_created(visibility: str) -> None:
    _recognitions_created.labels(visibility=visibility).inc()


def record_event_published(topic_kind: str, delivered: int) -> None:
    """R: Count one publish and the number of subscriptions it reached."""
    _events_published.labels(topic=topic_kind).inc()
    if delivered:
        _events_delivered.labels(topic=topic_kind).inc(delivered)


def record_notification(mode: str, outcome: str) -> None:
    """
    R: Count a notification attempt.

    Args:
        mode: "immediate" or "batch"
        outcome: "sent", "failed" or "queued"
    """
    _notifications_total.labels(mode=mode, outcome=outcome).inc()


def set_queue_depth(depth: int) -> None:
    _notification_queue_depth.set(depth)


def record_batch_flush(size: int) -> None:
    _batch_flush_size.observe(size)


def _normalize_endpoint(path: str) -> str:
    """
    R: Normalize endpoint path to prevent high cardinality.

    Replaces UUIDs and fixture-style ids (user1, team3, rec6) with {id}.
    """
    path = re.sub(
        r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
        "{id}",
        path,
        flags=re.IGNORECASE,
    )
    path = re.sub(r"/(user|team|rec)\d+", "/{id}", path)
    path = re.sub(r"/\d+", "/{id}", path)
    return path


def _status_bucket(code: int) -> str:
    """R: Bucket status code (2xx, 4xx, 5xx)."""
    if 200 <= code < 300:
        return "2xx"
    elif 400 <= code < 500:
        return "4xx"
    elif 500 <= code < 600:
        return "5xx"
    return "other"


def get_metrics_response() -> tuple[bytes, str]:
    """
    R: Generate Prometheus metrics response.

    Returns:
        Tuple of (body_bytes, content_type)
    """
    return generate_latest(_registry), CONTENT_TYPE_LATEST
