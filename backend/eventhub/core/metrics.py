"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Booking metrics
booking_attempts = Counter(
    "booking_attempts_total",
    "Total booking attempts",
    ["status"],  # success, capacity_exceeded, not_found, invalid
)

booking_latency = Histogram(
    "booking_latency_seconds",
    "Time spent creating a booking, lock wait included",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
)

booking_cancellations = Counter(
    "booking_cancellations_total",
    "Booking cancellation requests",
    ["result"],  # cancelled, already_cancelled
)

# Notification metrics
notifications_created = Counter(
    "notifications_created_total",
    "Notifications created",
    ["type"],
)

# Event administration metrics
event_admin_actions = Counter(
    "event_admin_actions_total",
    "Event create/update/delete operations",
    ["action"],
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def record_booking_attempt(status: str):
    """Record booking attempt. Status: success, capacity_exceeded, not_found, invalid"""
    booking_attempts.labels(status=status).inc()


def record_cancellation(already_cancelled: bool):
    result = "already_cancelled" if already_cancelled else "cancelled"
    booking_cancellations.labels(result=result).inc()


def record_notification(notification_type: str):
    notifications_created.labels(type=notification_type).inc()


def record_event_action(action: str):
    """Action: create, update, delete"""
    event_admin_actions.labels(action=action).inc()
