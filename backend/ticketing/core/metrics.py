"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Ticket offer writes guarded by the capacity ledger
ticket_offer_writes = Counter(
    'ticket_offer_writes_total',
    'Ticket offer write attempts',
    ['operation', 'status']  # create/update/delete x success, capacity_exceeded, conflict
)

capacity_check_latency = Histogram(
    'capacity_check_latency_seconds',
    'Latency of a transactional capacity check including the write',
    ['operation'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)

capacity_retries = Counter(
    'capacity_retries_total',
    'Capacity ledger retries due to show version conflicts'
)

# Cache metrics
cache_operations = Counter(
    'cache_operations_total',
    'Cache operations',
    ['operation', 'result']  # get/set, hit/miss
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_offer_write(operation: str, status: str):
    """Record a ticket offer write. Status: success, capacity_exceeded, conflict"""
    ticket_offer_writes.labels(operation=operation, status=status).inc()

def record_capacity_retry():
    capacity_retries.inc()

def record_cache_operation(operation: str, hit: bool):
    """Record cache operation."""
    result = "hit" if hit else "miss"
    cache_operations.labels(operation=operation, result=result).inc()
