"""Prometheus metrics for term-timestamps."""

from prometheus_client import Counter

# Recorder metrics
AUDIT_WRITES = Counter(
    "term_timestamps_audit_writes_total",
    "Audit events recorded against terms",
    labelnames=["event", "taxonomy"],
)

AUDIT_WRITE_ERRORS = Counter(
    "term_timestamps_audit_write_errors_total",
    "Audit events that failed to reach the meta store",
    labelnames=["event", "taxonomy", "error_type"],
)

# Query adapter metrics
FIELDS_REGISTERED = Counter(
    "term_timestamps_query_fields_registered_total",
    "Audit fields registered on host query types",
    labelnames=["type_name"],
)

REGISTRATION_SKIPPED = Counter(
    "term_timestamps_query_registration_skipped_total",
    "Schema registrations skipped",
    labelnames=["reason"],
)

_enabled = True


def setup_metrics(enabled: bool = True) -> None:
    """Turn counter updates on or off.

    Called at bootstrap from ``observability.metrics.enabled``. The
    counters stay registered either way; when disabled, ``inc`` leaves
    them untouched.
    """
    global _enabled
    _enabled = enabled


def metrics_enabled() -> bool:
    return _enabled


def inc(counter: Counter, amount: float = 1, **labels: str) -> None:
    """Increment a labelled counter if metrics are enabled."""
    if not _enabled:
        return
    counter.labels(**labels).inc(amount)
