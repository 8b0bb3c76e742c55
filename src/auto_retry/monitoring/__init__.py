"""Monitoring and metrics instrumentation for Auto Retry.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from auto_retry.monitoring.metrics import (
    errors_reported_total,
    retries_total,
    retry_budget_exhausted_total,
    retry_wait_seconds,
)

__all__ = [
    "retries_total",
    "retry_wait_seconds",
    "retry_budget_exhausted_total",
    "errors_reported_total",
]
