"""Custom Prometheus metrics for Auto Retry.

These metrics should be scraped by Prometheus from the host application.
Alert rules should be configured for:
- retries_total (sustained transport or server-error retries indicate an outage)
- retry_budget_exhausted_total (requests failing even after all retries)
- errors_reported_total (unrecoverable errors surfaced to callers)
"""

from prometheus_client import Counter, Histogram

# === Retry Metrics ===

retries_total = Counter(
    "auto_retry_retries_total",
    "Total retries by reason",
    ["reason"],
)
"""
Retry counter by reason.

Labels:
- reason: transport (network failure), rate_limit (retry_after honored),
  server_error (status >= 500)
"""

retry_wait_seconds = Histogram(
    "auto_retry_wait_seconds",
    "Time waited between retries in seconds",
    ["reason"],
    buckets=[1.0, 3.0, 6.0, 12.0, 30.0, 60.0, 300.0, 900.0, 3600.0],
)
"""
Wait duration histogram by reason.

Buckets follow the backoff sequence (3, 6, 12, ...) up to the one-hour cap.
"""

retry_budget_exhausted_total = Counter(
    "auto_retry_budget_exhausted_total",
    "Total calls that returned a retryable result because the retry budget ran out",
)

# === Error Reporting Metrics ===

errors_reported_total = Counter(
    "auto_retry_errors_reported_total",
    "Total exceptions handed to the error sink by exception type",
    ["error_type"],
)
"""
Reported errors counter.

Labels:
- error_type: Exception class name (e.g. TransportError, RetryCancelled)

Note: a single failed call may be counted twice (inner and outer boundary).
"""
