"""
Error reporting sinks.

The retry engine hands every exception that is about to leave it to an
``ErrorReporter``. Reporting is fire-and-forget: the engine logs and
swallows anything a sink raises, and a sink must tolerate receiving the
same exception twice.
"""

from typing import Protocol

import sentry_sdk
import structlog

from auto_retry.monitoring.metrics import errors_reported_total
from auto_retry.retry.policy import RetryPolicy, SentryOptions

logger = structlog.get_logger(__name__)


class ErrorReporter(Protocol):
    """Protocol for error sinks."""

    def report(self, exc: BaseException) -> None:
        """Record an unrecoverable exception. Must not raise."""
        ...


class NullReporter:
    """Sink used when no error reporting is configured."""

    def report(self, exc: BaseException) -> None:
        pass


class SentryReporter:
    """
    Sends unrecoverable exceptions to Sentry.

    The SDK is initialized once, when the reporter is constructed (i.e.
    when the interceptor is created), never on the request path.
    """

    def __init__(self, options: SentryOptions):
        self.options = options
        sentry_sdk.init(
            dsn=options.dsn,
            environment=options.environment,
            traces_sample_rate=options.traces_sample_rate,
        )
        logger.debug(
            "Sentry initialized",
            environment=options.environment,
            traces_sample_rate=options.traces_sample_rate,
        )

    def report(self, exc: BaseException) -> None:
        sentry_sdk.capture_exception(exc)
        errors_reported_total.labels(error_type=type(exc).__name__).inc()
        logger.debug("Error sent to Sentry", error_type=type(exc).__name__, error=str(exc))


def build_reporter(policy: RetryPolicy) -> ErrorReporter:
    """Create the sink described by ``policy`` (no-op when Sentry is not configured)."""
    if policy.sentry is not None and policy.sentry.dsn:
        return SentryReporter(policy.sentry)
    return NullReporter()
