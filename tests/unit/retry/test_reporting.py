"""
Unit tests for error reporting sinks.
"""

from unittest.mock import patch

from prometheus_client import REGISTRY

from auto_retry.retry.policy import RetryPolicy, SentryOptions
from auto_retry.retry.reporting import NullReporter, SentryReporter, build_reporter


def test_null_reporter_is_noop():
    assert NullReporter().report(ValueError("ignored")) is None


def test_build_reporter_without_sentry():
    assert isinstance(build_reporter(RetryPolicy()), NullReporter)


def test_build_reporter_with_sentry():
    policy = RetryPolicy(
        sentry=SentryOptions(
            dsn="https://key@sentry.test/1",
            environment="staging",
            traces_sample_rate=0.5,
        )
    )

    with patch("auto_retry.retry.reporting.sentry_sdk") as mock_sentry:
        reporter = build_reporter(policy)

    assert isinstance(reporter, SentryReporter)
    mock_sentry.init.assert_called_once_with(
        dsn="https://key@sentry.test/1",
        environment="staging",
        traces_sample_rate=0.5,
    )


def test_sentry_reporter_captures_exception():
    error = KeyError("chat_id")
    before = REGISTRY.get_sample_value(
        "auto_retry_errors_reported_total", {"error_type": "KeyError"}
    ) or 0.0

    with patch("auto_retry.retry.reporting.sentry_sdk") as mock_sentry:
        reporter = SentryReporter(SentryOptions(dsn="https://key@sentry.test/1"))
        reporter.report(error)

    mock_sentry.capture_exception.assert_called_once_with(error)
    after = REGISTRY.get_sample_value(
        "auto_retry_errors_reported_total", {"error_type": "KeyError"}
    )
    assert after == before + 1
