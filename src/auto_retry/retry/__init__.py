"""
Automatic retries for API requests.

This package implements the retry state machine that wraps a single
API attempt:

1. **Transport failures**: exponential backoff (3s doubling up to 1h), unbounded
2. **Rate limits**: wait the server's retry_after (up to max_delay_seconds)
3. **Server errors**: exponential backoff, bounded by max_retry_attempts
4. **Everything else**: returned or reported and re-raised

Main Components:
    - AutoRetry: The interceptor
    - RetryPolicy: Immutable retry settings
    - ErrorReporter: Protocol for error sinks (SentryReporter, NullReporter)
    - RetryCancelled: Raised when the cancellation signal interrupts a wait

Usage:
    >>> from auto_retry.retry import AutoRetry, RetryPolicy
    >>> interceptor = AutoRetry(RetryPolicy(max_delay_seconds=60))
    >>> response = await interceptor(client.send, "getMe", {})
"""

from auto_retry.retry.clock import (
    INITIAL_BACKOFF_SECONDS,
    MAX_BACKOFF_SECONDS,
    grow_backoff,
    pause,
)
from auto_retry.retry.engine import Attempt, AutoRetry, auto_retry
from auto_retry.retry.exceptions import RetryCancelled
from auto_retry.retry.metadata import CallAttemptState
from auto_retry.retry.outcome import (
    OtherError,
    Outcome,
    RateLimited,
    ServerError,
    Success,
    classify,
)
from auto_retry.retry.policy import RetryPolicy, SentryOptions
from auto_retry.retry.reporting import (
    ErrorReporter,
    NullReporter,
    SentryReporter,
    build_reporter,
)

__all__ = [
    "Attempt",
    "AutoRetry",
    "auto_retry",
    "CallAttemptState",
    "RetryCancelled",
    "RetryPolicy",
    "SentryOptions",
    "ErrorReporter",
    "NullReporter",
    "SentryReporter",
    "build_reporter",
    "Outcome",
    "Success",
    "RateLimited",
    "ServerError",
    "OtherError",
    "classify",
    "pause",
    "grow_backoff",
    "INITIAL_BACKOFF_SECONDS",
    "MAX_BACKOFF_SECONDS",
]
