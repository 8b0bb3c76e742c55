"""
Auto retry interceptor.

This module implements AutoRetry, an interceptor that sits between the
caller and an attempt function (one raw API request) and retries the
request when it fails for reasons the caller cannot fix:

Retry Policy:
    1. Transport failure (TransportError): exponential backoff, unbounded
    2. Rate limit (retry_after <= max_delay_seconds): wait retry_after,
       then reset the backoff
    3. Server error (error_code >= 500, including one whose retry_after
       exceeds the cap): exponential backoff
    4. Anything else: returned (responses) or reported and re-raised
       (exceptions)

Only rate-limit and server-error retries count against max_retry_attempts.
A response with ok=True is returned after its wait instead of being repeated.

Usage:
    auto = AutoRetry(RetryPolicy(max_retry_attempts=5))
    response = await auto(client.send, "sendMessage", payload, signal)
"""

import asyncio
import functools
from typing import Any, Mapping

import structlog

from auto_retry.models.api_models import ApiResponse
from auto_retry.monitoring.metrics import (
    retries_total,
    retry_budget_exhausted_total,
    retry_wait_seconds,
)
from auto_retry.retry.clock import grow_backoff, pause
from auto_retry.retry.metadata import CallAttemptState
from auto_retry.retry.outcome import Outcome, RateLimited, ServerError, classify
from auto_retry.retry.policy import RetryPolicy
from auto_retry.retry.reporting import ErrorReporter, build_reporter
from auto_retry.transport.base_client import Attempt
from auto_retry.transport.exceptions import TransportError

logger = structlog.get_logger(__name__)


class AutoRetry:
    """
    Retrying interceptor for attempt functions.

    One instance may serve any number of concurrent calls. Calls share
    only the immutable policy and the reporter; retry state is per call.

    Attributes:
        policy: Retry policy
        reporter: Error sink for exceptions leaving the interceptor
    """

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        reporter: ErrorReporter | None = None,
    ):
        """
        Initialize the interceptor.

        Args:
            policy: Retry policy (defaults: no limits, retry everything)
            reporter: Error sink. Built from ``policy.sentry`` when omitted.
        """
        self.policy = policy if policy is not None else RetryPolicy()
        self.reporter = reporter if reporter is not None else build_reporter(self.policy)

        logger.info(
            "AutoRetry initialized",
            max_delay_seconds=self.policy.max_delay_seconds,
            max_retry_attempts=self.policy.max_retry_attempts,
            rethrow_http_errors=self.policy.rethrow_http_errors,
            rethrow_server_errors=self.policy.rethrow_server_errors,
            reporter=type(self.reporter).__name__,
        )

    async def __call__(
        self,
        prev: Attempt,
        method: str,
        payload: Mapping[str, Any],
        signal: asyncio.Event | None = None,
    ) -> ApiResponse:
        """
        Perform ``method`` through ``prev``, retrying per policy.

        Args:
            prev: Attempt function performing one raw request
            method: API method name (used for logging)
            payload: Method parameters, passed through unchanged
            signal: Optional cancellation signal

        Returns:
            The first non-retried structural result, or the last one when
            the retry budget is exhausted

        Raises:
            RetryCancelled: The signal fired while waiting between retries
            Exception: Whatever ``prev`` raised, if not recoverable per policy
        """
        state = CallAttemptState(remaining_attempts=self.policy.max_retry_attempts)

        try:
            while True:
                response = await self._call(prev, method, payload, signal, state)
                state.rounds += 1
                outcome = classify(response)

                reason = self._retry_reason(outcome)
                if reason is None:
                    self._log_completed(method, response, state)
                    return response

                if state.remaining_attempts <= 0:
                    retry_budget_exhausted_total.inc()
                    logger.warning(
                        "Retry budget exhausted, returning last response",
                        method=method,
                        error_code=response.error_code,
                        rounds=state.rounds,
                        max_retry_attempts=self.policy.max_retry_attempts,
                    )
                    return response

                state.remaining_attempts -= 1
                await self._wait_before_retry(reason, outcome, method, signal, state)

                if response.ok:
                    self._log_completed(method, response, state)
                    return response
        except Exception as e:
            self._report(e)
            raise

    def wrap(self, prev: Attempt) -> Attempt:
        """Bind the interceptor to ``prev``, yielding a new attempt function."""
        return functools.partial(self, prev)

    async def _call(
        self,
        prev: Attempt,
        method: str,
        payload: Mapping[str, Any],
        signal: asyncio.Event | None,
        state: CallAttemptState,
    ) -> ApiResponse:
        """Obtain a structural result, absorbing transport failures."""
        while True:
            try:
                return await prev(method, payload, signal)
            except Exception as e:
                if not self._is_retryable_transport_error(e, signal):
                    self._report(e)
                    raise
                error = e

            state.transport_retries += 1
            logger.debug(
                f"Transport error, retrying '{method}' in {state.next_delay}s",
                method=method,
                delay_seconds=state.next_delay,
                transport_retries=state.transport_retries,
                error=str(error),
            )
            await self._backoff(state, signal, reason="transport")

    def _is_retryable_transport_error(
        self, error: Exception, signal: asyncio.Event | None
    ) -> bool:
        if not isinstance(error, TransportError):
            return False
        if signal is not None and signal.is_set():
            return False
        return not self.policy.rethrow_http_errors

    def _retry_reason(self, outcome: Outcome) -> str | None:
        """Return why ``outcome`` is retried ("rate_limit", "server_error"), or None."""
        if isinstance(outcome, RateLimited):
            if outcome.seconds <= self.policy.max_delay_seconds:
                return "rate_limit"
            # Hint above the cap: fall through to the status class
            if outcome.code is None or outcome.code < 500:
                return None
        elif not isinstance(outcome, ServerError):
            return None
        if self.policy.rethrow_server_errors:
            return None
        return "server_error"

    async def _wait_before_retry(
        self,
        reason: str,
        outcome: Outcome,
        method: str,
        signal: asyncio.Event | None,
        state: CallAttemptState,
    ) -> None:
        if reason == "rate_limit":
            logger.debug(
                f"Rate limit hit, retrying '{method}' in {outcome.seconds}s",
                method=method,
                delay_seconds=outcome.seconds,
                remaining_attempts=state.remaining_attempts,
            )
            retries_total.labels(reason="rate_limit").inc()
            retry_wait_seconds.labels(reason="rate_limit").observe(outcome.seconds)
            await pause(outcome.seconds, signal)
            state.reset_backoff()
            return

        logger.debug(
            f"Internal server error, retrying '{method}' in {state.next_delay}s",
            method=method,
            delay_seconds=state.next_delay,
            error_code=outcome.code,
            remaining_attempts=state.remaining_attempts,
        )
        await self._backoff(state, signal, reason="server_error")

    async def _backoff(
        self, state: CallAttemptState, signal: asyncio.Event | None, reason: str
    ) -> None:
        retries_total.labels(reason=reason).inc()
        retry_wait_seconds.labels(reason=reason).observe(state.next_delay)
        await pause(state.next_delay, signal)
        state.next_delay = grow_backoff(state.next_delay)

    def _report(self, error: Exception) -> None:
        try:
            self.reporter.report(error)
        except Exception as e:
            logger.warning(
                "Error reporter failed",
                reporter=type(self.reporter).__name__,
                error_type=type(error).__name__,
                reporting_error=str(e),
            )

    def _log_completed(
        self, method: str, response: ApiResponse, state: CallAttemptState
    ) -> None:
        if state.rounds == 1 and state.transport_retries == 0:
            return
        logger.debug(
            f"Request '{method}' completed after retries",
            method=method,
            ok=response.ok,
            rounds=state.rounds,
            transport_retries=state.transport_retries,
            elapsed_ms=state.elapsed_ms,
        )


def auto_retry(
    policy: RetryPolicy | None = None,
    reporter: ErrorReporter | None = None,
    **overrides: Any,
) -> AutoRetry:
    """
    Create an AutoRetry interceptor.

    Keyword overrides are applied on top of ``policy`` (or the defaults):

        auto_retry(max_retry_attempts=3, rethrow_server_errors=True)
    """
    if policy is None:
        policy = RetryPolicy(**overrides)
    elif overrides:
        policy = RetryPolicy.model_validate({**policy.model_dump(), **overrides})
    return AutoRetry(policy, reporter=reporter)
