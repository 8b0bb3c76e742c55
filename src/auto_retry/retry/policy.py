"""
Retry policy.

The policy is resolved once, when the interceptor is created, and shared
read-only by every call that goes through it.
"""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from auto_retry.config import Settings


class SentryOptions(BaseModel):
    """Connection options for the Sentry error sink."""

    model_config = ConfigDict(frozen=True)

    dsn: str = Field(..., description="Sentry project DSN")
    environment: str = Field(default="production", description="Sentry environment tag")
    traces_sample_rate: float = Field(
        default=1.0, ge=0.0, le=1.0, description="Fraction of transactions to trace"
    )


class RetryPolicy(BaseModel):
    """
    Immutable retry settings.

    Non-finite values disable the respective threshold.
    """

    model_config = ConfigDict(frozen=True)

    max_delay_seconds: float = Field(
        default=math.inf,
        ge=0,
        description=(
            "Largest retry_after value that is honored. Rate limits demanding "
            "a longer wait are returned to the caller un-retried."
        ),
    )
    max_retry_attempts: float = Field(
        default=math.inf,
        ge=0,
        description=(
            "Rate-limit/server-error retry rounds per call. Transport "
            "failures are not counted."
        ),
    )
    rethrow_http_errors: bool = Field(
        default=False,
        description="Re-raise transport failures instead of retrying them",
    )
    rethrow_server_errors: bool = Field(
        default=False,
        description="Return 5xx responses instead of retrying them",
    )
    sentry: Optional[SentryOptions] = Field(
        default=None, description="Error sink configuration (disabled when None)"
    )

    @classmethod
    def from_settings(cls, settings: Settings) -> "RetryPolicy":
        """Build a policy from environment-backed settings."""
        sentry = None
        if settings.SENTRY_DSN:
            sentry = SentryOptions(
                dsn=settings.SENTRY_DSN,
                environment=settings.SENTRY_ENVIRONMENT,
                traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            )
        return cls(
            max_delay_seconds=settings.AUTO_RETRY_MAX_DELAY_SECONDS,
            max_retry_attempts=settings.AUTO_RETRY_MAX_RETRY_ATTEMPTS,
            rethrow_http_errors=settings.AUTO_RETRY_RETHROW_HTTP_ERRORS,
            rethrow_server_errors=settings.AUTO_RETRY_RETHROW_SERVER_ERRORS,
            sentry=sentry,
        )
