"""
Per-call retry state.

This module defines the CallAttemptState dataclass that lives for the
duration of one intercepted call and is discarded afterwards.
"""

import time
from dataclasses import dataclass, field

from auto_retry.retry.clock import INITIAL_BACKOFF_SECONDS


@dataclass
class CallAttemptState:
    """
    Mutable retry state scoped to one intercepted call.

    Attributes:
        remaining_attempts: Rate-limit/server-error retry rounds still allowed
            (may be ``inf``)
        next_delay: Backoff to apply on the next transport or server-error retry
        rounds: Structural results obtained so far
        transport_retries: Transport failures absorbed so far
        started_at: Monotonic start time
    """

    remaining_attempts: float
    next_delay: float = INITIAL_BACKOFF_SECONDS
    rounds: int = 0
    transport_retries: int = 0
    started_at: float = field(default_factory=time.monotonic)

    def reset_backoff(self) -> None:
        self.next_delay = INITIAL_BACKOFF_SECONDS

    @property
    def elapsed_ms(self) -> int:
        return int((time.monotonic() - self.started_at) * 1000)
