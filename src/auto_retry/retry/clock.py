"""
Delay clock for the retry engine.

``pause`` is the only place the engine suspends between attempts. It can
be interrupted through a cancellation signal (an ``asyncio.Event`` owned
by the caller); the engine never sets or clears the signal itself.
"""

import asyncio

from auto_retry.retry.exceptions import RetryCancelled

INITIAL_BACKOFF_SECONDS = 3
MAX_BACKOFF_SECONDS = 3600  # one hour


async def pause(seconds: float, signal: asyncio.Event | None = None) -> None:
    """
    Wait ``seconds``, or fail early if ``signal`` is set.

    Args:
        seconds: Time to wait
        signal: Optional cancellation signal

    Raises:
        RetryCancelled: The signal was set before or during the wait
    """
    if signal is None:
        await asyncio.sleep(seconds)
        return

    if signal.is_set():
        raise RetryCancelled(seconds)

    # wait_for cancels the inner signal.wait() on timeout
    try:
        await asyncio.wait_for(signal.wait(), timeout=seconds)
    except asyncio.TimeoutError:
        return
    raise RetryCancelled(seconds)


def grow_backoff(current: float) -> float:
    """Double the backoff, capped at one hour."""
    return min(MAX_BACKOFF_SECONDS, current + current)
