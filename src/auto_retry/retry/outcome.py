"""
Classification of structural API results.

A completed attempt is classified exactly once, right after it is
received, into one of four shapes:

    RateLimited(seconds, code) | ServerError(code) | Success | OtherError(code)

Classification does not look at the retry policy; the engine decides what
to do with each shape.
"""

from dataclasses import dataclass
from typing import Optional, Union

from auto_retry.models.api_models import ApiResponse


@dataclass(frozen=True)
class Success:
    """The request succeeded."""


@dataclass(frozen=True)
class RateLimited:
    """
    The server asked the caller to wait ``seconds`` before repeating.

    ``code`` is kept so that a hint the policy refuses to honor can still be
    handled as a server error.
    """

    seconds: float
    code: Optional[int] = None


@dataclass(frozen=True)
class ServerError:
    """Internal server error (status >= 500)."""

    code: int


@dataclass(frozen=True)
class OtherError:
    """Any other failed response (typically a 4xx client error)."""

    code: Optional[int]


Outcome = Union[Success, RateLimited, ServerError, OtherError]


def classify(response: ApiResponse) -> Outcome:
    """
    Classify a structural result.

    First match wins: a wait hint, then a 5xx status class, then the ``ok``
    flag. A hint on an ``ok`` response is still a rate limit.
    """
    if response.retry_after is not None:
        return RateLimited(seconds=response.retry_after, code=response.error_code)
    if response.error_code is not None and response.error_code >= 500:
        return ServerError(code=response.error_code)
    if response.ok:
        return Success()
    return OtherError(code=response.error_code)
