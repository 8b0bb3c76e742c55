"""
Abstract base transport for API requests.

Defines the interface that all transports must adhere to, and the
transformer pipeline used to interpose on requests (retries, logging,
etc.) without the transport knowing about them.

A transformer receives the next attempt function plus the request and
decides how (and how often) to invoke it:

    async def transformer(prev, method, payload, signal):
        return await prev(method, payload, signal)
"""

import asyncio
import functools
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Mapping, Optional

import structlog

from auto_retry.models.api_models import ApiResponse

logger = structlog.get_logger(__name__)

# One raw API request: (method, payload, signal) -> structural result
Attempt = Callable[
    [str, Mapping[str, Any], Optional[asyncio.Event]], Awaitable[ApiResponse]
]

# Interceptor around an attempt function
Transformer = Callable[
    [Attempt, str, Mapping[str, Any], Optional[asyncio.Event]], Awaitable[ApiResponse]
]


class BaseTransport(ABC):
    """
    Abstract base class for API transports.

    Responsibilities:
    - Perform exactly one raw request per ``send`` call
    - Raise TransportError subclasses for network-level failures
    - Return an ApiResponse for every well-formed response, successful or not

    Does NOT handle:
    - Retries (that's AutoRetry's job, installed via ``use``)
    """

    def __init__(self) -> None:
        self._transformers: list[Transformer] = []

    @abstractmethod
    async def send(
        self,
        method: str,
        payload: Mapping[str, Any],
        signal: asyncio.Event | None = None,
    ) -> ApiResponse:
        """
        Perform one raw request.

        Args:
            method: API method name (e.g. "sendMessage")
            payload: Method parameters
            signal: Optional cancellation signal

        Returns:
            ApiResponse for any well-formed response

        Raises:
            TransportError: Network/timeout errors
            InvalidResponseError: Response body is not an API response
        """
        pass

    def use(self, *transformers: Transformer) -> "BaseTransport":
        """
        Install transformers.

        Transformers installed later wrap the ones installed before them, so
        the last installed transformer sees the request first.
        """
        self._transformers.extend(transformers)
        logger.debug(
            "Transformers installed",
            transport=self.__class__.__name__,
            installed=len(transformers),
            total=len(self._transformers),
        )
        return self

    async def call(
        self,
        method: str,
        payload: Mapping[str, Any] | None = None,
        signal: asyncio.Event | None = None,
    ) -> ApiResponse:
        """Perform ``method`` through all installed transformers."""
        attempt: Attempt = self.send
        for transformer in self._transformers:
            attempt = functools.partial(transformer, attempt)
        return await attempt(method, payload or {}, signal)

    async def close(self) -> None:
        """
        Close connections and cleanup resources.

        Default implementation does nothing. Subclasses should override if
        they hold persistent connections.
        """
        logger.debug("Closing transport", transport=self.__class__.__name__)

    async def __aenter__(self) -> "BaseTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
