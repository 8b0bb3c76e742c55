"""
Bot API transport implementation.

Communicates with the Bot API using httpx AsyncClient. Supports:
- JSON payloads (POST /bot<token>/<method>)
- Connection pooling via a persistent client
- Cancellation of in-flight requests through a signal

Retries are not performed here; install AutoRetry with ``use``.
"""

import asyncio
import json
from typing import Any, Mapping, Optional

import httpx
import pydantic
import structlog

from auto_retry.config import Settings
from auto_retry.models.api_models import ApiResponse
from auto_retry.transport.base_client import BaseTransport
from auto_retry.transport.exceptions import (
    InvalidResponseError,
    TransportError,
    TransportTimeoutError,
)

logger = structlog.get_logger(__name__)


class BotApiClient(BaseTransport):
    """
    Bot API transport using httpx for async HTTP communication.

    Every response with a JSON body is returned as an ApiResponse, whatever
    its HTTP status: the Bot API reports errors (including rate limits and
    5xx) inside the body, which is what the retry engine inspects.
    """

    def __init__(
        self,
        token: str,
        base_url: str = "https://api.telegram.org",
        timeout: float = 60.0,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Bot API client.

        Args:
            token: Bot token
            base_url: Bot API server URL
            timeout: Request timeout in seconds
            connection_limits: httpx connection pool limits (default: 10 max connections)
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
        """
        super().__init__()
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0,
            )

        self._client: Optional[httpx.AsyncClient] = None
        self._connection_limits = connection_limits
        self._transport = transport

        logger.info(
            "Bot API client initialized",
            base_url=self.base_url,
            timeout=timeout,
            connection_limits=str(connection_limits),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "BotApiClient":
        return cls(
            token=settings.BOT_API_TOKEN,
            base_url=settings.BOT_API_BASE_URL,
            timeout=settings.BOT_API_TIMEOUT,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    async def send(
        self,
        method: str,
        payload: Mapping[str, Any],
        signal: asyncio.Event | None = None,
    ) -> ApiResponse:
        """
        Perform one Bot API request.

        If ``signal`` is set while the request is in flight, the request is
        cancelled and a TransportError is raised.
        """
        if signal is None:
            return await self._post(method, payload)

        request = asyncio.ensure_future(self._post(method, payload))
        aborted = asyncio.ensure_future(signal.wait())
        try:
            await asyncio.wait({request, aborted}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            pending = {task for task in (request, aborted) if not task.done()}
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.wait(pending)

        if request.cancelled():
            logger.info("Request aborted by signal", method=method)
            raise TransportError(
                f"Request '{method}' aborted",
                details={"method": method, "aborted": True},
            )
        return request.result()

    async def _post(self, method: str, payload: Mapping[str, Any]) -> ApiResponse:
        client = await self._get_client()

        logger.debug("Sending Bot API request", method=method)

        try:
            response = await client.post(f"/bot{self.token}/{method}", json=dict(payload))
        except httpx.TimeoutException as e:
            logger.warning("Bot API request timeout", method=method, timeout=self.timeout)
            raise TransportTimeoutError(
                f"Request '{method}' timed out after {self.timeout}s",
                details={"method": method, "timeout": self.timeout},
            ) from e
        except httpx.TransportError as e:
            logger.warning(
                "Bot API network error",
                method=method,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise TransportError(
                f"Network request for '{method}' failed: {e}",
                details={"method": method, "error_type": type(e).__name__},
            ) from e

        try:
            api_response = ApiResponse.model_validate(response.json())
        except (json.JSONDecodeError, pydantic.ValidationError) as e:
            logger.error(
                "Invalid Bot API response",
                method=method,
                status_code=response.status_code,
                error=str(e),
            )
            raise InvalidResponseError(
                f"Invalid response for '{method}' (HTTP {response.status_code})",
                details={"method": method, "status": response.status_code},
            ) from e

        logger.debug(
            "Bot API response received",
            method=method,
            status_code=response.status_code,
            ok=api_response.ok,
            error_code=api_response.error_code,
        )
        return api_response

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed httpx AsyncClient")
        self._client = None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}s)"
        )
