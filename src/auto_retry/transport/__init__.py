"""
Transport abstraction and implementations.

Components:
- BaseTransport: Abstract base class with the transformer pipeline
- BotApiClient: httpx implementation for the Bot API
- exceptions: Transport-specific exceptions
"""

from auto_retry.transport.base_client import Attempt, BaseTransport, Transformer
from auto_retry.transport.bot_api_client import BotApiClient
from auto_retry.transport.exceptions import (
    InvalidResponseError,
    TransportClientError,
    TransportError,
    TransportTimeoutError,
)

__all__ = [
    "Attempt",
    "Transformer",
    "BaseTransport",
    "BotApiClient",
    "TransportClientError",
    "TransportError",
    "TransportTimeoutError",
    "InvalidResponseError",
]
