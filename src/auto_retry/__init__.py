"""
Auto Retry for Bot API requests.

Interposes on outbound API calls and transparently retries them:
- Network/transport failures (exponential backoff, unbounded)
- Rate limits (honors the server's retry_after hint up to a cap)
- Internal server errors (exponential backoff, bounded by a retry budget)

Unrecoverable errors are reported to Sentry and re-raised.

Architecture: asyncio interceptor + pluggable transport (httpx) + Sentry sink
"""

__version__ = "0.1.0"
