"""
Application entry point for Auto Retry.

Wires the environment-backed settings into a ready-to-use Bot API client:
logging, the metrics endpoint, the transport and the retry interceptor.

Usage:
    async with create_bot_api_client() as client:
        await client.call("sendMessage", {"chat_id": 1, "text": "hi"})
"""

import structlog
from prometheus_client import start_http_server

from auto_retry.config import Settings, settings as default_settings
from auto_retry.logging_config import configure_logging
from auto_retry.retry.engine import AutoRetry
from auto_retry.retry.policy import RetryPolicy
from auto_retry.transport.bot_api_client import BotApiClient

logger = structlog.get_logger(__name__)


def create_bot_api_client(settings: Settings | None = None) -> BotApiClient:
    """Build a BotApiClient with AutoRetry installed, configured from settings."""
    settings = settings or default_settings

    configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)

    logger.info(
        "Application startup",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        base_url=settings.BOT_API_BASE_URL,
    )

    if settings.PROMETHEUS_ENABLED:
        start_http_server(settings.PROMETHEUS_PORT)
        logger.info("Metrics endpoint started", port=settings.PROMETHEUS_PORT)

    policy = RetryPolicy.from_settings(settings)
    return BotApiClient.from_settings(settings).use(AutoRetry(policy))
