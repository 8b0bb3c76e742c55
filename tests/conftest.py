"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

from typing import Any, Optional

import pytest

from auto_retry.config import Settings
from auto_retry.models.api_models import ApiResponse, ResponseParameters
from auto_retry.retry.policy import RetryPolicy


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.AUTO_RETRY_MAX_RETRY_ATTEMPTS = 3
    """
    return Settings(
        _env_file=None,
        # === Application ===
        APP_NAME="Auto Retry (Test)",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Retry Policy ===
        AUTO_RETRY_MAX_DELAY_SECONDS=float("inf"),
        AUTO_RETRY_MAX_RETRY_ATTEMPTS=float("inf"),
        AUTO_RETRY_RETHROW_HTTP_ERRORS=False,
        AUTO_RETRY_RETHROW_SERVER_ERRORS=False,

        # === Sentry ===
        SENTRY_DSN=None,

        # === Bot API ===
        BOT_API_BASE_URL="http://bot-api.test",
        BOT_API_TOKEN="123:TEST",
        BOT_API_TIMEOUT=5.0,

        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def default_policy() -> RetryPolicy:
    """Policy with all defaults (no limits, retry everything, no sink)."""
    return RetryPolicy()


@pytest.fixture
def make_ok_response():
    """Factory fixture to create successful ApiResponse objects.

    Usage:
        def test_something(make_ok_response):
            response = make_ok_response(result={"message_id": 1})
    """
    def _create(result: Any = True) -> ApiResponse:
        return ApiResponse(ok=True, result=result)

    return _create


@pytest.fixture
def make_error_response():
    """Factory fixture to create failed ApiResponse objects.

    Usage:
        def test_something(make_error_response):
            rate_limited = make_error_response(429, retry_after=5)
            server_error = make_error_response(502)
    """
    def _create(
        error_code: int,
        description: str = "Error",
        retry_after: Optional[float] = None,
    ) -> ApiResponse:
        parameters = None
        if retry_after is not None:
            parameters = ResponseParameters(retry_after=retry_after)
        return ApiResponse(
            ok=False,
            error_code=error_code,
            description=description,
            parameters=parameters,
        )

    return _create
