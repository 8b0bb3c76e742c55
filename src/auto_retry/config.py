"""
Configuration settings for Auto Retry.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development (see .env.example).
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Auto Retry"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Retry Policy ===
    # "inf" disables the threshold
    AUTO_RETRY_MAX_DELAY_SECONDS: float = float("inf")
    AUTO_RETRY_MAX_RETRY_ATTEMPTS: float = float("inf")
    AUTO_RETRY_RETHROW_HTTP_ERRORS: bool = False
    AUTO_RETRY_RETHROW_SERVER_ERRORS: bool = False

    # === Sentry ===
    SENTRY_DSN: Optional[str] = None  # Reporting disabled when unset
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 1.0

    # === Bot API Transport ===
    BOT_API_BASE_URL: str = "https://api.telegram.org"
    BOT_API_TOKEN: str = ""
    BOT_API_TIMEOUT: float = 60.0  # seconds

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True
    PROMETHEUS_PORT: int = 9108


# Global settings instance
settings = Settings()
