"""Structured logging for Auto Retry.

Retry decisions are logged through structlog with keyword context
(method, delay_seconds, error_code, ...). Production renders one JSON
object per line; development renders colored console lines.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

APP_NAME = "auto-retry"

# Libraries that log every request/retry on their own at INFO or DEBUG
NOISY_LOGGERS = ("httpx", "httpcore", "sentry_sdk")


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every event with the application name."""
    event_dict["app"] = APP_NAME
    return event_dict


def _renderer(is_production: bool) -> Processor:
    if is_production:
        return structlog.processors.JSONRenderer()
    # ConsoleRenderer formats exc_info itself
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(log_level: str = "INFO", environment: str = "development") -> None:
    """Route structlog and stdlib logging through one stdout handler.

    Args:
        log_level: Logging level name. Retry traces are emitted at DEBUG.
        environment: "production" selects the JSON renderer.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    is_production = environment.lower() == "production"

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
    ]
    if is_production:
        processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(is_production),
            foreign_pre_chain=processors,
        )
    )
    handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
    )
