"""Structured logging setup using structlog."""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from core.config import settings

SENSITIVE_KEYS = frozenset({"password", "password_hash", "api_key", "token", "secret", "authorization"})


def mask_sensitive_values(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Replace values of credential-like keys before rendering."""
    for key in list(event_dict.keys()):
        key_lower = key.lower()
        if key_lower in SENSITIVE_KEYS or any(
            key_lower.endswith(f"_{sensitive}") for sensitive in SENSITIVE_KEYS
        ):
            event_dict[key] = "***MASKED***"
    return event_dict


def setup_logging() -> None:
    """Configure stdlib logging and structlog for the application.

    Production emits one JSON object per line; every other environment uses
    the human-friendly console renderer. Context bound through
    ``structlog.contextvars`` (request id, path, ...) is merged into every
    event.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        level=level,
        stream=sys.stdout,
    )

    renderer: Processor
    if settings.is_production:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            mask_sensitive_values,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
