"""
Logging configuration for tvdigest.

Log events go to stderr so that stdout only ever carries the rendered digest.
"""

import logging
import sys
from typing import Any

import structlog

from tvdigest.core.config import LoggingConfig

SECRET_KEYS = ("api_key", "token", "authorization")


def redact_secrets(_, __, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Redact credentials from log events."""
    for key in list(event_dict.keys()):
        if any(secret in key.lower() for secret in SECRET_KEYS):
            event_dict[key] = "***REDACTED***"
    return event_dict


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(config: LoggingConfig) -> None:
    """Configure structlog for console or JSON output on stderr."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    processors: list[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        redact_secrets,
    ]
    if config.format == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
