"""
Structured logging configuration using structlog.

Provides consistent, structured logging across all modules.
Interview answers can contain names and e-mail addresses, so string values
are passed through a redaction processor before rendering.
"""

import logging
import re
import sys
from typing import Any

import structlog

from intake_router.shared.infrastructure.config import settings

# Library use: nothing is emitted until a host configures logging
logging.getLogger("intake_router").addHandler(logging.NullHandler())

_REDACTION_PATTERNS = {
    r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b": "[EMAIL_REDACTED]",
    r"(api[_-]?key|token|password|secret)['\"]?\s*[:=]\s*['\"]?([^'\"\s]+)": r"\1=[REDACTED]",
    r"Bearer\s+\S+": "Bearer [TOKEN_REDACTED]",
}


def redact_string(text: str) -> str:
    """Redact sensitive patterns from a string."""
    for pattern, replacement in _REDACTION_PATTERNS.items():
        text = re.sub(pattern, replacement, text, flags=re.IGNORECASE)
    return text


def _redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_string(value)
    if isinstance(value, dict):
        return {k: _redact_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_redact_value(v) for v in value]
    return value


def privacy_redactor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Redact sensitive information from log events.

    Redacts:
    - Email addresses
    - API keys, passwords, secrets
    - Bearer tokens

    Args:
        logger: Logger instance
        method_name: Logging method name
        event_dict: Event dictionary to process

    Returns:
        Redacted event dictionary
    """
    if not getattr(settings, "log_redaction_enabled", True):
        return event_dict

    return {k: _redact_value(v) for k, v in event_dict.items()}


def configure_logging(stream: Any = None) -> None:
    """
    Configure structlog for the application.

    Sets up:
    - JSON output for production (or log_format=json)
    - Pretty console output for development
    - Log level from settings
    """
    use_json = settings.is_production or settings.log_format == "json"

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        privacy_redactor,
    ]

    if use_json:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=settings.is_development),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        force=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Always backed by a stdlib logger, so events go through the host's logging
    handlers (and nowhere before configure_logging or an equivalent host setup).

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("unknown_data_classification", treated_as="restricted")
    """
    return structlog.wrap_logger(logging.getLogger(name))
