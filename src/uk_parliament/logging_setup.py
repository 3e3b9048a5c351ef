"""Structured logging configuration for the UK Parliament clients."""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

import structlog
from structlog.stdlib import BoundLogger

_LOGGING_CONFIGURED = False

_SENSITIVE_KEYS = (
    "authorization",
    "api_key",
    "token",
    "password",
    "secret",
    "cookie",
    "credential",
)


class RedactSecretsFilter(logging.Filter):
    """Filter to redact sensitive information from plain log records."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.sensitive_patterns = [
            (re.compile(r"(?i)(token|api_key|password|secret)\s*=\s*([^\s,}]+)"), r"\1=[REDACTED]"),
            (re.compile(r"(?i)(authorization|bearer|cookie)\s*:\s*([^\s,}]+)"), r"\1: [REDACTED]"),
        ]

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        for pattern, replacement in self.sensitive_patterns:
            message = pattern.sub(replacement, message)
        record.msg = message
        record.args = None
        return True


def _redact_value(key: str, value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _redact_value(k, v) for k, v in value.items()}
    if isinstance(value, str) and any(sensitive in key.lower() for sensitive in _SENSITIVE_KEYS):
        return "[REDACTED]"
    return value


def redact_mapping(values: Any) -> dict[str, Any]:
    """Return a copy of ``values`` with sensitive entries replaced."""
    return {str(key): _redact_value(str(key), value) for key, value in dict(values).items()}


def _redact_secrets_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Remove sensitive values from a structlog event dictionary."""
    return {key: _redact_value(key, value) for key, value in event_dict.items()}


def configure_logging(level: str = "INFO", console_format: str = "text") -> BoundLogger:
    """Configure structlog on top of stdlib logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_format: ``text`` for the developer console renderer or ``json``

    Returns:
        Configured structlog logger
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        return structlog.get_logger()

    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(RedactSecretsFilter())
    logging.basicConfig(level=getattr(logging, level.upper()), handlers=[handler], format="%(message)s")

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            _redact_secrets_processor,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer() if console_format == "json" else structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _LOGGING_CONFIGURED = True
    return structlog.get_logger()


def get_logger(name: str, **initial_values: Any) -> BoundLogger:
    """Return a lazy structlog logger bound to ``initial_values``.

    The logger resolves the active configuration on first use, so module level
    loggers follow a later :func:`configure_logging` call.
    """
    return structlog.get_logger(name, **initial_values)


__all__ = [
    "RedactSecretsFilter",
    "configure_logging",
    "get_logger",
    "redact_mapping",
]
