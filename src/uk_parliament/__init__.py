"""Typed client library for the UK Parliament public REST APIs."""

from __future__ import annotations

from uk_parliament.cancellation import CancellationToken
from uk_parliament.client import ParliamentClient
from uk_parliament.config import BaseUrls, CircuitBreakerSettings, ParliamentClientOptions, RetrySettings
from uk_parliament.exceptions import (
    CircuitOpenError,
    DeserializationError,
    HttpStatusError,
    OperationCancelledError,
    ParliamentError,
    RequestTimeoutError,
    ResourceNotFoundError,
    ServerError,
)
from uk_parliament.logging_setup import configure_logging, get_logger
from uk_parliament.pagination import PageResult, collect_all, paginate
from uk_parliament.queries import MotionsQuery, OralQuestionsQuery, WrittenQuestionsQuery

__version__ = "2.0.0"

__all__ = [
    "BaseUrls",
    "CancellationToken",
    "CircuitBreakerSettings",
    "CircuitOpenError",
    "DeserializationError",
    "HttpStatusError",
    "MotionsQuery",
    "OperationCancelledError",
    "OralQuestionsQuery",
    "PageResult",
    "ParliamentClient",
    "ParliamentClientOptions",
    "ParliamentError",
    "RequestTimeoutError",
    "ResourceNotFoundError",
    "RetrySettings",
    "ServerError",
    "WrittenQuestionsQuery",
    "__version__",
    "collect_all",
    "configure_logging",
    "get_logger",
    "paginate",
]
