"""Exception hierarchy for the UK Parliament API clients.

Every error raised by the library derives from :class:`ParliamentError` and
carries an :class:`ErrorContext` describing where it happened. Transport
failures from ``requests`` (DNS, refused connections, TLS) are not wrapped and
reach the caller unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from requests import Response


class ErrorDomain(Enum):
    """Error domains for categorization."""

    HTTP = "http"
    DESERIALIZATION = "deserialization"
    CANCELLATION = "cancellation"
    TIMEOUT = "timeout"
    CIRCUIT = "circuit"
    UNKNOWN = "unknown"


@dataclass
class ErrorContext:
    """Context information for errors."""

    domain: ErrorDomain
    component: str | None = None
    operation: str | None = None
    details: dict[str, Any] | None = None


class ParliamentError(Exception):
    """Base exception for all UK Parliament client errors."""

    def __init__(self, message: str, *, context: ErrorContext | None = None, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext(domain=ErrorDomain.UNKNOWN)
        self.cause = cause

    def __str__(self) -> str:
        base_msg = self.message
        if self.context.component:
            base_msg = f"[{self.context.component}] {base_msg}"
        if self.context.operation:
            base_msg = f"{base_msg} (operation: {self.context.operation})"
        return base_msg

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "message": self.message,
            "domain": self.context.domain.value,
            "component": self.context.component,
            "operation": self.context.operation,
            "details": self.context.details,
            "cause": str(self.cause) if self.cause else None,
        }


class HttpStatusError(ParliamentError):
    """Raised when an API answers with a non-success status code."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str = "",
        url: str | None = None,
        api_name: str | None = None,
        operation: str | None = None,
    ) -> None:
        context = ErrorContext(
            domain=ErrorDomain.HTTP,
            component=api_name,
            operation=operation,
            details={"url": url, "status_code": status_code},
        )
        super().__init__(message, context=context)
        self.status_code = status_code
        self.body = body
        self.url = url

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500

    @classmethod
    def from_response(
        cls,
        response: Response,
        *,
        api_name: str | None = None,
        operation: str | None = None,
    ) -> HttpStatusError:
        """Build the most specific status error for ``response``."""
        status = response.status_code
        if status == 404:
            error_cls: type[HttpStatusError] = ResourceNotFoundError
        elif status >= 500:
            error_cls = ServerError
        else:
            error_cls = HttpStatusError
        reason = response.reason or ""
        return error_cls(
            f"HTTP {status} {reason}".rstrip() + f" for {response.url}",
            status_code=status,
            body=response.text,
            url=response.url,
            api_name=api_name,
            operation=operation,
        )


class ResourceNotFoundError(HttpStatusError):
    """HTTP 404 from the upstream API."""


class ServerError(HttpStatusError):
    """HTTP 5xx from the upstream API."""


class DeserializationError(ParliamentError):
    """Raised when a response body does not match the expected shape."""

    def __init__(
        self,
        message: str,
        *,
        fields: list[str] | None = None,
        model: str | None = None,
        api_name: str | None = None,
        operation: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        context = ErrorContext(
            domain=ErrorDomain.DESERIALIZATION,
            component=api_name,
            operation=operation,
            details={"model": model, "fields": fields},
        )
        super().__init__(message, context=context, cause=cause)
        self.fields = fields or []
        self.model = model


class OperationCancelledError(ParliamentError):
    """Raised when an operation observes a cancelled token."""

    def __init__(self, message: str = "operation was cancelled", *, operation: str | None = None) -> None:
        super().__init__(message, context=ErrorContext(domain=ErrorDomain.CANCELLATION, operation=operation))


class RequestTimeoutError(ParliamentError):
    """Raised when a request exceeds the configured timeout."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        timeout: float | None = None,
        api_name: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        context = ErrorContext(
            domain=ErrorDomain.TIMEOUT,
            component=api_name,
            details={"url": url, "timeout": timeout},
        )
        super().__init__(message, context=context, cause=cause)
        self.url = url
        self.timeout = timeout


class CircuitOpenError(ParliamentError):
    """Raised instead of sending a request while a circuit breaker is open."""

    def __init__(self, message: str, *, api_name: str | None = None, retry_in: float | None = None) -> None:
        context = ErrorContext(domain=ErrorDomain.CIRCUIT, component=api_name, details={"retry_in": retry_in})
        super().__init__(message, context=context)
        self.retry_in = retry_in


__all__ = [
    "CircuitOpenError",
    "DeserializationError",
    "ErrorContext",
    "ErrorDomain",
    "HttpStatusError",
    "OperationCancelledError",
    "ParliamentError",
    "RequestTimeoutError",
    "ResourceNotFoundError",
    "ServerError",
]
