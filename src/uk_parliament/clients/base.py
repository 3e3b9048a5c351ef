"""Declarative endpoint table and the generic request routine shared by all clients."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from functools import lru_cache
from typing import Any, ClassVar, TypeVar
from urllib.parse import quote, urljoin

import requests
from pydantic import TypeAdapter, ValidationError
from urllib3.exceptions import ReadTimeoutError

from uk_parliament.cancellation import CancellationToken, check_cancelled
from uk_parliament.clients.circuit_breaker import CircuitBreaker
from uk_parliament.clients.session import default_headers
from uk_parliament.config import ParliamentClientOptions
from uk_parliament.exceptions import DeserializationError, HttpStatusError, RequestTimeoutError
from uk_parliament.logging_setup import get_logger
from uk_parliament.models.base import STRICT_CONTEXT_KEY

T = TypeVar("T")


def format_value(value: Any) -> str:
    """Render a path or query value the way the Parliament APIs expect it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


@dataclass(frozen=True)
class Endpoint:
    """One GET operation: a path template and its query parameters.

    ``query_params`` maps Python argument names to wire names.
    """

    path: str
    query_params: Mapping[str, str] = field(default_factory=dict)

    def render_path(self, path_args: Mapping[str, Any] | None = None) -> str:
        args = {key: quote(format_value(value), safe="") for key, value in (path_args or {}).items()}
        try:
            return self.path.format(**args)
        except KeyError as exc:
            raise ValueError(f"Missing path argument {exc.args[0]!r} for {self.path}") from exc

    def render_query(self, query: Mapping[str, Any] | None = None) -> dict[str, str]:
        params: dict[str, str] = {}
        for name, value in (query or {}).items():
            if name not in self.query_params:
                raise ValueError(f"Unknown query parameter {name!r} for {self.path}")
            if value is None:
                continue
            params[self.query_params[name]] = format_value(value)
        return params


@lru_cache(maxsize=None)
def _adapter_for(model_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model_type)


def _is_read_timeout(exc: requests.ConnectionError) -> bool:
    """Detect read timeouts that a session's retry policy exhausted."""
    reason = getattr(exc.args[0], "reason", None) if exc.args else None
    return isinstance(reason, ReadTimeoutError)


def _error_fields(exc: ValidationError) -> list[str]:
    fields: list[str] = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"])
        if error["type"] == "unmapped_field":
            ctx = error.get("ctx") or {}
            names = ctx.get("names") or str(ctx.get("fields", "")).split(", ")
            fields.extend(f"{path}.{name}" if path else name for name in names)
        else:
            fields.append(path)
    return fields


class BaseApiClient:
    """Base functionality for the Parliament domain clients.

    Subclasses declare ``ENDPOINTS`` and the ``BaseUrls`` attribute they read
    their base URL from; every operation then goes through :meth:`invoke`.
    """

    api_name: ClassVar[str] = "api"
    base_url_key: ClassVar[str] = ""
    ENDPOINTS: ClassVar[Mapping[str, Endpoint]] = {}

    def __init__(
        self,
        session: requests.Session,
        options: ParliamentClientOptions | None = None,
        *,
        base_url: str | None = None,
        circuit_breaker: CircuitBreaker | None = None,
    ) -> None:
        self.options = options or ParliamentClientOptions()
        self.session = session
        self.base_url = (base_url or getattr(self.options.base_urls, self.base_url_key)).rstrip("/")
        self.timeout = self.options.timeout
        self.strict = self.options.strict_validation
        self.headers = default_headers(self.options)
        if circuit_breaker is None and self.options.circuit_breaker is not None:
            circuit_breaker = CircuitBreaker(self.api_name, self.options.circuit_breaker)
        self.circuit_breaker = circuit_breaker
        self.logger = get_logger(self.__class__.__name__, api=self.api_name)

    def _make_url(self, path: str) -> str:
        """Build full URL from path."""
        if not path:
            return self.base_url
        if path.startswith(("http://", "https://")):
            return path
        return urljoin(self.base_url + "/", f"./{path.lstrip('/')}")

    def build_request(
        self,
        name: str,
        path_args: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> tuple[str, dict[str, str]]:
        """Return the URL and query parameters for operation ``name``."""
        endpoint = self.ENDPOINTS[name]
        return self._make_url(endpoint.render_path(path_args)), endpoint.render_query(query)

    def invoke(
        self,
        name: str,
        path_args: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
        cancel: CancellationToken | None = None,
    ) -> Any:
        """Send the GET request for ``name`` and return the decoded JSON body.

        Returns ``None`` for an empty body.

        Raises:
            OperationCancelledError: If ``cancel`` is set before sending or when the response arrives.
            RequestTimeoutError: If the request exceeds the configured timeout.
            HttpStatusError: For any non-2xx status.
            DeserializationError: If the body is not valid JSON.
            CircuitOpenError: If the circuit breaker of this API is open.
        """
        url, params = self.build_request(name, path_args, query)
        if self.circuit_breaker is not None:
            return self.circuit_breaker.call(self._send, name, url, params, cancel)
        return self._send(name, url, params, cancel)

    def _send(
        self,
        operation: str,
        url: str,
        params: Mapping[str, str],
        cancel: CancellationToken | None,
    ) -> Any:
        check_cancelled(cancel, operation)
        self.logger.debug("api_request", operation=operation, url=url, params=dict(params))
        try:
            response = self.session.get(url, params=params, headers=self.headers, timeout=self.timeout)
        except requests.Timeout as exc:
            raise self._timeout_error(url, exc) from exc
        except requests.ConnectionError as exc:
            if _is_read_timeout(exc):
                raise self._timeout_error(url, exc) from exc
            raise
        check_cancelled(cancel, operation)

        if not 200 <= response.status_code < 300:
            raise HttpStatusError.from_response(response, api_name=self.api_name, operation=operation)
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise DeserializationError(
                f"Response from {response.url} is not valid JSON",
                api_name=self.api_name,
                operation=operation,
                cause=exc,
            ) from exc

    def _timeout_error(self, url: str, exc: Exception) -> RequestTimeoutError:
        return RequestTimeoutError(
            f"Request to {url} timed out after {self.timeout}s",
            url=url,
            timeout=self.timeout,
            api_name=self.api_name,
            cause=exc,
        )

    def decode(self, payload: Any, model_type: Any, operation: str | None = None) -> Any:
        """Validate ``payload`` into ``model_type`` honouring the strict flag."""
        model_name = getattr(model_type, "__name__", str(model_type))
        try:
            return _adapter_for(model_type).validate_python(payload, context={STRICT_CONTEXT_KEY: self.strict})
        except ValidationError as exc:
            fields = _error_fields(exc)
            details = "; ".join(f"{'.'.join(map(str, err['loc'])) or '<root>'}: {err['msg']}" for err in exc.errors())
            raise DeserializationError(
                f"Response does not match {model_name}: {details}",
                fields=fields,
                model=model_name,
                api_name=self.api_name,
                operation=operation,
                cause=exc,
            ) from exc

    def fetch(
        self,
        name: str,
        model_type: Any,
        path_args: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
        cancel: CancellationToken | None = None,
    ) -> Any:
        """:meth:`invoke` followed by :meth:`decode`."""
        return self.decode(self.invoke(name, path_args, query, cancel), model_type, name)


__all__ = ["BaseApiClient", "Endpoint", "format_value"]
