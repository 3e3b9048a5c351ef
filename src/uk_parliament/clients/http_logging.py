"""Transport adapter that logs every HTTP exchange."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

import requests
import structlog
from requests.adapters import HTTPAdapter

from uk_parliament.logging_setup import get_logger, redact_mapping

SUCCESS_BODY_LIMIT = 5000
ERROR_BODY_LIMIT = 10000


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... [truncated {len(text) - limit} chars]"


def _request_body(body: Any) -> str | None:
    if body is None:
        return None
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return str(body)


def _level_for_status(status: int) -> str:
    if status >= 500:
        return "error"
    if status >= 400:
        return "warning"
    return "debug"


class LoggingHTTPAdapter(HTTPAdapter):
    """``HTTPAdapter`` that tags each exchange with a request id and logs it.

    Responses are logged at DEBUG for 2xx/3xx, WARNING for 4xx and ERROR for
    5xx. Bodies are included when ``verbose`` is set or the status is an error.
    Transport exceptions are logged and re-raised unchanged.
    """

    def __init__(self, logger: Any = None, *, verbose: bool = False, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if logger is None:
            logger = get_logger("uk_parliament.http")
        elif isinstance(logger, logging.Logger):
            logger = structlog.wrap_logger(logger)
        self.logger = logger
        self.verbose = verbose

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:  # type: ignore[override]
        log = self.logger.bind(request_id=uuid.uuid4().hex[:12], method=request.method, url=request.url)
        if self.verbose:
            log.debug("http_request", headers=redact_mapping(request.headers), body=_request_body(request.body))

        started = time.perf_counter()
        try:
            response = super().send(request, **kwargs)
        except Exception as exc:
            log.error(
                "http_request_failed",
                elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise

        elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
        status = response.status_code
        fields: dict[str, Any] = {"status_code": status, "elapsed_ms": elapsed_ms}
        if self.verbose:
            fields["headers"] = redact_mapping(response.headers)
        is_error = status >= 400
        if self.verbose or is_error:
            fields["body"] = truncate(response.text, ERROR_BODY_LIMIT if is_error else SUCCESS_BODY_LIMIT)
        getattr(log, _level_for_status(status))("http_response", **fields)
        return response


__all__ = ["ERROR_BODY_LIMIT", "LoggingHTTPAdapter", "SUCCESS_BODY_LIMIT", "truncate"]
