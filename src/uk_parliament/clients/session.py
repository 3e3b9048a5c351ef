"""Construction of the ``requests`` session owned by the facade."""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from uk_parliament.clients.http_logging import LoggingHTTPAdapter
from uk_parliament.config import ParliamentClientOptions, RetrySettings


def default_headers(options: ParliamentClientOptions) -> dict[str, str]:
    return {"User-Agent": options.user_agent, "Accept": "application/json"}


def build_retry(settings: RetrySettings | None) -> Retry | int:
    """Return the urllib3 retry policy, or ``0`` when retries are disabled.

    Read timeouts are never retried so they surface as ``requests.ReadTimeout``.
    """
    if settings is None:
        return 0
    return Retry(
        total=settings.total,
        read=False,
        backoff_factor=settings.backoff_factor,
        status_forcelist=list(settings.status_forcelist),
        allowed_methods=["GET"],
        raise_on_status=False,
    )


def build_adapter(options: ParliamentClientOptions) -> HTTPAdapter:
    retries = build_retry(options.retries)
    if options.logger is not None or options.verbose_logging:
        return LoggingHTTPAdapter(options.logger, verbose=options.verbose_logging, max_retries=retries)
    return HTTPAdapter(max_retries=retries)


def build_session(options: ParliamentClientOptions) -> requests.Session:
    """Create a session with default headers, retry policy and optional logging."""
    session = requests.Session()
    session.headers.update(default_headers(options))

    adapter = build_adapter(options)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


__all__ = ["build_adapter", "build_retry", "build_session", "default_headers"]
