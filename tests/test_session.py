from __future__ import annotations

from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from uk_parliament import RetrySettings
from uk_parliament.clients.session import build_retry, build_session, default_headers

from .conftest import make_options


def test_build_retry_from_settings() -> None:
    retry = build_retry(RetrySettings(total=4, backoff_factor=0.25, status_forcelist=(502, 503)))

    assert isinstance(retry, Retry)
    assert retry.total == 4
    assert retry.backoff_factor == 0.25
    assert set(retry.status_forcelist) == {502, 503}
    assert "GET" in retry.allowed_methods
    assert retry.raise_on_status is False
    assert retry.read is False


def test_build_retry_disabled() -> None:
    assert build_retry(None) == 0


def test_owned_session_carries_headers_and_retries() -> None:
    options = make_options(user_agent="tests/2.0", retries=RetrySettings(total=2))

    session = build_session(options)

    assert session.headers["User-Agent"] == "tests/2.0"
    assert session.headers["Accept"] == "application/json"
    adapter = session.get_adapter("https://members-api.parliament.uk/")
    assert isinstance(adapter, HTTPAdapter)
    assert adapter.max_retries.total == 2
    session.close()


def test_default_headers() -> None:
    assert default_headers(make_options(user_agent="ua")) == {"User-Agent": "ua", "Accept": "application/json"}
