"""Tests for the shared request routine of the domain clients."""

from __future__ import annotations

import contextlib
import threading
import time
from collections.abc import Iterator
from datetime import date
from enum import Enum
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest
import requests
import responses
from urllib3.exceptions import MaxRetryError, ReadTimeoutError

from uk_parliament import (
    CancellationToken,
    DeserializationError,
    HttpStatusError,
    OperationCancelledError,
    RequestTimeoutError,
    ResourceNotFoundError,
    RetrySettings,
    ServerError,
)
from uk_parliament.clients.base import BaseApiClient, Endpoint, format_value
from uk_parliament.clients.session import build_session
from uk_parliament.models.members import Member

from .conftest import make_options

BASE = "https://example.test/api"


class SlowHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:  # noqa: N802
        time.sleep(1.0)
        with contextlib.suppress(OSError):
            self.send_response(200)
            self.end_headers()
            self.wfile.write(b"{}")

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        pass


@pytest.fixture()
def slow_server() -> Iterator[str]:
    server = ThreadingHTTPServer(("127.0.0.1", 0), SlowHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


class Colour(Enum):
    RED = "red"


class ExampleClient(BaseApiClient):
    api_name = "example"
    base_url_key = "members"
    ENDPOINTS = {
        "item": Endpoint("items/{id}", {"include_old": "includeOld", "since": "since"}),
        "nested": Endpoint("/things/{kind}/list"),
    }


def make_client(session: requests.Session, **options: object) -> ExampleClient:
    return ExampleClient(session, make_options(**options), base_url=BASE)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (Colour.RED, "red"),
        (date(2024, 1, 2), "2024-01-02"),
        (42, "42"),
    ],
)
def test_format_value(value: object, expected: str) -> None:
    assert format_value(value) == expected


def test_build_request_joins_path_and_drops_none(session: requests.Session) -> None:
    client = make_client(session)

    url, params = client.build_request("item", {"id": 5}, {"include_old": False, "since": None})

    assert url == "https://example.test/api/items/5"
    assert params == {"includeOld": "false"}


def test_path_arguments_are_quoted(session: requests.Session) -> None:
    client = make_client(session)

    url, _ = client.build_request("nested", {"kind": "a/b c"})

    assert url == "https://example.test/api/things/a%2Fb%20c/list"


def test_missing_path_argument_and_unknown_parameter(session: requests.Session) -> None:
    client = make_client(session)

    with pytest.raises(ValueError, match="Missing path argument"):
        client.build_request("item")
    with pytest.raises(ValueError, match="Unknown query parameter"):
        client.build_request("item", {"id": 1}, {"colour": "red"})


def test_base_url_defaults_to_options(session: requests.Session) -> None:
    client = ExampleClient(session, make_options())

    assert client.base_url == "https://members-api.parliament.uk"


@responses.activate
def test_invoke_sends_default_headers(session: requests.Session) -> None:
    client = make_client(session, user_agent="tests/1.0")
    responses.add(responses.GET, f"{BASE}/items/1", json={"id": 1})

    assert client.invoke("item", {"id": 1}) == {"id": 1}

    request = responses.calls[0].request
    assert request.headers["User-Agent"] == "tests/1.0"
    assert request.headers["Accept"] == "application/json"


@pytest.mark.parametrize(
    ("status", "error_type"),
    [(404, ResourceNotFoundError), (500, ServerError), (503, ServerError), (400, HttpStatusError)],
)
@responses.activate
def test_status_codes_map_to_errors(session: requests.Session, status: int, error_type: type[Exception]) -> None:
    client = make_client(session)
    responses.add(responses.GET, f"{BASE}/items/1", status=status, body="nope")

    with pytest.raises(error_type) as excinfo:
        client.invoke("item", {"id": 1})

    error = excinfo.value
    assert isinstance(error, HttpStatusError)
    assert error.status_code == status
    assert error.body == "nope"
    assert error.context.component == "example"
    assert error.context.operation == "item"


@responses.activate
def test_not_found_is_not_a_server_error(session: requests.Session) -> None:
    client = make_client(session)
    responses.add(responses.GET, f"{BASE}/items/9", status=404)

    with pytest.raises(HttpStatusError) as excinfo:
        client.invoke("item", {"id": 9})

    assert excinfo.value.is_client_error
    assert not isinstance(excinfo.value, ServerError)


@responses.activate
def test_timeout_is_wrapped(session: requests.Session) -> None:
    client = make_client(session, timeout=2.5)
    responses.add(responses.GET, f"{BASE}/items/1", body=requests.exceptions.ReadTimeout("slow"))

    with pytest.raises(RequestTimeoutError) as excinfo:
        client.invoke("item", {"id": 1})

    assert excinfo.value.timeout == 2.5
    assert isinstance(excinfo.value.cause, requests.Timeout)


@responses.activate
def test_read_timeout_exhausted_by_retries_is_wrapped(session: requests.Session) -> None:
    client = make_client(session, timeout=1.5)
    url = f"{BASE}/items/1"
    exhausted = MaxRetryError(None, url, ReadTimeoutError(None, url, "Read timed out."))
    responses.add(responses.GET, url, body=requests.exceptions.ConnectionError(exhausted))

    with pytest.raises(RequestTimeoutError) as excinfo:
        client.invoke("item", {"id": 1})

    assert excinfo.value.timeout == 1.5
    assert isinstance(excinfo.value.cause, requests.ConnectionError)


def test_read_timeout_with_default_retry_policy(slow_server: str) -> None:
    options = make_options(retries=RetrySettings(), timeout=0.2)
    session = build_session(options)
    session.trust_env = False
    client = ExampleClient(session, options, base_url=slow_server)

    with pytest.raises(RequestTimeoutError) as excinfo:
        client.invoke("item", {"id": 1})

    session.close()
    assert excinfo.value.timeout == 0.2
    assert isinstance(excinfo.value.cause, requests.Timeout)


@responses.activate
def test_connection_errors_propagate_unchanged(session: requests.Session) -> None:
    client = make_client(session)
    responses.add(responses.GET, f"{BASE}/items/1", body=requests.exceptions.ConnectionError("refused"))

    with pytest.raises(requests.ConnectionError):
        client.invoke("item", {"id": 1})


@responses.activate
def test_empty_body_returns_none_and_invalid_json_raises(session: requests.Session) -> None:
    client = make_client(session)
    responses.add(responses.GET, f"{BASE}/items/1", body="")
    responses.add(responses.GET, f"{BASE}/items/2", body="<html>", content_type="text/html")

    assert client.invoke("item", {"id": 1}) is None
    with pytest.raises(DeserializationError):
        client.invoke("item", {"id": 2})


@responses.activate
def test_cancelled_token_prevents_request(session: requests.Session) -> None:
    client = make_client(session)
    token = CancellationToken()
    token.cancel()

    with pytest.raises(OperationCancelledError):
        client.invoke("item", {"id": 1}, cancel=token)

    assert len(responses.calls) == 0


@responses.activate
def test_cancellation_observed_when_response_arrives(session: requests.Session) -> None:
    client = make_client(session)
    token = CancellationToken()

    def cancel_then_respond(request: requests.PreparedRequest) -> tuple[int, dict[str, str], str]:
        token.cancel()
        return 200, {}, '{"id": 1}'

    responses.add_callback(responses.GET, f"{BASE}/items/1", callback=cancel_then_respond)

    with pytest.raises(OperationCancelledError):
        client.invoke("item", {"id": 1}, cancel=token)


def test_decode_reports_missing_fields(session: requests.Session) -> None:
    client = make_client(session)

    with pytest.raises(DeserializationError) as excinfo:
        client.decode({"nameDisplayAs": "No id"}, Member, "get")

    assert excinfo.value.fields == ["id"]
    assert excinfo.value.model == "Member"


def test_lenient_decode_ignores_unknown_fields(session: requests.Session) -> None:
    client = make_client(session)

    member = client.decode({"id": 1, "brandNewField": "x"}, Member)

    assert member.id == 1


def test_strict_decode_names_unknown_fields(session: requests.Session) -> None:
    client = make_client(session, strict_validation=True)

    with pytest.raises(DeserializationError) as excinfo:
        client.decode({"id": 1, "brandNewField": "x"}, Member)

    assert excinfo.value.fields == ["brandNewField"]


def test_strict_decode_checks_nested_models(session: requests.Session) -> None:
    client = make_client(session, strict_validation=True)
    payload = {"id": 1, "latestParty": {"id": 8, "name": "Labour", "partyMotto": "?"}}

    with pytest.raises(DeserializationError) as excinfo:
        client.decode(payload, Member)

    assert excinfo.value.fields == ["latestParty.partyMotto"]


def test_strict_decode_accepts_known_fields(session: requests.Session) -> None:
    client = make_client(session, strict_validation=True)

    member = client.decode({"id": 1, "nameDisplayAs": "Ms Example", "latestParty": {"id": 8, "name": "Labour"}}, Member)

    assert member.latest_party is not None and member.latest_party.name == "Labour"
