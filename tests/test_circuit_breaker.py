"""Tests for the per-API circuit breaker."""

from __future__ import annotations

import pytest
import requests
import responses

from uk_parliament import CircuitBreakerSettings, CircuitOpenError, ParliamentClient, ServerError
from uk_parliament.clients.circuit_breaker import CircuitBreaker, CircuitState, is_breaker_failure
from uk_parliament.exceptions import HttpStatusError, RequestTimeoutError, ResourceNotFoundError

from .conftest import make_options


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def failing() -> None:
    raise ServerError("HTTP 503", status_code=503)


def make_breaker(clock: FakeClock, **settings: float) -> CircuitBreaker:
    values = {"failure_threshold": 2, "recovery_timeout": 30.0, "success_threshold": 1}
    values.update(settings)
    return CircuitBreaker("members", CircuitBreakerSettings(**values), clock=clock)


@pytest.mark.parametrize(
    ("error", "counted"),
    [
        (ServerError("x", status_code=500), True),
        (RequestTimeoutError("x"), True),
        (requests.ConnectionError("x"), True),
        (ResourceNotFoundError("x", status_code=404), False),
        (HttpStatusError("x", status_code=400), False),
        (ValueError("x"), False),
    ],
)
def test_is_breaker_failure(error: Exception, counted: bool) -> None:
    assert is_breaker_failure(error) is counted


def test_opens_after_threshold_and_rejects_calls() -> None:
    clock = FakeClock()
    breaker = make_breaker(clock)

    for _ in range(2):
        with pytest.raises(ServerError):
            breaker.call(failing)

    assert breaker.state is CircuitState.OPEN
    clock.advance(10)
    with pytest.raises(CircuitOpenError) as excinfo:
        breaker.call(lambda: "unreachable")
    assert excinfo.value.retry_in == pytest.approx(20.0)


def test_client_errors_do_not_open_the_circuit() -> None:
    breaker = make_breaker(FakeClock(), failure_threshold=1)

    def not_found() -> None:
        raise ResourceNotFoundError("missing", status_code=404)

    with pytest.raises(ResourceNotFoundError):
        breaker.call(not_found)

    assert breaker.state is CircuitState.CLOSED


def test_half_open_trial_call_closes_on_success() -> None:
    clock = FakeClock()
    breaker = make_breaker(clock, failure_threshold=1)
    with pytest.raises(ServerError):
        breaker.call(failing)

    clock.advance(31)

    assert breaker.call(lambda: "ok") == "ok"
    assert breaker.state is CircuitState.CLOSED
    assert breaker.get_metrics()["is_healthy"] is True


def test_half_open_trial_failure_reopens() -> None:
    clock = FakeClock()
    breaker = make_breaker(clock, failure_threshold=1)
    with pytest.raises(ServerError):
        breaker.call(failing)
    clock.advance(31)

    with pytest.raises(ServerError):
        breaker.call(failing)

    assert breaker.state is CircuitState.OPEN
    with pytest.raises(CircuitOpenError):
        breaker.call(lambda: "ok")


def test_reset_closes_circuit() -> None:
    breaker = make_breaker(FakeClock(), failure_threshold=1)
    with pytest.raises(ServerError):
        breaker.call(failing)

    breaker.reset()

    assert breaker.get_metrics() == {
        "api": "members",
        "state": "closed",
        "failure_count": 0,
        "success_count": 0,
        "is_healthy": True,
    }


@responses.activate
def test_clients_share_settings_but_not_state() -> None:
    options = make_options(circuit_breaker=CircuitBreakerSettings(failure_threshold=1))
    responses.add(responses.GET, "https://now-api.parliament.uk/api/Now/Commons", status=502)
    responses.add(responses.GET, "https://now-api.parliament.uk/api/Now/Lords", status=502)
    responses.add(responses.GET, "https://bills-api.parliament.uk/api/v1/Bills/1", json={"billId": 1, "shortTitle": "A"})

    with ParliamentClient(options) as client:
        with pytest.raises(ServerError):
            client.now.commons_status()
        with pytest.raises(CircuitOpenError):
            client.now.lords_status()
        assert client.bills.get(1).bill_id == 1

    assert len(responses.calls) == 2
