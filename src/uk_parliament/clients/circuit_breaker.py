"""Circuit breaker guarding calls to a single Parliament API."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

import requests

from uk_parliament.config import CircuitBreakerSettings
from uk_parliament.exceptions import CircuitOpenError, HttpStatusError, RequestTimeoutError
from uk_parliament.logging_setup import get_logger

R = TypeVar("R")


class CircuitState(Enum):
    """Circuit breaker states."""

    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


def is_breaker_failure(exc: BaseException) -> bool:
    """Return True for errors that indicate an unhealthy upstream.

    Client errors (4xx) describe a bad request, not a failing service, and do
    not count.
    """
    if isinstance(exc, HttpStatusError):
        return exc.is_server_error
    return isinstance(exc, (RequestTimeoutError, requests.ConnectionError))


class CircuitBreaker:
    """Thread-safe CLOSED/OPEN/HALF_OPEN breaker for one API."""

    def __init__(
        self,
        api_name: str,
        settings: CircuitBreakerSettings | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.api_name = api_name
        self.settings = settings or CircuitBreakerSettings()
        self.logger = get_logger(self.__class__.__name__, api=api_name)
        self._clock = clock

        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._success_count = 0
        self._opened_at: float | None = None
        self._lock = threading.Lock()

    @property
    def state(self) -> CircuitState:
        return self._state

    def call(self, func: Callable[..., R], *args: Any, **kwargs: Any) -> R:
        """Execute ``func`` unless the circuit is open."""
        with self._lock:
            if self._state == CircuitState.OPEN:
                remaining = self._remaining_open_time()
                if remaining > 0:
                    raise CircuitOpenError(
                        f"Circuit for {self.api_name} is open; retry in {remaining:.1f}s",
                        api_name=self.api_name,
                        retry_in=remaining,
                    )
                self._state = CircuitState.HALF_OPEN
                self._success_count = 0
                self.logger.info("circuit_half_open")

        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            if is_breaker_failure(exc):
                self._on_failure()
            raise
        self._on_success()
        return result

    def _remaining_open_time(self) -> float:
        if self._opened_at is None:
            return 0.0
        return self.settings.recovery_timeout - (self._clock() - self._opened_at)

    def _on_success(self) -> None:
        with self._lock:
            if self._state == CircuitState.HALF_OPEN:
                self._success_count += 1
                if self._success_count >= self.settings.success_threshold:
                    self._state = CircuitState.CLOSED
                    self._failure_count = 0
                    self._opened_at = None
                    self.logger.info("circuit_closed")
            elif self._state == CircuitState.CLOSED:
                self._failure_count = 0

    def _on_failure(self) -> None:
        with self._lock:
            self._failure_count += 1
            if self._state == CircuitState.HALF_OPEN:
                self._open()
                self.logger.warning("circuit_reopened")
            elif self._state == CircuitState.CLOSED and self._failure_count >= self.settings.failure_threshold:
                self._open()
                self.logger.warning("circuit_opened", failures=self._failure_count)

    def _open(self) -> None:
        self._state = CircuitState.OPEN
        self._opened_at = self._clock()
        self._success_count = 0

    def reset(self) -> None:
        """Manually reset the circuit breaker."""
        with self._lock:
            self._state = CircuitState.CLOSED
            self._failure_count = 0
            self._success_count = 0
            self._opened_at = None

    def get_metrics(self) -> dict[str, Any]:
        with self._lock:
            return {
                "api": self.api_name,
                "state": self._state.value,
                "failure_count": self._failure_count,
                "success_count": self._success_count,
                "is_healthy": self._state == CircuitState.CLOSED,
            }


__all__ = ["CircuitBreaker", "CircuitState", "is_breaker_failure"]
