"""Cooperative cancellation for blocking API calls."""

from __future__ import annotations

import threading

from uk_parliament.exceptions import OperationCancelledError


class CancellationToken:
    """Thread-safe flag checked by clients before each request.

    A token can be shared between the thread consuming results and any other
    thread that decides the work is no longer wanted. Once cancelled it stays
    cancelled.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation of every operation observing this token."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, operation: str | None = None) -> None:
        if self._event.is_set():
            raise OperationCancelledError(operation=operation)

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"


def check_cancelled(token: CancellationToken | None, operation: str | None = None) -> None:
    """Raise :class:`OperationCancelledError` if ``token`` is cancelled."""
    if token is not None:
        token.raise_if_cancelled(operation)


__all__ = ["CancellationToken", "check_cancelled"]
