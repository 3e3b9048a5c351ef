"""Shared pytest fixtures for the UK Parliament client tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
import requests

from uk_parliament import ParliamentClient, ParliamentClientOptions


def make_options(**kwargs: Any) -> ParliamentClientOptions:
    """Options with retries disabled so mocked error statuses surface at once."""
    data: dict[str, Any] = {"retries": None, "timeout": 5.0}
    data.update(kwargs)
    return ParliamentClientOptions(**data)


@pytest.fixture()
def options() -> ParliamentClientOptions:
    return make_options()


@pytest.fixture()
def strict_options() -> ParliamentClientOptions:
    return make_options(strict_validation=True)


@pytest.fixture()
def session() -> Iterator[requests.Session]:
    session = requests.Session()
    yield session
    session.close()


@pytest.fixture()
def client(options: ParliamentClientOptions) -> Iterator[ParliamentClient]:
    with ParliamentClient(options) as client:
        yield client
