"""Reusable filter sets for the paged question and motion listings."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, TypeVar

from uk_parliament.pagination import DEFAULT_PAGE_SIZE

Q = TypeVar("Q", bound="_QueryOptions")


@dataclass(frozen=True)
class _QueryOptions:
    page_size: int = DEFAULT_PAGE_SIZE

    def filters(self) -> dict[str, Any]:
        """Return the filter values keyed by argument name, without ``page_size``."""
        values = asdict(self)
        values.pop("page_size")
        return values

    @classmethod
    def resolve(cls: type[Q], query: Q | None, **filters: Any) -> Q:
        """Return ``query``, or build one from keyword ``filters``.

        Supplying both is ambiguous and raises ``ValueError``.
        """
        supplied = {name: value for name, value in filters.items() if value is not None}
        if query is None:
            return cls(**supplied)
        if supplied:
            names = ", ".join(sorted(supplied))
            raise ValueError(f"Pass either a {cls.__name__} or keyword filters, not both (got {names})")
        return query


@dataclass(frozen=True)
class WrittenQuestionsQuery(_QueryOptions):
    asking_member_id: int | None = None
    answering_member_id: int | None = None
    answering_department: str | None = None
    house: str | None = None
    tabled_when_from: date | None = None
    tabled_when_to: date | None = None
    answered_when_from: date | None = None
    answered_when_to: date | None = None
    is_answered: bool | None = None


@dataclass(frozen=True)
class OralQuestionsQuery(_QueryOptions):
    asking_member_id: int | None = None
    answering_department: str | None = None
    house: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    is_answered: bool | None = None


@dataclass(frozen=True)
class MotionsQuery(_QueryOptions):
    proposing_member_id: int | None = None
    house: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    motion_type: str | None = None
    is_active: bool | None = None


__all__ = ["MotionsQuery", "OralQuestionsQuery", "WrittenQuestionsQuery"]
