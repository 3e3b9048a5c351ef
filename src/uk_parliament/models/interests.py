"""Models for the register of members' financial interests API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from uk_parliament.models.base import AnyText, ParliamentModel


class InterestLink(ParliamentModel):
    rel: str | None = None
    href: str | None = None
    method: str | None = None


class InterestCategoryInfo(ParliamentModel):
    id: int
    number: AnyText = None
    name: str
    parent_category_ids: list[int] = Field(default_factory=list)
    type: str | None = None
    links: list[InterestLink] = Field(default_factory=list)


class InterestMemberInfo(ParliamentModel):
    id: int
    name_display_as: str | None = None
    name_list_as: str | None = None
    house: str | None = None
    member_from: str | None = None
    party: str | None = None
    links: list[InterestLink] = Field(default_factory=list)


class InterestField(ParliamentModel):
    name: str | None = None
    description: str | None = None
    type: str | None = None
    value: AnyText = None


class Interest(ParliamentModel):
    id: int
    summary: str | None = None
    parent_interest_id: int | None = None
    registration_date: datetime | None = None
    published_date: datetime | None = None
    updated_dates: Any = None
    category: InterestCategoryInfo | None = None
    member: InterestMemberInfo | None = None
    fields: list[InterestField] = Field(default_factory=list)
    links: list[InterestLink] = Field(default_factory=list)
    rectified: bool = False
    rectified_details: str | None = None


class InterestCategory(ParliamentModel):
    id: int
    name: str
    number: AnyText = None
    description: str | None = None
    parent_category_ids: list[int] = Field(default_factory=list)
    type: str | None = None
    links: list[Any] = Field(default_factory=list)
    sort_order: int | None = None


class InterestRegister(ParliamentModel):
    id: int
    name: str | None = None
    publication_date: datetime | None = None
    document_url: str | None = None
    categories: list[InterestCategory] = Field(default_factory=list)


__all__ = [
    "Interest",
    "InterestCategory",
    "InterestCategoryInfo",
    "InterestField",
    "InterestLink",
    "InterestMemberInfo",
    "InterestRegister",
]
