"""Models for the committees API."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from uk_parliament.models.base import ParliamentModel


class LeadHouse(ParliamentModel):
    is_commons: bool = False
    is_lords: bool = False


class CommitteeCategory(ParliamentModel):
    id: int
    name: str


class CommitteeType(ParliamentModel):
    id: int
    name: str
    committee_category: CommitteeCategory | None = None


class ScrutinisingDepartment(ParliamentModel):
    department_id: int
    name: str


class NameHistory(ParliamentModel):
    id: int
    committee_id: int | None = None
    name: str
    start_date: datetime | None = None
    end_date: datetime | None = None


class CommitteeContact(ParliamentModel):
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    contact_disclaimer: str | None = None


class Committee(ParliamentModel):
    id: int
    name: str
    parent_committee: Committee | None = None
    sub_committees: list[Committee] = Field(default_factory=list)
    house: str | None = None
    lead_house: LeadHouse | None = None
    category: CommitteeCategory | None = None
    committee_types: list[CommitteeType] = Field(default_factory=list)
    show_on_website: bool = False
    website_legacy_url: str | None = None
    website_legacy_redirect_enabled: bool = False
    start_date: datetime | None = None
    end_date: datetime | None = None
    date_commons_appointed: datetime | None = None
    date_lords_appointed: datetime | None = None
    scrutinising_departments: list[ScrutinisingDepartment] = Field(default_factory=list)
    is_lead_committee: bool | None = None
    name_history: list[NameHistory] = Field(default_factory=list)
    contact: CommitteeContact | None = None


__all__ = [
    "Committee",
    "CommitteeCategory",
    "CommitteeContact",
    "CommitteeType",
    "LeadHouse",
    "NameHistory",
    "ScrutinisingDepartment",
]
