"""Models for the bills API."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from uk_parliament.models.base import ParliamentModel


class StageSitting(ParliamentModel):
    id: int
    stage_id: int | None = None
    bill_stage_id: int | None = None
    bill_id: int | None = None
    date: datetime | None = None


class BillStage(ParliamentModel):
    id: int
    stage_id: int | None = None
    session_id: int | None = None
    description: str | None = None
    abbreviation: str | None = None
    house: str | None = None
    stage_sittings: list[StageSitting] = Field(default_factory=list)
    sort_order: int | None = None


class SponsorMember(ParliamentModel):
    member_id: int
    name: str | None = None
    party: str | None = None
    party_colour: str | None = None
    house: str | None = None
    member_photo: str | None = None
    member_page: str | None = None
    member_from: str | None = None


class Sponsor(ParliamentModel):
    member: SponsorMember | None = None
    organisation: str | None = None
    sort_order: int | None = None


class Promoter(ParliamentModel):
    organisation_name: str | None = None
    organisation_url: str | None = None


class Bill(ParliamentModel):
    bill_id: int
    short_title: str
    former_short_title: str | None = None
    long_title: str | None = None
    summary: str | None = None
    current_house: str | None = None
    originating_house: str | None = None
    last_update: datetime | None = None
    bill_withdrawn: datetime | None = None
    is_defeated: bool = False
    bill_type_id: int | None = None
    introduced_session_id: int | None = None
    included_session_ids: list[int] = Field(default_factory=list)
    is_act: bool = False
    current_stage: BillStage | None = None
    sponsors: list[Sponsor] = Field(default_factory=list)
    promoters: list[Promoter] = Field(default_factory=list)
    petitioning_period: str | None = None
    petition_information: str | None = None
    agent: str | None = None


class BillType(ParliamentModel):
    id: int
    category: str | None = None
    name: str
    description: str | None = None


__all__ = [
    "Bill",
    "BillStage",
    "BillType",
    "Promoter",
    "Sponsor",
    "SponsorMember",
    "StageSitting",
]
