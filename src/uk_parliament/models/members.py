"""Models for the members API."""

from __future__ import annotations

from datetime import datetime

from uk_parliament.models.base import ParliamentModel, ValueWrapper


class Party(ParliamentModel):
    id: int
    name: str
    abbreviation: str | None = None
    background_colour: str | None = None
    foreground_colour: str | None = None
    is_lords_main_party: bool | None = None
    is_lords_spiritual_party: bool | None = None
    government_type: int | None = None
    is_independent_party: bool | None = None


class MembershipStatus(ParliamentModel):
    status_id: int | None = None
    status: int | None = None
    status_description: str | None = None
    status_notes: str | None = None
    status_start_date: datetime | None = None
    status_is_active: bool = False


class HouseMembership(ParliamentModel):
    membership_from: str | None = None
    membership_from_id: int | None = None
    membership_start_date: datetime | None = None
    membership_end_date: datetime | None = None
    membership_end_reason: str | None = None
    membership_end_reason_notes: str | None = None
    membership_end_reason_id: int | None = None
    house: int
    membership_status: MembershipStatus | None = None


class Member(ParliamentModel):
    id: int
    name_list_as: str | None = None
    name_display_as: str | None = None
    name_full_title: str | None = None
    name_address_as: str | None = None
    gender: str | None = None
    latest_party: Party | None = None
    latest_house_membership: HouseMembership | None = None
    thumbnail_url: str | None = None


class RepresentationDetails(ParliamentModel):
    membership_from: str | None = None
    membership_from_id: int | None = None
    house: int | None = None
    membership_start_date: datetime | None = None
    membership_end_date: datetime | None = None
    membership_end_reason: str | None = None
    membership_end_reason_notes: str | None = None
    membership_end_reason_id: int | None = None
    membership_status: MembershipStatus | None = None


class CurrentRepresentation(ParliamentModel):
    member: ValueWrapper[Member] | None = None
    representation: RepresentationDetails | None = None


class Constituency(ParliamentModel):
    id: int
    name: str
    start_date: datetime | None = None
    end_date: datetime | None = None
    current_representation: CurrentRepresentation | None = None


__all__ = [
    "Constituency",
    "CurrentRepresentation",
    "HouseMembership",
    "Member",
    "MembershipStatus",
    "Party",
    "RepresentationDetails",
]
