"""Models for the petitions API (petition.parliament.uk)."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import Field

from uk_parliament.models.base import SnakeModel

T = TypeVar("T")

PETITIONS_PATH = "petitions"
ARCHIVED_PETITIONS_PATH = "archived/petitions"


class PetitionState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    REJECTED = "rejected"
    HIDDEN = "hidden"
    STOPPED = "stopped"
    # list filters only
    ALL = "all"
    DEBATED = "debated"
    NOT_DEBATED = "not_debated"
    AWAITING_RESPONSE = "awaiting_response"
    WITH_RESPONSE = "with_response"
    AWAITING_DEBATE = "awaiting_debate"


class Links(SnakeModel):
    self_: str | None = Field(default=None, alias="self")
    first: str | None = None
    last: str | None = None
    next: str | None = None
    prev: str | None = None


class PetitionRejection(SnakeModel):
    code: str | None = None
    details: str | None = None


class PetitionGovernmentResponse(SnakeModel):
    responded_on: datetime | None = None
    summary: str | None = None
    details: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PetitionDebate(SnakeModel):
    debated_on: datetime | None = None
    transcript_url: str | None = None
    video_url: str | None = None
    debate_pack_url: str | None = None
    overview: str | None = None


class Department(SnakeModel):
    acronym: str | None = None
    name: str
    url: str | None = None


class Topic(SnakeModel):
    code: str
    name: str


class CountrySignatures(SnakeModel):
    name: str
    code: str | None = None
    signature_count: int = 0


class ConstituencySignatures(SnakeModel):
    name: str
    ons_code: str | None = None
    mp: str | None = None
    signature_count: int = 0


class RegionSignatures(SnakeModel):
    name: str
    ons_code: str | None = None
    signature_count: int = 0


class PetitionAttributes(SnakeModel):
    action: str
    background: str | None = None
    additional_details: str | None = None
    committee_note: str | None = None
    state: PetitionState
    signature_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    opened_at: datetime | None = None
    closed_at: datetime | None = None
    government_response_at: datetime | None = None
    response_threshold_reached_at: datetime | None = None
    scheduled_debate_date: datetime | None = None
    debate_threshold_reached_at: datetime | None = None
    rejected_at: datetime | None = None
    debate_outcome_at: datetime | None = None
    moderation_threshold_reached_at: datetime | None = None
    creator_name: str | None = None
    rejection: PetitionRejection | None = None
    government_response: PetitionGovernmentResponse | None = None
    debate: PetitionDebate | None = None
    departments: list[Department] = Field(default_factory=list)
    topics: list[Topic] = Field(default_factory=list)
    signatures_by_country: list[CountrySignatures] = Field(default_factory=list)
    signatures_by_constituency: list[ConstituencySignatures] = Field(default_factory=list)
    signatures_by_region: list[RegionSignatures] = Field(default_factory=list)
    other_parliamentary_business: list[Any] = Field(default_factory=list)


class Petition(SnakeModel):
    id: int
    type: str = "petition"
    attributes: PetitionAttributes
    links: Links | None = None

    @property
    def endpoint(self) -> str:
        return petition_endpoint(self.id)


class PetitionsResponse(SnakeModel, Generic[T]):
    """JSON:API style ``{"links": ..., "data": ...}`` envelope."""

    links: Links | None = None
    data: T


def petition_endpoint(petition_id: int | str | None = None, *, archived: bool = False) -> str:
    """Return the relative JSON path of a petition, or of the listing when no id is given.

    A string id such as ``"{id}"`` yields a path template.

    >>> petition_endpoint(700001)
    'petitions/700001.json'
    >>> petition_endpoint(archived=True)
    'archived/petitions.json'
    >>> petition_endpoint("{id}", archived=True)
    'archived/petitions/{id}.json'
    """
    base = ARCHIVED_PETITIONS_PATH if archived else PETITIONS_PATH
    if not petition_id:
        return f"{base}.json"
    return f"{base}/{petition_id}.json"


__all__ = [
    "ConstituencySignatures",
    "CountrySignatures",
    "Department",
    "Links",
    "Petition",
    "PetitionAttributes",
    "PetitionDebate",
    "PetitionGovernmentResponse",
    "PetitionRejection",
    "PetitionState",
    "PetitionsResponse",
    "RegionSignatures",
    "Topic",
    "petition_endpoint",
]
