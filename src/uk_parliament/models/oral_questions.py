"""Models for the oral questions and early day motions API."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import Field

from uk_parliament.models.base import AnyText, ParliamentModel, PascalModel

T = TypeVar("T")


class OralQuestionMember(PascalModel):
    mnis_id: int
    pims_id: int | None = None
    name: str | None = None
    list_as: str | None = None
    constituency: str | None = None
    status: str | None = None
    party: str | None = None
    party_id: int | None = None
    party_colour: str | None = None
    photo_url: str | None = None


class OralQuestion(PascalModel):
    id: int
    uin: int | None = Field(default=None, alias="UIN")
    question_type: int | None = None
    question_text: str | None = None
    status: int | None = None
    number: int | None = None
    tabled_when: datetime | None = None
    removed_from_to_be_asked_when: datetime | None = None
    declarable_interest_detail: str | None = None
    hansard_link: str | None = None
    answering_when: datetime | None = None
    answering_body_id: int | None = None
    answering_body: str | None = None
    answering_minister_title: str | None = None
    asking_member: OralQuestionMember | None = None
    answering_minister: OralQuestionMember | None = None
    asking_member_id: int | None = None
    answering_minister_id: int | None = None


class Motion(ParliamentModel):
    id: int
    reference: AnyText = None
    proposing_member_id: int | None = None
    proposing_member: AnyText = None
    house: AnyText = None
    date_tabled: datetime | None = None
    title: AnyText = None
    motion_text: AnyText = None
    motion_type: AnyText = None
    signature_count: int = 0
    is_active: bool = False
    is_withdrawn: bool = False
    status: AnyText = Field(default=None, alias="Status")
    document_url: AnyText = None


class OralQuestionsPagingInfo(PascalModel):
    skip: int | None = None
    take: int | None = None
    total: int | None = None
    global_total: int | None = None
    status_counts: list[Any] = Field(default_factory=list)
    global_status_counts: list[Any] = Field(default_factory=list)


class OralQuestionsResponse(PascalModel, Generic[T]):
    paging_info: OralQuestionsPagingInfo | None = None
    status_code: int | None = None
    success: bool = True
    errors: list[str] = Field(default_factory=list)
    response: list[T] = Field(default_factory=list)

    @property
    def total(self) -> int | None:
        return self.paging_info.total if self.paging_info else None


__all__ = [
    "Motion",
    "OralQuestion",
    "OralQuestionMember",
    "OralQuestionsPagingInfo",
    "OralQuestionsResponse",
]
