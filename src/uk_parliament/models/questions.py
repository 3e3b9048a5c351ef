"""Models for the written questions and statements API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from uk_parliament.models.base import AnyText, ParliamentModel, TextList


class WrittenQuestion(ParliamentModel):
    id: int
    uin: AnyText = None
    asking_member_id: int | None = None
    asking_member: Any = None
    house: str | None = None
    answering_member_id: int | None = None
    answering_member: Any = None
    answering_department: str | None = None
    answering_body_id: int | None = None
    answering_body_name: str | None = None
    date_tabled: datetime | None = None
    date_for_answer: datetime | None = None
    date_answered: datetime | None = None
    date_answer_corrected: datetime | None = None
    date_holding_answer: datetime | None = None
    question_text: str | None = None
    answer_text: str | None = None
    original_answer_text: str | None = None
    comparable_answer_text: str | None = None
    is_answered: bool = False
    answer_is_holding: bool | None = None
    answer_is_correction: bool | None = None
    correcting_member_id: int | None = None
    correcting_member: Any = None
    is_named_day: bool = False
    is_withdrawn: bool = False
    member_has_interest: bool = False
    heading: str | None = None
    document_url: str | None = None
    grouped_questions: TextList = None
    grouped_questions_dates: TextList = None
    attachment_count: int = 0
    attachments: list[Any] = Field(default_factory=list)


class WrittenStatement(ParliamentModel):
    id: int
    uin: AnyText = None
    notice_number: AnyText = None
    making_member_id: int | None = None
    member_id: int | None = None
    member: Any = None
    member_role: str | None = None
    making_member: Any = None
    house: str | None = None
    answering_body_id: int | None = None
    answering_body_name: str | None = None
    answering_body: str | None = None
    date_made: datetime | None = None
    title: str | None = None
    statement_text: str | None = None
    text: str | None = None
    document_url: str | None = None
    is_correction: bool = False
    is_withdrawn: bool = False
    has_attachments: bool = False
    has_linked_statements: bool = False
    linked_statements: list[Any] = Field(default_factory=list)
    attachments: list[Any] = Field(default_factory=list)


class DailyReport(ParliamentModel):
    id: int | None = None
    date: datetime | None = None
    house: str | None = None
    title: str | None = None
    question_count: int | None = None
    statement_count: int | None = None
    document_url: str | None = None
    html_url: str | None = None
    url: str | None = None
    is_published: bool = False
    file_size_bytes: int | None = None


__all__ = ["DailyReport", "WrittenQuestion", "WrittenStatement"]
