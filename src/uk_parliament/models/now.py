"""Models for the annunciator ("Now") API."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from uk_parliament.models.base import ParliamentModel


class ChamberStatus(ParliamentModel):
    house: str
    is_sitting: bool = False
    session_date: datetime | None = None
    start_time: datetime | None = None
    expected_end_time: datetime | None = None
    current_business: str | None = None
    next_business: str | None = None
    is_in_recess: bool = False
    live_stream_url: str | None = None


class BusinessItem(ParliamentModel):
    id: int
    house: str | None = None
    scheduled_time: datetime | None = None
    description: str | None = None
    business_type: str | None = None
    lead_member: str | None = None
    order_number: int | None = None
    is_active: bool = False


class SlideLineMember(ParliamentModel):
    id: int
    name_display_as: str | None = None
    name_list_as: str | None = None
    name_full_title: str | None = None
    name_address_as: str | None = None
    thumbnail_url: str | None = None


class SlideLine(ParliamentModel):
    display_order: int | None = None
    content_type: str | None = None
    content_url: str | None = None
    content_additional_json: str | None = None
    style: str | None = None
    horizontal_alignment: str | None = None
    vertical_alignment: str | None = None
    content: str | None = None
    member: SlideLineMember | None = None
    force_capitalisation: bool = False


class AnnunciatorSlide(ParliamentModel):
    id: int
    lines: list[SlideLine] = Field(default_factory=list)
    type: str | None = None
    carousel_order: int | None = None
    carousel_display_seconds: int | None = None
    speaker_time: datetime | None = None
    slide_time: datetime | None = None
    sound_to_play: str | None = None


class ScrollingMessage(ParliamentModel):
    id: int
    vertical_alignment: str | None = None
    content: str | None = None
    display_from: datetime | None = None
    display_to: datetime | None = None
    alert_type: str | None = None


class AnnunciatorMessage(ParliamentModel):
    id: int
    annunciator_disabled: bool = False
    slides: list[AnnunciatorSlide] = Field(default_factory=list)
    scrolling_messages: list[ScrollingMessage] = Field(default_factory=list)
    annunciator_type: str | None = None
    publish_time: datetime | None = None
    is_security_override: bool = False
    show_commons_bell: bool = False
    show_lords_bell: bool = False


__all__ = [
    "AnnunciatorMessage",
    "AnnunciatorSlide",
    "BusinessItem",
    "ChamberStatus",
    "ScrollingMessage",
    "SlideLine",
    "SlideLineMember",
]
