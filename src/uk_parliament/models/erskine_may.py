"""Models for the Erskine May procedural reference API."""

from __future__ import annotations

from pydantic import Field

from uk_parliament.models.base import ParliamentModel


class ErskineMaySection(ParliamentModel):
    id: int
    section_number: str | None = None
    chapter_number: int | None = None
    title: str | None = None
    title_chain: str | None = None
    content: str | None = None
    cross_references: str | None = None
    has_subsections: bool = False
    sub_sections: list[ErskineMaySection] = Field(default_factory=list)


class ErskineMayChapter(ParliamentModel):
    part_number: int | None = None
    chapter_number: int = Field(alias="number")
    title: str
    description: str | None = None
    sections: list[ErskineMaySection] = Field(default_factory=list)


class ErskineMayPart(ParliamentModel):
    part_number: int = Field(alias="number")
    title: str
    description: str | None = None
    chapters: list[ErskineMayChapter] = Field(default_factory=list)


class ErskineMaySearchResult(ParliamentModel):
    id: int | None = None
    section_id: int | None = None
    section_number: str | None = None
    title: str | None = None
    section_title: str | None = None
    section_title_chain: str | None = None
    excerpt: str | None = None
    part_title: str | None = None
    part_number: int | None = None
    chapter_title: str | None = None
    chapter_number: int | None = None
    score: float | None = None


__all__ = [
    "ErskineMayChapter",
    "ErskineMayPart",
    "ErskineMaySearchResult",
    "ErskineMaySection",
]
