"""Models for the treaties API.

The upstream service is loose about JSON types, so most text fields accept
numbers, booleans and nested values (see :data:`~uk_parliament.models.base.AnyText`).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from uk_parliament.models.base import AnyText, ParliamentModel


class Treaty(ParliamentModel):
    id: AnyText = ""
    name: AnyText = None
    command_paper_number: AnyText = None
    command_paper_prefix: AnyText = None
    title: AnyText = None
    treaty_series: AnyText = None
    treaty_series_membership: Any = None
    lead_government_organisation_id: int | None = None
    lead_government_organisation: AnyText = None
    lead_department: AnyText = None
    commons_laying_date: datetime | None = None
    lords_laying_date: datetime | None = None
    date_laid: datetime | None = None
    date_into_force: datetime | None = None
    date_signed: datetime | None = None
    house: AnyText = None
    status: AnyText = None
    web_link: AnyText = None
    is_multilateral: bool = False
    countries: AnyText = None
    subject: AnyText = None
    uri: AnyText = None

    @property
    def effective_status(self) -> str | None:
        """Reported status, ``"Unknown"`` for bilateral treaties without one."""
        if self.status is not None:
            return self.status
        return None if self.is_multilateral else "Unknown"


class TreatyBusinessItem(ParliamentModel):
    id: int
    treaty_id: AnyText = None
    business_item_type: str | None = None
    date: datetime | None = None
    house: str | None = None
    description: str | None = None
    link: str | None = None


class GovernmentOrganisation(ParliamentModel):
    id: int
    name: AnyText = None
    abbreviation: AnyText = None
    is_active: bool = False


__all__ = ["GovernmentOrganisation", "Treaty", "TreatyBusinessItem"]
