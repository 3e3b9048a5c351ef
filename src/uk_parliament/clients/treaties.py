"""Client for the treaties API."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

from uk_parliament.cancellation import CancellationToken
from uk_parliament.clients.base import BaseApiClient, Endpoint
from uk_parliament.models.base import PaginatedResponse
from uk_parliament.models.treaties import GovernmentOrganisation, Treaty, TreatyBusinessItem
from uk_parliament.pagination import DEFAULT_PAGE_SIZE, PageResult, paginate


class TreatiesClient(BaseApiClient):
    api_name = "treaties"
    base_url_key = "treaties"
    ENDPOINTS = {
        "list": Endpoint(
            "api/Treaty",
            {
                "government_organisation_id": "governmentOrganisationId",
                "house": "house",
                "status": "status",
                "date_laid_from": "dateLaidFrom",
                "date_laid_to": "dateLaidTo",
                "skip": "skip",
                "take": "take",
            },
        ),
        "get": Endpoint("api/Treaty/{id}"),
        "business_items": Endpoint("api/Treaty/{id}/BusinessItem"),
        "government_organisations": Endpoint("api/GovernmentOrganisation"),
    }

    def list(
        self,
        *,
        government_organisation_id: int | None = None,
        house: str | None = None,
        status: str | None = None,
        date_laid_from: date | None = None,
        date_laid_to: date | None = None,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> PaginatedResponse[Treaty]:
        query = {
            "government_organisation_id": government_organisation_id,
            "house": house,
            "status": status,
            "date_laid_from": date_laid_from,
            "date_laid_to": date_laid_to,
            "skip": skip,
            "take": take,
        }
        return self.fetch("list", PaginatedResponse[Treaty], query=query, cancel=cancel)

    def get(self, treaty_id: int | str, *, cancel: CancellationToken | None = None) -> Treaty:
        return self.fetch("get", Treaty, {"id": treaty_id}, cancel=cancel)

    def business_items(
        self, treaty_id: int | str, *, cancel: CancellationToken | None = None
    ) -> list[TreatyBusinessItem]:
        return self.fetch("business_items", list[TreatyBusinessItem], {"id": treaty_id}, cancel=cancel)

    def government_organisations(self, *, cancel: CancellationToken | None = None) -> list[GovernmentOrganisation]:
        return self.fetch("government_organisations", list[GovernmentOrganisation], cancel=cancel)

    def iter_all(
        self,
        *,
        government_organisation_id: int | None = None,
        house: str | None = None,
        status: str | None = None,
        date_laid_from: date | None = None,
        date_laid_to: date | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> Iterator[Treaty]:
        def fetch_page(offset: int, size: int) -> PageResult[Treaty]:
            response = self.list(
                government_organisation_id=government_organisation_id,
                house=house,
                status=status,
                date_laid_from=date_laid_from,
                date_laid_to=date_laid_to,
                skip=offset,
                take=size,
                cancel=cancel,
            )
            return PageResult(response.item_values(), response.total_results)

        return paginate(fetch_page, page_size=page_size, cancel=cancel)

    def list_all(
        self,
        *,
        government_organisation_id: int | None = None,
        house: str | None = None,
        status: str | None = None,
        date_laid_from: date | None = None,
        date_laid_to: date | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> list[Treaty]:
        treaties = self.iter_all(
            government_organisation_id=government_organisation_id,
            house=house,
            status=status,
            date_laid_from=date_laid_from,
            date_laid_to=date_laid_to,
            page_size=page_size,
            cancel=cancel,
        )
        return list(treaties)


__all__ = ["TreatiesClient"]
