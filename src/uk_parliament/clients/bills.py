"""Client for the bills API."""

from __future__ import annotations

from collections.abc import Iterator

from uk_parliament.cancellation import CancellationToken
from uk_parliament.clients.base import BaseApiClient, Endpoint
from uk_parliament.models.base import ListResponse
from uk_parliament.models.bills import Bill, BillType
from uk_parliament.pagination import DEFAULT_PAGE_SIZE, PageResult, paginate


class BillsClient(BaseApiClient):
    api_name = "bills"
    base_url_key = "bills"
    ENDPOINTS = {
        "list": Endpoint(
            "api/v1/Bills",
            {
                "search_term": "searchTerm",
                "session": "session",
                "current_house": "currentHouse",
                "skip": "skip",
                "take": "take",
            },
        ),
        "get": Endpoint("api/v1/Bills/{id}"),
        "bill_types": Endpoint("api/v1/BillTypes"),
    }

    def list(
        self,
        *,
        search_term: str | None = None,
        session: int | None = None,
        current_house: str | None = None,
        skip: int = 0,
        take: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> ListResponse[Bill]:
        query = {
            "search_term": search_term,
            "session": session,
            "current_house": current_house,
            "skip": skip,
            "take": take,
        }
        return self.fetch("list", ListResponse[Bill], query=query, cancel=cancel)

    def get(self, bill_id: int, *, cancel: CancellationToken | None = None) -> Bill:
        return self.fetch("get", Bill, {"id": bill_id}, cancel=cancel)

    def bill_types(self, *, cancel: CancellationToken | None = None) -> ListResponse[BillType]:
        return self.fetch("bill_types", ListResponse[BillType], cancel=cancel)

    def iter_all(
        self,
        *,
        search_term: str | None = None,
        session: int | None = None,
        current_house: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> Iterator[Bill]:
        def fetch_page(offset: int, size: int) -> PageResult[Bill]:
            response = self.list(
                search_term=search_term,
                session=session,
                current_house=current_house,
                skip=offset,
                take=size,
                cancel=cancel,
            )
            return PageResult(response.items, response.total_results)

        return paginate(fetch_page, page_size=page_size, cancel=cancel)

    def list_all(
        self,
        *,
        search_term: str | None = None,
        session: int | None = None,
        current_house: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> list[Bill]:
        return list(
            self.iter_all(
                search_term=search_term,
                session=session,
                current_house=current_house,
                page_size=page_size,
                cancel=cancel,
            )
        )


__all__ = ["BillsClient"]
