"""Client for the members API."""

from __future__ import annotations

from collections.abc import Iterator

from uk_parliament.cancellation import CancellationToken
from uk_parliament.clients.base import BaseApiClient, Endpoint
from uk_parliament.models.base import PaginatedResponse, ValueWrapper
from uk_parliament.models.members import Constituency, Member
from uk_parliament.pagination import DEFAULT_PAGE_SIZE, PageFetcher, PageResult, collect_all, paginate


class MembersClient(BaseApiClient):
    """Members of both Houses and Commons constituencies."""

    api_name = "members"
    base_url_key = "members"
    ENDPOINTS = {
        "search": Endpoint(
            "api/Members/Search",
            {"name": "name", "house": "house", "is_current_member": "isCurrentMember", "skip": "skip", "take": "take"},
        ),
        "get": Endpoint("api/Members/{id}"),
        "search_constituencies": Endpoint(
            "api/Location/Constituency/Search",
            {"search_text": "searchText", "skip": "skip", "take": "take"},
        ),
        "get_constituency": Endpoint("api/Location/Constituency/{id}"),
    }

    def search(
        self,
        *,
        name: str | None = None,
        house: int | None = None,
        is_current_member: bool | None = None,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> PaginatedResponse[Member]:
        """Search members by name, house (1 Commons, 2 Lords) and current status."""
        query = {"name": name, "house": house, "is_current_member": is_current_member, "skip": skip, "take": take}
        return self.fetch("search", PaginatedResponse[Member], query=query, cancel=cancel)

    def get(self, member_id: int, *, cancel: CancellationToken | None = None) -> ValueWrapper[Member]:
        return self.fetch("get", ValueWrapper[Member], {"id": member_id}, cancel=cancel)

    def search_constituencies(
        self,
        *,
        search_text: str | None = None,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> PaginatedResponse[Constituency]:
        query = {"search_text": search_text, "skip": skip, "take": take}
        return self.fetch("search_constituencies", PaginatedResponse[Constituency], query=query, cancel=cancel)

    def get_constituency(
        self, constituency_id: int, *, cancel: CancellationToken | None = None
    ) -> ValueWrapper[Constituency]:
        return self.fetch("get_constituency", ValueWrapper[Constituency], {"id": constituency_id}, cancel=cancel)

    def iter_all(
        self,
        *,
        name: str | None = None,
        house: int | None = None,
        is_current_member: bool | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> Iterator[Member]:
        """Iterate over every member matching the filters."""

        def fetch_page(offset: int, size: int) -> PageResult[Member]:
            response = self.search(
                name=name, house=house, is_current_member=is_current_member, skip=offset, take=size, cancel=cancel
            )
            return PageResult(response.item_values(), response.total_results)

        return paginate(fetch_page, page_size=page_size, cancel=cancel)

    def list_all(
        self,
        *,
        name: str | None = None,
        house: int | None = None,
        is_current_member: bool | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> list[Member]:
        iterator = self.iter_all(
            name=name, house=house, is_current_member=is_current_member, page_size=page_size, cancel=cancel
        )
        return list(iterator)

    def iter_all_constituencies(
        self,
        *,
        search_text: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> Iterator[Constituency]:
        return paginate(self._constituency_fetcher(search_text, cancel), page_size=page_size, cancel=cancel)

    def _constituency_fetcher(
        self, search_text: str | None, cancel: CancellationToken | None
    ) -> PageFetcher[Constituency]:
        def fetch_page(offset: int, size: int) -> PageResult[Constituency]:
            response = self.search_constituencies(search_text=search_text, skip=offset, take=size, cancel=cancel)
            return PageResult(response.item_values(), response.total_results)

        return fetch_page

    def list_all_constituencies(
        self,
        *,
        search_text: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> list[Constituency]:
        return collect_all(self._constituency_fetcher(search_text, cancel), page_size=page_size, cancel=cancel)


__all__ = ["MembersClient"]
