"""Client for the committees API."""

from __future__ import annotations

from collections.abc import Iterator

from uk_parliament.cancellation import CancellationToken
from uk_parliament.clients.base import BaseApiClient, Endpoint
from uk_parliament.models.base import ListResponse
from uk_parliament.models.committees import Committee
from uk_parliament.pagination import DEFAULT_PAGE_SIZE, PageResult, collect_all, paginate


class CommitteesClient(BaseApiClient):
    api_name = "committees"
    base_url_key = "committees"
    ENDPOINTS = {
        "list": Endpoint("api/Committees", {"skip": "skip", "take": "take"}),
        "get": Endpoint("api/Committees/{id}"),
    }

    def list(
        self,
        *,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> ListResponse[Committee]:
        return self.fetch("list", ListResponse[Committee], query={"skip": skip, "take": take}, cancel=cancel)

    def get(self, committee_id: int, *, cancel: CancellationToken | None = None) -> Committee:
        return self.fetch("get", Committee, {"id": committee_id}, cancel=cancel)

    def _fetch_page(self, offset: int, size: int, cancel: CancellationToken | None) -> PageResult[Committee]:
        response = self.list(skip=offset, take=size, cancel=cancel)
        return PageResult(response.items, response.total_results)

    def iter_all(
        self, *, page_size: int = DEFAULT_PAGE_SIZE, cancel: CancellationToken | None = None
    ) -> Iterator[Committee]:
        return paginate(lambda offset, size: self._fetch_page(offset, size, cancel), page_size=page_size, cancel=cancel)

    def list_all(self, *, page_size: int = DEFAULT_PAGE_SIZE, cancel: CancellationToken | None = None) -> list[Committee]:
        return collect_all(
            lambda offset, size: self._fetch_page(offset, size, cancel), page_size=page_size, cancel=cancel
        )


__all__ = ["CommitteesClient"]
