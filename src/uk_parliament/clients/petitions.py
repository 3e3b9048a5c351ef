"""Client for the petitions API."""

from __future__ import annotations

from collections.abc import Iterator

from uk_parliament.cancellation import CancellationToken
from uk_parliament.clients.base import BaseApiClient, Endpoint
from uk_parliament.models.petitions import Petition, PetitionsResponse, PetitionState, petition_endpoint
from uk_parliament.pagination import PageFetcher, PageResult, collect_all, page_number, paginate

DEFAULT_PETITIONS_PAGE_SIZE = 50

_LIST_PARAMS = {"search": "search", "state": "state", "page": "page", "page_size": "pageSize"}


class PetitionsClient(BaseApiClient):
    """Open and archived petitions.

    The API pages with ``page``/``pageSize`` and reports no total, so
    iteration stops on the first short page.
    """

    api_name = "petitions"
    base_url_key = "petitions"
    ENDPOINTS = {
        "list": Endpoint(petition_endpoint(), _LIST_PARAMS),
        "get": Endpoint(petition_endpoint("{id}")),
        "list_archived": Endpoint(petition_endpoint(archived=True), _LIST_PARAMS),
        "get_archived": Endpoint(petition_endpoint("{id}", archived=True)),
    }

    def list(
        self,
        *,
        search: str | None = None,
        state: PetitionState | str | None = None,
        page: int | None = None,
        page_size: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> PetitionsResponse[list[Petition]]:
        query = {"search": search, "state": state, "page": page, "page_size": page_size}
        return self.fetch("list", PetitionsResponse[list[Petition]], query=query, cancel=cancel)

    def get(self, petition_id: int, *, cancel: CancellationToken | None = None) -> PetitionsResponse[Petition]:
        return self.fetch("get", PetitionsResponse[Petition], {"id": petition_id}, cancel=cancel)

    def list_archived(
        self,
        *,
        search: str | None = None,
        state: PetitionState | str | None = None,
        page: int | None = None,
        page_size: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> PetitionsResponse[list[Petition]]:
        query = {"search": search, "state": state, "page": page, "page_size": page_size}
        return self.fetch("list_archived", PetitionsResponse[list[Petition]], query=query, cancel=cancel)

    def get_archived(self, petition_id: int, *, cancel: CancellationToken | None = None) -> PetitionsResponse[Petition]:
        return self.fetch("get_archived", PetitionsResponse[Petition], {"id": petition_id}, cancel=cancel)

    def _page_fetcher(
        self,
        operation: str,
        search: str | None,
        state: PetitionState | str | None,
        cancel: CancellationToken | None,
    ) -> PageFetcher[Petition]:
        lister = self.list_archived if operation == "list_archived" else self.list

        def fetch_page(offset: int, size: int) -> PageResult[Petition]:
            response = lister(search=search, state=state, page=page_number(offset, size), page_size=size, cancel=cancel)
            return PageResult(response.data)

        return fetch_page

    def iter_all(
        self,
        *,
        search: str | None = None,
        state: PetitionState | str | None = None,
        page_size: int = DEFAULT_PETITIONS_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> Iterator[Petition]:
        """Iterate over every petition matching the filters."""
        fetch_page = self._page_fetcher("list", search, state, cancel)
        return paginate(fetch_page, page_size=page_size, cancel=cancel)

    def list_all(
        self,
        *,
        search: str | None = None,
        state: PetitionState | str | None = None,
        page_size: int = DEFAULT_PETITIONS_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> list[Petition]:
        fetch_page = self._page_fetcher("list", search, state, cancel)
        return collect_all(fetch_page, page_size=page_size, cancel=cancel)

    def iter_all_archived(
        self,
        *,
        search: str | None = None,
        state: PetitionState | str | None = None,
        page_size: int = DEFAULT_PETITIONS_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> Iterator[Petition]:
        fetch_page = self._page_fetcher("list_archived", search, state, cancel)
        return paginate(fetch_page, page_size=page_size, cancel=cancel)

    def list_all_archived(
        self,
        *,
        search: str | None = None,
        state: PetitionState | str | None = None,
        page_size: int = DEFAULT_PETITIONS_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> list[Petition]:
        fetch_page = self._page_fetcher("list_archived", search, state, cancel)
        return collect_all(fetch_page, page_size=page_size, cancel=cancel)


__all__ = ["DEFAULT_PETITIONS_PAGE_SIZE", "PetitionsClient"]
