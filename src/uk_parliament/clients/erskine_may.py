"""Client for the Erskine May procedural reference API.

Parts and chapters come back whole; only sections and search results page.
"""

from __future__ import annotations

from collections.abc import Iterator

from uk_parliament.cancellation import CancellationToken
from uk_parliament.clients.base import BaseApiClient, Endpoint
from uk_parliament.models.base import PaginatedResponse
from uk_parliament.models.erskine_may import ErskineMayChapter, ErskineMayPart, ErskineMaySearchResult, ErskineMaySection
from uk_parliament.pagination import DEFAULT_PAGE_SIZE, PageResult, paginate

_PAGE_PARAMS = {"skip": "skip", "take": "take"}


class ErskineMayClient(BaseApiClient):
    api_name = "erskine_may"
    base_url_key = "erskine_may"
    ENDPOINTS = {
        "parts": Endpoint("api/Parts"),
        "chapters": Endpoint("api/Parts/{part}/Chapters"),
        "sections": Endpoint("api/Chapters/{chapter}/Sections", _PAGE_PARAMS),
        "get_section": Endpoint("api/Sections/{id}"),
        "search": Endpoint("api/Search", {"search_term": "searchTerm", **_PAGE_PARAMS}),
    }

    def parts(self, *, cancel: CancellationToken | None = None) -> list[ErskineMayPart]:
        return self.fetch("parts", list[ErskineMayPart], cancel=cancel)

    def chapters(self, part_number: int, *, cancel: CancellationToken | None = None) -> list[ErskineMayChapter]:
        return self.fetch("chapters", list[ErskineMayChapter], {"part": part_number}, cancel=cancel)

    def sections(
        self,
        chapter_number: int,
        *,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> PaginatedResponse[ErskineMaySection]:
        return self.fetch(
            "sections",
            PaginatedResponse[ErskineMaySection],
            {"chapter": chapter_number},
            {"skip": skip, "take": take},
            cancel=cancel,
        )

    def get_section(self, section_id: int, *, cancel: CancellationToken | None = None) -> ErskineMaySection:
        return self.fetch("get_section", ErskineMaySection, {"id": section_id}, cancel=cancel)

    def search(
        self,
        search_term: str,
        *,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> PaginatedResponse[ErskineMaySearchResult]:
        query = {"search_term": search_term, "skip": skip, "take": take}
        return self.fetch("search", PaginatedResponse[ErskineMaySearchResult], query=query, cancel=cancel)

    def iter_sections(
        self,
        chapter_number: int,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> Iterator[ErskineMaySection]:
        def fetch_page(offset: int, size: int) -> PageResult[ErskineMaySection]:
            response = self.sections(chapter_number, skip=offset, take=size, cancel=cancel)
            return PageResult(response.item_values(), response.total_results)

        return paginate(fetch_page, page_size=page_size, cancel=cancel)

    def iter_search(
        self,
        search_term: str,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> Iterator[ErskineMaySearchResult]:
        def fetch_page(offset: int, size: int) -> PageResult[ErskineMaySearchResult]:
            response = self.search(search_term, skip=offset, take=size, cancel=cancel)
            return PageResult(response.item_values(), response.total_results)

        return paginate(fetch_page, page_size=page_size, cancel=cancel)


__all__ = ["ErskineMayClient"]
