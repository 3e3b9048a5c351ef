"""Client for the register of members' financial interests API.

None of these endpoints page; searches return every match in one response.
"""

from __future__ import annotations

from uk_parliament.cancellation import CancellationToken
from uk_parliament.clients.base import BaseApiClient, Endpoint
from uk_parliament.models.interests import Interest, InterestCategory, InterestRegister


class InterestsClient(BaseApiClient):
    api_name = "interests"
    base_url_key = "interests"
    ENDPOINTS = {
        "categories": Endpoint("api/v1/Categories"),
        "get_category": Endpoint("api/v1/Categories/{id}"),
        "search": Endpoint(
            "api/v1/Interests",
            {"member_id": "memberId", "category_id": "categoryId", "search_term": "searchTerm"},
        ),
        "get": Endpoint("api/v1/Interests/{id}"),
        "registers": Endpoint("api/v1/Registers"),
        "get_register": Endpoint("api/v1/Registers/{id}"),
    }

    def categories(self, *, cancel: CancellationToken | None = None) -> list[InterestCategory]:
        return self.fetch("categories", list[InterestCategory], cancel=cancel)

    def get_category(self, category_id: int, *, cancel: CancellationToken | None = None) -> InterestCategory:
        return self.fetch("get_category", InterestCategory, {"id": category_id}, cancel=cancel)

    def search(
        self,
        *,
        member_id: int | None = None,
        category_id: int | None = None,
        search_term: str | None = None,
        cancel: CancellationToken | None = None,
    ) -> list[Interest]:
        query = {"member_id": member_id, "category_id": category_id, "search_term": search_term}
        return self.fetch("search", list[Interest], query=query, cancel=cancel)

    def get(self, interest_id: int, *, cancel: CancellationToken | None = None) -> Interest:
        return self.fetch("get", Interest, {"id": interest_id}, cancel=cancel)

    def registers(self, *, cancel: CancellationToken | None = None) -> list[InterestRegister]:
        return self.fetch("registers", list[InterestRegister], cancel=cancel)

    def get_register(self, register_id: int, *, cancel: CancellationToken | None = None) -> InterestRegister:
        return self.fetch("get_register", InterestRegister, {"id": register_id}, cancel=cancel)


__all__ = ["InterestsClient"]
