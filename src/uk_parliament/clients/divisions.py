"""Clients for the Commons and Lords divisions (votes) APIs.

Both upstream schemas are undocumented and the services have been seen
answering with server errors, so responses are returned as untyped
:data:`~uk_parliament.models.base.JsonDocument` values instead of models.
"""

from __future__ import annotations

from uk_parliament.cancellation import CancellationToken
from uk_parliament.clients.base import BaseApiClient, Endpoint
from uk_parliament.models.base import JsonDocument

_SEARCH_PARAMS = {"search_term": "searchTerm", "skip": "skip", "take": "take"}


class CommonsDivisionsClient(BaseApiClient):
    api_name = "commons_divisions"
    base_url_key = "commons_divisions"
    ENDPOINTS = {
        "list": Endpoint("data/divisions.json", {"query_parameters": "queryParameters"}),
        "get": Endpoint("data/division/{id}.json"),
        "grouped_by_party": Endpoint("data/divisions.json/groupedbyparty/{id}"),
        "search": Endpoint("data/divisions.json/search", _SEARCH_PARAMS),
        "member_voting": Endpoint(
            "data/divisions.json/membervoting",
            {"member_id": "memberId", "skip": "skip", "take": "take"},
        ),
    }

    def list(
        self, *, query_parameters: str | None = None, cancel: CancellationToken | None = None
    ) -> JsonDocument | None:
        return self.invoke("list", query={"query_parameters": query_parameters}, cancel=cancel)

    def get(self, division_id: int, *, cancel: CancellationToken | None = None) -> JsonDocument | None:
        return self.invoke("get", {"id": division_id}, cancel=cancel)

    def grouped_by_party(self, division_id: int, *, cancel: CancellationToken | None = None) -> JsonDocument | None:
        return self.invoke("grouped_by_party", {"id": division_id}, cancel=cancel)

    def search(
        self,
        search_term: str,
        *,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> JsonDocument | None:
        query = {"search_term": search_term, "skip": skip, "take": take}
        return self.invoke("search", query=query, cancel=cancel)

    def member_voting(
        self,
        member_id: int,
        *,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> JsonDocument | None:
        query = {"member_id": member_id, "skip": skip, "take": take}
        return self.invoke("member_voting", query=query, cancel=cancel)


class LordsDivisionsClient(BaseApiClient):
    api_name = "lords_divisions"
    base_url_key = "lords_divisions"
    ENDPOINTS = {
        "list": Endpoint("data/Divisions", {"skip": "skip", "take": "take"}),
        "get": Endpoint("data/Divisions/{id}"),
        "grouped_by_party": Endpoint("data/Divisions/groupedbyparty/{id}"),
        "search": Endpoint("data/Divisions/search", _SEARCH_PARAMS),
    }

    def list(
        self,
        *,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> JsonDocument | None:
        return self.invoke("list", query={"skip": skip, "take": take}, cancel=cancel)

    def get(self, division_id: int, *, cancel: CancellationToken | None = None) -> JsonDocument | None:
        return self.invoke("get", {"id": division_id}, cancel=cancel)

    def grouped_by_party(self, division_id: int, *, cancel: CancellationToken | None = None) -> JsonDocument | None:
        return self.invoke("grouped_by_party", {"id": division_id}, cancel=cancel)

    def search(
        self,
        search_term: str,
        *,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> JsonDocument | None:
        query = {"search_term": search_term, "skip": skip, "take": take}
        return self.invoke("search", query=query, cancel=cancel)


__all__ = ["CommonsDivisionsClient", "LordsDivisionsClient"]
