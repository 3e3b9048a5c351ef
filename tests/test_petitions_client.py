from __future__ import annotations

from typing import Any

import pytest
import responses
from responses import matchers

from uk_parliament import ParliamentClient
from uk_parliament.clients.petitions import PetitionsClient
from uk_parliament.models.petitions import PetitionState, petition_endpoint

BASE = "https://petition.parliament.uk"


def make_petition(petition_id: int, **attributes: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "action": f"Petition {petition_id}",
        "background": "Background text",
        "state": "open",
        "signature_count": 1200,
        "created_at": "2024-01-10T09:30:00.000Z",
        "departments": [{"acronym": "DfE", "name": "Department for Education", "url": "https://gov.uk/dfe"}],
        "topics": [{"code": "education", "name": "Education"}],
    }
    data.update(attributes)
    return {
        "type": "petition",
        "id": petition_id,
        "links": {"self": f"{BASE}/petitions/{petition_id}.json"},
        "attributes": data,
    }


def page_body(ids: list[int]) -> dict[str, Any]:
    return {"links": {"self": f"{BASE}/petitions.json"}, "data": [make_petition(i) for i in ids]}


@responses.activate
def test_list_sends_filters_and_decodes_petitions(client: ParliamentClient) -> None:
    responses.add(
        responses.GET,
        f"{BASE}/petitions.json",
        json=page_body([700001, 700002]),
        match=[matchers.query_param_matcher({"search": "schools", "state": "open", "page": "2", "pageSize": "10"})],
    )

    response = client.petitions.list(search="schools", state=PetitionState.OPEN, page=2, page_size=10)

    assert [p.id for p in response.data] == [700001, 700002]
    petition = response.data[0]
    assert petition.attributes.state is PetitionState.OPEN
    assert petition.attributes.signature_count == 1200
    assert petition.attributes.departments[0].acronym == "DfE"
    assert petition.links is not None and petition.links.self_ == f"{BASE}/petitions/700001.json"
    assert petition.endpoint == "petitions/700001.json"


@responses.activate
def test_get_decodes_single_petition_with_response_and_debate(client: ParliamentClient) -> None:
    body = {
        "links": {"self": f"{BASE}/petitions/700003.json"},
        "data": make_petition(
            700003,
            state="closed",
            government_response={"responded_on": "2024-03-01", "summary": "We agree"},
            debate={"debated_on": "2024-04-15", "transcript_url": "https://hansard.parliament.uk/x"},
        ),
    }
    responses.add(responses.GET, f"{BASE}/petitions/700003.json", json=body)

    response = client.petitions.get(700003)

    attributes = response.data.attributes
    assert attributes.state is PetitionState.CLOSED
    assert attributes.government_response is not None
    assert attributes.government_response.summary == "We agree"
    assert attributes.debate is not None
    assert attributes.debate.transcript_url == "https://hansard.parliament.uk/x"


@responses.activate
def test_archived_operations_use_archived_paths(client: ParliamentClient) -> None:
    responses.add(responses.GET, f"{BASE}/archived/petitions.json", json=page_body([1, 2]))
    responses.add(
        responses.GET,
        f"{BASE}/archived/petitions/1.json",
        json={"data": make_petition(1, state="closed")},
    )

    listed = client.petitions.list_archived()
    single = client.petitions.get_archived(1)

    assert len(listed.data) == 2
    assert single.data.id == 1
    assert responses.calls[0].request.url == f"{BASE}/archived/petitions.json"


@responses.activate
def test_iter_all_converts_offsets_into_page_numbers(client: ParliamentClient) -> None:
    responses.add(
        responses.GET,
        f"{BASE}/petitions.json",
        json=page_body([1, 2]),
        match=[matchers.query_param_matcher({"state": "open", "page": "1", "pageSize": "2"})],
    )
    responses.add(
        responses.GET,
        f"{BASE}/petitions.json",
        json=page_body([3]),
        match=[matchers.query_param_matcher({"state": "open", "page": "2", "pageSize": "2"})],
    )

    ids = [petition.id for petition in client.petitions.iter_all(state="open", page_size=2)]

    assert ids == [1, 2, 3]
    assert len(responses.calls) == 2


@responses.activate
def test_list_all_archived_stops_on_empty_page(client: ParliamentClient) -> None:
    responses.add(responses.GET, f"{BASE}/archived/petitions.json", json=page_body([1, 2]))
    responses.add(responses.GET, f"{BASE}/archived/petitions.json", json=page_body([]))

    petitions = client.petitions.list_all_archived(page_size=2)

    assert [p.id for p in petitions] == [1, 2]
    assert len(responses.calls) == 2


@pytest.mark.parametrize(
    ("petition_id", "archived", "expected"),
    [
        (None, False, "petitions.json"),
        (42, False, "petitions/42.json"),
        (None, True, "archived/petitions.json"),
        (42, True, "archived/petitions/42.json"),
    ],
)
def test_petition_endpoint(petition_id: int | None, archived: bool, expected: str) -> None:
    assert petition_endpoint(petition_id, archived=archived) == expected


def test_endpoint_table_is_built_from_petition_endpoint() -> None:
    endpoints = PetitionsClient.ENDPOINTS

    assert endpoints["get"].path == petition_endpoint("{id}") == "petitions/{id}.json"
    assert endpoints["get_archived"].path == petition_endpoint("{id}", archived=True)
    assert endpoints["get_archived"].render_path({"id": 7}) == petition_endpoint(7, archived=True)
