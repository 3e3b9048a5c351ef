from __future__ import annotations

import pytest
import responses
from responses import matchers

from uk_parliament import ParliamentClient, ServerError

COMMONS = "https://commonsvotes-api.parliament.uk"
LORDS = "https://lordsvotes-api.parliament.uk"


@responses.activate
def test_commons_division_is_returned_untyped(client: ParliamentClient) -> None:
    body = {"DivisionId": 1661, "Title": "Opposition Day", "AyeCount": 200, "Ayes": [{"MemberId": 1}]}
    responses.add(responses.GET, f"{COMMONS}/data/division/1661.json", json=body)

    assert client.commons_divisions.get(1661) == body


@responses.activate
def test_commons_search_and_member_voting_params(client: ParliamentClient) -> None:
    responses.add(
        responses.GET,
        f"{COMMONS}/data/divisions.json/search",
        json=[{"DivisionId": 1}],
        match=[matchers.query_param_matcher({"searchTerm": "climate", "take": "5"})],
    )
    responses.add(
        responses.GET,
        f"{COMMONS}/data/divisions.json/membervoting",
        json=[],
        match=[matchers.query_param_matcher({"memberId": "4514", "skip": "0", "take": "10"})],
    )

    assert client.commons_divisions.search("climate", take=5) == [{"DivisionId": 1}]
    assert client.commons_divisions.member_voting(4514, skip=0, take=10) == []


@responses.activate
def test_lords_grouped_by_party(client: ParliamentClient) -> None:
    body = [{"partyId": 15, "name": "Labour", "contentCount": 100}]
    responses.add(responses.GET, f"{LORDS}/data/Divisions/groupedbyparty/2999", json=body)

    assert client.lords_divisions.grouped_by_party(2999) == body


@responses.activate
def test_division_server_errors_are_raised(client: ParliamentClient) -> None:
    responses.add(responses.GET, f"{LORDS}/data/Divisions", status=500, body="boom")

    with pytest.raises(ServerError) as excinfo:
        client.lords_divisions.list(skip=0, take=25)

    assert excinfo.value.status_code == 500
    assert excinfo.value.body == "boom"


@responses.activate
def test_list_get_and_search_pass_json_through(client: ParliamentClient) -> None:
    responses.add(
        responses.GET,
        f"{COMMONS}/data/divisions.json",
        json=[{"DivisionId": 1}],
        match=[matchers.query_param_matcher({"queryParameters": "take=5"})],
    )
    responses.add(responses.GET, f"{LORDS}/data/Divisions/2999", json={"divisionId": 2999})
    responses.add(
        responses.GET,
        f"{LORDS}/data/Divisions/search",
        json=[],
        match=[matchers.query_param_matcher({"searchTerm": "hereditary"})],
    )

    assert client.commons_divisions.list(query_parameters="take=5") == [{"DivisionId": 1}]
    assert client.lords_divisions.get(2999) == {"divisionId": 2999}
    assert client.lords_divisions.search("hereditary") == []
