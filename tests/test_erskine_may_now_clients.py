from __future__ import annotations

import responses
from responses import matchers

from uk_parliament import ParliamentClient

ERSKINE_MAY = "https://erskinemay-api.parliament.uk"
NOW = "https://now-api.parliament.uk"


@responses.activate
def test_parts_and_chapters_map_number_fields(client: ParliamentClient) -> None:
    responses.add(
        responses.GET,
        f"{ERSKINE_MAY}/api/Parts",
        json=[{"number": 1, "title": "Constitution and Procedure", "chapters": [{"number": 1, "title": "Intro"}]}],
    )
    responses.add(
        responses.GET,
        f"{ERSKINE_MAY}/api/Parts/2/Chapters",
        json=[{"partNumber": 2, "number": 20, "title": "Questions"}],
    )

    parts = client.erskine_may.parts()
    chapters = client.erskine_may.chapters(2)

    assert parts[0].part_number == 1
    assert parts[0].chapters[0].chapter_number == 1
    assert chapters[0].part_number == 2 and chapters[0].chapter_number == 20


@responses.activate
def test_section_tree_is_recursive(client: ParliamentClient) -> None:
    responses.add(
        responses.GET,
        f"{ERSKINE_MAY}/api/Sections/500",
        json={
            "id": 500,
            "title": "Urgent questions",
            "hasSubsections": True,
            "subSections": [{"id": 501, "title": "Granting", "subSections": [{"id": 502, "title": "Timing"}]}],
        },
    )

    section = client.erskine_may.get_section(500)

    assert section.sub_sections[0].sub_sections[0].id == 502


@responses.activate
def test_iter_search_pages_with_search_term(client: ParliamentClient) -> None:
    def hit(section_id: int) -> dict[str, object]:
        return {"value": {"sectionId": section_id, "title": "Sub judice", "score": 1.5}, "links": []}

    responses.add(
        responses.GET,
        f"{ERSKINE_MAY}/api/Search",
        json={"totalResults": 3, "items": [hit(1), hit(2)]},
        match=[matchers.query_param_matcher({"searchTerm": "sub judice", "skip": "0", "take": "2"})],
    )
    responses.add(
        responses.GET,
        f"{ERSKINE_MAY}/api/Search",
        json={"totalResults": 3, "items": [hit(3)]},
        match=[matchers.query_param_matcher({"searchTerm": "sub judice", "skip": "2", "take": "2"})],
    )

    hits = list(client.erskine_may.iter_search("sub judice", page_size=2))

    assert [h.section_id for h in hits] == [1, 2, 3]


@responses.activate
def test_chamber_status_and_upcoming_business(client: ParliamentClient) -> None:
    responses.add(
        responses.GET,
        f"{NOW}/api/Now/Commons",
        json={"house": "Commons", "isSitting": True, "currentBusiness": "Prime Minister's Questions"},
    )
    responses.add(
        responses.GET,
        f"{NOW}/api/Now/Lords/Business",
        json=[{"id": 1, "house": "Lords", "description": "Oral questions", "orderNumber": 1}],
    )

    status = client.now.commons_status()
    business = client.now.upcoming_business("Lords")

    assert status.is_sitting is True
    assert status.current_business == "Prime Minister's Questions"
    assert business[0].order_number == 1


@responses.activate
def test_current_business_is_none_for_empty_body(client: ParliamentClient) -> None:
    responses.add(responses.GET, f"{NOW}/api/Now/Commons/Current", body="")

    assert client.now.current_business("Commons") is None


@responses.activate
def test_annunciator_message(client: ParliamentClient) -> None:
    responses.add(
        responses.GET,
        f"{NOW}/api/Message/message/LordsMain/current",
        json={
            "id": 77,
            "annunciatorType": "LordsMain",
            "showLordsBell": True,
            "slides": [
                {
                    "id": 1,
                    "type": "Generic",
                    "lines": [{"displayOrder": 1, "content": "Division", "member": {"id": 3898}}],
                }
            ],
        },
    )
    responses.add(responses.GET, f"{NOW}/api/Message/message/CommonsMain/current", body="   ")

    message = client.now.annunciator_message("LordsMain")

    assert message is not None
    assert message.show_lords_bell is True
    assert message.slides[0].lines[0].member is not None
    assert client.now.annunciator_message() is None


@responses.activate
def test_sections_page_through_chapter(client: ParliamentClient) -> None:
    def section(section_id: int) -> dict[str, object]:
        return {"value": {"id": section_id, "chapterNumber": 20, "title": f"Section {section_id}"}, "links": []}

    responses.add(
        responses.GET,
        f"{ERSKINE_MAY}/api/Chapters/20/Sections",
        json={"totalResults": 2, "items": [section(1), section(2)]},
        match=[matchers.query_param_matcher({"skip": "0", "take": "5"})],
    )

    single = client.erskine_may.sections(20, skip=0, take=5)
    every = list(client.erskine_may.iter_sections(20, page_size=5))

    assert single.total_results == 2
    assert [s.id for s in every] == [1, 2]
