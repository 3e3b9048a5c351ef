"""Client for the oral questions and early day motions API."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

from uk_parliament.cancellation import CancellationToken
from uk_parliament.clients.base import BaseApiClient, Endpoint
from uk_parliament.models.oral_questions import Motion, OralQuestion, OralQuestionsResponse
from uk_parliament.pagination import PageResult, paginate
from uk_parliament.queries import MotionsQuery, OralQuestionsQuery


class OralQuestionsMotionsClient(BaseApiClient):
    """Oral questions and early day motions.

    Listings share one envelope whose ``PagingInfo.Total`` drives pagination.
    """

    api_name = "oral_questions_motions"
    base_url_key = "oral_questions_motions"
    ENDPOINTS = {
        "oral_questions": Endpoint(
            "oralquestions/list",
            {
                "asking_member_id": "askingMemberId",
                "answering_department": "answeringDepartment",
                "house": "house",
                "date_from": "dateFrom",
                "date_to": "dateTo",
                "is_answered": "isAnswered",
                "skip": "skip",
                "take": "take",
            },
        ),
        "motions": Endpoint(
            "EarlyDayMotions/list",
            {
                "proposing_member_id": "proposingMemberId",
                "house": "house",
                "date_from": "dateFrom",
                "date_to": "dateTo",
                "motion_type": "motionType",
                "is_active": "isActive",
                "skip": "skip",
                "take": "take",
            },
        ),
        "get_motion": Endpoint("EarlyDayMotion/{id}"),
    }

    def oral_questions(
        self,
        *,
        asking_member_id: int | None = None,
        answering_department: str | None = None,
        house: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        is_answered: bool | None = None,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> OralQuestionsResponse[OralQuestion]:
        query = {
            "asking_member_id": asking_member_id,
            "answering_department": answering_department,
            "house": house,
            "date_from": date_from,
            "date_to": date_to,
            "is_answered": is_answered,
            "skip": skip,
            "take": take,
        }
        return self.fetch("oral_questions", OralQuestionsResponse[OralQuestion], query=query, cancel=cancel)

    def motions(
        self,
        *,
        proposing_member_id: int | None = None,
        house: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        motion_type: str | None = None,
        is_active: bool | None = None,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> OralQuestionsResponse[Motion]:
        query = {
            "proposing_member_id": proposing_member_id,
            "house": house,
            "date_from": date_from,
            "date_to": date_to,
            "motion_type": motion_type,
            "is_active": is_active,
            "skip": skip,
            "take": take,
        }
        return self.fetch("motions", OralQuestionsResponse[Motion], query=query, cancel=cancel)

    def get_motion(self, motion_id: int, *, cancel: CancellationToken | None = None) -> Motion:
        return self.fetch("get_motion", Motion, {"id": motion_id}, cancel=cancel)

    def iter_oral_questions(
        self,
        query: OralQuestionsQuery | None = None,
        *,
        asking_member_id: int | None = None,
        answering_department: str | None = None,
        house: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        is_answered: bool | None = None,
        page_size: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> Iterator[OralQuestion]:
        options = OralQuestionsQuery.resolve(
            query,
            asking_member_id=asking_member_id,
            answering_department=answering_department,
            house=house,
            date_from=date_from,
            date_to=date_to,
            is_answered=is_answered,
            page_size=page_size,
        )
        filters = options.filters()

        def fetch_page(offset: int, size: int) -> PageResult[OralQuestion]:
            response = self.oral_questions(**filters, skip=offset, take=size, cancel=cancel)
            return PageResult(response.response, response.total)

        return paginate(fetch_page, page_size=options.page_size, cancel=cancel)

    def list_all_oral_questions(
        self,
        query: OralQuestionsQuery | None = None,
        *,
        cancel: CancellationToken | None = None,
        **filters: object,
    ) -> list[OralQuestion]:
        return list(self.iter_oral_questions(query, cancel=cancel, **filters))  # type: ignore[arg-type]

    def iter_motions(
        self,
        query: MotionsQuery | None = None,
        *,
        proposing_member_id: int | None = None,
        house: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        motion_type: str | None = None,
        is_active: bool | None = None,
        page_size: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> Iterator[Motion]:
        options = MotionsQuery.resolve(
            query,
            proposing_member_id=proposing_member_id,
            house=house,
            date_from=date_from,
            date_to=date_to,
            motion_type=motion_type,
            is_active=is_active,
            page_size=page_size,
        )
        filters = options.filters()

        def fetch_page(offset: int, size: int) -> PageResult[Motion]:
            response = self.motions(**filters, skip=offset, take=size, cancel=cancel)
            return PageResult(response.response, response.total)

        return paginate(fetch_page, page_size=options.page_size, cancel=cancel)

    def list_all_motions(
        self,
        query: MotionsQuery | None = None,
        *,
        cancel: CancellationToken | None = None,
        **filters: object,
    ) -> list[Motion]:
        return list(self.iter_motions(query, cancel=cancel, **filters))  # type: ignore[arg-type]


__all__ = ["OralQuestionsMotionsClient"]
