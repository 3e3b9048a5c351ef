"""Client for the written questions, written statements and daily reports API."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

from uk_parliament.cancellation import CancellationToken
from uk_parliament.clients.base import BaseApiClient, Endpoint
from uk_parliament.models.base import PaginatedResponse
from uk_parliament.models.questions import DailyReport, WrittenQuestion, WrittenStatement
from uk_parliament.pagination import DEFAULT_PAGE_SIZE, PageResult, paginate
from uk_parliament.queries import WrittenQuestionsQuery


class QuestionsStatementsClient(BaseApiClient):
    api_name = "questions_statements"
    base_url_key = "questions_statements"
    ENDPOINTS = {
        "written_questions": Endpoint(
            "api/writtenquestions/questions",
            {
                "asking_member_id": "askingMemberId",
                "answering_member_id": "answeringMemberId",
                "answering_department": "answeringDepartment",
                "house": "house",
                "tabled_when_from": "tabledWhenFrom",
                "tabled_when_to": "tabledWhenTo",
                "answered_when_from": "answeredWhenFrom",
                "answered_when_to": "answeredWhenTo",
                "is_answered": "isAnswered",
                "skip": "skip",
                "take": "take",
            },
        ),
        "get_written_question": Endpoint("api/writtenquestions/questions/{id}"),
        "get_written_question_by_uin": Endpoint("api/writtenquestions/questions/{date}/{uin}"),
        "written_statements": Endpoint(
            "api/writtenstatements/statements",
            {
                "making_member_id": "makingMemberId",
                "department": "department",
                "house": "house",
                "made_when_from": "madeWhenFrom",
                "made_when_to": "madeWhenTo",
                "skip": "skip",
                "take": "take",
            },
        ),
        "get_written_statement": Endpoint("api/writtenstatements/statements/{id}"),
        "get_written_statement_by_uin": Endpoint("api/writtenstatements/statements/{date}/{uin}"),
        "daily_reports": Endpoint(
            "api/dailyreports/dailyreports",
            {"date_from": "dateFrom", "date_to": "dateTo", "house": "house", "skip": "skip", "take": "take"},
        ),
    }

    def written_questions(
        self,
        *,
        asking_member_id: int | None = None,
        answering_member_id: int | None = None,
        answering_department: str | None = None,
        house: str | None = None,
        tabled_when_from: date | None = None,
        tabled_when_to: date | None = None,
        answered_when_from: date | None = None,
        answered_when_to: date | None = None,
        is_answered: bool | None = None,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> PaginatedResponse[WrittenQuestion]:
        query = {
            "asking_member_id": asking_member_id,
            "answering_member_id": answering_member_id,
            "answering_department": answering_department,
            "house": house,
            "tabled_when_from": tabled_when_from,
            "tabled_when_to": tabled_when_to,
            "answered_when_from": answered_when_from,
            "answered_when_to": answered_when_to,
            "is_answered": is_answered,
            "skip": skip,
            "take": take,
        }
        return self.fetch("written_questions", PaginatedResponse[WrittenQuestion], query=query, cancel=cancel)

    def get_written_question(self, question_id: int, *, cancel: CancellationToken | None = None) -> WrittenQuestion:
        return self.fetch("get_written_question", WrittenQuestion, {"id": question_id}, cancel=cancel)

    def get_written_question_by_uin(
        self, tabled: date, uin: str, *, cancel: CancellationToken | None = None
    ) -> WrittenQuestion:
        """Look a question up by the date it was tabled and its UIN."""
        return self.fetch("get_written_question_by_uin", WrittenQuestion, {"date": tabled, "uin": uin}, cancel=cancel)

    def written_statements(
        self,
        *,
        making_member_id: int | None = None,
        department: str | None = None,
        house: str | None = None,
        made_when_from: date | None = None,
        made_when_to: date | None = None,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> PaginatedResponse[WrittenStatement]:
        query = {
            "making_member_id": making_member_id,
            "department": department,
            "house": house,
            "made_when_from": made_when_from,
            "made_when_to": made_when_to,
            "skip": skip,
            "take": take,
        }
        return self.fetch("written_statements", PaginatedResponse[WrittenStatement], query=query, cancel=cancel)

    def get_written_statement(self, statement_id: int, *, cancel: CancellationToken | None = None) -> WrittenStatement:
        return self.fetch("get_written_statement", WrittenStatement, {"id": statement_id}, cancel=cancel)

    def get_written_statement_by_uin(
        self, made: date, uin: str, *, cancel: CancellationToken | None = None
    ) -> WrittenStatement:
        return self.fetch("get_written_statement_by_uin", WrittenStatement, {"date": made, "uin": uin}, cancel=cancel)

    def daily_reports(
        self,
        *,
        date_from: date | None = None,
        date_to: date | None = None,
        house: str | None = None,
        skip: int | None = None,
        take: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> PaginatedResponse[DailyReport]:
        query = {"date_from": date_from, "date_to": date_to, "house": house, "skip": skip, "take": take}
        return self.fetch("daily_reports", PaginatedResponse[DailyReport], query=query, cancel=cancel)

    def iter_written_questions(
        self,
        query: WrittenQuestionsQuery | None = None,
        *,
        asking_member_id: int | None = None,
        answering_member_id: int | None = None,
        answering_department: str | None = None,
        house: str | None = None,
        tabled_when_from: date | None = None,
        tabled_when_to: date | None = None,
        answered_when_from: date | None = None,
        answered_when_to: date | None = None,
        is_answered: bool | None = None,
        page_size: int | None = None,
        cancel: CancellationToken | None = None,
    ) -> Iterator[WrittenQuestion]:
        """Iterate over written questions from a :class:`WrittenQuestionsQuery` or keyword filters."""
        options = WrittenQuestionsQuery.resolve(
            query,
            asking_member_id=asking_member_id,
            answering_member_id=answering_member_id,
            answering_department=answering_department,
            house=house,
            tabled_when_from=tabled_when_from,
            tabled_when_to=tabled_when_to,
            answered_when_from=answered_when_from,
            answered_when_to=answered_when_to,
            is_answered=is_answered,
            page_size=page_size,
        )
        filters = options.filters()

        def fetch_page(offset: int, size: int) -> PageResult[WrittenQuestion]:
            response = self.written_questions(**filters, skip=offset, take=size, cancel=cancel)
            return PageResult(response.item_values(), response.total_results)

        return paginate(fetch_page, page_size=options.page_size, cancel=cancel)

    def list_all_written_questions(
        self,
        query: WrittenQuestionsQuery | None = None,
        *,
        cancel: CancellationToken | None = None,
        **filters: object,
    ) -> list[WrittenQuestion]:
        return list(self.iter_written_questions(query, cancel=cancel, **filters))  # type: ignore[arg-type]

    def iter_written_statements(
        self,
        *,
        making_member_id: int | None = None,
        department: str | None = None,
        house: str | None = None,
        made_when_from: date | None = None,
        made_when_to: date | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> Iterator[WrittenStatement]:
        def fetch_page(offset: int, size: int) -> PageResult[WrittenStatement]:
            response = self.written_statements(
                making_member_id=making_member_id,
                department=department,
                house=house,
                made_when_from=made_when_from,
                made_when_to=made_when_to,
                skip=offset,
                take=size,
                cancel=cancel,
            )
            return PageResult(response.item_values(), response.total_results)

        return paginate(fetch_page, page_size=page_size, cancel=cancel)

    def list_all_written_statements(
        self, *, cancel: CancellationToken | None = None, **filters: object
    ) -> list[WrittenStatement]:
        return list(self.iter_written_statements(cancel=cancel, **filters))  # type: ignore[arg-type]

    def iter_daily_reports(
        self,
        *,
        date_from: date | None = None,
        date_to: date | None = None,
        house: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        cancel: CancellationToken | None = None,
    ) -> Iterator[DailyReport]:
        def fetch_page(offset: int, size: int) -> PageResult[DailyReport]:
            response = self.daily_reports(
                date_from=date_from, date_to=date_to, house=house, skip=offset, take=size, cancel=cancel
            )
            return PageResult(response.item_values(), response.total_results)

        return paginate(fetch_page, page_size=page_size, cancel=cancel)

    def list_all_daily_reports(
        self, *, cancel: CancellationToken | None = None, **filters: object
    ) -> list[DailyReport]:
        return list(self.iter_daily_reports(cancel=cancel, **filters))  # type: ignore[arg-type]


__all__ = ["QuestionsStatementsClient"]
