"""Single entry point exposing every Parliament domain client."""

from __future__ import annotations

from types import TracebackType

import requests

from uk_parliament.clients.bills import BillsClient
from uk_parliament.clients.committees import CommitteesClient
from uk_parliament.clients.divisions import CommonsDivisionsClient, LordsDivisionsClient
from uk_parliament.clients.erskine_may import ErskineMayClient
from uk_parliament.clients.interests import InterestsClient
from uk_parliament.clients.members import MembersClient
from uk_parliament.clients.now import NowClient
from uk_parliament.clients.oral_questions import OralQuestionsMotionsClient
from uk_parliament.clients.petitions import PetitionsClient
from uk_parliament.clients.questions_statements import QuestionsStatementsClient
from uk_parliament.clients.session import build_session
from uk_parliament.clients.treaties import TreatiesClient
from uk_parliament.config import ParliamentClientOptions
from uk_parliament.logging_setup import get_logger


class ParliamentClient:
    """Facade over the Parliament APIs sharing one session and one set of options.

    ``ParliamentClient()`` builds and owns its session; :meth:`close` releases
    it. :meth:`from_session` borrows a caller's session, which is neither
    modified nor closed.

    Example::

        with ParliamentClient() as client:
            for member in client.members.iter_all(name="Smith"):
                print(member.name_display_as)
    """

    def __init__(self, options: ParliamentClientOptions | None = None) -> None:
        self.options = options or ParliamentClientOptions()
        self._init(build_session(self.options), owns_session=True)

    @classmethod
    def from_session(
        cls, session: requests.Session, options: ParliamentClientOptions | None = None
    ) -> ParliamentClient:
        """Create a facade on top of an externally owned session.

        Raises:
            ValueError: If ``session`` is ``None``.
        """
        if session is None:
            raise ValueError("session must not be None")
        client = cls.__new__(cls)
        client.options = options or ParliamentClientOptions()
        client._init(session, owns_session=False)
        return client

    def _init(self, session: requests.Session, *, owns_session: bool) -> None:
        self.session = session
        self.owns_session = owns_session
        self._closed = False
        self.logger = get_logger(self.__class__.__name__, owns_session=owns_session)

        options = self.options
        self.petitions = PetitionsClient(session, options)
        self.members = MembersClient(session, options)
        self.bills = BillsClient(session, options)
        self.committees = CommitteesClient(session, options)
        self.commons_divisions = CommonsDivisionsClient(session, options)
        self.lords_divisions = LordsDivisionsClient(session, options)
        self.interests = InterestsClient(session, options)
        self.questions_statements = QuestionsStatementsClient(session, options)
        self.oral_questions_motions = OralQuestionsMotionsClient(session, options)
        self.treaties = TreatiesClient(session, options)
        self.erskine_may = ErskineMayClient(session, options)
        self.now = NowClient(session, options)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the session if this facade owns it. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True
        if self.owns_session:
            self.session.close()
            self.logger.debug("session_closed")

    def __enter__(self) -> ParliamentClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["ParliamentClient"]
