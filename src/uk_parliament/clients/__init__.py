"""HTTP clients for the UK Parliament APIs."""

from .base import BaseApiClient, Endpoint
from .bills import BillsClient
from .circuit_breaker import CircuitBreaker, CircuitState
from .committees import CommitteesClient
from .divisions import CommonsDivisionsClient, LordsDivisionsClient
from .erskine_may import ErskineMayClient
from .http_logging import LoggingHTTPAdapter
from .interests import InterestsClient
from .members import MembersClient
from .now import NowClient
from .oral_questions import OralQuestionsMotionsClient
from .petitions import PetitionsClient
from .questions_statements import QuestionsStatementsClient
from .session import build_session
from .treaties import TreatiesClient

__all__ = [
    # Infrastructure
    "BaseApiClient",
    "CircuitBreaker",
    "CircuitState",
    "Endpoint",
    "LoggingHTTPAdapter",
    "build_session",
    # Clients
    "BillsClient",
    "CommitteesClient",
    "CommonsDivisionsClient",
    "ErskineMayClient",
    "InterestsClient",
    "LordsDivisionsClient",
    "MembersClient",
    "NowClient",
    "OralQuestionsMotionsClient",
    "PetitionsClient",
    "QuestionsStatementsClient",
    "TreatiesClient",
]
