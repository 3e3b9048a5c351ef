"""Typed response shapes of the UK Parliament APIs."""

from .base import JsonDocument, Link, ListResponse, PaginatedResponse, ParliamentModel, ValueWrapper
from .bills import Bill, BillStage, BillType, Promoter, Sponsor, SponsorMember, StageSitting
from .committees import (
    Committee,
    CommitteeCategory,
    CommitteeContact,
    CommitteeType,
    LeadHouse,
    NameHistory,
    ScrutinisingDepartment,
)
from .erskine_may import ErskineMayChapter, ErskineMayPart, ErskineMaySearchResult, ErskineMaySection
from .interests import (
    Interest,
    InterestCategory,
    InterestCategoryInfo,
    InterestField,
    InterestLink,
    InterestMemberInfo,
    InterestRegister,
)
from .members import (
    Constituency,
    CurrentRepresentation,
    HouseMembership,
    Member,
    MembershipStatus,
    Party,
    RepresentationDetails,
)
from .now import (
    AnnunciatorMessage,
    AnnunciatorSlide,
    BusinessItem,
    ChamberStatus,
    ScrollingMessage,
    SlideLine,
    SlideLineMember,
)
from .oral_questions import Motion, OralQuestion, OralQuestionMember, OralQuestionsPagingInfo, OralQuestionsResponse
from .petitions import (
    ConstituencySignatures,
    CountrySignatures,
    Department,
    Links,
    Petition,
    PetitionAttributes,
    PetitionDebate,
    PetitionGovernmentResponse,
    PetitionRejection,
    PetitionsResponse,
    PetitionState,
    RegionSignatures,
    Topic,
    petition_endpoint,
)
from .questions import DailyReport, WrittenQuestion, WrittenStatement
from .treaties import GovernmentOrganisation, Treaty, TreatyBusinessItem

__all__ = [
    # Envelopes
    "JsonDocument",
    "Link",
    "ListResponse",
    "PaginatedResponse",
    "ParliamentModel",
    "ValueWrapper",
    # Bills
    "Bill",
    "BillStage",
    "BillType",
    "Promoter",
    "Sponsor",
    "SponsorMember",
    "StageSitting",
    # Committees
    "Committee",
    "CommitteeCategory",
    "CommitteeContact",
    "CommitteeType",
    "LeadHouse",
    "NameHistory",
    "ScrutinisingDepartment",
    # Erskine May
    "ErskineMayChapter",
    "ErskineMayPart",
    "ErskineMaySearchResult",
    "ErskineMaySection",
    # Interests
    "Interest",
    "InterestCategory",
    "InterestCategoryInfo",
    "InterestField",
    "InterestLink",
    "InterestMemberInfo",
    "InterestRegister",
    # Members
    "Constituency",
    "CurrentRepresentation",
    "HouseMembership",
    "Member",
    "MembershipStatus",
    "Party",
    "RepresentationDetails",
    # Now
    "AnnunciatorMessage",
    "AnnunciatorSlide",
    "BusinessItem",
    "ChamberStatus",
    "ScrollingMessage",
    "SlideLine",
    "SlideLineMember",
    # Oral questions and motions
    "Motion",
    "OralQuestion",
    "OralQuestionMember",
    "OralQuestionsPagingInfo",
    "OralQuestionsResponse",
    # Petitions
    "ConstituencySignatures",
    "CountrySignatures",
    "Department",
    "Links",
    "Petition",
    "PetitionAttributes",
    "PetitionDebate",
    "PetitionGovernmentResponse",
    "PetitionRejection",
    "PetitionState",
    "PetitionsResponse",
    "RegionSignatures",
    "Topic",
    "petition_endpoint",
    # Questions and statements
    "DailyReport",
    "WrittenQuestion",
    "WrittenStatement",
    # Treaties
    "GovernmentOrganisation",
    "Treaty",
    "TreatyBusinessItem",
]
