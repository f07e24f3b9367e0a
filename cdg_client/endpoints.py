"""
Endpoint descriptions for the Congress.gov v3 API.

Each class describes one resource family. Path identifiers are optional and
are emitted in declaration order; a later identifier is only used when all
earlier ones are present. See `cdg_client.encoder` for the URL mapping.
"""

from dataclasses import dataclass

from .enums import (
    AmendmentOption,
    AmendmentType,
    BillOption,
    BillType,
    ChamberType,
    CommitteeOption,
    CommitteeReportType,
    CommunicationType,
    LawType,
    MemberOption,
    NominationOption,
)
from .parameters import Parameters


@dataclass(frozen=True, kw_only=True)
class Endpoint:
    parameters: Parameters | None = None


@dataclass(frozen=True, kw_only=True)
class Bill(Endpoint):
    congress: int | None = None
    bill_type: BillType | None = None
    bill_number: int | str | None = None
    bill_option: BillOption | None = None


@dataclass(frozen=True, kw_only=True)
class Law(Endpoint):
    congress: int | None = None
    law_type: LawType | None = None
    law_number: int | str | None = None


@dataclass(frozen=True, kw_only=True)
class Amendment(Endpoint):
    congress: int | None = None
    amendment_type: AmendmentType | None = None
    amendment_number: int | str | None = None
    amendment_option: AmendmentOption | None = None


@dataclass(frozen=True, kw_only=True)
class Summaries(Endpoint):
    congress: int | None = None
    bill_type: BillType | None = None


@dataclass(frozen=True, kw_only=True)
class Congress(Endpoint):
    """`congress/{number}` or `congress/current`; setting both emits neither."""

    congress: int | None = None
    current: bool = False


@dataclass(frozen=True, kw_only=True)
class Member(Endpoint):
    """
    Member lookups.

    - bioguide_id -> member/{id}[/{option}]
    - congress -> member/congress/{congress}[/{state}/{district}]
    - state -> member/{state}[/{district}]
    """

    bioguide_id: str | None = None
    member_option: MemberOption | None = None
    congress: int | None = None
    state: str | None = None
    district: int | None = None


@dataclass(frozen=True, kw_only=True)
class Committee(Endpoint):
    congress: int | None = None
    chamber: ChamberType | None = None
    committee_code: str | None = None
    committee_option: CommitteeOption | None = None


@dataclass(frozen=True, kw_only=True)
class CommitteeReport(Endpoint):
    congress: int | None = None
    report_type: CommitteeReportType | None = None
    report_number: int | str | None = None
    text: bool = False


@dataclass(frozen=True, kw_only=True)
class CommitteePrint(Endpoint):
    congress: int | None = None
    chamber: ChamberType | None = None
    jacket_number: int | str | None = None
    text: bool = False


@dataclass(frozen=True, kw_only=True)
class CommitteeMeeting(Endpoint):
    congress: int | None = None
    chamber: ChamberType | None = None
    event_id: int | str | None = None


@dataclass(frozen=True, kw_only=True)
class Hearing(Endpoint):
    congress: int | None = None
    chamber: ChamberType | None = None
    jacket_number: int | str | None = None


@dataclass(frozen=True, kw_only=True)
class CongressionalRecord(Endpoint):
    """Filter by date through `Parameters.year/month/day`."""


@dataclass(frozen=True, kw_only=True)
class DailyCongressionalRecord(Endpoint):
    volume_number: int | str | None = None
    issue_number: int | str | None = None
    articles: bool = False


@dataclass(frozen=True, kw_only=True)
class BoundCongressionalRecord(Endpoint):
    year: int | None = None
    month: int | None = None
    day: int | None = None


@dataclass(frozen=True, kw_only=True)
class HouseCommunication(Endpoint):
    congress: int | None = None
    communication_type: CommunicationType | None = None
    communication_number: int | str | None = None


@dataclass(frozen=True, kw_only=True)
class HouseRequirement(Endpoint):
    requirement_number: int | str | None = None
    matching_communications: bool = False


@dataclass(frozen=True, kw_only=True)
class SenateCommunication(Endpoint):
    congress: int | None = None
    communication_type: CommunicationType | None = None
    communication_number: int | str | None = None


@dataclass(frozen=True, kw_only=True)
class Nomination(Endpoint):
    """An `ordinal` (nominee position) takes precedence over `nomination_option`."""

    congress: int | None = None
    nomination_number: int | str | None = None
    ordinal: int | None = None
    nomination_option: NominationOption | None = None


@dataclass(frozen=True, kw_only=True)
class Treaty(Endpoint):
    congress: int | None = None
    treaty_number: int | str | None = None
    treaty_suffix: str | None = None
    actions: bool = False
    committees: bool = False


@dataclass(frozen=True, kw_only=True)
class GenericEndpoint(Endpoint):
    """Any API path, e.g. `bill/118/hr/1/cosponsors`. Used verbatim."""

    path: str
