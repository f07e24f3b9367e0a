"""
Response models for the Congress.gov v3 API.

Every model keeps unknown JSON properties (``extra="allow"``) so new upstream
fields never break parsing and are written back out on serialization. Top-level
responses derive from ``PrimaryResponse``; the key that identifies a response
shape (``bills``, ``member``, ...) is required, everything else is optional
because the live API omits fields inconsistently.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel, to_pascal


class CongressModel(BaseModel):
    """Base for all API models. JSON keys are camelCase."""

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)


class RecordModel(BaseModel):
    """Base for congressional record models, whose JSON keys are PascalCase."""

    model_config = ConfigDict(extra="allow", alias_generator=to_pascal, populate_by_name=True)


class Pagination(CongressModel):
    count: int | None = None
    next: str | None = None
    prev: str | None = None


class RequestInfo(CongressModel):
    content_type: str | None = None
    format: str | None = None


class PrimaryResponse(CongressModel):
    """Marker base for top-level response documents."""

    pagination: Pagination | None = None
    request: RequestInfo | None = None

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        """
        Validate a JSON document as this response.

        Values must already have the declared JSON type (``"117"`` is not an
        ``int``) and keys are matched by their API name only, so a document
        that validates serializes back to the same keys and values.
        """
        return cls.model_validate_json(data, strict=True, by_alias=True, by_name=False)


# ---------------------------------------------------------------------------
# Shared nested types
# ---------------------------------------------------------------------------


class LatestAction(CongressModel):
    action_date: str | None = None
    action_time: str | None = None
    text: str | None = None


class ResourceReference(CongressModel):
    """Count and URL of a sub-resource listing."""

    count: int | None = None
    url: str | None = None


class CosponsorsReference(ResourceReference):
    count_including_withdrawn_cosponsors: int | None = None


class SourceSystem(CongressModel):
    code: int | None = None
    name: str | None = None


class RecordedVote(CongressModel):
    chamber: str | None = None
    congress: int | None = None
    date: str | None = None
    roll_number: int | None = None
    session_number: int | None = None
    url: str | None = None


class Sponsor(CongressModel):
    bioguide_id: str | None = None
    district: int | None = None
    first_name: str | None = None
    full_name: str | None = None
    is_by_request: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    party: str | None = None
    state: str | None = None
    url: str | None = None


class Cosponsor(Sponsor):
    is_original_cosponsor: bool | None = None
    sponsorship_date: str | None = None
    sponsorship_withdrawn_date: str | None = None


class TextFormat(CongressModel):
    format_type: str | None = Field(None, alias="type")
    url: str | None = None


class TextVersion(CongressModel):
    date: str | None = None
    formats: list[TextFormat] | None = None
    text_type: str | None = Field(None, alias="type")


class PolicyArea(CongressModel):
    name: str | None = None
    update_date: str | None = None


class LawReference(CongressModel):
    number: str | None = None
    law_type: str | None = Field(None, alias="type")


class CommitteeActivity(CongressModel):
    date: str | None = None
    name: str | None = None


class CommitteeRef(CongressModel):
    """Committee as it appears inside bills, actions and meetings."""

    activities: list[CommitteeActivity] | None = None
    chamber: str | None = None
    name: str | None = None
    system_code: str | None = None
    committee_type: str | None = Field(None, alias="type")
    url: str | None = None


class BillReference(CongressModel):
    congress: int | None = None
    number: int | str | None = None
    origin_chamber: str | None = None
    origin_chamber_code: str | None = None
    title: str | None = None
    bill_type: str | None = Field(None, alias="type")
    update_date_including_text: str | None = None
    url: str | None = None


# ---------------------------------------------------------------------------
# Bills
# ---------------------------------------------------------------------------


class BillSummary(CongressModel):
    congress: int | None = None
    latest_action: LatestAction | None = None
    number: int | str | None = None
    origin_chamber: str | None = None
    origin_chamber_code: str | None = None
    title: str | None = None
    bill_type: str | None = Field(None, alias="type")
    update_date: str | None = None
    update_date_including_text: str | None = None
    url: str | None = None


class CboCostEstimate(CongressModel):
    description: str | None = None
    pub_date: str | None = None
    title: str | None = None
    url: str | None = None


class CommitteeReportCitation(CongressModel):
    citation: str | None = None
    url: str | None = None


class BillDetails(CongressModel):
    actions: ResourceReference | None = None
    amendments: ResourceReference | None = None
    cbo_cost_estimates: list[CboCostEstimate] | None = None
    committee_reports: list[CommitteeReportCitation] | None = None
    committees: ResourceReference | None = None
    congress: int | None = None
    constitutional_authority_statement_text: str | None = None
    cosponsors: CosponsorsReference | None = None
    introduced_date: str | None = None
    latest_action: LatestAction | None = None
    laws: list[LawReference] | None = None
    number: int | str | None = None
    origin_chamber: str | None = None
    origin_chamber_code: str | None = None
    policy_area: PolicyArea | None = None
    related_bills: ResourceReference | None = None
    sponsors: list[Sponsor] | None = None
    subjects: ResourceReference | None = None
    summaries: ResourceReference | None = None
    text_versions: ResourceReference | None = None
    title: str | None = None
    titles: ResourceReference | None = None
    bill_type: str | None = Field(None, alias="type")
    update_date: str | None = None
    update_date_including_text: str | None = None


class BillAction(CongressModel):
    action_code: str | None = None
    action_date: str | None = None
    action_time: str | None = None
    committees: list[CommitteeRef] | None = None
    recorded_votes: list[RecordedVote] | None = None
    source_system: SourceSystem | None = None
    text: str | None = None
    action_type: str | None = Field(None, alias="type")


class RelationshipDetail(CongressModel):
    identified_by: str | None = None
    relationship_type: str | None = Field(None, alias="type")


class RelatedBill(CongressModel):
    congress: int | None = None
    latest_action: LatestAction | None = None
    number: int | str | None = None
    relationship_details: list[RelationshipDetail] | None = None
    title: str | None = None
    bill_type: str | None = Field(None, alias="type")
    url: str | None = None


class LegislativeSubject(CongressModel):
    name: str | None = None
    update_date: str | None = None


class Subjects(CongressModel):
    legislative_subjects: list[LegislativeSubject] | None = None
    policy_area: PolicyArea | None = None


class BillSummaryItem(CongressModel):
    action_date: str | None = None
    action_desc: str | None = None
    text: str | None = None
    update_date: str | None = None
    version_code: str | None = None


class BillTitle(CongressModel):
    bill_text_version_code: str | None = None
    bill_text_version_name: str | None = None
    chamber_code: str | None = None
    chamber_name: str | None = None
    title: str | None = None
    title_type: str | None = None
    title_type_code: int | None = None
    update_date: str | None = None


class BillsResponse(PrimaryResponse):
    """`bill`, `bill/{congress}`, `bill/{congress}/{type}`"""

    bills: list[BillSummary]


class BillDetailsResponse(PrimaryResponse):
    """`bill/{congress}/{type}/{number}`"""

    bill: BillDetails


class BillActionsResponse(PrimaryResponse):
    actions: list[BillAction]


class BillCommitteesResponse(PrimaryResponse):
    committees: list[CommitteeRef]


class BillCosponsorsResponse(PrimaryResponse):
    cosponsors: list[Cosponsor]


class RelatedBillsResponse(PrimaryResponse):
    related_bills: list[RelatedBill]


class BillSubjectsResponse(PrimaryResponse):
    subjects: Subjects


class BillSummariesResponse(PrimaryResponse):
    summaries: list[BillSummaryItem]


class BillTextVersionsResponse(PrimaryResponse):
    text_versions: list[TextVersion]


class BillTitlesResponse(PrimaryResponse):
    titles: list[BillTitle]


# ---------------------------------------------------------------------------
# Amendments
# ---------------------------------------------------------------------------


class AmendmentSummary(CongressModel):
    congress: int | None = None
    description: str | None = None
    latest_action: LatestAction | None = None
    number: int | str | None = None
    purpose: str | None = None
    amendment_type: str | None = Field(None, alias="type")
    update_date: str | None = None
    url: str | None = None


class AmendedBill(BillReference):
    pass


class AmendmentDetails(CongressModel):
    actions: ResourceReference | None = None
    amended_bill: AmendedBill | None = None
    amendments_to_amendment: ResourceReference | None = None
    chamber: str | None = None
    congress: int | None = None
    cosponsors: CosponsorsReference | None = None
    description: str | None = None
    latest_action: LatestAction | None = None
    number: int | str | None = None
    proposed_date: str | None = None
    purpose: str | None = None
    sponsors: list[Sponsor] | None = None
    submitted_date: str | None = None
    text_versions: ResourceReference | None = None
    amendment_type: str | None = Field(None, alias="type")
    update_date: str | None = None


class AmendmentAction(CongressModel):
    action_code: str | None = None
    action_date: str | None = None
    recorded_votes: list[RecordedVote] | None = None
    source_system: SourceSystem | None = None
    text: str | None = None
    action_type: str | None = Field(None, alias="type")


class AmendmentsResponse(PrimaryResponse):
    """Amendment listings; also returned by `bill/.../amendments`."""

    amendments: list[AmendmentSummary]


class BillAmendmentsResponse(AmendmentsResponse):
    pass


class AmendmentAmendmentsResponse(AmendmentsResponse):
    pass


class AmendmentDetailsResponse(PrimaryResponse):
    amendment: AmendmentDetails


class AmendmentActionsResponse(PrimaryResponse):
    actions: list[AmendmentAction]


class AmendmentCosponsorsResponse(PrimaryResponse):
    cosponsors: list[Cosponsor]


class AmendmentTextVersionsResponse(PrimaryResponse):
    text_versions: list[TextVersion]


# ---------------------------------------------------------------------------
# Summaries and laws
# ---------------------------------------------------------------------------


class SummaryItem(CongressModel):
    action_date: str | None = None
    action_desc: str | None = None
    bill: BillReference | None = None
    current_chamber: str | None = None
    current_chamber_code: str | None = None
    last_summary_update_date: str | None = None
    text: str | None = None
    update_date: str | None = None
    version_code: str | None = None


class SummariesResponse(PrimaryResponse):
    summaries: list[SummaryItem]


class LawSummary(BillSummary):
    laws: list[LawReference] | None = None


class LawsResponse(PrimaryResponse):
    """The law endpoints list bills that became law, under the `bills` key."""

    bills: list[LawSummary]


class LawDetailsResponse(PrimaryResponse):
    bill: BillDetails


# ---------------------------------------------------------------------------
# Congresses
# ---------------------------------------------------------------------------


class Session(CongressModel):
    chamber: str | None = None
    end_date: str | None = None
    number: int | None = None
    start_date: str | None = None
    session_type: str | None = Field(None, alias="type")


class CongressSummary(CongressModel):
    end_year: str | None = None
    name: str | None = None
    sessions: list[Session] | None = None
    start_year: str | None = None
    url: str | None = None


class CongressDetails(CongressSummary):
    number: int | None = None
    update_date: str | None = None


class CongressesResponse(PrimaryResponse):
    congresses: list[CongressSummary]


class CongressDetailsResponse(PrimaryResponse):
    """`congress/{number}` and `congress/current`"""

    congress: CongressDetails


# ---------------------------------------------------------------------------
# Congressional record
# ---------------------------------------------------------------------------


class PdfItem(RecordModel):
    part: int | str | None = None
    url: str | None = None


class RecordSection(RecordModel):
    label: str | None = None
    ordinal: int | None = None
    pdf: list[PdfItem] | None = Field(None, alias="PDF")


class RecordLinks(RecordModel):
    digest: RecordSection | None = None
    full_record: RecordSection | None = None
    house: RecordSection | None = None
    remarks: RecordSection | None = None
    senate: RecordSection | None = None


class RecordIssue(RecordModel):
    congress: int | str | None = None
    id: int | None = None
    issue: int | str | None = None
    links: RecordLinks | None = None
    publish_date: str | None = None
    session: int | str | None = None
    volume: int | str | None = None


class RecordResults(RecordModel):
    index_start: int | None = None
    issues: list[RecordIssue] | None = None
    set_size: int | None = None
    total_count: int | None = None


class CongressionalRecordResponse(PrimaryResponse):
    results: RecordResults = Field(..., alias="Results")


class IssueDocument(CongressModel):
    part: int | str | None = None
    document_type: str | None = Field(None, alias="type")
    url: str | None = None


class IssueSection(CongressModel):
    name: str | None = None
    start_page: str | None = None
    end_page: str | None = None
    text: list[IssueDocument] | None = None


class FullIssue(CongressModel):
    articles: ResourceReference | None = None
    entire_issue: list[IssueDocument] | None = None
    sections: list[IssueSection] | None = None


class DailyIssue(CongressModel):
    congress: int | None = None
    full_issue: FullIssue | None = None
    issue_date: str | None = None
    issue_number: str | None = None
    session_number: int | None = None
    update_date: str | None = None
    url: str | None = None
    volume_number: int | None = None


class DailyCongressionalRecordResponse(PrimaryResponse):
    daily_congressional_record: list[DailyIssue]


class DailyIssueResponse(PrimaryResponse):
    """`daily-congressional-record/{volume}/{issue}`"""

    issue: DailyIssue


class Article(CongressModel):
    title: str | None = None
    start_page: str | None = None
    end_page: str | None = None
    text: list[IssueDocument] | None = None


class ArticleSection(CongressModel):
    name: str | None = None
    section_articles: list[Article] | None = None


class ArticlesResponse(PrimaryResponse):
    articles: list[ArticleSection]


class BoundRecordItem(CongressModel):
    congress: int | None = None
    date: str | None = None
    session_number: int | None = None
    update_date: str | None = None
    url: str | None = None
    volume_number: int | None = None


class BoundCongressionalRecordResponse(PrimaryResponse):
    bound_congressional_record: list[BoundRecordItem]


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------


class Depiction(CongressModel):
    attribution: str | None = None
    image_url: str | None = None


class Term(CongressModel):
    chamber: str | None = None
    start_year: int | None = None
    end_year: int | None = None


class Terms(CongressModel):
    item: list[Term] | None = None


class MemberItem(CongressModel):
    bioguide_id: str | None = None
    depiction: Depiction | None = None
    district: int | None = None
    name: str | None = None
    party_name: str | None = None
    state: str | None = None
    terms: Terms | None = None
    update_date: str | None = None
    url: str | None = None


class MemberTerm(CongressModel):
    chamber: str | None = None
    congress: int | None = None
    district: int | None = None
    end_year: int | None = None
    member_type: str | None = None
    party_code: str | None = None
    party_name: str | None = None
    start_year: int | None = None
    state_code: str | None = None
    state_name: str | None = None


class AddressInformation(CongressModel):
    city: str | None = None
    district: str | None = None
    office_address: str | None = None
    phone_number: str | None = None
    zip_code: int | str | None = None


class LeadershipPosition(CongressModel):
    congress: int | None = None
    current: bool | None = None
    position_type: str | None = Field(None, alias="type")


class PartyHistory(CongressModel):
    party_abbr: str | None = Field(None, alias="partyAbbreviation")
    party_name: str | None = None
    start_year: int | None = None
    end_year: int | None = None


class MemberDetails(CongressModel):
    address_information: AddressInformation | None = None
    bioguide_id: str | None = None
    birth_year: str | None = None
    cosponsored_legislation: ResourceReference | None = None
    current_member: bool | None = None
    death_year: str | None = None
    depiction: Depiction | None = None
    direct_order_name: str | None = None
    district: int | None = None
    first_name: str | None = None
    honorific_name: str | None = None
    inverted_order_name: str | None = None
    last_name: str | None = None
    leadership: list[LeadershipPosition] | None = None
    middle_name: str | None = None
    nick_name: str | None = None
    official_website_url: str | None = None
    party_history: list[PartyHistory] | None = None
    sponsored_legislation: ResourceReference | None = None
    state: str | None = None
    suffix_name: str | None = None
    terms: list[MemberTerm] | None = None
    update_date: str | None = None


class LegislationItem(CongressModel):
    amendment_number: str | None = None
    congress: int | None = None
    introduced_date: str | None = None
    latest_action: LatestAction | None = None
    number: int | str | None = None
    policy_area: PolicyArea | None = None
    title: str | None = None
    bill_type: str | None = Field(None, alias="type")
    url: str | None = None


class MembersResponse(PrimaryResponse):
    members: list[MemberItem]


class MemberDetailsResponse(PrimaryResponse):
    member: MemberDetails


class SponsoredLegislationResponse(PrimaryResponse):
    sponsored_legislation: list[LegislationItem]


class CosponsoredLegislationResponse(PrimaryResponse):
    cosponsored_legislation: list[LegislationItem]


# ---------------------------------------------------------------------------
# Committees
# ---------------------------------------------------------------------------


class CommitteeParent(CongressModel):
    name: str | None = None
    system_code: str | None = None
    url: str | None = None


class CommitteeItem(CongressModel):
    chamber: str | None = None
    committee_type_code: str | None = None
    name: str | None = None
    parent: CommitteeParent | None = None
    subcommittees: list[CommitteeParent] | None = None
    system_code: str | None = None
    update_date: str | None = None
    url: str | None = None


class CommitteeHistoryItem(CongressModel):
    committee_type_code: str | None = None
    end_date: str | None = None
    establishing_authority: str | None = None
    library_of_congress_name: str | None = None
    loc_linked_data_id: str | None = None
    nara_id: str | None = None
    official_name: str | None = None
    start_date: str | None = None
    superintendent_document_number: str | None = None
    update_date: str | None = None


class CommitteeDetails(CongressModel):
    bills: ResourceReference | None = None
    communications: ResourceReference | None = None
    history: list[CommitteeHistoryItem] | None = None
    is_current: bool | None = None
    nominations: ResourceReference | None = None
    parent: CommitteeParent | None = None
    reports: ResourceReference | None = None
    subcommittees: list[CommitteeParent] | None = None
    system_code: str | None = None
    committee_type: str | None = Field(None, alias="type")
    update_date: str | None = None


class CommitteeBill(CongressModel):
    action_date: str | None = None
    bill_type: str | None = None
    congress: int | None = None
    number: int | str | None = None
    relationship_type: str | None = None
    update_date: str | None = None
    url: str | None = None


class CommitteeBills(CongressModel):
    bills: list[CommitteeBill] | None = None
    count: int | None = None


class CommitteesResponse(PrimaryResponse):
    committees: list[CommitteeItem]


class CommitteeDetailsResponse(PrimaryResponse):
    committee: CommitteeDetails


class CommitteeBillsResponse(PrimaryResponse):
    committee_bills: CommitteeBills


# ---------------------------------------------------------------------------
# Committee reports, prints and meetings
# ---------------------------------------------------------------------------


class CommitteeReportItem(CongressModel):
    chamber: str | None = None
    citation: str | None = None
    congress: int | None = None
    number: int | str | None = None
    part: int | None = None
    report_type: str | None = Field(None, alias="type")
    update_date: str | None = None
    url: str | None = None


class AssociatedBill(CongressModel):
    congress: int | None = None
    number: int | str | None = None
    bill_type: str | None = Field(None, alias="type")
    url: str | None = None


class AssociatedTreaty(CongressModel):
    congress: int | None = None
    number: int | str | None = None
    part: str | None = None
    url: str | None = None


class CommitteeReportDetails(CongressModel):
    associated_bill: list[AssociatedBill] | None = None
    associated_treaties: list[AssociatedTreaty] | None = None
    chamber: str | None = None
    citation: str | None = None
    committees: list[CommitteeRef] | None = None
    congress: int | None = None
    is_conference_report: bool | None = None
    issue_date: str | None = None
    number: int | str | None = None
    part: int | None = None
    report_type: str | None = None
    session_number: int | None = None
    text: ResourceReference | None = None
    title: str | None = None
    type_code: str | None = Field(None, alias="type")
    update_date: str | None = None


class ReportTextFormat(CongressModel):
    format_type: str | None = Field(None, alias="type")
    is_errata: str | None = None
    url: str | None = None


class ReportText(CongressModel):
    formats: list[ReportTextFormat] | None = None


class CommitteeReportsResponse(PrimaryResponse):
    reports: list[CommitteeReportItem]


class CommitteeReportDetailsResponse(PrimaryResponse):
    committee_reports: list[CommitteeReportDetails]


class CommitteeReportTextResponse(PrimaryResponse):
    text: list[ReportText]


class CommitteePrintItem(CongressModel):
    chamber: str | None = None
    congress: int | None = None
    jacket_number: int | str | None = None
    update_date: str | None = None
    url: str | None = None


class CommitteePrintDetails(CongressModel):
    associated_bills: list[AssociatedBill] | None = None
    chamber: str | None = None
    citation: str | None = None
    committees: list[CommitteeRef] | None = None
    congress: int | None = None
    jacket_number: int | str | None = None
    number: int | str | None = None
    text: ResourceReference | None = None
    title: str | None = None
    update_date: str | None = None


class CommitteePrintsResponse(PrimaryResponse):
    committee_prints: list[CommitteePrintItem]


class CommitteePrintDetailsResponse(PrimaryResponse):
    committee_print: list[CommitteePrintDetails]


class CommitteePrintTextResponse(PrimaryResponse):
    text: list[TextFormat]


class MeetingLocation(CongressModel):
    address: str | None = None
    building: str | None = None
    room: str | None = None


class MeetingDocument(CongressModel):
    description: str | None = None
    document_type: str | None = None
    format: str | None = None
    name: str | None = None
    url: str | None = None


class Witness(CongressModel):
    name: str | None = None
    organization: str | None = None
    position: str | None = None


class MeetingVideo(CongressModel):
    name: str | None = None
    url: str | None = None


class MeetingRelatedItems(CongressModel):
    bills: list[AssociatedBill] | None = None
    nominations: list[dict[str, Any]] | None = None
    treaties: list[AssociatedTreaty] | None = None


class CommitteeMeetingItem(CongressModel):
    chamber: str | None = None
    congress: int | None = None
    event_id: int | str | None = None
    update_date: str | None = None
    url: str | None = None


class CommitteeMeetingDetails(CongressModel):
    chamber: str | None = None
    committees: list[CommitteeRef] | None = None
    congress: int | None = None
    date: str | None = None
    event_id: int | str | None = None
    hearing_transcript: list[dict[str, Any]] | None = None
    location: MeetingLocation | None = None
    meeting_documents: list[MeetingDocument] | None = None
    meeting_status: str | None = None
    related_items: MeetingRelatedItems | None = None
    title: str | None = None
    meeting_type: str | None = Field(None, alias="type")
    update_date: str | None = None
    videos: list[MeetingVideo] | None = None
    witness_documents: list[MeetingDocument] | None = None
    witnesses: list[Witness] | None = None


class CommitteeMeetingsResponse(PrimaryResponse):
    committee_meetings: list[CommitteeMeetingItem]


class CommitteeMeetingDetailsResponse(PrimaryResponse):
    committee_meeting: CommitteeMeetingDetails


# ---------------------------------------------------------------------------
# Hearings
# ---------------------------------------------------------------------------


class HearingItem(CongressModel):
    chamber: str | None = None
    congress: int | None = None
    jacket_number: int | None = None
    number: int | None = None
    part: int | None = None
    update_date: str | None = None
    url: str | None = None


class HearingDate(CongressModel):
    date: str | None = None


class AssociatedMeeting(CongressModel):
    event_id: str | None = Field(None, alias="eventID")
    url: str | None = Field(None, alias="URL")


class HearingDetails(CongressModel):
    associated_meeting: AssociatedMeeting | None = None
    chamber: str | None = None
    citation: str | None = None
    committees: list[CommitteeRef] | None = None
    congress: int | None = None
    dates: list[HearingDate] | None = None
    formats: list[TextFormat] | None = None
    jacket_number: int | None = None
    library_of_congress_identifier: str | None = None
    number: int | None = None
    part: int | None = None
    title: str | None = None
    update_date: str | None = None


class HearingsResponse(PrimaryResponse):
    hearings: list[HearingItem]


class HearingDetailsResponse(PrimaryResponse):
    hearing: HearingDetails


# ---------------------------------------------------------------------------
# Communications and requirements
# ---------------------------------------------------------------------------


class CommunicationTypeInfo(CongressModel):
    code: str | None = None
    name: str | None = None


class CommunicationItem(CongressModel):
    chamber: str | None = None
    communication_type: CommunicationTypeInfo | None = None
    congress_number: int | None = None
    number: int | str | None = None
    report_nature: str | None = None
    submitting_agency: str | None = None
    submitting_official: str | None = None
    update_date: str | None = None
    url: str | None = None


class CommunicationCommittee(CongressModel):
    name: str | None = None
    referral_date: str | None = None
    system_code: str | None = None
    url: str | None = None


class MatchingRequirement(CongressModel):
    number: int | str | None = None
    url: str | None = Field(None, alias="URL")


class HouseDocument(CongressModel):
    citation: str | None = None
    title: str | None = None


class CommunicationDetails(CongressModel):
    abstract_text: str | None = Field(None, alias="abstract")
    chamber: str | None = None
    committees: list[CommunicationCommittee] | None = None
    communication_type: CommunicationTypeInfo | None = None
    congress: int | None = None
    congressional_record_date: str | None = None
    house_document: list[HouseDocument] | None = None
    is_rulemaking: str | None = None
    legal_authority: str | None = None
    matching_requirements: list[MatchingRequirement] | None = None
    number: int | str | None = None
    report_nature: str | None = None
    session_number: int | None = None
    submitting_agency: str | None = None
    submitting_official: str | None = None
    update_date: str | None = None


class HouseCommunicationsResponse(PrimaryResponse):
    house_communications: list[CommunicationItem]


class HouseCommunicationDetailsResponse(PrimaryResponse):
    house_communication: CommunicationDetails = Field(..., alias="house-communication")


class SenateCommunicationsResponse(PrimaryResponse):
    senate_communications: list[CommunicationItem]


class SenateCommunicationDetailsResponse(PrimaryResponse):
    senate_communication: CommunicationDetails


class HouseRequirementItem(CongressModel):
    number: int | str | None = None
    update_date: str | None = None
    url: str | None = None


class MatchingCommunicationItem(CongressModel):
    chamber: str | None = None
    communication_type: CommunicationTypeInfo | None = None
    congress: int | None = None
    number: int | str | None = None
    url: str | None = None


class HouseRequirementDetails(CongressModel):
    active_record: bool | None = None
    frequency: str | None = None
    legal_authority: str | None = None
    matching_communications: ResourceReference | None = None
    nature: str | None = None
    number: int | str | None = None
    parent_agency: str | None = None
    submitting_agency: str | None = None
    submitting_official: str | None = None
    update_date: str | None = None


class HouseRequirementsResponse(PrimaryResponse):
    house_requirements: list[HouseRequirementItem]


class HouseRequirementDetailsResponse(PrimaryResponse):
    house_requirement: HouseRequirementDetails


class MatchingCommunicationsResponse(PrimaryResponse):
    matching_communications: list[MatchingCommunicationItem]


# ---------------------------------------------------------------------------
# Nominations
# ---------------------------------------------------------------------------


class NominationType(CongressModel):
    is_civilian: bool | None = None
    is_military: bool | None = None


class NominationItem(CongressModel):
    citation: str | None = None
    congress: int | None = None
    description: str | None = None
    latest_action: LatestAction | None = None
    nomination_type: NominationType | None = None
    number: int | str | None = None
    organization: str | None = None
    part_number: str | None = None
    received_date: str | None = None
    update_date: str | None = None
    url: str | None = None


class NomineePosition(CongressModel):
    division: str | None = None
    intro_text: str | None = None
    nominee_count: int | None = None
    ordinal: int | None = None
    organization: str | None = None
    position_title: str | None = None
    url: str | None = None


class NominationDetails(CongressModel):
    actions: ResourceReference | None = None
    authority_date: str | None = None
    citation: str | None = None
    committees: ResourceReference | None = None
    congress: int | None = None
    description: str | None = None
    executive_calendar_number: str | None = None
    hearings: ResourceReference | None = None
    is_list: bool | None = None
    is_privileged: bool | None = None
    latest_action: LatestAction | None = None
    nomination_type: NominationType | None = None
    nominees: list[NomineePosition] | None = None
    number: int | str | None = None
    part_number: str | None = None
    received_date: str | None = None
    update_date: str | None = None


class Nominee(CongressModel):
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    ordinal: int | None = None
    state: str | None = None


class NominationAction(CongressModel):
    action_code: str | None = None
    action_date: str | None = None
    committees: list[CommitteeRef] | None = None
    text: str | None = None
    action_type: str | None = Field(None, alias="type")


class NominationHearing(CongressModel):
    chamber: str | None = None
    citation: str | None = None
    date: str | None = None
    jacket_number: int | None = None
    number: int | None = None
    part: int | None = None


class NominationsResponse(PrimaryResponse):
    nominations: list[NominationItem]


class NominationDetailsResponse(PrimaryResponse):
    nomination: NominationDetails


class NomineesResponse(PrimaryResponse):
    """`nomination/{congress}/{number}/{ordinal}`"""

    nominees: list[Nominee]


class NominationActionsResponse(PrimaryResponse):
    actions: list[NominationAction]


class NominationCommitteesResponse(PrimaryResponse):
    committees: list[CommitteeRef]


class NominationHearingsResponse(PrimaryResponse):
    hearings: list[NominationHearing]


# ---------------------------------------------------------------------------
# Treaties
# ---------------------------------------------------------------------------


class TreatyParts(CongressModel):
    count: int | None = None
    urls: list[str] | None = None


class TreatyItem(CongressModel):
    congress_considered: int | None = None
    congress_received: int | None = None
    number: int | str | None = None
    parts: TreatyParts | None = None
    resolution_text: str | None = None
    suffix: str | None = None
    topic: str | None = None
    transmitted_date: str | None = None
    update_date: str | None = None
    url: str | None = None


class CountryParty(CongressModel):
    name: str | None = None


class IndexTerm(CongressModel):
    name: str | None = None


class TreatyTitle(CongressModel):
    title: str | None = None
    title_type: str | None = None


class TreatyDetails(TreatyItem):
    actions: ResourceReference | None = None
    countries_parties: list[CountryParty] | None = None
    in_force_date: str | None = None
    index_terms: list[IndexTerm] | None = None
    old_number: str | None = None
    old_number_display_name: str | None = None
    related_docs: list[CommitteeReportCitation] | None = None
    titles: list[TreatyTitle] | None = None


class TreatyAction(CongressModel):
    action_code: str | None = None
    action_date: str | None = None
    committees: list[CommitteeRef] | None = None
    text: str | None = None
    action_type: str | None = Field(None, alias="type")


class TreatiesResponse(PrimaryResponse):
    treaties: list[TreatyItem]


class TreatyDetailsResponse(PrimaryResponse):
    treaty: TreatyDetails


class TreatyActionsResponse(PrimaryResponse):
    actions: list[TreatyAction]


class TreatyCommitteesResponse(PrimaryResponse):
    treaty_committees: list[CommitteeRef]


# ---------------------------------------------------------------------------
# Generic
# ---------------------------------------------------------------------------


class GenericResponse(PrimaryResponse):
    """
    Shape-agnostic response.

    Every known top-level key is optional and held as raw JSON. Use
    ``parse_as`` to turn it into one of the typed responses.
    """

    actions: Any = None
    amendment: Any = None
    amendments: Any = None
    articles: Any = None
    bill: Any = None
    bills: Any = None
    bound_congressional_record: Any = None
    committee: Any = None
    committee_bills: Any = None
    committee_meeting: Any = None
    committee_meetings: Any = None
    committee_print: Any = None
    committee_prints: Any = None
    committee_reports: Any = None
    committees: Any = None
    congress: Any = None
    congresses: Any = None
    cosponsored_legislation: Any = None
    cosponsors: Any = None
    daily_congressional_record: Any = None
    hearing: Any = None
    hearings: Any = None
    house_communication: Any = Field(None, alias="house-communication")
    house_communications: Any = None
    house_requirement: Any = None
    house_requirements: Any = None
    issue: Any = None
    matching_communications: Any = None
    member: Any = None
    members: Any = None
    nomination: Any = None
    nominations: Any = None
    nominees: Any = None
    related_bills: Any = None
    reports: Any = None
    results: Any = Field(None, alias="Results")
    senate_communication: Any = None
    senate_communications: Any = None
    sponsored_legislation: Any = None
    subjects: Any = None
    summaries: Any = None
    text: Any = None
    text_versions: Any = None
    titles: Any = None
    treaties: Any = None
    treaty: Any = None
    treaty_committees: Any = None

    def parse_as[T: PrimaryResponse](self, model_cls: type[T]) -> T:
        """Reinterpret this document as ``model_cls``. Raises ParseError on mismatch."""
        from .reconcile import parse_as

        return parse_as(model_cls, self)
