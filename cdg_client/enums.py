"""Value types used in Congress.gov paths and query strings."""

from enum import StrEnum


class _LookupEnum(StrEnum):
    """StrEnum with case-insensitive lookup by value or member name."""

    @classmethod
    def from_str(cls, value: str):
        key = value.strip().lower()
        for member in cls:
            if member.value == key or member.name.lower() == key:
                return member
        valid = ", ".join(m.value for m in cls if m.value)
        raise ValueError(f"Unknown {cls.__name__} '{value}'. Expected one of: {valid}")


class FormatType(_LookupEnum):
    JSON = "json"
    XML = "xml"


class SortType(_LookupEnum):
    """Sort order by update date."""

    UPDATE_DATE_ASC = "updateDate+asc"
    UPDATE_DATE_DESC = "updateDate+desc"


class BillType(_LookupEnum):
    HR = "hr"
    S = "s"
    HJRES = "hjres"
    SJRES = "sjres"
    HCONRES = "hconres"
    SCONRES = "sconres"
    HRES = "hres"
    SRES = "sres"


class AmendmentType(_LookupEnum):
    HAMDT = "hamdt"
    SAMDT = "samdt"
    SUAMDT = "suamdt"


class LawType(_LookupEnum):
    PUB = "pub"
    PRIV = "priv"


class ChamberType(_LookupEnum):
    HOUSE = "house"
    SENATE = "senate"
    JOINT = "joint"
    NOCHAMBER = "nochamber"


class CommunicationType(_LookupEnum):
    """Executive communication, memorial, presidential message, petition, petition/memorial."""

    EC = "ec"
    ML = "ml"
    PM = "pm"
    PT = "pt"
    POM = "pom"


class CommitteeReportType(_LookupEnum):
    HRPT = "hrpt"
    SRPT = "srpt"
    HDOC = "hdoc"
    SDOC = "sdoc"
    CRPT = "crpt"


# Sub-resource options. NONE contributes no path segment.


class BillOption(StrEnum):
    NONE = ""
    ACTIONS = "actions"
    AMENDMENTS = "amendments"
    COMMITTEES = "committees"
    COSPONSORS = "cosponsors"
    RELATED_BILLS = "relatedbills"
    SUBJECTS = "subjects"
    SUMMARIES = "summaries"
    TEXT = "text"
    TITLES = "titles"


class AmendmentOption(StrEnum):
    NONE = ""
    ACTIONS = "actions"
    AMENDMENTS = "amendments"
    COSPONSORS = "cosponsors"
    TEXT = "text"


class MemberOption(StrEnum):
    NONE = ""
    SPONSORED_LEGISLATION = "sponsored-legislation"
    COSPONSORED_LEGISLATION = "cosponsored-legislation"


class CommitteeOption(StrEnum):
    NONE = ""
    BILLS = "bills"
    REPORTS = "reports"
    NOMINATIONS = "nominations"
    HOUSE_COMMUNICATION = "house-communication"
    SENATE_COMMUNICATION = "senate-communication"


class NominationOption(StrEnum):
    NONE = ""
    ACTIONS = "actions"
    COMMITTEES = "committees"
    HEARINGS = "hearings"
