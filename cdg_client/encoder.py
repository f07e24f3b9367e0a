"""
Endpoint to URL encoding.

`encode` maps an endpoint to a relative URL (path plus query string). It is
pure and never sees the API key; `append_api_key` adds the key as a separate
step and `build_url` combines both with the base URL.
"""

from functools import singledispatch

from . import endpoints as ep

BASE_URL = "https://api.congress.gov/v3/"


def _ordered(*segments) -> list[str]:
    """Keep leading segments up to the first missing one."""
    out = []
    for segment in segments:
        if segment is None or segment == "":
            break
        out.append(str(segment))
    return out


def _flag(enabled: bool, literal: str) -> str | None:
    return literal if enabled else None


def _join(prefix: str, segments: list[str], endpoint: ep.Endpoint) -> str:
    path = "/".join([prefix, *segments])
    query = endpoint.parameters.to_query_string() if endpoint.parameters else ""
    return f"{path}?{query}" if query else path


@singledispatch
def encode(endpoint) -> str:
    """Return the relative URL for an endpoint, e.g. `bill/117/hr/1/text?format=json`."""
    raise TypeError(f"Unsupported endpoint type: {type(endpoint).__name__}")


@encode.register
def _(endpoint: ep.Bill) -> str:
    segments = _ordered(endpoint.congress, endpoint.bill_type, endpoint.bill_number, endpoint.bill_option)
    return _join("bill", segments, endpoint)


@encode.register
def _(endpoint: ep.Law) -> str:
    segments = _ordered(endpoint.congress, endpoint.law_type, endpoint.law_number)
    return _join("law", segments, endpoint)


@encode.register
def _(endpoint: ep.Amendment) -> str:
    segments = _ordered(
        endpoint.congress,
        endpoint.amendment_type,
        endpoint.amendment_number,
        endpoint.amendment_option,
    )
    return _join("amendment", segments, endpoint)


@encode.register
def _(endpoint: ep.Summaries) -> str:
    return _join("summaries", _ordered(endpoint.congress, endpoint.bill_type), endpoint)


@encode.register
def _(endpoint: ep.Congress) -> str:
    segments = []
    if endpoint.congress is not None and not endpoint.current:
        segments = [str(endpoint.congress)]
    elif endpoint.current and endpoint.congress is None:
        segments = ["current"]
    return _join("congress", segments, endpoint)


@encode.register
def _(endpoint: ep.Member) -> str:
    has_state = bool(endpoint.state)
    has_district = endpoint.district is not None

    if endpoint.bioguide_id:
        segments = _ordered(endpoint.bioguide_id, endpoint.member_option)
    elif endpoint.congress is not None and not has_state:
        segments = ["congress", str(endpoint.congress)]
    elif endpoint.congress is not None and has_district:
        segments = ["congress", str(endpoint.congress), endpoint.state, str(endpoint.district)]
    elif has_state and has_district:
        segments = [endpoint.state, str(endpoint.district)]
    elif has_state:
        segments = [endpoint.state]
    else:
        segments = []
    return _join("member", segments, endpoint)


@encode.register
def _(endpoint: ep.Committee) -> str:
    has_chamber = endpoint.chamber is not None
    has_congress = endpoint.congress is not None
    has_code = bool(endpoint.committee_code)

    if has_chamber and has_congress:
        segments = [str(endpoint.congress), endpoint.chamber.value]
    elif has_chamber and not has_code:
        segments = [endpoint.chamber.value]
    elif has_congress:
        segments = [str(endpoint.congress)]
    elif has_chamber:
        segments = _ordered(endpoint.chamber, endpoint.committee_code, endpoint.committee_option)
    else:
        segments = []
    return _join("committee", segments, endpoint)


@encode.register
def _(endpoint: ep.CommitteeReport) -> str:
    segments = _ordered(
        endpoint.congress,
        endpoint.report_type,
        endpoint.report_number,
        _flag(endpoint.text, "text"),
    )
    return _join("committee-report", segments, endpoint)


@encode.register
def _(endpoint: ep.CommitteePrint) -> str:
    segments = _ordered(
        endpoint.congress,
        endpoint.chamber,
        endpoint.jacket_number,
        _flag(endpoint.text, "text"),
    )
    return _join("committee-print", segments, endpoint)


@encode.register
def _(endpoint: ep.CommitteeMeeting) -> str:
    segments = _ordered(endpoint.congress, endpoint.chamber, endpoint.event_id)
    return _join("committee-meeting", segments, endpoint)


@encode.register
def _(endpoint: ep.Hearing) -> str:
    segments = _ordered(endpoint.congress, endpoint.chamber, endpoint.jacket_number)
    return _join("hearing", segments, endpoint)


@encode.register
def _(endpoint: ep.CongressionalRecord) -> str:
    return _join("congressional-record", [], endpoint)


@encode.register
def _(endpoint: ep.DailyCongressionalRecord) -> str:
    segments = _ordered(
        endpoint.volume_number,
        endpoint.issue_number,
        _flag(endpoint.articles, "articles"),
    )
    return _join("daily-congressional-record", segments, endpoint)


@encode.register
def _(endpoint: ep.BoundCongressionalRecord) -> str:
    segments = _ordered(endpoint.year, endpoint.month, endpoint.day)
    return _join("bound-congressional-record", segments, endpoint)


@encode.register
def _(endpoint: ep.HouseCommunication) -> str:
    segments = _ordered(endpoint.congress, endpoint.communication_type, endpoint.communication_number)
    return _join("house-communication", segments, endpoint)


@encode.register
def _(endpoint: ep.HouseRequirement) -> str:
    segments = _ordered(
        endpoint.requirement_number,
        _flag(endpoint.matching_communications, "matching-communications"),
    )
    return _join("house-requirement", segments, endpoint)


@encode.register
def _(endpoint: ep.SenateCommunication) -> str:
    segments = _ordered(endpoint.congress, endpoint.communication_type, endpoint.communication_number)
    return _join("senate-communication", segments, endpoint)


@encode.register
def _(endpoint: ep.Nomination) -> str:
    tail = endpoint.ordinal if endpoint.ordinal is not None else endpoint.nomination_option
    segments = _ordered(endpoint.congress, endpoint.nomination_number, tail)
    return _join("nomination", segments, endpoint)


@encode.register
def _(endpoint: ep.Treaty) -> str:
    segments = _ordered(endpoint.congress, endpoint.treaty_number)
    if len(segments) == 2:
        if endpoint.treaty_suffix and endpoint.actions:
            segments += [endpoint.treaty_suffix, "actions"]
        elif endpoint.treaty_suffix:
            segments.append(endpoint.treaty_suffix)
        elif endpoint.actions:
            segments.append("actions")
        elif endpoint.committees:
            segments.append("committees")
    return _join("treaty", segments, endpoint)


@encode.register
def _(endpoint: ep.GenericEndpoint) -> str:
    path = endpoint.path.lstrip("/")
    query = endpoint.parameters.to_query_string() if endpoint.parameters else ""
    if not query:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"


def append_api_key(url: str, api_key: str) -> str:
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}api_key={api_key}"


def build_url(endpoint: ep.Endpoint, api_key: str, base_url: str = BASE_URL) -> str:
    """Full request URL: base URL, encoded endpoint, then the API key."""
    if not base_url.endswith("/"):
        base_url += "/"
    return append_api_key(f"{base_url}{encode(endpoint)}", api_key)
