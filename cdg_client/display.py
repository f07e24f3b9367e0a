"""Plain-text rendering of responses for the command line."""

from collections.abc import Iterable, Sequence

from . import models

SEPARATOR = "-" * 40
NA = "N/A"


def _value(value) -> str:
    if value is None or value == "":
        return NA
    return str(value)


def _fields(rows: Sequence[tuple[str, object]]) -> list[str]:
    width = max(len(label) for label, _ in rows)
    return [f"{label.ljust(width)} : {_value(value)}" for label, value in rows]


def _listing(title: str, records: Iterable[Sequence[tuple[str, object]]], total_label: str) -> str:
    lines = [title]
    count = 0
    for rows in records:
        lines.append(SEPARATOR)
        lines.extend(_fields(rows))
        count += 1
    lines.append(SEPARATOR)
    lines.append(f"{total_label}: {count}")
    return "\n".join(lines)


def _latest_action(action: models.LatestAction | None) -> str:
    if action is None:
        return NA
    return f"{_value(action.text)} on {_value(action.action_date)}"


def format_bills(bills: Iterable[models.BillSummary]) -> str:
    return _listing(
        "Recent Bills:",
        (
            [
                ("Bill Number", bill.number),
                ("Title", bill.title),
                ("Congress", bill.congress),
                ("Origin Chamber", bill.origin_chamber),
                ("Latest Action", _latest_action(bill.latest_action)),
                ("URL", bill.url),
            ]
            for bill in bills
        ),
        "Total Bills",
    )


def format_laws(laws: Iterable[models.LawSummary]) -> str:
    return _listing(
        "Recent Laws:",
        (
            [
                ("Law Number", law.number),
                ("Title", law.title),
                ("Congress", law.congress),
                ("Origin Chamber", law.origin_chamber),
                ("Latest Action", _latest_action(law.latest_action)),
                ("URL", law.url),
            ]
            for law in laws
        ),
        "Total Laws",
    )


def format_amendments(amendments: Iterable[models.AmendmentSummary]) -> str:
    return _listing(
        "Recent Amendments:",
        (
            [
                ("Amendment Number", amendment.number),
                ("Type", amendment.amendment_type),
                ("Congress", amendment.congress),
                ("Purpose", amendment.purpose),
                ("Update Date", amendment.update_date),
                ("Latest Action", _latest_action(amendment.latest_action)),
                ("URL", amendment.url),
            ]
            for amendment in amendments
        ),
        "Total Amendments",
    )


def format_nominations(nominations: Iterable[models.NominationItem]) -> str:
    def nomination_type(item: models.NominationItem) -> str:
        kind = item.nomination_type
        if kind is None:
            return NA
        return f"is_civilian: {kind.is_civilian}, is_military: {kind.is_military}"

    return _listing(
        "Recent Nominations:",
        (
            [
                ("Number", item.number),
                ("Citation", item.citation),
                ("Description", item.description),
                ("Received Date", item.received_date),
                ("Nomination Type", nomination_type(item)),
                ("Latest Action", item.latest_action.text if item.latest_action else None),
                ("Organization", item.organization),
                ("URL", item.url),
            ]
            for item in nominations
        ),
        "Total Nominations",
    )


def format_treaties(treaties: Iterable[models.TreatyItem]) -> str:
    def parts(treaty: models.TreatyItem) -> list[tuple[str, object]]:
        if treaty.parts is None:
            return [("Parts Count", 0), ("Parts URLs", None)]
        return [("Parts Count", treaty.parts.count or 0), ("Parts URLs", ", ".join(treaty.parts.urls or []))]

    return _listing(
        "Recent Treaties:",
        (
            [
                ("Number", treaty.number),
                ("Suffix", treaty.suffix),
                ("Topic", treaty.topic),
                ("Transmitted Date", treaty.transmitted_date),
                ("Resolution Text", treaty.resolution_text),
                ("Congress Received", treaty.congress_received),
                ("Congress Considered", treaty.congress_considered),
                *parts(treaty),
            ]
            for treaty in treaties
        ),
        "Total Treaties",
    )


def format_committees(committees: Iterable[models.CommitteeItem]) -> str:
    return _listing(
        "Congressional Committees:",
        (
            [
                ("Name", committee.name),
                ("Chamber", committee.chamber),
                ("Type", committee.committee_type_code),
                ("URL", committee.url),
            ]
            for committee in committees
        ),
        "Total Committees",
    )


def format_members(members: Iterable[models.MemberItem]) -> str:
    def depiction(member: models.MemberItem) -> models.Depiction:
        return member.depiction or models.Depiction()

    return _listing(
        "Current Members of Congress:",
        (
            [
                ("Name", member.name),
                ("bioguideId", member.bioguide_id),
                ("State", member.state),
                ("Party", member.party_name),
                ("District", member.district),
                ("Image URL", depiction(member).image_url),
                ("Attribution", depiction(member).attribution),
            ]
            for member in members
        ),
        "Total Members",
    )


def format_congress(response: models.CongressDetailsResponse) -> str:
    congress = response.congress
    lines = ["Congress Details:", SEPARATOR]
    lines.extend(
        _fields(
            [
                ("Name", congress.name),
                ("Number", congress.number),
                ("Start Year", congress.start_year),
                ("End Year", congress.end_year),
            ]
        )
    )
    lines.append("Sessions:")
    for session in congress.sessions or []:
        lines.append(
            f"  - {_value(session.chamber)} session {_value(session.number)}: "
            f"{_value(session.start_date)} to {_value(session.end_date)}"
        )
    lines.extend(_fields([("URL", congress.url)]))
    lines.append(SEPARATOR)
    return "\n".join(lines)


def format_member_details(response: models.MemberDetailsResponse) -> str:
    member = response.member
    name = " ".join(part for part in (member.first_name, member.middle_name, member.last_name) if part)
    lines = ["Member Details:", SEPARATOR]
    lines.extend(
        _fields(
            [
                ("Name", name),
                ("bioguideId", member.bioguide_id),
                ("State", member.state),
                ("District", member.district),
                ("Birth Year", member.birth_year),
                ("Current Member", member.current_member),
                ("Website", member.official_website_url),
            ]
        )
    )

    address = member.address_information
    if address:
        lines.extend(
            _fields(
                [
                    ("Office Address", address.office_address),
                    ("City", address.city),
                    ("Phone Number", address.phone_number),
                ]
            )
        )

    lines.append("")
    lines.append("Party Affiliation:")
    for party in member.party_history or []:
        lines.append(SEPARATOR)
        lines.extend(
            _fields(
                [
                    ("Party", party.party_name),
                    ("Start Year", party.start_year),
                    ("End Year", party.end_year),
                ]
            )
        )

    lines.append("")
    lines.append("Terms of Service:")
    for term in member.terms or []:
        lines.append(SEPARATOR)
        lines.extend(
            _fields(
                [
                    ("Chamber", term.chamber),
                    ("Congress", term.congress),
                    ("State", term.state_name),
                    ("Start Year", term.start_year),
                    ("End Year", term.end_year),
                ]
            )
        )
    lines.append(SEPARATOR)
    return "\n".join(lines)


def format_bill_details(response: models.BillDetailsResponse) -> str:
    bill = response.bill
    sponsors = ", ".join(_value(sponsor.full_name) for sponsor in bill.sponsors or []) or None
    lines = ["Bill Details:", SEPARATOR]
    lines.extend(
        _fields(
            [
                ("Title", bill.title),
                ("Number", bill.number),
                ("Type", bill.bill_type),
                ("Congress", bill.congress),
                ("Introduced Date", bill.introduced_date),
                ("Origin Chamber", bill.origin_chamber),
                ("Policy Area", bill.policy_area.name if bill.policy_area else None),
                ("Sponsors", sponsors),
                ("Cosponsors", bill.cosponsors.count if bill.cosponsors else None),
                ("Latest Action", _latest_action(bill.latest_action)),
                ("Update Date", bill.update_date),
            ]
        )
    )
    lines.append(SEPARATOR)
    return "\n".join(lines)
