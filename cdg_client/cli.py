"""Command line tool for browsing the Congress.gov API."""

from collections.abc import Callable

import typer

from . import display, models
from .client import CongressClient
from .endpoints import Amendment, Bill, Committee, Congress, GenericEndpoint, Law, Member, Nomination, Treaty
from .enums import BillType, FormatType
from .errors import CongressAPIError
from .logs import configure_logging
from .pagination import DEFAULT_PAGE_LIMIT, fetch_all
from .parameters import Parameters
from .reconcile import parse_as, serialize

RESULTS_MAX = 1000
CURRENT_LAW_CONGRESS = 118

app = typer.Typer(help="Query the Congress.gov v3 API.", no_args_is_help=True)


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
):
    try:
        configure_logging(level=log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


def _page(offset: int, limit: int, **extra) -> Parameters:
    return Parameters(format=FormatType.JSON, offset=offset, limit=limit, **extra)


def _run(action: Callable[[CongressClient], str]):
    """Run an action with a fresh client and print its output, or the error to stderr."""
    try:
        with CongressClient() as client:
            typer.echo(action(client))
    except CongressAPIError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


@app.command()
def list_bills(amount: int = typer.Argument(10, min=1, help="Number of bills to fetch")):
    """List recent bills introduced in Congress."""
    typer.echo(f"Searching for {amount} bills...")
    _run(
        lambda client: display.format_bills(
            fetch_all(
                client,
                lambda offset, limit: Bill(parameters=_page(offset, limit)),
                lambda response: response.bills,
                models.BillsResponse,
                amount,
                DEFAULT_PAGE_LIMIT,
            )
        )
    )


@app.command()
def current_congress():
    """Display information about the current congress session."""
    _run(
        lambda client: display.format_congress(
            client.fetch(Congress(current=True), models.CongressDetailsResponse)
        )
    )


@app.command()
def list_nominations():
    """List recent nominations."""
    _run(
        lambda client: display.format_nominations(
            fetch_all(
                client,
                lambda offset, limit: Nomination(parameters=_page(offset, limit)),
                lambda response: response.nominations,
                models.NominationsResponse,
                RESULTS_MAX,
            )
        )
    )


@app.command()
def list_treaties():
    """List recent treaties."""
    _run(
        lambda client: display.format_treaties(
            fetch_all(
                client,
                lambda offset, limit: Treaty(parameters=_page(offset, limit)),
                lambda response: response.treaties,
                models.TreatiesResponse,
                RESULTS_MAX,
            )
        )
    )


@app.command()
def member_details(bioguide_id: str = typer.Argument(..., help="Member bioguide ID, e.g. P000197")):
    """Get detailed information about a specific member."""
    _run(
        lambda client: display.format_member_details(
            client.fetch(Member(bioguide_id=bioguide_id), models.MemberDetailsResponse)
        )
    )


def _bill_type(value: str) -> BillType:
    try:
        return BillType.from_str(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


@app.command()
def bill_details(
    congress: int = typer.Argument(..., help="Congress number, e.g. 118"),
    bill_type: str = typer.Argument(..., help="Bill type, e.g. hr or s"),
    bill_number: int = typer.Argument(..., help="Bill number"),
):
    """Get detailed information about a specific bill."""
    endpoint = Bill(congress=congress, bill_type=_bill_type(bill_type), bill_number=bill_number)
    _run(lambda client: display.format_bill_details(client.fetch(endpoint, models.BillDetailsResponse)))


@app.command()
def current_members():
    """Fetch and display all current members of Congress."""
    _run(
        lambda client: display.format_members(
            fetch_all(
                client,
                lambda offset, limit: Member(parameters=_page(offset, limit, current_member=True)),
                lambda response: response.members,
                models.MembersResponse,
                RESULTS_MAX,
            )
        )
    )


@app.command()
def list_committees():
    """List all congressional committees."""
    _run(
        lambda client: display.format_committees(
            fetch_all(
                client,
                lambda offset, limit: Committee(parameters=_page(offset, limit)),
                lambda response: response.committees,
                models.CommitteesResponse,
                RESULTS_MAX,
            )
        )
    )


@app.command()
def list_laws(congress: int = typer.Argument(CURRENT_LAW_CONGRESS, help="Congress number")):
    """List recently passed laws."""
    _run(
        lambda client: display.format_laws(
            fetch_all(
                client,
                lambda offset, limit: Law(congress=congress, parameters=_page(offset, limit)),
                lambda response: response.bills,
                models.LawsResponse,
                RESULTS_MAX,
            )
        )
    )


@app.command()
def list_amendments():
    """List recent amendments."""
    _run(
        lambda client: display.format_amendments(
            fetch_all(
                client,
                lambda offset, limit: Amendment(parameters=_page(offset, limit)),
                lambda response: response.amendments,
                models.AmendmentsResponse,
                RESULTS_MAX,
            )
        )
    )


def _response_model(name: str | None) -> type[models.PrimaryResponse] | None:
    if name is None:
        return None
    model = getattr(models, name, None)
    if not (isinstance(model, type) and issubclass(model, models.PrimaryResponse)):
        raise typer.BadParameter(f"Unknown response type '{name}'")
    return model


@app.command()
def raw(
    path: str = typer.Argument(..., help="API path, e.g. bill/118/hr/1/cosponsors"),
    limit: int = typer.Option(None, "--limit", help="Page size"),
    offset: int = typer.Option(None, "--offset", help="Page offset"),
    as_type: str = typer.Option(None, "--as", help="Reinterpret as a typed response, e.g. BillsResponse"),
):
    """Fetch any path and print the JSON document."""
    model = _response_model(as_type)
    endpoint = GenericEndpoint(
        path=path,
        parameters=Parameters(format=FormatType.JSON, limit=limit, offset=offset),
    )

    def action(client: CongressClient) -> str:
        response = client.fetch(endpoint)
        if model is not None:
            response = parse_as(model, response)
        return serialize(response, pretty=True)

    _run(action)


if __name__ == "__main__":
    app()
