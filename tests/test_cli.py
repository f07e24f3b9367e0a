import json
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from cdg_client.cli import app
from cdg_client.endpoints import Bill, Congress, GenericEndpoint, Law, Member
from cdg_client.enums import BillType
from cdg_client.errors import HttpError
from cdg_client.models import BillDetailsResponse, CongressDetailsResponse, GenericResponse

runner = CliRunner()


@pytest.fixture
def mock_client():
    client = MagicMock()
    with patch("cdg_client.cli.CongressClient") as client_cls:
        client_cls.return_value.__enter__.return_value = client
        yield client


def serve(mock_client, key, documents):
    """Answer fetch calls with the given item lists, one per page."""
    pages = iter(documents)

    def fetch(endpoint, response_model):
        return response_model.model_validate({key: next(pages, [])})

    mock_client.fetch.side_effect = fetch


def test_list_bills(mock_client, bills_doc):
    serve(mock_client, "bills", [bills_doc["bills"]])

    result = runner.invoke(app, ["list-bills", "5"])

    assert result.exit_code == 0
    assert "Searching for 5 bills..." in result.stdout
    assert "Recent Bills:" in result.stdout
    assert "Lower Energy Costs Act" in result.stdout
    assert "Received in the Senate. on 2023-03-30" in result.stdout
    assert "Total Bills: 1" in result.stdout

    endpoint = mock_client.fetch.call_args.args[0]
    assert isinstance(endpoint, Bill)
    assert endpoint.parameters.offset == 0
    assert endpoint.parameters.limit == 250


def test_current_congress(mock_client):
    mock_client.fetch.return_value = CongressDetailsResponse.model_validate(
        {
            "congress": {
                "name": "118th Congress",
                "number": 118,
                "startYear": "2023",
                "endYear": "2024",
                "sessions": [{"chamber": "House of Representatives", "number": 1, "startDate": "2023-01-03"}],
            }
        }
    )

    result = runner.invoke(app, ["current-congress"])

    assert result.exit_code == 0
    assert "118th Congress" in result.stdout
    assert "session 1: 2023-01-03 to N/A" in result.stdout
    assert mock_client.fetch.call_args.args[0] == Congress(current=True)


def test_current_members_filters_current(mock_client, members_doc):
    serve(mock_client, "members", [members_doc["members"]])

    result = runner.invoke(app, ["current-members"])

    assert result.exit_code == 0
    assert "Pelosi, Nancy" in result.stdout
    assert "Total Members: 1" in result.stdout
    endpoint = mock_client.fetch.call_args.args[0]
    assert isinstance(endpoint, Member)
    assert endpoint.parameters.current_member is True


def test_list_laws_defaults_to_118(mock_client):
    serve(mock_client, "bills", [[{"number": "31", "title": "A law", "laws": [{"number": "118-31"}]}]])

    result = runner.invoke(app, ["list-laws"])

    assert result.exit_code == 0
    assert "Total Laws: 1" in result.stdout
    endpoint = mock_client.fetch.call_args.args[0]
    assert isinstance(endpoint, Law)
    assert endpoint.congress == 118


def test_bill_details(mock_client, bill_details_doc):
    mock_client.fetch.return_value = BillDetailsResponse.model_validate(bill_details_doc)

    result = runner.invoke(app, ["bill-details", "117", "HR", "3076"])

    assert result.exit_code == 0
    assert "Postal Service Reform Act of 2022" in result.stdout
    assert "Government Operations and Politics" in result.stdout
    assert mock_client.fetch.call_args.args[0] == Bill(congress=117, bill_type=BillType.HR, bill_number=3076)


def test_bill_details_bad_type(mock_client):
    result = runner.invoke(app, ["bill-details", "117", "xx", "1"])
    assert result.exit_code != 0
    mock_client.fetch.assert_not_called()


def test_bill_details_missing_arguments(mock_client):
    result = runner.invoke(app, ["bill-details", "117"])
    assert result.exit_code != 0
    mock_client.fetch.assert_not_called()


def test_api_error_exits_with_status_1(mock_client):
    mock_client.fetch.side_effect = HttpError("Forbidden", status_code=403, url="https://x?api_key=k")

    result = runner.invoke(app, ["member-details", "P000197"])

    assert result.exit_code == 1
    assert "Error: [403] Forbidden" in result.output


def test_missing_api_key(no_api_key_env):
    result = runner.invoke(app, ["current-congress"])
    assert result.exit_code == 1
    assert "CDG_API_KEY" in result.output


def test_raw_prints_json(mock_client, bills_doc):
    mock_client.fetch.return_value = GenericResponse.model_validate(bills_doc)

    result = runner.invoke(app, ["raw", "bill/118", "--limit", "1", "--as", "BillsResponse"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == bills_doc
    endpoint = mock_client.fetch.call_args.args[0]
    assert isinstance(endpoint, GenericEndpoint)
    assert endpoint.path == "bill/118"
    assert endpoint.parameters.limit == 1


def test_raw_shape_mismatch(mock_client, members_doc):
    mock_client.fetch.return_value = GenericResponse.model_validate(members_doc)

    result = runner.invoke(app, ["raw", "member", "--as", "BillsResponse"])

    assert result.exit_code == 1
    assert "does not match BillsResponse" in result.output


def test_raw_unknown_type(mock_client):
    result = runner.invoke(app, ["raw", "bill", "--as", "NotAModel"])
    assert result.exit_code != 0
    mock_client.fetch.assert_not_called()


def test_bad_log_level_is_usage_error(mock_client):
    result = runner.invoke(app, ["--log-level", "bogus", "current-congress"])

    assert result.exit_code == 2
    mock_client.fetch.assert_not_called()
