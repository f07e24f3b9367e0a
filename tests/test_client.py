import json
import logging
import traceback
from unittest.mock import MagicMock

import httpx
import pytest

from cdg_client.client import CongressClient
from cdg_client.endpoints import Bill, Member
from cdg_client.enums import BillType, FormatType
from cdg_client.errors import ConfigError, DeserializationError, HttpError
from cdg_client.models import BillDetailsResponse, BillsResponse, GenericResponse, MembersResponse
from cdg_client.parameters import Parameters


def make_client(handler, api_key="test_key"):
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return CongressClient(api_key, http_client=http_client)


def json_handler(payload, status_code=200, seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)

    return handler


def test_client_init_from_env(api_key_env):
    client = CongressClient()
    assert client.api_key == "test_key"
    client.close()


def test_client_init_missing_key(no_api_key_env):
    with pytest.raises(ConfigError, match="CDG_API_KEY"):
        CongressClient()


def test_missing_key_is_value_error(no_api_key_env):
    with pytest.raises(ValueError):
        CongressClient()


def test_explicit_key_wins(api_key_env):
    client = CongressClient("explicit")
    assert client.api_key == "explicit"
    client.close()


def test_fetch_typed(bill_details_doc):
    seen = []
    client = make_client(json_handler(bill_details_doc, seen=seen))

    endpoint = Bill(
        congress=117,
        bill_type=BillType.HR,
        bill_number=3076,
        parameters=Parameters(format=FormatType.JSON),
    )
    response = client.fetch(endpoint, BillDetailsResponse)

    assert response.bill.title == "Postal Service Reform Act of 2022"
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == "https://api.congress.gov/v3/bill/117/hr/3076?format=json&api_key=test_key"


def test_fetch_defaults_to_generic(members_doc):
    client = make_client(json_handler(members_doc))
    response = client.fetch(Member())

    assert isinstance(response, GenericResponse)
    assert response.members[0]["name"] == "Pelosi, Nancy"
    assert response.parse_as(MembersResponse).members[0].district == 11


def test_fetch_http_error_does_not_retry():
    seen = []
    client = make_client(json_handler({"error": {"code": "NOT_FOUND"}}, status_code=404, seen=seen))

    with pytest.raises(HttpError) as exc:
        client.fetch(Bill(congress=999), BillsResponse)

    assert exc.value.status_code == 404
    assert "test_key" not in exc.value.url
    assert "api_key=***" in exc.value.url
    assert len(seen) == 1


def test_fetch_server_error_raises_before_parsing():
    client = make_client(lambda request: httpx.Response(503, text="<html>down</html>"))
    with pytest.raises(HttpError) as exc:
        client.fetch(Bill(), BillsResponse)
    assert exc.value.status_code == 503
    assert "[503]" in str(exc.value)


def test_fetch_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)
    with pytest.raises(HttpError) as exc:
        client.fetch(Bill())
    assert exc.value.status_code is None
    assert "ConnectError" in str(exc.value)
    assert exc.value.__cause__ is None


def test_fetch_shape_mismatch(members_doc):
    client = make_client(json_handler(members_doc))
    with pytest.raises(DeserializationError) as exc:
        client.fetch(Member(), BillsResponse)
    assert exc.value.model_name == "BillsResponse"


def test_fetch_non_json_body():
    client = make_client(lambda request: httpx.Response(200, text="<api-root/>"))
    with pytest.raises(DeserializationError):
        client.fetch(Bill(parameters=Parameters(format=FormatType.XML)))


def test_fetch_rejects_non_response_model():
    client = make_client(json_handler({}))
    with pytest.raises(TypeError):
        client.fetch(Bill(), dict)


def test_fetch_with_mocked_http_client(bills_doc):
    mock_response = MagicMock()
    mock_response.content = json.dumps(bills_doc).encode()
    mock_response.raise_for_status = MagicMock()

    http_client = MagicMock()
    http_client.get.return_value = mock_response

    client = CongressClient("test_key", http_client=http_client)
    response = client.fetch(Bill(congress=118), BillsResponse)

    assert response.bills[0].title == "Lower Energy Costs Act"
    http_client.get.assert_called_once_with("https://api.congress.gov/v3/bill/118?api_key=test_key")


def test_close_leaves_caller_client_open():
    http_client = MagicMock()
    with CongressClient("test_key", http_client=http_client):
        pass
    http_client.close.assert_not_called()


def test_api_key_not_logged(bills_doc, caplog):
    client = make_client(json_handler(bills_doc))
    with caplog.at_level(logging.DEBUG, logger="cdg_client"):
        client.fetch(Bill(), BillsResponse)

    assert "GET https://api.congress.gov/v3/bill?api_key=***" in caplog.text
    assert "test_key" not in caplog.text


def test_base_url_override(bills_doc):
    seen = []
    http_client = httpx.Client(transport=httpx.MockTransport(json_handler(bills_doc, seen=seen)))
    client = CongressClient("k", base_url="http://localhost:8080/v3/", http_client=http_client)
    client.fetch(Bill())
    assert str(seen[0].url) == "http://localhost:8080/v3/bill?api_key=k"


def test_http_error_traceback_hides_api_key():
    client = make_client(json_handler({"error": "forbidden"}, status_code=403))

    with pytest.raises(HttpError) as exc:
        client.fetch(Bill(congress=118), BillsResponse)

    assert exc.value.__suppress_context__
    assert "test_key" not in "".join(traceback.format_exception(exc.value))


def test_fetch_rejects_string_counts():
    client = make_client(json_handler({"bills": [], "pagination": {"count": "5"}}))
    with pytest.raises(DeserializationError):
        client.fetch(Bill(), BillsResponse)
