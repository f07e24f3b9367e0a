import copy

import pytest

BILL_DETAILS_DOC = {
    "bill": {
        "congress": 117,
        "number": "3076",
        "type": "HR",
        "title": "Postal Service Reform Act of 2022",
        "introducedDate": "2021-05-11",
        "originChamber": "House",
        "latestAction": {"actionDate": "2022-04-06", "text": "Became Public Law No: 117-108."},
        "sponsors": [{"bioguideId": "M000087", "fullName": "Rep. Maloney, Carolyn B. [D-NY-12]", "party": "D"}],
        "cosponsors": {"count": 102, "countIncludingWithdrawnCosponsors": 102, "url": "https://example/cosponsors"},
        "policyArea": {"name": "Government Operations and Politics"},
        "laws": [{"number": "117-108", "type": "Public Law"}],
        "legislationUrl": "https://www.congress.gov/bill/117th-congress/house-bill/3076",
    },
    "request": {"billNumber": "3076", "billType": "hr", "congress": "117", "contentType": "application/json"},
}

BILLS_DOC = {
    "bills": [
        {
            "congress": 118,
            "number": "1",
            "type": "HR",
            "title": "Lower Energy Costs Act",
            "originChamber": "House",
            "latestAction": {"actionDate": "2023-03-30", "text": "Received in the Senate."},
            "url": "https://api.congress.gov/v3/bill/118/hr/1?format=json",
        }
    ],
    "pagination": {"count": 1, "next": None},
}

MEMBERS_DOC = {
    "members": [
        {
            "bioguideId": "P000197",
            "name": "Pelosi, Nancy",
            "partyName": "Democratic",
            "state": "California",
            "district": 11,
            "terms": {"item": [{"chamber": "House of Representatives", "startYear": 1987}]},
        }
    ],
    "pagination": {"count": 1},
}


@pytest.fixture
def api_key_env(monkeypatch):
    monkeypatch.setenv("CDG_API_KEY", "test_key")
    yield


@pytest.fixture
def no_api_key_env(monkeypatch, tmp_path):
    monkeypatch.delenv("CDG_API_KEY", raising=False)
    # keep a developer .env in the working directory out of the test
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def bill_details_doc():
    return copy.deepcopy(BILL_DETAILS_DOC)


@pytest.fixture
def bills_doc():
    return copy.deepcopy(BILLS_DOC)


@pytest.fixture
def members_doc():
    return copy.deepcopy(MEMBERS_DOC)
