"""Tests for the PubMed E-utilities client."""

import pytest
import requests

from medsky.services.literature import PubMedClient


class FakeResponse:
    def __init__(self, payload=None, status_code=200, bad_json=False):
        self.payload = payload
        self.status_code = status_code
        self.bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.bad_json:
            raise ValueError("Expecting value")
        return self.payload


class FakeSession:
    """Records requests and replays one response per endpoint."""

    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.requests = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.requests.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        endpoint = url.rsplit("/", 1)[-1]
        return self.responses[endpoint]

    def close(self):
        self.closed = True


def make_client(session, api_key=""):
    return PubMedClient(
        base_url="https://eutils.example.org/entrez/eutils/",
        api_key=api_key,
        timeout=3.0,
        session=session,
    )


def test_search_ids_builds_esearch_request():
    session = FakeSession({"esearch.fcgi": FakeResponse({"esearchresult": {"idlist": ["1", "2", "3"]}})})
    client = make_client(session)

    assert client.search_ids("cardiology diagnosis", 5) == ["1", "2", "3"]

    request = session.requests[0]
    assert request["url"] == "https://eutils.example.org/entrez/eutils/esearch.fcgi"
    assert request["params"] == {
        "db": "pubmed",
        "retmode": "json",
        "term": "cardiology diagnosis",
        "retmax": 5,
    }
    assert request["timeout"] == 3.0


def test_search_ids_truncates_to_retmax_and_stringifies():
    session = FakeSession({"esearch.fcgi": FakeResponse({"esearchresult": {"idlist": [10, 20, 30]}})})
    assert make_client(session).search_ids("x", 2) == ["10", "20"]


def test_api_key_is_sent_when_configured():
    session = FakeSession({"esearch.fcgi": FakeResponse({"esearchresult": {"idlist": []}})})
    make_client(session, api_key="secret").search_ids("x", 1)
    assert session.requests[0]["params"]["api_key"] == "secret"


@pytest.mark.parametrize("payload", [
    {"esearchresult": {"idlist": []}},
    {"esearchresult": {}},
    {"unexpected": True},
    {"esearchresult": {"idlist": "1,2"}},
    ["not", "a", "dict"],
])
def test_search_ids_empty_on_missing_or_malformed_results(payload):
    session = FakeSession({"esearch.fcgi": FakeResponse(payload)})
    assert make_client(session).search_ids("x", 5) == []


def test_search_ids_empty_on_http_error():
    session = FakeSession({"esearch.fcgi": FakeResponse(status_code=503)})
    assert make_client(session).search_ids("x", 5) == []


def test_search_ids_empty_on_connection_error():
    session = FakeSession(error=requests.exceptions.ConnectionError("unreachable"))
    assert make_client(session).search_ids("x", 5) == []


def test_search_ids_empty_on_bad_json():
    session = FakeSession({"esearch.fcgi": FakeResponse(bad_json=True)})
    assert make_client(session).search_ids("x", 5) == []


def test_fetch_title():
    session = FakeSession({"esummary.fcgi": FakeResponse(
        {"result": {"uids": ["123"], "123": {"title": "  Guidelines for Asthma  "}}}
    )})
    client = make_client(session)

    assert client.fetch_title("123") == "Guidelines for Asthma"
    assert session.requests[0]["params"]["id"] == "123"


@pytest.mark.parametrize("payload", [
    {"result": {"123": {"title": ""}}},
    {"result": {"123": {}}},
    {"result": {"456": {"title": "Other"}}},
    {"result": []},
    {},
])
def test_fetch_title_none_when_unavailable(payload):
    session = FakeSession({"esummary.fcgi": FakeResponse(payload)})
    assert make_client(session).fetch_title("123") is None


def test_fetch_title_none_on_timeout():
    session = FakeSession(error=requests.exceptions.Timeout("slow"))
    assert make_client(session).fetch_title("123") is None


def test_close_closes_session():
    session = FakeSession()
    make_client(session).close()
    assert session.closed
