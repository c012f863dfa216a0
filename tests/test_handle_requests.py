"""Tests for the HTTP client adapter: URL building, headers, retry and status handling."""

import pytest

from api.errors import ApiError, ErrorKind
from api.handle_requests import backoff_seconds
from conftest import BASE_URL, FakeResponse, ok


def test_build_url_joins_base_and_path(client):
    assert client.http.build_url("systems") == f"{BASE_URL}/systems"
    assert client.http.build_url("/my/agent") == f"{BASE_URL}/my/agent"


def test_request_without_defined_query_has_no_question_mark(client, session):
    session.add("GET", "systems", ok([], {"total": 0, "page": 1, "limit": 10}))

    client.systems.list(page=None, limit=None)

    assert session.requests[0]["url"] == f"{BASE_URL}/systems"


def test_query_values_are_percent_encoded(client, session):
    session.add("GET", "systems", ok([]))

    client.http.get_json("systems", {"symbol": "X1 AB&12", "page": 1})

    assert session.requests[0]["url"] == f"{BASE_URL}/systems?symbol=X1+AB%2612&page=1"


def test_list_request_omits_missing_pagination(client, session):
    session.add("GET", "systems", ok([], {"total": 0, "page": 1, "limit": 10}))

    client.systems.list(page=None, limit=5)

    assert session.requests[0]["url"] == f"{BASE_URL}/systems?limit=5"


def test_bearer_token_and_json_headers(client, session):
    session.add("GET", "my/agent", ok({"symbol": "ME"}))

    client.agent.get()

    headers = session.requests[0]["headers"]
    assert headers["Authorization"] == "Bearer test-token"
    assert headers["Content-Type"] == "application/json"
    assert headers["Accept"] == "application/json"


def test_no_authorization_without_token(client, store, session):
    store.clear_credential()
    session.add("GET", "", ok({"status": "up"}))

    client.server_status()

    assert "Authorization" not in session.requests[0]["headers"]
    assert session.requests[0]["headers"]["Content-Type"] == "application/json"


def test_body_is_sent_as_json(client, session):
    session.add("POST", "my/ships/SHIP-1/sell", ok({"transaction": {}}))

    client.fleet.sell("SHIP-1", "IRON_ORE", 10)

    assert session.requests[0]["json"] == {"symbol": "IRON_ORE", "units": 10}


def test_204_returns_empty_dict_without_parsing(client, session):
    session.add("GET", "my/ships/SHIP-1/cooldown", FakeResponse(204))

    assert client.fleet.get_cooldown("SHIP-1") == {}


@pytest.mark.parametrize("status", [429, 408])
def test_throttled_request_is_retried_with_backoff(client, session, sleeps, status):
    session.add(
        "POST",
        "my/ships/SHIP-1/navigate",
        FakeResponse(status, text="slow down"),
        FakeResponse(status, text="slow down"),
        ok({"nav": {}}),
    )

    result = client.fleet.navigate_ship("SHIP-1", "X1-AB12-C3")

    assert result == {"data": {"nav": {}}}
    assert len(session.requests) == 3
    assert {(r["method"], r["url"]) for r in session.requests} == {("POST", f"{BASE_URL}/my/ships/SHIP-1/navigate")}
    assert all(r["json"] == {"waypointSymbol": "X1-AB12-C3"} for r in session.requests)
    assert sleeps == [backoff_seconds(0), backoff_seconds(1)]
    assert sleeps[0] == pytest.approx(1.5)
    assert sleeps[1] == pytest.approx(1.9)


def test_retries_are_exhausted_after_five(client, session, sleeps):
    session.add("GET", "my/agent", FakeResponse(429, text="Too Many Requests"))

    with pytest.raises(ApiError) as excinfo:
        client.agent.get()

    assert excinfo.value.status == 429
    assert excinfo.value.kind == ErrorKind.THROTTLED
    assert excinfo.value.message == "Too Many Requests"
    assert len(session.requests) == 6
    assert len(sleeps) == 5


def test_call_at_retry_limit_falls_through(client, session, sleeps):
    session.add("GET", "my/agent", FakeResponse(429, text="limit"))

    with pytest.raises(ApiError):
        client.http.call("GET", "my/agent", retry=5)

    assert len(session.requests) == 1
    assert sleeps == []


@pytest.mark.parametrize(
    "status,kind",
    [
        (400, ErrorKind.INVALID),
        (401, ErrorKind.UNAUTHORIZED),
        (404, ErrorKind.NOT_FOUND),
        (500, ErrorKind.UNKNOWN),
        (302, ErrorKind.UNKNOWN),
    ],
)
def test_error_statuses_raise_api_error_with_body_text(client, session, sleeps, status, kind):
    session.add("GET", "my/contracts/c1", FakeResponse(status, text='{"error": {"code": 1}}'))

    with pytest.raises(ApiError) as excinfo:
        client.contracts.get("c1")

    assert excinfo.value.status == status
    assert excinfo.value.kind == kind
    assert excinfo.value.message == '{"error": {"code": 1}}'
    assert len(session.requests) == 1
    assert sleeps == []
