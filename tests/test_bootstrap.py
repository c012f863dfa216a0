"""Tests for configuration: token vs. registration, settings loading, app wiring."""

import pytest

from api.errors import ConfigurationError
from app.bootstrap import build_app, configure
from app.config import Settings, load_settings
from conftest import BASE_URL, ok


def test_configure_with_token_authenticates_later_calls(ctx, session):
    ctx.store.clear_credential()
    session.add("GET", "my/agent", ok({"symbol": "ME", "credits": 10}))

    configure(ctx, token="tok-123")
    ctx.root.agent()

    assert ctx.store.token == "tok-123"
    assert session.requests[0]["headers"]["Authorization"] == "Bearer tok-123"


def test_configure_registers_without_stale_token(ctx, session):
    registration = {"token": "fresh", "agent": {"symbol": "NEWBIE"}, "faction": {"symbol": "COSMIC"}}
    session.add("POST", "register", ok(registration))

    configure(ctx, symbol="NEWBIE", faction="COSMIC", email="a@b.c")

    request = session.requests[0]
    assert "Authorization" not in request["headers"]
    assert request["json"] == {"symbol": "NEWBIE", "faction": "COSMIC", "email": "a@b.c"}
    assert ctx.store.token == "fresh"
    assert ctx.store.registration == registration


def test_configure_token_takes_precedence_over_registration(ctx, session):
    configure(ctx, token="tok", symbol="NEWBIE", faction="COSMIC")

    assert ctx.store.token == "tok"
    assert session.requests == []


@pytest.mark.parametrize("kwargs", [{}, {"symbol": "NEWBIE"}, {"faction": "COSMIC"}])
def test_configure_requires_token_or_symbol_and_faction(ctx, session, kwargs):
    with pytest.raises(ConfigurationError):
        configure(ctx, **kwargs)
    assert session.requests == []


def test_load_settings_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("AGENT_TOKEN", "env-token")
    monkeypatch.setenv("SPACETRADERS_API_URL", BASE_URL)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SPACETRADERS_MAX_RETRIES", "2")

    settings = load_settings(str(tmp_path / "missing.env"))

    assert settings == Settings(agent_token="env-token", api_url=BASE_URL, log_level="DEBUG", max_retries=2)


def test_build_app_applies_token_and_close_tears_down(session):
    ctx = build_app(Settings(agent_token="tok", api_url=BASE_URL), session=session)

    assert ctx.store.token == "tok"
    assert ctx.client.http.base_url == BASE_URL

    ctx.store.put_market("X1-AB12-A1", {"transactions": []})
    ctx.close()

    assert ctx.store.token is None
    assert ctx.store.markets_by_waypoint == {}
    assert session.closed is True
