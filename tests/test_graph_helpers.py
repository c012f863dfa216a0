"""Tests for free-text parsing, selection inspection, and page links."""

import pytest

from data.enums import PageKind
from data.refs import PageRef, SystemRef, WaypointRef, system_symbol_of
from graph.inspector import needs_fetch, selected_fields
from graph.pagination import build_page, next_page_ref
from graph.parser import parse, parse_any


def test_parse_system():
    assert parse("system", "X1-AB12") == [SystemRef("X1-AB12")]


def test_parse_waypoint():
    assert parse("waypoint", "X1-AB12-XYZ") == [WaypointRef(system_symbol="X1-AB12", symbol="X1-AB12-XYZ")]


def test_parse_is_case_insensitive():
    assert parse("system", "go to x1-ab12 now") == [SystemRef("x1-ab12")]


@pytest.mark.parametrize("name,value", [("system", "hello"), ("waypoint", "X1-AB12"), ("ship", "X1-AB12")])
def test_parse_without_match_is_empty(name, value):
    assert parse(name, value) == []


def test_parse_any_prefers_waypoint():
    assert parse_any("X1-AB12-XYZ") == [WaypointRef("X1-AB12", "X1-AB12-XYZ")]
    assert parse_any("X1-AB12") == [SystemRef("X1-AB12")]
    assert parse_any("nothing") == []


def test_system_symbol_of():
    assert system_symbol_of("X1-AB12-XYZ") == "X1-AB12"
    assert WaypointRef.from_symbol("X1-AB12-XYZ").system == SystemRef("X1-AB12")


def test_needs_fetch():
    assert needs_fetch(["symbol"], ["symbol"]) is False
    assert needs_fetch(["symbol", "type"], ["symbol"]) is True
    assert needs_fetch([], ["symbol"]) is False
    assert needs_fetch(None, ["symbol"]) is True


def test_selected_fields_keeps_top_level_names():
    assert selected_fields("{ symbol }") == ["symbol"]
    assert selected_fields("{ symbol waypoints { symbol type } factions(limit: 2) { symbol } }") == [
        "symbol",
        "waypoints",
        "factions",
    ]


@pytest.mark.parametrize(
    "total,page,limit,expected",
    [
        (0, 1, 10, None),
        (10, 1, 10, None),
        (11, 1, 10, PageRef(PageKind.SYSTEMS, page=2, limit=10)),
        (30, 2, 10, PageRef(PageKind.SYSTEMS, page=3, limit=10)),
        (30, 3, 10, None),
    ],
)
def test_next_page_only_while_items_remain(total, page, limit, expected):
    meta = {"total": total, "page": page, "limit": limit}
    assert next_page_ref(meta, PageKind.SYSTEMS, page, limit) == expected


def test_next_page_keeps_requested_limit_and_parent():
    payload = {"data": [{"symbol": "X1-AB12-A1"}], "meta": {"total": 45, "page": 1, "limit": 20}}
    page = build_page(payload, PageKind.WAYPOINTS, None, None, parent=SystemRef("X1-AB12"))

    assert page.items == [{"symbol": "X1-AB12-A1"}]
    assert page.next == PageRef(PageKind.WAYPOINTS, page=2, limit=None, parent=SystemRef("X1-AB12"))
