"""Shared fakes: an in-memory HTTP session that answers queued responses per route."""

import json as jsonlib
from collections import defaultdict
from urllib.parse import urlsplit

import pytest
import requests

from api.client import ApiClient
from app.bootstrap import AppContext
from app.config import Settings
from data.store import SessionStore
from flow.events import Notifier
from flow.scheduler import ArrivalScheduler
from graph.root import Root

BASE_URL = "https://api.spacetraders.test/v2"


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ("" if payload is None else jsonlib.dumps(payload))

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class FakeSession:
    """
    Routes are "METHOD path" with the base URL and query stripped.
    Queued responses are consumed in order; the last one repeats.
    A queued exception is raised instead of answered.
    """

    def __init__(self):
        self.routes = defaultdict(list)
        self.requests = []
        self.closed = False

    def add(self, method: str, path: str, *responses) -> None:
        self.routes[f"{method} {path}"].extend(responses)

    def request(self, method, url, params=None, headers=None, json=None):
        url = requests.Request(method, url, params=params).prepare().url
        self.requests.append(
            {"method": method, "url": url, "params": params, "headers": dict(headers or {}), "json": json}
        )
        path = urlsplit(url).path[len(urlsplit(BASE_URL).path):].lstrip("/")
        queue = self.routes.get(f"{method} {path}")
        if not queue:
            raise AssertionError(f"unexpected request {method} {url}")
        answer = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(answer, Exception):
            raise answer
        return answer

    def close(self):
        self.closed = True


def ok(data, meta=None) -> FakeResponse:
    payload = {"data": data}
    if meta is not None:
        payload["meta"] = meta
    return FakeResponse(200, payload)


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def store():
    return SessionStore(token="test-token")


@pytest.fixture
def client(store, session, sleeps):
    return ApiClient(store, BASE_URL, session=session, sleep=sleeps.append)


@pytest.fixture
def scheduler():
    return ArrivalScheduler(sleep=lambda s: None)


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def root(client, store, scheduler, notifier):
    return Root(client, store, scheduler, notifier)


@pytest.fixture
def ctx(store, client, scheduler, notifier, root):
    return AppContext(
        settings=Settings(api_url=BASE_URL),
        store=store,
        client=client,
        scheduler=scheduler,
        notifier=notifier,
        root=root,
    )
