"""
HTTP request handler with rate limiting, retry logic, and SpaceTraders-specific error handling.
Throttled responses (429/408) are retried with an exponential backoff; every other
status >= 300 is raised as an ApiError carrying the status and the raw body text.
"""
import logging
import time
from typing import TYPE_CHECKING, Any, Callable

import requests
from requests.adapters import HTTPAdapter
from requests_ratelimiter import LimiterSession
from urllib3.util.retry import Retry

from api.errors import ApiError

if TYPE_CHECKING:
    from data.store import SessionStore

DEFAULT_API_URL = "https://api.spacetraders.io/v2"
THROTTLE_STATUSES = (408, 429)
MAX_RETRIES = 5


def backoff_seconds(retry: int) -> float:
    return 0.5 + 1.4**retry


def build_session() -> requests.Session:
    # SpaceTraders allows 2 req/s with a burst of 30 per minute
    session = LimiterSession(per_second=2, per_minute=30, per_host=False)
    # Transport-level failures only; HTTP statuses are handled by RequestHandler.call
    retry = Retry(
        total=3,
        connect=3,
        read=3,
        status=0,
        backoff_factor=1.2,
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class RequestHandler:
    def __init__(
        self,
        store: "SessionStore",
        base_url: str = DEFAULT_API_URL,
        *,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
        max_retries: int = MAX_RETRIES,
    ):
        self.base_url = base_url.rstrip("/")
        self.store = store
        self.session = session if session is not None else build_session()
        self.sleep = sleep
        self.max_retries = max_retries

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def headers(self) -> dict:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.store.token:
            headers["Authorization"] = f"Bearer {self.store.token}"
        return headers

    def call(
        self,
        method: str,
        path: str,
        query: dict[str, Any] | None = None,
        body: Any = None,
        retry: int = 0,
    ) -> Any:
        """
        Issue one JSON request against the API and return the parsed payload.
          - 429/408 are retried up to max_retries times, sleeping 0.5 + 1.4**retry seconds
          - 204 yields {}
          - any other status >= 300 raises ApiError(status, body text)
        """
        url = self.build_url(path)
        logging.debug(f"{method} {url} params={query} (retry={retry})")
        # requests drops None-valued params when encoding the query string
        resp = self.session.request(method, url, params=query, headers=self.headers(), json=body)

        if resp.status_code in THROTTLE_STATUSES and retry < self.max_retries:
            wait = backoff_seconds(retry)
            logging.warning(f"Rate limited ({resp.status_code}) on {method} {path}, waiting {wait:.2f} seconds...")
            self.sleep(wait)
            return self.call(method, path, query, body, retry + 1)

        if resp.status_code >= 300:
            raise ApiError(resp.status_code, resp.text)
        if resp.status_code == 204:
            return {}
        return resp.json()

    def get_json(self, path: str, params: dict | None = None) -> Any:
        return self.call("GET", path, query=params)

    def post_json(self, path: str, json: Any = None, params: dict | None = None) -> Any:
        return self.call("POST", path, query=params, body=json)

    def patch_json(self, path: str, json: Any = None) -> Any:
        return self.call("PATCH", path, body=json)
