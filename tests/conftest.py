"""
Pytest configuration and fixtures
"""

import json
import threading
import time
from typing import Any, Callable, Dict, List, Optional, Union
from urllib.parse import urlsplit

import pytest
import requests

from movie_catalog.app.core.config import Settings
from movie_catalog.app.schemas.movie import Movie
from movie_catalog.app.schemas.rating import Rating


def make_response(
    status_code: int = 200,
    payload: Any = None,
    *,
    body: Optional[bytes] = None,
    url: str = "http://upstream.test/",
) -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if body is None:
        body = json.dumps(payload).encode("utf-8") if payload is not None else b""
    response._content = body
    response.encoding = "utf-8"
    return response


class FakeSession:
    """Stand‑in for ``requests.Session`` driven by a handler function.

    The handler receives ``(url, params)`` and returns either a response
    or an exception instance, which is raised.
    """

    def __init__(self, handler: Callable[[str, Optional[Dict[str, Any]]], Any]) -> None:
        self.handler = handler
        self.calls: List[Dict[str, Any]] = []
        self.closed = False
        self._lock = threading.Lock()

    def request(self, method, url, params=None, headers=None, timeout=None, **kwargs):
        with self._lock:
            self.calls.append({"method": method, "url": url, "params": params, "timeout": timeout})
        result = self.handler(url, params)
        if isinstance(result, Exception):
            raise result
        return result

    def close(self) -> None:
        self.closed = True


def session_for(test_client) -> FakeSession:
    """Route requests for any host into a FastAPI ``TestClient``."""

    def handler(url, params):
        resp = test_client.get(urlsplit(url).path, params=params)
        return make_response(resp.status_code, body=resp.content, url=url)

    return FakeSession(handler)


class StubRatings:
    """Rating source returning a fixed list, or raising a fixed error."""

    def __init__(self, ratings: List[Rating], error: Optional[Exception] = None) -> None:
        self.ratings = ratings
        self.error = error
        self.calls = 0

    def get_ratings(self, user_id):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.ratings)


class StubDetails:
    """Detail source with per‑item results and optional per‑item delays."""

    def __init__(
        self,
        results: Optional[Dict[Any, Union[Movie, Exception]]] = None,
        *,
        default: Optional[Movie] = None,
        delays: Optional[Dict[Any, float]] = None,
    ) -> None:
        self.results = results or {}
        self.default = default
        self.delays = delays or {}
        self.requested: List[Any] = []
        self._lock = threading.Lock()

    def get_detail(self, item_id):
        with self._lock:
            self.requested.append(item_id)
        time.sleep(self.delays.get(item_id, 0))
        result = self.results.get(item_id, self.default)
        if isinstance(result, Exception):
            raise result
        if result is None:
            raise AssertionError(f"unexpected lookup for {item_id}")
        return result


@pytest.fixture
def user_99_ratings():
    return [
        Rating(item_id=123, score=4.5),
        Rating(item_id=456, score=3.8),
        Rating(item_id=789, score=4.2),
    ]


@pytest.fixture
def local_settings():
    """Settings wiring the catalog to in‑process sources."""
    return Settings(
        catalog_rating_source="local",
        catalog_detail_source="local",
        info_source="local",
    )


@pytest.fixture
def remote_settings():
    """Settings wiring the catalog to its sibling services over HTTP."""
    return Settings(
        catalog_rating_source="remote",
        catalog_detail_source="remote",
        info_source="local",
        rating_service_url="http://rating.test",
        info_service_url="http://info.test",
        upstream_timeout=1.5,
    )
