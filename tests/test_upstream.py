import pytest
import requests

from movie_catalog.app.core.errors import (
    NotFound,
    UpstreamBadResponse,
    UpstreamTimeout,
    UpstreamUnavailable,
)
from movie_catalog.app.core.upstream import UpstreamClient

from conftest import FakeSession, make_response


def _client(handler, retries=0):
    session = FakeSession(handler)
    client = UpstreamClient(base_url="http://info.test/", timeout=2.0, retries=retries, session=session)
    return client, session


def test_get_json_returns_decoded_body_and_sends_timeout():
    client, session = _client(lambda url, params: make_response(200, {"id": 123, "name": "Inception"}))

    data = client.get_json("/movies/123", resource="movie", identifier=123, params={"lang": "en"})

    assert data == {"id": 123, "name": "Inception"}
    assert session.calls == [
        {"method": "GET", "url": "http://info.test/movies/123", "params": {"lang": "en"}, "timeout": 2.0}
    ]


def test_connection_error_becomes_upstream_unavailable():
    client, _ = _client(lambda url, params: requests.ConnectionError("connection refused"))

    with pytest.raises(UpstreamUnavailable) as excinfo:
        client.get_json("/movies/123", resource="movie", identifier=123)

    assert excinfo.value.identifier == 123
    assert excinfo.value.status_code == 502


def test_timeout_becomes_upstream_timeout():
    client, _ = _client(lambda url, params: requests.ReadTimeout("read timed out"))

    with pytest.raises(UpstreamTimeout) as excinfo:
        client.get_json("/movies/123", resource="movie", identifier=123)

    assert excinfo.value.status_code == 504


def test_connect_timeout_is_a_timeout_not_unavailable():
    client, _ = _client(lambda url, params: requests.ConnectTimeout("connect timed out"))

    with pytest.raises(UpstreamTimeout):
        client.get_json("/movies/123", resource="movie", identifier=123)


def test_server_error_becomes_bad_response():
    client, _ = _client(lambda url, params: make_response(500, {"detail": "boom"}))

    with pytest.raises(UpstreamBadResponse) as excinfo:
        client.get_json("/movies/123", resource="movie", identifier=123)

    assert excinfo.value.upstream_status == 500


def test_404_becomes_not_found():
    client, _ = _client(lambda url, params: make_response(404, {"detail": "nope"}))

    with pytest.raises(NotFound) as excinfo:
        client.get_json("/movies/1", resource="movie", identifier=1)

    assert excinfo.value.to_dict() == {
        "error": "not_found",
        "resource": "movie",
        "identifier": "1",
        "message": "movie not found",
    }


def test_undecodable_body_becomes_bad_response():
    client, _ = _client(lambda url, params: make_response(200, body=b"<html>oops</html>"))

    with pytest.raises(UpstreamBadResponse):
        client.get_json("/movies/123", resource="movie", identifier=123)


def test_network_failure_is_retried_until_success():
    outcomes = [requests.ConnectionError("reset"), make_response(200, {"ok": True})]
    client, session = _client(lambda url, params: outcomes.pop(0), retries=1)

    assert client.get_json("/movies/123", resource="movie", identifier=123) == {"ok": True}
    assert len(session.calls) == 2


def test_retries_are_bounded():
    client, session = _client(lambda url, params: requests.ReadTimeout("slow"), retries=2)

    with pytest.raises(UpstreamTimeout):
        client.get_json("/movies/123", resource="movie", identifier=123)

    assert len(session.calls) == 3


def test_bad_responses_are_not_retried():
    client, session = _client(lambda url, params: make_response(503), retries=2)

    with pytest.raises(UpstreamBadResponse):
        client.get_json("/movies/123", resource="movie", identifier=123)

    assert len(session.calls) == 1


def test_close_closes_session():
    client, session = _client(lambda url, params: make_response(200, {}))
    client.close()
    assert session.closed
