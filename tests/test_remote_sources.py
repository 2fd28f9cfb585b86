import pytest

from movie_catalog.app.core.errors import UpstreamBadResponse
from movie_catalog.app.core.upstream import UpstreamClient
from movie_catalog.app.services.remote_sources import RemoteMovieInfoSource, RemoteRatingSource

from conftest import FakeSession, make_response


RATINGS = [
    {"movieId": 123, "ratingValue": 4.5},
    {"movieId": 456, "ratingValue": 3.8},
]


def _client(handler):
    session = FakeSession(handler)
    return UpstreamClient(base_url="http://rating.test", timeout=1.0, session=session), session


def test_v1_reads_bare_list():
    client, session = _client(lambda url, params: make_response(200, RATINGS))

    ratings = RemoteRatingSource(client, "v1").get_ratings("99")

    assert [(r.item_id, r.score) for r in ratings] == [(123, 4.5), (456, 3.8)]
    assert session.calls[0]["url"] == "http://rating.test/ratings/users/99"


def test_v2_reads_envelope():
    client, session = _client(lambda url, params: make_response(200, {"userId": 99, "ratings": RATINGS}))

    ratings = RemoteRatingSource(client, "v2").get_ratings("99")

    assert [r.item_id for r in ratings] == [123, 456]
    assert session.calls[0]["url"] == "http://rating.test/v2/ratings/users/99"


def test_v1_rejects_envelope_payload():
    client, _ = _client(lambda url, params: make_response(200, {"userId": 99, "ratings": RATINGS}))
    with pytest.raises(UpstreamBadResponse):
        RemoteRatingSource(client, "v1").get_ratings("99")


def test_movie_detail_is_decoded():
    client, session = _client(lambda url, params: make_response(200, {"id": "123", "name": "Inception"}))

    movie = RemoteMovieInfoSource(client).get_detail(123)

    assert movie.name == "Inception"
    assert session.calls[0]["url"] == "http://rating.test/movies/123"


def test_movie_detail_without_name_is_bad_response():
    client, _ = _client(lambda url, params: make_response(200, {"id": 123}))
    with pytest.raises(UpstreamBadResponse) as excinfo:
        RemoteMovieInfoSource(client).get_detail(123)
    assert excinfo.value.identifier == 123
