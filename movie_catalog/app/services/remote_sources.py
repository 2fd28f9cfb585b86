"""
HTTP adapters that let the catalog reach its sibling services.

``RemoteRatingSource`` and ``RemoteMovieInfoSource`` expose the same
``get_ratings`` / ``get_detail`` methods as the in‑process services,
so the catalog does not care whether a source is local or remote.
Responses are decoded with the shared Pydantic schemas; a payload that
does not match them is an :class:`UpstreamBadResponse`.
"""

from __future__ import annotations

from typing import Any, List

from pydantic import TypeAdapter, ValidationError

from movie_catalog.app.core.errors import UpstreamBadResponse
from movie_catalog.app.core.upstream import UpstreamClient
from movie_catalog.app.schemas.movie import Movie
from movie_catalog.app.schemas.rating import Rating, UserRatings


_RATING_LIST = TypeAdapter(List[Rating])


class RemoteRatingSource:
    """Ratings read from the rating service.

    ``api_version`` selects the response shape: ``"v1"`` reads the
    bare list at ``/ratings/users/{id}``, ``"v2"`` reads the envelope
    at ``/v2/ratings/users/{id}``.
    """

    def __init__(self, client: UpstreamClient, api_version: str = "v1") -> None:
        self.client = client
        self.api_version = api_version

    def get_ratings(self, user_id: Any) -> List[Rating]:
        if self.api_version == "v2":
            data = self.client.get_json(f"/v2/ratings/users/{user_id}", resource="user", identifier=user_id)
            try:
                return list(UserRatings.model_validate(data).ratings)
            except ValidationError as exc:
                raise _bad_payload("user", user_id) from exc

        data = self.client.get_json(f"/ratings/users/{user_id}", resource="user", identifier=user_id)
        try:
            return _RATING_LIST.validate_python(data)
        except ValidationError as exc:
            raise _bad_payload("user", user_id) from exc


class RemoteMovieInfoSource:
    """Movie details read from the info service."""

    def __init__(self, client: UpstreamClient) -> None:
        self.client = client

    def get_detail(self, item_id: Any) -> Movie:
        data = self.client.get_json(f"/movies/{item_id}", resource="movie", identifier=item_id)
        try:
            return Movie.model_validate(data)
        except ValidationError as exc:
            raise _bad_payload("movie", item_id) from exc


def _bad_payload(resource: str, identifier: Any) -> UpstreamBadResponse:
    return UpstreamBadResponse(
        f"{resource} lookup returned an unexpected payload",
        resource=resource,
        identifier=identifier,
    )
