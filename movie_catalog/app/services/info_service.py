"""
Service layer for movie details.

Two interchangeable sources implement ``get_detail(item_id)``:

* :class:`LocalMovieInfoSource` answers from a static table and
  needs no network access.
* :class:`TmdbMovieInfoSource` delegates each lookup to The Movie
  Database (TMDB) API.  The API key is injected from configuration and
  sent as the ``api_key`` query parameter of the outbound request only.

Which one the info service uses is selected by ``INFO_SOURCE``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from movie_catalog.app.core.errors import NotFound, UpstreamBadResponse
from movie_catalog.app.core.upstream import UpstreamClient
from movie_catalog.app.schemas.movie import Movie, MovieSummary


logger = logging.getLogger(__name__)

DEFAULT_MOVIES: Dict[str, str] = {
    "123": "Inception",
    "456": "Interstellar",
    "789": "The Prestige",
    "550": "Fight Club",
    "603": "The Matrix",
}


class LocalMovieInfoSource:
    """Deterministic movie details from an in‑memory table."""

    def __init__(self, movies: Optional[Mapping[Any, str]] = None) -> None:
        table = DEFAULT_MOVIES if movies is None else movies
        # Keys are normalised to strings because identifiers arrive as
        # either ints or path strings.
        self._movies = {str(key): name for key, name in table.items()}

    def get_detail(self, item_id: Any) -> Movie:
        name = self._movies.get(str(item_id).strip())
        if name is None:
            raise NotFound("movie not found", resource="movie", identifier=item_id)
        return Movie(item_id=item_id, name=name)


class TmdbMovieInfoSource:
    """Movie details fetched from the TMDB ``/movie/{id}`` endpoint."""

    def __init__(self, client: UpstreamClient, api_key: str) -> None:
        if not api_key:
            raise ValueError("A TMDB API key is required for the tmdb info source")
        self.client = client
        self._api_key = api_key

    def get_detail(self, item_id: Any) -> Movie:
        """Fetch one movie from TMDB and map it onto :class:`Movie`.

        Network failures, timeouts, 404s and malformed bodies surface
        as the corresponding ``ServiceError`` subclasses.
        """
        data = self.client.get_json(
            f"/movie/{item_id}",
            resource="movie",
            identifier=item_id,
            params={"api_key": self._api_key},
        )
        try:
            summary = MovieSummary.model_validate(data)
        except ValidationError as exc:
            logger.error("TMDB returned an unexpected payload for movie %s", item_id)
            raise UpstreamBadResponse(
                "movie lookup returned an unexpected payload",
                resource="movie",
                identifier=item_id,
            ) from exc
        return Movie(item_id=summary.id, name=summary.title, description=summary.overview or None)
