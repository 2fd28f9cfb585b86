"""
Service layer for ratings.

The rating service is backed by static data: every known user has
rated the same three movies.  A "known" user is any positive integer
identifier; anything else is reported as :class:`NotFound`.  The data
lives behind ``RatingService`` so that a real store can replace it
without touching the API handlers.
"""

from __future__ import annotations

import logging
from typing import Any, List, Sequence, Tuple

from movie_catalog.app.core.errors import NotFound
from movie_catalog.app.schemas.rating import Rating, UserRatings


logger = logging.getLogger(__name__)

DEFAULT_USER_RATINGS: Tuple[Tuple[int, float], ...] = (
    (123, 4.5),
    (456, 3.8),
    (789, 4.2),
)
DEFAULT_MOVIE_RATING = 4.29


class RatingService:
    """Rating source backed by fixed data."""

    def __init__(
        self,
        user_ratings: Sequence[Tuple[int, float]] = DEFAULT_USER_RATINGS,
        movie_rating: float = DEFAULT_MOVIE_RATING,
    ) -> None:
        self._user_ratings = tuple(user_ratings)
        self._movie_rating = movie_rating

    def get_rating(self, movie_id: int) -> Rating:
        """Return the rating recorded for a single movie."""
        return Rating(item_id=movie_id, score=self._movie_rating)

    def get_ratings(self, user_id: Any) -> List[Rating]:
        """Return the ordered ratings of ``user_id``.

        A fresh list is built on every call so callers cannot mutate
        shared state.
        """
        parsed = parse_user_id(user_id)
        logger.debug("Serving %d ratings for user %s", len(self._user_ratings), parsed)
        return [Rating(item_id=item_id, score=score) for item_id, score in self._user_ratings]

    def get_user_ratings(self, user_id: Any) -> UserRatings:
        """Return the ratings of ``user_id`` wrapped in an envelope."""
        return UserRatings(user_id=parse_user_id(user_id), ratings=self.get_ratings(user_id))


def parse_user_id(user_id: Any) -> int:
    """Convert a path identifier into a positive integer user id.

    Raises :class:`NotFound` for anything that cannot name a user.
    """
    text = str(user_id).strip()
    if not text.isdigit() or int(text) <= 0:
        raise NotFound("user not found", resource="user", identifier=user_id)
    return int(text)
