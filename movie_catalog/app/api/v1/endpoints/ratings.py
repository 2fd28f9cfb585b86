"""
Rating endpoints for API v1.

Version 1 returns a user's ratings as a bare JSON list.  The enveloped
shape lives in API v2 (see ``api/v2/endpoints/ratings.py``).
"""

from typing import List

from fastapi import APIRouter, Depends

from movie_catalog.app.api.deps import get_rating_service
from movie_catalog.app.core.errors import ServiceError
from movie_catalog.app.schemas.rating import Rating
from movie_catalog.app.services.rating_service import RatingService

router = APIRouter()


@router.get("/{movie_id}", response_model=Rating)
def get_rating(
    movie_id: int,
    service: RatingService = Depends(get_rating_service),
) -> Rating:
    """Return the rating of a single movie."""
    return service.get_rating(movie_id)


@router.get("/users/{user_id}", response_model=List[Rating])
def get_user_ratings(
    user_id: str,
    service: RatingService = Depends(get_rating_service),
) -> List[Rating]:
    """Return every rating of ``user_id`` in a stable order.

    Returns 404 if ``user_id`` is not a positive integer.
    """
    try:
        return service.get_ratings(user_id)
    except ServiceError as exc:
        raise exc.to_http_exception()
