"""
Rating endpoints for API v2.

Version 2 wraps a user's ratings in a ``{"userId", "ratings"}``
envelope so that the owning user travels with the collection.
"""

from fastapi import APIRouter, Depends

from movie_catalog.app.api.deps import get_rating_service
from movie_catalog.app.core.errors import ServiceError
from movie_catalog.app.schemas.rating import UserRatings
from movie_catalog.app.services.rating_service import RatingService

router = APIRouter()


@router.get("/users/{user_id}", response_model=UserRatings)
def get_user_ratings(
    user_id: str,
    service: RatingService = Depends(get_rating_service),
) -> UserRatings:
    """Return the ratings envelope of ``user_id`` (404 for unknown users)."""
    try:
        return service.get_user_ratings(user_id)
    except ServiceError as exc:
        raise exc.to_http_exception()
