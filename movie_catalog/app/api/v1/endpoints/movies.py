"""
Movie info endpoint for API v1.
"""

from fastapi import APIRouter, Depends

from movie_catalog.app.api.deps import get_info_source
from movie_catalog.app.core.errors import ServiceError
from movie_catalog.app.schemas.movie import Movie
from movie_catalog.app.services.catalog_service import DetailSource

router = APIRouter()


@router.get("/{movie_id}", response_model=Movie, response_model_exclude_none=True)
def get_movie_info(
    movie_id: str,
    source: DetailSource = Depends(get_info_source),
) -> Movie:
    """Return ``{id, name}`` for a movie, plus ``description`` when known."""
    try:
        return source.get_detail(movie_id)
    except ServiceError as exc:
        raise exc.to_http_exception()
