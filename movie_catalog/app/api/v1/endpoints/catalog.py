"""
Catalog endpoint for API v1.

``GET /catalog/{user_id}`` returns the user's rated movies enriched
with their details.  The handler is a plain function because building
the catalog performs blocking HTTP calls; FastAPI runs it in its
worker thread pool.
"""

from typing import List

from fastapi import APIRouter, Depends

from movie_catalog.app.api.deps import get_catalog_service
from movie_catalog.app.core.errors import ServiceError
from movie_catalog.app.schemas.catalog import CatalogItem
from movie_catalog.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get(
    "/{user_id}",
    response_model=List[CatalogItem],
    response_model_exclude_none=True,
    summary="Get a user's catalog",
)
def get_catalog(
    user_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> List[CatalogItem]:
    """Return one catalog entry per rating of ``user_id``.

    Returns 404 for an unknown user, 502 when a downstream service is
    unreachable or misbehaves and 504 when it times out.  The error
    body names the failing resource and identifier.
    """
    try:
        return service.get_catalog(user_id)
    except ServiceError as exc:
        raise exc.to_http_exception()
