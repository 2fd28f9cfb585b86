"""
Route table for version 2 of the API.

Only the rating service has a v2 endpoint: the enveloped user ratings.
The table mirrors ``api/v1/router.py`` so ``create_app`` can treat both
versions the same way.
"""

from typing import Dict, Optional

from fastapi import APIRouter

from .endpoints import ratings


def _rating_router() -> APIRouter:
    router = APIRouter()
    router.include_router(ratings.router, prefix="/ratings", tags=["ratings"])
    return router


SERVICE_ROUTERS: Dict[str, Optional[APIRouter]] = {
    "catalog": None,
    "info": None,
    "rating": _rating_router(),
}
SERVICE_ROUTERS["all"] = SERVICE_ROUTERS["rating"]
