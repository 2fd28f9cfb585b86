"""
Route table for version 1 of the API.

Each service exposes its own subset of the endpoints, so the table is
keyed by service name.  ``create_app`` includes the router of the
service it builds; the ``all`` entry combines every domain for running
the whole system in one process.  When new endpoints are added, update
this file to include their routers.
"""

from typing import Dict

from fastapi import APIRouter

from .endpoints import catalog, health, movies, ratings


def _catalog_router() -> APIRouter:
    router = APIRouter()
    router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
    return router


def _info_router() -> APIRouter:
    router = APIRouter()
    router.include_router(movies.router, prefix="/movies", tags=["movies"])
    return router


def _rating_router() -> APIRouter:
    router = APIRouter()
    router.include_router(ratings.router, prefix="/ratings", tags=["ratings"])
    return router


SERVICE_ROUTERS: Dict[str, APIRouter] = {
    "catalog": _catalog_router(),
    "info": _info_router(),
    "rating": _rating_router(),
}

router = APIRouter()
for _service_router in SERVICE_ROUTERS.values():
    router.include_router(_service_router)
SERVICE_ROUTERS["all"] = router

# Every service answers liveness checks at the root, outside any version.
health_router = health.router
