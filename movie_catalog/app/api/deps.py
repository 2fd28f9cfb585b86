"""
FastAPI dependencies that hand the wired services to endpoint handlers.

``create_app`` builds every component once and stores it on
``app.state``; these helpers read them back per request.  Tests can
replace a component by assigning a different object to ``app.state``
or through ``app.dependency_overrides``.
"""

from fastapi import Request

from movie_catalog.app.services.catalog_service import CatalogService, DetailSource
from movie_catalog.app.services.rating_service import RatingService


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


def get_info_source(request: Request) -> DetailSource:
    return request.app.state.info_source


def get_rating_service(request: Request) -> RatingService:
    return request.app.state.rating_service
