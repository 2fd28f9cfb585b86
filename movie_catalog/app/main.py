"""
Main entrypoint for the movie catalog services.

This module assembles a FastAPI application for one of the three
services (``catalog``, ``info``, ``rating``) or for all of them at
once (``all``).  ``create_app`` configures logging, constructs every
component the service needs (HTTP clients first, then the sources and
the catalog aggregator that receive them) and includes the versioned
route tables.  Components are stored on ``app.state`` and reach the
handlers through the dependencies in ``api/deps.py``.

The combined application is instantiated at import time as ``app`` so
that it can be served directly, e.g.::

    uvicorn movie_catalog.app.main:app --reload

Single services are started by ``run.py``, or served on their own
through the factories below, e.g.::

    uvicorn --factory movie_catalog.app.main:catalog_app
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from fastapi import FastAPI

from .api.v1.router import SERVICE_ROUTERS as V1_ROUTERS, health_router
from .api.v2.router import SERVICE_ROUTERS as V2_ROUTERS
from .core.config import ConfigurationError, Settings, settings
from .core.logging_config import setup_logging
from .core.upstream import UpstreamClient
from .services.catalog_service import CatalogService, DetailSource, RatingSource
from .services.info_service import LocalMovieInfoSource, TmdbMovieInfoSource
from .services.rating_service import RatingService
from .services.remote_sources import RemoteMovieInfoSource, RemoteRatingSource


logger = logging.getLogger(__name__)

SERVICES = ("catalog", "info", "rating")


def build_info_source(app_settings: Settings, clients: List[UpstreamClient]) -> DetailSource:
    """Create the movie detail source selected by ``INFO_SOURCE``."""
    if app_settings.info_source == "tmdb":
        if not app_settings.tmdb_api_key:
            raise ConfigurationError("TMDB_API_KEY must be set when INFO_SOURCE=tmdb")
        client = UpstreamClient(
            base_url=app_settings.tmdb_base_url,
            timeout=app_settings.upstream_timeout,
        )
        clients.append(client)
        return TmdbMovieInfoSource(client, app_settings.tmdb_api_key)
    return LocalMovieInfoSource()


def build_catalog_service(
    app_settings: Settings,
    clients: List[UpstreamClient],
    *,
    local_ratings: RatingService,
    local_details: Optional[DetailSource] = None,
    in_process: bool = False,
) -> CatalogService:
    """Wire the catalog aggregator to its rating and detail sources.

    With ``in_process`` the sibling services live in the same
    application, so the local sources are used whatever
    ``CATALOG_RATING_SOURCE`` and ``CATALOG_DETAIL_SOURCE`` say.
    """
    rating_source: RatingSource
    if app_settings.catalog_rating_source == "remote" and not in_process:
        rating_client = UpstreamClient(
            base_url=app_settings.rating_service_url,
            timeout=app_settings.upstream_timeout,
        )
        clients.append(rating_client)
        rating_source = RemoteRatingSource(rating_client, app_settings.ratings_api_version)
    else:
        rating_source = local_ratings

    detail_source: DetailSource
    if app_settings.catalog_detail_source == "remote" and not in_process:
        info_client = UpstreamClient(
            base_url=app_settings.info_service_url,
            timeout=app_settings.upstream_timeout,
            retries=app_settings.detail_retries,
        )
        clients.append(info_client)
        detail_source = RemoteMovieInfoSource(info_client)
    else:
        detail_source = local_details or build_info_source(app_settings, clients)

    return CatalogService(
        rating_source,
        detail_source,
        failure_policy=app_settings.catalog_failure_policy,
        max_workers=app_settings.catalog_max_workers,
    )


def _closing_lifespan(clients: List[UpstreamClient]):
    """Lifespan handler that closes the given clients on shutdown."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            for client in clients:
                client.close()

    return lifespan


def create_app(service: str = "all", app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application for ``service``.

    Parameters
    ----------
    service : str
        One of ``"catalog"``, ``"info"``, ``"rating"`` or ``"all"``.
        ``"all"`` serves every route from one application and wires the
        catalog to the in‑process rating and info sources.
    app_settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.

    Returns
    -------
    FastAPI
        A configured application.  Outbound HTTP sessions it owns are
        closed when the application shuts down.
    """
    app_settings = app_settings or settings
    if service not in V1_ROUTERS:
        raise ConfigurationError(f"Unknown service {service!r}; expected one of {SERVICES + ('all',)}")

    service_name = f"{service}-service"
    setup_logging(app_settings.log_level, app_settings.log_file or None, label=service_name)

    clients: List[UpstreamClient] = []
    rating_service = RatingService()
    info_source: Optional[DetailSource] = None
    catalog_service: Optional[CatalogService] = None
    if service in ("info", "all"):
        info_source = build_info_source(app_settings, clients)
    if service in ("catalog", "all"):
        catalog_service = build_catalog_service(
            app_settings,
            clients,
            local_ratings=rating_service,
            local_details=info_source,
            in_process=service == "all",
        )

    app = FastAPI(
        title=f"{app_settings.project_name}: {service}",
        version=app_settings.api_version,
        lifespan=_closing_lifespan(clients),
    )
    app.state.service_name = service_name
    if service in ("rating", "all"):
        app.state.rating_service = rating_service
    if info_source is not None:
        app.state.info_source = info_source
    if catalog_service is not None:
        app.state.catalog_service = catalog_service

    app.include_router(health_router)
    app.include_router(V1_ROUTERS[service])
    v2_router = V2_ROUTERS[service]
    if v2_router is not None:
        app.include_router(v2_router, prefix="/v2")

    logger.info("Configured %s with %d upstream client(s)", service_name, len(clients))
    return app


def catalog_app() -> FastAPI:
    """Factory for ``uvicorn --factory movie_catalog.app.main:catalog_app``."""
    return create_app("catalog")


def info_app() -> FastAPI:
    return create_app("info")


def rating_app() -> FastAPI:
    return create_app("rating")


# Create the combined application at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app("all")
