"""
Service layer for the catalog aggregator.

``CatalogService.get_catalog`` fetches a user's ratings once, then
looks up the details of every rated movie and merges each pair into a
:class:`CatalogItem`.  Detail lookups are independent, so they run on a
small per‑request thread pool; results are always reassembled in the
order of the ratings.

What happens when a single detail lookup fails is controlled by the
failure policy:

``fail``
    The request fails with the error of the first failing movie in
    rating order.  No partial catalog is returned.
``skip``
    Movies whose lookup failed are left out.
``mark``
    Movies whose lookup failed stay in place with an empty name and
    an ``error`` object describing the failure.

A failure of the rating lookup itself is always fatal.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Protocol, Union

from movie_catalog.app.core.errors import ServiceError
from movie_catalog.app.schemas.catalog import CatalogItem, ItemError
from movie_catalog.app.schemas.movie import Movie
from movie_catalog.app.schemas.rating import Rating


logger = logging.getLogger(__name__)

PLACEHOLDER_DESCRIPTION = "Description"


class RatingSource(Protocol):
    """Anything that returns the ordered ratings of a user."""

    def get_ratings(self, user_id: Any) -> List[Rating]: ...


class DetailSource(Protocol):
    """Anything that returns the details of one movie."""

    def get_detail(self, item_id: Any) -> Movie: ...


class CatalogService:
    """Compose a user's catalog from a rating source and a detail source."""

    def __init__(
        self,
        rating_source: RatingSource,
        detail_source: DetailSource,
        *,
        failure_policy: str = "fail",
        max_workers: int = 4,
    ) -> None:
        if failure_policy not in {"fail", "skip", "mark"}:
            raise ValueError(f"Unknown failure policy: {failure_policy!r}")
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.rating_source = rating_source
        self.detail_source = detail_source
        self.failure_policy = failure_policy
        self.max_workers = max_workers

    def get_catalog(self, user_id: Any) -> List[CatalogItem]:
        """Return the catalog of ``user_id``, one entry per rating."""
        ratings = self.rating_source.get_ratings(user_id)
        if not ratings:
            return []
        logger.info("Building catalog for user %s from %d ratings", user_id, len(ratings))

        items: List[CatalogItem] = []
        for rating, outcome in zip(ratings, self._fetch_details(ratings)):
            if isinstance(outcome, ServiceError):
                if self.failure_policy == "skip":
                    logger.warning("Skipping movie %s for user %s: %s", rating.item_id, user_id, outcome)
                    continue
                items.append(
                    CatalogItem(
                        name="",
                        description=PLACEHOLDER_DESCRIPTION,
                        score=rating.score,
                        error=ItemError(**outcome.to_dict()),
                    )
                )
                continue
            items.append(merge(rating, outcome))
        return items

    def _fetch_details(self, ratings: List[Rating]) -> List[Union[Movie, ServiceError]]:
        """Look up every rated movie, preserving rating order.

        Under the ``fail`` policy the first error in rating order is
        raised and pending lookups are cancelled; otherwise errors are
        returned in place of the missing details.
        """
        executor = ThreadPoolExecutor(
            max_workers=min(self.max_workers, len(ratings)),
            thread_name_prefix="catalog-detail",
        )
        try:
            futures = [executor.submit(self.detail_source.get_detail, r.item_id) for r in ratings]
            outcomes: List[Union[Movie, ServiceError]] = []
            for rating, future in zip(ratings, futures):
                try:
                    outcomes.append(future.result())
                except ServiceError as exc:
                    if self.failure_policy == "fail":
                        logger.error("Detail lookup for movie %s failed: %s", rating.item_id, exc)
                        raise
                    outcomes.append(exc)
            return outcomes
        finally:
            executor.shutdown(wait=False, cancel_futures=True)


def merge(rating: Rating, movie: Movie) -> CatalogItem:
    """Combine a rating with the details of the rated movie."""
    return CatalogItem(
        name=movie.name,
        description=movie.description or PLACEHOLDER_DESCRIPTION,
        score=rating.score,
    )
