"""
Pydantic schemas for the catalog view.

A ``CatalogItem`` is built per request by merging one rating with the
details of the rated movie.  ``error`` is only populated when the
catalog runs with the ``mark`` failure policy and the detail lookup
for that movie failed.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ItemError(BaseModel):
    """Why a catalog entry could not be enriched."""

    error: str = Field(..., description="Error kind, e.g. 'upstream_unavailable'")
    resource: str
    identifier: Optional[str] = None
    message: str


class CatalogItem(BaseModel):
    """One entry of a user's catalog."""

    name: str
    description: str
    score: float
    error: Optional[ItemError] = None
