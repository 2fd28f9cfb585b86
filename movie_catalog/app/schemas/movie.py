"""
Pydantic schemas for movie details.

``Movie`` is what the info service returns and what the catalog
consumes.  ``MovieSummary`` mirrors the subset of the TMDB movie
resource that the info service reads when it delegates to TMDB.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """Descriptive details for one movie."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    item_id: Union[int, str] = Field(..., alias="id", description="Movie identifier")
    name: str = Field(..., description="Movie title")
    description: Optional[str] = Field(None, description="Synopsis, when the source has one")


class MovieSummary(BaseModel):
    """Relevant fields of a TMDB ``/movie/{id}`` response."""

    id: int
    title: str
    overview: Optional[str] = None
