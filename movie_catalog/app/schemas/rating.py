"""
Pydantic schemas for ratings.

Ratings are serialised with the field names the rating service has
always used on the wire (``movieId``, ``ratingValue``, ``userId``).
Python code refers to them by their snake_case attribute names.
"""

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class Rating(BaseModel):
    """A single user's score for one movie."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    item_id: int = Field(..., alias="movieId", description="Identifier of the rated movie")
    score: float = Field(..., alias="ratingValue", description="Numeric rating value")


class UserRatings(BaseModel):
    """Envelope carrying all ratings of one user (API v2 shape)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_id: Union[int, str] = Field(..., alias="userId")
    ratings: List[Rating] = Field(default_factory=list)
