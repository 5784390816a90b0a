"""Pydantic schemas for movie data."""

from pydantic import BaseModel, ConfigDict


class MovieSummary(BaseModel):
    """Movie fields embedded in a nested show record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    duration: int
    genre: str
    description: str | None = None
    image_url: str | None = None
