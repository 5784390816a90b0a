"""Pydantic schemas for theater data."""

from pydantic import BaseModel, ConfigDict


class TheaterSummary(BaseModel):
    """Theater fields embedded in a nested show record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    location: str
