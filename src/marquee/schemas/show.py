"""Pydantic schemas for show data."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

from marquee.schemas.movie import MovieSummary
from marquee.schemas.theater import TheaterSummary

# Two decimal places, finite and non-negative; rendered as a JSON number
Price = Annotated[
    Decimal,
    Field(ge=0, max_digits=10, decimal_places=2, allow_inf_nan=False),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ShowCreate(BaseModel):
    """Parsed fields for a new show."""

    movie_id: int
    theater_id: int
    show_time: datetime
    price: Price

    @field_validator("movie_id", "theater_id", "price", mode="before")
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        # bool is an int subclass and would otherwise coerce to 0 or 1
        if isinstance(value, bool):
            raise ValueError("booleans are not accepted")
        return value

    @field_validator("show_time")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Treat timestamps without an offset as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class ShowListing(BaseModel):
    """
    Flattened show row.

    Movie and theater descriptive fields are merged into the top level,
    prefixed where the column names would otherwise clash.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    movie_id: int
    theater_id: int
    show_time: datetime
    price: Price
    movie_title: str
    duration: int
    genre: str
    image_url: str | None = None
    theater_name: str
    location: str


class ShowDetail(BaseModel):
    """Show with its movie and theater embedded as sub-objects."""

    id: int
    movie_id: int
    theater_id: int
    show_time: datetime
    price: Price
    movie: MovieSummary
    theater: TheaterSummary


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
