"""Pydantic schemas for API requests and responses."""

from marquee.schemas.movie import MovieSummary
from marquee.schemas.show import (
    MessageResponse,
    ShowCreate,
    ShowDetail,
    ShowListing,
)
from marquee.schemas.theater import TheaterSummary

__all__ = [
    "MovieSummary",
    "TheaterSummary",
    "ShowCreate",
    "ShowListing",
    "ShowDetail",
    "MessageResponse",
]
