"""SQLAlchemy ORM models."""

from marquee.models.base import Base
from marquee.models.movie import Movie
from marquee.models.show import Show
from marquee.models.theater import Theater

__all__ = ["Base", "Movie", "Show", "Theater"]
