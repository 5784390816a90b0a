"""Movie model for the film catalogue shows are scheduled against."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marquee.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from marquee.models.show import Show


class Movie(Base, TimestampMixin):
    """
    Movie model.

    Rows are owned by the movie-management side of the system; the show
    directory only reads them.
    """

    __tablename__ = "movie"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    genre: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    # Relationships
    shows: Mapped[list["Show"]] = relationship(back_populates="movie")

    def __repr__(self) -> str:
        return f"<Movie(id={self.id!r}, title={self.title!r}, duration={self.duration})>"
