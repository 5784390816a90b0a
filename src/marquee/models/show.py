"""Show model for scheduled screenings of a movie at a theater."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marquee.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from marquee.models.movie import Movie
    from marquee.models.theater import Theater


class Show(Base, TimestampMixin):
    """
    Scheduled screening model.

    Links a movie, a theater and a start time with a ticket price.
    Shows reference their movie and theater without owning them, so the
    foreign keys do not cascade in either direction.
    """

    __tablename__ = "shows"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_shows_price_non_negative"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Foreign keys
    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movie.id"),
        nullable=False,
        index=True,
    )
    theater_id: Mapped[int] = mapped_column(
        ForeignKey("theater.id"),
        nullable=False,
        index=True,
    )

    # Show details
    show_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    # Relationships
    movie: Mapped["Movie"] = relationship(back_populates="shows")
    theater: Mapped["Theater"] = relationship(back_populates="shows")

    def __repr__(self) -> str:
        return (
            f"<Show(movie_id={self.movie_id!r}, "
            f"theater_id={self.theater_id!r}, "
            f"show_time={self.show_time})>"
        )
