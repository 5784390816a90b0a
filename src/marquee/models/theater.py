"""Theater model for screening venues."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marquee.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from marquee.models.show import Show


class Theater(Base, TimestampMixin):
    """Theater venue model."""

    __tablename__ = "theater"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    location: Mapped[str] = mapped_column(String(500), nullable=False)

    # Relationships
    shows: Mapped[list["Show"]] = relationship(back_populates="theater")

    def __repr__(self) -> str:
        return f"<Theater(id={self.id!r}, name={self.name!r}, location={self.location!r})>"
