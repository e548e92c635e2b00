"""Database schema for the Podium snapshot store.

Holds one dataset snapshot at a time. Unique constraints mirror the
dataset invariants (unique country ids and names).
"""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Country(Base):
    """A participating country.

    Invariant: UNIQUE(name)
    Name lookups would otherwise depend on insertion order.
    """

    __tablename__ = "countries"

    country_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (UniqueConstraint("name", name="uq_country_name"),)


class Participation(Base):
    """One country's appearance in one edition of the games."""

    __tablename__ = "participations"

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    country_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("countries.country_id"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    participation_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    city: Mapped[str | None] = mapped_column(String(128), nullable=True)
    medals_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    athlete_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
