"""Domain models for Podium.

Pure Python dataclasses representing the loaded dataset and the views
derived from it. These models are independent of SQLAlchemy and pydantic
and are what the aggregation layer consumes and returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# ============================================================================
# Dataset Domain
# ============================================================================


@dataclass(frozen=True)
class ParticipationRecord:
    """One country's appearance in one edition of the games.

    Missing counts are kept as None; aggregation treats them as 0.
    """

    year: int
    medals_count: int | None = None
    athlete_count: int | None = None
    participation_id: int | None = None
    city: str | None = None


@dataclass(frozen=True)
class CountryRecord:
    """A country and all of its participations, in supplied order."""

    id: int
    country: str
    participations: tuple[ParticipationRecord, ...] = ()


# One complete, immutable snapshot. A reload replaces it wholesale.
Dataset = tuple[CountryRecord, ...]


# ============================================================================
# Derived Views
# ============================================================================


@dataclass
class MedalsByCountry:
    """Parallel sequences of country names and their total medals."""

    names: list[str] = field(default_factory=list)
    totals: list[int] = field(default_factory=list)


@dataclass
class GlobalStats:
    """Dataset-wide counts."""

    total_games: int
    total_countries: int


@dataclass
class MedalPoint:
    """One edition in a medal history (label is the year as a string)."""

    label: str
    value: int


@dataclass
class CountryDetails:
    """Summary of a single country's participations."""

    name: str
    participation_count: int
    total_medals: int
    total_athletes: int
    medal_history: list[MedalPoint] = field(default_factory=list)
