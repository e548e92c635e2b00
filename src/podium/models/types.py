"""Pydantic models for the Podium API.

Two groups:
- Payload models validate the JSON snapshot the dashboard ships as an
  asset (camelCase keys, counts may be missing).
- Response models are what the API returns to the dashboard.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ParticipationPayload(BaseModel):
    """One participation as found in the JSON snapshot."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    year: int
    city: str | None = None
    medals_count: int | None = Field(default=None, alias="medalsCount")
    athlete_count: int | None = Field(default=None, alias="athleteCount")


class CountryPayload(BaseModel):
    """One country as found in the JSON snapshot."""

    id: int
    country: str
    participations: list[ParticipationPayload] = []


class _CamelResponse(BaseModel):
    """Base for responses serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GlobalStatsResponse(_CamelResponse):
    """Dataset-wide counts."""

    total_games: int
    total_countries: int


class MedalsByCountryResponse(_CamelResponse):
    """Country names with their total medals, index-aligned."""

    country_names: list[str]
    country_total_medals: list[int]


class MedalPointResponse(BaseModel):
    """One point of a medal history series."""

    label: str  # year
    value: int  # medals


class CountryDetailsResponse(_CamelResponse):
    """Detail view for a single country."""

    name: str
    participation_count: int
    total_medals: int
    total_athletes: int
    medal_history: list[MedalPointResponse]
