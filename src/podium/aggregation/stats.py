"""Statistics aggregation over a participation dataset.

Every function here is pure: the snapshot is passed in explicitly, nothing
is cached between calls, and the input is never mutated. Missing medal or
athlete counts are treated as zero rather than rejected.
"""

from __future__ import annotations

from collections.abc import Iterable

from podium.models.domain import (
    CountryDetails,
    CountryRecord,
    Dataset,
    GlobalStats,
    MedalPoint,
    MedalsByCountry,
    ParticipationRecord,
)


def total_medals(participations: Iterable[ParticipationRecord]) -> int:
    """Sum medals over participations, counting a missing value as 0."""
    return sum(p.medals_count or 0 for p in participations)


def total_athletes(participations: Iterable[ParticipationRecord]) -> int:
    """Sum athletes over participations, counting a missing value as 0."""
    return sum(p.athlete_count or 0 for p in participations)


def medals_by_country(dataset: Dataset) -> MedalsByCountry:
    """Compute total medals per country, in dataset order.

    Args:
        dataset: Loaded snapshot.

    Returns:
        MedalsByCountry where totals[i] belongs to names[i].
    """
    result = MedalsByCountry()
    for record in dataset:
        result.names.append(record.country)
        result.totals.append(total_medals(record.participations))
    return result


def global_stats(dataset: Dataset) -> GlobalStats:
    """Count distinct editions and countries.

    Editions are counted by distinct year, so the same year appearing
    under several countries counts once.
    """
    years = {p.year for record in dataset for p in record.participations}
    return GlobalStats(total_games=len(years), total_countries=len(dataset))


def ids_by_name(dataset: Dataset) -> dict[str, int]:
    """Map country name to id.

    Names are assumed unique. On a duplicate, the later record wins.
    """
    return {record.country: record.id for record in dataset}


def country_details_by_id(dataset: Dataset, country_id: int) -> CountryDetails | None:
    """Build the detail view for one country.

    Args:
        dataset: Loaded snapshot.
        country_id: Id of the country to summarize.

    Returns:
        CountryDetails for the first record with that id, or None if no
        record matches.
    """
    record = _find_country(dataset, country_id)
    if record is None:
        return None

    participations = record.participations
    return CountryDetails(
        name=record.country,
        participation_count=len(participations),
        total_medals=total_medals(participations),
        total_athletes=total_athletes(participations),
        medal_history=[
            MedalPoint(label=str(p.year), value=p.medals_count or 0) for p in participations
        ],
    )


def _find_country(dataset: Dataset, country_id: int) -> CountryRecord | None:
    for record in dataset:
        if record.id == country_id:
            return record
    return None
