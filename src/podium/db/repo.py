"""Repository for the snapshot store.

Encapsulates all SQLAlchemy queries. Callers get domain records, never
SQLAlchemy entities.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from podium.db.schema import Country, Participation
from podium.models.domain import CountryRecord, Dataset, ParticipationRecord

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

__all__ = ["DbSession", "load_dataset", "replace_dataset", "count_countries"]


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _participation_to_record(row: Participation) -> ParticipationRecord:
    """Convert SQLAlchemy Participation to domain record."""
    return ParticipationRecord(
        year=row.year,
        medals_count=row.medals_count,
        athlete_count=row.athlete_count,
        participation_id=row.participation_id,
        city=row.city,
    )


# ============================================================================
# Snapshot Operations
# ============================================================================


def load_dataset(session: DbSession) -> Dataset:
    """Load the stored snapshot in its original order.

    Args:
        session: Database session.

    Returns:
        Tuple of CountryRecord, empty if nothing is stored.
    """
    countries = session.execute(select(Country).order_by(Country.position)).scalars().all()
    rows = session.execute(
        select(Participation).order_by(Participation.country_id, Participation.position)
    ).scalars().all()

    by_country: dict[int, list[ParticipationRecord]] = {}
    for row in rows:
        by_country.setdefault(row.country_id, []).append(_participation_to_record(row))

    return tuple(
        CountryRecord(
            id=country.country_id,
            country=country.name,
            participations=tuple(by_country.get(country.country_id, [])),
        )
        for country in countries
    )


def replace_dataset(session: DbSession, dataset: Dataset) -> None:
    """Replace the stored snapshot wholesale.

    Note: Caller is responsible for committing. Duplicate ids or names
    violate the table constraints and surface as IntegrityError on flush.

    Args:
        session: Database session.
        dataset: Snapshot to store.
    """
    session.execute(delete(Participation))
    session.execute(delete(Country))

    for position, record in enumerate(dataset):
        session.add(Country(country_id=record.id, name=record.country, position=position))
        for p_position, p in enumerate(record.participations):
            session.add(
                Participation(
                    country_id=record.id,
                    position=p_position,
                    participation_id=p.participation_id,
                    year=p.year,
                    city=p.city,
                    medals_count=p.medals_count,
                    athlete_count=p.athlete_count,
                )
            )
    session.flush()


def count_countries(session: DbSession) -> int:
    """Count stored countries."""
    return session.query(Country).count()
