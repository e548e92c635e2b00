"""Shared pytest fixtures for podium tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from podium.db.schema import Base
from podium.models.domain import CountryRecord, ParticipationRecord


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def dataset():
    """Two-country dataset sharing the 2000 edition."""
    return (
        CountryRecord(
            id=1,
            country="Italy",
            participations=(
                ParticipationRecord(year=2000, medals_count=5, athlete_count=20),
                ParticipationRecord(year=2004, medals_count=3, athlete_count=18),
            ),
        ),
        CountryRecord(
            id=2,
            country="France",
            participations=(ParticipationRecord(year=2000, medals_count=2, athlete_count=15),),
        ),
    )


@pytest.fixture
def dataset_payload():
    """The same dataset as the JSON asset format."""
    return [
        {
            "id": 1,
            "country": "Italy",
            "participations": [
                {"id": 1, "year": 2000, "city": "Sydney", "medalsCount": 5, "athleteCount": 20},
                {"id": 2, "year": 2004, "city": "Athens", "medalsCount": 3, "athleteCount": 18},
            ],
        },
        {
            "id": 2,
            "country": "France",
            "participations": [
                {"id": 1, "year": 2000, "city": "Sydney", "medalsCount": 2, "athleteCount": 15},
            ],
        },
    ]
