"""Tests for the snapshot store.

Invariants:
1. Stored snapshot round-trips in original order
2. Replacing a snapshot removes the previous one entirely
3. Country ids and names are unique
"""

import pytest
from sqlalchemy.exc import IntegrityError

from podium.db import repo
from podium.db.schema import Base, Country, Participation
from podium.db.session import get_db_session, get_engine, init_db
from podium.models.domain import CountryRecord, ParticipationRecord


class TestSchemaCreation:
    """Test that schema can be created without errors."""

    def test_all_tables_created(self, engine):
        """Required tables exist after creation."""
        assert {"countries", "participations"}.issubset(Base.metadata.tables.keys())


class TestLoadDataset:
    """Test repo.load_dataset."""

    def test_empty_store(self, session):
        """Nothing stored gives an empty snapshot."""
        assert repo.load_dataset(session) == ()

    def test_roundtrip_preserves_order(self, session):
        """Countries and participations come back in insertion order."""
        dataset = (
            CountryRecord(
                id=5,
                country="Kenya",
                participations=(
                    ParticipationRecord(year=2008, medals_count=14, athlete_count=None),
                    ParticipationRecord(year=2000, medals_count=None, athlete_count=50),
                ),
            ),
            CountryRecord(id=2, country="Chile"),
        )
        repo.replace_dataset(session, dataset)
        session.commit()

        assert repo.load_dataset(session) == dataset


class TestReplaceDataset:
    """Test repo.replace_dataset."""

    def test_replaces_wholesale(self, session, dataset):
        """Second snapshot fully replaces the first."""
        repo.replace_dataset(session, dataset)
        session.commit()

        replacement = (CountryRecord(id=3, country="Japan"),)
        repo.replace_dataset(session, replacement)
        session.commit()

        assert repo.load_dataset(session) == replacement
        assert session.query(Participation).count() == 0
        assert repo.count_countries(session) == 1

    def test_duplicate_name_rejected(self, session):
        """Duplicate country names violate the store constraint."""
        dataset = (CountryRecord(id=1, country="Italy"), CountryRecord(id=2, country="Italy"))
        with pytest.raises(IntegrityError):
            repo.replace_dataset(session, dataset)

    def test_duplicate_id_rejected(self, session):
        """Duplicate country ids violate the primary key."""
        session.add(Country(country_id=1, name="Italy", position=0))
        session.commit()
        session.expunge_all()

        session.add(Country(country_id=1, name="France", position=1))
        with pytest.raises(IntegrityError):
            session.commit()


class TestSnapshotTransaction:
    """Test get_db_session against a store file."""

    def test_failed_replace_keeps_previous_snapshot(self, tmp_path, dataset):
        """A rejected replacement rolls back and the old snapshot survives."""
        db_path = tmp_path / "podium.db"
        init_db(db_path)
        with get_db_session(db_path) as session:
            repo.replace_dataset(session, dataset)

        duplicate = (CountryRecord(id=1, country="Italy"), CountryRecord(id=2, country="Italy"))
        with pytest.raises(IntegrityError):
            with get_db_session(db_path) as session:
                repo.replace_dataset(session, duplicate)

        with get_db_session(db_path) as session:
            assert repo.load_dataset(session) == dataset

    def test_same_path_shares_engine(self, tmp_path):
        """Relative and absolute spellings of one file reuse the engine."""
        db_path = tmp_path / "podium.db"
        assert get_engine(db_path) is get_engine(tmp_path / "." / "podium.db")
