"""Dataset loading.

Turns the dashboard's JSON asset (or the SQLite snapshot store) into an
immutable Dataset. This is the only place a load can fail; the
aggregation layer is never called without a loaded snapshot.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from podium.models.domain import CountryRecord, Dataset, ParticipationRecord
from podium.models.types import CountryPayload

logger = logging.getLogger(__name__)

_payload_adapter = TypeAdapter(list[CountryPayload])


class DatasetLoadError(Exception):
    """Raised when a snapshot cannot be read or is structurally invalid."""


def parse_dataset(payload: Any) -> Dataset:
    """Validate decoded JSON and convert it to domain records.

    Args:
        payload: Decoded JSON, expected to be a list of country objects.

    Returns:
        Dataset in payload order.

    Raises:
        DatasetLoadError: If the payload does not match the expected shape.
    """
    try:
        countries = _payload_adapter.validate_python(payload)
    except ValidationError as e:
        raise DatasetLoadError(f"Invalid dataset: {e.error_count()} validation error(s)") from e

    return tuple(
        CountryRecord(
            id=c.id,
            country=c.country,
            participations=tuple(
                ParticipationRecord(
                    year=p.year,
                    medals_count=p.medals_count,
                    athlete_count=p.athlete_count,
                    participation_id=p.id,
                    city=p.city,
                )
                for p in c.participations
            ),
        )
        for c in countries
    )


def load_dataset(path: Path) -> Dataset:
    """Read and parse a JSON snapshot file.

    Raises:
        DatasetLoadError: If the file is missing, is not JSON, or has the
            wrong shape.
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise DatasetLoadError(f"Dataset file not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise DatasetLoadError(f"Could not read dataset {path}: {e}") from e

    return parse_dataset(payload)


class DatasetSource(ABC):
    """Serves one immutable snapshot.

    The snapshot is read on first use. Later calls return the same
    snapshot until reload() replaces it wholesale.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._snapshot: Dataset | None = None

    @abstractmethod
    def _load(self) -> Dataset:
        """Read a fresh snapshot.

        Raises:
            DatasetLoadError: If the snapshot cannot be read.
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human-readable location of the snapshot, for logs."""
        pass

    def snapshot(self) -> Dataset:
        """Return the current snapshot, loading it if needed."""
        if self._snapshot is None:
            return self.reload()
        return self._snapshot

    def reload(self) -> Dataset:
        """Load a fresh snapshot and replace the current one.

        On failure the previous snapshot (if any) is kept.
        """
        try:
            dataset = self._load()
        except DatasetLoadError as e:
            logger.warning(f"Failed to load dataset from {self.describe()}: {e}")
            raise
        self._snapshot = dataset
        logger.info(f"Loaded dataset from {self.describe()}: {len(dataset)} countries")
        return dataset


class JsonDatasetSource(DatasetSource):
    """Snapshot read from a JSON file in the dashboard asset format."""

    def _load(self) -> Dataset:
        return load_dataset(self.path)

    def describe(self) -> str:
        return str(self.path)


class DbDatasetSource(DatasetSource):
    """Snapshot read from the SQLite snapshot store."""

    def _load(self) -> Dataset:
        # Imported here so JSON-only deployments do not touch the database
        from sqlalchemy.exc import SQLAlchemyError

        from podium.db import repo
        from podium.db.session import get_db_session

        try:
            with get_db_session(self.path) as session:
                return repo.load_dataset(session)
        except SQLAlchemyError as e:
            raise DatasetLoadError(f"Could not read snapshot store {self.path}: {e}") from e

    def describe(self) -> str:
        return f"sqlite:///{self.path}"
