"""Sessions for the SQLite snapshot store.

The store holds a single snapshot, written by scripts/seed_db.py and read
by DbDatasetSource. One engine is kept per database file.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from podium.db.schema import Base

DEFAULT_DB_PATH = Path("data/podium.db")

# Keyed by resolved database path
_engines: dict[str, Engine] = {}
_session_factories: dict[str, sessionmaker] = {}


def _resolve(db_path: Path | None) -> tuple[Path, str]:
    path = Path(db_path) if db_path is not None else DEFAULT_DB_PATH
    return path, str(path.resolve())


def get_engine(db_path: Path | None = None) -> Engine:
    """Get the engine bound to a snapshot store file.

    A single shared connection (StaticPool) serves every thread; the API
    only reads from it, and the seed script is the only writer.

    Args:
        db_path: Store file. Defaults to data/podium.db.
    """
    path, key = _resolve(db_path)
    engine = _engines.get(key)
    if engine is None:
        path.parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            f"sqlite:///{path}",
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        _engines[key] = engine
    return engine


def _session_factory(db_path: Path | None) -> sessionmaker:
    _, key = _resolve(db_path)
    factory = _session_factories.get(key)
    if factory is None:
        factory = sessionmaker(bind=get_engine(db_path))
        _session_factories[key] = factory
    return factory


@contextmanager
def get_db_session(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Open a session on the store as one transaction.

    A snapshot replacement either lands completely or not at all: the
    session commits on normal exit and rolls back if the block raises.

    Example:
        with get_db_session(db_path) as session:
            repo.replace_dataset(session, dataset)
    """
    session = _session_factory(db_path)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Create the countries and participations tables if missing."""
    Base.metadata.create_all(get_engine(db_path))
