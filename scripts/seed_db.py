#!/usr/bin/env python3
"""Import a JSON snapshot into the SQLite snapshot store.

Usage:
    python scripts/seed_db.py [JSON_PATH] [DB_PATH]

Defaults to data/olympic.json and data/podium.db. The stored snapshot is
replaced wholesale. Serve it with PODIUM_DB_PATH=<DB_PATH>.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from sqlalchemy.exc import IntegrityError  # noqa: E402

from podium.db import repo  # noqa: E402
from podium.db.session import get_db_session, init_db  # noqa: E402
from podium.source.loader import DatasetLoadError, load_dataset  # noqa: E402

# Constants
DEFAULT_JSON_PATH = PROJECT_ROOT / "data" / "olympic.json"
DEFAULT_DB_PATH = PROJECT_ROOT / "data" / "podium.db"


def seed(json_path: Path, db_path: Path) -> int:
    """Load json_path and store it in db_path.

    Returns:
        Number of countries stored.
    """
    dataset = load_dataset(json_path)
    print(f"Loaded {len(dataset)} countries from {json_path}")

    init_db(db_path)
    with get_db_session(db_path) as session:
        repo.replace_dataset(session, dataset)
        stored = repo.count_countries(session)

    print(f"Stored {stored} countries in {db_path}")
    return stored


def main() -> int:
    json_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_JSON_PATH
    db_path = Path(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_DB_PATH

    try:
        seed(json_path, db_path)
    except DatasetLoadError as e:
        print(f"FAIL: {e}")
        return 1
    except IntegrityError as e:
        print(f"FAIL: Duplicate country id or name: {e.orig}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
