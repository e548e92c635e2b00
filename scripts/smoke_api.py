#!/usr/bin/env python3
"""Smoke test for the API against the bundled snapshot.

Usage:
    python scripts/smoke_api.py [JSON_PATH]

Requires the test extra (httpx) for the in-process client.

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from fastapi.testclient import TestClient  # noqa: E402

from podium.api.app import create_app  # noqa: E402
from podium.source.loader import JsonDatasetSource  # noqa: E402

# Constants
DEFAULT_JSON_PATH = PROJECT_ROOT / "data" / "olympic.json"


def check_stats(client: TestClient) -> bool:
    """Check that global stats are served and non-empty."""
    response = client.get("/api/stats")
    if response.status_code != 200:
        print(f"FAIL: /api/stats returned {response.status_code}: {response.text}")
        return False

    data = response.json()
    print(f"OK: {data['totalCountries']} countries over {data['totalGames']} games")
    if data["totalCountries"] == 0:
        print("FAIL: Snapshot has no countries")
        return False
    return True


def check_medals_aligned(client: TestClient) -> bool:
    """Check that medal names and totals line up."""
    response = client.get("/api/medals")
    if response.status_code != 200:
        print(f"FAIL: /api/medals returned {response.status_code}: {response.text}")
        return False

    data = response.json()
    names = data["countryNames"]
    totals = data["countryTotalMedals"]

    if len(names) != len(totals):
        print(f"FAIL: {len(names)} names but {len(totals)} totals")
        return False

    print(f"OK: Medal totals for {len(names)} countries")
    return True


def check_every_country_detail(client: TestClient) -> bool:
    """Check that every id from the lookup resolves to a detail view."""
    response = client.get("/api/countries/ids")
    if response.status_code != 200:
        print(f"FAIL: /api/countries/ids returned {response.status_code}: {response.text}")
        return False

    ids = response.json()

    all_ok = True
    for name, country_id in ids.items():
        response = client.get(f"/api/countries/{country_id}")
        if response.status_code != 200:
            print(f"    FAIL: {name} ({country_id}) - {response.status_code}")
            all_ok = False
            continue

        detail = response.json()
        if len(detail["medalHistory"]) != detail["participationCount"]:
            print(f"    FAIL: {name} medal history does not match participations")
            all_ok = False
            continue

        print(f"    OK: {name} - {detail['totalMedals']} medals")

    return all_ok


def main() -> int:
    json_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_JSON_PATH
    client = TestClient(create_app(JsonDatasetSource(json_path)))

    checks = [check_stats, check_medals_aligned, check_every_country_detail]
    results = [check(client) for check in checks]

    if all(results):
        print("All checks passed")
        return 0

    print("Some checks failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
