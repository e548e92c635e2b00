"""Tests for the seed and smoke scripts.

Scripts run as subprocesses from the project root, the way they are
invoked by hand.
"""

import json
import subprocess
import sys
from pathlib import Path

from podium.db import repo
from podium.db.session import get_db_session

# Project root
PROJECT_ROOT = Path(__file__).parent.parent
SEED_SCRIPT = PROJECT_ROOT / "scripts" / "seed_db.py"
SMOKE_SCRIPT = PROJECT_ROOT / "scripts" / "smoke_api.py"
SAMPLE_JSON = PROJECT_ROOT / "data" / "olympic.json"


def run_script(script_path: Path, *args) -> subprocess.CompletedProcess:
    """Run a project script and capture its output."""
    return subprocess.run(
        [sys.executable, str(script_path), *(str(a) for a in args)],
        capture_output=True,
        text=True,
        timeout=60,
        cwd=str(PROJECT_ROOT),
    )


class TestSeedScript:
    """Test seed_db.py script."""

    def test_script_exists(self):
        """seed_db.py script exists."""
        assert SEED_SCRIPT.exists(), f"Script not found: {SEED_SCRIPT}"

    def test_seeds_database(self, tmp_path, dataset_payload):
        """Seeded store serves the same countries as the JSON file."""
        json_path = tmp_path / "olympic.json"
        json_path.write_text(json.dumps(dataset_payload))
        db_path = tmp_path / "podium.db"

        result = run_script(SEED_SCRIPT, json_path, db_path)

        assert result.returncode == 0, f"Script failed: {result.stderr}"
        assert "Stored 2 countries" in result.stdout
        with get_db_session(db_path) as session:
            stored = repo.load_dataset(session)
        assert [(c.id, c.country) for c in stored] == [(1, "Italy"), (2, "France")]
        assert [p.city for p in stored[0].participations] == ["Sydney", "Athens"]

    def test_duplicate_name_reported(self, tmp_path, dataset_payload):
        """A snapshot with a repeated country name is refused."""
        dataset_payload[1]["country"] = "Italy"
        json_path = tmp_path / "olympic.json"
        json_path.write_text(json.dumps(dataset_payload))

        result = run_script(SEED_SCRIPT, json_path, tmp_path / "podium.db")

        assert result.returncode == 1
        assert "FAIL: Duplicate country id or name" in result.stdout
        assert "Traceback" not in result.stderr

    def test_missing_json_reported(self, tmp_path):
        """A missing input file is reported, not raised."""
        result = run_script(SEED_SCRIPT, tmp_path / "nope.json", tmp_path / "podium.db")

        assert result.returncode == 1
        assert "FAIL: Dataset file not found" in result.stdout


class TestSmokeScript:
    """Test smoke_api.py script."""

    def test_script_exists(self):
        """smoke_api.py script exists."""
        assert SMOKE_SCRIPT.exists(), f"Script not found: {SMOKE_SCRIPT}"

    def test_passes_on_sample_snapshot(self):
        """Bundled data/olympic.json passes every check."""
        result = run_script(SMOKE_SCRIPT, SAMPLE_JSON)

        assert result.returncode == 0, f"Smoke failed: {result.stdout}\n{result.stderr}"
        assert "All checks passed" in result.stdout

    def test_missing_file_fails_cleanly(self, tmp_path):
        """Unloadable snapshot fails every check without a traceback."""
        result = run_script(SMOKE_SCRIPT, tmp_path / "nope.json")

        assert result.returncode == 1
        assert "Traceback" not in result.stderr
        assert "FAIL: /api/stats returned 503" in result.stdout
        assert "FAIL: /api/medals returned 503" in result.stdout
        assert "FAIL: /api/countries/ids returned 503" in result.stdout
        assert "Some checks failed" in result.stdout
