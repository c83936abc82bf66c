"""Tests for src.run_report (file records -> report text)."""

import json
from pathlib import Path

import pytest

from src.run_report import run

EXPECTED_EXAMPLE = (
    "This executor meets the demands of only 1 out of 2 clients\n"
    "\n"
    "Available clients sorted by distance to executor:\n"
    "name: X, distance: 0.000, reward: 5"
)


class TestRun:
    def test_example_from_files(self, records_dir):
        result = run("distance", records_dir)
        assert result.is_success
        assert result.value == EXPECTED_EXAMPLE

    def test_sort_by_reward(self, records_dir):
        result = run("reward", records_dir)
        assert "Available clients sorted by highest reward:" in result.value

    def test_missing_executor_reported(self, records_dir):
        (records_dir / "executor.json").unlink()
        result = run("distance", records_dir)
        assert not result.is_success
        assert "executor.json" in result.message

    def test_clients_error_wins_over_executor_error(self, tmp_path):
        result = run("distance", tmp_path)
        assert not result.is_success
        assert "clients.json" in result.message
        assert "executor.json" not in result.message

    def test_no_eligible_clients(self, records_dir):
        (records_dir / "executor.json").write_text(
            json.dumps({"position": [0, 0], "possibilities": []}), encoding="utf-8"
        )
        result = run("distance", records_dir)
        assert result.message == "This executor cannot meet the demands of any client!"

    def test_invalid_sort_by_raises(self, records_dir):
        with pytest.raises(ValueError, match="Invalid sort_by"):
            run("alphabetical", records_dir)


class TestBundledSampleData:
    """The sample records under data/ should produce a full report."""

    DATA_DIR = Path(__file__).parent.parent / "data"

    def test_sample_report(self):
        if not (self.DATA_DIR / "clients.json").exists():
            pytest.skip(f"Sample data not found at {self.DATA_DIR}")

        result = run("reward", self.DATA_DIR)
        lines = result.value.split("\n")
        assert lines[0] == "This executor meets the demands of only 4 out of 5 clients"
        assert lines[2] == "Available clients sorted by highest reward:"
        assert [line.split(",")[0] for line in lines[3:]] == [
            "name: Harbor Logistics",
            "name: Elm Street Clinic",
            "name: Northside Bakery",
            "name: Corner Books",
        ]


class TestRecordEdgeCases:
    def test_numeric_demand_tags_match(self, tmp_path):
        (tmp_path / "clients.json").write_text(json.dumps([
            {"name": "X", "position": [0, 0], "reward": 5, "demands": [1]},
        ]), encoding="utf-8")
        (tmp_path / "executor.json").write_text(
            json.dumps({"position": [0, 0], "possibilities": [1, 2]}), encoding="utf-8"
        )
        result = run("distance", tmp_path)
        assert result.value == (
            "This executor meets all demands of all clients!\n"
            "\n"
            "Available clients sorted by distance to executor:\n"
            "name: X, distance: 0.000, reward: 5"
        )

    def test_invalid_utf8_is_a_failure_result(self, records_dir):
        (records_dir / "clients.json").write_bytes(b'[{"name": "\xff"}]')
        result = run("distance", records_dir)
        assert not result.is_success
        assert "not valid UTF-8" in result.message

    def test_position_dimension_mismatch_is_a_failure_result(self, records_dir):
        (records_dir / "clients.json").write_text(json.dumps([
            {"name": "X", "position": [0, 0, 1], "reward": 5},
        ]), encoding="utf-8")
        result = run("distance", records_dir)
        assert result.message == (
            "Client X has a 3-D position but the executor position is 2-D"
        )
