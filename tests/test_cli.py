"""Tests for the command line interface."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from cadence.cli import main
from cadence.config import Config, load_config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def store_args(tmp_path):
    return ["--store", str(tmp_path / "events.json")]


@pytest.fixture(autouse=True)
def default_config():
    with patch("cadence.cli.load_config", return_value=Config()):
        yield


class TestAdd:
    def test_schedules_event(self, runner, store_args):
        result = runner.invoke(main, [*store_args, "add", "2024-01-01", "10:00", "11:00", "--repeat", "weekly"])
        assert result.exit_code == 0
        assert "Scheduled #1 on Monday, January 01: 10:00-11:00 (weekly)" in result.output

    def test_json_output(self, runner, store_args):
        result = runner.invoke(main, [*store_args, "add", "2024-01-01", "10:00", "11:00", "--notes", "standup", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "id": 1,
            "date": "2024-01-01",
            "start": "10:00",
            "end": "11:00",
            "recurrence": None,
            "notes": "standup",
        }

    def test_overlap_rejected(self, runner, store_args):
        runner.invoke(main, [*store_args, "add", "2024-01-01", "10:00", "11:00", "--repeat", "weekly"])
        result = runner.invoke(main, [*store_args, "add", "2024-01-08", "10:30", "11:30"])
        assert result.exit_code == 1
        assert "Overlapping events are not allowed" in result.output
        assert "conflicts with 2024-01-01" in result.output

    def test_adjacent_accepted(self, runner, store_args):
        runner.invoke(main, [*store_args, "add", "2024-01-01", "10:00", "11:00", "--repeat", "weekly"])
        result = runner.invoke(main, [*store_args, "add", "2024-01-08", "11:00", "12:00"])
        assert result.exit_code == 0

    def test_invalid_day(self, runner, store_args):
        result = runner.invoke(main, [*store_args, "add", "2023-02-30", "10:00", "11:00"])
        assert result.exit_code == 1
        assert "Invalid date for month 2" in result.output

    def test_inverted_times(self, runner, store_args):
        result = runner.invoke(main, [*store_args, "add", "2024-01-01", "14:00", "13:00"])
        assert result.exit_code == 1
        assert "ending time must be after starting time" in result.output

    def test_malformed_date(self, runner, store_args):
        result = runner.invoke(main, [*store_args, "add", "tomorrow", "10:00", "11:00"])
        assert result.exit_code == 2

    def test_malformed_time(self, runner, store_args):
        result = runner.invoke(main, [*store_args, "add", "2024-01-01", "25:00", "26:00"])
        assert result.exit_code == 2

    def test_default_repeat_from_config(self, runner, store_args):
        with patch("cadence.cli.load_config", return_value=Config(default_repeat="daily")):
            result = runner.invoke(main, [*store_args, "add", "2024-01-01", "10:00", "11:00"])
        assert "(daily)" in result.output

    def test_unknown_default_repeat_in_config_file(self, runner, store_args, tmp_path):
        conf = tmp_path / "cadence.conf"
        conf.write_text("DEFAULT_REPEAT=fortnightly\n")
        with patch("cadence.cli.load_config", return_value=load_config(conf)):
            result = runner.invoke(main, [*store_args, "add", "2024-01-01", "10:00", "11:00"])
        assert result.exit_code == 0
        assert result.output.strip().endswith(": 10:00-11:00")


class TestCheck:
    def test_free_slot(self, runner, store_args, tmp_path):
        result = runner.invoke(main, [*store_args, "check", "2024-01-01", "10:00", "11:00"])
        assert result.exit_code == 0
        assert "is free" in result.output
        assert not (tmp_path / "events.json").exists()

    def test_conflict(self, runner, store_args):
        runner.invoke(main, [*store_args, "add", "2024-01-31", "09:00", "10:00", "--repeat", "monthly"])
        result = runner.invoke(main, [*store_args, "check", "2024-04-30", "09:30", "10:30"])
        assert result.exit_code == 1


class TestDay:
    def test_lists_recurring_events(self, runner, store_args):
        runner.invoke(main, [*store_args, "add", "2024-01-31", "09:00", "10:00", "--repeat", "monthly", "--notes", "rent"])
        result = runner.invoke(main, [*store_args, "day", "--date", "2024-02-29"])
        assert result.exit_code == 0
        assert "09:00-10:00 (monthly) rent" in result.output

    def test_empty(self, runner, store_args):
        result = runner.invoke(main, [*store_args, "day", "--date", "2024-02-29"])
        assert result.exit_code == 0
        assert "No events." in result.output

    def test_invalid_date(self, runner, store_args):
        result = runner.invoke(main, [*store_args, "day", "--date", "2023-02-29"])
        assert result.exit_code == 1

    def test_json(self, runner, store_args):
        runner.invoke(main, [*store_args, "add", "2024-01-01", "09:00", "10:00", "--repeat", "daily"])
        result = runner.invoke(main, [*store_args, "day", "--date", "2024-06-01", "--json"])
        assert [e["id"] for e in json.loads(result.output)] == [1]


class TestWeek:
    def test_groups_by_day(self, runner, store_args):
        runner.invoke(main, [*store_args, "add", "2024-01-01", "10:00", "11:00", "--repeat", "weekly"])
        runner.invoke(main, [*store_args, "add", "2024-01-10", "14:00", "15:00"])
        result = runner.invoke(main, [*store_args, "week", "--start", "2024-01-08"])
        assert result.exit_code == 0
        assert "### Monday, January 08" in result.output
        assert "### Wednesday, January 10" in result.output
        assert "### Monday, January 15" in result.output
        assert "Tuesday" not in result.output

    def test_json_has_every_day(self, runner, store_args):
        result = runner.invoke(main, [*store_args, "week", "--start", "2024-12-28", "--json"])
        days = json.loads(result.output)
        assert [d["date"] for d in days][0] == "2024-12-28"
        assert days[-1]["date"] == "2025-01-04"
        assert all(d["events"] == [] for d in days)

    def test_empty(self, runner, store_args):
        result = runner.invoke(main, [*store_args, "week", "--start", "2024-01-08"])
        assert "No events this week." in result.output

    def test_bad_start(self, runner, store_args):
        result = runner.invoke(main, [*store_args, "week", "--start", "soon"])
        assert result.exit_code == 2

    def test_nonexistent_start_day(self, runner, store_args):
        result = runner.invoke(main, [*store_args, "week", "--start", "2024-02-30"])
        assert result.exit_code == 1
        assert "Invalid date for month 2" in result.output
