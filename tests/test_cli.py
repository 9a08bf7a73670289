"""Tests for the monthgrid CLI."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from monthgrid.cli import main
from monthgrid.config import Config


@pytest.fixture
def events_file(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "title": "Standup", "date": "2024-03-05", "startTime": "09:00", "endTime": "10:00"},
                {"id": 2, "title": "Pairing", "date": "2024-03-05", "startTime": "09:30", "endTime": "10:30"},
                {"id": 3, "title": "Retro", "date": "2024-03-08", "startTime": "16:00", "endTime": "17:00"},
            ]
        )
    )
    return path


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_config_file():
    with patch("monthgrid.cli.load_config", return_value=Config()) as mock_load:
        yield mock_load


class TestMonthCommand:
    def test_renders_month(self, runner, events_file):
        result = runner.invoke(main, ["month", "--month", "2024-03", "--events", str(events_file)])

        assert result.exit_code == 0
        assert result.output.startswith("March 2024")
        assert "### Tuesday, March 5, 2024" in result.output
        assert "Pairing  (lane 2/2)" in result.output

    def test_json_output(self, runner, events_file):
        result = runner.invoke(main, ["month", "--month", "2024-03", "--events", str(events_file), "--json"])

        assert result.exit_code == 0
        cells = json.loads(result.output)
        assert len(cells) == 42
        march_5 = next(c for c in cells if c["dateString"] == "2024-03-05")
        assert march_5["events"]["totalLanes"] == 2
        assert [e["lane"] for e in march_5["events"]["events"]] == [0, 1]
        assert cells[0]["isValidDay"] is False

    def test_invalid_month(self, runner, events_file):
        result = runner.invoke(main, ["month", "--month", "2024-13", "--events", str(events_file)])
        assert result.exit_code == 2

    def test_no_source_configured(self, runner):
        result = runner.invoke(main, ["month", "--month", "2024-03"])
        assert result.exit_code == 2
        assert "No events source" in result.output

    def test_uses_configured_file(self, runner, events_file, no_config_file):
        no_config_file.return_value = Config(events_file=str(events_file), max_visible_events=1)
        result = runner.invoke(main, ["month", "--month", "2024-03"])

        assert result.exit_code == 0
        assert "+1 more" in result.output

    def test_bad_times_exit_with_error(self, runner, tmp_path):
        path = tmp_path / "events.json"
        path.write_text(
            json.dumps([{"id": 1, "title": "Bad", "date": "2024-03-05", "startTime": "9am", "endTime": "10:00"}])
        )
        result = runner.invoke(main, ["month", "--month", "2024-03", "--events", str(path)])

        assert result.exit_code == 1
        assert "Error: Invalid time" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["month", "--events", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    @patch("monthgrid.cli.HttpEventSource")
    def test_url_takes_precedence(self, mock_source, runner, events_file):
        mock_source.return_value.load_events.return_value = []
        result = runner.invoke(
            main,
            ["month", "--month", "2024-03", "--events", str(events_file), "--url", "https://example.com/e.json"],
        )

        assert result.exit_code == 0
        mock_source.assert_called_once_with("https://example.com/e.json")
        assert "###" not in result.output


class TestDayCommand:
    def test_renders_day(self, runner, events_file):
        result = runner.invoke(main, ["day", "2024-03-05", "--events", str(events_file)])

        assert result.exit_code == 0
        assert "March 5, 2024" in result.output
        assert "Tuesday" in result.output
        assert "Standup / Pairing" in result.output

    def test_empty_day(self, runner, events_file):
        result = runner.invoke(main, ["day", "2024-03-06", "--events", str(events_file)])
        assert result.exit_code == 0
        assert "No events scheduled for this day" in result.output

    def test_json_output(self, runner, events_file):
        result = runner.invoke(main, ["day", "2024-03-05", "--events", str(events_file), "--json"])

        data = json.loads(result.output)
        assert data["totalLanes"] == 2
        assert [e["title"] for e in data["events"]] == ["Standup", "Pairing"]
        assert data["conflicts"] == [[1, 2]]

    def test_undecodable_file_exits_with_error(self, runner, tmp_path):
        path = tmp_path / "events.json"
        path.write_bytes(b"\xff\xfe")
        result = runner.invoke(main, ["day", "2024-03-05", "--events", str(path)])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_directory_exits_with_error(self, runner, tmp_path):
        result = runner.invoke(main, ["day", "2024-03-05", "--events", str(tmp_path)])
        assert result.exit_code == 1
        assert "Error: Could not read" in result.output

    def test_invalid_date(self, runner, events_file):
        result = runner.invoke(main, ["day", "2024-02-30", "--events", str(events_file)])
        assert result.exit_code == 2
