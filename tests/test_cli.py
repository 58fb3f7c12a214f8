from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from hourbook import configuration
from hourbook.cleanup import flush
from hourbook.initialize import initialize
from hourbook.repository.configuration import CONFIGURATION_REPO
from hourbook.repository.entry import ENTRY_REPO
from hourbook.repository.time_off import TIME_OFF_REPO
from hourbook.terminal.app import app
from hourbook.terminal.parse import parse_date, parse_period_type
from hourbook.time import today
from hourbook.view.state import get_view_options

runner = CliRunner()


def test_entry_set_records_hours(data_dir: Path) -> None:
    result = runner.invoke(
        app,
        ["-u", "alice", "entry", "set", "2024-01-08", "--hours", "8", "--rate", "20"],
    )
    assert result.exit_code == 0, result.output
    entry = ENTRY_REPO.get_entry("alice", "2024-01-08")
    assert entry is not None
    assert entry["hours"] == 8.0
    assert entry["hourly_rate"] == 20.0


def test_entry_set_uses_configured_rate(data_dir: Path) -> None:
    CONFIGURATION_REPO.update_config(hourly_rate=18.0)
    result = runner.invoke(app, ["e", "s", "2024-01-09", "-hr", "6", "-c", "Sam"])
    assert result.exit_code == 0, result.output
    entry = ENTRY_REPO.get_entry("default", "2024-01-09")
    assert entry is not None
    assert entry["hourly_rate"] == 18.0
    assert entry["coworker"] == "Sam"


def test_entry_set_rejects_bad_hours(data_dir: Path) -> None:
    result = runner.invoke(app, ["entry", "set", "2024-01-08", "--hours", "26"])
    assert result.exit_code == 1
    assert "cannot exceed 24" in result.output
    assert ENTRY_REPO.get_entry("default", "2024-01-08") is None


def test_entry_set_needs_a_field(data_dir: Path) -> None:
    result = runner.invoke(app, ["entry", "set", "2024-01-08"])
    assert result.exit_code == 1
    assert "Nothing to update" in result.output


def test_entry_week_shows_the_grid(data_dir: Path) -> None:
    runner.invoke(app, ["entry", "set", "2024-01-08", "--hours", "8", "--rate", "20"])
    result = runner.invoke(app, ["--no-header", "entry", "week", "2024-01-10"])
    assert result.exit_code == 0, result.output
    assert "Monday" in result.output
    assert "Sunday" in result.output
    assert "hourbook" not in result.output


def test_entry_export_writes_csv(data_dir: Path, tmp_path: Path) -> None:
    runner.invoke(app, ["entry", "set", "2024-01-08", "--hours", "8", "--rate", "20"])
    target = tmp_path / "all.csv"
    result = runner.invoke(app, ["entry", "export", "--all", "--output", str(target)])
    assert result.exit_code == 0, result.output
    assert "Exported 1 entries" in result.output
    assert target.read_text().splitlines()[1] == "2024-01-08,Monday,8,,,20.00,160.00"


def test_report_show(data_dir: Path) -> None:
    runner.invoke(app, ["entry", "set", "2024-01-08", "--hours", "9", "--rate", "20"])
    result = runner.invoke(app, ["report", "show", "monthly", "2024-01-15"])
    assert result.exit_code == 0, result.output
    assert "January 2024" in result.output


def test_report_show_rejects_unknown_period(data_dir: Path) -> None:
    result = runner.invoke(app, ["report", "show", "fortnightly"])
    assert result.exit_code == 2


def test_report_export(data_dir: Path, tmp_path: Path) -> None:
    runner.invoke(app, ["entry", "set", "2024-01-08", "--hours", "9", "--rate", "20"])
    target = tmp_path / "report.csv"
    result = runner.invoke(
        app, ["r", "x", "w", "2024-01-15", "--offset", "-1", "--output", str(target)]
    )
    assert result.exit_code == 0, result.output
    text = target.read_text()
    assert text.startswith("Period Type,weekly\nPeriod,2024-01-08\n")
    assert "Total Hours,9.00" in text


def test_time_off_set_and_view(data_dir: Path) -> None:
    result = runner.invoke(app, ["timeoff", "set", "2024-01-10", "--pto", "8"])
    assert result.exit_code == 0, result.output
    assert TIME_OFF_REPO.load_weekly_time_off("default", "2024-01-08")["pto_hours"] == 8.0

    result = runner.invoke(app, ["to", "view", "2024-01-14"])
    assert result.exit_code == 0, result.output
    assert "8.0" in result.output


def test_time_off_rejects_negative_hours(data_dir: Path) -> None:
    result = runner.invoke(app, ["timeoff", "set", "2024-01-10", "--holiday=-2"])
    assert result.exit_code == 1
    assert "cannot be negative" in result.output


def test_config_set_and_view(data_dir: Path) -> None:
    result = runner.invoke(
        app, ["config", "set", "--hourly-rate", "22.5", "--no-cache-rollups"]
    )
    assert result.exit_code == 0, result.output
    config = CONFIGURATION_REPO.get_config()
    assert config["hourly_rate"] == 22.5
    assert config["cache_rollups"] is False

    result = runner.invoke(app, ["c", "v"])
    assert result.exit_code == 0, result.output
    assert "22.50" in result.output


def test_config_set_rejects_unknown_log_level(data_dir: Path) -> None:
    result = runner.invoke(app, ["config", "set", "--log-level", "loud"])
    assert result.exit_code == 1


class TestParse:
    def test_parse_date(self) -> None:
        assert parse_date("2024-01-08").isoformat() == "2024-01-08"
        assert parse_date(None) == today()
        assert parse_date("t") == today()
        assert parse_date("yesterday") == today().subtract(days=1)
        assert parse_date("o") == today().add(days=1)
        assert parse_date("-3") == today().subtract(days=3)

    @pytest.mark.parametrize("value", ["2024-02-30", "next week", "08/01/2024"])
    def test_parse_date_rejects(self, value: str) -> None:
        with pytest.raises(typer.BadParameter):
            parse_date(value)

    def test_parse_period_type(self) -> None:
        assert parse_period_type("M") == "monthly"
        assert parse_period_type("biweekly") == "biweekly"
        with pytest.raises(typer.BadParameter):
            parse_period_type("quarterly")


def test_initialize_prepares_config_and_data(data_dir: Path) -> None:
    initialize()
    assert configuration.APP_CONFIG_PATH.is_file()
    assert (data_dir / "users").is_dir()
    assert get_view_options()["show_header"] is True

    CONFIGURATION_REPO.update_config(user_id="alice")
    flush()
    CONFIGURATION_REPO.clear_cache()
    assert CONFIGURATION_REPO.get_config()["user_id"] == "alice"


def test_no_wrap_is_a_global_option(data_dir: Path) -> None:
    result = runner.invoke(app, ["--no-wrap", "entry", "week", "2024-01-10"])
    assert result.exit_code == 0, result.output
    assert get_view_options()["no_wrap"] is True
