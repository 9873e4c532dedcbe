from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator, List

import pytest
from typer.testing import CliRunner

from cli.app import ALERT_EXIT_CODE, app
from settings import get_settings


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch) -> Iterator[List[object]]:
    levels: List[object] = []
    monkeypatch.setattr("cli.app.configure_logging", levels.append)
    for name in ("TEMPERATURE_FLOOR", "TEMPERATURE_CEILING", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield levels
    get_settings.cache_clear()


@pytest.fixture()
def station_file(tmp_path: Path) -> Path:
    path = tmp_path / "zb1.json"
    path.write_text(
        json.dumps(
            {
                "name": "ZB1",
                "readings": [
                    {"temp": 9, "time": "2016-11-10 09:10"},
                    {"temp": 20, "time": "2016-11-10 09:20"},
                    {"temp": 31, "time": "2016-11-10 09:50"},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


def test_check_lists_readings_outside_range(runner: CliRunner, station_file: Path) -> None:
    result = runner.invoke(app, ["check", str(station_file), "--floor", "10", "--ceiling", "30"])

    assert result.exit_code == 0
    assert "Station ZB1" in result.stdout
    assert "range: [10.0, 30.0]" in result.stdout
    assert "outside_count: 2" in result.stdout
    assert "2016-11-10 09:10: 9.0" in result.stdout
    assert "2016-11-10 09:50: 31.0" in result.stdout
    assert "09:20" not in result.stdout


def test_check_uses_environment_plan(monkeypatch, runner: CliRunner, station_file: Path) -> None:
    monkeypatch.setenv("TEMPERATURE_FLOOR", "0")
    monkeypatch.setenv("TEMPERATURE_CEILING", "40")

    result = runner.invoke(app, ["check", str(station_file)])

    assert result.exit_code == 0
    assert "No readings outside range." in result.stdout


def test_check_fail_on_alert_sets_exit_code(runner: CliRunner, station_file: Path) -> None:
    result = runner.invoke(
        app, ["check", str(station_file), "--floor", "10", "--ceiling", "30", "--fail-on-alert"]
    )

    assert result.exit_code == ALERT_EXIT_CODE


def test_check_fail_on_alert_passes_without_alerts(runner: CliRunner, station_file: Path) -> None:
    result = runner.invoke(
        app, ["check", str(station_file), "--floor", "0", "--ceiling", "40", "--fail-on-alert"]
    )

    assert result.exit_code == 0


def test_inverted_plan_warns_and_reports_everything(
    runner: CliRunner, station_file: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING, logger="cli.app")

    result = runner.invoke(app, ["check", str(station_file), "--floor", "30", "--ceiling", "10"])

    assert result.exit_code == 0
    assert "outside_count: 3" in result.stdout
    assert any("floor exceeds ceiling" in record.getMessage() for record in caplog.records)


def test_check_reports_unreadable_station_file(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(app, ["check", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "Cannot load station file" in result.output


def test_plan_shows_resolved_values(runner: CliRunner) -> None:
    result = runner.invoke(app, ["plan", "--ceiling", "60"])

    assert result.exit_code == 0
    assert "temperature_floor: 50.0" in result.stdout
    assert "temperature_ceiling: 60.0" in result.stdout


def test_log_level_option_is_forwarded(runner: CliRunner, _isolated_environment: List[object]) -> None:
    result = runner.invoke(app, ["--log-level", "debug", "plan"])

    assert result.exit_code == 0
    assert _isolated_environment == ["DEBUG"]


@pytest.mark.parametrize("option", ["--floor", "--ceiling"])
@pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
def test_check_rejects_non_finite_bounds(
    runner: CliRunner, station_file: Path, option: str, raw: str
) -> None:
    result = runner.invoke(app, ["check", str(station_file), option, raw])

    assert result.exit_code == 2
    assert "finite number" in result.output
    assert "Station ZB1" not in result.output


def test_plan_rejects_non_finite_floor(runner: CliRunner) -> None:
    result = runner.invoke(app, ["plan", "--floor", "nan"])

    assert result.exit_code == 2
    assert "finite number" in result.output


def test_unknown_log_level_is_rejected(runner: CliRunner, _isolated_environment: List[object]) -> None:
    result = runner.invoke(app, ["--log-level", "loud", "plan"])

    assert result.exit_code == 2
    assert _isolated_environment == []
