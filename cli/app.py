from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from cli.loader import StationFileError, load_station
from cli.render import render_alerts, render_plan
from logging_config import configure_logging, resolve_level
from services.range_filter import readings_outside_range
from settings import OperatingPlan, Settings, get_settings

logger = logging.getLogger(__name__)

ALERT_EXIT_CODE = 3


@dataclass
class CLIState:
    settings: Settings


app = typer.Typer(
    help="Report station readings that fall outside the operating temperature range.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


def _finite_temperature(value: Optional[float]) -> Optional[float]:
    if value is not None and not math.isfinite(value):
        raise typer.BadParameter("must be a finite number.")
    return value


def _known_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        resolve_level(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return value.strip().upper()


def _resolve_plan(state: CLIState, floor: Optional[float], ceiling: Optional[float]) -> OperatingPlan:
    defaults = state.settings.operating_plan()
    plan = OperatingPlan(
        temperature_floor=floor if floor is not None else defaults.temperature_floor,
        temperature_ceiling=ceiling if ceiling is not None else defaults.temperature_ceiling,
    )
    if plan.is_inverted:
        logger.warning(
            "Operating plan floor exceeds ceiling; every reading will be reported",
            extra={"floor": plan.temperature_floor, "ceiling": plan.temperature_ceiling},
        )
    return plan


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        callback=_known_log_level,
        help="Logging level (defaults to LOG_LEVEL env or INFO).",
    ),
) -> None:
    """Entry point for the CLI."""
    settings = get_settings()
    configure_logging(log_level or settings.log_level)
    ctx.obj = CLIState(settings=settings)


@app.command("check")
def check_command(
    ctx: typer.Context,
    station_file: Path = typer.Argument(..., dir_okay=False, help="Path to a station JSON file."),
    floor: Optional[float] = typer.Option(
        None,
        "--floor",
        callback=_finite_temperature,
        help="Lowest acceptable temperature (defaults to TEMPERATURE_FLOOR env or 50).",
    ),
    ceiling: Optional[float] = typer.Option(
        None,
        "--ceiling",
        callback=_finite_temperature,
        help="Highest acceptable temperature (defaults to TEMPERATURE_CEILING env or 55).",
    ),
    fail_on_alert: bool = typer.Option(
        False,
        "--fail-on-alert/--no-fail-on-alert",
        help=f"Exit with code {ALERT_EXIT_CODE} when any reading is outside the range.",
    ),
) -> None:
    """List the readings of a station that fall outside the operating range."""
    state = _get_state(ctx)
    plan = _resolve_plan(state, floor, ceiling)
    number_range = plan.temperature_range()

    try:
        station = load_station(station_file)
    except StationFileError as exc:
        typer.secho(f"Cannot load station file {exc.path}: {exc.reason}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    alerts = readings_outside_range(station, number_range)
    render_alerts(station, number_range, alerts)

    if alerts and fail_on_alert:
        raise typer.Exit(code=ALERT_EXIT_CODE)


@app.command("plan")
def plan_command(
    ctx: typer.Context,
    floor: Optional[float] = typer.Option(
        None, "--floor", callback=_finite_temperature, help="Override the configured floor."
    ),
    ceiling: Optional[float] = typer.Option(
        None, "--ceiling", callback=_finite_temperature, help="Override the configured ceiling."
    ),
) -> None:
    """Show the operating plan that ``check`` would apply."""
    state = _get_state(ctx)
    render_plan(_resolve_plan(state, floor, ceiling))
