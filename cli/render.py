from __future__ import annotations

from typing import Any, Iterable, Sequence

import typer

from models.number_range import NumberRange
from models.records import Reading, Station
from settings import OperatingPlan


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_plan(plan: OperatingPlan) -> None:
    echo_heading("Operating Plan")
    echo_key_values(
        [
            ("temperature_floor", plan.temperature_floor),
            ("temperature_ceiling", plan.temperature_ceiling),
        ]
    )
    if plan.is_inverted:
        typer.secho("Floor exceeds ceiling; no temperature is in range.", fg=typer.colors.YELLOW)


def render_alerts(station: Station, number_range: NumberRange, alerts: Sequence[Reading]) -> None:
    echo_heading(f"Station {station.name}")
    echo_key_values(
        [
            ("range", f"[{number_range.min}, {number_range.max}]"),
            ("reading_count", len(station.readings)),
            ("outside_count", len(alerts)),
        ]
    )

    typer.echo()
    echo_heading("Readings Outside Range")
    if alerts:
        for reading in alerts:
            typer.secho(f"  - {reading.time}: {reading.temp}", fg=typer.colors.RED)
    else:
        typer.echo("No readings outside range.")
