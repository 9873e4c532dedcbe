"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Reading:
    """A single temperature observation reported by a station."""

    temp: float
    time: str


@dataclass(frozen=True, slots=True)
class Station:
    """A named station and its readings in the order they were reported."""

    name: str
    readings: Tuple[Reading, ...] = ()
