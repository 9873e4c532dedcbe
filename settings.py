from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from functools import lru_cache

from models.number_range import NumberRange


_FLOOR_ENV = "TEMPERATURE_FLOOR"
_CEILING_ENV = "TEMPERATURE_CEILING"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_TEMPERATURE_FLOOR = 50.0
DEFAULT_TEMPERATURE_CEILING = 55.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class OperatingPlan:
    temperature_floor: float
    temperature_ceiling: float

    @property
    def is_inverted(self) -> bool:
        return self.temperature_floor > self.temperature_ceiling

    def temperature_range(self) -> NumberRange:
        return NumberRange(self.temperature_floor, self.temperature_ceiling)


@dataclass(frozen=True)
class Settings:
    temperature_floor: float
    temperature_ceiling: float
    log_level: str

    def operating_plan(self) -> OperatingPlan:
        return OperatingPlan(
            temperature_floor=self.temperature_floor,
            temperature_ceiling=self.temperature_ceiling,
        )


def _read_float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if math.isfinite(parsed) else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    name = candidate.upper()
    return name if isinstance(logging.getLevelName(name), int) else default


@lru_cache
def get_settings() -> Settings:
    return Settings(
        temperature_floor=_read_float_env(_FLOOR_ENV, DEFAULT_TEMPERATURE_FLOOR),
        temperature_ceiling=_read_float_env(_CEILING_ENV, DEFAULT_TEMPERATURE_CEILING),
        log_level=_read_log_level(DEFAULT_LOG_LEVEL),
    )
