"""Pydantic schemas for station data files."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from models.records import Reading, Station


class ReadingEntry(BaseModel):
    """One reading as it appears in a station file."""

    temp: float = Field(..., strict=True, allow_inf_nan=False)
    time: str


class StationFile(BaseModel):
    """Top-level document of a station data file."""

    name: str = Field(..., min_length=1)
    readings: List[ReadingEntry] = Field(default_factory=list)

    def to_station(self) -> Station:
        return Station(
            name=self.name,
            readings=tuple(Reading(temp=entry.temp, time=entry.time) for entry in self.readings),
        )
