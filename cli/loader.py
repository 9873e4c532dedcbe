"""Loading of station records from JSON files."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from cli.schemas import StationFile
from models.records import Station

logger = logging.getLogger(__name__)


class StationFileError(Exception):
    """Raised when a station file cannot be read or does not match the schema."""

    def __init__(self, path: Path, reason: str, error_count: int = 1) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
        self.error_count = error_count


def _describe(exc: ValidationError) -> str:
    errors = exc.errors()
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "document"
    reason = f"{location}: {first.get('msg')}"
    if len(errors) > 1:
        reason += f" (and {len(errors) - 1} more)"
    return reason


def load_station(path: Path) -> Station:
    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        raise StationFileError(path, "file does not exist") from exc
    except OSError as exc:
        raise StationFileError(path, exc.strerror or str(exc)) from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise StationFileError(path, f"not valid UTF-8 at byte {exc.start}") from exc

    try:
        document = StationFile.model_validate_json(text)
    except ValidationError as exc:
        reason = _describe(exc)
        logger.warning(
            "Rejected station file",
            extra={"path": str(path), "reason": reason, "error_count": exc.error_count()},
        )
        raise StationFileError(path, reason, error_count=exc.error_count()) from exc

    station = document.to_station()
    logger.info(
        "Loaded station",
        extra={"station": station.name, "path": str(path), "reading_count": len(station.readings)},
    )
    return station
