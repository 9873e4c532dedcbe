"""Classification of station readings against an operating range."""

from __future__ import annotations

import logging
from typing import List

from models.number_range import NumberRange
from models.records import Reading, Station

logger = logging.getLogger(__name__)


def readings_outside_range(station: Station, number_range: NumberRange) -> List[Reading]:
    """Return the readings of ``station`` whose temperature falls outside ``number_range``.

    Order is preserved and the returned list holds the station's own
    ``Reading`` objects. Neither argument is modified.
    """
    outside = [reading for reading in station.readings if not number_range.contains(reading.temp)]

    logger.debug(
        "Classified station readings",
        extra={
            "station": station.name,
            "reading_count": len(station.readings),
            "outside_count": len(outside),
        },
    )
    return outside
