"""
Query surface consumed by the presentation layer.
Returns plain JSON-ready dicts; the only user-visible failure is an unknown station.
"""
import logging
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from . import config
from .data.cache import FetchFn
from .data.processing import aggregate
from .stations import UnknownStation, locations_payload, lookup_station

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Client-facing error carrying an HTTP-style status."""

    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status = status

    def to_payload(self) -> Dict[str, str]:
        return {"error": self.message}


def query_precipitation(
    date_str: Optional[str] = None,
    station_id: Optional[str] = None,
    *,
    today: Optional[date] = None,
    fetch: Optional[FetchFn] = None,
) -> Dict:
    """30-day precipitation window for one station; raises ApiError for unknown stations."""
    station_id = station_id or config.DEFAULT_STATION_ID
    try:
        station = lookup_station(station_id)
    except UnknownStation as e:
        logger.info(str(e))
        raise ApiError("Invalid location block_no", status=400) from e

    result = aggregate(station, date_str, today=today, fetch=fetch)
    return result.to_payload(station, locations_payload())


def query_panels(
    panels: Iterable[Tuple[Optional[str], Optional[str]]],
    *,
    today: Optional[date] = None,
    fetch: Optional[FetchFn] = None,
) -> List[Dict]:
    """Side-by-side comparison: one payload (or {'error': ...}) per (date, station_id) panel."""
    panels = list(panels)
    if len(panels) > config.MAX_PANELS:
        raise ApiError(f"At most {config.MAX_PANELS} panels can be compared", status=400)

    out = []
    for date_str, station_id in panels:
        try:
            out.append(query_precipitation(date_str, station_id, today=today, fetch=fetch))
        except ApiError as e:
            out.append(e.to_payload())
    return out
