"""Static registry of the JMA stations the dashboard knows about."""
from typing import Dict, List

from .models import Layout, Station


class UnknownStation(KeyError):
    """Raised when a request names a station id that is not in the registry."""

    def __init__(self, station_id: str):
        super().__init__(station_id)
        self.station_id = station_id

    def __str__(self) -> str:
        return f"Unknown station: {self.station_id}"


# block_no -> name / prec_no / report layout, as listed on the ETRN station pages
_STATION_TABLE = {
    "47430": {"name": "函館", "prec_no": "23", "type": "s1"},
    "0147": {"name": "川汲", "prec_no": "23", "type": "a1"},
    "1462": {"name": "高松", "prec_no": "23", "type": "a1"},
    "1543": {"name": "戸井泊", "prec_no": "23", "type": "a1"},
}

LOCATIONS: Dict[str, Station] = {
    block_no: Station(block_no, info["prec_no"], info["name"], Layout.from_url_type(info["type"]))
    for block_no, info in _STATION_TABLE.items()
}


def lookup_station(station_id: str) -> Station:
    try:
        return LOCATIONS[station_id]
    except KeyError:
        raise UnknownStation(station_id) from None


def list_stations() -> List[Station]:
    return list(LOCATIONS.values())


def locations_payload() -> Dict[str, Dict]:
    """Station table in the wire shape the front-end expects."""
    return {
        sid: {"name": s.display_name, "regionCode": s.region_code, "layout": s.layout.url_type}
        for sid, s in LOCATIONS.items()
    }
