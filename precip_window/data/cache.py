import logging
import threading
from concurrent.futures import Future
from typing import Callable, Dict, Optional

from ..models import Layout, MonthKey, Station
from .fetchers import fetch_report_page
from .parsing import parse_month

logger = logging.getLogger(__name__)

FetchFn = Callable[[str, str, int, int, Layout], Optional[str]]
ParseFn = Callable[[str, Layout], Dict[int, float]]


class MonthlyCache:
    """
    Per-request memo of parsed month pages for one station.

    Each distinct MonthKey is fetched and parsed at most once. Threads asking for a
    month that is already in flight wait on the pending Future instead of fetching again.
    A failed fetch is stored as an empty mapping.
    """

    def __init__(self, station: Station, fetch: Optional[FetchFn] = None, parse: Optional[ParseFn] = None):
        self.station = station
        self._fetch = fetch or fetch_report_page
        self._parse = parse or parse_month
        self._entries: Dict[str, Future] = {}
        self._lock = threading.Lock()
        self.fetch_count = 0

    def key_for(self, year: int, month: int) -> MonthKey:
        return MonthKey(year, month, self.station.region_code, self.station.id)

    def get_month(self, year: int, month: int) -> Dict[int, float]:
        key = self.key_for(year, month).cache_key
        with self._lock:
            pending = self._entries.get(key)
            owner = pending is None
            if owner:
                pending = Future()
                self._entries[key] = pending
                self.fetch_count += 1

        if not owner:
            return pending.result()

        logger.debug(f"Cache miss for {key}")
        try:
            s = self.station
            html_content = self._fetch(s.region_code, s.id, year, month, s.layout)
            month_data = self._parse(html_content, s.layout) if html_content else {}
        except Exception as e:
            pending.set_exception(e)
            raise
        pending.set_result(month_data)
        return month_data

    def __len__(self) -> int:
        return len(self._entries)
