import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from .. import config
from ..models import AggregateResult, DailyValue, HighlightState, Station
from .cache import FetchFn, MonthlyCache

logger = logging.getLogger(__name__)

_EARLIEST_BASE_DATE = date.min + timedelta(days=config.WINDOW_DAYS)


def resolve_base_date(value: Union[str, date, None], today: Optional[date] = None) -> date:
    """
    Parses a YYYY-MM-DD base date.
    Anything unparsable (including None) silently becomes yesterday relative to `today`.
    """
    if isinstance(value, datetime):
        parsed = value.date()
    elif isinstance(value, date):
        parsed = value
    else:
        try:
            parsed = datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except (ValueError, TypeError, AttributeError):
            parsed = None

    # the backward walk must stay inside the representable date range
    if parsed is not None and parsed >= _EARLIEST_BASE_DATE:
        return parsed

    today = today or date.today()
    fallback = today - timedelta(days=1)
    logger.warning(f"Invalid base date {value!r}, falling back to {fallback.isoformat()}")
    return fallback


def window_days(base_date: date, days: int = config.WINDOW_DAYS) -> List[date]:
    """The `days` dates ending at base_date, newest first."""
    return [base_date - timedelta(days=offset) for offset in range(days)]


def aggregate(
    station: Station,
    base_date: Union[str, date, None],
    *,
    today: Optional[date] = None,
    fetch: Optional[FetchFn] = None,
    max_workers: int = config.MAX_FETCH_WORKERS,
) -> AggregateResult:
    """Builds the 30-day chronological series ending at base_date plus its 3- and 30-day totals."""
    base = resolve_base_date(base_date, today=today)
    cache = MonthlyCache(station, fetch=fetch)

    def _amount(day: date) -> float:
        return cache.get_month(day.year, day.month).get(day.day, 0.0)

    days = window_days(base)
    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            amounts = list(executor.map(_amount, days))
    else:
        amounts = [_amount(d) for d in days]

    series = [DailyValue(d, a) for d, a in zip(days, amounts)]
    series.reverse()

    values = [v.amount for v in series]
    total3 = sum(values[-config.SHORT_WINDOW_DAYS:])
    total30 = sum(values)
    logger.info(
        f"Window for {station.id} ending {base.isoformat()}: {len(cache)} month pages, "
        f"3d={total3:.1f}mm 30d={total30:.1f}mm"
    )
    return AggregateResult(base_date=base, total3=total3, total30=total30, series=series)


def classify(total3: float, total30: float) -> HighlightState:
    below3 = total3 <= config.THRESHOLD_3_DAYS
    below30 = total30 <= config.THRESHOLD_30_DAYS
    if below3 and below30:
        return HighlightState.BELOW_BOTH
    if below3:
        return HighlightState.BELOW_3_DAY
    if below30:
        return HighlightState.BELOW_30_DAY
    return HighlightState.NONE
