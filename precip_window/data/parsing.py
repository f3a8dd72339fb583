import logging
import math
import re
from typing import Dict

from bs4 import BeautifulSoup

from .. import config
from ..models import Layout

logger = logging.getLogger(__name__)

_DAY_RE = re.compile(r"^\d+$")


def normalize_precipitation(text: str) -> float:
    """
    Converts a report cell to millimeters.
    '--' means no measurable rain; a trailing ')' or ']' flags an estimated or
    incomplete value and is dropped. Raises ValueError for anything else, including
    nan, inf and negative amounts.
    """
    cleaned = text.strip().replace("--", "0").rstrip(")]").strip()
    if not cleaned:
        return 0.0
    value = float(cleaned)
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"Not a precipitation amount: {text!r}")
    return value


def parse_month(html_content: str, layout: Layout) -> Dict[int, float]:
    """Extracts {day_of_month: mm} from one month's report; empty if the data table is missing."""
    soup = BeautifulSoup(html_content or "", "html.parser")
    table = soup.find(id=config.REPORT_TABLE_ID)
    if table is None:
        logger.warning(f"Report table #{config.REPORT_TABLE_ID} not found")
        return {}

    col = layout.precip_col
    data: Dict[int, float] = {}
    for row in table.find_all("tr")[config.HEADER_ROWS:]:
        cells = row.find_all("td")
        if len(cells) <= col:
            continue
        day_text = cells[0].get_text(strip=True)
        if not _DAY_RE.match(day_text):
            continue  # summary / footer rows
        try:
            data[int(day_text)] = normalize_precipitation(cells[col].get_text(strip=True))
        except ValueError:
            logger.debug(f"Skipping unparsable row for day {day_text}: {cells[col].get_text(strip=True)!r}")
    return data
