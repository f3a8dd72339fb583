import logging
from typing import Optional

import requests

from .. import config
from ..models import Layout

logger = logging.getLogger(__name__)


def build_report_url(region_code: str, station_id: str, year: int, month: int, layout: Layout) -> str:
    """Fills the ETRN daily report template for one station-month."""
    return config.REPORT_URL_TEMPLATE.format(
        url_type=layout.url_type,
        prec_no=region_code,
        block_no=station_id,
        year=f"{year:04d}",
        month=month,
    )


def fetch_report_page(region_code: str, station_id: str, year: int, month: int, layout: Layout) -> Optional[str]:
    """Downloads one month's report page and decodes it; None on any HTTP or transport failure."""
    url = build_report_url(region_code, station_id, year, month, layout)
    try:
        resp = requests.get(url, headers=config.HTTP_HEADERS, timeout=config.HTTP_TIMEOUT)
        if resp.status_code != 200:
            logger.error(f"API Error {resp.status_code} for {year}-{month} ({region_code}-{station_id})")
            return None
        # resp.text would guess the charset from headers; the pages are always Shift_JIS
        return resp.content.decode(config.REPORT_ENCODING, errors="replace")
    except requests.RequestException as e:
        logger.error(f"Report Fetch Error for {year}-{month} ({region_code}-{station_id}): {e}")
        return None
