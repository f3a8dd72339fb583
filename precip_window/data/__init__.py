from .fetchers import build_report_url, fetch_report_page
from .parsing import normalize_precipitation, parse_month
from .cache import MonthlyCache
from .processing import aggregate, classify, resolve_base_date, window_days
