"""
Configuration module for the JMA Precipitation Window dashboard.
Centralizes the upstream report endpoint, window sizes, thresholds, and styling parameters.
"""

# --- UPSTREAM REPORT SOURCE ---
# {url_type} is the layout segment (s1 / a1), {prec_no} the region, {block_no} the station
REPORT_URL_TEMPLATE = (
    "https://www.data.jma.go.jp/stats/etrn/view/daily_{url_type}.php"
    "?prec_no={prec_no}&block_no={block_no}&year={year}&month={month}&day=&view="
)

REPORT_ENCODING = "cp932"  # Shift_JIS as emitted by the ETRN pages
REPORT_TABLE_ID = "tablefix1"
HEADER_ROWS = 4

HTTP_TIMEOUT = 15  # seconds, per month page
HTTP_HEADERS = {
    "User-Agent": "precip-window/1.0 (daily precipitation monitor)",
    "Accept": "text/html",
}

# --- WINDOW ---
WINDOW_DAYS = 30
SHORT_WINDOW_DAYS = 3
MAX_FETCH_WORKERS = 3  # a 30-day window spans at most 3 months

# --- OPERATIONAL THRESHOLDS ---
THRESHOLD_3_DAYS = 3.0    # mm, inclusive
THRESHOLD_30_DAYS = 30.0  # mm, inclusive

# --- STATIONS ---
DEFAULT_STATION_ID = "47430"
MAX_PANELS = 4

# --- UI STYLING ---
THEME_COLORS = {
    "primary": "#4a90e2",
    "bar": "rgba(54, 162, 235, 0.6)",
    "background": "#f9f9f9",
    "text_main": "#333",
    "text_muted": "#666",
    "sunday": "#e74c3c",
    "saturday": "#2b83ba",
}

HIGHLIGHT_COLORS = {
    "none": "#e7f3fe",
    "below_3_day": "#fff3cd",
    "below_30_day": "#fde2c8",
    "below_both": "#f8d7da",
}

HIGHLIGHT_LABELS = {
    "none": "Rainfall above both thresholds",
    "below_3_day": "3-day total at or below 3 mm",
    "below_30_day": "30-day total at or below 30 mm",
    "below_both": "3-day and 30-day totals at or below threshold",
}
