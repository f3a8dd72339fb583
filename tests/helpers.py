import calendar
import threading
import time

from precip_window.models import Layout

HEADER = (
    "<tr><th rowspan='2'>日</th><th colspan='3'>気圧(hPa)</th></tr>"
    "<tr><th>現地</th><th>海面</th><th>合計</th></tr>"
    "<tr><th></th><th>平均</th><th>平均</th><th></th></tr>"
    "<tr><th></th><th></th><th></th><th></th></tr>"
)


def primary_row(day, precip):
    return f"<tr><td>{day}</td><td>1010.2</td><td>1013.4</td><td>{precip}</td><td>7.5</td></tr>"


def auxiliary_row(day, precip):
    return f"<tr><td>{day}</td><td>{precip}</td><td>9.0</td><td>4.0</td></tr>"


def report_html(rows, table_id="tablefix1"):
    return (
        "<html><head><meta charset='Shift_JIS'><title>気象庁｜過去の気象データ検索</title></head><body>"
        f"<table id='{table_id}' class='data2_s'>{HEADER}{''.join(rows)}</table>"
        "</body></html>"
    )


def month_page(year, month, layout, amount=1.0):
    """A full month where every day reports `amount`."""
    last = calendar.monthrange(year, month)[1]
    row = primary_row if layout is Layout.PRIMARY else auxiliary_row
    return report_html([row(d, amount) for d in range(1, last + 1)])


class CountingFetcher:
    """Fake report fetcher that serves generated pages and records each call."""

    def __init__(self, pages=None, default_amount=1.0, fail=(), delay=0.0):
        self.pages = pages or {}
        self.default_amount = default_amount
        self.fail = set(fail)
        self.delay = delay
        self.calls = []
        self._lock = threading.Lock()

    def __call__(self, region_code, station_id, year, month, layout):
        with self._lock:
            self.calls.append((year, month, region_code, station_id))
        if self.delay:
            time.sleep(self.delay)
        if (year, month) in self.fail:
            return None
        if (year, month) in self.pages:
            return self.pages[(year, month)]
        return month_page(year, month, layout, self.default_amount)


