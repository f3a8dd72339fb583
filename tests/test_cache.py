from concurrent.futures import ThreadPoolExecutor

import pytest

from precip_window.data.cache import MonthlyCache
from tests.helpers import CountingFetcher, primary_row, report_html


def test_repeat_requests_fetch_once(hakodate):
    fetcher = CountingFetcher()
    cache = MonthlyCache(hakodate, fetch=fetcher)

    first = cache.get_month(2024, 3)
    for _ in range(10):
        assert cache.get_month(2024, 3) is first

    assert fetcher.calls == [(2024, 3, "23", "47430")]
    assert cache.fetch_count == 1


def test_distinct_months_fetch_separately(hakodate):
    fetcher = CountingFetcher()
    cache = MonthlyCache(hakodate, fetch=fetcher)
    cache.get_month(2024, 2)
    cache.get_month(2024, 3)
    cache.get_month(2023, 3)
    assert len(fetcher.calls) == 3
    assert len(cache) == 3


def test_failed_fetch_is_cached_as_empty(hakodate):
    fetcher = CountingFetcher(fail={(2024, 3)})
    cache = MonthlyCache(hakodate, fetch=fetcher)
    assert cache.get_month(2024, 3) == {}
    assert cache.get_month(2024, 3) == {}
    assert len(fetcher.calls) == 1


def test_parsed_values_are_returned(hakodate):
    page = report_html([primary_row(1, "2.5"), primary_row(2, "--")])
    cache = MonthlyCache(hakodate, fetch=CountingFetcher(pages={(2024, 3): page}))
    assert cache.get_month(2024, 3) == {1: 2.5, 2: 0.0}


def test_concurrent_requests_are_coalesced(hakodate):
    fetcher = CountingFetcher(delay=0.05)
    cache = MonthlyCache(hakodate, fetch=fetcher)

    with ThreadPoolExecutor(max_workers=16) as executor:
        results = list(executor.map(lambda _: cache.get_month(2024, 3), range(64)))

    assert len(fetcher.calls) == 1
    assert all(r is results[0] for r in results)


def test_fetch_exception_propagates_to_waiters(hakodate):
    def broken(*args):
        raise RuntimeError("bug in fetcher")

    cache = MonthlyCache(hakodate, fetch=broken)
    with pytest.raises(RuntimeError):
        cache.get_month(2024, 3)
    with pytest.raises(RuntimeError):
        cache.get_month(2024, 3)


def test_key_format(hakodate):
    cache = MonthlyCache(hakodate, fetch=CountingFetcher())
    assert cache.key_for(2024, 3).cache_key == "2024-3-23-47430"
