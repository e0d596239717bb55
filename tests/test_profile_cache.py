from datetime import time

import pandas as pd

from timeaxis import GridProfileCache
from timeaxis.utils.market_hours import time_window, weekdays_only


def test_same_range_returns_same_profile(day_start):
    cache = GridProfileCache()
    end = day_start + pd.Timedelta(days=1)

    first = cache.get_profile(day_start, end, "1h", "4h")
    second = cache.get_profile(str(day_start), end, pd.Timedelta(hours=1), "4h")

    assert first is second
    assert cache.get_stats() == {"hits": 1, "misses": 1, "size": 1}


def test_equal_predicates_share_an_entry(day_start):
    cache = GridProfileCache()
    end = day_start + pd.Timedelta(days=7)

    a = cache.get_profile(day_start, end, "1D", "1D", is_visible=weekdays_only())
    b = cache.get_profile(day_start, end, "1D", "1D", is_visible=weekdays_only())
    c = cache.get_profile(day_start, end, "1h", "8h", is_visible=time_window(time(9), time(17)))
    d = cache.get_profile(day_start, end, "1h", "8h", is_visible=time_window(time(9), time(18)))

    assert a is b
    assert c is not d
    assert len(cache) == 3


def test_least_recently_used_is_evicted(day_start):
    cache = GridProfileCache(maxsize=2)
    ends = [day_start + pd.Timedelta(days=n) for n in (1, 2, 3)]

    first = cache.get_profile(day_start, ends[0], "1h", "4h")
    cache.get_profile(day_start, ends[1], "1h", "4h")
    cache.get_profile(day_start, ends[0], "1h", "4h")  # refresh first
    cache.get_profile(day_start, ends[2], "1h", "4h")

    assert len(cache) == 2
    assert cache.get_profile(day_start, ends[0], "1h", "4h") is first
    assert cache.get_stats()["misses"] == 3


def test_clear(day_start):
    cache = GridProfileCache()
    cache.get_profile(day_start, day_start + pd.Timedelta(days=1), "1h", "4h")
    cache.clear()
    assert cache.get_stats() == {"hits": 0, "misses": 0, "size": 0}
