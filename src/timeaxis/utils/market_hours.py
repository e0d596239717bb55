"""
Visibility predicates for time grids.

A predicate receives the start date of a snap and returns True when the
snap should take up width on the axis. Hidden snaps (weekends, NYSE
holidays, hours outside a session window) collapse to zero width.

Predicates are frozen dataclasses so that equal configurations compare and
hash equal, which lets grid profiles be memoized on them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time, timedelta
from functools import lru_cache
from typing import Callable, Tuple

import pandas as pd

VisibilityPredicate = Callable[[pd.Timestamp], bool]

# NYSE market hours (regular session)
NYSE_OPEN = time(9, 30)
NYSE_CLOSE = time(16, 0)


def easter_date(year: int) -> date:
    """
    Calculate Easter Sunday for a given year using the Anonymous Gregorian algorithm.

    Args:
        year: Year to calculate Easter for

    Returns:
        Date of Easter Sunday
    """
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    g = (b - (b + 8) // 25 + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def _nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    """Nth weekday (0=Mon, 6=Sun) of a month."""
    first = date(year, month, 1)
    return first + timedelta(days=(weekday - first.weekday()) % 7 + 7 * (n - 1))


def _last_weekday(year: int, month: int, weekday: int) -> date:
    """Last weekday (0=Mon, 6=Sun) of a month."""
    next_month = date(year + month // 12, month % 12 + 1, 1)
    last_day = next_month - timedelta(days=1)
    return last_day - timedelta(days=(last_day.weekday() - weekday) % 7)


def _observed(d: date) -> date:
    """Saturday holidays are observed Friday, Sunday holidays Monday."""
    if d.weekday() == 5:
        return d - timedelta(days=1)
    if d.weekday() == 6:
        return d + timedelta(days=1)
    return d


@lru_cache(maxsize=64)
def get_nyse_holidays(year: int) -> frozenset:
    """
    NYSE full-day holidays for a year.

    New Year's Day, MLK Day, Presidents' Day, Good Friday, Memorial Day,
    Juneteenth, Independence Day, Labor Day, Thanksgiving and Christmas,
    shifted to their observed weekday.
    """
    return frozenset({
        _observed(date(year, 1, 1)),
        _nth_weekday(year, 1, 0, 3),
        _nth_weekday(year, 2, 0, 3),
        easter_date(year) - timedelta(days=2),
        _last_weekday(year, 5, 0),
        _observed(date(year, 6, 19)),
        _observed(date(year, 7, 4)),
        _nth_weekday(year, 9, 0, 1),
        _nth_weekday(year, 11, 3, 4),
        _observed(date(year, 12, 25)),
    })


def is_nyse_trading_day(d: date) -> bool:
    """True for weekdays that are not NYSE holidays."""
    if d.weekday() >= 5:
        return False
    return d not in get_nyse_holidays(d.year)


@dataclass(frozen=True)
class WeekdaysOnly:
    """Hide Saturdays and Sundays."""

    def __call__(self, snap_start: pd.Timestamp) -> bool:
        return snap_start.weekday() < 5


@dataclass(frozen=True)
class NyseTradingDays:
    """Hide weekends and NYSE holidays."""

    def __call__(self, snap_start: pd.Timestamp) -> bool:
        return is_nyse_trading_day(snap_start.date())


@dataclass(frozen=True)
class TimeWindow:
    """Only show snaps starting within [min_time, max_time) of each day."""

    min_time: time
    max_time: time

    def __call__(self, snap_start: pd.Timestamp) -> bool:
        return self.min_time <= snap_start.time() < self.max_time


@dataclass(frozen=True)
class AllOf:
    """Visible only when every wrapped predicate agrees."""

    predicates: Tuple[VisibilityPredicate, ...]

    def __call__(self, snap_start: pd.Timestamp) -> bool:
        return all(predicate(snap_start) for predicate in self.predicates)


def weekdays_only() -> WeekdaysOnly:
    return WeekdaysOnly()


def nyse_trading_days() -> NyseTradingDays:
    return NyseTradingDays()


def time_window(min_time: time, max_time: time) -> TimeWindow:
    return TimeWindow(min_time, max_time)


def nyse_session() -> AllOf:
    """NYSE regular session: trading days, 9:30 to 16:00."""
    return all_of(nyse_trading_days(), time_window(NYSE_OPEN, NYSE_CLOSE))


def all_of(*predicates: VisibilityPredicate) -> AllOf:
    return AllOf(tuple(predicates))


def always_visible(snap_start: pd.Timestamp) -> bool:
    return True
