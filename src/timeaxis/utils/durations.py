"""
Duration helpers over pandas.

Snap, slot and label durations are either fixed clock durations
(pd.Timedelta) or calendar-month durations (pd.DateOffset with months/years).
Everything here is a thin layer over pandas date arithmetic.
"""

from __future__ import annotations

import math
from typing import Optional, Union

import numpy as np
import pandas as pd
from pandas.tseries.frequencies import to_offset

from timeaxis.core.errors import GridConfigError

Duration = Union[pd.Timedelta, pd.DateOffset]

_ONE_DAY = pd.Timedelta(days=1)
_CLOCK_KEYS = {
    "weeks", "days", "hours", "minutes", "seconds",
    "milliseconds", "microseconds", "nanoseconds",
}


def is_int(value: float) -> bool:
    """True if value is a finite whole number."""
    return bool(np.isfinite(value)) and float(value).is_integer()


def to_duration(value) -> Duration:
    """
    Coerce a duration-like value into a pandas duration.

    Args:
        value: pd.Timedelta, datetime.timedelta, offset alias ("6h"),
            pd.offsets tick, or pd.DateOffset(months=..., years=...)

    Returns:
        A positive pd.Timedelta, or pd.DateOffset(months=n) for calendar durations

    Raises:
        GridConfigError: If the value is not a positive duration
    """
    if isinstance(value, pd.offsets.Tick):
        duration = pd.Timedelta(value)
    elif isinstance(value, pd.DateOffset):
        duration = _offset_to_duration(value)
    else:
        try:
            duration = pd.Timedelta(value)
        except (TypeError, ValueError):
            raise GridConfigError(f"Not a duration: {value!r}") from None

    if isinstance(duration, pd.Timedelta):
        if pd.isna(duration) or duration <= pd.Timedelta(0):
            raise GridConfigError(f"Duration must be positive, got {value!r}")
    elif calendar_months(duration) <= 0:
        raise GridConfigError(f"Duration must be positive, got {value!r}")
    return duration


def _offset_to_duration(offset: pd.DateOffset) -> Duration:
    kwds = dict(offset.kwds)
    months = kwds.pop("years", 0) * 12 + kwds.pop("months", 0)
    unknown = set(kwds) - _CLOCK_KEYS
    if unknown or (months and kwds):
        raise GridConfigError(f"Unsupported duration offset: {offset!r}")
    if months:
        return pd.DateOffset(months=months * offset.n)
    if kwds:
        return pd.Timedelta(**kwds) * offset.n
    return _ONE_DAY * offset.n


def calendar_months(duration: Duration) -> Optional[int]:
    """Number of calendar months in a month-based duration, else None."""
    if isinstance(duration, pd.DateOffset) and not isinstance(duration, pd.offsets.Tick):
        return int(duration.kwds.get("months", 0)) * duration.n
    return None


def whole_divide_durations(numerator: Duration, denominator: Duration) -> Optional[int]:
    """
    Divide two durations when the result is an exact whole number.

    Returns:
        The integer quotient, or None when the durations are of different
        kinds (clock vs calendar) or do not divide evenly
    """
    num_months = calendar_months(numerator)
    den_months = calendar_months(denominator)

    if num_months is not None and den_months is not None:
        num, den = num_months, den_months
    elif num_months is None and den_months is None:
        num, den = pd.Timedelta(numerator).value, pd.Timedelta(denominator).value
    else:
        return None

    if den == 0 or num % den:
        return None
    return num // den


def _month_anchor(start: pd.Timestamp, months: int) -> pd.Timestamp:
    return start + pd.DateOffset(months=months)


def count_months_between(start: pd.Timestamp, end: pd.Timestamp) -> float:
    """
    Calendar months between two dates (may be fractional or negative).

    The whole part counts month anchors start + k months at or before end;
    the remainder interpolates linearly between the two anchors around end.
    """
    whole = (end.year - start.year) * 12 + (end.month - start.month)
    while _month_anchor(start, whole) > end:
        whole -= 1
    while _month_anchor(start, whole + 1) <= end:
        whole += 1

    anchor = _month_anchor(start, whole)
    if anchor == end:
        return float(whole)
    next_anchor = _month_anchor(start, whole + 1)
    return whole + (end - anchor) / (next_anchor - anchor)


def count_durations_between(start, end, duration: Duration) -> float:
    """
    Count how many durations fit between two dates (may be fractional or negative).

    Calendar durations count in calendar months, interpolating within the
    month that contains end, so the count never decreases as end moves forward.
    """
    start = pd.Timestamp(start)
    end = pd.Timestamp(end)

    months = calendar_months(duration)
    if months is not None:
        return count_months_between(start, end) / months

    return (end - start) / duration


def add_durations(date, duration: Duration, n: float = 1) -> pd.Timestamp:
    """Add n durations to a date. Fractional n is allowed."""
    date = pd.Timestamp(date)
    months = calendar_months(duration)
    if months is None:
        return date + duration * n

    total = n * months
    whole = math.floor(total)
    anchor = _month_anchor(date, whole)
    frac = total - whole
    if frac:
        anchor = anchor + (_month_anchor(date, whole + 1) - anchor) * frac
    return anchor


def floor_to_duration(date, duration: Duration) -> pd.Timestamp:
    """
    Align a date down to the grid implied by a duration.

    Calendar durations align to the first of the month, durations of a day
    or longer to midnight, and sub-day durations that divide a day evenly
    to the duration boundary within the day.
    """
    date = pd.Timestamp(date)
    if calendar_months(duration) is not None:
        return date.normalize().replace(day=1)
    if duration >= _ONE_DAY or _ONE_DAY.value % duration.value:
        return date.normalize()
    return date.floor(to_offset(duration))


def format_duration(duration: Duration) -> str:
    months = calendar_months(duration)
    if months is not None:
        return f"{months} month(s)"
    return str(duration)
