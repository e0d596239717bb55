from __future__ import annotations

import pandas as pd

from timeaxis.core.config import DEFAULT_DATE_FORMAT, TIME_DATE_FORMAT
from timeaxis.utils.durations import Duration, calendar_months


def format_date(dt: pd.Timestamp, format_str: str = DEFAULT_DATE_FORMAT) -> str:
    """
    Format a pandas Timestamp as a date string.

    Args:
        dt: Timestamp to format
        format_str: strftime format string

    Returns:
        Formatted date string
    """
    if dt is None or pd.isna(dt):
        return ""
    return dt.strftime(format_str)


def format_slot_label(dt: pd.Timestamp, slot_duration: Duration) -> str:
    """Label for a slot column: date only for day-or-longer slots, else date and time."""
    if calendar_months(slot_duration) is not None:
        return format_date(dt, "%Y-%m")
    if slot_duration >= pd.Timedelta(days=1):
        return format_date(dt)
    return format_date(dt, TIME_DATE_FORMAT)
