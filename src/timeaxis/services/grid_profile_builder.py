"""Grid Profile Builder - builds a GridProfile for a visible date range."""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from timeaxis.core.config import ERROR_EMPTY_RANGE, ERROR_NOT_MULTIPLE
from timeaxis.core.errors import GridConfigError
from timeaxis.core.grid_profile import ExactSnap, GridProfile, HiddenSnap
from timeaxis.utils.durations import (
    Duration,
    add_durations,
    floor_to_duration,
    format_duration,
    to_duration,
    whole_divide_durations,
)
from timeaxis.utils.market_hours import VisibilityPredicate, always_visible

logger = logging.getLogger(__name__)


def build_grid_profile(
    start,
    end,
    snap_duration,
    slot_duration,
    label_interval=None,
    is_visible: Optional[VisibilityPredicate] = None,
) -> GridProfile:
    """
    Walk the range snap by snap and record which snaps are visible.

    Visible snaps are numbered consecutively. A hidden snap records the
    number of the next visible snap, so dates inside hidden regions pin
    forward to the next visible position.

    Args:
        start: First date of the range (aligned down to the slot grid)
        end: Exclusive end of the range
        snap_duration: Smallest addressable unit (e.g. "1h")
        slot_duration: Width of one column (whole multiple of snap_duration)
        label_interval: Width of one header label (whole multiple of slot_duration)
        is_visible: Predicate over snap start dates (default: all visible)

    Returns:
        GridProfile for the range

    Raises:
        GridConfigError: For an empty range, mismatched durations, or a
            range in which no snap is visible
    """
    start = pd.Timestamp(start)
    end = pd.Timestamp(end)
    if end <= start:
        raise GridConfigError(ERROR_EMPTY_RANGE.format(start=start, end=end))

    snap: Duration = to_duration(snap_duration)
    slot: Duration = to_duration(slot_duration)
    snaps_per_slot = whole_divide_durations(slot, snap)
    if not snaps_per_slot:
        raise GridConfigError(ERROR_NOT_MULTIPLE.format(
            outer=f"slot duration {format_duration(slot)}",
            inner=f"snap duration {format_duration(snap)}",
        ))

    is_visible = is_visible or always_visible
    normalized_start = floor_to_duration(start, slot)

    snap_diff_to_index = []
    snap_index_to_diff = []
    visible_dates = []
    snap_index = -1
    snap_diff = 0
    date = normalized_start

    while date < end:
        if is_visible(date):
            snap_index += 1
            snap_diff_to_index.append(ExactSnap(snap_index))
            snap_index_to_diff.append(snap_diff)
            visible_dates.append(date)
        else:
            snap_diff_to_index.append(HiddenSnap(snap_index + 1))
        snap_diff += 1
        date = add_durations(normalized_start, snap, snap_diff)

    snap_cnt = snap_index + 1
    slot_dates = visible_dates[::snaps_per_slot]

    logger.debug(
        "Built grid profile from %s: %d snaps (%d visible), %d slots",
        normalized_start, snap_diff, snap_cnt, len(slot_dates),
    )

    return GridProfile(
        normalized_start=normalized_start,
        snap_duration=snap,
        slot_duration=slot,
        label_interval=label_interval,
        slot_dates=slot_dates,
        snap_cnt=snap_cnt,
        snap_diff_to_index=snap_diff_to_index,
        snap_index_to_diff=snap_index_to_diff,
    )
