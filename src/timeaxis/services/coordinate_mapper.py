"""
Coordinate Mapper - converts dates to positions along a rendered time grid.

Positions are computed in two steps: a date becomes a snap coverage (a real
number of visible snaps from the grid start), then the coverage is turned
into a pixel offset using the measured geometry of the slot columns.

For LTR axes pixel offsets range from 0 to the width of the area.
For RTL axes they range from the negative width of the area to 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from timeaxis.core.errors import GridConfigError
from timeaxis.core.grid_profile import ExactSnap, GridProfile
from timeaxis.utils.durations import add_durations, count_durations_between


@dataclass(frozen=True)
class ColumnGeometry:
    """
    Measured pixel edges of the rendered slot columns.

    Attributes:
        lefts: Left edge of each column, relative to the area origin
        rights: Right edge of each column, relative to the area origin
        origin_width: Total width of the area the columns live in
    """

    lefts: Sequence[float]
    rights: Sequence[float]
    origin_width: float

    def __post_init__(self):
        object.__setattr__(self, "lefts", tuple(float(x) for x in self.lefts))
        object.__setattr__(self, "rights", tuple(float(x) for x in self.rights))
        if len(self.lefts) != len(self.rights):
            raise GridConfigError(
                f"Column geometry has {len(self.lefts)} lefts but {len(self.rights)} rights"
            )

    @classmethod
    def from_widths(
        cls, widths: Sequence[float], origin_width: float | None = None, is_rtl: bool = False
    ) -> "ColumnGeometry":
        """
        Lay columns edge to edge from their widths.

        In RTL mode the first column sits at the right edge of the area.
        """
        widths = np.asarray(widths, dtype=float)
        edges = np.concatenate(([0.0], np.cumsum(widths)))
        total = float(edges[-1])
        width = total if origin_width is None else float(origin_width)

        if is_rtl:
            return cls(lefts=width - edges[1:], rights=width - edges[:-1], origin_width=width)
        return cls(lefts=edges[:-1], rights=edges[1:], origin_width=width)

    def __len__(self) -> int:
        return len(self.lefts)

    def get_width(self, index: int) -> float:
        return self.rights[index] - self.lefts[index]


@dataclass(frozen=True)
class CoordRange:
    """Pixel edges of a date range along the axis."""

    left: float
    right: float


def compute_date_snap_coverage(profile: GridProfile, date) -> float:
    """
    Compute how many visible snaps precede a date.

    Args:
        profile: Grid profile of the current render pass
        date: Any date marker

    Returns:
        Coverage between 0 and profile.snap_cnt. Dates before the grid clamp
        to 0, dates after it clamp to snap_cnt.
    """
    snap_diff = count_durations_between(
        profile.normalized_start, date, profile.snap_duration
    )
    lookup = profile.snap_diff_to_index

    if snap_diff < 0:
        return 0
    if snap_diff >= len(lookup):
        return profile.snap_cnt

    snap_diff_int = math.floor(snap_diff)
    entry = lookup[snap_diff_int]

    if isinstance(entry, ExactSnap):
        # add the remainder within the snap
        return entry.coverage + (snap_diff - snap_diff_int)

    # date is not visible. always round up: works for start AND end dates of a range
    return entry.ceiling


def _slot_position(profile: GridProfile, snap_coverage: float) -> Tuple[int, float]:
    slot_coverage = snap_coverage / profile.snaps_per_slot
    slot_index = min(max(math.floor(slot_coverage), 0), profile.slot_cnt - 1)
    return slot_index, slot_coverage - slot_index


def date_to_coord(profile: GridProfile, geometry: ColumnGeometry, date, is_rtl: bool = False) -> float:
    """
    Map a date to a pixel offset along the axis.

    Args:
        profile: Grid profile of the current render pass
        geometry: Column geometry measured after the latest layout pass
        date: Any date marker
        is_rtl: Whether the axis runs right-to-left

    Returns:
        Pixel offset in [0, width] for LTR or [-width, 0] for RTL
    """
    snap_coverage = compute_date_snap_coverage(profile, date)
    slot_index, partial = _slot_position(profile, snap_coverage)
    width = geometry.get_width(slot_index)

    if is_rtl:
        return (geometry.rights[slot_index] - width * partial) - geometry.origin_width
    return geometry.lefts[slot_index] + width * partial


def range_to_coords(
    profile: GridProfile, geometry: ColumnGeometry, start, end, is_rtl: bool = False
) -> CoordRange:
    """Map both ends of a date range. On RTL axes the start date is the right edge."""
    start_coord = date_to_coord(profile, geometry, start, is_rtl)
    end_coord = date_to_coord(profile, geometry, end, is_rtl)
    if is_rtl:
        return CoordRange(left=end_coord, right=start_coord)
    return CoordRange(left=start_coord, right=end_coord)


def coverage_to_date(profile: GridProfile, snap_coverage: float) -> pd.Timestamp:
    """
    Map a snap coverage back to a date.

    Coverage is clamped to [0, snap_cnt]; a fractional remainder is
    interpolated within the visible snap it falls in.
    """
    snap_coverage = min(max(float(snap_coverage), 0.0), float(profile.snap_cnt))
    if profile.snap_cnt == 0:
        return profile.normalized_start

    index_to_diff = profile.snap_index_to_diff
    snap_index = math.floor(snap_coverage)
    frac = snap_coverage - snap_index

    if index_to_diff is None:
        snap_diff = snap_coverage
    elif snap_index >= profile.snap_cnt:
        snap_diff = index_to_diff[-1] + 1
    else:
        snap_diff = index_to_diff[snap_index] + frac

    return add_durations(profile.normalized_start, profile.snap_duration, snap_diff)


def coord_to_date(profile: GridProfile, geometry: ColumnGeometry, coord: float, is_rtl: bool = False) -> pd.Timestamp:
    """
    Map a pixel offset (as returned by date_to_coord) back to a date.

    Offsets beyond either end of the columns clamp to the grid start or end.
    """
    x = coord + geometry.origin_width if is_rtl else coord
    lefts = np.asarray(geometry.lefts)
    rights = np.asarray(geometry.rights)
    last = profile.slot_cnt - 1

    inside = np.flatnonzero((lefts <= x) & (x < rights))
    if inside.size:
        slot_index = min(int(inside[0]), last)
        width = geometry.get_width(slot_index)
        if is_rtl:
            partial = (geometry.rights[slot_index] - x) / width
        else:
            partial = (x - geometry.lefts[slot_index]) / width
    else:
        before_start = x >= rights[0] if is_rtl else x < lefts[0]
        slot_index, partial = (0, 0.0) if before_start else (last, 1.0)

    return coverage_to_date(profile, (slot_index + partial) * profile.snaps_per_slot)
