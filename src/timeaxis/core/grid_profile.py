"""
Grid profile: the immutable description of a rendered time grid.

A grid is partitioned into snaps (smallest addressable unit) grouped into
slots (one rendered column each). Snaps that fall inside a hidden region
(a weekend, a non-trading day, night hours) take up no width.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from timeaxis.core.config import (
    ERROR_EMPTY_GRID,
    ERROR_NOT_MONOTONIC,
    ERROR_NOT_MULTIPLE,
)
from timeaxis.core.errors import GridConfigError
from timeaxis.utils.durations import (
    Duration,
    format_duration,
    is_int,
    to_duration,
    whole_divide_durations,
)


@dataclass(frozen=True)
class ExactSnap:
    """A visible snap; `coverage` is its visible snap index."""

    coverage: int

    @property
    def position(self) -> float:
        return float(self.coverage)


@dataclass(frozen=True)
class HiddenSnap:
    """A snap inside a hidden region; dates in it pin to `ceiling`."""

    ceiling: int

    @property
    def position(self) -> float:
        # Sorts between the previous visible snap and `ceiling`
        return self.ceiling - 0.5


SnapEntry = Union[ExactSnap, HiddenSnap]


def snap_entry(value: Union[float, SnapEntry]) -> SnapEntry:
    """
    Convert a numeric lookup value into a tagged snap entry.

    Whole numbers are visible snaps; fractional values mark hidden snaps
    and are rounded up to the next visible position.
    """
    if isinstance(value, (ExactSnap, HiddenSnap)):
        return value
    if is_int(value):
        return ExactSnap(int(value))
    return HiddenSnap(int(math.ceil(value)))


@dataclass(frozen=True)
class GridProfile:
    """
    Immutable description of the visible dates for one render pass.

    Attributes:
        normalized_start: Date of snap index 0
        snap_duration: Length of one snap
        slot_duration: Length of one slot column
        slot_dates: One visible date per slot column
        snap_cnt: Number of visible snaps across the range
        snap_diff_to_index: Snap difference from normalized_start -> SnapEntry
        snap_index_to_diff: Visible snap index -> snap difference
        label_interval: Length of one header label (defaults to slot_duration)
    """

    normalized_start: pd.Timestamp
    snap_duration: Duration
    slot_duration: Duration
    slot_dates: Sequence[pd.Timestamp]
    snap_cnt: int
    snap_diff_to_index: Sequence[Union[float, SnapEntry]]
    snap_index_to_diff: Optional[Sequence[int]] = None
    label_interval: Optional[Duration] = None

    snaps_per_slot: int = field(init=False)
    slots_per_label: int = field(init=False)

    def __post_init__(self):
        setattr_ = object.__setattr__

        setattr_(self, "normalized_start", pd.Timestamp(self.normalized_start))
        setattr_(self, "snap_duration", to_duration(self.snap_duration))
        setattr_(self, "slot_duration", to_duration(self.slot_duration))
        label = self.slot_duration if self.label_interval is None else self.label_interval
        setattr_(self, "label_interval", to_duration(label))
        setattr_(self, "slot_dates", tuple(pd.Timestamp(d) for d in self.slot_dates))
        setattr_(self, "snap_diff_to_index", tuple(snap_entry(v) for v in self.snap_diff_to_index))
        if self.snap_index_to_diff is not None:
            setattr_(self, "snap_index_to_diff", tuple(int(d) for d in self.snap_index_to_diff))

        if not self.slot_dates:
            raise GridConfigError(ERROR_EMPTY_GRID)

        snaps_per_slot = whole_divide_durations(self.slot_duration, self.snap_duration)
        if not snaps_per_slot:
            raise GridConfigError(ERROR_NOT_MULTIPLE.format(
                outer=f"slot duration {format_duration(self.slot_duration)}",
                inner=f"snap duration {format_duration(self.snap_duration)}",
            ))
        setattr_(self, "snaps_per_slot", snaps_per_slot)

        slots_per_label = whole_divide_durations(self.label_interval, self.slot_duration)
        if not slots_per_label:
            raise GridConfigError(ERROR_NOT_MULTIPLE.format(
                outer=f"label interval {format_duration(self.label_interval)}",
                inner=f"slot duration {format_duration(self.slot_duration)}",
            ))
        setattr_(self, "slots_per_label", slots_per_label)

        if self.snap_cnt < 0:
            raise GridConfigError(f"snap_cnt must not be negative, got {self.snap_cnt}")

        self._check_monotonic()

        if self.snap_index_to_diff is not None and len(self.snap_index_to_diff) != self.snap_cnt:
            raise GridConfigError(
                f"snap_index_to_diff has {len(self.snap_index_to_diff)} entries, "
                f"expected snap_cnt={self.snap_cnt}"
            )

    def _check_monotonic(self) -> None:
        if len(self.snap_diff_to_index) < 2:
            return
        positions = np.array([entry.position for entry in self.snap_diff_to_index])
        steps = np.diff(positions)
        bad = np.flatnonzero(steps < 0)
        if bad.size:
            raise GridConfigError(ERROR_NOT_MONOTONIC.format(index=int(bad[0]) + 1))

    @property
    def slot_cnt(self) -> int:
        return len(self.slot_dates)

