"""Slot Date Axis - Bottom axis showing dates for snap coverage values."""

from typing import Optional

import pyqtgraph as pg

from timeaxis.core.grid_profile import GridProfile
from timeaxis.services.coordinate_mapper import compute_date_snap_coverage, coverage_to_date
from timeaxis.utils.formatters import format_slot_label


class SlotDateAxisItem(pg.AxisItem):
    """
    Bottom axis whose X values are snap coverages of a grid profile.

    Plot items placed at compute_date_snap_coverage(date) line up with the
    time grid: hidden regions take no space, and tick labels show the date
    each coverage maps back to.
    """

    def __init__(self, orientation: str = "bottom", *args, **kwargs):
        super().__init__(orientation=orientation, *args, **kwargs)
        self._profile: Optional[GridProfile] = None

    def set_profile(self, profile: Optional[GridProfile]) -> None:
        self._profile = profile
        self.picture = None
        self.update()

    def date_to_value(self, date) -> float:
        """X value at which to plot a date."""
        if self._profile is None:
            return 0.0
        return float(compute_date_snap_coverage(self._profile, date))

    def tickStrings(self, values, scale, spacing):
        out: list[str] = []
        profile = self._profile
        for v in values:
            if profile is None or not 0 <= v <= profile.snap_cnt:
                out.append("")
                continue
            date = coverage_to_date(profile, v)
            out.append(format_slot_label(date, profile.snap_duration))
        return out
