"""
Time Axis - owns the grid profile and layout state of one timeline axis.

The embedding application drives the life-cycle explicitly:

    axis = TimeAxis(layout, AxisOptions(slot_width=None, is_rtl=False))
    axis.render_range(start, end, "1h", "6h")   # or axis.render(profile)
    axis.mount()                                # first layout pass
    ...
    axis.resize()                               # after every viewport resize
    x = axis.date_to_coord(some_date)
    ...
    axis.destroy()

Coordinate queries read the column geometry published by the latest layout
pass; callers must not query while a layout pass is in progress.
"""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from timeaxis.core.axis_options import AxisOptions
from timeaxis.core.config import ERROR_DESTROYED, ERROR_NOT_RENDERED
from timeaxis.core.errors import AxisStateError
from timeaxis.core.grid_profile import GridProfile
from timeaxis.services.axis_layout import AxisLayout
from timeaxis.services.coordinate_mapper import (
    ColumnGeometry,
    CoordRange,
    compute_date_snap_coverage,
    coord_to_date,
    date_to_coord,
    range_to_coords,
)
from timeaxis.services.profile_cache import GridProfileCache
from timeaxis.services.width_allocator import (
    AxisGeometry,
    apply_slot_width,
    resolve_slot_width,
)
from timeaxis.utils.market_hours import VisibilityPredicate

logger = logging.getLogger(__name__)


class TimeAxis:
    """
    Date-to-pixel engine for one timeline, bound to a layout collaborator.

    Args:
        layout: Owner of the header/body slot columns (see AxisLayout)
        options: Configured slot width and axis direction
        profile_cache: Cache used by render_range(); a private one by default
    """

    def __init__(
        self,
        layout: AxisLayout,
        options: Optional[AxisOptions] = None,
        profile_cache: Optional[GridProfileCache] = None,
    ):
        self.layout = layout
        self.options = options or AxisOptions()
        self._profile_cache = profile_cache or GridProfileCache()

        self._profile: Optional[GridProfile] = None
        self._axis_geometry = AxisGeometry()
        self._column_geometry: Optional[ColumnGeometry] = None
        self._destroyed = False

    @property
    def is_rtl(self) -> bool:
        return self.options.is_rtl

    @property
    def profile(self) -> Optional[GridProfile]:
        return self._profile

    @property
    def axis_geometry(self) -> AxisGeometry:
        return self._axis_geometry

    # Life-cycle

    def render(self, profile: GridProfile) -> None:
        """Adopt a new grid profile and rebuild the layout's columns."""
        self._check_alive()
        self._profile = profile
        self._axis_geometry = AxisGeometry()
        self._column_geometry = None
        self.layout.render(profile, self.is_rtl)

    def render_range(
        self,
        start,
        end,
        snap_duration,
        slot_duration,
        label_interval=None,
        is_visible: Optional[VisibilityPredicate] = None,
    ) -> GridProfile:
        """Render the grid for a date range, reusing a cached profile when possible."""
        self._check_alive()
        profile = self._profile_cache.get_profile(
            start, end, snap_duration, slot_duration,
            label_interval=label_interval, is_visible=is_visible,
        )
        if profile is not self._profile:
            self.render(profile)
        return profile

    def build(self, profile: GridProfile) -> AxisGeometry:
        """Render a profile and run the first layout pass."""
        self.render(profile)
        return self.update_size()

    def mount(self) -> AxisGeometry:
        return self.update_size()

    def resize(self) -> AxisGeometry:
        return self.update_size()

    def update_size(self) -> AxisGeometry:
        """Run one layout pass: resolve the slot width and apply it."""
        return self.apply_slot_width(self.compute_slot_width())

    def destroy(self) -> None:
        if self._destroyed:
            return
        self.layout.destroy()
        self._profile = None
        self._column_geometry = None
        self._axis_geometry = AxisGeometry()
        self._destroyed = True

    # Width allocation

    def compute_slot_width(self) -> float:
        profile = self._require_profile()
        return resolve_slot_width(
            self.options.slot_width,
            profile,
            self.layout.header_label_widths(),
            self.layout.min_column_width(),
        )

    def apply_slot_width(self, slot_width: Optional[float]) -> AxisGeometry:
        """
        Size both regions from one slot width and publish fresh column geometry.

        Returns:
            The AxisGeometry applied to the layout
        """
        profile = self._require_profile()
        geometry = apply_slot_width(slot_width, profile, self.layout.client_width())
        self.layout.apply_geometry(geometry)
        self._axis_geometry = geometry
        self._column_geometry = self.layout.column_geometry()
        return geometry

    # Coordinate queries

    def compute_date_snap_coverage(self, date) -> float:
        return compute_date_snap_coverage(self._require_profile(), date)

    def date_to_coord(self, date) -> float:
        return date_to_coord(self._require_profile(), self._columns(), date, self.is_rtl)

    def range_to_coords(self, start, end) -> CoordRange:
        return range_to_coords(self._require_profile(), self._columns(), start, end, self.is_rtl)

    def coord_to_date(self, coord: float) -> pd.Timestamp:
        return coord_to_date(self._require_profile(), self._columns(), coord, self.is_rtl)

    # Internals

    def _check_alive(self) -> None:
        if self._destroyed:
            raise AxisStateError(ERROR_DESTROYED)

    def _require_profile(self) -> GridProfile:
        self._check_alive()
        if self._profile is None:
            raise AxisStateError(ERROR_NOT_RENDERED)
        return self._profile

    def _columns(self) -> ColumnGeometry:
        if self._column_geometry is None:
            self._column_geometry = self.layout.column_geometry()
        return self._column_geometry
