"""Date-to-pixel coordinate engine for non-uniform time grids."""

from __future__ import annotations

from timeaxis.core.axis_options import AxisOptions
from timeaxis.core.config import APP_VERSION
from timeaxis.core.errors import AxisStateError, GridConfigError
from timeaxis.core.grid_profile import ExactSnap, GridProfile, HiddenSnap, snap_entry
from timeaxis.services.axis_layout import AxisLayout, StaticAxisLayout
from timeaxis.services.coordinate_mapper import ColumnGeometry, CoordRange
from timeaxis.services.grid_profile_builder import build_grid_profile
from timeaxis.services.profile_cache import GridProfileCache
from timeaxis.services.time_axis import TimeAxis
from timeaxis.services.width_allocator import AxisGeometry, ColumnStrips

__version__ = APP_VERSION

__all__ = [
    "AxisOptions",
    "AxisStateError",
    "GridConfigError",
    "ExactSnap",
    "GridProfile",
    "HiddenSnap",
    "snap_entry",
    "AxisLayout",
    "StaticAxisLayout",
    "ColumnGeometry",
    "CoordRange",
    "build_grid_profile",
    "GridProfileCache",
    "TimeAxis",
    "AxisGeometry",
    "ColumnStrips",
]
