from __future__ import annotations

from timeaxis.services.coordinate_mapper import (
    compute_date_snap_coverage,
    coord_to_date,
    coverage_to_date,
    date_to_coord,
    range_to_coords,
)
from timeaxis.services.width_allocator import (
    apply_slot_width,
    compute_default_slot_width,
    resolve_slot_width,
)

__all__ = [
    "compute_date_snap_coverage",
    "coord_to_date",
    "coverage_to_date",
    "date_to_coord",
    "range_to_coords",
    "apply_slot_width",
    "compute_default_slot_width",
    "resolve_slot_width",
]
