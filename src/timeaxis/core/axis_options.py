from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from timeaxis.core.config import ERROR_BAD_SLOT_WIDTH
from timeaxis.core.errors import GridConfigError


def validate_slot_width(value: Optional[float]) -> Optional[float]:
    """
    Check a configured slot width.

    Args:
        value: Configured width in pixels, or None/"" for "derive from header"

    Returns:
        The width as a float, or None when unset

    Raises:
        GridConfigError: If the width is zero, negative, or not finite
    """
    if value is None or value == "":
        return None
    try:
        width = float(value)
    except (TypeError, ValueError):
        raise GridConfigError(ERROR_BAD_SLOT_WIDTH.format(value=value)) from None
    if not math.isfinite(width) or width <= 0:
        raise GridConfigError(ERROR_BAD_SLOT_WIDTH.format(value=value))
    return width


@dataclass(frozen=True)
class AxisOptions:
    """Host configuration for a TimeAxis."""

    slot_width: Optional[float] = None  # None means derive from header labels
    is_rtl: bool = False

    def __post_init__(self):
        object.__setattr__(self, "slot_width", validate_slot_width(self.slot_width))
