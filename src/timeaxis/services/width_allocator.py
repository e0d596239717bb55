"""
Width Allocator - decides how wide slot columns and their container render.

Two strategies compete:
  - fixed: every column keeps the slot width and the container scrolls
  - stretch: the fixed-width grid would not fill the viewport, so columns
    widen to fill it and the last column absorbs the rounding remainder
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Generic, Iterable, List, Optional, Sequence, TypeVar, Union

from timeaxis.core.axis_options import validate_slot_width
from timeaxis.core.config import ERROR_STRIP_MISMATCH, HEADER_BORDER_PX
from timeaxis.core.errors import GridConfigError
from timeaxis.core.grid_profile import GridProfile

logger = logging.getLogger(__name__)

T = TypeVar("T")

_PX_RE = re.compile(r"^\s*(-?\d+)")


@dataclass(frozen=True)
class AxisGeometry:
    """
    Result of one layout pass. None means "unset, let the widget size itself".

    After a pass with a resolved slot width exactly one of container_width
    and container_min_width is set.
    """

    slot_width: Optional[int] = None
    container_width: Optional[int] = None
    container_min_width: Optional[float] = None
    non_last_slot_width: Optional[int] = None

    @property
    def is_stretched(self) -> bool:
        return self.container_min_width is not None


@dataclass(frozen=True)
class ColumnStrips(Generic[T]):
    """
    Slot columns of the header region and the body region, in slot order.

    Both regions must stay aligned column-for-column, so they are always
    sized together from one AxisGeometry.
    """

    header: Sequence[T]
    body: Sequence[T]

    def __post_init__(self):
        object.__setattr__(self, "header", tuple(self.header))
        object.__setattr__(self, "body", tuple(self.body))
        if len(self.header) != len(self.body):
            raise GridConfigError(
                ERROR_STRIP_MISMATCH.format(header=len(self.header), body=len(self.body))
            )

    def __len__(self) -> int:
        return len(self.body)

    def sized_columns(self) -> List[T]:
        """Every column except the last of each region."""
        return list(self.header[:-1]) + list(self.body[:-1])

    def last_columns(self) -> List[T]:
        if not self.body:
            return []
        return [self.header[-1], self.body[-1]]


def parse_px(value: Union[int, float, str, None]) -> Optional[int]:
    """Parse a pixel measurement such as 40, 40.0 or "40px"; None if absent."""
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)):
        return int(value) if math.isfinite(value) else None
    match = _PX_RE.match(str(value))
    return int(match.group(1)) if match else None


def compute_default_slot_width(
    profile: GridProfile,
    header_widths: Iterable[float],
    min_column_width: Union[int, float, str, None] = None,
) -> int:
    """
    Derive a slot width from the widest rendered header label.

    Args:
        profile: Grid profile of the current render pass
        header_widths: Measured widths of the header label contents
        min_column_width: Minimum column width constraint, if any

    Returns:
        Slot width in whole pixels
    """
    max_inner_width = max(header_widths, default=0)
    header_width = max_inner_width + HEADER_BORDER_PX

    # a label spans slots_per_label columns
    slot_width = math.ceil(header_width / profile.slots_per_label)

    min_width = parse_px(min_column_width)
    if min_width:
        slot_width = max(slot_width, min_width)

    return slot_width


def resolve_slot_width(
    configured_width: Optional[float],
    profile: GridProfile,
    header_widths: Iterable[float],
    min_column_width: Union[int, float, str, None] = None,
) -> float:
    """Use the configured slot width when present, else derive one from the header."""
    slot_width = validate_slot_width(configured_width)
    if slot_width is None:
        slot_width = compute_default_slot_width(profile, header_widths, min_column_width)
    return slot_width


def apply_slot_width(
    slot_width: Union[float, str, None], profile: GridProfile, available_width: float
) -> AxisGeometry:
    """
    Resolve container and column widths for one layout pass.

    Args:
        slot_width: Target width per slot column, or None/"" to leave columns unsized
        profile: Grid profile of the current render pass
        available_width: Client width of the visible viewport

    Returns:
        A fresh AxisGeometry
    """
    slot_width = validate_slot_width(slot_width)
    if slot_width is None:
        logger.debug("Slot width unset, columns size themselves")
        return AxisGeometry()

    slot_width = math.floor(slot_width + 0.5)  # half-up
    slot_cnt = profile.slot_cnt
    if slot_cnt == 0:
        raise GridConfigError("Cannot size a grid with no slots")

    container_width = slot_width * slot_cnt

    if available_width > container_width:
        non_last = math.floor(available_width / slot_cnt)
        logger.debug(
            "Stretch mode: %d slots fill %spx at %dpx each", slot_cnt, available_width, non_last
        )
        return AxisGeometry(
            slot_width=slot_width,
            container_min_width=available_width,
            non_last_slot_width=non_last,
        )

    logger.debug("Fixed mode: %d slots at %dpx, container %dpx", slot_cnt, slot_width, container_width)
    return AxisGeometry(
        slot_width=slot_width,
        container_width=container_width,
        non_last_slot_width=slot_width,
    )
