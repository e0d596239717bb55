"""
Axis layout collaborators.

A layout owns the rendered slot columns of a header region and a body
region. The engine asks it for measurements (header label widths, viewport
width, column edges) and hands it the AxisGeometry of each layout pass.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from timeaxis.core.config import HEADER_BORDER_PX
from timeaxis.core.grid_profile import GridProfile
from timeaxis.services.coordinate_mapper import ColumnGeometry
from timeaxis.services.width_allocator import AxisGeometry


class AxisLayout(Protocol):
    """Layout and measurement interface the TimeAxis drives."""

    def render(self, profile: GridProfile, is_rtl: bool = False) -> None:
        """Rebuild slot columns for a new grid profile, laid out in the given direction."""

    def header_label_widths(self) -> Sequence[float]:
        """Content widths of the rendered header labels."""

    def min_column_width(self) -> Optional[float]:
        """Minimum width constraint on slot columns, if any."""

    def client_width(self) -> float:
        """Width of the visible body viewport."""

    def apply_geometry(self, geometry: AxisGeometry) -> None:
        """Size containers and columns of both regions."""

    def column_geometry(self) -> ColumnGeometry:
        """Measured column edges after the latest apply_geometry()."""

    def destroy(self) -> None:
        """Release rendered columns."""


class StaticAxisLayout:
    """
    Headless layout that computes column edges arithmetically.

    Columns sit edge to edge. Every column but the last takes the applied
    non-last width; the last column takes whatever is left of the container.
    With no applied width, columns take their natural width.

    Usage:
        layout = StaticAxisLayout(client_width=900, header_label_widths=[62, 58])
        axis = TimeAxis(layout, AxisOptions())
        axis.build(profile)
    """

    def __init__(
        self,
        client_width: float,
        header_label_widths: Sequence[float] = (),
        min_column_width: Optional[float] = None,
        natural_column_width: Optional[float] = None,
    ):
        self._client_width = client_width
        self._header_label_widths = list(header_label_widths)
        self._min_column_width = min_column_width
        if natural_column_width is None:
            natural_column_width = max(self._header_label_widths, default=0) + HEADER_BORDER_PX
        self._natural_column_width = natural_column_width
        self._is_rtl = False
        self._slot_cnt = 0
        self._geometry = AxisGeometry()

    def render(self, profile: GridProfile, is_rtl: bool = False) -> None:
        self._slot_cnt = profile.slot_cnt
        self._is_rtl = is_rtl
        self._geometry = AxisGeometry()

    def header_label_widths(self) -> List[float]:
        return list(self._header_label_widths)

    def min_column_width(self) -> Optional[float]:
        return self._min_column_width

    def client_width(self) -> float:
        return self._client_width

    def set_client_width(self, width: float) -> None:
        """Simulate a viewport resize."""
        self._client_width = width

    def apply_geometry(self, geometry: AxisGeometry) -> None:
        self._geometry = geometry

    @property
    def geometry(self) -> AxisGeometry:
        return self._geometry

    def column_widths(self) -> List[float]:
        """Rendered width of each slot column."""
        n = self._slot_cnt
        if n == 0:
            return []

        geometry = self._geometry
        non_last = geometry.non_last_slot_width
        if non_last is None:
            return [self._natural_column_width] * n

        if geometry.container_width is not None:
            container = geometry.container_width
        else:
            # min-width container grows to the viewport
            container = max(geometry.container_min_width, self._client_width)

        last = max(container - non_last * (n - 1), 0)
        return [non_last] * (n - 1) + [last]

    def column_geometry(self) -> ColumnGeometry:
        return ColumnGeometry.from_widths(self.column_widths(), is_rtl=self._is_rtl)

    def destroy(self) -> None:
        self._slot_cnt = 0
        self._geometry = AxisGeometry()
