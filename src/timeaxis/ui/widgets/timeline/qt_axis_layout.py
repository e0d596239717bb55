"""Qt Axis Layout - widget-backed header/body slot columns for a TimeAxis."""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QWidget

from timeaxis.core.config import QWIDGETSIZE_MAX
from timeaxis.core.grid_profile import GridProfile
from timeaxis.services.coordinate_mapper import ColumnGeometry
from timeaxis.services.width_allocator import AxisGeometry, ColumnStrips
from timeaxis.utils.formatters import format_slot_label


def _release_width(widget: QWidget) -> None:
    """Let a widget size itself horizontally again."""
    widget.setMinimumWidth(0)
    widget.setMaximumWidth(QWIDGETSIZE_MAX)


def _size_canvas(canvas: QWidget, geometry: AxisGeometry) -> None:
    if geometry.container_width is not None:
        canvas.setFixedWidth(int(geometry.container_width))
    elif geometry.container_min_width is not None:
        canvas.setMaximumWidth(QWIDGETSIZE_MAX)
        canvas.setMinimumWidth(int(geometry.container_min_width))
    else:
        _release_width(canvas)


class QtAxisLayout:
    """
    Slot columns laid out in two canvases: a header row and a body row.

    Typically each canvas is the widget of a QScrollArea (widgetResizable)
    and the body scroll area's viewport is the measured client area:

        header_scroll.setWidget(header_canvas)
        body_scroll.setWidget(body_canvas)
        layout = QtAxisLayout(header_canvas, body_canvas, body_scroll.viewport())

    Every column except the last gets a fixed width from the AxisGeometry;
    the last column is left free so it stretches to the canvas edge.
    render() sets both canvases' layoutDirection from the axis direction.
    """

    def __init__(
        self,
        header_canvas: QWidget,
        body_canvas: QWidget,
        body_viewport: Optional[QWidget] = None,
        min_column_width: Optional[int] = None,
    ):
        self._header_canvas = header_canvas
        self._body_canvas = body_canvas
        self._body_viewport = body_viewport or body_canvas.parentWidget() or body_canvas
        self._min_column_width = min_column_width

        for canvas in (header_canvas, body_canvas):
            if canvas.layout() is None:
                row = QHBoxLayout(canvas)
                row.setContentsMargins(0, 0, 0, 0)
                row.setSpacing(0)

        self._strips: ColumnStrips = ColumnStrips((), ())
        self._labels: List[QLabel] = []

    @property
    def strips(self) -> ColumnStrips:
        return self._strips

    def render(self, profile: GridProfile, is_rtl: bool = False) -> None:
        self._clear_columns()

        direction = Qt.LayoutDirection.RightToLeft if is_rtl else Qt.LayoutDirection.LeftToRight
        self._header_canvas.setLayoutDirection(direction)
        self._body_canvas.setLayoutDirection(direction)

        header_columns = []
        body_columns = []
        for i, slot_date in enumerate(profile.slot_dates):
            # one label per label interval, spanning slots_per_label columns
            text = ""
            if i % profile.slots_per_label == 0:
                text = format_slot_label(slot_date, profile.label_interval)

            cell = QLabel(text, self._header_canvas)
            cell.setObjectName("timeAxisHeaderCell")
            self._header_canvas.layout().addWidget(cell)
            header_columns.append(cell)

            slot = QFrame(self._body_canvas)
            slot.setObjectName("timeAxisSlot")
            self._body_canvas.layout().addWidget(slot)
            body_columns.append(slot)

        self._strips = ColumnStrips(header_columns, body_columns)
        self._labels = [cell for cell in header_columns if cell.text()]

    def header_label_widths(self) -> List[int]:
        return [label.sizeHint().width() for label in self._labels]

    def min_column_width(self) -> Optional[int]:
        return self._min_column_width

    def client_width(self) -> int:
        return self._body_viewport.width()

    def apply_geometry(self, geometry: AxisGeometry) -> None:
        _size_canvas(self._header_canvas, geometry)
        _size_canvas(self._body_canvas, geometry)

        non_last = geometry.non_last_slot_width
        for column in self._strips.sized_columns():
            if non_last is None:
                _release_width(column)
            else:
                column.setFixedWidth(int(non_last))

        for column in self._strips.last_columns():
            _release_width(column)

    def column_geometry(self) -> ColumnGeometry:
        self._body_canvas.layout().activate()
        rects = [column.geometry() for column in self._strips.body]
        return ColumnGeometry(
            lefts=[rect.x() for rect in rects],
            rights=[rect.x() + rect.width() for rect in rects],
            origin_width=self._body_canvas.width(),
        )

    def destroy(self) -> None:
        self._clear_columns()

    def _clear_columns(self) -> None:
        for canvas, columns in (
            (self._header_canvas, self._strips.header),
            (self._body_canvas, self._strips.body),
        ):
            for column in columns:
                canvas.layout().removeWidget(column)
                column.setParent(None)
                column.deleteLater()
        self._strips = ColumnStrips((), ())
        self._labels = []
