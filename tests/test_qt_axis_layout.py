import pandas as pd
import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget

from timeaxis import AxisOptions, TimeAxis
from timeaxis.core.config import QWIDGETSIZE_MAX
from timeaxis.ui.widgets.timeline import QtAxisLayout

HOUR = pd.Timedelta(hours=1)


@pytest.fixture
def canvases(qapp):
    header, body, viewport = QWidget(), QWidget(), QWidget()
    viewport.resize(500, 200)
    yield header, body, viewport
    for widget in (header, body, viewport):
        widget.deleteLater()


def test_render_creates_matching_columns(canvases, hourly_profile):
    header, body, viewport = canvases
    layout = QtAxisLayout(header, body, viewport)
    layout.render(hourly_profile)

    assert len(layout.strips) == 6
    assert header.layout().count() == 6
    assert body.layout().count() == 6
    assert layout.strips.header[1].text() == "2024-03-04 04:00"
    widths = layout.header_label_widths()
    assert len(widths) == 6 and all(w > 0 for w in widths)


def test_fixed_geometry(canvases, hourly_profile):
    header, body, viewport = canvases
    axis = TimeAxis(QtAxisLayout(header, body, viewport), AxisOptions(slot_width=100))
    geometry = axis.build(hourly_profile)

    assert geometry.container_width == 600
    assert body.width() == 600
    assert header.maximumWidth() == 600
    strips = axis.layout.strips
    assert all(column.maximumWidth() == 100 for column in strips.sized_columns())
    assert all(column.maximumWidth() == QWIDGETSIZE_MAX for column in strips.last_columns())

    columns = axis.layout.column_geometry()
    assert columns.lefts == (0, 100, 200, 300, 400, 500)
    assert columns.rights[-1] == 600
    assert axis.date_to_coord(hourly_profile.normalized_start + 2 * HOUR) == pytest.approx(50)


def test_stretch_after_resize(canvases, hourly_profile):
    header, body, viewport = canvases
    axis = TimeAxis(QtAxisLayout(header, body, viewport), AxisOptions(slot_width=100))
    axis.build(hourly_profile)

    viewport.resize(904, 200)
    geometry = axis.resize()
    body.resize(904, 200)

    assert geometry.is_stretched
    assert body.minimumWidth() == 904
    columns = axis.layout.column_geometry()
    widths = [columns.get_width(i) for i in range(len(columns))]
    assert widths == [150] * 5 + [154]


def test_right_to_left(canvases, hourly_profile):
    header, body, viewport = canvases
    axis = TimeAxis(
        QtAxisLayout(header, body, viewport), AxisOptions(slot_width=100, is_rtl=True)
    )
    axis.build(hourly_profile)
    start = hourly_profile.normalized_start

    assert header.layoutDirection() == Qt.LayoutDirection.RightToLeft
    assert body.layoutDirection() == Qt.LayoutDirection.RightToLeft
    assert axis.layout.column_geometry().lefts[0] == 500
    assert axis.date_to_coord(start) == 0
    assert axis.date_to_coord(start + 24 * HOUR) == -600


def test_destroy_removes_columns(canvases, hourly_profile):
    header, body, viewport = canvases
    axis = TimeAxis(QtAxisLayout(header, body, viewport), AxisOptions(slot_width=100))
    axis.build(hourly_profile)
    axis.destroy()

    assert len(axis.layout.strips) == 0
    assert body.layout().count() == 0
