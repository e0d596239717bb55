import pytest

pytest.importorskip("pyqtgraph")

from timeaxis.ui.widgets.charting.axes import SlotDateAxisItem


def test_tick_strings_follow_profile(qapp, hourly_profile):
    axis = SlotDateAxisItem()
    assert axis.tickStrings([0, 4], 1, 1) == ["", ""]

    axis.set_profile(hourly_profile)
    assert axis.tickStrings([0, 4, 25, -1], 1, 1) == [
        "2024-03-04 00:00",
        "2024-03-04 04:00",
        "",
        "",
    ]


def test_date_to_value(qapp, hourly_profile, day_start):
    axis = SlotDateAxisItem()
    assert axis.date_to_value(day_start) == 0.0

    axis.set_profile(hourly_profile)
    assert axis.date_to_value("2024-03-04 06:30") == pytest.approx(6.5)
