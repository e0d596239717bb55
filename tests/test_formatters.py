import pandas as pd

from timeaxis.utils.formatters import format_date, format_slot_label

STAMP = pd.Timestamp("2024-03-04 13:30")


def test_format_date():
    assert format_date(STAMP) == "2024-03-04"
    assert format_date(STAMP, "%d/%m") == "04/03"
    assert format_date(pd.NaT) == ""
    assert format_date(None) == ""


def test_format_slot_label():
    assert format_slot_label(STAMP, pd.Timedelta(hours=4)) == "2024-03-04 13:30"
    assert format_slot_label(STAMP, pd.Timedelta(days=1)) == "2024-03-04"
    assert format_slot_label(STAMP, pd.DateOffset(months=3)) == "2024-03"
