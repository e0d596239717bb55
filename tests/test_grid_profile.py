import pandas as pd
import pytest

from timeaxis import ExactSnap, GridConfigError, GridProfile, HiddenSnap, snap_entry

START = pd.Timestamp("2024-03-04")
HOUR = pd.Timedelta(hours=1)


def _profile(**overrides):
    kwargs = dict(
        normalized_start=START,
        snap_duration="1h",
        slot_duration="2h",
        slot_dates=[START, START + 2 * HOUR],
        snap_cnt=4,
        snap_diff_to_index=[0, 1, 2, 3],
    )
    kwargs.update(overrides)
    return GridProfile(**kwargs)


@pytest.mark.parametrize(
    "value, expected",
    [
        (2, ExactSnap(2)),
        (2.0, ExactSnap(2)),
        (1.25, HiddenSnap(2)),
        (3.5, HiddenSnap(4)),
        (-0.5, HiddenSnap(0)),
        (HiddenSnap(7), HiddenSnap(7)),
    ],
)
def test_snap_entry_tags_values(value, expected):
    assert snap_entry(value) == expected


def test_derived_fields():
    profile = _profile(label_interval="4h")
    assert profile.snaps_per_slot == 2
    assert profile.slots_per_label == 2
    assert profile.slot_cnt == 2
    assert profile.snap_diff_to_index == (ExactSnap(0), ExactSnap(1), ExactSnap(2), ExactSnap(3))


def test_label_interval_defaults_to_slot_duration():
    profile = _profile()
    assert profile.label_interval == pd.Timedelta(hours=2)
    assert profile.slots_per_label == 1


def test_numeric_lookup_is_tagged():
    profile = _profile(snap_diff_to_index=[0, 0.5, 1, 2], snap_cnt=3)
    assert profile.snap_diff_to_index[1] == HiddenSnap(1)


def test_rejects_empty_grid():
    with pytest.raises(GridConfigError):
        _profile(slot_dates=[])


def test_rejects_slot_not_multiple_of_snap():
    with pytest.raises(GridConfigError, match="not a whole multiple"):
        _profile(slot_duration="90min")


def test_rejects_label_not_multiple_of_slot():
    with pytest.raises(GridConfigError, match="label interval"):
        _profile(label_interval="3h")


def test_rejects_mixed_calendar_and_clock_durations():
    with pytest.raises(GridConfigError):
        _profile(slot_duration=pd.DateOffset(months=1))


def test_rejects_decreasing_lookup():
    with pytest.raises(GridConfigError, match="non-decreasing"):
        _profile(snap_diff_to_index=[0, 2, 1, 3])
    with pytest.raises(GridConfigError):
        _profile(snap_diff_to_index=[0, 1, 0.5, 3])


def test_rejects_inverse_lookup_of_wrong_length():
    with pytest.raises(GridConfigError, match="snap_index_to_diff"):
        _profile(snap_index_to_diff=[0, 1, 2])


def test_rejects_negative_snap_cnt():
    with pytest.raises(GridConfigError):
        _profile(snap_cnt=-1)


def test_rejects_non_positive_durations():
    with pytest.raises(GridConfigError):
        _profile(snap_duration="0h")


def test_profile_is_immutable():
    profile = _profile()
    with pytest.raises(AttributeError):
        profile.snap_cnt = 10
