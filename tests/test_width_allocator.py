import pandas as pd
import pytest

from timeaxis import AxisGeometry, ColumnStrips, GridConfigError, build_grid_profile
from timeaxis.services.width_allocator import (
    apply_slot_width,
    compute_default_slot_width,
    parse_px,
    resolve_slot_width,
)


@pytest.fixture
def daily_label_profile(day_start):
    """Hourly snaps, 6-hour slots, one label per day: 4 slots per label."""
    return build_grid_profile(
        day_start, day_start + pd.Timedelta(days=2), "1h", "6h", label_interval="1D"
    )


def test_fixed_mode_when_grid_overflows_viewport(hourly_profile):
    geometry = apply_slot_width(100, hourly_profile, 500)

    assert geometry == AxisGeometry(
        slot_width=100, container_width=600, container_min_width=None, non_last_slot_width=100
    )
    assert not geometry.is_stretched


def test_stretch_mode_when_grid_underfills_viewport(hourly_profile):
    geometry = apply_slot_width(100, hourly_profile, 900)

    assert geometry.container_width is None
    assert geometry.container_min_width == 900
    assert geometry.non_last_slot_width == 150
    assert geometry.is_stretched


def test_stretch_width_is_floored(hourly_profile):
    geometry = apply_slot_width(100, hourly_profile, 904)
    assert geometry.non_last_slot_width == 150


def test_stretch_keeps_fractional_viewport_width(hourly_profile):
    geometry = apply_slot_width(100, hourly_profile, 900.5)
    assert geometry.container_min_width == 900.5
    assert geometry.non_last_slot_width == 150


def test_exact_fit_stays_fixed(hourly_profile):
    geometry = apply_slot_width(100, hourly_profile, 600)
    assert geometry.container_width == 600
    assert geometry.container_min_width is None


def test_slot_width_rounds_half_up(hourly_profile):
    assert apply_slot_width(99.5, hourly_profile, 0).slot_width == 100
    assert apply_slot_width(100.4, hourly_profile, 0).container_width == 600


@pytest.mark.parametrize("unset", [None, ""])
def test_unset_slot_width_leaves_everything_unset(hourly_profile, unset):
    assert apply_slot_width(unset, hourly_profile, 900) == AxisGeometry()


@pytest.mark.parametrize("bad", [0, -10, float("nan"), "wide"])
def test_invalid_slot_widths_are_rejected(hourly_profile, bad):
    with pytest.raises(GridConfigError):
        apply_slot_width(bad, hourly_profile, 500)
    with pytest.raises(GridConfigError):
        resolve_slot_width(bad, hourly_profile, [50])


def test_configured_width_is_used_verbatim(hourly_profile):
    assert resolve_slot_width(120, hourly_profile, [500], 300) == 120


def test_default_width_from_widest_label(daily_label_profile):
    assert daily_label_profile.slots_per_label == 4
    # (80 + 1 border) / 4 slots per label, rounded up
    assert compute_default_slot_width(daily_label_profile, [59, 80]) == 21
    assert resolve_slot_width(None, daily_label_profile, [59, 80]) == 21


def test_default_width_respects_min_column_width(daily_label_profile):
    assert compute_default_slot_width(daily_label_profile, [59, 80], "30px") == 30
    assert compute_default_slot_width(daily_label_profile, [59, 80], 10) == 21
    assert compute_default_slot_width(daily_label_profile, [59, 80], 0) == 21


def test_default_width_without_labels(hourly_profile):
    assert compute_default_slot_width(hourly_profile, []) == 1


def test_column_strips_must_match():
    with pytest.raises(GridConfigError):
        ColumnStrips(["h0", "h1"], ["b0"])


def test_column_strips_size_all_but_last():
    strips = ColumnStrips(["h0", "h1", "h2"], ["b0", "b1", "b2"])
    assert strips.sized_columns() == ["h0", "h1", "b0", "b1"]
    assert strips.last_columns() == ["h2", "b2"]
    assert len(strips) == 3
    assert ColumnStrips([], []).last_columns() == []


@pytest.mark.parametrize(
    "value, expected",
    [(40, 40), (40.7, 40), ("40px", 40), (" 12", 12), ("auto", None), ("", None), (None, None)],
)
def test_parse_px(value, expected):
    assert parse_px(value) == expected
