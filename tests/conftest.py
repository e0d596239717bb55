import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pandas as pd
import pytest

from timeaxis import build_grid_profile

DAY_START = pd.Timestamp("2024-03-04")  # a Monday


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def day_start():
    return DAY_START


@pytest.fixture
def hourly_profile():
    """One day of hourly snaps in 4-hour slots: 24 snaps, 6 columns."""
    return build_grid_profile(DAY_START, DAY_START + pd.Timedelta(days=1), "1h", "4h")
