from __future__ import annotations

"""
Central configuration for the time axis engine.
All package-wide constants should be defined here.
"""

# Package metadata
APP_VERSION = "0.1.0"

# Header measurement
HEADER_BORDER_PX = 1  # one pixel border not included in content-box widths

# Grid profile memoization
PROFILE_CACHE_SIZE = 32

# Qt sizing
QWIDGETSIZE_MAX = 16777215  # Qt's "no maximum" width

# Label formatting
DEFAULT_DATE_FORMAT = "%Y-%m-%d"
TIME_DATE_FORMAT = "%Y-%m-%d %H:%M"

# Error messages
ERROR_EMPTY_GRID = "Grid profile has no slots."
ERROR_NOT_MULTIPLE = "{outer} is not a whole multiple of {inner}."
ERROR_BAD_SLOT_WIDTH = "Slot width must be positive, got {value!r}."
ERROR_NOT_MONOTONIC = "snap_diff_to_index must be non-decreasing (index {index})."
ERROR_STRIP_MISMATCH = "Header has {header} columns but body has {body}."
ERROR_EMPTY_RANGE = "Range end {end} must be after start {start}."
ERROR_NOT_RENDERED = "Time axis has no grid profile; call render() first."
ERROR_DESTROYED = "Time axis has been destroyed."

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
