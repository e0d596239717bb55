"""Duration, calendar and formatting helpers."""
