"""Exception types raised at the time axis boundaries."""

from __future__ import annotations


class GridConfigError(ValueError):
    """Invalid grid profile, options, or layout handed to the engine."""


class AxisStateError(RuntimeError):
    """A TimeAxis was queried before render() or after destroy()."""
