"""Timeline widgets - Qt layout for header/body slot columns."""

from .qt_axis_layout import QtAxisLayout

__all__ = ['QtAxisLayout']
