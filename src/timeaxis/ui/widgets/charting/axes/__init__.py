"""Chart axis components - axes labelled from a time grid."""

from .slot_date_axis import SlotDateAxisItem

__all__ = ['SlotDateAxisItem']
