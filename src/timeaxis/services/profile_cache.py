"""Grid Profile Cache - memoizes grid profiles on the visible range."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Dict, Hashable, Optional, Tuple

import pandas as pd

from timeaxis.core.config import PROFILE_CACHE_SIZE
from timeaxis.core.grid_profile import GridProfile
from timeaxis.services.grid_profile_builder import build_grid_profile
from timeaxis.utils.durations import to_duration
from timeaxis.utils.market_hours import VisibilityPredicate

logger = logging.getLogger(__name__)


class GridProfileCache:
    """
    Bounded LRU cache of grid profiles keyed on range identity.

    Profiles are immutable, so a cached instance can be shared between
    render passes for as long as the visible range does not change.

    Thread-safe for concurrent lookups; two threads missing on the same key
    may both build, and the later build wins.
    """

    def __init__(self, maxsize: int = PROFILE_CACHE_SIZE):
        self._maxsize = maxsize
        self._entries: "OrderedDict[Tuple[Hashable, ...], GridProfile]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def _make_key(start, end, snap_duration, slot_duration, label_interval, is_visible) -> tuple:
        return (
            pd.Timestamp(start),
            pd.Timestamp(end),
            to_duration(snap_duration),
            to_duration(slot_duration),
            None if label_interval is None else to_duration(label_interval),
            is_visible,
        )

    def get_profile(
        self,
        start,
        end,
        snap_duration,
        slot_duration,
        label_interval=None,
        is_visible: Optional[VisibilityPredicate] = None,
    ) -> GridProfile:
        """
        Return the profile for a range, building it on first request.

        Args:
            Same as build_grid_profile(); is_visible must be hashable

        Returns:
            Cached or newly built GridProfile
        """
        key = self._make_key(start, end, snap_duration, slot_duration, label_interval, is_visible)

        with self._lock:
            profile = self._entries.get(key)
            if profile is not None:
                self._entries.move_to_end(key)
                self._hits += 1
                logger.debug("Grid profile cache hit for %s..%s", key[0], key[1])
                return profile
            self._misses += 1

        profile = build_grid_profile(
            start, end, snap_duration, slot_duration,
            label_interval=label_interval, is_visible=is_visible,
        )

        with self._lock:
            self._entries[key] = profile
            self._entries.move_to_end(key)
            while len(self._entries) > self._maxsize:
                self._entries.popitem(last=False)

        return profile

    def clear(self) -> None:
        """Drop all cached profiles and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_stats(self) -> Dict[str, int]:
        with self._lock:
            return {"hits": self._hits, "misses": self._misses, "size": len(self._entries)}
