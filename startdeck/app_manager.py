#===============================================================================
#  Startdeck | app_manager.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-12
#
#  Summary
#  -------
#  In-memory launcher index: deduplicated entries, usage ordering, and the
#  fuzzy-ranked filtered view (as storage indices) the list widget renders.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional, Set, Tuple

from .matcher import fuzzy_score
from .models import AppEntry

logger = logging.getLogger(__name__)


class AppManager:
    """Owns the entry list and the filtered-index view.

    Storage indices are the currency between filter(), get_filtered_app() and
    increment_usage(). Any clear()/rebuild() invalidates indices held by callers.

    All public methods take `lock` for the duration of the call. The lock is
    re-entrant so a caller can wrap a short sequence in `with manager.lock:`.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._apps: List[AppEntry] = []
        self._filtered: List[int] = []
        self._parse_names: Set[str] = set()
        self._names_lower: Set[str] = set()

    def __len__(self) -> int:
        with self.lock:
            return len(self._apps)

    # ----------------------------
    # Insert / reset
    # ----------------------------
    def add_app(self, app: AppEntry) -> bool:
        """Checked insert. Returns False when the entry is a duplicate.

        Duplicates are the same parse_name, or the same name ignoring case.
        The first entry added for an identity wins.
        """
        with self.lock:
            name_lower = app.name.lower()
            if app.parse_name in self._parse_names or name_lower in self._names_lower:
                return False
            self._append(app)
            return True

    def add_app_unchecked(self, app: AppEntry) -> None:
        """Append without deduplication (restoring a cached snapshot)."""
        with self.lock:
            self._append(app)

    def set_apps(self, apps: Iterable[AppEntry]) -> None:
        with self.lock:
            self.clear()
            for app in apps:
                self._append(app)

    def clear(self) -> None:
        with self.lock:
            self._apps.clear()
            self._filtered.clear()
            self._parse_names.clear()
            self._names_lower.clear()

    def rebuild(self, apps: Iterable[AppEntry]) -> int:
        """Repopulate from a discovery pass as one locked sequence.

        Filter calls never observe a half-populated index.
        """
        with self.lock:
            self.clear()
            dropped = 0
            for app in apps:
                if not self.add_app(app):
                    dropped += 1
            self.sort_by_usage()
            self.filter("")
            logger.debug("Index rebuilt: %d entries (%d duplicates dropped)", len(self._apps), dropped)
            return len(self._apps)

    def _append(self, app: AppEntry) -> None:
        self._apps.append(app)
        self._parse_names.add(app.parse_name)
        self._names_lower.add(app.name.lower())

    # ----------------------------
    # Accessors
    # ----------------------------
    @property
    def apps(self) -> Tuple[AppEntry, ...]:
        with self.lock:
            return tuple(self._apps)

    @property
    def filtered_indices(self) -> Tuple[int, ...]:
        with self.lock:
            return tuple(self._filtered)

    def get_filtered_app(self, filtered_index: int) -> Optional[AppEntry]:
        with self.lock:
            idx = self.storage_index(filtered_index)
            return None if idx is None else self._apps[idx]

    def storage_index(self, filtered_index: int) -> Optional[int]:
        """Map a row in the filtered view back to its storage index."""
        with self.lock:
            if not 0 <= filtered_index < len(self._filtered):
                return None
            idx = self._filtered[filtered_index]
            return idx if idx < len(self._apps) else None

    # ----------------------------
    # Ordering / search
    # ----------------------------
    def sort_by_usage(self) -> None:
        """Usage count descending, then name ascending (case-insensitive). Stable."""
        with self.lock:
            self._apps.sort(key=AppEntry.sort_key)

    def filter(self, search: str) -> List[int]:
        """Recompute the filtered view for `search` and return it.

        Empty search shows every entry in storage order. Otherwise entries that
        do not match are excluded and the rest are ordered by score; equal
        scores keep storage order (sorted() is stable), i.e. usage order.
        """
        with self.lock:
            if not search:
                self._filtered = list(range(len(self._apps)))
                return list(self._filtered)

            matches: List[Tuple[int, int]] = []
            for i, app in enumerate(self._apps):
                score = fuzzy_score(app.name, search)
                if score is not None:
                    matches.append((i, score))

            matches.sort(key=lambda m: m[1], reverse=True)
            self._filtered = [i for i, _ in matches]
            return list(self._filtered)

    # ----------------------------
    # Usage
    # ----------------------------
    def increment_usage(self, app_index: int) -> bool:
        """Bump usage for a storage index. Out-of-range is a no-op (returns False)."""
        with self.lock:
            if not 0 <= app_index < len(self._apps):
                return False
            self._apps[app_index].usage_count += 1
            return True
