#===============================================================================
#  Startdeck | controller.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-11
#  Last Update : 2026-02-14
#
#  Summary
#  -------
#  Top-level controller. Owns the AppManager, the HistoryStore and the
#  launch function, and sequences startup / rescan / filter / launch.
#  UI concerns (widgets, message boxes) live in main_window.py.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from . import calculator
from .app_manager import AppManager
from .db import HistoryStore
from .errors import LaunchError, StoreError
from .fs_discovery import ShortcutResolver, scan_apps
from .launcher import launch_entry
from .models import AppEntry
from .state import LauncherConfig

logger = logging.getLogger(__name__)

LaunchFn = Callable[..., None]


class LauncherController:
    def __init__(
        self,
        config: LauncherConfig,
        manager: Optional[AppManager] = None,
        store: Optional[HistoryStore] = None,
        launch_fn: LaunchFn = launch_entry,
        resolver: Optional[ShortcutResolver] = None,
    ):
        self.config = config
        self.manager = manager or AppManager()
        self.store = store or HistoryStore(config.db_path)
        self.launch_fn = launch_fn
        self.resolver = resolver

    # ----------------------------
    # Startup / discovery
    # ----------------------------
    def startup(self) -> None:
        try:
            self.store.init_db()
        except StoreError as e:
            logger.error("History database unavailable, usage will not persist: %s", e)

        restored = self.restore_cache()
        if self.config.scan_on_startup or not restored:
            self.rescan()

    def restore_cache(self) -> int:
        """Seed the index from the last snapshot so the list shows before the scan ends."""
        cached = self.store.load_app_cache()
        if not cached:
            return 0
        with self.manager.lock:
            self.manager.clear()
            for app in cached:
                self.manager.add_app_unchecked(app)
            self.manager.sort_by_usage()
            self.manager.filter("")
        logger.info("Restored %d entries from cache", len(cached))
        return len(cached)

    def rescan(self) -> int:
        count = scan_apps(
            self.manager,
            self.store,
            extra_dirs=self.config.extra_scan_dirs,
            resolve=self.resolver,
        )
        # Copy out, then write without holding the index lock.
        snapshot = list(self.manager.apps)
        try:
            self.store.save_app_cache(snapshot)
        except StoreError as e:
            logger.error("App cache not saved: %s", e)
        return count

    # ----------------------------
    # Search
    # ----------------------------
    def update_filter(self, search: str) -> Optional[str]:
        """Filter the index. Returns the calculator answer ("= 4") if any."""
        answer = None
        if calculator.is_math_expression(search):
            result = calculator.evaluate(search)
            if result is not None:
                answer = f"= {result}"
        self.manager.filter(search)
        return answer

    def visible_entries(self) -> List[Tuple[int, AppEntry]]:
        """(filtered position, entry) rows for the current view, capped at max_results."""
        with self.manager.lock:
            apps = self.manager.apps
            rows = [(pos, apps[idx]) for pos, idx in enumerate(self.manager.filtered_indices)]
        return rows[: self.config.max_results]

    # ----------------------------
    # Launch
    # ----------------------------
    def launch(self, filtered_pos: int, as_admin: bool = False, open_location: bool = False) -> bool:
        """Launch the entry at a row of the filtered view.

        The index lock is not held while the OS starts the process, so typing
        stays responsive. Returns False for a stale row or a failed launch.
        """
        with self.manager.lock:
            app_idx = self.manager.storage_index(filtered_pos)
            if app_idx is None:
                return False
            entry = self.manager.apps[app_idx]
            parse_name = entry.parse_name
            tracks_usage = not entry.is_settings

        try:
            self.launch_fn(entry, as_admin=as_admin, open_location=open_location)
        except LaunchError as e:
            logger.error("%s", e)
            return False

        if not tracks_usage:
            return True

        try:
            self.store.increment_usage(parse_name)
        except StoreError as e:
            logger.warning("Usage not persisted: %s", e)

        with self.manager.lock:
            # A rescan may have run while launching; re-find the entry by id.
            apps = self.manager.apps
            if app_idx >= len(apps) or apps[app_idx].parse_name != parse_name:
                app_idx = next((i for i, a in enumerate(apps) if a.parse_name == parse_name), -1)
            self.manager.increment_usage(app_idx)
            self.manager.sort_by_usage()
            self.manager.filter("")
        return True
