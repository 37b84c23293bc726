#===============================================================================
#  Startdeck | db.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-12
#
#  Summary
#  -------
#  history.db persistence: per-entry usage counters (app_usage) and a full
#  snapshot of the last discovery pass (app_cache).
#
#  Reads never fail outward (usage is an optimization); writes raise
#  StoreError so the caller can log or retry.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Dict, Iterable, List

from .errors import StoreError
from .models import AppEntry, EntryType

logger = logging.getLogger(__name__)

BUSY_TIMEOUT_S = 5.0

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS app_usage (
        path TEXT PRIMARY KEY,
        count INTEGER
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS app_cache (
        parse_name TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        icon_index INTEGER NOT NULL,
        entry_type TEXT NOT NULL
    )
    """,
)


class HistoryStore:
    """Usage + cache tables in one SQLite file.

    Each call opens its own short-lived connection so the store can be used
    from whichever thread performs the launch or the rescan.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_path), timeout=BUSY_TIMEOUT_S)

    def init_db(self) -> None:
        """Create both tables if missing."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            with closing(self._connect()) as conn, conn:
                for ddl in SCHEMA:
                    conn.execute(ddl)
        except (sqlite3.Error, OSError) as e:
            raise StoreError(f"Cannot initialize {self.db_path}: {e}") from e

    # ----------------------------
    # Usage table
    # ----------------------------
    def load_usage_map(self) -> Dict[str, int]:
        try:
            with closing(self._connect()) as conn:
                rows = conn.execute("SELECT path, count FROM app_usage").fetchall()
        except sqlite3.Error as e:
            logger.warning("Usage history unavailable (%s); starting with empty counts", e)
            return {}

        usage: Dict[str, int] = {}
        for path, count in rows:
            if path is None:
                continue
            try:
                usage[str(path)] = int(count or 0)
            except (TypeError, ValueError):
                logger.debug("Skipping malformed usage row for %r", path)
        return usage

    def increment_usage(self, parse_name: str) -> None:
        """Atomic insert-or-increment of one usage counter."""
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute(
                    """
                    INSERT INTO app_usage (path, count) VALUES (?, 1)
                    ON CONFLICT(path) DO UPDATE SET count = count + 1
                    """,
                    (parse_name,),
                )
        except sqlite3.Error as e:
            raise StoreError(f"Failed to record usage for {parse_name}: {e}") from e

    # ----------------------------
    # Cache table
    # ----------------------------
    def save_app_cache(self, apps: Iterable[AppEntry]) -> int:
        """Replace the cached snapshot with `apps`. Returns rows written.

        Delete + insert run in one transaction; on error the previous
        snapshot is left untouched.
        """
        rows = [(a.parse_name, a.name, int(a.icon_index), a.entry_type.value) for a in apps]
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute("DELETE FROM app_cache")
                conn.executemany(
                    "INSERT OR REPLACE INTO app_cache (parse_name, name, icon_index, entry_type) "
                    "VALUES (?, ?, ?, ?)",
                    rows,
                )
        except sqlite3.Error as e:
            raise StoreError(f"Failed to save app cache: {e}") from e
        logger.info("Saved %d entries to app cache", len(rows))
        return len(rows)

    def load_app_cache(self) -> List[AppEntry]:
        """Cached entries with usage restored from app_usage (settings stay at 0)."""
        usage = self.load_usage_map()
        try:
            with closing(self._connect()) as conn:
                rows = conn.execute(
                    "SELECT parse_name, name, icon_index, entry_type FROM app_cache"
                ).fetchall()
        except sqlite3.Error as e:
            logger.warning("App cache unavailable (%s)", e)
            return []

        apps: List[AppEntry] = []
        for parse_name, name, icon_index, entry_type in rows:
            try:
                icon = int(icon_index)
            except (TypeError, ValueError):
                icon = 0
            if entry_type == EntryType.SETTINGS.value:
                apps.append(AppEntry.new_settings(name, parse_name, icon))
            else:
                apps.append(AppEntry.new(name, parse_name, icon, usage.get(parse_name, 0)))
        return apps

    def has_app_cache(self) -> bool:
        try:
            with closing(self._connect()) as conn:
                (count,) = conn.execute("SELECT COUNT(*) FROM app_cache").fetchone()
        except sqlite3.Error:
            return False
        return count > 0
