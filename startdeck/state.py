#===============================================================================
#  Startdeck | state.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-14
#
#  Summary
#  -------
#  Load/save of launcher_state.json (db location, extra scan folders, limits)
#  and the LauncherConfig derived from it.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .constants import DB_FILE_NAME, DEFAULT_MAX_RESULTS

logger = logging.getLogger(__name__)


def default_state() -> Dict[str, Any]:
    return {
        "db_path": "",              # empty -> <base_dir>/history.db
        "extra_scan_dirs": [],      # extra folders walked for .lnk/.url
        "scan_on_startup": True,
        "max_results": DEFAULT_MAX_RESULTS,
        "log_level": "INFO",
    }


def load_state(state_path: Path) -> Dict[str, Any]:
    """Load state from disk (or create defaults)."""
    d = default_state()
    if not state_path.exists():
        return d
    try:
        data = json.loads(state_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable state file %s: %s", state_path, e)
        return d
    if not isinstance(data, dict):
        return d
    for k in d:
        if k not in data:
            data[k] = d[k]
    return data


def save_state(state_path: Path, state: Dict[str, Any]) -> None:
    """Persist state to disk."""
    state_path.write_text(json.dumps(state, indent=2), encoding="utf-8")


@dataclass
class LauncherConfig:
    base_dir: Path
    db_path: Path
    extra_scan_dirs: List[str] = field(default_factory=list)
    scan_on_startup: bool = True
    max_results: int = DEFAULT_MAX_RESULTS
    log_level: str = "INFO"


def config_from_state(base_dir: Path, state: Dict[str, Any]) -> LauncherConfig:
    db_path = Path(state.get("db_path") or (base_dir / DB_FILE_NAME))
    if not db_path.is_absolute():
        db_path = base_dir / db_path

    extra = state.get("extra_scan_dirs") or []
    if isinstance(extra, str):
        extra = [extra]

    try:
        max_results = max(1, int(state.get("max_results", DEFAULT_MAX_RESULTS)))
    except (TypeError, ValueError):
        max_results = DEFAULT_MAX_RESULTS

    # JSON booleans only; anything else keeps the default
    scan_on_startup = state.get("scan_on_startup", True)
    if not isinstance(scan_on_startup, bool):
        scan_on_startup = True

    return LauncherConfig(
        base_dir=base_dir,
        db_path=db_path,
        extra_scan_dirs=[str(d) for d in extra],
        scan_on_startup=scan_on_startup,
        max_results=max_results,
        log_level=str(state.get("log_level") or "INFO").upper(),
    )
