#===============================================================================
#  Startdeck | log_setup.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-11
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Logging setup: rotating file under ./.startdeck/logs plus stderr.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .constants import LOG_FILE_NAME, LOGS_DIR_NAME

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
MAX_LOG_BYTES = 1_000_000
LOG_BACKUPS = 3


def logs_dir(base_dir: Path) -> Path:
    d = base_dir / LOGS_DIR_NAME / "logs"
    d.mkdir(parents=True, exist_ok=True)
    return d


def configure_logging(base_dir: Path, level: str = "INFO") -> Path:
    """Attach file + console handlers to the package logger. Returns the log file path."""
    log_file = logs_dir(base_dir) / LOG_FILE_NAME
    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    console = logging.StreamHandler()
    console.setFormatter(formatter)

    root = logging.getLogger("startdeck")
    root.handlers.clear()
    root.addHandler(file_handler)
    root.addHandler(console)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return log_file
