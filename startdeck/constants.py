#===============================================================================
#  Startdeck | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-12
#
#  Summary
#  -------
#  Central place for file naming conventions, limits and UI sizing/theme.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "Startdeck"
STATE_FILE_NAME = "launcher_state.json"
DB_FILE_NAME = "history.db"
LOGS_DIR_NAME = ".startdeck"
LOG_FILE_NAME = "startdeck.log"

DEFAULT_MAX_RESULTS = 50

# --- Metro style theme ---
METRO_BG = "#101010"
METRO_ACCENT = "#0078D7"
METRO_PANEL = "#1a1a1a"
METRO_BORDER = "#2a2a2a"

WINDOW_WIDTH = 560
WINDOW_HEIGHT = 480
ROW_HEIGHT = 34
