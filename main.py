#===============================================================================
#  Startdeck  |  Keyboard-driven Application Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-12
#
#  Summary
#  -------
#  A search-as-you-type launcher for the Start Menu. Apps and Settings panels
#  are indexed, deduplicated and ranked by fuzzy match; launches are counted
#  in ./history.db so frequently used entries float to the top.
#  Supports:
#    - Start Menu .lnk shortcuts and protocol .url shortcuts (steam:// etc.)
#    - Windows Settings panels (ms-settings:)
#    - Calculator quick answer ("= 42") for arithmetic typed in the search box
#    - Run as administrator / open file location modifiers
#
#  Files
#  -----
#    ./launcher_state.json   -> options (db path, extra scan folders, limits)
#    ./history.db            -> usage counters + last scan snapshot
#    ./.startdeck/logs/      -> startdeck.log
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (PySide6, rapidfuzz, pywin32) which
#  are licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from startdeck.constants import STATE_FILE_NAME
from startdeck.controller import LauncherController
from startdeck.log_setup import configure_logging
from startdeck.main_window import MainWindow
from startdeck.state import config_from_state, load_state

logger = logging.getLogger("startdeck.main")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Startdeck application launcher")
    parser.add_argument("--state", type=Path, default=None, help=f"path to {STATE_FILE_NAME}")
    parser.add_argument("--no-scan", action="store_true", help="start from the cached snapshot only")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    base_dir = Path(__file__).resolve().parent
    state_path = args.state or (base_dir / STATE_FILE_NAME)
    state = load_state(state_path)
    config = config_from_state(base_dir, state)
    if args.no_scan:
        config.scan_on_startup = False

    log_file = configure_logging(base_dir, "DEBUG" if args.debug else config.log_level)
    logger.info("Starting (state=%s, db=%s, log=%s)", state_path, config.db_path, log_file)

    controller = LauncherController(config)
    controller.startup()

    app = QApplication(sys.argv)
    w = MainWindow(controller)
    w.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
