#===============================================================================
#  Startdeck | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-11
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Exception types raised by the store and the launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class StartdeckError(RuntimeError):
    """Base class for launcher errors."""


class StoreError(StartdeckError):
    """A write against history.db failed (usage increment or cache save)."""


class LaunchError(StartdeckError):
    """The OS refused to start the selected entry."""
