#===============================================================================
#  Startdeck | __init__.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-12
#
#  Summary
#  -------
#  Keyboard-driven launcher: fuzzy-ranked app index with persisted usage.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

__version__ = "0.3.0"
