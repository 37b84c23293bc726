#===============================================================================
#  Startdeck | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-12
#
#  Summary
#  -------
#  Shared data models used across the launcher (index entries).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class EntryType(Enum):
    APPLICATION = "Application"
    SETTINGS = "Settings"


@dataclass
class AppEntry:
    """Represents one launchable item (an app shortcut or a settings panel)."""
    name: str                         # display name (not unique)
    parse_name: str                   # path / URI / shell id used to launch
    arguments: Optional[str] = None
    icon_index: int = 0               # <= 0 means "no icon"
    usage_count: int = 0
    entry_type: EntryType = EntryType.APPLICATION

    @classmethod
    def new(cls, name: str, parse_name: str, icon_index: int, usage_count: int) -> "AppEntry":
        return cls(name=name, parse_name=parse_name, icon_index=icon_index, usage_count=usage_count)

    @classmethod
    def new_with_args(
        cls,
        name: str,
        parse_name: str,
        arguments: Optional[str],
        icon_index: int,
        usage_count: int,
    ) -> "AppEntry":
        return cls(
            name=name,
            parse_name=parse_name,
            arguments=arguments,
            icon_index=icon_index,
            usage_count=usage_count,
        )

    @classmethod
    def new_settings(cls, name: str, parse_name: str, icon_index: int) -> "AppEntry":
        """Settings panels are cheap to reach, so they never track usage."""
        return cls(
            name=name,
            parse_name=parse_name,
            icon_index=icon_index,
            usage_count=0,
            entry_type=EntryType.SETTINGS,
        )

    @property
    def is_settings(self) -> bool:
        return self.entry_type is EntryType.SETTINGS

    def sort_key(self) -> Tuple[int, str]:
        return (-self.usage_count, self.name.lower())
