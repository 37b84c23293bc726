#===============================================================================
#  Startdeck | settings_catalog.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-11
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Common Windows Settings panels, exposed as ms-settings: shortcut entries.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .models import AppEntry

SETTINGS_ICON_INDEX = -1


@dataclass(frozen=True)
class SettingsItem:
    canonical_name: str
    display_name_en: str
    ms_settings_uri: str


SETTINGS_ITEMS = (
    SettingsItem("Display", "Display settings", "ms-settings:display"),
    SettingsItem("Sound", "Sound settings", "ms-settings:sound"),
    SettingsItem("Network", "Network settings", "ms-settings:network"),
    SettingsItem("Bluetooth", "Bluetooth settings", "ms-settings:bluetooth"),
    SettingsItem("Printers", "Printers & scanners", "ms-settings:printers"),
    SettingsItem("Apps", "Apps & features", "ms-settings:appsfeatures"),
    SettingsItem("Power", "Power & sleep", "ms-settings:powersleep"),
    SettingsItem("Storage", "Storage settings", "ms-settings:storagesense"),
    SettingsItem("Personalization", "Personalization", "ms-settings:personalization"),
    SettingsItem("Time", "Date & time", "ms-settings:dateandtime"),
    SettingsItem("Language", "Language settings", "ms-settings:regionlanguage"),
    SettingsItem("Updates", "Windows Update", "ms-settings:windowsupdate"),
    SettingsItem("Privacy", "Privacy settings", "ms-settings:privacy"),
    SettingsItem("Accounts", "Your account", "ms-settings:yourinfo"),
    SettingsItem("WiFi", "Wi-Fi settings", "ms-settings:network-wifi"),
)


def get_settings_items() -> List[SettingsItem]:
    return list(SETTINGS_ITEMS)


def get_localized_name(canonical_name: str) -> Optional[str]:
    """Display name for a settings panel.

    Only English names are shipped; MUI lookup is not wired up.
    """
    for item in SETTINGS_ITEMS:
        if item.canonical_name == canonical_name:
            return item.display_name_en
    return None


def settings_entries() -> List[AppEntry]:
    entries: List[AppEntry] = []
    for item in SETTINGS_ITEMS:
        name = get_localized_name(item.canonical_name) or item.display_name_en
        entries.append(AppEntry.new_settings(name, item.ms_settings_uri, SETTINGS_ICON_INDEX))
    return entries
