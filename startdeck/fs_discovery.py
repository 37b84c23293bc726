#===============================================================================
#  Startdeck | fs_discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-14
#
#  Summary
#  -------
#  Start Menu discovery: walks the Programs folders for .lnk / .url shortcuts,
#  adds the Settings panels, and pushes the result into the AppManager.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .app_manager import AppManager
from .db import HistoryStore
from .models import AppEntry
from .settings_catalog import settings_entries

logger = logging.getLogger(__name__)

START_MENU_SUBPATH = Path("Microsoft") / "Windows" / "Start Menu" / "Programs"

# (target, arguments) of a .lnk file
ShortcutTarget = Tuple[str, Optional[str]]
ShortcutResolver = Callable[[Path], Optional[ShortcutTarget]]


def start_menu_dirs(extra_dirs: Iterable[str] = ()) -> List[Path]:
    """Per-user and all-users Start Menu Programs folders, plus configured extras."""
    dirs: List[Path] = []
    appdata = os.environ.get("APPDATA")
    if appdata:
        dirs.append(Path(appdata) / START_MENU_SUBPATH)
    else:
        username = os.environ.get("USERNAME", "Default")
        dirs.append(Path("C:/Users") / username / "AppData" / "Roaming" / START_MENU_SUBPATH)
    dirs.append(Path(os.environ.get("PROGRAMDATA", "C:/ProgramData")) / START_MENU_SUBPATH)
    dirs.extend(Path(d).expanduser() for d in extra_dirs if d)
    return dirs


def should_filter_app(name: str, target_path: str) -> bool:
    """Store placeholder targets and (un)installers are not launchable entries."""
    lowered = name.lower()
    return (
        "Microsoft.AutoGenerated." in target_path
        or "WindowsApps\\" in target_path
        or "uninstall" in lowered
        or "setup" in lowered
    )


def should_filter_url_shortcut(name: str, url: str) -> bool:
    """Keep protocol handlers (steam://...), drop web links and installers."""
    if not url:
        return True
    lowered = name.lower()
    if "uninstall" in lowered or "setup" in lowered:
        return True
    return url.startswith(("http://", "https://"))


def parse_url_file(path: Path) -> Optional[Tuple[str, Optional[str], Optional[int]]]:
    """Read URL / IconFile / IconIndex from an internet shortcut (.url)."""
    try:
        text = path.read_text(encoding="utf-8", errors="ignore")
    except OSError:
        return None

    url: Optional[str] = None
    icon_file: Optional[str] = None
    icon_index: Optional[int] = None
    for raw in text.splitlines():
        line = raw.strip()
        if line.startswith("URL="):
            url = line[len("URL="):]
        elif line.startswith("IconFile="):
            icon_file = line[len("IconFile="):]
        elif line.startswith("IconIndex="):
            try:
                icon_index = int(line[len("IconIndex="):])
            except ValueError:
                icon_index = None

    if url is None:
        return None
    return url, icon_file, icon_index


def _is_windows() -> bool:
    return os.name == "nt"


def _no_shell(shortcut_path: Path) -> Optional[ShortcutTarget]:
    return None


@contextmanager
def shell_shortcut_resolver() -> Iterator[ShortcutResolver]:
    """Yield a .lnk resolver backed by one WScript.Shell for the whole scan.

    COM is initialised on entry and released on exit, also when the scan fails.
    Off Windows the resolver resolves nothing.
    """
    if not _is_windows():
        yield _no_shell
        return

    import pythoncom
    import win32com.client

    pythoncom.CoInitialize()
    try:
        shell = win32com.client.Dispatch("WScript.Shell")

        def resolve(shortcut_path: Path) -> Optional[ShortcutTarget]:
            try:
                link = shell.CreateShortCut(str(shortcut_path))
                target = (link.TargetPath or "").strip()
                args = (link.Arguments or "").strip() or None
            except pythoncom.com_error as e:
                logger.debug("Cannot resolve shortcut %s: %s", shortcut_path, e)
                return None
            return (target, args) if target else None

        yield resolve
    finally:
        pythoncom.CoUninitialize()


def process_shortcut(
    shortcut_path: Path,
    usage_map: Dict[str, int],
    resolve: ShortcutResolver,
) -> Optional[AppEntry]:
    try:
        resolved = resolve(shortcut_path)
    except Exception as e:
        logger.warning("Skipping shortcut %s: %s", shortcut_path, e)
        return None
    if not resolved:
        return None
    target, args = resolved
    name = shortcut_path.stem

    if should_filter_app(name, target):
        logger.debug("Filtering out problematic app: %s -> %s", name, target)
        return None

    logger.debug("Added app: %s -> %s", name, target)
    return AppEntry.new_with_args(name, target, args, 0, usage_map.get(target, 0))


def process_url_shortcut(shortcut_path: Path, usage_map: Dict[str, int]) -> Optional[AppEntry]:
    parsed = parse_url_file(shortcut_path)
    if not parsed:
        return None
    url, _icon_file, _icon_index = parsed
    name = shortcut_path.stem

    if should_filter_url_shortcut(name, url):
        logger.debug("Filtering out URL shortcut: %s -> %s", name, url)
        return None

    logger.debug("Added URL shortcut: %s -> %s", name, url)
    # IconIndex counts icons inside IconFile, not the shell image list
    return AppEntry.new(name, url, 0, usage_map.get(url, 0))


def _walk_shortcuts(folder: Path) -> Iterator[Path]:
    try:
        items = sorted(folder.iterdir(), key=lambda p: p.name.lower())
    except OSError:
        return
    for item in items:
        if item.is_dir():
            yield from _walk_shortcuts(item)
        elif item.is_file() and item.suffix.lower() in (".lnk", ".url"):
            yield item


def iter_entries(
    dirs: Iterable[Path],
    usage_map: Dict[str, int],
    resolve: ShortcutResolver,
) -> Iterator[AppEntry]:
    """Entries in discovery order: shortcuts folder by folder, then Settings.

    Order matters: the first entry for a given identity wins on checked insert.
    """
    for folder in dirs:
        if not folder.is_dir():
            continue
        for item in _walk_shortcuts(folder):
            if item.suffix.lower() == ".lnk":
                entry = process_shortcut(item, usage_map, resolve)
            else:
                entry = process_url_shortcut(item, usage_map)
            if entry is not None:
                yield entry

    yield from settings_entries()


def scan_apps(
    manager: AppManager,
    store: HistoryStore,
    extra_dirs: Iterable[str] = (),
    resolve: Optional[ShortcutResolver] = None,
    dirs: Optional[List[Path]] = None,
) -> int:
    """Full rescan into `manager`. Returns the number of entries kept."""
    usage_map = store.load_usage_map()
    folders = dirs if dirs is not None else start_menu_dirs(extra_dirs)
    # Collect outside the lock; rebuild swaps contents in one locked step.
    if resolve is not None:
        entries = list(iter_entries(folders, usage_map, resolve))
    else:
        with shell_shortcut_resolver() as shell_resolve:
            entries = list(iter_entries(folders, usage_map, shell_resolve))
    count = manager.rebuild(entries)
    logger.info("Scan complete: %d entries from %d folders", count, len(folders))
    return count
