#===============================================================================
#  Startdeck | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-14
#
#  Summary
#  -------
#  Launches an index entry (app target, protocol URL, ms-settings: panel),
#  optionally elevated or as "open file location".
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import re
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Optional

from .errors import LaunchError
from .models import AppEntry

logger = logging.getLogger(__name__)

SW_SHOWNORMAL = 1

# URI schemes like ms-settings: or steam://; a one-letter "scheme" is a drive.
_URI_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]+:")


def _is_windows() -> bool:
    return sys.platform.startswith("win")


def _startfile(target: str, arguments: Optional[str] = None) -> None:
    # os.startfile handles .exe, documents, ms-settings: and protocol URLs alike
    if hasattr(os, "startfile"):
        if arguments:
            os.startfile(target, "open", arguments)  # type: ignore[attr-defined]
        else:
            os.startfile(target)  # type: ignore[attr-defined]
        return

    opener = "open" if sys.platform == "darwin" else "xdg-open"
    if arguments and Path(target).is_file():
        subprocess.Popen([target, *shlex.split(arguments)], cwd=str(Path(target).parent))
    else:
        subprocess.Popen([opener, target])


def _run_as_admin(target: str, arguments: Optional[str] = None) -> None:
    if not _is_windows():
        raise LaunchError("Run as administrator is only available on Windows.")

    import win32api

    # ShellExecute with the "runas" verb raises the UAC prompt
    win32api.ShellExecute(0, "runas", target, arguments or None, None, SW_SHOWNORMAL)


def is_filesystem_path(target: str) -> bool:
    return bool(target) and not _URI_SCHEME.match(target)


def _open_location(target: str) -> None:
    if not is_filesystem_path(target):
        raise LaunchError(f"{target} has no file location to open.")
    if _is_windows():
        # One string: a list would be re-quoted and explorer ignores \" escapes
        subprocess.Popen(f'explorer /select,"{target}"')
        return
    folder = Path(target).parent
    opener = "open" if sys.platform == "darwin" else "xdg-open"
    subprocess.Popen([opener, str(folder)])


def launch_entry(entry: AppEntry, as_admin: bool = False, open_location: bool = False) -> None:
    """Launch an entry.

    modes:
      - open_location: reveal parse_name in Explorer (file managers elsewhere)
      - as_admin     : ShellExecute "runas" (Windows only)
      - default      : hand parse_name to the OS shell
    """
    target = entry.parse_name
    try:
        if open_location:
            _open_location(target)
        elif as_admin:
            _run_as_admin(target, entry.arguments)
        else:
            _startfile(target, entry.arguments)
    except LaunchError:
        raise
    except Exception as e:
        raise LaunchError(f"Could not launch {entry.name}: {e}") from e

    logger.info(
        "Launched %s (%s)%s",
        entry.name,
        target,
        " as admin" if as_admin else " location" if open_location else "",
    )
