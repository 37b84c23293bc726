"""
Pytest Configuration and Fixtures
"""

from pathlib import Path

import pytest

from startdeck.app_manager import AppManager
from startdeck.db import HistoryStore
from startdeck.models import AppEntry
from startdeck.state import LauncherConfig


@pytest.fixture
def store(tmp_path: Path) -> HistoryStore:
    """Returns an initialized HistoryStore backed by a temp history.db."""
    s = HistoryStore(tmp_path / "history.db")
    s.init_db()
    return s


@pytest.fixture
def manager() -> AppManager:
    """Returns an AppManager holding Calculator / Calendar / Notepad."""
    m = AppManager()
    m.add_app(AppEntry.new("Calculator", "c:\\calc.exe", 0, 3))
    m.add_app(AppEntry.new("Calendar", "c:\\cal.exe", 1, 5))
    m.add_app(AppEntry.new("Notepad", "c:\\note.exe", 2, 1))
    return m


@pytest.fixture
def isolated_start_menu(tmp_path: Path, monkeypatch) -> Path:
    """Points APPDATA/PROGRAMDATA at empty temp folders and returns an extra scan dir."""
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    monkeypatch.setenv("PROGRAMDATA", str(tmp_path / "programdata"))
    extra = tmp_path / "menu"
    extra.mkdir()
    return extra


@pytest.fixture
def config(tmp_path: Path, isolated_start_menu: Path) -> LauncherConfig:
    return LauncherConfig(
        base_dir=tmp_path,
        db_path=tmp_path / "history.db",
        extra_scan_dirs=[str(isolated_start_menu)],
    )


def fake_resolver(path: Path):
    """Resolves Foo.lnk to C:\\Apps\\Foo.exe without touching the Windows Shell."""
    return (f"C:\\Apps\\{path.stem}.exe", None)
