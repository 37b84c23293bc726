"""
Tests for Start Menu discovery
"""

import sys
import types
from pathlib import Path

import pytest

from conftest import fake_resolver
from startdeck.app_manager import AppManager
from startdeck.fs_discovery import (
    iter_entries,
    parse_url_file,
    process_shortcut,
    process_url_shortcut,
    scan_apps,
    shell_shortcut_resolver,
    should_filter_app,
    should_filter_url_shortcut,
    start_menu_dirs,
)
from startdeck.settings_catalog import SETTINGS_ITEMS


def write_url(path: Path, url: str, icon_index=None) -> Path:
    lines = ["[InternetShortcut]", f"URL={url}"]
    if icon_index is not None:
        lines.append(f"IconIndex={icon_index}")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestFilters:

    def test_filter_store_and_installers(self):
        assert should_filter_app("Foo", "C:\\Program Files\\WindowsApps\\foo.exe")
        assert should_filter_app("Foo", "Microsoft.AutoGenerated.{123}")
        assert should_filter_app("Uninstall Foo", "C:\\foo\\unins000.exe")
        assert should_filter_app("Foo Setup", "C:\\foo\\setup.exe")
        assert not should_filter_app("Foo", "C:\\foo\\foo.exe")

    def test_filter_url_shortcuts(self):
        assert should_filter_url_shortcut("Game", "")
        assert should_filter_url_shortcut("Homepage", "https://example.com")
        assert should_filter_url_shortcut("Homepage", "http://example.com")
        assert should_filter_url_shortcut("Uninstall Game", "steam://uninstall/1")
        assert not should_filter_url_shortcut("Game", "steam://rungameid/440")


class TestParseUrlFile:

    def test_reads_fields(self, tmp_path):
        p = tmp_path / "Game.url"
        p.write_text(
            "[InternetShortcut]\nIconIndex=3\nURL=steam://rungameid/440\nIconFile=C:\\steam.ico\n",
            encoding="utf-8",
        )
        assert parse_url_file(p) == ("steam://rungameid/440", "C:\\steam.ico", 3)

    def test_missing_url(self, tmp_path):
        p = tmp_path / "Broken.url"
        p.write_text("[InternetShortcut]\nIconIndex=1\n", encoding="utf-8")
        assert parse_url_file(p) is None

    def test_bad_icon_index(self, tmp_path):
        p = write_url(tmp_path / "Game.url", "steam://x", icon_index="abc")
        assert parse_url_file(p) == ("steam://x", None, None)

    def test_missing_file(self, tmp_path):
        assert parse_url_file(tmp_path / "nope.url") is None


class TestProcess:

    def test_process_shortcut_uses_target_and_usage(self, tmp_path):
        lnk = tmp_path / "Paint.lnk"
        lnk.touch()
        entry = process_shortcut(lnk, {"C:\\Apps\\Paint.exe": 4}, fake_resolver)

        assert entry.name == "Paint"
        assert entry.parse_name == "C:\\Apps\\Paint.exe"
        assert entry.usage_count == 4

    def test_process_shortcut_keeps_arguments(self, tmp_path):
        lnk = tmp_path / "Profile.lnk"
        lnk.touch()
        entry = process_shortcut(lnk, {}, lambda p: ("C:\\chrome.exe", "--profile-directory=Work"))

        assert entry.arguments == "--profile-directory=Work"

    def test_process_shortcut_unresolved(self, tmp_path):
        lnk = tmp_path / "Dead.lnk"
        lnk.touch()
        assert process_shortcut(lnk, {}, lambda p: None) is None

    def test_process_url_shortcut(self, tmp_path):
        p = write_url(tmp_path / "Team Fortress 2.url", "steam://rungameid/440", icon_index=2)
        entry = process_url_shortcut(p, {"steam://rungameid/440": 6})

        assert entry.name == "Team Fortress 2"
        assert entry.icon_index == 0
        assert entry.usage_count == 6

    def test_process_shortcut_survives_resolver_error(self, tmp_path):
        def explode(path):
            raise RuntimeError("corrupt link")

        lnk = tmp_path / "Broken.lnk"
        lnk.touch()
        assert process_shortcut(lnk, {}, explode) is None


class TestWalk:

    def build_menu(self, root: Path) -> Path:
        (root / "Accessories").mkdir(parents=True)
        (root / "Accessories" / "Paint.lnk").touch()
        (root / "Notepad.lnk").touch()
        (root / "Uninstall Tool.lnk").touch()
        (root / "readme.txt").touch()
        write_url(root / "Game.url", "steam://rungameid/440")
        write_url(root / "Website.url", "https://example.com")
        return root

    def test_iter_entries_order_and_filters(self, tmp_path):
        menu = self.build_menu(tmp_path / "menu")

        entries = list(iter_entries([menu, tmp_path / "missing"], {}, fake_resolver))
        names = [e.name for e in entries]

        assert names[:3] == ["Paint", "Game", "Notepad"]
        assert "Uninstall Tool" not in names
        assert "Website" not in names
        assert len(entries) == 3 + len(SETTINGS_ITEMS)
        assert all(e.is_settings for e in entries[3:])

    def test_scan_apps_populates_manager(self, tmp_path, store):
        menu = self.build_menu(tmp_path / "menu")
        store.increment_usage("C:\\Apps\\Notepad.exe")
        manager = AppManager()

        count = scan_apps(manager, store, resolve=fake_resolver, dirs=[menu])

        assert count == len(manager) == 3 + len(SETTINGS_ITEMS)
        assert manager.apps[0].name == "Notepad"
        assert manager.apps[0].usage_count == 1
        assert manager.filtered_indices == tuple(range(count))

    def test_scan_apps_first_duplicate_wins(self, tmp_path, store):
        first = tmp_path / "a"
        second = tmp_path / "b"
        first.mkdir()
        second.mkdir()
        (first / "Notepad.lnk").touch()
        (second / "notepad.lnk").touch()
        manager = AppManager()

        scan_apps(manager, store, resolve=lambda p: (str(p), None), dirs=[first, second])

        notepads = [a for a in manager.apps if a.name.lower() == "notepad"]
        assert len(notepads) == 1
        assert notepads[0].parse_name == str(first / "Notepad.lnk")


class TestStartMenuDirs:

    def test_uses_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("APPDATA", str(tmp_path / "roaming"))
        monkeypatch.setenv("PROGRAMDATA", str(tmp_path / "pd"))

        dirs = start_menu_dirs([str(tmp_path / "extra")])

        assert dirs[0] == tmp_path / "roaming" / "Microsoft" / "Windows" / "Start Menu" / "Programs"
        assert dirs[1] == tmp_path / "pd" / "Microsoft" / "Windows" / "Start Menu" / "Programs"
        assert dirs[2] == tmp_path / "extra"


class FakeShell:
    def __init__(self, links):
        self.links = links
        self.opened = []

    def CreateShortCut(self, path):
        self.opened.append(path)
        link = self.links[Path(path).name]
        if isinstance(link, Exception):
            raise link
        return link


@pytest.fixture
def fake_com(monkeypatch):
    """Installs stand-in pythoncom / win32com.client modules and pretends to be Windows."""
    com = types.SimpleNamespace(init=0, uninit=0, dispatched=[], links={})

    pythoncom = types.ModuleType("pythoncom")
    pythoncom.com_error = type("com_error", (Exception,), {})

    def co_initialize():
        com.init += 1

    def co_uninitialize():
        com.uninit += 1

    pythoncom.CoInitialize = co_initialize
    pythoncom.CoUninitialize = co_uninitialize

    def dispatch(progid):
        shell = FakeShell(com.links)
        com.dispatched.append((progid, shell))
        return shell

    client = types.ModuleType("win32com.client")
    client.Dispatch = dispatch
    win32com = types.ModuleType("win32com")
    win32com.client = client

    monkeypatch.setitem(sys.modules, "pythoncom", pythoncom)
    monkeypatch.setitem(sys.modules, "win32com", win32com)
    monkeypatch.setitem(sys.modules, "win32com.client", client)
    monkeypatch.setattr("startdeck.fs_discovery._is_windows", lambda: True)
    com.com_error = pythoncom.com_error
    return com


def link(target, args=""):
    return types.SimpleNamespace(TargetPath=target, Arguments=args)


class TestShellResolver:

    def test_resolves_nothing_off_windows(self, tmp_path, monkeypatch):
        monkeypatch.setattr("startdeck.fs_discovery._is_windows", lambda: False)
        with shell_shortcut_resolver() as resolve:
            assert resolve(tmp_path / "x.lnk") is None

    def test_one_shell_per_scan(self, tmp_path, store, fake_com):
        menu = tmp_path / "menu"
        menu.mkdir()
        for name in ("Paint", "Notepad", "Terminal"):
            (menu / f"{name}.lnk").touch()
        fake_com.links.update({
            "Paint.lnk": link("C:\\Apps\\paint.exe"),
            "Notepad.lnk": link("C:\\Apps\\notepad.exe", " --new "),
            "Terminal.lnk": link("C:\\Apps\\wt.exe"),
        })
        manager = AppManager()

        scan_apps(manager, store, dirs=[menu])

        assert fake_com.init == 1
        assert fake_com.uninit == 1
        assert [progid for progid, _ in fake_com.dispatched] == ["WScript.Shell"]
        assert len(fake_com.dispatched[0][1].opened) == 3
        notepad = next(a for a in manager.apps if a.name == "Notepad")
        assert notepad.arguments == "--new"

    def test_bad_shortcuts_do_not_abort_scan(self, tmp_path, store, fake_com):
        menu = tmp_path / "menu"
        menu.mkdir()
        for name in ("A Broken", "B Locked", "C Paint"):
            (menu / f"{name}.lnk").touch()
        fake_com.links.update({
            "A Broken.lnk": fake_com.com_error("bad link"),
            "B Locked.lnk": PermissionError("access denied"),
            "C Paint.lnk": link("C:\\Apps\\paint.exe"),
        })
        manager = AppManager()

        scan_apps(manager, store, dirs=[menu])

        names = [a.name for a in manager.apps if not a.is_settings]
        assert names == ["C Paint"]
        assert fake_com.uninit == 1

    def test_com_released_when_scan_fails(self, fake_com):
        with pytest.raises(RuntimeError):
            with shell_shortcut_resolver():
                raise RuntimeError("scan failed")
        assert fake_com.init == fake_com.uninit == 1
