#===============================================================================
#  Startdeck | startdeck/main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-12
#
#  Summary
#  -------
#  Metro style search window:
#    - Search box filters the index on every keystroke
#    - "= result" label for calculator expressions
#    - Enter launches, Ctrl+Enter opens location, Ctrl+Shift+Enter runs as admin
#    - Rescan button repopulates from the Start Menu
#===============================================================================

from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QSize
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .constants import (
    APP_TITLE,
    METRO_ACCENT,
    METRO_BG,
    METRO_BORDER,
    METRO_PANEL,
    ROW_HEIGHT,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .controller import LauncherController
from .ui_widgets import ResultList, SearchBox

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, controller: LauncherController):
        super().__init__()
        self.controller = controller
        self.setWindowTitle(APP_TITLE)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.setWindowFlag(Qt.WindowStaysOnTopHint, True)

        self.setStyleSheet(f"""
        QMainWindow {{ background: {METRO_BG}; }}
        QLabel {{ color: white; font-family: "Segoe UI"; }}
        QLineEdit {{
            font-family: "Segoe UI"; font-size: 16px; color: white;
            background: {METRO_PANEL}; border: 1px solid {METRO_BORDER}; padding: 8px;
        }}
        QListWidget {{
            font-family: "Segoe UI"; color: white;
            background: {METRO_BG}; border: none;
        }}
        QListWidget::item:selected {{ background: {METRO_ACCENT}; }}
        QPushButton {{
            font-family: "Segoe UI"; color: white;
            background: {METRO_PANEL}; border: 1px solid {METRO_BORDER}; padding: 6px 10px;
        }}
        QPushButton:hover {{ background: #222; }}
        """)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(8)

        header = QHBoxLayout()
        self.search = SearchBox()
        self.search.setPlaceholderText("Type to search apps and settings…")
        self.search.textChanged.connect(self.on_search_changed)
        self.search.navigate.connect(self.on_navigate)
        self.search.activate.connect(self.launch_selected)
        self.search.dismiss.connect(self.hide)
        header.addWidget(self.search, 1)

        self.btn_rescan = QPushButton("Rescan")
        self.btn_rescan.clicked.connect(self.rescan)
        header.addWidget(self.btn_rescan)
        layout.addLayout(header)

        self.calc_label = QLabel()
        self.calc_label.setVisible(False)
        layout.addWidget(self.calc_label)

        self.results = ResultList()
        self.results.itemDoubleClicked.connect(lambda *_: self.launch_selected(False, False))
        layout.addWidget(self.results, 1)

        self.refresh_list()

    # ----------------------------
    # Search
    # ----------------------------
    def on_search_changed(self, text: str):
        answer = self.controller.update_filter(text)
        self.calc_label.setText(answer or "")
        self.calc_label.setVisible(bool(answer))
        self.refresh_list()

    def on_navigate(self, delta: int):
        self.results.move_selection(delta)

    def refresh_list(self):
        self.results.clear()
        for pos, entry in self.controller.visible_entries():
            label = entry.name
            if entry.is_settings:
                label = f"{entry.name}    ⚙"
            item = QListWidgetItem(label)
            item.setData(Qt.UserRole, pos)
            item.setToolTip(entry.parse_name)
            item.setSizeHint(QSize(0, ROW_HEIGHT))
            self.results.addItem(item)
        if self.results.count():
            self.results.setCurrentRow(0)

    # ----------------------------
    # Launch behavior
    # ----------------------------
    def launch_selected(self, as_admin: bool, open_location: bool):
        item = self.results.currentItem()
        if item is None:
            return
        pos = item.data(Qt.UserRole)

        self.hide()
        ok = self.controller.launch(pos, as_admin=as_admin, open_location=open_location)
        self.search.clear()
        self.controller.update_filter("")
        self.refresh_list()
        if not ok:
            QMessageBox.critical(self, "Launch failed", "Could not launch the selected entry. See the log for details.")

    def rescan(self):
        self.btn_rescan.setEnabled(False)
        try:
            count = self.controller.rescan()
        finally:
            self.btn_rescan.setEnabled(True)
        logger.info("Rescan finished with %d entries", count)
        self.on_search_changed(self.search.text())

    def showEvent(self, event):
        super().showEvent(event)
        self.search.setFocus()
        self.search.selectAll()
