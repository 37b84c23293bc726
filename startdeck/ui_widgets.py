#===============================================================================
#  Startdeck | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-12
#
#  Summary
#  -------
#  Reusable UI widgets (search box, result list). Keeps the main window smaller.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import Qt, QSize, Signal
from PySide6.QtWidgets import QLineEdit, QListWidget

from .constants import ROW_HEIGHT


class ResultList(QListWidget):
    """Single-column result list; rows carry the filtered position in UserRole."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setUniformItemSizes(True)
        self.setIconSize(QSize(ROW_HEIGHT - 10, ROW_HEIGHT - 10))
        self.setSelectionMode(QListWidget.SingleSelection)
        self.setFocusPolicy(Qt.NoFocus)

    def move_selection(self, delta: int) -> None:
        if self.count() == 0:
            return
        row = self.currentRow()
        row = 0 if row < 0 else max(0, min(self.count() - 1, row + delta))
        self.setCurrentRow(row)


class SearchBox(QLineEdit):
    """Line edit that forwards navigation keys instead of moving the cursor."""

    navigate = Signal(int)
    # (as_admin, open_location)
    activate = Signal(bool, bool)
    dismiss = Signal()

    def keyPressEvent(self, event):
        key = event.key()
        mods = event.modifiers()
        if key == Qt.Key_Down:
            self.navigate.emit(1)
            return
        if key == Qt.Key_Up:
            self.navigate.emit(-1)
            return
        if key in (Qt.Key_Return, Qt.Key_Enter):
            ctrl = bool(mods & Qt.ControlModifier)
            shift = bool(mods & Qt.ShiftModifier)
            self.activate.emit(ctrl and shift, ctrl and not shift)
            return
        if key == Qt.Key_Escape:
            self.dismiss.emit()
            return
        super().keyPressEvent(event)
