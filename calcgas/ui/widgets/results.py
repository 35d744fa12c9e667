from __future__ import annotations

import math
from typing import Optional

from PySide6 import QtWidgets, QtGui
from ..theme import COLORS


def fmt(v: Optional[float], digits: int = 3) -> str:
    if v is None or not math.isfinite(v):
        return "-"
    return f"{v:.{digits}f}"


class MetricCard(QtWidgets.QFrame):
    def __init__(self, title: str, unit: str = "", digits: int = 3, parent=None):
        super().__init__(parent)
        self.setFrameShape(QtWidgets.QFrame.StyledPanel)
        self.digits = digits
        layout = QtWidgets.QVBoxLayout(self)
        self.title = QtWidgets.QLabel(title)
        self.value = QtWidgets.QLabel("—")
        self.unit = QtWidgets.QLabel(unit)
        self.badge = QtWidgets.QLabel("")
        font = self.value.font()
        font.setPointSize(font.pointSize() + 6)
        font.setBold(True)
        self.value.setFont(font)
        layout.addWidget(self.title)
        layout.addWidget(self.value)
        layout.addWidget(self.unit)
        layout.addWidget(self.badge)
        self.setObjectName("MetricCard")

    def set_value(self, v: Optional[float]):
        """Set value; a zero result gets a WARN badge (degenerate inputs)."""
        self.value.setText(fmt(v, self.digits))
        self._apply_badge("warn" if not v else "ok")

    def clear(self):
        self.value.setText("—")
        self.badge.setText("")

    def _apply_badge(self, level: str):
        txt = {"ok": "OK", "warn": "WARN"}.get(level, "")
        self.badge.setText(txt)
        color = COLORS.get(level, COLORS["neutral"])
        pal = self.badge.palette()
        pal.setColor(QtGui.QPalette.WindowText, QtGui.QColor(color))
        self.badge.setPalette(pal)


class AuditTag(QtWidgets.QFrame):
    """Label / monospace value pair for the intermediate audit grid."""

    def __init__(self, label: str, parent=None):
        super().__init__(parent)
        self.setFrameShape(QtWidgets.QFrame.StyledPanel)
        layout = QtWidgets.QHBoxLayout(self)
        self.label = QtWidgets.QLabel(label)
        self.value = QtWidgets.QLabel("-")
        self.value.setFont(QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.FixedFont))
        layout.addWidget(self.label)
        layout.addStretch(1)
        layout.addWidget(self.value)

    def set_value(self, v: Optional[float]):
        self.value.setText(fmt(v, 5))
