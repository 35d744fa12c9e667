from __future__ import annotations

from typing import Optional
from PySide6 import QtWidgets


class LabeledSpin(QtWidgets.QWidget):
    def __init__(self, label: str, suffix: str = "", tooltip: Optional[str] = None, decimals: int = 8, parent=None):
        super().__init__(parent)
        layout = QtWidgets.QHBoxLayout(self)
        self.lbl = QtWidgets.QLabel(label)
        self.spin = QtWidgets.QDoubleSpinBox()
        self.spin.setDecimals(decimals)
        self.spin.setRange(-1e9, 1e9)
        if suffix and suffix != "-":
            self.spin.setSuffix(f" {suffix}")
        if tooltip:
            self.lbl.setText(f"{label} ⓘ")
            self.lbl.setToolTip(tooltip)
            self.spin.setToolTip(tooltip)
        layout.addWidget(self.lbl)
        layout.addWidget(self.spin)
        self.valueChanged = self.spin.valueChanged

    def value(self) -> float:
        return float(self.spin.value())

    def setValue(self, v: float):
        self.spin.setValue(v)
