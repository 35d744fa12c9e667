from __future__ import annotations

from PySide6 import QtWidgets

from .state import UIState
from .tabs.calculator_tab import CalculatorTab


class App(QtWidgets.QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Calculadora de Gas")
        self.state = UIState()
        self.setCentralWidget(CalculatorTab(self.state))
