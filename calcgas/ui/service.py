from __future__ import annotations

from PySide6 import QtCore


class Debounce(QtCore.QObject):
    triggered = QtCore.Signal()
    def __init__(self, ms: int = 400, parent=None):
        super().__init__(parent)
        self.timer = QtCore.QTimer(self)
        self.timer.setInterval(ms)
        self.timer.setSingleShot(True)
        self.timer.timeout.connect(self.triggered)

    def pulse(self):
        self.timer.start()

    def cancel(self):
        self.timer.stop()
