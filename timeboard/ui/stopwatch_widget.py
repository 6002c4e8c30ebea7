from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton
from PySide6.QtCore import QTimer
from PySide6.QtGui import QFont

from ..stopwatch import Stopwatch


class StopwatchWidget(QFrame):
    """Start/stop stopwatch with an HH:MM:SS display."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.stopwatch = Stopwatch()
        self.setStyleSheet("""
            QFrame {
                background-color: #2b2b2b;
                border-radius: 10px;
            }
            QPushButton {
                background-color: #3d3d3d;
                color: #aaaaaa;
                border: none;
                border-radius: 5px;
                padding: 8px 16px;
                font-size: 13px;
            }
            QPushButton:hover { background-color: #4a4a4a; }
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(15, 10, 15, 10)

        self.display = QLabel(self.stopwatch.display())
        self.display.setFont(QFont("Consolas", 22, QFont.Bold))
        self.display.setStyleSheet("color: #00e676;")
        layout.addWidget(self.display)
        layout.addStretch()

        self.start_button = QPushButton("Start")
        self.start_button.clicked.connect(self.start)
        layout.addWidget(self.start_button)

        self.stop_button = QPushButton("Stop")
        self.stop_button.clicked.connect(self.stop)
        layout.addWidget(self.stop_button)

        self.timer = QTimer(self)
        self.timer.timeout.connect(self.on_tick)

    def start(self):
        if self.stopwatch.start():
            self.timer.start(1000)
        self._refresh()

    def stop(self):
        if self.stopwatch.stop():
            self.timer.stop()
        self._refresh()

    def on_tick(self):
        self.stopwatch.tick()
        self._refresh()

    def _refresh(self):
        self.display.setText(self.stopwatch.display())
