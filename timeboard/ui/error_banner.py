from PySide6.QtWidgets import QLabel
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont


class ErrorBanner(QLabel):
    """Transient message strip that hides itself after a timeout."""

    def __init__(self, timeout_ms=3000, parent=None):
        super().__init__(parent)
        self.timeout_ms = timeout_ms
        self.setAlignment(Qt.AlignCenter)
        self.setFont(QFont("Arial", 12, QFont.Bold))
        self.setStyleSheet("""
            QLabel {
                background-color: #b71c1c;
                color: #ffffff;
                border-radius: 5px;
                padding: 8px;
            }
        """)
        self.hide()

        self.timer = QTimer(self)
        self.timer.setSingleShot(True)
        self.timer.timeout.connect(self.hide)

    def show_message(self, message):
        self.setText(message)
        self.show()
        # Restart the countdown for every new message
        self.timer.start(self.timeout_ms)
