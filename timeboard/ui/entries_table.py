from PySide6.QtWidgets import (QWidget, QVBoxLayout, QTableWidget,
                               QTableWidgetItem, QHeaderView)
from PySide6.QtCore import Qt

from ..formatting import entry_row


class _DurationItem(QTableWidgetItem):
    """Sorts by the raw seconds rather than the humanized text."""

    def __lt__(self, other):
        return (self.data(Qt.UserRole) or 0) < (other.data(Qt.UserRole) or 0)


class EntriesTableWidget(QWidget):
    def __init__(self):
        super().__init__()
        self.init_ui()

    def init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # Table Setup
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels([
            "Project", "Description", "Duration", "Date"
        ])

        header = self.table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(1, QHeaderView.Stretch)  # Description stretches
        header.setSectionResizeMode(2, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(3, QHeaderView.ResizeToContents)

        self.table.verticalHeader().setVisible(False)
        self.table.setAlternatingRowColors(True)
        self.table.setSortingEnabled(True)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.setStyleSheet("""
            QTableWidget {
                background-color: #1e1e1e;
                color: #e0e0e0;
                gridline-color: #333333;
                border: none;
            }
            QHeaderView::section {
                background-color: #2d2d2d;
                color: #aaaaaa;
                padding: 6px;
                border: none;
                font-weight: bold;
            }
            QTableWidget::item {
                padding: 5px;
            }
            QTableWidget::item:selected {
                background-color: #00bcd4;
                color: black;
            }
        """)

        layout.addWidget(self.table)

    def update_data(self, entries, directory, tz=None):
        """Fill the table from TimeEntry records, naming projects via ``directory``."""
        self.table.setSortingEnabled(False)  # Disable sorting while updating
        self.table.setRowCount(len(entries))

        for row, entry in enumerate(entries):
            project, description, duration, day = entry_row(entry, directory, tz)
            self.table.setItem(row, 0, QTableWidgetItem(project))
            self.table.setItem(row, 1, QTableWidgetItem(description))

            duration_item = _DurationItem()
            duration_item.setData(Qt.UserRole, entry.duration_seconds)
            duration_item.setText(duration)
            self.table.setItem(row, 2, duration_item)

            self.table.setItem(row, 3, QTableWidgetItem(day))

        self.table.setSortingEnabled(True)  # Re-enable sorting
