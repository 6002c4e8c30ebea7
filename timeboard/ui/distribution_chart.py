"""
Distribution Chart Widget - Displays hours per time bucket using matplotlib
"""
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PySide6.QtGui import QFont
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from .pie_chart import NO_DATA_TEXT


class DistributionChartWidget(QWidget):
    """Bar chart of aggregated hours for one reporting period."""

    def __init__(self, title, parent=None):
        super().__init__(parent)
        self.buckets = []
        self.setup_ui(title)

    def setup_ui(self, title):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self.title_label = QLabel(title)
        self.title_label.setFont(QFont("Arial", 14, QFont.Bold))
        self.title_label.setStyleSheet("color: white;")
        layout.addWidget(self.title_label)

        self.figure = Figure(figsize=(6, 3), facecolor='#1e1e1e')
        self.canvas = FigureCanvas(self.figure)
        self.canvas.setStyleSheet("background-color: #1e1e1e;")
        layout.addWidget(self.canvas)

    def set_title(self, title):
        self.title_label.setText(title)

    def update_data(self, buckets):
        """Redraw from a list of Bucket(label, hours)."""
        self.buckets = list(buckets or [])

        # Clear figure
        self.figure.clear()
        ax = self.figure.add_subplot(111)
        ax.set_facecolor('#1e1e1e')

        if not any(hours > 0 for _, hours in self.buckets):
            ax.text(0.5, 0.5, NO_DATA_TEXT,
                    ha='center', va='center', fontsize=14, color='#888888')
            ax.axis('off')
            self.canvas.draw_idle()
            return

        labels = [label for label, _ in self.buckets]
        hours = [value for _, value in self.buckets]
        positions = range(len(labels))

        ax.bar(positions, hours, color='#00e676', width=0.7)
        ax.set_xticks(list(positions))
        ax.set_xticklabels(labels, rotation=45 if len(labels) > 12 else 0,
                           ha='right' if len(labels) > 12 else 'center', fontsize=8)

        # Style axes
        ax.set_ylabel('Hours', color='#aaaaaa', fontsize=10)
        ax.tick_params(colors='#aaaaaa')
        ax.spines['bottom'].set_color('#3d3d3d')
        ax.spines['left'].set_color('#3d3d3d')
        ax.spines['top'].set_visible(False)
        ax.spines['right'].set_visible(False)
        ax.grid(True, axis='y', alpha=0.2, color='#ffffff')

        self.figure.tight_layout()
        self.canvas.draw_idle()
