from PySide6.QtWidgets import QWidget, QVBoxLayout
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from ..aggregator import collapse_small_slices

NO_DATA_TEXT = "No data available"

# Color palette for pie slices (visually distinct, pleasant colors)
PIE_COLORS = [
    "#00e676",  # Green
    "#42a5f5",  # Blue
    "#ffa726",  # Orange
    "#ab47bc",  # Purple
    "#ef5350",  # Red
    "#26c6da",  # Cyan
    "#ffee58",  # Yellow
    "#8d6e63",  # Brown
]


class ProjectPieChartWidget(QWidget):
    """Donut chart of hours per project, backed by matplotlib."""

    def __init__(self, max_slices=6, parent=None):
        super().__init__(parent)
        self.max_slices = max_slices
        self.data = []  # list of Bucket(project name, hours)
        self.fig = Figure(figsize=(4, 4), facecolor='#1e1e1e')
        self.canvas = FigureCanvas(self.fig)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.canvas)
        self.setMinimumSize(360, 360)

    def update_data(self, project_hours):
        self.data = collapse_small_slices(project_hours or [], self.max_slices)
        self._draw_chart()

    def _draw_chart(self):
        # Replace the previous chart wholesale
        self.fig.clear()
        ax = self.fig.add_subplot(111)
        ax.set_facecolor('#1e1e1e')

        if not self.data:
            ax.text(0.5, 0.5, NO_DATA_TEXT, color='#888888', ha='center', va='center', fontsize=12)
            ax.axis('off')
            self.canvas.draw_idle()
            return

        labels = [label for label, _ in self.data]
        values = [hours for _, hours in self.data]
        colors = [PIE_COLORS[i % len(PIE_COLORS)] for i in range(len(values))]

        wedges, _texts, _autotexts = ax.pie(
            values,
            labels=None,
            colors=colors,
            startangle=90,
            autopct=lambda pct: f'{pct:.1f}%' if pct > 2 else '',
            wedgeprops={'width': 0.4, 'edgecolor': '#1e1e1e', 'linewidth': 1.5},
            counterclock=False,
            pctdistance=0.78,
            textprops={'color': 'white', 'fontsize': 8, 'fontweight': 'bold'},
        )

        ax.text(0, 0, f"{sum(values):.2f} h", ha='center', va='center', color='white',
                fontsize=13, fontweight='bold')

        ax.legend(wedges, labels, loc='center left', bbox_to_anchor=(0.92, 0.5),
                  facecolor='#2b2b2b', edgecolor='#3d3d3d', labelcolor='#e0e0e0', fontsize=9)
        ax.axis('equal')
        self.fig.subplots_adjust(left=0.02, right=0.72, top=0.95, bottom=0.05)
        self.canvas.draw_idle()
