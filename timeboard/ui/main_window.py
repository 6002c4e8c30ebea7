import datetime
import logging

from PySide6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                               QLabel, QTabWidget, QGridLayout, QPushButton,
                               QDateEdit)
from PySide6.QtCore import Signal, QDate
from PySide6.QtGui import QFont

from ..aggregator import aggregate_by_project
from ..periods import Period
from ..session import PROJECTS, DashboardSession
from .distribution_chart import DistributionChartWidget
from .entries_table import EntriesTableWidget
from .error_banner import ErrorBanner
from .fetcher import Fetcher
from .pie_chart import ProjectPieChartWidget
from .stopwatch_widget import StopwatchWidget

logger = logging.getLogger(__name__)


class TimeRangeSelector(QWidget):
    """Button bar for selecting the reporting period."""
    range_changed = Signal(str)  # Emits: 'today', '3days', 'week', 'month', 'year'

    def __init__(self, current=Period.WEEK):
        super().__init__()
        self.current_range = current.value

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(5)

        self.buttons = {}
        ranges = [
            (Period.TODAY, 'Today'),
            (Period.LAST_3_DAYS, '3 Days'),
            (Period.WEEK, 'Week'),
            (Period.MONTH, 'Month'),
            (Period.YEAR, 'Year'),
        ]

        for period, label in ranges:
            btn = QPushButton(label)
            btn.setCheckable(True)
            btn.setMinimumWidth(80)
            btn.clicked.connect(lambda checked, k=period.value: self.on_range_selected(k))
            self.buttons[period.value] = btn
            layout.addWidget(btn)

        self.buttons[self.current_range].setChecked(True)

        self.setStyleSheet("""
            QPushButton {
                background-color: #3d3d3d;
                color: #aaaaaa;
                border: none;
                border-radius: 5px;
                padding: 8px 16px;
                font-size: 13px;
            }
            QPushButton:hover {
                background-color: #4a4a4a;
            }
            QPushButton:checked {
                background-color: #00e676;
                color: #1e1e1e;
                font-weight: bold;
            }
        """)

    def on_range_selected(self, key):
        for k, btn in self.buttons.items():
            btn.setChecked(k == key)
        self.current_range = key
        self.range_changed.emit(key)


class MainWindow(QMainWindow):
    def __init__(self, config, credentials, client):
        super().__init__()
        self.config = config
        self.session = DashboardSession(
            selected_period=Period.from_key(config.default_period, default=Period.WEEK))

        self.fetcher = Fetcher(client, credentials, self)
        self.fetcher.entries_loaded.connect(self.on_entries_loaded)
        self.fetcher.entries_failed.connect(self.on_entries_failed)
        self.fetcher.directory_loaded.connect(self.on_directory_loaded)

        self.setWindowTitle("TimeBoard")
        self.resize(1200, 800)

        # Dark Theme
        self.setStyleSheet("""
            QMainWindow { background-color: #1e1e1e; }
            QTabWidget::pane { border: 0; }
            QTabBar::tab {
                background: #2b2b2b;
                color: #aaaaaa;
                padding: 10px 20px;
                margin-right: 2px;
                border-top-left-radius: 5px;
                border-top-right-radius: 5px;
            }
            QTabBar::tab:selected {
                background: #3d3d3d;
                color: #ffffff;
            }
            QDateEdit {
                background-color: #3d3d3d;
                color: #ffffff;
                border: none;
                border-radius: 5px;
                padding: 6px;
            }
        """)

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.layout = QVBoxLayout(self.central_widget)

        self.error_banner = ErrorBanner(config.error_banner_ms)
        self.layout.addWidget(self.error_banner)

        # Tabs
        self.tabs = QTabWidget()
        self.layout.addWidget(self.tabs)

        self.dashboard_tab = QWidget()
        self.setup_dashboard()
        self.tabs.addTab(self.dashboard_tab, "Dashboard")

        self.distribution_tab = QWidget()
        self.setup_distribution()
        self.tabs.addTab(self.distribution_tab, "Distribution")

        self.entries_tab = QWidget()
        self.setup_entries()
        self.tabs.addTab(self.entries_tab, "Entries")

        # Initial load
        self.load_directory()
        self.refresh()

    def setup_dashboard(self):
        layout = QVBoxLayout(self.dashboard_tab)
        layout.setSpacing(20)
        layout.setContentsMargins(30, 30, 30, 30)

        # Header with Title, Period Selector and Date Picker
        header = QHBoxLayout()

        self.dashboard_title = QLabel(self.session.selected_period.title)
        self.dashboard_title.setFont(QFont("Arial", 28, QFont.Bold))
        self.dashboard_title.setStyleSheet("color: white;")
        header.addWidget(self.dashboard_title)

        header.addStretch()

        self.time_selector = TimeRangeSelector(self.session.selected_period)
        self.time_selector.range_changed.connect(self.on_time_range_changed)
        header.addWidget(self.time_selector)

        self.date_picker = QDateEdit(QDate.currentDate())
        self.date_picker.setCalendarPopup(True)
        self.date_picker.setDisplayFormat("yyyy-MM-dd")
        self.date_picker.dateChanged.connect(self.on_date_changed)
        header.addWidget(self.date_picker)

        layout.addLayout(header)

        self.stopwatch = StopwatchWidget()
        layout.addWidget(self.stopwatch)

        charts = QHBoxLayout()
        charts.setSpacing(20)
        self.project_chart = ProjectPieChartWidget(self.config.pie_max_slices)
        charts.addWidget(self.project_chart, 1)
        self.selected_chart = DistributionChartWidget(self.session.selected_period.title)
        charts.addWidget(self.selected_chart, 2)
        layout.addLayout(charts, 1)

    def setup_distribution(self):
        layout = QGridLayout(self.distribution_tab)
        layout.setSpacing(20)
        layout.setContentsMargins(20, 20, 20, 20)

        self.distribution_charts = {}
        for index, period in enumerate(Period):
            chart = DistributionChartWidget(period.title)
            self.distribution_charts[period] = chart
            layout.addWidget(chart, index // 2, index % 2)

    def setup_entries(self):
        layout = QVBoxLayout(self.entries_tab)
        layout.setContentsMargins(20, 20, 20, 20)

        self.entries_table = EntriesTableWidget()
        layout.addWidget(self.entries_table)

    def load_directory(self):
        token = self.session.sequencer.issue(PROJECTS)
        self.fetcher.fetch_directory(token)

    def refresh(self):
        """Re-fetch every reporting period around the selected date."""
        for period, period_range, token in self.session.plan_refresh():
            logger.debug("Requesting %s (%s - %s), token %d",
                         period.value, period_range.start, period_range.end, token)
            self.fetcher.fetch_entries(period_range, token)

    def on_time_range_changed(self, range_key):
        period = Period.from_key(range_key)
        self.session.select_period(period)
        self.config.default_period = period.value
        self.dashboard_title.setText(period.title)
        self.selected_chart.set_title(period.title)
        # Show what is cached for this date until the new response arrives
        self.selected_chart.update_data(self.session.buckets_for(period))
        self.render_selected()
        self.refresh()

    def on_date_changed(self, qdate):
        self.session.select_date(datetime.date(qdate.year(), qdate.month(), qdate.day()))
        self.render_all()
        self.refresh()

    def on_entries_loaded(self, period_key, token, entries):
        period = Period.from_key(period_key)
        if not self.session.store_entries(period, token, entries):
            logger.debug("Dropping stale response for %s (token %d)", period_key, token)
            return
        self.render_period(period)

    def on_entries_failed(self, period_key, token, message):
        period = Period.from_key(period_key)
        if not self.session.discard_entries(period, token):
            return
        self.render_period(period)
        self.error_banner.show_message(f"Could not load {period.title.lower()} entries: {message}")

    def on_directory_loaded(self, token, directory):
        if not self.session.sequencer.is_current(PROJECTS, token):
            return
        self.session.directory = directory
        if not directory.available:
            self.error_banner.show_message("Project names unavailable - showing entries without projects")
        self.render_selected()

    def render_all(self):
        for period in Period:
            self.render_period(period)

    def render_period(self, period):
        """Redraw every view fed by ``period``'s cached entries."""
        buckets = self.session.buckets_for(period)
        self.distribution_charts[period].update_data(buckets)
        if period is self.session.selected_period:
            self.selected_chart.update_data(buckets)
            self.render_selected()

    def render_selected(self):
        """Redraw the table and the project chart for the selected period."""
        entries = self.session.entries_for(self.session.selected_period)
        self.entries_table.update_data(entries, self.session.directory, self.session.tz)
        self.project_chart.update_data(aggregate_by_project(entries, self.session.directory))
