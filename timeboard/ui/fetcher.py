"""
Background fetching - runs Clockify requests off the GUI thread and hands the
results back through Qt signals (queued onto the GUI thread).
"""
import logging
import threading

from PySide6.QtCore import QObject, Signal

from ..clockify import ClockifyError
from ..projects import ProjectDirectory

logger = logging.getLogger(__name__)


class Fetcher(QObject):
    entries_loaded = Signal(str, int, object)   # period key, token, list[TimeEntry]
    entries_failed = Signal(str, int, str)      # period key, token, message
    directory_loaded = Signal(int, object)      # token, ProjectDirectory

    def __init__(self, client, credentials, parent=None):
        super().__init__(parent)
        self.client = client
        self.credentials = credentials

    def _spawn(self, target, *args):
        thread = threading.Thread(target=target, args=args, daemon=True)
        thread.start()
        return thread

    def fetch_entries(self, period_range, token):
        return self._spawn(self._run_entries, period_range, token)

    def fetch_directory(self, token):
        return self._spawn(self._run_directory, token)

    def _run_entries(self, period_range, token):
        key = period_range.period.value
        try:
            entries = self.client.get_time_entries(
                self.credentials.workspace_id,
                self.credentials.user_id,
                period_range.start,
                period_range.end,
            )
        except ClockifyError as e:
            logger.error("Error fetching time entries for %s: %s", key, e)
            self.entries_failed.emit(key, token, str(e))
            return
        self.entries_loaded.emit(key, token, entries)

    def _run_directory(self, token):
        directory = ProjectDirectory.load(self.client, self.credentials.workspace_id)
        self.directory_loaded.emit(token, directory)
