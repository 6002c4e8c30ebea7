import sys
import signal
import os
import faulthandler
import logging
from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QTimer
from timeboard.clockify import ClockifyClient
from timeboard.config import Config, Credentials
from timeboard.ui.main_window import MainWindow

logger = logging.getLogger("timeboard")


def main():
    logging.basicConfig(
        level=os.environ.get("TIMEBOARD_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Crash/exception diagnostics: dump tracebacks on fatal errors and uncaught exceptions
    faulthandler.enable(all_threads=True)

    def log_exception(exc_type, exc_value, exc_tb):
        logger.critical("Unhandled exception", exc_info=(exc_type, exc_value, exc_tb))

    sys.excepthook = log_exception

    # Handle Ctrl+C
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    config = Config()
    credentials = Credentials.from_env()
    missing = credentials.missing()
    if missing:
        logger.warning("Missing environment values: %s - requests will fail", ", ".join(missing))

    client = ClockifyClient(
        credentials.api_key,
        base_url=config.api_base_url,
        timeout=config.request_timeout,
        page_size=config.page_size,
    )

    app = QApplication(sys.argv)

    window = MainWindow(config, credentials, client)
    window.show()

    # Allow python to handle signals by letting the event loop wake up periodically
    timer = QTimer()
    timer.start(500)
    timer.timeout.connect(lambda: None)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
