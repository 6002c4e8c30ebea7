"""Manual stopwatch, independent of any tracked data."""

import enum

from .formatting import format_clock


class StopwatchState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"


class Stopwatch:
    """Elapsed-seconds counter driven by an external one-second tick.

    There is no pause: stopping always resets the elapsed time.
    """

    def __init__(self):
        self.state = StopwatchState.IDLE
        self.elapsed_seconds = 0

    @property
    def running(self) -> bool:
        return self.state is StopwatchState.RUNNING

    def start(self) -> bool:
        """Returns True if the stopwatch was started by this call."""
        if self.running:
            return False
        self.state = StopwatchState.RUNNING
        return True

    def stop(self) -> bool:
        """Returns True if the stopwatch was stopped by this call."""
        if not self.running:
            return False
        self.state = StopwatchState.IDLE
        self.elapsed_seconds = 0
        return True

    def tick(self):
        if self.running:
            self.elapsed_seconds += 1

    def display(self) -> str:
        return format_clock(self.elapsed_seconds)
