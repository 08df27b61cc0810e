"""
Stopwatch class for timing operations.
"""
import time
from typing import Optional


class Stopwatch:
    """Stopwatch for measuring elapsed CPU time."""

    def __init__(self) -> None:
        """Initialize the stopwatch."""
        self.start_time: Optional[float] = None
        self.elapsed: float = 0.0

    def start(self) -> None:
        """Start the stopwatch."""
        self.start_time = time.process_time()

    def lap(self) -> float:
        """
        Get the elapsed time since start without stopping.
        :return: Elapsed time in seconds
        """
        if self.start_time is None:
            raise ValueError("Stopwatch not started")
        return time.process_time() - self.start_time

    def stop(self) -> float:
        """
        Stop the stopwatch and remember the elapsed time.
        :return: Elapsed time in seconds
        """
        self.elapsed = self.lap()
        self.start_time = None
        return self.elapsed

