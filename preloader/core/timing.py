# preloader/core/timing.py
import time
from dataclasses import dataclass


@dataclass
class Stopwatch:
    """Wall-clock timer for a single batch."""

    _start: float = 0.0
    _stop: float = 0.0
    _running: bool = False

    def start(self) -> None:
        """Call this right before the batch starts."""
        self._start = time.perf_counter()
        self._stop = 0.0
        self._running = True

    def stop(self) -> float:
        """Freeze the timer and return the elapsed seconds."""
        if self._running:
            self._stop = time.perf_counter()
            self._running = False
        return self.elapsed

    @property
    def elapsed(self) -> float:
        """Seconds since start(). Keeps counting until stop() is called."""
        if self._running:
            return time.perf_counter() - self._start
        return max(0.0, self._stop - self._start)

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed * 1000)
