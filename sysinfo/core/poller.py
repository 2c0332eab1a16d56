"""Continuous CPU polling driven by a cancellation event."""
import enum
import logging
import threading
from typing import Optional

from ..collectors.system_collector import SystemCollector
from ..config.config import Config
from ..ui.display_manager import DisplayManager
from .errors import MetricsQueryError

logger = logging.getLogger(__name__)


class PollerState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class CpuPoller:
    """Repeats a non-blocking CPU query on a fixed interval until stopped.

    ``stop`` is the only state shared with the caller. It is set once, usually
    from a signal handler, and checked by the worker at every tick boundary.
    """

    def __init__(self, config: Config, collector: SystemCollector, display: DisplayManager):
        """Initialize the poller in the idle state."""
        self.config = config
        self.collector = collector
        self.display = display
        self.state = PollerState.IDLE
        self.ticks = 0
        self._in_flight = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    def run(self, stop: threading.Event):
        """Poll until ``stop`` is set; blocks the calling thread."""
        if self.state is not PollerState.IDLE:
            raise RuntimeError(f"Poller cannot start from state {self.state.value}")

        self.state = PollerState.RUNNING
        logger.debug("CPU poller running (interval=%ss)", self.config.poll_interval)
        self.display.show_message("Press Ctrl+C to exit...")

        # First reading uses a short window; later ticks measure since the previous one
        self._tick(stop, self.config.warmup_window)

        self._thread = threading.Thread(target=self._tick_loop, args=(stop,), daemon=True)
        self._thread.start()
        try:
            # Timed waits keep the main thread responsive to signal handlers
            wake = min(0.2, self.config.poll_interval)
            while not stop.wait(timeout=wake):
                pass
        finally:
            stop.set()
            self._thread.join()
            self.state = PollerState.STOPPED
            logger.debug("CPU poller stopped after %d ticks", self.ticks)

    def _tick_loop(self, stop: threading.Event):
        """Worker loop; ticks are never queued."""
        while not stop.wait(self.config.poll_interval):
            self._tick(stop, 0.0)

    def _tick(self, stop: threading.Event, window: float):
        """Perform one query and display."""
        if not self._in_flight.acquire(blocking=False):
            logger.debug("Skipping tick, previous query still in flight")
            return
        try:
            try:
                sample = self.collector.sample_cpu(window, per_core=False)
            except MetricsQueryError as e:
                logger.warning("%s", e)
                if not stop.is_set():
                    self.display.show_error(e)
                return
            self.ticks += 1
            if stop.is_set():
                return
            self.display.show_cpu_line(sample)
        finally:
            self._in_flight.release()
