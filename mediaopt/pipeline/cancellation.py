import signal
import threading
import logging
from typing import Dict, Iterable

class CancellationToken:
    """Process-wide cancel flag, set asynchronously and polled by the loop.

    Once set it stays set; there is no reset.
    """

    def __init__(self):
        self._event = threading.Event()
        self._previous: Dict[int, object] = {}
        self.logger = logging.getLogger(__name__)

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self):
        if not self._event.is_set():
            self.logger.info("Cancellation requested")
        self._event.set()

    def _on_signal(self, signum, frame):
        self.cancel()

    def install(self, signals: Iterable[int] = (signal.SIGINT, signal.SIGTERM)):
        """Routes the given signals to cancel(). Must be called from the main thread."""
        for signum in signals:
            self._previous[signum] = signal.signal(signum, self._on_signal)

    def restore(self):
        for signum, handler in self._previous.items():
            signal.signal(signum, handler)
        self._previous.clear()
