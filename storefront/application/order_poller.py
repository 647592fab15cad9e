"""
Background order status poller.
"""
import logging
import threading
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class OrderStatusPoller:
    """
    Re-fetch order data on a fixed interval until stopped.

    ``fetch`` is called once per tick and its result handed to ``on_update``.
    A failing tick is logged and skipped; the next tick retries.
    """

    def __init__(
        self,
        fetch: Callable[[], Any],
        on_update: Callable[[Any], None],
        interval: float = 30.0,
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.fetch = fetch
        self.on_update = on_update
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name='order-status-poller', daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Cancel the timer and wait for the current tick to finish."""
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None

    def poll_once(self) -> bool:
        """Run a single tick. Returns False if the fetch or update failed."""
        try:
            result = self.fetch()
            self.on_update(result)
        except Exception as e:
            # Poll failures never surface to the view
            logger.warning(f"Order status poll failed, retrying next tick: {e}")
            return False
        return True

    def _run(self) -> None:
        while not self._stop_event.is_set():
            self.poll_once()
            if self._stop_event.wait(self.interval):
                break
