"""Raises control events and polls the candle clock on a background timer."""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime, timezone

from dynalgo.candle_observer import CandleCloseObserver
from dynalgo.events import CandleCloseEvent, Event
from dynalgo.handler import EventHandler

DEFAULT_POLL_INTERVAL = 0.1
"""Seconds between two polls of the candle clock."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EventObserver:
    """Forwards events to a handler and polls for candle closes periodically.

    Polling runs on a daemon thread between :meth:`start` and :meth:`stop`;
    the observer can also be used as a context manager.
    """

    def __init__(
        self,
        handler: EventHandler | None,
        interval: float = DEFAULT_POLL_INTERVAL,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"poll interval must be positive, got {interval}")
        self.handler = handler
        self.interval = interval
        self.candle_observer = CandleCloseObserver(handler, clock)
        self._lock = threading.RLock()
        self._stopping = threading.Event()
        self._thread: threading.Thread | None = None

    def raise_event(self, event: Event) -> None:
        """Dispatch an event to the handler, if there is one."""
        if self.handler is None:
            return
        with self._lock:
            self.handler.dispatch(event)

    def poll_events(self) -> list[CandleCloseEvent]:
        """Poll the candle clock once and return the events it fired."""
        with self._lock:
            return self.candle_observer.poll()

    @property
    def running(self) -> bool:
        """Whether the polling thread is active."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start polling in the background; does nothing if already running."""
        if self.running:
            return
        self._stopping.clear()
        self._thread = threading.Thread(target=self._run, name="event-observer", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop polling and wait for the background thread to finish."""
        thread = self._thread
        if thread is None:
            return
        self._stopping.set()
        if thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def _run(self) -> None:
        while not self._stopping.wait(self.interval):
            self.poll_events()

    def __enter__(self) -> EventObserver:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()