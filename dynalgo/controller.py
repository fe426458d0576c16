"""Controller that starts, pauses and stops the trading bot."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from dynalgo.bot import TradingBot
from dynalgo.events import PauseEvent, StartEvent, StopEvent, UnpauseEvent
from dynalgo.handler import EventHandler
from dynalgo.listeners import EventListener
from dynalgo.observer import DEFAULT_POLL_INTERVAL, EventObserver


class Signal:
    """A list of callbacks that are all called on :meth:`emit`."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> Callable[..., Any]:
        """Call ``slot`` on every later emission; returns the slot."""
        self._slots.append(slot)
        return slot

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Stop calling ``slot``; raises ValueError if it is not connected."""
        self._slots.remove(slot)

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``, in connection order."""
        for slot in list(self._slots):
            slot(*args)


class TradingController:
    """Owns the event machinery and the current bot, and reacts to control presses.

    The candle clock starts polling on construction unless ``start_polling`` is
    false; :meth:`close` stops it. The controller is also a context manager.
    """

    def __init__(
        self,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        clock: Callable[[], datetime] | None = None,
        start_polling: bool = True,
    ) -> None:
        self.started = Signal()
        self.paused = Signal()
        self.unpaused = Signal()
        self.stopped = Signal()

        self.event_handler = EventHandler()
        options = {} if clock is None else {"clock": clock}
        self.event_observer = EventObserver(self.event_handler, poll_interval, **options)

        self._bot: TradingBot | None = None
        self._is_paused = False
        self._is_active = False

        if start_polling:
            self.event_observer.start()

    @property
    def bot(self) -> TradingBot | None:
        """The running bot, if any."""
        return self._bot

    @property
    def is_active(self) -> bool:
        """Whether the bot has been started and not stopped."""
        return self._is_active

    @property
    def is_paused(self) -> bool:
        """Whether the active bot is paused."""
        return self._is_paused

    def register_listener(self, listener: EventListener) -> None:
        """Subscribe a listener to the controller's events."""
        self.event_handler.subscribe(listener)

    def on_start_press(self) -> None:
        """Build a fresh bot and raise a start event; ignored while active."""
        if self._is_active:
            return
        self.event_handler.reset()
        self._bot = None
        self._bot = TradingBot.create(self)
        self.event_observer.raise_event(StartEvent())
        self._is_active = True
        self.started.emit()

    def on_pause_press(self) -> None:
        """Toggle between paused and running; ignored without an active bot."""
        if self._bot is None or not self._is_active:
            return
        if self._is_paused:
            self.event_observer.raise_event(UnpauseEvent())
            self._is_paused = False
            self.unpaused.emit()
        else:
            self.event_observer.raise_event(PauseEvent())
            self._is_paused = True
            self.paused.emit()

    def on_stop_press(self) -> None:
        """Raise a stop event and drop the bot; ignored without an active bot."""
        if self._bot is None or not self._is_active:
            return
        self.event_observer.raise_event(StopEvent())
        self._bot = None
        self._is_active = False
        self._is_paused = False
        self.stopped.emit()

    def close(self) -> None:
        """Stop polling the candle clock."""
        self.event_observer.stop()

    def __enter__(self) -> TradingController:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()