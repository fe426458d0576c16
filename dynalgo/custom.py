"""The strategy and API the application runs by default."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from dynalgo.api import DEFAULT_TIMEOUT, TradingAPI, Transport
from dynalgo.events import (
    Event,
    EventType,
    PauseEvent,
    StartEvent,
    StopEvent,
    UnpauseEvent,
)
from dynalgo.strategy import TradingStrategy

if TYPE_CHECKING:
    from dynalgo.bot import TradingBot


class CustomTradingAPI(TradingAPI):
    """The venue API used by :class:`CustomTradingStrategy`."""

    def __init__(self, transport: Transport | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        super().__init__(transport, timeout)


class CustomTradingStrategy(TradingStrategy):
    """A strategy that listens to start and stop events and records what it receives.

    Every event delivered to one of its control hooks is appended to
    :attr:`received`, together with the moment it arrived in :attr:`received_at`.
    """

    def __init__(self, api: TradingAPI | None, bot: TradingBot) -> None:
        self.received: list[Event] = []
        self.received_at: list[datetime] = []
        super().__init__(api, bot)
        bot.listen_to(self, [EventType.START])

    def _record(self, event: Event) -> None:
        self.received.append(event)
        self.received_at.append(datetime.now())

    def on_start(self, event: StartEvent) -> None:
        """Record the start event."""
        self._record(event)

    def on_pause(self, event: PauseEvent) -> None:
        """Record the pause event."""
        self._record(event)

    def on_unpause(self, event: UnpauseEvent) -> None:
        """Record the unpause event."""
        self._record(event)

    def on_stop(self, event: StopEvent) -> None:
        """Record the stop event."""
        self._record(event)