"""Base class of trading strategies: one overridable hook per event type."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dynalgo.events import (
    CandleCloseEvent,
    Event,
    EventType,
    PauseEvent,
    StartEvent,
    StopEvent,
    UnpauseEvent,
)

if TYPE_CHECKING:
    from dynalgo.api import TradingAPI
    from dynalgo.bot import TradingBot

HANDLER_NAMES: dict[EventType, str] = {
    event_type: f"on_{event_type.name.lower()}" for event_type in EventType
}
"""Name of the strategy method that handles each event type."""


class TradingStrategy:
    """A strategy reacts to events; by default a hook only records the event.

    On construction the strategy asks its bot to deliver stop events to it.
    """

    def __init__(self, api: TradingAPI | None, bot: TradingBot) -> None:
        self.api = api
        self.bot = bot
        self.last_event: Event | None = None
        bot.listen_to(self, EventType.STOP)

    def _received(self, event: Event) -> None:
        self.last_event = event

    def on_start(self, event: StartEvent) -> None:
        """Called when the bot starts."""
        self._received(event)

    def on_pause(self, event: PauseEvent) -> None:
        """Called when the bot is paused."""
        self._received(event)

    def on_unpause(self, event: UnpauseEvent) -> None:
        """Called when the bot resumes."""
        self._received(event)

    def on_stop(self, event: StopEvent) -> None:
        """Called when the bot stops."""
        self._received(event)

    def on_m1_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a one-minute candle closes."""
        self._received(event)

    def on_m5_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a five-minute candle closes."""
        self._received(event)

    def on_m15_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a fifteen-minute candle closes."""
        self._received(event)

    def on_m30_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a thirty-minute candle closes."""
        self._received(event)

    def on_h1_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a one-hour candle closes."""
        self._received(event)

    def on_h2_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a two-hour candle closes."""
        self._received(event)

    def on_h4_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a four-hour candle closes."""
        self._received(event)

    def on_h8_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when an eight-hour candle closes."""
        self._received(event)

    def on_h12_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a twelve-hour candle closes."""
        self._received(event)

    def on_d1_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a daily candle closes."""
        self._received(event)

    def on_w1_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a weekly candle closes."""
        self._received(event)

    def on_mn1_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a monthly candle closes."""
        self._received(event)

    def on_mn4_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a four-month candle closes."""
        self._received(event)

    def on_mn6_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a six-month candle closes."""
        self._received(event)

    def on_y1_candle_close(self, event: CandleCloseEvent) -> None:
        """Called when a yearly candle closes."""
        self._received(event)