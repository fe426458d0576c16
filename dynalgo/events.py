"""Event types raised by the trading controller and the candle clock."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum

from dynalgo.model import Candle, TimeFrame


class EventType(IntEnum):
    """Every kind of event a strategy can listen to."""

    START = 0
    PAUSE = 1
    UNPAUSE = 2
    STOP = 3
    M1_CANDLE_CLOSE = 4
    M5_CANDLE_CLOSE = 5
    M15_CANDLE_CLOSE = 6
    M30_CANDLE_CLOSE = 7
    H1_CANDLE_CLOSE = 8
    H2_CANDLE_CLOSE = 9
    H4_CANDLE_CLOSE = 10
    H8_CANDLE_CLOSE = 11
    H12_CANDLE_CLOSE = 12
    D1_CANDLE_CLOSE = 13
    W1_CANDLE_CLOSE = 14
    MN1_CANDLE_CLOSE = 15
    MN4_CANDLE_CLOSE = 16
    MN6_CANDLE_CLOSE = 17
    Y1_CANDLE_CLOSE = 18


_CANDLE_EVENT_TYPES: dict[TimeFrame, EventType] = {
    TimeFrame.M1: EventType.M1_CANDLE_CLOSE,
    TimeFrame.M5: EventType.M5_CANDLE_CLOSE,
    TimeFrame.M15: EventType.M15_CANDLE_CLOSE,
    TimeFrame.M30: EventType.M30_CANDLE_CLOSE,
    TimeFrame.H1: EventType.H1_CANDLE_CLOSE,
    TimeFrame.H2: EventType.H2_CANDLE_CLOSE,
    TimeFrame.H4: EventType.H4_CANDLE_CLOSE,
    TimeFrame.H8: EventType.H8_CANDLE_CLOSE,
    TimeFrame.H12: EventType.H12_CANDLE_CLOSE,
    TimeFrame.D1: EventType.D1_CANDLE_CLOSE,
    TimeFrame.W1: EventType.W1_CANDLE_CLOSE,
    TimeFrame.MN1: EventType.MN1_CANDLE_CLOSE,
    TimeFrame.MN4: EventType.MN4_CANDLE_CLOSE,
    TimeFrame.MN6: EventType.MN6_CANDLE_CLOSE,
    TimeFrame.Y1: EventType.Y1_CANDLE_CLOSE,
}


def event_type_for(timeframe: TimeFrame) -> EventType:
    """Return the candle-close event type for a time frame."""
    try:
        return _CANDLE_EVENT_TYPES[timeframe]
    except (KeyError, TypeError):
        raise ValueError(f"no candle-close event for time frame {timeframe!r}") from None


class Event(ABC):
    """Base of all events."""

    @property
    @abstractmethod
    def event_type(self) -> EventType:
        """The kind of this event."""


@dataclass(frozen=True)
class StartEvent(Event):
    """The bot has been started."""

    @property
    def event_type(self) -> EventType:
        return EventType.START


@dataclass(frozen=True)
class PauseEvent(Event):
    """The bot has been paused."""

    @property
    def event_type(self) -> EventType:
        return EventType.PAUSE


@dataclass(frozen=True)
class UnpauseEvent(Event):
    """The bot has been resumed."""

    @property
    def event_type(self) -> EventType:
        return EventType.UNPAUSE


@dataclass(frozen=True)
class StopEvent(Event):
    """The bot has been stopped."""

    @property
    def event_type(self) -> EventType:
        return EventType.STOP


@dataclass
class CandleCloseEvent(Event):
    """A candle of the given time frame has closed."""

    timeframe: TimeFrame
    close_time: datetime | None = None
    candle: Candle = field(default_factory=Candle)

    @property
    def event_type(self) -> EventType:
        return event_type_for(self.timeframe)