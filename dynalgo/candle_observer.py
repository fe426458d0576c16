"""Clock that raises candle-close events when a time-frame boundary passes."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from dynalgo.events import CandleCloseEvent, EventType, event_type_for
from dynalgo.handler import EventHandler
from dynalgo.model import TimeFrame

MONTHLY_INTERVAL = 43200
"""Interval marker, in minutes, for candles that close on the first of each month."""

YEARLY_INTERVAL = 525600
"""Interval marker, in minutes, for candles that close on the first of January."""

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_DEFAULT_INTERVALS: tuple[tuple[int, TimeFrame], ...] = (
    (1, TimeFrame.M1),
    (5, TimeFrame.M5),
    (15, TimeFrame.M15),
    (30, TimeFrame.M30),
    (60, TimeFrame.H1),
    (120, TimeFrame.H2),
    (240, TimeFrame.H4),
    (480, TimeFrame.H8),
    (720, TimeFrame.H12),
    (1440, TimeFrame.D1),
    (10080, TimeFrame.W1),
    (MONTHLY_INTERVAL, TimeFrame.MN1),
    (4 * MONTHLY_INTERVAL, TimeFrame.MN4),
    (6 * MONTHLY_INTERVAL, TimeFrame.MN6),
    (YEARLY_INTERVAL, TimeFrame.Y1),
)

_TIMEFRAMES_BY_EVENT: dict[EventType, TimeFrame] = {
    event_type_for(timeframe): timeframe for timeframe in TimeFrame
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def last_fixed_close(now: datetime, interval_minutes: int) -> datetime:
    """Return the latest multiple of ``interval_minutes`` since the epoch that is <= ``now``."""
    if interval_minutes <= 0:
        raise ValueError(f"interval must be positive, got {interval_minutes}")
    now = _as_utc(now).replace(microsecond=0)
    step = timedelta(minutes=interval_minutes)
    return _EPOCH + ((now - _EPOCH) // step) * step


def last_monthly_close(now: datetime) -> datetime:
    """Return midnight UTC on the first day of the month containing ``now``."""
    return _as_utc(now).replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def last_yearly_close(now: datetime) -> datetime:
    """Return midnight UTC on the first of January of the year containing ``now``."""
    return _as_utc(now).replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)


def _latest_close(now: datetime, interval_minutes: int) -> datetime:
    if interval_minutes == MONTHLY_INTERVAL:
        return last_monthly_close(now)
    if interval_minutes == YEARLY_INTERVAL:
        return last_yearly_close(now)
    return last_fixed_close(now, interval_minutes)


def _timeframe_of(kind: EventType | TimeFrame) -> TimeFrame:
    if isinstance(kind, TimeFrame):
        return kind
    try:
        return _TIMEFRAMES_BY_EVENT[EventType(kind)]
    except (KeyError, ValueError):
        raise ValueError(f"{kind!r} is not a candle-close event type") from None


class CandleCloseObserver:
    """Fires one candle-close event per interval each time a new close boundary passes.

    Every standard time frame is registered on construction, with its last close
    set to the current boundary so that no past closes are reported.
    """

    def __init__(
        self,
        handler: EventHandler | None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._handler = handler
        self._clock = clock
        self._timeframes: dict[int, TimeFrame] = {}
        self._last_dispatched: dict[int, datetime] = {}
        for interval, timeframe in _DEFAULT_INTERVALS:
            self.register(interval, timeframe)

    def register(self, interval_minutes: int, event_type: EventType | TimeFrame) -> None:
        """Fire ``event_type`` candle closes every ``interval_minutes``.

        ``MONTHLY_INTERVAL`` and ``YEARLY_INTERVAL`` follow calendar months and
        years; any other interval is counted from the epoch. Registering an
        interval again replaces its event type.
        """
        if interval_minutes <= 0:
            raise ValueError(f"interval must be positive, got {interval_minutes}")
        timeframe = _timeframe_of(event_type)
        self._timeframes[interval_minutes] = timeframe
        self._last_dispatched[interval_minutes] = _latest_close(self._clock(), interval_minutes)

    def poll(self) -> list[CandleCloseEvent]:
        """Dispatch an event for every interval whose close boundary has advanced.

        Intervals are checked in ascending order; the dispatched events are returned.
        """
        now = self._clock()
        fired: list[CandleCloseEvent] = []
        for interval in sorted(self._timeframes):
            latest = _latest_close(now, interval)
            if latest > self._last_dispatched[interval]:
                event = CandleCloseEvent(self._timeframes[interval], close_time=latest)
                if self._handler is not None:
                    self._handler.dispatch(event)
                self._last_dispatched[interval] = latest
                fired.append(event)
        return fired

    @property
    def intervals(self) -> dict[int, TimeFrame]:
        """Registered intervals in minutes, mapped to their time frames, in ascending order."""
        return {interval: self._timeframes[interval] for interval in sorted(self._timeframes)}