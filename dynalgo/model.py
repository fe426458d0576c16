"""Market data model: candle time frames and OHLCV candles."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TimeFrame(Enum):
    """Candle durations, from one minute up to one year.

    Member names use ``M`` for minutes and ``MN`` for months; the values keep
    the conventional short labels (``m1`` is one minute, ``M1`` one month).
    """

    M1 = "m1"
    M5 = "m5"
    M15 = "m15"
    M30 = "m30"
    H1 = "H1"
    H2 = "H2"
    H4 = "H4"
    H8 = "H8"
    H12 = "H12"
    D1 = "D1"
    W1 = "W1"
    MN1 = "M1"
    MN4 = "M4"
    MN6 = "M6"
    Y1 = "Y1"


@dataclass
class Candle:
    """One OHLCV candle of a symbol in a given time frame."""

    symbol: str = ""
    timeframe: TimeFrame = TimeFrame.M1
    open_time: datetime | None = None
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: float = 0.0