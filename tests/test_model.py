from dataclasses import replace
from datetime import datetime, timezone

from dynalgo.model import Candle, TimeFrame


def test_timeframe_order_starts_with_minute_and_ends_with_year():
    frames = list(TimeFrame)
    assert Candle().timeframe is frames[0]
    assert frames[0] is TimeFrame.M1
    assert TimeFrame(frames[-1].value) is TimeFrame.Y1


def test_timeframe_labels_round_trip_to_distinct_members():
    frames = list(TimeFrame)
    looked_up = [TimeFrame(frame.value) for frame in frames]
    assert looked_up == frames
    assert len(set(looked_up)) == len(frames)


def test_timeframe_minute_and_month_labels_differ_by_case():
    assert TimeFrame("m1") is TimeFrame.M1
    assert TimeFrame("M1") is TimeFrame.MN1


def test_candle_defaults():
    candle = Candle()
    assert candle.symbol == ""
    assert candle.timeframe is TimeFrame.M1
    assert candle.open_time is None
    assert (candle.open, candle.high, candle.low, candle.close, candle.volume) == (
        0.0,
        0.0,
        0.0,
        0.0,
        0.0,
    )


def test_candle_replace_keeps_other_fields():
    opened = datetime(2024, 1, 2, tzinfo=timezone.utc)
    candle = Candle(symbol="BTCUSD", timeframe=TimeFrame.H4, open_time=opened, open=10.5)
    changed = replace(candle, close=11.25)
    assert changed.symbol == "BTCUSD"
    assert changed.timeframe is TimeFrame.H4
    assert changed.open_time == opened
    assert changed.open == 10.5
    assert changed.close == 11.25
    assert candle.close == 0.0


def test_candle_equality_by_value():
    assert Candle(symbol="ETH", volume=3.0) == Candle(symbol="ETH", volume=3.0)
    assert Candle(symbol="ETH") != Candle(symbol="BTC")