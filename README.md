# dynalgo

dynalgo is a small event-driven framework for writing trading bots. You write
a strategy, say which events it cares about, and the framework calls the
matching method of the strategy when those events happen:

- control events: start, pause, unpause and stop, raised by a
  `TradingController` (for example from the control panel);
- candle-close events: raised whenever a candle boundary of a time frame
  passes (1, 5, 15 and 30 minutes; 1, 2, 4, 8 and 12 hours; 1 day; 1 week;
  1, 4 and 6 months; 1 year).

## Installation

```
pip install .
```

The package has no third-party dependencies. The control panel uses
`tkinter` from the standard library, which some Python installations ship
separately. To run the tests:

```
pip install ".[test]"
pytest
```

## Writing a strategy

Subclass `dynalgo.strategy.TradingStrategy` and override the hooks you need.
Each hook receives the event that triggered it. The default hooks only store
the event in the strategy's `last_event` attribute.

```python
from dynalgo.events import EventType
from dynalgo.strategy import TradingStrategy


class MyStrategy(TradingStrategy):
    def __init__(self, api, bot):
        super().__init__(api, bot)
        bot.listen_to(self, EventType.START, [EventType.M5_CANDLE_CLOSE])

    def on_start(self, event):
        print("bot started")

    def on_m5_candle_close(self, event):
        print("5-minute candle closed at", event.close_time)

    def on_stop(self, event):
        print("bot stopped")
```

Available hooks: `on_start`, `on_pause`, `on_unpause`, `on_stop`,
`on_m1_candle_close`, `on_m5_candle_close`, `on_m15_candle_close`,
`on_m30_candle_close`, `on_h1_candle_close`, `on_h2_candle_close`,
`on_h4_candle_close`, `on_h8_candle_close`, `on_h12_candle_close`,
`on_d1_candle_close`, `on_w1_candle_close`, `on_mn1_candle_close`,
`on_mn4_candle_close`, `on_mn6_candle_close` and `on_y1_candle_close`.
The strategy also keeps the API and bot it was built with as `api` and `bot`.

Every strategy receives the stop event, because `TradingStrategy.__init__`
subscribes to it. Any other event is delivered only after the strategy asks
for it with `TradingBot.listen_to(strategy, ...)`, passing members of
`dynalgo.events.EventType` or iterables of them.

## Events

`dynalgo.events` defines `EventType`, the control events `StartEvent`,
`PauseEvent`, `UnpauseEvent` and `StopEvent`, and `CandleCloseEvent`, which
carries a `timeframe` (`dynalgo.model.TimeFrame`), a `close_time` and a
`candle` (`dynalgo.model.Candle`). `event_type_for(timeframe)` gives the
candle-close event type of a time frame.

Candle boundaries are computed in UTC by
`dynalgo.candle_observer.CandleCloseObserver`:

- 1 month closes at midnight on the first day of each month, and 1 year at
  midnight on 1 January;
- every other time frame, 4 and 6 months included, is a fixed number of
  minutes counted from the Unix epoch (4 months is 4 × 43200 minutes, 6 months
  6 × 43200 minutes).

On construction each interval is set to its current boundary, so only closes
that happen afterwards are reported, never past ones. `poll()` fires at most
one event per interval and returns the events it fired. The helpers
`last_fixed_close`, `last_monthly_close` and `last_yearly_close` compute the
boundaries for a given moment.

`dynalgo.observer.EventObserver` polls that clock on a daemon thread, every
0.1 seconds by default, between `start()` and `stop()`, so candle-close hooks
run on that thread.

## Talking to an exchange

`dynalgo.api.TradingAPI` is the base class for exchange clients. It offers
`get`, `post`, `put` and `delete`. Headers are `(name, value)` pairs: pairs
with an empty name are skipped and only the first pair of a name is sent.
POST and PUT bodies must be mappings and are sent as JSON. Each call returns a
`dynalgo.api.Response` and, if a callback is given, passes the response to it
too. Requests go out through `urllib` unless another transport, a callable
taking a `Request` and returning a `Response`, is passed to the constructor.

```python
from dynalgo.api import TradingAPI

api = TradingAPI()
reply = api.get("https://api.example.com/time", headers=[("Accept", "application/json")])
if reply.ok:
    print(reply.json())
```

## Running a bot

Register the strategy and API classes with `dynalgo.application.start`. Every
time the bot is started, a fresh `Application` is built with a new API client
and a new strategy:

```python
from dynalgo.application import start
from dynalgo.api import TradingAPI
from dynalgo.controller import TradingController

start(MyStrategy, TradingAPI)

with TradingController() as controller:
    controller.on_start_press()
    controller.on_pause_press()   # pause
    controller.on_pause_press()   # resume
    controller.on_stop_press()
```

`TradingController` starts polling the candle clock when it is built (pass
`start_polling=False` to prevent that) and stops it on `close()` or when the
`with` block ends. Pressing start while the bot runs does nothing; starting
clears every listener before the new bot is built. Pause and stop do nothing
unless a bot was built and is active, so call `start` before pressing start.
The `started`, `paused`, `unpaused` and `stopped` signals (`Signal` objects
with `connect`, `disconnect` and `emit`) report each change.

## Control panel

```
dynalgo
```

opens a window with Start, Pause and Stop buttons that run the built-in
`dynalgo.custom.CustomTradingStrategy` with `dynalgo.custom.CustomTradingAPI`.
Start is disabled while the bot runs, Pause and Stop while it does not, and
Pause reads Resume while the bot is paused. The button state is kept by
`dynalgo.gui.BotControlState`, which can be used without a window.

`CustomTradingStrategy` listens to start and stop and records the events it
receives, with their arrival times, in `received` and `received_at`.

## What it does not do

dynalgo does not fetch market data or place orders. `CandleCloseEvent.candle`
is left empty; an event only tells that a boundary has passed.
`CustomTradingAPI` has no exchange calls of its own, and the control panel
shows no prices, positions or logs: it only starts, pauses and stops the bot.