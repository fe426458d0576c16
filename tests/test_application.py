from datetime import datetime, timezone

import pytest

from dynalgo.api import TradingAPI, WebAPI
from dynalgo.application import Application, start
from dynalgo.bot import TradingBot
from dynalgo.controller import TradingController
from dynalgo.events import EventType, StartEvent, StopEvent
from dynalgo.strategy import TradingStrategy


class FakeController:
    def __init__(self):
        self.listeners = []

    def register_listener(self, listener):
        self.listeners.append(listener)


class Recorder(TradingStrategy):
    def __init__(self, api, bot):
        self.received = []
        super().__init__(api, bot)
        bot.listen_to(self, EventType.START)

    def on_start(self, event):
        self.received.append(event)

    def on_stop(self, event):
        self.received.append(event)


class MyAPI(TradingAPI):
    pass


@pytest.fixture(autouse=True)
def reset_factory():
    yield
    TradingBot.set_factory(None)


def test_application_builds_api_and_strategy():
    controller = FakeController()
    app = Application(controller, Recorder, MyAPI)
    assert isinstance(app.api, MyAPI)
    assert isinstance(app.strategy, Recorder)
    assert app.strategy.api is app.api
    assert app.strategy.bot is app
    assert [listener.event_type for listener in controller.listeners] == [EventType.STOP, EventType.START]


def test_start_installs_factory():
    start(Recorder, MyAPI)
    controller = FakeController()
    app = TradingBot.create(controller)
    assert isinstance(app, Application)
    assert app.controller is controller
    assert isinstance(app.strategy, Recorder)


@pytest.mark.parametrize(
    "strategy_cls, api_cls",
    [(object, MyAPI), (Recorder, WebAPI), (Recorder, object), ("Recorder", MyAPI)],
)
def test_wrong_classes_rejected(strategy_cls, api_cls):
    with pytest.raises(TypeError):
        start(strategy_cls, api_cls)
    with pytest.raises(TypeError):
        Application(FakeController(), strategy_cls, api_cls)


def test_application_with_controller():
    start(Recorder, MyAPI)
    fixed = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    with TradingController(clock=lambda: fixed, start_polling=False) as controller:
        controller.on_start_press()
        strategy = controller.bot.strategy
        controller.on_stop_press()
    assert strategy.received == [StartEvent(), StopEvent()]
    assert controller.bot is None