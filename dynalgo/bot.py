"""Trading bot: wires a strategy's hooks to the controller's events."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, ClassVar

from dynalgo.events import EventType
from dynalgo.listeners import listener_for
from dynalgo.strategy import HANDLER_NAMES, TradingStrategy

if TYPE_CHECKING:
    from dynalgo.controller import TradingController

BotFactory = Callable[["TradingController"], "TradingBot"]


class TradingBot:
    """Connects a strategy to the events of a controller.

    A single factory, shared by all bots, decides what :meth:`create` builds.
    """

    _factory: ClassVar[BotFactory | None] = None

    def __init__(self, strategy: TradingStrategy | None, controller: TradingController | None) -> None:
        self.strategy = strategy
        self.controller = controller

    @classmethod
    def set_factory(cls, factory: BotFactory | None) -> None:
        """Install the factory used by :meth:`create`; ``None`` removes it."""
        TradingBot._factory = factory

    @classmethod
    def create(cls, controller: TradingController) -> TradingBot | None:
        """Build a bot for ``controller`` with the installed factory, if any."""
        factory = TradingBot._factory
        if factory is None:
            return None
        return factory(controller)

    def listen_to(self, strategy: TradingStrategy, *args: EventType | Iterable[EventType]) -> None:
        """Deliver events of the given types to the matching hooks of ``strategy``.

        Each argument is an event type or an iterable of event types.
        """
        for arg in args:
            event_types = [arg] if isinstance(arg, int) else arg
            for event_type in event_types:
                self._listen(strategy, EventType(event_type))

    def _listen(self, strategy: TradingStrategy, event_type: EventType) -> None:
        if self.controller is None:
            raise RuntimeError("the bot has no controller to subscribe to")
        action = getattr(strategy, HANDLER_NAMES[event_type])
        self.controller.register_listener(listener_for(event_type, action))