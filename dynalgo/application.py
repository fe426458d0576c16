"""Application bot that builds a chosen strategy with a chosen API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dynalgo.api import TradingAPI
from dynalgo.bot import TradingBot
from dynalgo.strategy import TradingStrategy

if TYPE_CHECKING:
    from dynalgo.controller import TradingController


def _check_classes(strategy_cls: type, api_cls: type) -> None:
    if not (isinstance(strategy_cls, type) and issubclass(strategy_cls, TradingStrategy)):
        raise TypeError(f"{strategy_cls!r} must be a subclass of TradingStrategy")
    if not (isinstance(api_cls, type) and issubclass(api_cls, TradingAPI)):
        raise TypeError(f"{api_cls!r} must be a subclass of TradingAPI")


class Application(TradingBot):
    """A bot that owns an instance of ``api_cls`` and a strategy of ``strategy_cls`` using it."""

    def __init__(
        self,
        controller: TradingController | None,
        strategy_cls: type[TradingStrategy],
        api_cls: type[TradingAPI],
    ) -> None:
        _check_classes(strategy_cls, api_cls)
        super().__init__(None, controller)
        self.api = api_cls()
        self.strategy = strategy_cls(self.api, self)


def start(strategy_cls: type[TradingStrategy], api_cls: type[TradingAPI]) -> None:
    """Make every new bot an :class:`Application` of the given strategy and API."""
    _check_classes(strategy_cls, api_cls)

    def factory(controller: TradingController) -> Application:
        return Application(controller, strategy_cls, api_cls)

    TradingBot.set_factory(factory)