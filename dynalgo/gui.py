"""Desktop window with start, pause and stop controls for the trading bot."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

from dynalgo.application import start
from dynalgo.controller import Signal, TradingController
from dynalgo.custom import CustomTradingAPI, CustomTradingStrategy

PAUSE_TEXT = "Pause"
RESUME_TEXT = "Resume"
WINDOW_TITLE = "DynAlgo"


class BotControlState:
    """Which control buttons are enabled and what the pause button says.

    When given a controller, the state follows its started, paused, unpaused
    and stopped signals. :attr:`changed` is emitted after every update.
    """

    def __init__(self, controller: TradingController | None = None) -> None:
        self.start_enabled = True
        self.pause_enabled = False
        self.stop_enabled = False
        self.pause_text = PAUSE_TEXT
        self.changed = Signal()
        if controller is not None:
            controller.started.connect(self.on_started)
            controller.paused.connect(self.on_paused)
            controller.unpaused.connect(self.on_unpaused)
            controller.stopped.connect(self.on_stopped)

    def on_started(self) -> None:
        """Disable start and enable pause and stop."""
        self.start_enabled = False
        self.pause_enabled = True
        self.stop_enabled = True
        self.changed.emit()

    def on_paused(self) -> None:
        """Offer to resume."""
        self.pause_text = RESUME_TEXT
        self.changed.emit()

    def on_unpaused(self) -> None:
        """Offer to pause again."""
        self.pause_text = PAUSE_TEXT
        self.changed.emit()

    def on_stopped(self) -> None:
        """Return to the initial layout."""
        self.start_enabled = True
        self.pause_text = PAUSE_TEXT
        self.pause_enabled = False
        self.stop_enabled = False
        self.changed.emit()


class BotControlWidget:
    """A frame of three buttons that drive a controller and mirror its state."""

    def __init__(self, controller: TradingController, master: Any) -> None:
        import tkinter as tk

        self._tk = tk
        self.state = BotControlState(controller)
        self.frame = tk.Frame(master)
        self.start_button = tk.Button(self.frame, text="Start", command=controller.on_start_press)
        self.pause_button = tk.Button(self.frame, text=PAUSE_TEXT, command=controller.on_pause_press)
        self.stop_button = tk.Button(self.frame, text="Stop", command=controller.on_stop_press)
        for button in (self.start_button, self.pause_button, self.stop_button):
            button.pack(side=tk.LEFT, padx=4, pady=4)
        self.state.changed.connect(self._refresh)
        self._refresh()

    def _button_state(self, enabled: bool) -> str:
        return self._tk.NORMAL if enabled else self._tk.DISABLED

    def _refresh(self) -> None:
        self.start_button.configure(state=self._button_state(self.state.start_enabled))
        self.pause_button.configure(
            state=self._button_state(self.state.pause_enabled), text=self.state.pause_text
        )
        self.stop_button.configure(state=self._button_state(self.state.stop_enabled))


class MainWindow:
    """The application window holding the bot controls."""

    def __init__(self, controller: TradingController | None = None) -> None:
        import tkinter as tk

        self.controller = controller if controller is not None else TradingController()
        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        central = tk.Frame(self.root)
        central.pack(fill=tk.BOTH, expand=True)
        self.bot_control = BotControlWidget(self.controller, central)
        self.bot_control.frame.pack(side=tk.TOP)
        self.root.protocol("WM_DELETE_WINDOW", self.close)

    def show(self) -> None:
        """Run the window until it is closed."""
        self.root.mainloop()

    def close(self) -> None:
        """Stop the controller and destroy the window."""
        self.controller.close()
        self.root.destroy()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the control window running the custom strategy."""
    parser = argparse.ArgumentParser(
        prog="dynalgo", description="Run the trading bot control window."
    )
    parser.parse_args(argv)
    window = MainWindow()
    start(CustomTradingStrategy, CustomTradingAPI)
    try:
        window.show()
    finally:
        window.controller.close()
    return 0