"""Event-driven framework for algorithmic trading bots: strategies, control and candle-close events, an HTTP API base and a control panel."""

__version__ = "0.1.0"