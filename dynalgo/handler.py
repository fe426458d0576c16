"""Registry of listeners keyed by event type."""

from __future__ import annotations

from collections import defaultdict

from dynalgo.events import Event, EventType
from dynalgo.listeners import EventListener


class EventHandler:
    """Keeps listeners per event type and dispatches events to them."""

    def __init__(self) -> None:
        self._listeners: defaultdict[EventType, list[EventListener]] = defaultdict(list)

    def subscribe(self, listener: EventListener) -> None:
        """Register a listener under its event type."""
        self._listeners[listener.event_type].append(listener)

    def dispatch(self, event: Event) -> None:
        """Hand the event to every listener of its type, in subscription order."""
        # Iterate over a snapshot so listeners may subscribe during dispatch.
        for listener in list(self._listeners.get(event.event_type, ())):
            listener.handle_event(event)

    def reset(self) -> None:
        """Drop every registered listener."""
        self._listeners.clear()

    def __len__(self) -> int:
        return sum(len(group) for group in self._listeners.values())