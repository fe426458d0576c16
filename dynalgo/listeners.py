"""Listeners that forward events of one type to a callback."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from dynalgo.events import (
    CandleCloseEvent,
    Event,
    EventType,
    PauseEvent,
    StartEvent,
    StopEvent,
    UnpauseEvent,
)

_CONTROL_EVENT_CLASSES: dict[EventType, type[Event]] = {
    EventType.START: StartEvent,
    EventType.PAUSE: PauseEvent,
    EventType.UNPAUSE: UnpauseEvent,
    EventType.STOP: StopEvent,
}


@dataclass(eq=False)
class EventListener:
    """Calls ``action`` for events of ``event_type`` that are ``event_class`` instances."""

    event_type: EventType
    action: Callable[[Any], object]
    event_class: type[Event] = Event

    def handle_event(self, event: Event) -> None:
        """Forward the event to the action if its type and class match."""
        if event.event_type == self.event_type and isinstance(event, self.event_class):
            self.action(event)


def listener_for(event_type: EventType, action: Callable[[Any], object]) -> EventListener:
    """Build a listener for ``event_type`` that expects the matching event class."""
    event_type = EventType(event_type)
    event_class = _CONTROL_EVENT_CLASSES.get(event_type, CandleCloseEvent)
    return EventListener(event_type, action, event_class)