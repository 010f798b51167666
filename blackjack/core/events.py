"""
Event system for the Blackjack game.

This module provides an event bus system for decoupling round logic
from the console UI and other observers.
"""

from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass
from enum import Enum
import logging
import time


class EventType(Enum):
    """Types of events that can be emitted by a round."""

    ROUND_STARTED = "round_started"
    CARD_DEALT = "card_dealt"
    PHASE_CHANGED = "phase_changed"
    ROUND_ENDED = "round_ended"
    ROUND_ABORTED = "round_aborted"


@dataclass
class GameEvent:
    """Represents a game event with associated data.

    Attributes:
        event_type: The type of event
        data: Event-specific data
        timestamp: When the event occurred (optional)
        source: Source of the event (optional)
    """

    event_type: EventType
    data: Dict[str, Any]
    timestamp: Optional[float] = None
    source: Optional[str] = None

    def __post_init__(self):
        """Set timestamp if not provided."""
        if self.timestamp is None:
            self.timestamp = time.time()


# Type alias for event listeners
EventListener = Callable[[GameEvent], None]


class EventBus:
    """Event bus for managing game events and listeners.

    Components subscribe to specific event types and are notified
    when those events occur.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, max_history: int = 1000):
        """Initialize the event bus.

        Args:
            logger: Optional logger for debugging events
            max_history: Number of events kept in the history
        """
        self._listeners: Dict[EventType, List[EventListener]] = {}
        self._logger = logger or logging.getLogger(__name__)
        self._event_history: List[GameEvent] = []
        self._max_history = max_history

    def subscribe(self, event_type: EventType, listener: EventListener) -> None:
        """Subscribe a listener to an event type.

        Args:
            event_type: The type of event to listen for
            listener: The callback function to call when the event occurs
        """
        self._listeners.setdefault(event_type, []).append(listener)
        self._logger.debug(f"Subscribed listener to {event_type.value}")

    def unsubscribe(self, event_type: EventType, listener: EventListener) -> bool:
        """Unsubscribe a listener from an event type.

        Returns:
            True if the listener was found and removed, False otherwise
        """
        try:
            self._listeners.get(event_type, []).remove(listener)
        except ValueError:
            return False
        self._logger.debug(f"Unsubscribed listener from {event_type.value}")
        return True

    def emit(self, event: GameEvent) -> None:
        """Emit an event to all subscribed listeners.

        A failing listener is logged and does not stop the others.
        """
        self._event_history.append(event)
        if len(self._event_history) > self._max_history:
            self._event_history.pop(0)

        listeners = self._listeners.get(event.event_type, [])
        self._logger.debug(f"Emitting {event.event_type.value} to {len(listeners)} listeners")

        for listener in listeners:
            try:
                listener(event)
            except Exception as e:
                self._logger.error(f"Error in event listener: {e}")

    def emit_simple(self, event_type: EventType, source: Optional[str] = None, **data) -> None:
        """Emit a simple event with data as keyword arguments."""
        self.emit(GameEvent(event_type=event_type, data=data, source=source))

    def get_listeners_count(self, event_type: EventType) -> int:
        return len(self._listeners.get(event_type, []))

    def get_event_history(self, event_type: Optional[EventType] = None,
                          limit: Optional[int] = None) -> List[GameEvent]:
        """Get event history, optionally filtered by type and limited.

        Args:
            event_type: Optional event type to filter by
            limit: Optional limit on number of events to return
        """
        events = self._event_history

        if event_type is not None:
            events = [e for e in events if e.event_type == event_type]

        if limit is not None:
            events = events[-limit:]

        return list(events)

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()
        self._logger.debug("Cleared event history")


# Global event bus instance (can be overridden for testing)
_global_event_bus: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """Get the global event bus instance."""
    global _global_event_bus
    if _global_event_bus is None:
        _global_event_bus = EventBus()
    return _global_event_bus


def set_event_bus(event_bus: Optional[EventBus]) -> None:
    """Set (or reset with None) the global event bus instance."""
    global _global_event_bus
    _global_event_bus = event_bus
