"""
event_manager.py
----------------
Publish/subscribe channel between the game core and its observers.
The presentation layer subscribes here instead of reaching into game state.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from dino_runner.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class GameStartedEvent(BaseEvent):
    """Dispatched when a session enters the running state."""
    timestamp: float


@dataclass(frozen=True)
class PlayerJumpedEvent(BaseEvent):
    velocity: float


@dataclass(frozen=True)
class ObstacleSpawnedEvent(BaseEvent):
    """Dispatched for every obstacle the spawner creates."""
    width: float
    height: float


@dataclass(frozen=True)
class ScoreChangedEvent(BaseEvent):
    score: int


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched once when a collision ends the session."""
    final_score: int


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return

        callbacks.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing subscriber is logged and skipped; the game loop keeps going.
        """
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(
                    f"Error in event callback {callback_name}: {e}",
                    category="event"
                )

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """
        Get count of subscribers.

        Args:
            event_type: Specific event type, or None for total
        """
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
