"""Synchronous dispatch of transform lifecycle events."""

from collections import defaultdict
from typing import Any, Callable, Optional

Listener = Callable[[Any], None]


class EventBus:
    """Delivers each emitted event to its listeners in registration order.

    Listeners registered through :meth:`on_all` see every event before the
    listeners registered for the event's exact type.
    """

    def __init__(self) -> None:
        self._listeners: dict[Optional[type], list[Listener]] = defaultdict(list)

    def subscribe(self, event_type: type, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event_type*; returns an unsubscribe function."""
        self._listeners[event_type].append(callback)
        return lambda: self._listeners[event_type].remove(callback)

    def on_all(self, callback: Listener) -> Callable[[], None]:
        """Register *callback* for every event type."""
        self._listeners[None].append(callback)
        return lambda: self._listeners[None].remove(callback)

    def emit(self, event: Any) -> None:
        for cb in [*self._listeners[None], *self._listeners[type(event)]]:
            cb(event)
