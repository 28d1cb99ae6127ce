"""
Focus events.

Synchronous publish/subscribe channel used by the focus tree to
announce focus, blur and select notifications.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Union

logger = logging.getLogger(__name__)


class FocusEvent(Enum):
    """Events emitted by the focus tree."""
    FOCUS = "focus"
    BLUR = "blur"
    SELECT = "select"


# Type aliases
Handler = Callable[[str], None]
Subscription = Callable[[], None]
EventName = Union[FocusEvent, str]


def _event_key(event: EventName) -> str:
    if isinstance(event, FocusEvent):
        return event.value
    return event


class EventEmitter:
    """
    Ordered handler registry keyed by event name.

    Handlers run synchronously, in the order they were added, and
    receive the affected node id. Exceptions raised by a handler are
    not caught: they propagate to whoever triggered the emission.

    Usage:
        emitter = EventEmitter()
        unsubscribe = emitter.on(FocusEvent.FOCUS, on_focus)
        emitter.emit(FocusEvent.FOCUS, "menu-item-1")
        unsubscribe()
    """

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = {}

    def on(self, event: EventName, handler: Handler) -> Subscription:
        """
        Subscribe to an event.

        Args:
            event: Event to listen for
            handler: Function called with the node id

        Returns:
            Unsubscribe function
        """
        key = _event_key(event)
        self._handlers.setdefault(key, []).append(handler)

        def unsubscribe():
            self.off(key, handler)

        return unsubscribe

    def off(self, event: EventName, handler: Handler) -> None:
        """Remove one registration of a handler (no-op if absent)."""
        handlers = self._handlers.get(_event_key(event))
        if handlers and handler in handlers:
            handlers.remove(handler)

    def emit(self, event: EventName, node_id: str) -> None:
        """
        Invoke every handler registered for the event.

        Handlers added or removed while emitting take effect on the
        next emission.
        """
        key = _event_key(event)
        handlers = list(self._handlers.get(key, ()))
        logger.debug(f"emit {key} {node_id!r} -> {len(handlers)} handler(s)")
        for handler in handlers:
            handler(node_id)

    def handler_count(self, event: EventName) -> int:
        """Get number of handlers registered for an event."""
        return len(self._handlers.get(_event_key(event), ()))

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
