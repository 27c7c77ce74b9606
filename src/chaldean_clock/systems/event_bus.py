"""In-process publish/subscribe bus for host-side game events.

Ruler events arrive here as event type "common_event" with the event id as
the payload. Subscribers are called in subscription order; one failing
subscriber is logged and the rest still run.
"""
from typing import Any, Callable, Dict, List
import logging

_logger = logging.getLogger("chaldean_clock.event_bus")

Listener = Callable[[Any], None]


class EventBus:
    def __init__(self):
        self._subs: Dict[str, List[Listener]] = {}

    def subscribe(self, event_type: str, callback: Listener) -> Callable[[], None]:
        """Subscribe and return a function that undoes the subscription."""
        self._subs.setdefault(event_type, []).append(callback)
        _logger.debug("Subscribed %s to %s", callback, event_type)
        return lambda: self.unsubscribe(event_type, callback)

    def unsubscribe(self, event_type: str, callback: Listener) -> None:
        listeners = self._subs.get(event_type)
        if listeners and callback in listeners:
            listeners.remove(callback)

    def listeners(self, event_type: str) -> int:
        return len(self._subs.get(event_type, ()))

    def post(self, event_type: str, event: Any = None) -> int:
        """Deliver `event` to every listener; returns how many were called."""
        delivered = 0
        for cb in list(self._subs.get(event_type, [])):
            delivered += 1
            try:
                cb(event)
            except Exception:
                _logger.exception("Error delivering %s %r to %s", event_type, event, cb)
        return delivered
