"""Deferred host dispatch for ruler events.

The clock hands event ids to `CommonEventQueue.reserve`, which only records
them. The host drains the queue with `flush()` once per frame, after the
clock has finished ticking, so event handlers never run inside a tick.
"""
from collections import deque
from typing import Deque, Hashable, Tuple
import logging

from src.chaldean_clock.systems.event_bus import EventBus

_logger = logging.getLogger("chaldean_clock.common_events")

COMMON_EVENT = "common_event"


class CommonEventQueue:
    def __init__(self, bus: EventBus):
        self.bus = bus
        self._pending: Deque[Hashable] = deque()

    def reserve(self, event_id: Hashable) -> None:
        self._pending.append(event_id)
        _logger.debug("Reserved common event %s", event_id)

    def pending(self) -> Tuple[Hashable, ...]:
        return tuple(self._pending)

    def clear(self) -> None:
        self._pending.clear()

    def flush(self) -> int:
        """Post every reserved id to the bus in order; returns how many ran."""
        count = 0
        # ids reserved by handlers during this flush wait for the next frame
        for _ in range(len(self._pending)):
            event_id = self._pending.popleft()
            self.bus.post(COMMON_EVENT, event_id)
            count += 1
        return count
