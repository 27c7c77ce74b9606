"""Planetary hours: the Chaldean order and the ruler-to-event registry.

`ruler_for` is a pure function of (day, hour). The order is always laid
over a 24-hour reference day, whatever `hours_per_day` the clock runs with,
so saved games keep the same rulers if the day length is reconfigured.
"""
from typing import Callable, Dict, Hashable, Optional, Tuple
import logging

from src.chaldean_clock.errors import InvalidLabel

_logger = logging.getLogger("chaldean_clock.planetary")

REFERENCE_HOURS_PER_DAY = 24

PLANETARY_ORDER: Tuple[str, ...] = (
    "Saturn", "Jupiter", "Mars", "Sun",
    "Venus", "Mercury", "Moon",
)

PLANETARY_MEANINGS: Dict[str, str] = {
    "Sun": "Leadership, vitality, creativity",
    "Moon": "Emotions, intuition, reflection",
    "Mercury": "Communication, intellect, learning",
    "Venus": "Love, beauty, harmony",
    "Mars": "Action, energy, passion",
    "Jupiter": "Abundance, expansion, wisdom",
    "Saturn": "Discipline, structure, responsibility",
}

_BY_LOWER = {label.lower(): label for label in PLANETARY_ORDER}

Dispatcher = Callable[[Hashable], None]


def ruler_for(day: int, hour: int) -> str:
    total_hours = (day - 1) * REFERENCE_HOURS_PER_DAY + hour
    return PLANETARY_ORDER[(total_hours - 1) % len(PLANETARY_ORDER)]


def normalize_label(label: str) -> str:
    """Return the canonical spelling of a planetary label.

    Matching ignores case and surrounding whitespace. Raises InvalidLabel
    for anything outside the Chaldean order.
    """
    canonical = _BY_LOWER.get(str(label).strip().lower())
    if canonical is None:
        raise InvalidLabel(f"Unknown planetary ruler: {label!r}")
    return canonical


def meaning_for(label: str) -> str:
    return PLANETARY_MEANINGS[normalize_label(label)]


class CycleRegistry:
    """Maps each planetary ruler to at most one event id."""

    def __init__(self):
        self._events: Dict[str, Hashable] = {}

    def register_handler(self, label: str, event_id: Hashable) -> None:
        canonical = normalize_label(label)
        previous = self._events.get(canonical)
        self._events[canonical] = event_id
        if previous is not None and previous != event_id:
            _logger.info("Replaced %s event %s with %s", canonical, previous, event_id)
        else:
            _logger.debug("Registered %s -> event %s", canonical, event_id)

    def unregister(self, label: str) -> None:
        self._events.pop(normalize_label(label), None)

    def handler_for(self, label: str) -> Optional[Hashable]:
        return self._events.get(label)

    def dispatch_if_registered(self, label: str, dispatcher: Dispatcher) -> bool:
        """Call `dispatcher` once with the event registered for `label`.

        Returns True when something was dispatched. A dispatcher that raises
        is logged and treated as dispatched.
        """
        event_id = self._events.get(label)
        if event_id is None:
            return False
        _logger.debug("Dispatching event %s for ruler %s", event_id, label)
        try:
            dispatcher(event_id)
        except Exception:
            _logger.exception("Error dispatching event %s for ruler %s", event_id, label)
        return True

    def to_dict(self) -> Dict[str, Hashable]:
        return dict(self._events)

    def load_dict(self, data: Dict[str, Hashable]) -> None:
        self._events.clear()
        for label, event_id in (data or {}).items():
            try:
                self.register_handler(label, event_id)
            except InvalidLabel:
                _logger.warning("Dropping saved event for unknown ruler %r", label)

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, label: object) -> bool:
        return label in self._events
