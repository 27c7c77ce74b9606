"""Session context: the one authoritative clock for a play session.

Subsystems that need the time are handed the Session (or its `clock`)
explicitly; nothing looks the clock up globally.
"""
from typing import Any, Dict, Hashable, Optional
import logging

from src.chaldean_clock.config import ClockConfig
from src.chaldean_clock.errors import InvalidLabel
from src.chaldean_clock.host import HostLifecycle
from src.chaldean_clock.systems.clock import ClockState
from src.chaldean_clock.systems.common_events import CommonEventQueue
from src.chaldean_clock.systems.event_bus import EventBus
from src.chaldean_clock.systems.planetary import CycleRegistry

_logger = logging.getLogger("chaldean_clock.session")


class Session:
    def __init__(self, config: Optional[ClockConfig] = None, bus: Optional[EventBus] = None):
        self.config = config if config is not None else ClockConfig()
        self.bus = bus if bus is not None else EventBus()
        self.events = CommonEventQueue(self.bus)
        self.registry = CycleRegistry()
        self.clock = ClockState(self.config, self.registry, self.events.reserve)
        self.display = None

    def install(self, lifecycle: HostLifecycle) -> None:
        lifecycle.on_session_init(self.on_session_init)
        lifecycle.on_frame_tick(self.on_frame_tick)

    def on_session_init(self) -> None:
        self.clock.reset()
        self.events.clear()
        _logger.info(
            "Clock initialized: day %d hour %d (%d hours/day, %d ticks/hour)",
            self.clock.day, self.clock.hour, self.config.hours_per_day, self.config.ticks_per_hour,
        )

    def on_frame_tick(self) -> None:
        self.clock.tick()
        self.events.flush()
        self.refresh_display()

    # -- display forwarding ----------------------------------------------

    def attach_display(self, display) -> None:
        self.display = display
        if not self.config.show_display:
            display.hide()
        display.refresh()

    def hide_display(self) -> None:
        if self.display is not None:
            self.display.hide()

    def show_display(self) -> None:
        if self.display is not None:
            self.display.show()

    def refresh_display(self) -> None:
        if self.display is not None:
            self.display.refresh()

    # -- handlers ---------------------------------------------------------

    def register_handler(self, label: str, event_id: Hashable) -> bool:
        try:
            self.registry.register_handler(label, event_id)
        except InvalidLabel as e:
            _logger.warning("Ignoring event registration: %s", e)
            return False
        return True

    # -- persistence ------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        return {"clock": self.clock.to_dict(), "events": self.registry.to_dict()}

    def restore(self, payload: Dict[str, Any]) -> None:
        """Restore from a snapshot; sections of the wrong shape are treated as empty."""
        self.clock.load_dict(_section(payload, "clock"))
        self.registry.load_dict(_section(payload, "events"))
        self.refresh_display()
        _logger.info("Restored clock at day %d hour %d", self.clock.day, self.clock.hour)


def _section(payload: Any, key: str) -> Dict[str, Any]:
    value = payload.get(key) if isinstance(payload, dict) else None
    if value is None:
        return {}
    if not isinstance(value, dict):
        _logger.warning("Ignoring malformed %r section in saved clock: %r", key, value)
        return {}
    return value
