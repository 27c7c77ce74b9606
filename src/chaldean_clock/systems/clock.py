"""ClockState: the in-game hour/day counter driven by frame ticks.

Real time only enters through `tick()`, called once per rendered frame.
Every `ticks_per_hour` ticks the clock advances one hour; each advanced hour
re-evaluates the planetary ruler and dispatches its registered event.
Direct setters are scripted time-jumps and never dispatch.
"""
from typing import Any, Dict, Hashable, Optional
import logging

from src.chaldean_clock.config import ClockConfig
from src.chaldean_clock.errors import OutOfRangeSet, ReentrantAdvance
from src.chaldean_clock.systems.planetary import (
    CycleRegistry,
    Dispatcher,
    meaning_for,
    ruler_for,
)
from src.chaldean_clock.utils.parsing import clamp, coerce_int

_logger = logging.getLogger("chaldean_clock.clock")


class ClockState:
    def __init__(
        self,
        config: Optional[ClockConfig] = None,
        registry: Optional[CycleRegistry] = None,
        dispatcher: Optional[Dispatcher] = None,
    ):
        self.config = config if config is not None else ClockConfig()
        self.registry = registry if registry is not None else CycleRegistry()
        self.dispatcher = dispatcher
        self.hour = self.config.starting_hour
        self.day = self.config.starting_day
        self.tick_accumulator = 0
        self._paused = False
        self._advancing = False

    @property
    def hours_per_day(self) -> int:
        return self.config.hours_per_day

    @property
    def ticks_per_hour(self) -> int:
        return self.config.ticks_per_hour

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def advancing(self) -> bool:
        """True while a ruler event is being dispatched."""
        return self._advancing

    def reset(self) -> None:
        self.hour = self.config.starting_hour
        self.day = self.config.starting_day
        self.tick_accumulator = 0
        self._paused = False

    # -- time advancement -------------------------------------------------

    def tick(self) -> None:
        if self._refuse_reentry("tick"):
            return
        if self._paused:
            return
        self.tick_accumulator += 1
        if self.tick_accumulator >= self.ticks_per_hour:
            self.tick_accumulator = 0
            self.advance_hour()

    def advance_hour(self, times: int = 1) -> None:
        """Advance `times` hours, dispatching after each one.

        Each hour is its own rollover, so a burst that revisits a ruler
        fires its event once per visit. Stops early if paused mid-burst.
        """
        if self._refuse_reentry("advance_hour"):
            return
        for _ in range(max(0, times)):
            if self._paused:
                return
            self._step_hour()

    def _step_hour(self) -> None:
        self.hour += 1
        if self.hour > self.hours_per_day:
            self.hour = 1
            self.day += 1
            _logger.info("Day %d begins", self.day)
        _logger.debug("Hour %d of day %d, ruler %s", self.hour, self.day, self.ruler_label())
        self._check_ruler()

    def _check_ruler(self) -> None:
        if self.dispatcher is None:
            return
        self._advancing = True
        try:
            self.registry.dispatch_if_registered(self.ruler_label(), self.dispatcher)
        finally:
            self._advancing = False

    def _refuse_reentry(self, operation: str) -> bool:
        if not self._advancing:
            return False
        error = ReentrantAdvance(f"{operation} called while dispatching")
        _logger.warning("Ignoring reentrant clock call: %s", error)
        return True

    # -- pause / resume ---------------------------------------------------

    def pause(self) -> None:
        if not self._paused:
            _logger.info("Clock paused at day %d hour %d", self.day, self.hour)
        self._paused = True

    def resume(self) -> None:
        if self._paused:
            _logger.info("Clock resumed at day %d hour %d", self.day, self.hour)
        self._paused = False

    # -- scripted setters -------------------------------------------------

    def set_hour(self, value: Any) -> None:
        hour = self._coerce_for_set("hour", value)
        if hour is None:
            return
        clamped = clamp(hour, 1, self.hours_per_day)
        if clamped != hour:
            _logger.warning("Hour %d out of range 1..%d; clamped to %d", hour, self.hours_per_day, clamped)
        self.hour = clamped

    def set_day(self, value: Any) -> None:
        day = self._coerce_for_set("day", value)
        if day is None:
            return
        if day < 1:
            _logger.warning("Day %d out of range; clamped to 1", day)
            day = 1
        self.day = day

    def _coerce_for_set(self, field: str, value: Any) -> Optional[int]:
        try:
            return coerce_int(value)
        except (TypeError, ValueError):
            error = OutOfRangeSet(f"{field}={value!r}")
            _logger.warning("Ignoring non-numeric set: %s", error)
            return None

    # -- accessors --------------------------------------------------------

    def current_hour(self) -> int:
        return self.hour

    def current_day(self) -> int:
        return self.day

    def ruler_label(self) -> str:
        return ruler_for(self.day, self.hour)

    def ruler_meaning(self) -> str:
        return meaning_for(self.ruler_label())

    def is_day_period(self) -> bool:
        return 1 <= self.hour and self.hour * 2 <= self.hours_per_day

    def is_night_period(self) -> bool:
        return not self.is_day_period()

    def register_handler(self, label: str, event_id: Hashable) -> None:
        self.registry.register_handler(label, event_id)

    # -- persistence ------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hour": self.hour,
            "day": self.day,
            "paused": self._paused,
            "tick_accumulator": self.tick_accumulator,
        }

    def load_dict(self, data: Dict[str, Any]) -> None:
        """Restore the four clock fields, clamping anything out of range."""
        self.set_hour(data.get("hour", self.config.starting_hour))
        self.set_day(data.get("day", self.config.starting_day))
        self._paused = bool(data.get("paused", False))
        try:
            accumulator = coerce_int(data.get("tick_accumulator", 0))
        except (TypeError, ValueError):
            _logger.warning("Bad saved tick accumulator %r; using 0", data.get("tick_accumulator"))
            accumulator = 0
        self.tick_accumulator = clamp(accumulator, 0, self.ticks_per_hour - 1)
