"""Configuration defaults and constants for the clock.

Parameters are parsed forgivingly: a malformed or out-of-range value is
logged and replaced by its default (or clamped), never raised to the host.
"""
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple
import logging

from src.chaldean_clock.data.loader import load_json
from src.chaldean_clock.errors import InvalidConfiguration
from src.chaldean_clock.utils.parsing import clamp, coerce_bool, coerce_int

_logger = logging.getLogger("chaldean_clock.config")


FRAMES_PER_SECOND: int = 60
DEFAULT_WINDOW_SIZE: Tuple[int, int] = (816, 624)
DEFAULT_STARTING_HOUR: int = 1
DEFAULT_STARTING_DAY: int = 1
DEFAULT_HOURS_PER_DAY: int = 24
DEFAULT_SECONDS_PER_HOUR: int = 60  # one real minute per in-game hour

# Plugin-style parameter names accepted alongside the field names.
PARAMETER_ALIASES: Dict[str, str] = {
    "Starting Hour": "starting_hour",
    "Starting Day": "starting_day",
    "Hours Per Day": "hours_per_day",
    "Show Clock": "show_display",
    "Clock X": "display_x",
    "Clock Y": "display_y",
    "Seconds Per Hour": "seconds_per_hour",
}


@dataclass
class ClockConfig:
    starting_hour: int = DEFAULT_STARTING_HOUR
    starting_day: int = DEFAULT_STARTING_DAY
    hours_per_day: int = DEFAULT_HOURS_PER_DAY
    show_display: bool = True
    display_x: int = 0
    display_y: int = 0
    seconds_per_hour: int = DEFAULT_SECONDS_PER_HOUR

    @property
    def ticks_per_hour(self) -> int:
        return FRAMES_PER_SECOND * self.seconds_per_hour

    @property
    def display_position(self) -> Tuple[int, int]:
        return (self.display_x, self.display_y)

    @classmethod
    def from_params(cls, params: Optional[Mapping[str, Any]]) -> "ClockConfig":
        """Build a config from plugin-style or snake_case parameters.

        Missing keys take their defaults. Malformed values are reported as
        InvalidConfiguration in the log and replaced, never raised.
        """
        raw: Dict[str, Any] = {}
        known = {f.name for f in fields(cls)}
        for key, value in (params or {}).items():
            name = PARAMETER_ALIASES.get(key, key)
            if name not in known:
                _logger.warning("Ignoring unknown clock parameter %r", key)
                continue
            if value is None or (isinstance(value, str) and not value.strip()):
                continue
            raw[name] = value

        defaults = cls()
        hours_per_day = _positive_int(raw, "hours_per_day", defaults.hours_per_day)
        seconds_per_hour = _positive_int(raw, "seconds_per_hour", defaults.seconds_per_hour)
        starting_hour = _int(raw, "starting_hour", defaults.starting_hour)
        starting_day = _int(raw, "starting_day", defaults.starting_day)

        clamped_hour = clamp(starting_hour, 1, hours_per_day)
        if clamped_hour != starting_hour:
            _report("starting_hour", starting_hour, f"clamped to {clamped_hour}")
        clamped_day = max(1, starting_day)
        if clamped_day != starting_day:
            _report("starting_day", starting_day, f"clamped to {clamped_day}")

        show_display = defaults.show_display
        if "show_display" in raw:
            try:
                show_display = coerce_bool(raw["show_display"])
            except ValueError:
                _report("show_display", raw["show_display"], f"using default {show_display}")

        return cls(
            starting_hour=clamped_hour,
            starting_day=clamped_day,
            hours_per_day=hours_per_day,
            show_display=show_display,
            display_x=_int(raw, "display_x", defaults.display_x),
            display_y=_int(raw, "display_y", defaults.display_y),
            seconds_per_hour=seconds_per_hour,
        )


def _report(key: str, value: Any, outcome: str) -> None:
    error = InvalidConfiguration(f"{key}={value!r}")
    _logger.warning("Invalid clock configuration (%s); %s", error, outcome)


def _int(raw: Dict[str, Any], key: str, default: int) -> int:
    if key not in raw:
        return default
    try:
        return coerce_int(raw[key])
    except ValueError:
        _report(key, raw[key], f"using default {default}")
        return default


def _positive_int(raw: Dict[str, Any], key: str, default: int) -> int:
    value = _int(raw, key, default)
    if value < 1:
        _report(key, value, f"using default {default}")
        return default
    return value


def load_config(path: Optional[Path]) -> ClockConfig:
    """Load a ClockConfig from a JSON file, falling back to defaults."""
    if path is None:
        return ClockConfig()
    try:
        data = load_json(Path(path))
    except (OSError, ValueError) as e:
        _report("config file", str(path), f"unreadable ({e}); using defaults")
        return ClockConfig()
    if data is None:
        return ClockConfig()
    if not isinstance(data, dict):
        _logger.warning("Clock config %s is not an object; using defaults", path)
        return ClockConfig()
    params = data.get("parameters", data)
    if not isinstance(params, dict):
        _logger.warning("Clock config %s has malformed parameters; using defaults", path)
        return ClockConfig()
    return ClockConfig.from_params(params)
