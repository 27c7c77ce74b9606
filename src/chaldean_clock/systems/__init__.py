"""Systems package for the clock.

Clock state, planetary rulers, script commands, host event dispatch and
save/load live here.
"""

__all__ = [
    "clock",
    "commands",
    "common_events",
    "event_bus",
    "planetary",
    "save",
    "save_system",
]
