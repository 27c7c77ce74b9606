"""Error types for the clock.

None of these are fatal to the host: they are raised inside parsers and
registries and caught at the session/command boundary, where they are
logged and the offending input is ignored.
"""


class ClockError(Exception):
    pass


class InvalidConfiguration(ClockError):
    pass


class InvalidLabel(ClockError):
    pass


class OutOfRangeSet(ClockError):
    pass


class CommandError(ClockError):
    pass


class ReentrantAdvance(ClockError):
    pass
