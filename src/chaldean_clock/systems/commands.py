"""Script commands for driving the clock from events and scripts.

Command names are the plugin-command spellings (SetHour, AdvanceHour, ...)
and match case-insensitively. Lines are parsed into a `Command` up front,
so a malformed line is rejected before anything touches the clock.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Tuple
import logging

from src.chaldean_clock.errors import ClockError, CommandError, OutOfRangeSet
from src.chaldean_clock.systems.planetary import normalize_label
from src.chaldean_clock.utils.parsing import coerce_int

_logger = logging.getLogger("chaldean_clock.commands")

# upper bound for one AdvanceHour command: a year of 24-hour days
MAX_ADVANCE_HOURS = 24 * 365


class CommandKind(Enum):
    SET_HOUR = ("SetHour", 1, 1)
    SET_DAY = ("SetDay", 1, 1)
    ADVANCE_HOUR = ("AdvanceHour", 0, 1)
    PAUSE_TIME = ("PauseTime", 0, 0)
    RESUME_TIME = ("ResumeTime", 0, 0)
    REGISTER_EVENT = ("RegisterEvent", 2, 2)
    HIDE_CLOCK = ("HideClock", 0, 0)
    SHOW_CLOCK = ("ShowClock", 0, 0)

    def __init__(self, script_name: str, min_args: int, max_args: int):
        self.script_name = script_name
        self.min_args = min_args
        self.max_args = max_args


_KINDS_BY_NAME: Dict[str, CommandKind] = {kind.script_name.lower(): kind for kind in CommandKind}


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    args: Tuple = ()

    def __str__(self) -> str:
        return " ".join([self.kind.script_name] + [str(a) for a in self.args])


def _int_arg(kind: CommandKind, text: str) -> int:
    try:
        return coerce_int(text)
    except ValueError:
        raise OutOfRangeSet(f"{kind.script_name} expects a number, got {text!r}")


def parse_command(line: str) -> Command:
    parts = line.split()
    if not parts:
        raise CommandError("Empty command")
    kind = _KINDS_BY_NAME.get(parts[0].lower())
    if kind is None:
        raise CommandError(f"Unknown command: {parts[0]!r}")
    args = parts[1:]
    if not kind.min_args <= len(args) <= kind.max_args:
        raise CommandError(f"{kind.script_name} takes {kind.min_args}-{kind.max_args} arguments, got {len(args)}")

    if kind in (CommandKind.SET_HOUR, CommandKind.SET_DAY):
        return Command(kind, (_int_arg(kind, args[0]),))
    if kind is CommandKind.ADVANCE_HOUR:
        times = _int_arg(kind, args[0]) if args else 1
        if times < 1:
            raise OutOfRangeSet(f"AdvanceHour needs at least 1 hour, got {times}")
        if times > MAX_ADVANCE_HOURS:
            raise OutOfRangeSet(f"AdvanceHour is limited to {MAX_ADVANCE_HOURS} hours, got {times}")
        return Command(kind, (times,))
    if kind is CommandKind.REGISTER_EVENT:
        return Command(kind, (normalize_label(args[0]), _int_arg(kind, args[1])))
    return Command(kind)


class CommandInterpreter:
    """Executes parsed commands against a Session."""

    def __init__(self, session):
        self.session = session
        self._handlers: Dict[CommandKind, Callable[[Command], None]] = {
            CommandKind.SET_HOUR: lambda c: session.clock.set_hour(c.args[0]),
            CommandKind.SET_DAY: lambda c: session.clock.set_day(c.args[0]),
            CommandKind.ADVANCE_HOUR: lambda c: session.clock.advance_hour(c.args[0]),
            CommandKind.PAUSE_TIME: lambda c: session.clock.pause(),
            CommandKind.RESUME_TIME: lambda c: session.clock.resume(),
            CommandKind.REGISTER_EVENT: lambda c: session.register_handler(c.args[0], c.args[1]),
            CommandKind.HIDE_CLOCK: lambda c: session.hide_display(),
            CommandKind.SHOW_CLOCK: lambda c: session.show_display(),
        }
        missing = set(CommandKind) - set(self._handlers)
        if missing:
            raise ValueError(f"No handler for commands: {sorted(k.script_name for k in missing)}")

    def execute(self, command: Command) -> None:
        _logger.info("Command: %s", command)
        self._handlers[command.kind](command)
        self.session.refresh_display()

    def run(self, line: str) -> bool:
        """Parse and execute one line. Bad lines are logged and skipped."""
        try:
            command = parse_command(line)
        except ClockError as e:
            _logger.warning("Skipping command %r: %s", line, e)
            return False
        self.execute(command)
        return True

    def run_script(self, lines: Iterable[str]) -> int:
        executed = 0
        for raw in lines:
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            if self.run(line):
                executed += 1
        return executed

