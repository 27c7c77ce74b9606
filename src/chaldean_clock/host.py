"""Host lifecycle extension points.

The clock initializes once per session and ticks once per rendered frame.
Rather than wrapping the host's own update methods, subsystems register
hooks here and the host calls `start_session()` and `frame()`.
"""
from typing import Callable, List
import logging

_logger = logging.getLogger("chaldean_clock.host")

Hook = Callable[[], None]


class HostLifecycle:
    def __init__(self):
        self._init_hooks: List[Hook] = []
        self._frame_hooks: List[Hook] = []
        self.session_started = False
        self.frame_count = 0

    def on_session_init(self, hook: Hook) -> Hook:
        self._init_hooks.append(hook)
        return hook

    def on_frame_tick(self, hook: Hook) -> Hook:
        self._frame_hooks.append(hook)
        return hook

    def start_session(self) -> None:
        if self.session_started:
            _logger.warning("Session already started; ignoring second start")
            return
        self.session_started = True
        _logger.info("Starting session (%d init hooks)", len(self._init_hooks))
        self._run(self._init_hooks, "session init")

    def frame(self) -> None:
        self.frame_count += 1
        self._run(self._frame_hooks, "frame tick")

    def _run(self, hooks: List[Hook], phase: str) -> None:
        for hook in list(hooks):
            try:
                hook()
            except Exception:
                _logger.exception("Error in %s hook %s", phase, hook)
