"""Base class for scenes that run on top of a clock session.

`context` is the Application; scenes reach the clock through
`self.session` rather than any global.
"""
from typing import Any, Optional


class BaseScene:
    context: Optional[Any] = None

    @property
    def session(self):
        return getattr(self.context, "session", None)

    def on_enter(self, context: Any) -> None:
        self.context = context

    def on_exit(self) -> None:
        pass

    def handle_event(self, event: object) -> None:
        pass

    def update(self, dt: float) -> None:
        pass

    def render(self, surface: object) -> None:
        raise NotImplementedError()
