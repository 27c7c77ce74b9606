"""Simple SceneManager to push/pop scenes and forward events/updates/renders."""
from typing import Any, List, Optional
import logging

_logger = logging.getLogger("chaldean_clock.scenes")


class SceneManager:
    def __init__(self):
        self._stack: List[Any] = []

    def push(self, scene, context: Any = None) -> None:
        scene.on_enter(context)
        self._stack.append(scene)

    def pop(self) -> None:
        if not self._stack:
            return
        scene = self._stack.pop()
        scene.on_exit()
        # the revealed scene re-enters with the context it had before
        if self._stack:
            new_top = self._stack[-1]
            new_top.on_enter(getattr(new_top, "context", None))

    def current(self) -> Optional[Any]:
        return self._stack[-1] if self._stack else None

    def handle_event(self, event: object) -> None:
        cur = self.current()
        if cur:
            cur.handle_event(event)

    def update(self, dt: float) -> None:
        cur = self.current()
        if cur:
            cur.update(dt)

    def render(self, surface) -> None:
        cur = self.current()
        if cur:
            cur.render(surface)
