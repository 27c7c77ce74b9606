"""Map scene: the playfield that hosts the clock window.

Keys are routed through the command interpreter so they behave exactly
like script commands:
P pause/resume, N advance one hour, H hide/show the clock, F5 save, F9 load.
"""
import logging

import pygame

from src.chaldean_clock.scenes.base_scene import BaseScene
from src.chaldean_clock.systems.common_events import COMMON_EVENT
from src.chaldean_clock.ui.clock_window import ClockWindow

_logger = logging.getLogger("chaldean_clock.map_scene")

BACKGROUND_DAY = (92, 140, 92)
BACKGROUND_NIGHT = (24, 32, 64)


class MapScene(BaseScene):
    def __init__(self):
        self.window = None
        self.last_event = None
        self._unsubscribe = None

    def on_enter(self, context):
        super().on_enter(context)
        _logger.info("Entering MapScene")
        if self.window is None:
            self.window = ClockWindow(self.session, self.session.config.display_position)
            self.session.attach_display(self.window)
        else:
            self.session.display = self.window
            self.window.refresh()
        if self._unsubscribe is None:
            self._unsubscribe = self.session.bus.subscribe(COMMON_EVENT, self._on_common_event)

    def on_exit(self):
        _logger.info("Exiting MapScene")
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_common_event(self, event_id) -> None:
        _logger.info("Common event %s fired (ruler %s)", event_id, self.session.clock.ruler_label())
        self.last_event = event_id

    def handle_event(self, event):
        if getattr(event, "type", None) != pygame.KEYDOWN:
            return
        key = getattr(event, "key", None)
        interpreter = self.context.interpreter
        if key == pygame.K_p:
            interpreter.run("ResumeTime" if self.session.clock.paused else "PauseTime")
        elif key == pygame.K_n:
            interpreter.run("AdvanceHour 1")
        elif key == pygame.K_h:
            interpreter.run("HideClock" if self.window.visible else "ShowClock")
        elif key == pygame.K_F5:
            self.context.save()
        elif key == pygame.K_F9:
            self.context.load()

    def render(self, surface):
        is_day = self.session.clock.is_day_period()
        surface.fill(BACKGROUND_DAY if is_day else BACKGROUND_NIGHT)
        self.window.display(surface)
