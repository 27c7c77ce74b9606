"""On-screen clock window.

A small translucent panel showing the day, hour and planetary ruler. It
only reads from the session; all changes go through commands.
"""
from __future__ import annotations
from typing import List, Optional, Tuple
import pygame

WINDOW_WIDTH = 240
LINE_HEIGHT = 36
PADDING = 18


class ClockWindow:
    def __init__(self, session, position: Tuple[int, int] = (0, 0)):
        self.session = session
        self.x, self.y = position
        self.width = WINDOW_WIDTH
        self.height = PADDING * 2 + LINE_HEIGHT * 2
        self.visible = True
        self.lines: List[str] = []
        try:
            self.font: Optional[pygame.font.Font] = pygame.font.Font(None, 28)
        except pygame.error:
            self.font = None
        self.refresh()

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def refresh(self) -> None:
        clock = self.session.clock
        self.lines = [
            f"Day {clock.current_day()} - Hour {clock.current_hour()}",
            f"Ruler: {clock.ruler_label()}",
        ]

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def display(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return
        panel = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 160))
        surface.blit(panel, (self.x, self.y))
        if self.font is None:
            return
        for i, line in enumerate(self.lines):
            text = self.font.render(line, True, (240, 240, 240))
            surface.blit(text, (self.x + PADDING, self.y + PADDING + i * LINE_HEIGHT))
