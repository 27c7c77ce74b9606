from __future__ import annotations

"""Application bootstrap and main loop for the Chaldean clock demo.

Builds one Session per run, wires it to the host lifecycle and drives it
from a pygame loop at a fixed frame rate.
"""
from pathlib import Path
import logging
from typing import Iterable, Optional

from src.chaldean_clock.config import DEFAULT_WINDOW_SIZE, FRAMES_PER_SECOND, load_config
from src.chaldean_clock.data.loader import load_lines
from src.chaldean_clock.host import HostLifecycle
from src.chaldean_clock.logger import configure_logging
from src.chaldean_clock.scenes.manager import SceneManager
from src.chaldean_clock.session import Session
from src.chaldean_clock.systems.commands import CommandInterpreter
from src.chaldean_clock.systems.save import SaveError
from src.chaldean_clock.systems.save_system import SaveSystem


_logger = logging.getLogger("chaldean_clock.app")


class Application:
    def __init__(
        self,
        config_path: Optional[Path] = None,
        data_dir: Optional[Path] = None,
        debug: bool = False,
        save_slot: int = 1,
        script_path: Optional[Path] = None,
        load_on_start: bool = False,
        log_file: Optional[Path] = None,
    ):
        self.debug = debug
        configure_logging(debug, log_file)
        self.data_dir = Path(data_dir) if data_dir is not None else Path.cwd() / "data"
        self.save_slot = save_slot
        self.script_path = Path(script_path) if script_path is not None else None
        self.load_on_start = load_on_start
        self.running = False

        self.config = load_config(config_path)
        self.lifecycle = HostLifecycle()
        self.session = Session(self.config)
        self.session.install(self.lifecycle)
        self.interpreter = CommandInterpreter(self.session)
        self.save_system = SaveSystem(self.data_dir)
        self.scene_manager = SceneManager()

        _logger.info("Application initialized. data=%s", self.data_dir)

    def start_session(self) -> None:
        self.lifecycle.start_session()
        if self.load_on_start:
            self.load()
        if self.script_path is not None:
            self.run_script(load_lines(self.script_path))

    def run_script(self, lines: Iterable[str]) -> int:
        count = self.interpreter.run_script(lines)
        _logger.info("Ran %d script commands", count)
        return count

    def save(self) -> Optional[Path]:
        try:
            return self.save_system.save(self.save_slot, self.session)
        except SaveError:
            _logger.exception("Failed to save slot %s", self.save_slot)
            return None

    def load(self) -> bool:
        return self.save_system.load(self.save_slot, self.session)

    def run(self, frames: Optional[int] = None) -> None:
        """Run the pygame loop; stop after `frames` frames when given."""
        import pygame  # type: ignore

        from src.chaldean_clock.scenes.map_scene import MapScene

        pygame.init()
        pygame.font.init()
        screen = pygame.display.set_mode(DEFAULT_WINDOW_SIZE)
        pygame.display.set_caption("Chaldean Clock")
        clock = pygame.time.Clock()

        self.start_session()
        self.scene_manager.push(MapScene(), context=self)

        self.running = True
        try:
            while self.running:
                dt = clock.tick(FRAMES_PER_SECOND) / 1000.0
                for ev in pygame.event.get():
                    if ev.type == pygame.QUIT:
                        self.running = False
                    else:
                        self.scene_manager.handle_event(ev)

                self.lifecycle.frame()
                self.scene_manager.update(dt)

                self.scene_manager.render(screen)
                pygame.display.flip()
                if frames is not None and self.lifecycle.frame_count >= frames:
                    self.running = False
        except Exception:
            _logger.exception("Unhandled exception in main loop")
            raise
        finally:
            self.shutdown()
            pygame.quit()

    def shutdown(self) -> None:
        _logger.info("Shutting down application")
        self.save()
