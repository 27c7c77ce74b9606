"""
Unit tests for MapScene key handling and rendering.
"""

import pygame
import pytest
from src.chaldean_clock.app import Application
from src.chaldean_clock.scenes.manager import SceneManager
from src.chaldean_clock.scenes.map_scene import BACKGROUND_DAY, BACKGROUND_NIGHT, MapScene
from src.chaldean_clock.systems.common_events import COMMON_EVENT


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


@pytest.fixture
def app(tmp_path):
    application = Application(data_dir=tmp_path / "data")
    application.start_session()
    return application


@pytest.fixture
def scene(app):
    s = MapScene()
    app.scene_manager.push(s, context=app)
    return s


class TestMapScene:
    """Tests for MapScene."""

    def test_enter_attaches_window(self, app, scene):
        assert app.session.display is scene.window
        assert scene.window.lines[0] == "Day 1 - Hour 1"

    def test_pause_key_toggles(self, app, scene):
        scene.handle_event(key(pygame.K_p))
        assert app.session.clock.paused
        scene.handle_event(key(pygame.K_p))
        assert not app.session.clock.paused

    def test_advance_key_refreshes_window(self, app, scene):
        scene.handle_event(key(pygame.K_n))
        assert app.session.clock.current_hour() == 2
        assert scene.window.lines == ["Day 1 - Hour 2", "Ruler: Jupiter"]

    def test_hide_key_toggles(self, scene):
        scene.handle_event(key(pygame.K_h))
        assert scene.window.visible is False
        scene.handle_event(key(pygame.K_h))
        assert scene.window.visible is True

    def test_save_and_load_keys(self, app, scene):
        app.session.clock.set_hour(9)
        scene.handle_event(key(pygame.K_F5))
        app.session.clock.set_hour(2)
        scene.handle_event(key(pygame.K_F9))
        assert app.session.clock.current_hour() == 9

    def test_common_event_is_observed(self, app, scene):
        app.session.register_handler("Jupiter", 11)
        app.interpreter.run("AdvanceHour")
        app.lifecycle.frame()
        assert scene.last_event == 11

    def test_exit_unsubscribes(self, app, scene):
        app.scene_manager.pop()
        assert app.session.bus.listeners(COMMON_EVENT) == 0

    def test_background_follows_period(self, app, scene, sample_screen):
        scene.render(sample_screen)
        assert sample_screen.get_at((700, 500))[:3] == BACKGROUND_DAY
        app.session.clock.set_hour(20)
        scene.render(sample_screen)
        assert sample_screen.get_at((700, 500))[:3] == BACKGROUND_NIGHT


class TestSceneManager:
    """Tests for SceneManager."""

    def test_pop_reenters_revealed_scene(self, app):
        manager = SceneManager()
        bottom = MapScene()
        top = MapScene()
        manager.push(bottom, context=app)
        manager.push(top, context=app)
        manager.pop()
        assert manager.current() is bottom
        assert bottom.context is app
        assert app.session.display is bottom.window
        assert app.session.bus.listeners(COMMON_EVENT) == 1
