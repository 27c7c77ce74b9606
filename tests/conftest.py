"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test files.
"""

import os

# Headless display for the window tests; must be set before pygame is imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
import pygame
from typing import Generator


@pytest.fixture(scope="session", autouse=True)
def pygame_init() -> Generator[None, None, None]:
    """
    Initialize pygame for the test session.
    This runs once before all tests and cleans up after.
    """
    pygame.init()
    pygame.font.init()
    pygame.display.set_mode((800, 600), pygame.HIDDEN)
    yield
    pygame.quit()


@pytest.fixture
def sample_screen() -> pygame.Surface:
    """
    Create a sample pygame surface for tests that need a screen.
    """
    return pygame.Surface((800, 600))


@pytest.fixture
def fast_config():
    """
    A ClockConfig where one hour passes every 60 ticks (one second).
    """
    from src.chaldean_clock.config import ClockConfig
    return ClockConfig(seconds_per_hour=1)


@pytest.fixture
def dispatched():
    """
    A list that collects every event id passed to the `record` dispatcher.
    """
    return []


@pytest.fixture
def clock(fast_config, dispatched):
    """
    A ClockState that records dispatched event ids.
    """
    from src.chaldean_clock.systems.clock import ClockState
    return ClockState(fast_config, dispatcher=dispatched.append)


@pytest.fixture
def session(fast_config):
    """
    A Session using the fast config, already initialized.
    """
    from src.chaldean_clock.session import Session
    s = Session(fast_config)
    s.on_session_init()
    return s


@pytest.fixture
def interpreter(session):
    """
    A CommandInterpreter bound to the `session` fixture.
    """
    from src.chaldean_clock.systems.commands import CommandInterpreter
    return CommandInterpreter(session)
