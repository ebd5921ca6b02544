"""
conftest.py
-----------
Shared pytest configuration and fixtures for Dino Runner tests.

Contains:
- Headless pygame setup (dummy video driver, no support banner)
- Common fixtures: config, seeded controller, event recorder
- Pytest markers and hooks
"""

import copy
import os
import random
import sys

import pytest

# Must be set before pygame is first imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Make the package importable when running from a plain checkout
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dino_runner.core.debug.debug_logger import LoggerConfig  # noqa: E402
from dino_runner.core.runtime.game_config import DEFAULT_CONFIG  # noqa: E402
from dino_runner.core.runtime.play_area import PlayArea  # noqa: E402
from dino_runner.core.services.event_manager import EventManager  # noqa: E402
from dino_runner.scenes.gameplay_controller import GameplayController  # noqa: E402


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep test output clean; individual tests re-enable logging as needed."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


@pytest.fixture
def game_config():
    """Fresh copy of the default gameplay config."""
    return copy.deepcopy(DEFAULT_CONFIG)


@pytest.fixture
def play_area(game_config):
    area = game_config["play_area"]
    return PlayArea(area["width"], area["height"], area["ground_height"])


@pytest.fixture
def event_manager():
    return EventManager()


@pytest.fixture
def recorded_events(event_manager):
    """EventManager wrapper that keeps every dispatched event in order."""
    seen = []
    original = event_manager.dispatch

    def dispatch(event):
        seen.append(event)
        original(event)

    event_manager.dispatch = dispatch
    return seen


@pytest.fixture
def controller(game_config, event_manager):
    """GameplayController with a seeded RNG and the default 800x250 area."""
    return GameplayController(game_config, events=event_manager, rng=random.Random(1234))


# ===========================================================
# Test utilities
# ===========================================================

def run_frames(controller, start, frames, step):
    """
    Call controller.update() `frames` times, `step` time units apart.

    Returns:
        float: Timestamp of the last frame.
    """
    now = start
    for _ in range(frames):
        now += step
        controller.update(now)
    return now


@pytest.fixture
def frame_runner():
    """Expose run_frames to test modules."""
    return run_frames


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside integration tests as a unit test."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
