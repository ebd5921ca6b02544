"""
test_hud_manager.py
-------------------
Snapshot -> draw call translation and event-driven score text.
"""

from unittest.mock import MagicMock

import pytest

from dino_runner.core.runtime.game_session import SessionState
from dino_runner.core.runtime.game_settings import Colors, Layers
from dino_runner.core.services.event_manager import ScoreChangedEvent
from dino_runner.entities.obstacle import Obstacle
from dino_runner.ui.hud_manager import IDLE_HINT, HudManager


@pytest.fixture
def draw_manager():
    return MagicMock()


@pytest.fixture
def hud(draw_manager, game_config, event_manager):
    return HudManager(draw_manager, game_config, event_manager, (800, 250))


def queued_texts(draw_manager):
    return [c.args[0] for c in draw_manager.queue_text.call_args_list]


def queued_rects(draw_manager, layer):
    return [c.args for c in draw_manager.queue_rect.call_args_list if c.args[2] == layer]


def test_idle_shows_start_hint(hud, draw_manager, controller):
    hud.draw(controller.snapshot())

    assert IDLE_HINT in queued_texts(draw_manager)
    assert "Score: 0" in queued_texts(draw_manager)
    assert hud.restart_rect is None


def test_score_text_follows_events(hud, event_manager, controller, frame_runner):
    controller.start(0)
    frame_runner(controller, 0, 25, 10)

    assert hud.score_text == "Score: 2"

    event_manager.dispatch(ScoreChangedEvent(score=77))
    assert hud.score_text == "Score: 77"

    controller.session.state = SessionState.GAME_OVER
    controller.start(1000)
    assert hud.score_text == "Score: 0"


def test_obstacle_drawn_on_ground(hud, draw_manager, controller):
    controller.start(0)
    controller.session.obstacles.append(Obstacle(20, 40, offset=100))

    hud.draw(controller.snapshot())

    rects = queued_rects(draw_manager, Layers.OBSTACLES)
    assert rects == [((680, 200, 20, 40), Colors.OBSTACLE, Layers.OBSTACLES)]


def test_game_over_shows_message_and_button(hud, draw_manager, controller):
    controller.start(0)
    controller.session.obstacles.append(Obstacle(20, 40, offset=746))
    controller.update(16)

    hud.draw(controller.snapshot())

    assert any("Final Score: 0" in text for text in queued_texts(draw_manager))
    assert "RESTART" in queued_texts(draw_manager)
    assert hud.restart_rect is not None

    player_colors = {args[1] for args in queued_rects(draw_manager, Layers.PLAYER)}
    assert player_colors == {Colors.PLAYER_DEAD}


def test_button_hidden_again_after_restart(hud, draw_manager, controller):
    controller.start(0)
    controller.session.obstacles.append(Obstacle(20, 40, offset=746))
    controller.update(16)
    hud.draw(controller.snapshot())

    controller.start(100)
    hud.draw(controller.snapshot())

    assert hud.restart_rect is None
