"""
test_score_tracker.py
---------------------
Score accrual with remainder carry-forward.
"""

import random

import pytest

from dino_runner.core.runtime.game_session import GameSession
from dino_runner.entities.player import Player
from dino_runner.systems.score_tracker import ScoreTracker


@pytest.fixture
def session(game_config):
    return GameSession(Player(game_config["player"], ground_level=10))


@pytest.fixture
def tracker(game_config):
    return ScoreTracker(game_config["score"])


def test_below_interval_awards_nothing(tracker, session):
    assert tracker.update(session, 99) == 0
    assert session.score == 0
    assert session.score_timer == 99


def test_exact_interval_awards_one(tracker, session):
    assert tracker.update(session, 100) == 1
    assert session.score == 1
    assert session.score_timer == 0


def test_remainder_carries_forward(tracker, session):
    tracker.update(session, 130)
    assert session.score == 1
    assert session.score_timer == 30

    tracker.update(session, 70)
    assert session.score == 2
    assert session.score_timer == 0


def test_long_cycle_pays_every_interval(tracker, session):
    assert tracker.update(session, 350) == 3
    assert session.score_timer == 50


def test_no_drift_over_many_small_steps(tracker, session):
    rng = random.Random(7)
    total = 0
    for _ in range(5000):
        dt = rng.randint(1, 40)
        total += dt
        tracker.update(session, dt)

    assert session.score == total // 100
    assert session.score_timer == total % 100
