"""
game_session.py
---------------
State of one run, plus the read-only snapshot handed to the renderer.

A single GameSession lives as long as the GameplayController that owns it;
starting a new run resets it in place.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from dino_runner.entities.entity_state import PlayerStatus


class SessionState(IntEnum):
    """
    IDLE      -> before the first run
    RUNNING   -> frame updates are applied
    GAME_OVER -> frozen after a collision until the next start
    """
    IDLE = 0
    RUNNING = 1
    GAME_OVER = 2


# ===========================================================
# Snapshot (presentation side)
# ===========================================================

@dataclass(frozen=True)
class ObstacleView:
    offset: float
    width: float
    height: float


@dataclass(frozen=True)
class GameSnapshot:
    """Everything the presentation layer needs to draw a frame."""
    state: SessionState
    score: int
    player_bottom: float
    player_jumping: bool
    player_running: bool
    player_status: PlayerStatus
    obstacles: Tuple[ObstacleView, ...]
    message: str
    message_visible: bool


# ===========================================================
# Session
# ===========================================================

class GameSession:

    def __init__(self, player):
        self.player = player
        self.obstacles = []

        self.state = SessionState.IDLE
        self.score = 0
        self.final_score = None
        self.speed = 0.0
        self.spawn_interval = 0.0

        self.score_timer = 0.0
        self.obstacle_timer = 0.0

    @property
    def is_running(self) -> bool:
        return self.state == SessionState.RUNNING

    def reset(self, base_speed, base_spawn_interval):
        """Clear per-run values for a fresh start."""
        self.obstacles = []
        self.score = 0
        self.final_score = None
        self.speed = base_speed
        self.spawn_interval = base_spawn_interval
        self.score_timer = 0.0
        self.obstacle_timer = 0.0
        self.player.reset()

    def game_over_message(self) -> str:
        if self.final_score is None:
            return ""
        return f"GAME OVER!\nFinal Score: {self.final_score}\nPress SPACE or RESTART"

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            state=self.state,
            score=self.score,
            player_bottom=self.player.bottom,
            player_jumping=self.player.is_jumping,
            player_running=self.player.is_running,
            player_status=self.player.status,
            obstacles=tuple(ObstacleView(o.offset, o.width, o.height) for o in self.obstacles),
            message=self.game_over_message(),
            message_visible=self.state == SessionState.GAME_OVER,
        )
