"""
gameplay_controller.py
----------------------
Game state machine and per-frame update cycle.

Responsibilities
----------------
- Own the GameSession and the systems that act on it.
- Handle the start / jump inputs (IDLE|GAME_OVER -> RUNNING, jump while grounded).
- Run one update cycle per frame in a fixed order:
  score -> difficulty -> physics -> spawn -> advance + collision.
- End the run on the first collision and freeze further updates.
"""

from dino_runner.core.debug.debug_logger import DebugLogger
from dino_runner.core.runtime.frame_clock import FrameClock
from dino_runner.core.runtime.game_config import load_game_config
from dino_runner.core.runtime.game_session import GameSession, SessionState
from dino_runner.core.runtime.play_area import GeometryError, StaticGeometry
from dino_runner.core.services.event_manager import (
    EventManager,
    GameOverEvent,
    GameStartedEvent,
    PlayerJumpedEvent,
    ScoreChangedEvent,
)
from dino_runner.entities.player import Player
from dino_runner.systems.collision.collision_manager import CollisionManager
from dino_runner.systems.difficulty import DifficultyController
from dino_runner.systems.obstacle_manager import ObstacleManager
from dino_runner.systems.physics import JumpPhysics
from dino_runner.systems.score_tracker import ScoreTracker


class GameplayController:
    """Coordinates the runner's systems around a single session."""

    def __init__(self, config=None, geometry=None, events=None, rng=None):
        """
        Args:
            config: Full game config dict (loaded from game.json if omitted)
            geometry: Provider with get_play_area(); defaults to the configured size
            events: EventManager for observers (a private one if omitted)
            rng: random.Random for obstacle sizes
        """
        self.cfg = config if config is not None else load_game_config()
        area_cfg = self.cfg["play_area"]

        self.geometry = geometry or StaticGeometry(
            area_cfg["width"], area_cfg["height"], area_cfg["ground_height"]
        )
        self.events = events or EventManager()
        self.clock = FrameClock()

        self.physics = JumpPhysics(self.cfg["physics"])
        self.difficulty = DifficultyController(self.cfg["difficulty"])
        self.score_tracker = ScoreTracker(self.cfg["score"])
        self.obstacle_manager = ObstacleManager(self.cfg["obstacles"], rng=rng, events=self.events)
        self.collision_manager = CollisionManager()

        player = Player(self.cfg["player"], ground_level=area_cfg["ground_height"])
        self.session = GameSession(player)

        DebugLogger.init_entry("GameplayController")

    @property
    def state(self) -> SessionState:
        return self.session.state

    @property
    def player(self):
        return self.session.player

    # ===========================================================
    # Input Transitions
    # ===========================================================

    def start(self, now: float) -> bool:
        """
        Begin a new run. Ignored while a run is in progress.

        Returns:
            bool: True if the session transitioned to RUNNING.
        """
        if self.session.is_running:
            return False

        self.obstacle_manager.clear_all(self.session)
        self.session.reset(
            self.difficulty.base_speed,
            self.difficulty.base_spawn_interval,
        )
        self.collision_manager.last_hit = None
        self.clock.start(now)
        self.session.state = SessionState.RUNNING

        DebugLogger.state("Game started", category="game_state")
        self.events.dispatch(GameStartedEvent(timestamp=now))
        return True

    def jump(self) -> bool:
        """
        Launch the player. Ignored unless running and grounded.

        Returns:
            bool: True if a jump started.
        """
        if not self.session.is_running:
            return False

        if not self.player.jump(self.physics.jump_force):
            return False

        self.events.dispatch(PlayerJumpedEvent(velocity=self.physics.jump_force))
        return True

    def press(self, now: float) -> bool:
        """Single-button control: start when stopped, jump when running."""
        if self.session.is_running:
            return self.jump()
        return self.start(now)

    # ===========================================================
    # Update Cycle
    # ===========================================================

    def update(self, now: float) -> bool:
        """
        Run one frame of game logic.

        Args:
            now: Current timestamp in the same units as the config timers (ms)

        Returns:
            bool: True if the cycle ran, False if it was skipped.
        """
        if not self.session.is_running:
            return False

        try:
            area = self.geometry.get_play_area()
        except GeometryError as e:
            DebugLogger.warn(f"Skipping cycle: {e}", category="game_state")
            return False

        session = self.session
        dt = self.clock.tick(now)

        # 1. Score
        if self.score_tracker.update(session, dt):
            self.events.dispatch(ScoreChangedEvent(score=session.score))

        # 2. Difficulty
        self.difficulty.apply(session)

        # 3. Jump physics
        self.physics.update(session.player, dt)

        # 4. Spawning
        self.obstacle_manager.update_spawn(session, dt)

        # 5. Movement & collision
        survivors = self.obstacle_manager.advance(session, area)
        if self.collision_manager.detect(session.player, survivors, area) is not None:
            self._end_game()

        return True

    def _end_game(self):
        session = self.session
        session.state = SessionState.GAME_OVER
        session.final_score = session.score
        session.player.kill()

        DebugLogger.state(f"Game Over. Final Score: {session.score}", category="game_state")
        self.events.dispatch(GameOverEvent(final_score=session.score))

    # ===========================================================
    # Presentation
    # ===========================================================

    def snapshot(self):
        return self.session.snapshot()
