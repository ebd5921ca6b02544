"""
obstacle_manager.py
-------------------
Spawns, scrolls and removes the obstacles of a session.

Responsibilities
----------------
- Accumulate elapsed time and spawn one obstacle per spawn interval.
- Advance every live obstacle by the current game speed.
- Remove obstacles that scrolled past the left edge of the play area.
"""

import random

from dino_runner.core.debug.debug_logger import DebugLogger
from dino_runner.core.services.event_manager import ObstacleSpawnedEvent
from dino_runner.entities.obstacle import Obstacle


class ObstacleManager:
    """Owns the spawn timer logic; the obstacle list itself lives on the session."""

    def __init__(self, cfg, rng=None, events=None):
        """
        Args:
            cfg: "obstacles" section of the game config
            rng: random.Random used for obstacle sizes (seed it for replays)
            events: Optional EventManager notified on spawn
        """
        self.min_width = cfg["min_width"]
        self.max_width = cfg["max_width"]
        self.min_height = cfg["min_height"]
        self.max_height = cfg["max_height"]
        self.rng = rng or random.Random()
        self.events = events

        self._spawn_stats = {
            "total_spawned": 0,
            "total_removed": 0,
        }

    # ===========================================================
    # Spawning
    # ===========================================================

    def update_spawn(self, session, dt: float):
        """
        Add `dt` to the spawn timer and spawn when the interval is reached.

        Unlike the score timer the remainder is dropped: the timer goes back
        to zero after each spawn.

        Returns:
            Obstacle | None: The obstacle spawned this cycle, if any.
        """
        session.obstacle_timer += dt
        if session.obstacle_timer < session.spawn_interval:
            return None

        session.obstacle_timer = 0.0
        return self.spawn(session)

    def spawn(self, session) -> Obstacle:
        """Create one obstacle at the right edge with a random size."""
        width = self.min_width + self.rng.random() * (self.max_width - self.min_width)
        height = self.min_height + self.rng.random() * (self.max_height - self.min_height)

        obstacle = Obstacle(width, height)
        session.obstacles.append(obstacle)
        self._spawn_stats["total_spawned"] += 1

        DebugLogger.trace(f"Spawned {obstacle}", category="obstacle")
        if self.events:
            self.events.dispatch(ObstacleSpawnedEvent(width=width, height=height))
        return obstacle

    # ===========================================================
    # Movement & Cleanup
    # ===========================================================

    def advance(self, session, area):
        """
        Scroll every obstacle by the session speed and drop the ones that
        left the play area.

        Returns:
            list[Obstacle]: Obstacles still on screen after this cycle.
        """
        survivors = []
        for obstacle in session.obstacles:
            obstacle.advance(session.speed)
            if not obstacle.is_off_screen(area.width):
                survivors.append(obstacle)

        removed = len(session.obstacles) - len(survivors)
        if removed:
            self._spawn_stats["total_removed"] += removed
            DebugLogger.trace(f"Removed {removed} off-screen obstacle(s)", category="obstacle")
            session.obstacles = survivors

        return survivors

    def clear_all(self, session):
        """Remove every obstacle (session reset)."""
        session.obstacles = []

    def get_stats(self):
        return self._spawn_stats.copy()
