"""
difficulty.py
-------------
Stepped difficulty curve driven by score.

Every `tier_size` points the scroll speed rises by `speed_step` and the
spawn interval shrinks by `spawn_interval_step`, both clamped. The result
depends on the tier alone, so recomputing it every cycle is idempotent.
"""

from dino_runner.core.debug.debug_logger import DebugLogger


class DifficultyController:

    def __init__(self, cfg):
        """
        Args:
            cfg: "difficulty" section of the game config
        """
        self.tier_size = cfg["tier_size"]
        self.base_speed = cfg["base_speed"]
        self.speed_step = cfg["speed_step"]
        self.max_speed = cfg["max_speed"]
        self.base_spawn_interval = cfg["base_spawn_interval"]
        self.spawn_interval_step = cfg["spawn_interval_step"]
        self.min_spawn_interval = cfg["min_spawn_interval"]

    def tier(self, score: int) -> int:
        return score // self.tier_size

    def speed_for(self, score: int) -> float:
        return min(self.max_speed, self.base_speed + self.tier(score) * self.speed_step)

    def spawn_interval_for(self, score: int) -> float:
        return max(self.min_spawn_interval,
                   self.base_spawn_interval - self.tier(score) * self.spawn_interval_step)

    def apply(self, session) -> None:
        """Write speed and spawn interval for the session's current score."""
        speed = self.speed_for(session.score)
        interval = self.spawn_interval_for(session.score)

        if speed != session.speed or interval != session.spawn_interval:
            DebugLogger.state(
                f"Tier {self.tier(session.score)}: speed {speed}, spawn every {interval}",
                category="difficulty"
            )

        session.speed = speed
        session.spawn_interval = interval
