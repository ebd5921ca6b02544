"""
collision_manager.py
--------------------
Player-versus-obstacle collision detection.

Responsibilities
----------------
- Build the player's and each obstacle's hitbox for the current cycle.
- Report the first obstacle whose box overlaps the player's.
- Never mutate the player or the obstacles; the caller decides what a hit means.
"""

from dino_runner.core.debug.debug_logger import DebugLogger
from dino_runner.systems.collision.hitbox import Hitbox


class CollisionManager:
    """Detects collisions but lets the game controller decide what happens."""

    def __init__(self):
        self.last_player_box = None
        self.last_hit = None

    def detect(self, player, obstacles, area):
        """
        Find the first obstacle overlapping the player.

        Obstacles after the first hit are not evaluated.

        Returns:
            Obstacle | None: The colliding obstacle, or None.
        """
        player_box = Hitbox.for_player(player, area)
        self.last_player_box = player_box
        self.last_hit = None

        for obstacle in obstacles:
            obstacle_box = Hitbox.for_obstacle(obstacle, area)
            if player_box.overlaps(obstacle_box):
                DebugLogger.state(
                    f"Collision: {player_box} x {obstacle_box}",
                    category="collision"
                )
                self.last_hit = obstacle
                return obstacle

        return None
