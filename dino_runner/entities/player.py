"""
player.py
---------
The runner the user controls.

Responsibilities
----------------
- Hold vertical position (bottom offset above the floor of the play area)
  and vertical velocity.
- Track the airborne flag and the running-animation flag.
- Provide the jump and landing transitions; per-cycle integration lives in
  systems/physics.py.
"""

from dino_runner.core.debug.debug_logger import DebugLogger
from dino_runner.entities.entity_state import PlayerStatus


class Player:
    """Single-lane runner with fixed horizontal placement."""

    __slots__ = (
        'left', 'width', 'height', 'ground_level',
        'bottom', 'velocity', 'is_jumping', 'is_running', 'status',
    )

    def __init__(self, cfg, ground_level):
        """
        Args:
            cfg: "player" section of the game config (left, width, height)
            ground_level: Bottom offset the player rests on
        """
        self.left = cfg["left"]
        self.width = cfg["width"]
        self.height = cfg["height"]
        self.ground_level = ground_level

        self.bottom = ground_level
        self.velocity = 0.0
        self.is_jumping = False
        self.is_running = False
        self.status = PlayerStatus.NORMAL

    # ===========================================================
    # Transitions
    # ===========================================================

    def reset(self):
        """Put the player back on the ground with a clean status."""
        self.bottom = self.ground_level
        self.velocity = 0.0
        self.is_jumping = False
        self.is_running = True
        self.status = PlayerStatus.NORMAL

    def jump(self, force: float) -> bool:
        """
        Launch the player if grounded.

        Returns:
            bool: True if the jump started, False while already airborne.
        """
        if self.is_jumping:
            return False

        self.is_jumping = True
        self.velocity = force
        self.is_running = False
        DebugLogger.trace(f"Jump with velocity {force}", category="physics")
        return True

    def land(self):
        """Clamp to the ground and resume running."""
        self.bottom = self.ground_level
        self.velocity = 0.0
        self.is_jumping = False
        self.is_running = True

    def kill(self):
        """Show the terminal status and stop the running animation."""
        self.status = PlayerStatus.DEAD
        self.is_running = False

    @property
    def right(self):
        return self.left + self.width

    def __repr__(self):
        return (f"Player(bottom={self.bottom:.2f}, velocity={self.velocity:.2f}, "
                f"jumping={self.is_jumping})")
