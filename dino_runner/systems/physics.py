"""
physics.py
----------
Vertical motion of the player under constant gravity.

Responsibilities
----------------
- Integrate position and velocity once per cycle while airborne.
- Clamp to the ground exactly on landing (no overshoot below it).

Steps are per frame by default, which ties the jump arc to the refresh
rate. With time scaling enabled each step is weighted by the cycle delta
relative to a reference frame instead.
"""

from dino_runner.core.debug.debug_logger import DebugLogger


class JumpPhysics:
    """Gravity/jump constants plus the per-cycle integration step."""

    def __init__(self, cfg):
        """
        Args:
            cfg: "physics" section of the game config
        """
        self.gravity = cfg["gravity"]
        self.jump_force = cfg["jump_force"]
        self.time_scaled = cfg.get("time_scaled", False)
        self.reference_frame_ms = cfg.get("reference_frame_ms", 1000 / 60)

    def step_scale(self, dt: float) -> float:
        if not self.time_scaled:
            return 1.0
        return dt / self.reference_frame_ms

    def update(self, player, dt: float = 0.0) -> bool:
        """
        Advance an airborne player by one cycle.

        Args:
            player: Player being integrated
            dt: Cycle delta, only used when time scaling is enabled

        Returns:
            bool: True if the player landed during this step.
        """
        if not player.is_jumping:
            return False

        scale = self.step_scale(dt)
        player.bottom += player.velocity * scale
        player.velocity -= self.gravity * scale

        if player.bottom <= player.ground_level:
            player.land()
            DebugLogger.trace("Player landed", category="physics")
            return True

        return False
