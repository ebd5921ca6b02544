"""
hitbox.py
---------
Axis-aligned bounding boxes in screen space (y grows downward).

Boxes are rebuilt each cycle from the current entity geometry and the play
area, mirroring what the renderer draws.
"""


class Hitbox:
    """Edge-based AABB."""

    __slots__ = ('left', 'top', 'right', 'bottom')

    def __init__(self, left, top, right, bottom):
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom

    # ===========================================================
    # Construction
    # ===========================================================

    @classmethod
    def for_player(cls, player, area):
        """Box for the player at its current bottom offset."""
        bottom = area.height - player.bottom
        return cls(player.left, bottom - player.height, player.right, bottom)

    @classmethod
    def for_obstacle(cls, obstacle, area):
        """Box for an obstacle standing on the ground line."""
        right = area.width - obstacle.offset
        bottom = area.height - area.ground_height
        return cls(right - obstacle.width, bottom - obstacle.height, right, bottom)

    # ===========================================================
    # Queries
    # ===========================================================

    def overlaps(self, other) -> bool:
        """Strict overlap: boxes that only share an edge do not collide."""
        return (
            self.left < other.right and
            self.right > other.left and
            self.top < other.bottom and
            self.bottom > other.top
        )

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.bottom - self.top

    def as_tuple(self):
        """(x, y, width, height) for drawing."""
        return (self.left, self.top, self.width, self.height)

    def __repr__(self):
        return f"Hitbox(l={self.left:.1f}, t={self.top:.1f}, r={self.right:.1f}, b={self.bottom:.1f})"
