"""
obstacle.py
-----------
Ground obstacle that scrolls toward the player.

Position is the offset of the obstacle's right side from the right edge of
the play area, so a fresh obstacle sits at 0 and moving left means the
offset grows.
"""


class Obstacle:
    """A block the player has to jump over."""

    __slots__ = ('width', 'height', 'offset')

    def __init__(self, width, height, offset=0.0):
        self.width = width
        self.height = height
        self.offset = offset

    def advance(self, speed):
        """Move left by `speed` units."""
        self.offset += speed

    def is_off_screen(self, area_width) -> bool:
        return self.offset > area_width

    def __repr__(self):
        return f"Obstacle(w={self.width:.1f}, h={self.height:.1f}, offset={self.offset:.1f})"
