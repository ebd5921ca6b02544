"""
play_area.py
------------
Geometry of the play area as reported by the presentation layer.

The core never measures the window itself. Each cycle it asks a geometry
provider for the current size; anything unusable is a precondition failure
for that cycle only.
"""

from dataclasses import dataclass
from numbers import Real


class GeometryError(ValueError):
    """Raised when the presentation layer reports unusable geometry."""


@dataclass(frozen=True)
class PlayArea:
    width: float
    height: float
    ground_height: float

    @classmethod
    def validated(cls, width, height, ground_height):
        """
        Build a PlayArea, rejecting missing or non-positive dimensions.

        Raises:
            GeometryError: If any value is missing, non-numeric or out of range.
        """
        for name, value in (("width", width), ("height", height),
                            ("ground_height", ground_height)):
            if value is None or isinstance(value, bool) or not isinstance(value, Real):
                raise GeometryError(f"play area {name} is not a number: {value!r}")
            if value != value:  # NaN
                raise GeometryError(f"play area {name} is NaN")

        if width <= 0 or height <= 0:
            raise GeometryError(f"play area must be positive, got {width}x{height}")
        if not 0 <= ground_height < height:
            raise GeometryError(f"ground height {ground_height} outside play area height {height}")

        return cls(width, height, ground_height)


class StaticGeometry:
    """Geometry provider for a fixed-size area (headless runs and tests)."""

    def __init__(self, width, height, ground_height):
        self.width = width
        self.height = height
        self.ground_height = ground_height

    def get_play_area(self) -> PlayArea:
        return PlayArea.validated(self.width, self.height, self.ground_height)
