from typing import Optional, Tuple


Coordinate = Tuple[int, int]


class PointSetError(Exception):
    """Base error for the point_set package."""


class CoordinateRangeError(PointSetError, ValueError):
    """Raised when a coordinate cannot be mapped to a bit index."""

    def __init__(self, x: int, y: int, limit: Optional[int]):
        self.x = x
        self.y = y
        self.limit = limit
        super().__init__(
            f"Coordinate ({x}, {y}) is out of range: components must satisfy |n| < {limit}"
        )
