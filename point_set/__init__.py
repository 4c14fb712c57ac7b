import os
from typing import Iterable, Optional

from .base import Coordinate, CoordinateRangeError, PointSetError
from .bitmap import BitmapIndex
from .engine import PointSet
from .pairing import COORDINATE_LIMIT, cantor_pair, cantor_unpair, denaturalize, naturalize


__all__ = [
    "PointSet",
    "BitmapIndex",
    "Coordinate",
    "PointSetError",
    "CoordinateRangeError",
    "COORDINATE_LIMIT",
    "cantor_pair",
    "cantor_unpair",
    "naturalize",
    "denaturalize",
    "load_point_set"
]

__version__ = "1.0.0"

LIMIT_ENV_VAR = "POINT_SET_COORDINATE_LIMIT"


def default_coordinate_limit() -> Optional[int]:
    """Coordinate limit from the environment, falling back to COORDINATE_LIMIT.

    Set the variable to "none" to lift the limit entirely.
    """
    env_limit = os.getenv(LIMIT_ENV_VAR, "").strip()
    if not env_limit:
        return COORDINATE_LIMIT
    if env_limit.lower() == "none":
        return None

    try:
        limit = int(env_limit)
    except ValueError:
        raise ValueError(f"{LIMIT_ENV_VAR} must be an integer or 'none', got {env_limit!r}") from None
    if limit <= 0:
        raise ValueError(f"{LIMIT_ENV_VAR} must be positive, got {limit}")
    return limit


def load_point_set(points: Optional[Iterable[Coordinate]] = None, coordinate_limit: Optional[int] = None) -> PointSet:
    """
    Factory function to build a point set.

    Args:
        points: Optional coordinates to insert.
        coordinate_limit: Optional bound on |x| and |y|.
                          If not provided, uses $POINT_SET_COORDINATE_LIMIT or COORDINATE_LIMIT.
    """
    if coordinate_limit is None:
        coordinate_limit = default_coordinate_limit()

    return PointSet(points or (), coordinate_limit=coordinate_limit)
