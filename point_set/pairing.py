"""
Bijection between signed integer pairs and bit indices.

Each component is zig-zag encoded onto the naturals, then the pair of
naturals is enumerated diagonal by diagonal:

    index = (nx^2 + nx + 2*nx*ny + 3*ny + ny^2) / 2 = T(nx + ny) + ny

See http://szudzik.com/ElegantPairing.pdf for the family of formulas.
"""
import math
from typing import Optional

from .base import Coordinate, CoordinateRangeError


# Components must satisfy |n| < COORDINATE_LIMIT.
COORDINATE_LIMIT = 2 ** 31


def triangular(w: int) -> int:
    return w * (w + 1) // 2


def naturalize(n: int) -> int:
    """Zig-zag encode: 0 -> 0, -1 -> 1, 1 -> 2, -2 -> 3, 2 -> 4, ..."""
    if n < 0:
        return -2 * n - 1
    return 2 * n


def denaturalize(u: int) -> int:
    """Inverse of :func:`naturalize`."""
    if u < 0:
        raise ValueError(f"Cannot denaturalize negative value {u}")
    if u % 2:
        return -((u + 1) // 2)
    return u // 2


def in_range(n: int, limit: Optional[int] = COORDINATE_LIMIT) -> bool:
    return limit is None or -limit < n < limit


def cantor_pair(x: int, y: int, limit: Optional[int] = COORDINATE_LIMIT) -> int:
    """
    Map a coordinate to its bit index.

    Args:
        x, y: Signed coordinate components.
        limit: Exclusive bound on the magnitude of each component.
               None disables the check.

    Raises:
        CoordinateRangeError: if either component is out of range.
    """
    if not (in_range(x, limit) and in_range(y, limit)):
        raise CoordinateRangeError(x, y, limit)

    nx = naturalize(x)
    ny = naturalize(y)
    return (nx * nx + nx + 2 * nx * ny + 3 * ny + ny * ny) // 2


def _diagonal(index: int) -> int:
    # Keep T(w) <= index < T(w + 1)
    w = (math.isqrt(8 * index + 1) - 1) // 2
    while triangular(w) > index:
        w -= 1
    while triangular(w + 1) <= index:
        w += 1
    return w


def cantor_unpair(index: int) -> Coordinate:
    """Map a bit index back to its coordinate."""
    if index < 0:
        raise ValueError(f"Index must be non-negative, got {index}")

    w = _diagonal(index)
    ny = index - triangular(w)
    nx = w - ny
    return denaturalize(nx), denaturalize(ny)


def max_index(limit: int = COORDINATE_LIMIT) -> int:
    """Largest index produced by coordinates with |x|, |y| < limit."""
    return cantor_pair(limit - 1, limit - 1, limit=None)
