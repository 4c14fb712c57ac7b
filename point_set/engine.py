import logging
from typing import Any, Iterable, Iterator, Optional

from .base import Coordinate, CoordinateRangeError
from .bitmap import BitmapIndex
from .pairing import COORDINATE_LIMIT, cantor_pair, cantor_unpair, in_range


logger = logging.getLogger(__name__)


class PointSet:
    """
    Set of integer coordinates stored as a single bitmap.

    Coordinate (x, y) is a member iff bit ``cantor_pair(x, y)`` is on.
    Instances are not thread-safe: guard ``insert`` with a lock when sharing
    a set between threads, and do not mutate a set while iterating it.
    """

    def __init__(self, points: Iterable[Coordinate] = (), coordinate_limit: Optional[int] = COORDINATE_LIMIT):
        """
        Args:
            points: Optional coordinates to insert.
            coordinate_limit: Exclusive bound on |x| and |y|; None means unbounded.
        """
        self.coordinate_limit = coordinate_limit
        self.members = BitmapIndex()
        self.update(points)

    @classmethod
    def from_points(cls, points: Iterable[Coordinate], **kwargs) -> "PointSet":
        return cls(points, **kwargs)

    def _index(self, x: int, y: int) -> int:
        return cantor_pair(x, y, limit=self.coordinate_limit)

    def insert(self, x: int, y: int):
        self.members.set(self._index(x, y), True)

    def update(self, points: Iterable[Coordinate]):
        """Insert every coordinate from ``points``."""
        inserted = 0
        for x, y in points:
            try:
                self.insert(x, y)
            except CoordinateRangeError as e:
                logger.error(f"Rejected point after {inserted} inserts: {e}")
                raise
            inserted += 1
        if inserted:
            logger.debug(f"Inserted {inserted} points, storage is {len(self.members)} bits")

    def contains(self, x: int, y: int) -> bool:
        if not (in_range(x, self.coordinate_limit) and in_range(y, self.coordinate_limit)):
            return False
        index = self._index(x, y)
        return index < len(self.members) and self.members.is_set(index)

    def __contains__(self, point: Any) -> bool:
        try:
            x, y = point
        except (TypeError, ValueError):
            return False
        if not (isinstance(x, int) and isinstance(y, int)):
            return False
        return self.contains(x, y)

    def len(self) -> int:
        return self.members.count()

    def __len__(self) -> int:
        return self.len()

    def union(self, other: "PointSet") -> "PointSet":
        """Return a new set holding the members of both sets."""
        limits = [self.coordinate_limit, other.coordinate_limit]
        result = PointSet(coordinate_limit=None if None in limits else max(limits))
        result.members = self.members | other.members
        logger.debug(
            f"Union of {len(self.members)}-bit and {len(other.members)}-bit sets "
            f"produced {len(result.members)} bits"
        )
        return result

    def __or__(self, other: "PointSet") -> "PointSet":
        if not isinstance(other, PointSet):
            return NotImplemented
        return self.union(other)

    def iterate(self) -> Iterator[Coordinate]:
        """Yield members in ascending bit index order."""
        for index in self.members.iter_set_bits():
            yield cantor_unpair(index)

    def __iter__(self) -> Iterator[Coordinate]:
        return self.iterate()

    def copy(self) -> "PointSet":
        result = PointSet(coordinate_limit=self.coordinate_limit)
        result.members = self.members.copy()
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointSet):
            return NotImplemented
        return self.members.same_bits(other.members)

    def __repr__(self) -> str:
        count = self.len()
        if count > 10:
            return f"PointSet(<{count} points>)"
        return f"PointSet({list(self.iterate())!r})"
