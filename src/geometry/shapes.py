"""Planar point and axis-aligned bounding box.

These are the two geometric primitives the tile grid works with.  Both
are immutable dataclasses so they can be used as dictionary keys and
shared freely between grids and queries.  Coordinates are plain floats
in whatever units the caller uses (metres, degrees, pixels).
"""

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class Point:
    """A 2-D point."""
    x: float
    y: float


@dataclass(frozen=True)
class AABB:
    """Axis-aligned bounding box `(min_x, min_y, max_x, max_y)`."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> "AABB":
        """Build a box from a `(min_x, min_y, max_x, max_y)` sequence.

        Parameters
        ----------
        values : sequence of float
            Four numbers in min/max order.

        Returns
        -------
        AABB
            The corresponding bounding box.
        """
        if len(values) != 4:
            raise ValueError(f"Expected 4 values (min_x, min_y, max_x, max_y), got {len(values)}")
        min_x, min_y, max_x, max_y = (float(v) for v in values)
        return cls(min_x, min_y, max_x, max_y)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def center(self) -> Point:
        """Return the centre point of the box."""
        return Point((self.min_x + self.max_x) * 0.5, (self.min_y + self.max_y) * 0.5)

    def contains(self, point: Point) -> bool:
        """Check whether a point lies inside the box, edges included."""
        return (self.min_x <= point.x <= self.max_x and
                self.min_y <= point.y <= self.max_y)

    def intersects(self, other: "AABB") -> bool:
        """Check whether two boxes overlap.

        Intervals are closed, so boxes that only share an edge or a
        corner are reported as intersecting.

        Parameters
        ----------
        other : AABB
            Box to test against.

        Returns
        -------
        bool
            True if the boxes share any area or boundary.
        """
        return not (other.max_x < self.min_x or
                    other.min_x > self.max_x or
                    other.max_y < self.min_y or
                    other.min_y > self.max_y)
