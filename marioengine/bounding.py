"""Bounding areas used for sprite collision checks."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .geometry import Point, do_intersect, on_segment, orientation, point_distance

__all__ = ["BoundingArea", "BoundingBox", "BoundingCircle", "BoundingPolygon"]

# x coordinate of the far end of the ray cast by the point-in-polygon test
_RAY_EXTREME_X = 2**31 - 1


class BoundingArea(ABC):
    """A shape that can be tested for overlap with other shapes."""

    @abstractmethod
    def intersects(self, area: BoundingArea) -> bool:
        """Whether this area overlaps another one."""

    @abstractmethod
    def contains(self, x: int, y: int) -> bool:
        """Whether the point (x, y) lies inside the area."""

    @abstractmethod
    def clone(self) -> BoundingArea:
        """An independent copy of this area."""


def _unsupported(area: object) -> TypeError:
    return TypeError(f"cannot test intersection with {type(area).__name__}")


@dataclass
class BoundingBox(BoundingArea):
    """Axis-aligned box; (x1, y1) is the top left and (x2, y2) the bottom right corner."""

    x1: int
    y1: int
    x2: int
    y2: int

    def intersects(self, area: BoundingArea) -> bool:
        if isinstance(area, BoundingBox):
            return not (
                area.x2 < self.x1
                or self.x2 < area.x1
                or area.y2 < self.y1
                or self.y2 < area.y1
            )
        if isinstance(area, BoundingCircle):
            return area.intersects(self)
        if isinstance(area, BoundingPolygon):
            return area.intersects(self._as_polygon())
        raise _unsupported(area)

    def contains(self, x: int, y: int) -> bool:
        return self.x1 <= x <= self.x2 and self.y1 <= y <= self.y2

    def clone(self) -> BoundingBox:
        return BoundingBox(self.x1, self.y1, self.x2, self.y2)

    def center_point(self) -> Point:
        """Centre of the box, truncated to integer coordinates."""
        return Point(
            int(self.x1 + self.width() / 2), int(self.y1 + self.height() / 2)
        )

    def diagonal(self) -> float:
        return math.hypot(self.width(), self.height())

    def width(self) -> float:
        return float(abs(self.x2 - self.x1))

    def height(self) -> float:
        return float(abs(self.y2 - self.y1))

    def _as_polygon(self) -> BoundingPolygon:
        return BoundingPolygon(
            [
                Point(self.x1, self.y1),
                Point(self.x1, self.y2),
                Point(self.x2, self.y2),
                Point(self.x2, self.y1),
            ]
        )


def _segment_distance(x: float, y: float, a: Point, b: Point) -> float:
    dx, dy = b.x - a.x, b.y - a.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(x - a.x, y - a.y)
    t = ((x - a.x) * dx + (y - a.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(x - (a.x + t * dx), y - (a.y + t * dy))


@dataclass
class BoundingCircle(BoundingArea):
    """Circle with centre (x, y) and radius r."""

    x: int
    y: int
    r: int

    def intersects(self, area: BoundingArea) -> bool:
        if isinstance(area, BoundingBox):
            return self._intersects_box(area)
        if isinstance(area, BoundingCircle):
            return point_distance(
                Point(self.x, self.y), Point(area.x, area.y)
            ) < float(self.r + area.r)
        if isinstance(area, BoundingPolygon):
            return self._intersects_polygon(area)
        raise _unsupported(area)

    def contains(self, x: int, y: int) -> bool:
        return (self.x - x) ** 2 + (self.y - y) ** 2 <= self.r**2

    def clone(self) -> BoundingCircle:
        return BoundingCircle(self.x, self.y, self.r)

    def _intersects_box(self, box: BoundingBox) -> bool:
        centre = box.center_point()
        half_w = box.width() / 2
        half_h = box.height() / 2
        dist_x = abs(float(self.x) - centre.x)
        dist_y = abs(float(self.y) - centre.y)

        if dist_x > half_w + self.r or dist_y > half_h + self.r:
            return False
        if dist_x <= half_w or dist_y <= half_h:
            return True
        corner_sq = (dist_x - half_w) ** 2 + (dist_y - half_h) ** 2
        return corner_sq <= self.r**2

    def _intersects_polygon(self, poly: BoundingPolygon) -> bool:
        if poly.contains(self.x, self.y):
            return True
        return any(
            _segment_distance(self.x, self.y, a, b) <= self.r
            for a, b in poly._edges()
        )


@dataclass
class BoundingPolygon(BoundingArea):
    """Polygon given by its vertices in order."""

    points: list[Point] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.points = [Point(p.x, p.y) for p in self.points]

    def intersects(self, area: BoundingArea) -> bool:
        if isinstance(area, BoundingPolygon):
            return any(self.contains(p.x, p.y) for p in area.points) or any(
                area.contains(p.x, p.y) for p in self.points
            )
        if isinstance(area, (BoundingBox, BoundingCircle)):
            return area.intersects(self)
        raise _unsupported(area)

    def contains(self, x: int, y: int) -> bool:
        if len(self.points) < 3:
            return False
        p = Point(x, y)
        extreme = Point(_RAY_EXTREME_X, y)
        count = 0
        for a, b in self._edges():
            if do_intersect(a, b, p, extreme):
                if orientation(a, p, b) == 0 and on_segment(a, p, b):
                    return True
                count += 1
        return count % 2 == 1

    def clone(self) -> BoundingPolygon:
        return BoundingPolygon(self.points)

    def _edges(self) -> list[tuple[Point, Point]]:
        if not self.points:
            return []
        return list(zip(self.points, self.points[1:] + self.points[:1]))