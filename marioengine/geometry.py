"""Basic integer geometry: rectangles, points and segment predicates."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "Rect",
    "Point",
    "point_distance",
    "on_segment",
    "orientation",
    "do_intersect",
]

COLLINEAR = 0
CLOCKWISE = 1
COUNTERCLOCKWISE = 2


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def __str__(self) -> str:
        return f"[{self.x},{self.y},{self.w},{self.h}]"


@dataclass
class Point:
    """A point with integer coordinates."""

    x: int = 0
    y: int = 0


def point_distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """Whether q lies within the bounding box of segment pr.

    For collinear p, q, r this tells whether q lies on the segment.
    """
    return (
        min(p.x, r.x) <= q.x <= max(p.x, r.x)
        and min(p.y, r.y) <= q.y <= max(p.y, r.y)
    )


def orientation(p: Point, q: Point, r: Point) -> int:
    """Orientation of the ordered triplet: 0 collinear, 1 clockwise, 2 counterclockwise."""
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if val == 0:
        return COLLINEAR
    return CLOCKWISE if val > 0 else COUNTERCLOCKWISE


def do_intersect(p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
    """Whether segment p1q1 and segment p2q2 intersect."""
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)

    if o1 != o2 and o3 != o4:
        return True
    if o1 == COLLINEAR and on_segment(p1, p2, q1):
        return True
    if o2 == COLLINEAR and on_segment(p1, q2, q1):
        return True
    if o3 == COLLINEAR and on_segment(p2, p1, q2):
        return True
    if o4 == COLLINEAR and on_segment(p2, q1, q2):
        return True
    return False