import pytest

from marioengine.bounding import (
    BoundingArea,
    BoundingBox,
    BoundingCircle,
    BoundingPolygon,
)
from marioengine.geometry import Point


def square(x, y, size):
    return BoundingPolygon(
        [Point(x, y), Point(x + size, y), Point(x + size, y + size), Point(x, y + size)]
    )


class Strange(BoundingArea):
    def intersects(self, area):
        return False

    def contains(self, x, y):
        return False

    def clone(self):
        return Strange()


def test_box_contains_inclusive():
    box = BoundingBox(0, 0, 10, 10)
    assert box.contains(0, 0)
    assert box.contains(10, 10)
    assert box.contains(5, 7)
    assert not box.contains(11, 5)
    assert not box.contains(5, 11)


def test_box_box_intersection_symmetric():
    a = BoundingBox(0, 0, 10, 10)
    b = BoundingBox(5, 5, 15, 15)
    c = BoundingBox(20, 20, 30, 30)
    assert a.intersects(b) and b.intersects(a)
    assert not a.intersects(c) and not c.intersects(a)


def test_box_touching_edges_intersect():
    assert BoundingBox(0, 0, 10, 10).intersects(BoundingBox(10, 0, 20, 10))


def test_box_clone_is_equal_but_separate():
    box = BoundingBox(1, 2, 3, 4)
    copy = box.clone()
    assert copy == box
    assert copy is not box


def test_box_center_and_sizes():
    box = BoundingBox(0, 0, 10, 20)
    assert box.center_point() == Point(5, 10)
    assert box.width() == pytest.approx(float(box.x2 - box.x1))
    assert box.height() == pytest.approx(float(box.y2 - box.y1))


def test_box_diagonal():
    assert BoundingBox(0, 0, 3, 4).diagonal() == pytest.approx(5.0)


def test_circle_contains_centre_and_boundary():
    circle = BoundingCircle(10, 10, 5)
    assert circle.contains(10, 10)
    assert circle.contains(13, 14)
    assert circle.contains(5, 10)
    assert not circle.contains(14, 14)


def test_circle_circle_requires_strict_overlap():
    a = BoundingCircle(0, 0, 5)
    touching = BoundingCircle(10, 0, 5)
    overlapping = BoundingCircle(9, 0, 5)
    assert not a.intersects(touching)
    assert a.intersects(overlapping)
    assert overlapping.intersects(a)


def test_circle_clone():
    circle = BoundingCircle(3, 4, 5)
    copy = circle.clone()
    assert copy == circle and copy is not circle


def test_circle_box_intersection():
    box = BoundingBox(0, 0, 10, 10)
    assert BoundingCircle(5, 5, 1).intersects(box)
    assert BoundingCircle(15, 5, 5).intersects(box)
    assert not BoundingCircle(30, 30, 2).intersects(box)
    assert box.intersects(BoundingCircle(5, 5, 1))
    assert not box.intersects(BoundingCircle(30, 30, 2))


def test_circle_near_box_corner_outside():
    box = BoundingBox(0, 0, 10, 10)
    assert not BoundingCircle(14, 14, 5).intersects(box)
    assert BoundingCircle(13, 13, 5).intersects(box)


def test_polygon_contains():
    poly = square(0, 0, 10)
    assert poly.contains(5, 5)
    assert poly.contains(0, 5)
    assert poly.contains(10, 10)
    assert not poly.contains(15, 5)
    assert not poly.contains(5, 20)


def test_polygon_with_too_few_points_contains_nothing():
    poly = BoundingPolygon([Point(0, 0), Point(10, 10)])
    assert not poly.contains(0, 0)
    assert not poly.contains(5, 5)


def test_polygon_polygon_intersection():
    a = square(0, 0, 10)
    assert a.intersects(square(5, 5, 10))
    assert square(5, 5, 10).intersects(a)
    assert not a.intersects(square(20, 20, 5))


def test_polygon_containing_other_polygon():
    assert square(0, 0, 100).intersects(square(40, 40, 5))
    assert square(40, 40, 5).intersects(square(0, 0, 100))


def test_box_polygon_intersection_both_ways():
    box = BoundingBox(0, 0, 10, 10)
    assert box.intersects(square(8, 8, 5))
    assert square(8, 8, 5).intersects(box)
    assert not box.intersects(square(50, 50, 5))
    assert not square(50, 50, 5).intersects(box)


def test_circle_polygon_intersection():
    poly = square(0, 0, 10)
    assert BoundingCircle(5, 5, 1).intersects(poly)
    assert BoundingCircle(13, 5, 4).intersects(poly)
    assert poly.intersects(BoundingCircle(13, 5, 4))
    assert not BoundingCircle(30, 30, 3).intersects(poly)


def test_polygon_clone_is_independent():
    poly = square(0, 0, 10)
    copy = poly.clone()
    assert copy == poly
    copy.points[0].x = 99
    assert poly.points[0] == Point(0, 0)


def test_polygon_copies_given_points():
    pts = [Point(0, 0), Point(10, 0), Point(10, 10)]
    poly = BoundingPolygon(pts)
    pts[0].x = 50
    assert poly.points[0] == Point(0, 0)


@pytest.mark.parametrize(
    "area", [BoundingBox(0, 0, 1, 1), BoundingCircle(0, 0, 1), square(0, 0, 1)]
)
def test_unknown_area_type_raises(area):
    with pytest.raises(TypeError):
        area.intersects(Strange())