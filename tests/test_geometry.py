# tests/test_geometry.py

import pytest

from ordmap.geometry import LineSegment, Point
from ordmap.indexing import AVLTreeMap


def seg(a, b):
    return LineSegment(Point(a), Point(b))


def test_square_distance_from_origin():
    assert Point.origin(2).square_distance(Point([4, 3])) == 25


def test_vector_arithmetic():
    p = Point([1, 2, 3])
    q = Point([4, 6, 8])
    assert q - p == Point([3, 4, 5])
    assert p + q == Point([5, 8, 11])
    assert (p.x, p.y, p.z) == (1, 2, 3)
    assert p.dim == 3


def test_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        Point([1, 2]) - Point([1, 2, 3])
    with pytest.raises(ValueError):
        Point([1, 2, 3]).cross(Point([1, 2, 3]))
    with pytest.raises(ValueError):
        seg([0, 0, 0], [1, 1, 1])


def test_points_order_lexicographically():
    points = [Point([10, 10, 0]), Point([11, 1, -1]), Point([10, 9, 5])]
    assert sorted(points) == [Point([10, 9, 5]), Point([10, 10, 0]), Point([11, 1, -1])]


def test_points_as_map_keys():
    m = AVLTreeMap()
    for p in [Point([2, 0]), Point([0, 5]), Point([1, 1]), Point([1, 3])]:
        m.insert(p, p.x + p.y)
    assert m.find(Point([1, 3])) == 4
    assert m.neighbors(Point([1, 2])) == (2, 4)


def test_intersection_point():
    assert seg([0, 0], [2, 2]).intersects(seg([0, 2], [2, 0])) == Point([1.0, 1.0])


def test_intersection_at_endpoint():
    assert seg([0, 0], [2, 2]).intersects(seg([2, 2], [2, 4])) == Point([2.0, 2.0])


def test_intersection_none_collinear_disjoint():
    assert seg([0, 0], [2, 2]).intersects(seg([3, 3], [4, 4])) is None


def test_intersection_none_parallel():
    assert seg([0, 0], [2, 0]).intersects(seg([0, 1], [2, 1])) is None


def test_intersection_none_out_of_range():
    assert seg([0, 0], [1, 1]).intersects(seg([0, 4], [4, 0])) is None


def test_intersection_overlap():
    overlap = seg([0, 0], [4, 4]).intersects(seg([1, 1], [5, 5]))
    assert overlap == seg([1, 1], [4, 4])


def test_intersection_overlap_reversed_endpoints():
    overlap = seg([4, 4], [0, 0]).intersects(seg([5, 5], [1, 1]))
    assert overlap == seg([1, 1], [4, 4])


def test_intersection_collinear_one_point():
    hit = seg([0, 0], [4, 4]).intersects(seg([4, 4], [5, 5]))
    assert hit == Point([4.0, 4.0])
    assert all(isinstance(c, float) for c in hit)


def test_ordering_mixed_dimensions_raises():
    with pytest.raises(ValueError):
        Point([1]) < Point([1, 2])
    with pytest.raises(ValueError):
        Point([1, 2, 3]) <= Point([1, 2])


def test_ordering_against_non_point_raises_type_error():
    with pytest.raises(TypeError):
        Point([1, 2]) < (1, 2)
    with pytest.raises(TypeError):
        Point([1, 2]) <= 3


def test_point_and_int_keys_do_not_mix():
    m = AVLTreeMap()
    m.insert(Point([0, 0]), "origin")
    with pytest.raises(TypeError):
        m.insert(3, "three")
    assert len(m) == 1


def test_zero_length_segment_off_the_other_line():
    assert seg([3, 3], [3, 3]).intersects(seg([0, 10], [10, 0])) is None
    assert seg([0, 10], [10, 0]).intersects(seg([3, 3], [3, 3])) is None


def test_zero_length_segment_on_the_other_segment():
    assert seg([5, 5], [5, 5]).intersects(seg([0, 10], [10, 0])) == Point([5.0, 5.0])
    assert seg([0, 10], [10, 0]).intersects(seg([5, 5], [5, 5])) == Point([5.0, 5.0])


def test_zero_length_segments():
    assert seg([1, 1], [1, 1]).intersects(seg([1, 1], [1, 1])) == Point([1.0, 1.0])
    assert seg([1, 1], [1, 1]).intersects(seg([2, 2], [2, 2])) is None
