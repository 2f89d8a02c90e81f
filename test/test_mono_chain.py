from monotone_chain.mono_chain import (orientation, compute_hull, hull_area, encloses,
                                       COLLINEAR, CLOCKWISE, COUNTER_CLOCKWISE)
from monotone_chain.errors import InsufficientPointsError
from monotone_chain.points import Point
import numpy as np
import pytest


def random_points(rng, n, bound=50):
    xy = rng.randint(-bound, bound + 1, size=(n, 2))
    return [Point(int(x), int(y)) for x, y in xy]


@pytest.fixture
def rng():
    return np.random.RandomState(1234)


def test_orientation():
    a, b = Point(0, 0), Point(4, 0)
    assert orientation(a, b, Point(4, 4)) == COUNTER_CLOCKWISE
    assert orientation(a, b, Point(4, -4)) == CLOCKWISE
    assert orientation(a, b, Point(8, 0)) == COLLINEAR
    # Repeated point is always collinear
    assert orientation(a, a, Point(3, 7)) == COLLINEAR


def test_orientation_large_coordinates():
    big = 10**12
    a, b, c = Point(-big, -big), Point(big, -big), Point(big, big)
    assert orientation(a, b, c) == COUNTER_CLOCKWISE
    assert orientation(c, b, a) == CLOCKWISE


def test_square_drops_interior():
    points = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(2, 2)]
    assert compute_hull(points) == [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]


def test_sorts_in_place():
    points = [Point(4, 4), Point(0, 0), Point(0, 4), Point(4, 0)]
    compute_hull(points)
    assert points == sorted(points)


def test_triangle():
    hull = compute_hull([Point(0, 1), Point(1, 0), Point(0, 0)])
    assert hull == [Point(0, 0), Point(1, 0), Point(0, 1)]


def test_triangle_order_independent():
    triangle = [Point(5, 1), Point(-2, 3), Point(1, -4)]
    hulls = {tuple(compute_hull(list(p))) for p in (triangle, triangle[::-1], triangle[1:] + triangle[:1])}
    assert len(hulls) == 1
    hull, = hulls
    assert set(hull) == set(triangle)


@pytest.mark.parametrize('points', [[], [Point(0, 0)], [Point(0, 0), Point(1, 1)]])
def test_insufficient_points(points):
    with pytest.raises(InsufficientPointsError) as e:
        compute_hull(points)
    assert e.value.count == len(points)


def test_collinear_degenerates():
    points = [Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3)]
    assert compute_hull(points) == [Point(0, 0), Point(3, 3)]


def test_duplicates_and_edge_points_pruned():
    points = [Point(0, 0), Point(0, 0), Point(2, 0), Point(4, 0), Point(4, 4),
              Point(4, 4), Point(0, 4), Point(0, 2)]
    assert compute_hull(points) == [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]


def test_same_x_column():
    points = [Point(1, 5), Point(1, -5), Point(1, 0), Point(3, 0)]
    assert compute_hull(points) == [Point(1, -5), Point(3, 0), Point(1, 5)]


def test_random_enclosure(rng):
    for _ in range(50):
        points = random_points(rng, rng.randint(10, 80))
        hull = compute_hull(list(points))
        assert all(encloses(hull, p) for p in points)


def test_random_strictly_convex(rng):
    for _ in range(50):
        hull = compute_hull(random_points(rng, rng.randint(10, 80)))
        if len(hull) < 3:
            continue
        n = len(hull)
        assert len(set(hull)) == n
        for i in range(n):
            assert orientation(hull[i], hull[(i+1) % n], hull[(i+2) % n]) == COUNTER_CLOCKWISE


def test_random_idempotent(rng):
    for _ in range(50):
        points = random_points(rng, rng.randint(10, 80))
        hull = compute_hull(list(points))
        if len(hull) < 3:
            continue
        assert compute_hull(list(hull)) == hull
        assert compute_hull(list(reversed(points))) == hull


def test_hull_area():
    square = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
    assert hull_area(square) == pytest.approx(16)
    assert hull_area(square[::-1]) == pytest.approx(16)
    assert hull_area(square[:2]) == 0.0


def test_encloses():
    square = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
    assert encloses(square, Point(2, 2))
    assert encloses(square, Point(4, 2))
    assert encloses(square, Point(0, 0))
    assert not encloses(square, Point(5, 2))
    assert not encloses(square, Point(-1, -1))

    segment = [Point(0, 0), Point(3, 3)]
    assert encloses(segment, Point(1, 1))
    assert not encloses(segment, Point(4, 4))
    assert not encloses(segment, Point(1, 2))
