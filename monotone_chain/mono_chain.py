import logging

import numpy as np

from monotone_chain.errors import InsufficientPointsError
from monotone_chain.points import as_array


logger = logging.getLogger(__name__)

COLLINEAR = 0
CLOCKWISE = 1
COUNTER_CLOCKWISE = -1


def orientation(a, b, c):
    '''
    Turn direction along a -> b -> c from the cross product of (b - a)
    and (c - b). Coordinates are Python ints so the product never overflows.
    '''
    cross = (b.y - a.y) * (c.x - b.x) - (b.x - a.x) * (c.y - b.y)
    if cross == 0:
        return COLLINEAR
    return CLOCKWISE if cross > 0 else COUNTER_CLOCKWISE


def compute_hull(points):
    '''
    Convex hull of points by the monotone chain. The list is sorted in
    place. Vertices come back counter-clockwise, without the first one
    repeated and without points lying inside an edge. Collinear input
    gives just the two extreme points.
    '''
    if len(points) < 3:
        raise InsufficientPointsError(len(points))

    points.sort()
    hull = []
    # Lower chain
    for p in points:
        while len(hull) >= 2 and orientation(hull[-2], hull[-1], p) != COUNTER_CLOCKWISE:
            hull.pop()
        hull.append(p)
    # Upper chain, never popping into the lower one
    lower_size = len(hull)
    for p in reversed(points):
        while len(hull) > lower_size and orientation(hull[-2], hull[-1], p) != COUNTER_CLOCKWISE:
            hull.pop()
        hull.append(p)
    # Both chains end at the first point
    hull.pop()

    logger.debug('Hull of %d points has %d vertices', len(points), len(hull))
    return hull


def hull_area(hull):
    '''Shoelace area of the hull polygon'''
    if len(hull) < 3:
        return 0.0
    x, y = as_array(hull)
    return 0.5*abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))


def encloses(hull, point):
    '''Is point inside or on the boundary of the hull?'''
    if len(hull) >= 3:
        edges = zip(hull, hull[1:] + hull[:1])
        return all(orientation(a, b, point) != CLOCKWISE for a, b in edges)
    # Degenerate hull is a segment (or a single point)
    a, b = hull[0], hull[-1]
    return (orientation(a, b, point) == COLLINEAR
            and min(a.x, b.x) <= point.x <= max(a.x, b.x)
            and min(a.y, b.y) <= point.y <= max(a.y, b.y))
