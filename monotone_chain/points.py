import collections
import logging
import re

import numpy as np

from monotone_chain.errors import AccessError, FormatError, EmptyInputError


logger = logging.getLogger(__name__)

# Tuple ordering compares x first and then y
Point = collections.namedtuple('Point', ('x', 'y'))

# ASCII decimal only, no '_' separators
INTEGER = re.compile(r'[+-]?[0-9]+')


def parse_point(line):
    '''Point from an "x y" line, None if it is not exactly two integers.'''
    fields = line.split()
    if len(fields) != 2:
        return None
    if not all(INTEGER.fullmatch(field) for field in fields):
        return None
    return Point(int(fields[0]), int(fields[1]))


def read_points(file_name):
    '''
    Points are separated by line, with x and y separated by whitespace.
    Blank lines are skipped, anything else must be two integers.
    '''
    try:
        f = open(file_name, 'r', encoding='utf-8', errors='replace')
    except OSError as e:
        raise AccessError(file_name, e.strerror)

    points = []
    with f:
        for line_number, line in enumerate(f, 1):
            if not line.strip():
                continue
            point = parse_point(line)
            if point is None:
                raise FormatError(file_name, line_number, line.rstrip('\n'))
            points.append(point)

    if not points:
        raise EmptyInputError(file_name)

    logger.debug('Read %d points from %s', len(points), file_name)
    return points


def read_hull(file_name):
    '''
    Assumes hull is written as sequential points followed by the first
    point again, closing the polygon. The closing point is dropped.
    '''
    hull = read_points(file_name)
    if len(hull) > 1 and hull[-1] == hull[0]:
        hull.pop()
    return hull


def write_hull(file_name, hull):
    '''
    Write the hull one "x y" vertex per line and close it by repeating
    the first vertex. Failures are logged, not raised; returns whether
    the file was written.
    '''
    if len(hull) < 3:
        logger.warning('Convex hull must contain at least 3 points, got %d; %s not written',
                       len(hull), file_name)
        return False

    try:
        with open(file_name, 'w') as f:
            for p in hull:
                f.write('{} {}\n'.format(p.x, p.y))
            f.write('{} {}\n'.format(hull[0].x, hull[0].y))
    except OSError as e:
        logger.warning('Cannot open output file %s (%s)', file_name, e.strerror)
        return False

    return True


def as_array(points):
    '''2 x N array, x in the first row and y in the second'''
    arr = np.zeros((2, len(points)))
    for i, p in enumerate(points):
        arr[:, i] = p.x, p.y
    return arr
