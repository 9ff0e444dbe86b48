'''
Created on Oct 19, 2026

Preparing input for triangulation.
'''
import logging

from bowyer.delaunay.tds import Point


def as_points(points):
    """Converts a sequence of 2-tuples (or other indexable objects with
    at least 2 ordinates) to a list of Point objects with float
    coordinates, keeping the order of the input
    """
    return [Point(float(pt[0]), float(pt[1])) for pt in points]


def unique_points(points):
    """Returns the points without duplicates.

    The first occurrence of every point is kept, in the order of the input.
    Note that only exactly coinciding points are removed; near-coincident
    points remain and are the caller's responsibility.
    """
    points = as_points(points)
    seen = set()
    result = []
    for pt in points:
        if pt not in seen:
            seen.add(pt)
            result.append(pt)
    if len(result) != len(points):
        logging.debug("removed {} duplicate points".format(
            len(points) - len(result)))
    return result


def duplicates(points):
    """Returns the points that occur more than once (each of them once)"""
    seen = set()
    dups = []
    for pt in points:
        if pt in seen and pt not in dups:
            dups.append(pt)
        seen.add(pt)
    return dups
