'''
Created on Oct 19, 2026

Incremental Delaunay triangulation (Bowyer-Watson).

https://en.wikipedia.org/wiki/Bowyer%E2%80%93Watson_algorithm
'''

import logging
import time
from collections import Counter
from datetime import datetime

from bowyer.delaunay.errors import DegenerateGeometryError, \
    InsufficientInputError, InvariantViolationError
from bowyer.delaunay.helpers import as_points, duplicates
from bowyer.delaunay.preds import collinear, in_circle
from bowyer.delaunay.tds import box, Point, Triangle

# offsets of the corners of the enclosing triangle from the bounding box,
# in multiples of its largest dimension
ENCLOSING_LEFT_RIGHT = 5e4
ENCLOSING_BELOW = 4e4
ENCLOSING_ABOVE = 6e4


def enclosing_triangle(points, margin=1.0):
    """Large triangle that strictly contains all points.

    The corners are placed tens of thousands of times the largest
    dimension of the bounding box of the points away from that box, so
    that no circumcircle of a triangle on the convex hull of the points
    reaches a corner (such triangles would be lost by finalize).
    The margin scales this distance, it cannot be smaller than 1
    (smaller margins do not guarantee that all points are contained).
    """
    if not margin >= 1.0:
        raise ValueError("Margin should be at least 1, got {}".format(margin))
    (xmin, ymin), (xmax, ymax) = box(points)
    width = abs(xmax - xmin)
    height = abs(ymax - ymin)
    if height > width:
        width = height
    if width == 0:
        width = 1.
    width *= margin
    side = ENCLOSING_LEFT_RIGHT * width
    below = ENCLOSING_BELOW * width
    above = ENCLOSING_ABOVE * width
    return Triangle(Point(xmin - side, ymin - below),
                    Point(xmax + side, ymin - below),
                    Point(0.5 * (xmin + xmax), ymax + above))


class BowyerWatsonInserter(object):
    """Class to insert points into a triangulation.

    The mesh is a flat set of triangles. For every point that is appended,
    the triangles that have the point in their circumcircle are removed,
    and the hole that is left is filled with triangles fanning out from
    the new point. The mesh is seeded with one large triangle around all
    points, which is removed (together with all triangles touching its
    corners) by finalize.
    """

    __slots__ = ('triangles', 'vertices', 'enclosing', 'inclusive', 'margin',
                 'created', 'removed', '_seen')

    def __init__(self, inclusive=True, margin=1.0):
        self.triangles = set()
        self.vertices = []
        self.enclosing = None
        self._seen = set()
        self.inclusive = inclusive
        self.margin = margin
        self.created = 0
        self.removed = 0

    def initialize(self, points):
        """Initialize large triangle around the points, from which
        the mesh grows
        """
        self.enclosing = enclosing_triangle(points, self.margin)
        self.triangles = set([self.enclosing])
        self.vertices = []
        self._seen = set()

    def insert(self, points):
        """Insert a list of points into the triangulation, in the given order
        """
        self.initialize(points)
        for j, pt in enumerate(points):
            logging.debug(" - inserting {}".format(pt))
            self.append(pt)
            if (j % 1000) == 0:
                logging.debug(" " + str(datetime.now()) + " " + str(j))

    def bad_triangles(self, point):
        """Splits the mesh into the triangles with point in their
        circumcircle (bad) and the rest (good), with the exact in-circle
        predicate

        Returns (bad, good) as two lists
        """
        bad, good = [], []
        for triangle in self.triangles:
            a, b, c = triangle.vertices
            if in_circle(a, b, c, point, self.inclusive):
                bad.append(triangle)
            else:
                good.append(triangle)
        return bad, good

    def cavity_boundary(self, bad):
        """Edges on the boundary of the hole left by removing the
        bad triangles, i.e. the edges that belong to exactly one of them
        """
        counts = Counter(edge for triangle in bad for edge in triangle.edges)
        boundary = []
        for edge, count in counts.items():
            if count == 1:
                boundary.append(edge)
            elif count > 2:
                raise InvariantViolationError(
                    "Edge {} shared by {} triangles".format(edge, count))
        return boundary

    def append(self, pt):
        """Appends one point to the triangulation.

        This method assumes that the triangulation is initialized
        and the point lies inside the enclosing triangle.
        """
        if self.enclosing is None:
            raise InvariantViolationError(
                "Triangulation not initialized, no enclosing triangle")
        v = Point(pt[0], pt[1])
        if v in self._seen:
            raise DegenerateGeometryError(
                "Duplicate point found for insertion: {}".format(v))
        bad, good = self.bad_triangles(v)
        if not bad:
            raise InvariantViolationError(
                "No triangle found with {} in its circumcircle".format(v))
        boundary = self.cavity_boundary(bad)
        new = [Triangle(edge.orig, edge.dest, v) for edge in boundary]
        # the mesh is replaced, triangles themselves are never changed
        triangles = set(good)
        triangles.update(new)
        self.triangles = triangles
        self.vertices.append(v)
        self._seen.add(v)
        self.created += len(new)
        self.removed += len(bad)

    def finalize(self):
        """Returns the triangles of the mesh that do not have a corner
        of the enclosing triangle as vertex
        """
        return set(t for t in self.triangles
                   if not t.shares_vertex(self.enclosing))


def check_input(pts):
    """Raises when the points do not allow a meaningful triangulation"""
    if len(pts) < 3:
        raise InsufficientInputError(
            "At least 3 points needed, got {}".format(len(pts)))
    if len(set(pts)) < 3:
        raise InsufficientInputError(
            "At least 3 distinct points needed, got {}".format(len(set(pts))))
    dups = duplicates(pts)
    if dups:
        raise DegenerateGeometryError(
            "Duplicate points found for insertion: {}".format(
                ", ".join("({0[0]}, {0[1]})".format(pt) for pt in dups)))
    if collinear(pts):
        raise DegenerateGeometryError("All points are collinear")


def triangulate(pts, inclusive=True, margin=1.0):
    """Triangulate a set of points

    Points are inserted in the order given. Returns the Delaunay
    triangles as a set of Triangle objects.

    With inclusive set (the default) a point lying exactly on the
    circumcircle of a triangle makes that triangle re-triangulated.
    For cocircular points (e.g. the corners of a square) the diagonal
    that ends up in the result depends on this choice and on the
    insertion order; both diagonals are Delaunay.
    """
    start = time.perf_counter()
    pts = as_points(pts)
    logging.debug("")
    logging.debug(list(enumerate(["{}".format(_) for _ in pts])))
    check_input(pts)
    end = time.perf_counter()
    logging.debug("Checking points: " + str(end - start) + " secs")

    start = time.perf_counter()
    incremental = BowyerWatsonInserter(inclusive, margin)
    incremental.insert(pts)
    triangles = incremental.finalize()
    end = time.perf_counter()

    logging.debug("Triangulating took: " + str(end - start) + " secs")
    logging.debug("{} triangles".format(len(triangles)))
    logging.debug("{} vertices".format(len(incremental.vertices)))
    logging.debug("{} created".format(incremental.created))
    logging.debug("{} removed".format(incremental.removed))
    if len(incremental.vertices) > 0:
        logging.debug(str(float(incremental.created) /
                          len(incremental.vertices)) + " created per insert")

    if not triangles:
        raise DegenerateGeometryError(
            "No triangles left after removing the enclosing triangle")
    return triangles
