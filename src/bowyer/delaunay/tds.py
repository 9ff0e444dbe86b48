'''
Created on Oct 19, 2026

Value types making up the triangulation data structure.
'''
from collections import namedtuple
from math import hypot

from bowyer.delaunay.errors import InsufficientInputError
from bowyer.delaunay.preds import circumcenter
# ------------------------------------------------------------------------------
# Helpers
#


def box(points):
    """Obtain a tight fitting axis-aligned box around point set"""
    if not points:
        raise InsufficientInputError("No points given, cannot determine box")
    xmin = min(points, key=lambda x: x[0])[0]
    ymin = min(points, key=lambda x: x[1])[1]
    xmax = max(points, key=lambda x: x[0])[0]
    ymax = max(points, key=lambda x: x[1])[1]
    return (xmin, ymin), (xmax, ymax)


def distance(a, b):
    """Euclidean distance between two points"""
    return hypot(a[0] - b[0], a[1] - b[1])


def circumcircle(a, b, c):
    """Circle through the three points a, b and c.

    Raises DegenerateGeometryError when the points are (near) collinear.
    """
    center = Point(*circumcenter(a, b, c))
    return Circle(center, distance(center, a))


def circle_contains(circle, point, inclusive=True):
    """Whether point lies inside circle.

    With inclusive set, a point exactly on the circle counts as inside.
    """
    d = distance(point, circle.center)
    if inclusive:
        return d <= circle.radius
    else:
        return d < circle.radius


class Point(namedtuple('Point', 'x y')):
    """A point in the plane.

    Immutable, equality is exact on the coordinates (no tolerance) and
    ordering is lexicographic (x first, then y).
    """
    __slots__ = ()

    def __str__(self):
        return "{0} {1}".format(self.x, self.y)

    def distance(self, other):
        """Cartesian distance to other point """
        return distance(self, other)


class Edge(namedtuple('Edge', 'orig dest')):
    """Unordered pair of points.

    The endpoints are put in canonical order on construction, so that
    Edge(p, q) == Edge(q, p) and both hash the same.
    """
    __slots__ = ()

    def __new__(cls, orig, dest):
        if dest < orig:
            orig, dest = dest, orig
        return super(Edge, cls).__new__(cls, orig, dest)

    def __str__(self):
        return "LINESTRING({0}, {1})".format(self.orig, self.dest)


class Circle(namedtuple('Circle', 'center radius')):
    """Circle given by its center point and radius"""
    __slots__ = ()

    def contains(self, point, inclusive=True):
        return circle_contains(self, point, inclusive)


class Triangle(object):
    """Triangle with three labeled vertices a, b and c.

    A triangle is a value: it is never modified after construction and
    compares (and hashes) as the unordered set of its vertices.
    Its circumcircle is computed when it is made, which means that
    making a triangle from (near) collinear points raises
    a DegenerateGeometryError.
    """

    __slots__ = ('a', 'b', 'c', 'circle', '_key')

    def __init__(self, a, b, c):
        self.a = a = Point(a[0], a[1])
        self.b = b = Point(b[0], b[1])
        self.c = c = Point(c[0], c[1])
        self._key = frozenset((a, b, c))
        self.circle = circumcircle(a, b, c)

    @property
    def vertices(self):
        return (self.a, self.b, self.c)

    @property
    def edges(self):
        """The three canonical edges of this triangle"""
        return (Edge(self.a, self.b),
                Edge(self.b, self.c),
                Edge(self.c, self.a))

    def shares_vertex(self, other):
        """Whether this triangle has a vertex in common with other"""
        return not self._key.isdisjoint(other.vertices)

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self._key == other._key

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._key)

    def __repr__(self):
        return "Triangle({0!r}, {1!r}, {2!r})".format(self.a, self.b, self.c)

    def __str__(self):
        """Conversion to WKT string"""
        vertices = [str(v) for v in self.vertices]
        vertices.append(vertices[0])
        return "POLYGON(({0}))".format(", ".join(vertices))
