'''
Created on Oct 19, 2026

Geometric predicates.

Orientation and in-circle tests are Shewchuk's robust adaptive
predicates, as provided by the geompreds package.
'''
from math import hypot

from geompreds import orient2d, incircle

from bowyer.delaunay.errors import DegenerateGeometryError

# sine of the largest angle of a triangle under which its three corners
# are taken as collinear
DEGENERACY_TOLERANCE = 1e-10


def is_degenerate(pa, pb, pc):
    """Tests whether the points pa, pb and pc are (near) collinear

    Exactly collinear points are detected by the sign of the robust
    orientation predicate, near collinear ones by the sine of the largest
    angle of the triangle (the orientation determinant divided by the
    lengths of the two shortest sides, that meet at this angle).
    """
    det = orient2d(pa, pb, pc)
    if det == 0.:
        return True
    sides = sorted([hypot(pa[0] - pb[0], pa[1] - pb[1]),
                    hypot(pb[0] - pc[0], pb[1] - pc[1]),
                    hypot(pc[0] - pa[0], pc[1] - pa[1])])
    return abs(det) <= DEGENERACY_TOLERANCE * sides[0] * sides[1]


def in_circle(pa, pb, pc, pd, inclusive=True):
    """Tests whether pd lies inside the circle through pa, pb and pc
    (exact test, pa, pb and pc can be given in any order)

    With inclusive set, a point on the circle counts as inside.
    """
    det = incircle(pa, pb, pc, pd)
    if orient2d(pa, pb, pc) < 0:
        det = -det
    if inclusive:
        return det >= 0.
    else:
        return det > 0.


def circumcenter(pa, pb, pc):
    """Center of the circle through pa, pb and pc, as (x, y) tuple

    https://en.wikipedia.org/wiki/Circumcircle#Cartesian_coordinates_2
    """
    ax, ay = pa[0], pa[1]
    bx, by = pb[0], pb[1]
    cx, cy = pc[0], pc[1]
    d = 2.0 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if d == 0. or is_degenerate(pa, pb, pc):
        raise DegenerateGeometryError(
            "Collinear points, no circumcircle for: "
            "({0[0]}, {0[1]}), ({1[0]}, {1[1]}), ({2[0]}, {2[1]})".format(
                pa, pb, pc))
    alift = ax * ax + ay * ay
    blift = bx * bx + by * by
    clift = cx * cx + cy * cy
    x = (alift * (by - cy) + blift * (cy - ay) + clift * (ay - by)) / d
    y = (alift * (cx - bx) + blift * (ax - cx) + clift * (bx - ax)) / d
    return x, y


def collinear(points):
    """Tests whether all points lie on one line (exact test)

    A point set where all points coincide counts as collinear as well.
    """
    first = points[0]
    second = None
    for pt in points:
        if pt[0] != first[0] or pt[1] != first[1]:
            second = pt
            break
    if second is None:
        return True
    for pt in points:
        if orient2d(first, second, pt) != 0.:
            return False
    return True


__all__ = ("orient2d", "incircle", "is_degenerate", "in_circle",
           "circumcenter", "collinear", "DEGENERACY_TOLERANCE")
