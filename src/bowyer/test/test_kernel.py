import unittest
from math import sqrt

from bowyer.delaunay.errors import DegenerateGeometryError, \
    InsufficientInputError
from bowyer.delaunay.preds import circumcenter, collinear, in_circle, \
    is_degenerate
from bowyer.delaunay.tds import box, circle_contains, circumcircle, \
    distance, Circle, Edge, Point, Triangle


class TestDistance(unittest.TestCase):

    def test_distance(self):
        assert distance((0, 0), (3, 4)) == 5.0
        assert distance((3, 4), (0, 0)) == 5.0
        assert distance((1.5, -2), (1.5, -2)) == 0.0

    def test_point_distance(self):
        assert Point(-1., -1.).distance(Point(2., 3.)) == 5.0


class TestPoint(unittest.TestCase):

    def test_equal_to_tuple(self):
        pt = Point(1.0, 2.0)
        assert pt == (1.0, 2.0)
        assert pt == (1, 2)
        assert hash(pt) == hash((1, 2))
        assert pt[0] == 1.0 and pt[1] == 2.0

    def test_no_tolerance(self):
        assert Point(0.1 + 0.2, 0.) != Point(0.3, 0.)

    def test_order(self):
        assert Point(0., 5.) < Point(1., 0.)
        assert Point(1., 0.) < Point(1., 1.)

    def test_str(self):
        assert str(Point(1.5, -2.0)) == "1.5 -2.0"


class TestCircumcircle(unittest.TestCase):

    def test_isosceles(self):
        circle = circumcircle((-2., 0.), (0., 0.), (-1., 1.))
        self.assertAlmostEqual(circle.center.x, -1.0)
        self.assertAlmostEqual(circle.center.y, 0.0)
        self.assertAlmostEqual(circle.radius, 1.0)

    def test_right_angle(self):
        circle = circumcircle((0., 0.), (1., 0.), (0., 1.))
        assert circle.center == (0.5, 0.5)
        self.assertAlmostEqual(circle.radius, sqrt(0.5))

    def test_order_of_points_does_not_matter(self):
        pts = [(3., 1.), (-2., 4.), (0.5, -6.)]
        one = circumcircle(*pts)
        other = circumcircle(*reversed(pts))
        self.assertAlmostEqual(one.center.x, other.center.x)
        self.assertAlmostEqual(one.center.y, other.center.y)
        self.assertAlmostEqual(one.radius, other.radius)

    def test_all_corners_on_circle(self):
        pts = [(3., 1.), (-2., 4.), (0.5, -6.)]
        circle = circumcircle(*pts)
        for pt in pts:
            self.assertAlmostEqual(distance(pt, circle.center),
                                   circle.radius)

    def test_collinear(self):
        with self.assertRaises(DegenerateGeometryError):
            circumcircle((0., 0.), (1., 1.), (2., 2.))

    def test_coinciding(self):
        with self.assertRaises(DegenerateGeometryError):
            circumcenter((0., 0.), (0., 0.), (2., 1.))

    def test_near_collinear(self):
        with self.assertRaises(DegenerateGeometryError):
            circumcenter((0., 0.), (1., 0.), (2., 1e-12))


class TestCircleContains(unittest.TestCase):

    def setUp(self):
        self.circle = Circle(Point(0., 0.), 1.0)

    def test_inside(self):
        assert circle_contains(self.circle, (0.5, 0.))
        assert circle_contains(self.circle, (0.5, 0.), inclusive=False)

    def test_outside(self):
        assert not circle_contains(self.circle, (2., 0.))
        assert not circle_contains(self.circle, (2., 0.), inclusive=False)

    def test_on_circle(self):
        assert circle_contains(self.circle, (1., 0.))
        assert not circle_contains(self.circle, (1., 0.), inclusive=False)

    def test_method(self):
        assert self.circle.contains((0., -1.))
        assert not self.circle.contains((0., -1.), inclusive=False)


class TestDegeneracy(unittest.TestCase):

    def test_is_degenerate(self):
        assert is_degenerate((0., 0.), (1., 1.), (3., 3.))
        assert is_degenerate((0., 0.), (1., 0.), (2., 1e-12))
        assert not is_degenerate((0., 0.), (1., 0.), (0., 1.))

    def test_short_leg(self):
        # right angle at the origin, the corners are far from collinear
        for pts in [((0., 0.), (1e-11, 0.), (0., 1.)),
                    ((1e-11, 0.), (0., 1.), (0., 0.)),
                    ((0., 1.), (0., 0.), (1e-11, 0.))]:
            assert not is_degenerate(*pts)
        circle = circumcircle((0., 0.), (1e-11, 0.), (0., 1.))
        self.assertAlmostEqual(circle.center.y, 0.5)

    def test_thin_but_not_flat(self):
        # largest angle at (1, 1e-3) differs about 0.1 degree from 180
        assert not is_degenerate((0., 0.), (1., 1e-3), (2., 0.))

    def test_in_circle(self):
        ccw = ((0., 0.), (1., 0.), (0., 1.))
        cw = ((0., 0.), (0., 1.), (1., 0.))
        for tri in (ccw, cw):
            assert in_circle(tri[0], tri[1], tri[2], (0.5, 0.5))
            assert in_circle(tri[0], tri[1], tri[2], (1., 1.))
            assert not in_circle(tri[0], tri[1], tri[2], (1., 1.),
                                 inclusive=False)
            assert not in_circle(tri[0], tri[1], tri[2], (2., 2.))
            assert not in_circle(tri[0], tri[1], tri[2], (2., 2.),
                                 inclusive=False)

    def test_collinear(self):
        assert collinear([(0, 0), (1, 1), (2, 2), (-5, -5)])
        assert collinear([(1, 1), (1, 1)])
        assert not collinear([(0, 0), (1, 1), (2, 2), (2, 3)])


class TestEdge(unittest.TestCase):

    def test_canonical(self):
        p, q = Point(1., 0.), Point(0., 1.)
        assert Edge(p, q) == Edge(q, p)
        assert hash(Edge(p, q)) == hash(Edge(q, p))
        assert Edge(p, q).orig == q
        assert Edge(p, q).dest == p

    def test_count_as_key(self):
        p, q, r = Point(0., 0.), Point(1., 0.), Point(0., 1.)
        keys = set([Edge(p, q), Edge(q, p), Edge(q, r), Edge(r, q)])
        assert len(keys) == 2

    def test_str(self):
        e = Edge(Point(1., 0.), Point(0., 0.))
        assert str(e) == "LINESTRING(0.0 0.0, 1.0 0.0)"


class TestTriangle(unittest.TestCase):

    def test_unordered(self):
        a, b, c = (0., 0.), (1., 0.), (0., 1.)
        assert Triangle(a, b, c) == Triangle(c, a, b)
        assert Triangle(a, b, c) == Triangle(b, a, c)
        assert len(set([Triangle(a, b, c), Triangle(c, b, a)])) == 1
        assert Triangle(a, b, c) != Triangle(a, b, (1., 1.))

    def test_vertices_are_points(self):
        t = Triangle((0, 0), (1, 0), (0, 1))
        for v in t.vertices:
            assert isinstance(v, Point)
        assert t.vertices == ((0, 0), (1, 0), (0, 1))

    def test_edges(self):
        t = Triangle((0., 0.), (1., 0.), (0., 1.))
        assert set(t.edges) == set([Edge((0., 0.), (1., 0.)),
                                    Edge((0., 1.), (1., 0.)),
                                    Edge((0., 0.), (0., 1.))])

    def test_circle(self):
        t = Triangle((0., 0.), (1., 0.), (0., 1.))
        assert t.circle.center == (0.5, 0.5)

    def test_degenerate(self):
        with self.assertRaises(DegenerateGeometryError):
            Triangle((0., 0.), (1., 0.), (2., 0.))

    def test_shares_vertex(self):
        t0 = Triangle((0., 0.), (1., 0.), (0., 1.))
        t1 = Triangle((1., 0.), (1., 1.), (0., 1.))
        t2 = Triangle((5., 5.), (6., 5.), (5., 6.))
        assert t0.shares_vertex(t1)
        assert not t0.shares_vertex(t2)

    def test_wkt(self):
        t = Triangle((0., 0.), (1., 0.), (0., 1.))
        assert str(t) == "POLYGON((0.0 0.0, 1.0 0.0, 0.0 1.0, 0.0 0.0))"


class TestBox(unittest.TestCase):

    def test_box(self):
        assert box([(0, 5), (-1, 2), (3, -4)]) == ((-1, -4), (3, 5))

    def test_single(self):
        assert box([(2, 3)]) == ((2, 3), (2, 3))

    def test_empty(self):
        with self.assertRaises(InsufficientInputError):
            box([])


if __name__ == "__main__":
    unittest.main()
