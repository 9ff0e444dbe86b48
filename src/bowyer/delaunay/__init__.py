"""Bowyer - Delaunay Triangulation of point sets (incremental Bowyer-Watson)
"""

from bowyer.delaunay.insert_bw import triangulate, BowyerWatsonInserter, \
    enclosing_triangle
from bowyer.delaunay.errors import TriangulationError, \
    InsufficientInputError, DegenerateGeometryError, InvariantViolationError
from bowyer.delaunay.helpers import unique_points
from bowyer.delaunay.tds import Point, Edge, Circle, Triangle, \
    distance, circumcircle, circle_contains


__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__all__ = ("triangulate", "BowyerWatsonInserter", "enclosing_triangle",
           "TriangulationError", "InsufficientInputError",
           "DegenerateGeometryError", "InvariantViolationError",
           "unique_points", "Point", "Edge", "Circle", "Triangle",
           "distance", "circumcircle", "circle_contains")
