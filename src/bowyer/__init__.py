"""Bowyer - Delaunay Triangulation of point sets (incremental Bowyer-Watson)
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'

from bowyer.delaunay import triangulate, unique_points, \
    TriangulationError, InsufficientInputError, DegenerateGeometryError, \
    InvariantViolationError

__all__ = ["triangulate", "unique_points",
           "TriangulationError", "InsufficientInputError",
           "DegenerateGeometryError", "InvariantViolationError"]
