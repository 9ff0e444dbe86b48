'''
Created on Oct 19, 2026

Exceptions raised while building a triangulation.
'''


class TriangulationError(Exception):
    """Base class for all errors raised by the triangulation engine"""


class InsufficientInputError(TriangulationError, ValueError):
    """Fewer than 3 (distinct) points were supplied"""


class DegenerateGeometryError(TriangulationError, ValueError):
    """Points are (near) collinear or coincide, so no circumcircle exists"""


class InvariantViolationError(TriangulationError, AssertionError):
    """The mesh is found in a state that correct input can never produce.

    When this is raised, the mesh was already broken upstream; there is
    nothing to recover.
    """
