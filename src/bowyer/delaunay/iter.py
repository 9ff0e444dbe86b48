'''
Created on Oct 19, 2026
'''

# ------------------------------------------------------------------------------
# Iterators
#
from collections import Counter


def edge_counts(triangles):
    """Counts for every (canonical) edge by how many triangles it is used"""
    return Counter(edge for triangle in triangles for edge in triangle.edges)


class EdgeIterator(object):
    """Iterator over the edges of a set of triangles, every edge is
    output only once.

    The hull_only parameter determines whether only the edges on the
    convex hull are iterated over (edges used by 1 triangle), the
    internal_only parameter whether only the edges that are shared by
    2 triangles are iterated over.
    """

    def __init__(self, triangles, hull_only=False, internal_only=False):
        if hull_only and internal_only:
            raise ValueError("Either hull_only or internal_only can be set")
        self.counts = edge_counts(triangles)
        self.hull_only = hull_only
        self.internal_only = internal_only
        self._it = iter(sorted(self.counts))

    def __iter__(self):
        return self

    def __next__(self):
        for edge in self._it:
            count = self.counts[edge]
            if self.hull_only and count != 1:
                continue
            if self.internal_only and count != 2:
                continue
            return edge
        raise StopIteration()


class ConvexHullEdgeIterator(EdgeIterator):
    """Iterator over the edges on the convex hull of the triangulation
    (the edges that have a triangle at one side only).
    """

    def __init__(self, triangles):
        super(ConvexHullEdgeIterator, self).__init__(triangles, hull_only=True)


class InternalEdgeIterator(EdgeIterator):
    """Iterator over the edges shared by two triangles"""

    def __init__(self, triangles):
        super(InternalEdgeIterator, self).__init__(triangles,
                                                   internal_only=True)


def hull_vertices(triangles):
    """Vertices on the convex hull of the triangulation"""
    return set(v for edge in ConvexHullEdgeIterator(triangles) for v in edge)
