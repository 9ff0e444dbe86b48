'''
Created on Oct 19, 2026

Write triangulation output as well known text (for inspection in QGIS).
'''


def output_vertices(V, fh):
    """Output list of vertices as WKT to text file (for QGIS)"""
    fh.write("id;wkt\n")
    for i, v in enumerate(V):
        fh.write("{0};POINT({1})\n".format(i, v))


def output_triangles(T, fh):
    """Output list of triangles as WKT to text file (for QGIS)"""
    fh.write("id;wkt;v0;v1;v2\n")
    for i, t in enumerate(T):
        fh.write("{0};{1};"
                 "{2[0]};{2[1]};{2[2]}\n".format(
                    i, t,
                    ["POINT({})".format(v) for v in t.vertices]))


def output_circles(T, fh):
    """Output the circumcircles of the triangles as WKT
    (center point, with radius as attribute)
    """
    fh.write("id;wkt;radius\n")
    for i, t in enumerate(T):
        fh.write("{0};POINT({1});{2}\n".format(i, t.circle.center,
                                               t.circle.radius))


def output_edges(E, fh):
    fh.write("id;wkt\n")
    for i, e in enumerate(E):
        fh.write("{0};{1}".format(i, e))
        fh.write("\n")
