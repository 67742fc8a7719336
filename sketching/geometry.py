"""
geometry.py
---------------

Guide shape construction and the distance queries the
pen steers by.
"""
import shapely
import trimesh
import numpy as np

from shapely.geometry import LineString, MultiPoint, Point

from . import util
from .exceptions import DegenerateGuideShape


def polyline(shape):
    """
    Convert a guide shape into a closed polyline.

    Parameters
    -------------
    shape : shapely.geometry.Polygon, LineString, or (n, 2) float
      Boundary of the guide shape

    Returns
    ------------
    polyline : shapely.geometry.LineString
      Closed boundary, first and last coordinates equal
    """
    if hasattr(shape, 'exterior'):
        # polygons
        points = np.array(shape.exterior.coords)
    elif hasattr(shape, 'coords'):
        # linestrings etc
        points = np.array(shape.coords)
    else:
        # numpy arrays
        points = np.array(shape, dtype=np.float64)

    if not trimesh.util.is_shape(points, (-1, 2)):
        raise DegenerateGuideShape('guide shape must be (n, 2) points!')

    # count distinct vertices, ignoring any closing duplicate
    if len(np.unique(points, axis=0)) < 3:
        raise DegenerateGuideShape(
            'guide shape needs at least 3 distinct points!')

    # close the ring so the last edge is included
    if not np.allclose(points[0], points[-1]):
        points = np.vstack((points, points[:1]))

    return LineString(points)


def vertices(polyline):
    """
    Get the vertices of a closed polyline.

    Parameters
    ------------
    polyline : shapely.geometry.LineString
      Closed guide shape

    Returns
    ------------
    vertices : (n, 2) float
      Vertices without the closing duplicate
    """
    points = np.array(polyline.coords)
    if len(points) > 1 and np.allclose(points[0], points[-1]):
        points = points[:-1]
    return points


def distance(a, b):
    """
    Distance between a point and a point, or between a
    point and the edges of a polyline.

    Parameters
    ------------
    a : (2,) float
      Point
    b : (2,) float, or shapely.geometry.LineString
      Other point or polyline

    Returns
    ------------
    distance : float
      Euclidean distance, or minimum distance to any edge
    """
    if hasattr(b, 'geom_type'):
        return b.distance(Point(a))
    return float(np.linalg.norm(
        np.asanyarray(a, dtype=np.float64) -
        np.asanyarray(b, dtype=np.float64)))


def boundary_distance(polyline, points):
    """
    Find the distance between a polyline and an
    array of points.

    Parameters
    -------------
    polyline : shapely.geometry.LineString
      Polyline to query
    points : (n, 2) float
      2D points

    Returns
    ------------
    distance : (n,) float
      Minimum distance from each point to the polyline
    """
    points = np.asanyarray(points, dtype=np.float64)
    if not trimesh.util.is_shape(points, (-1, 2)):
        raise ValueError('points must be (n, 2)!')
    return shapely.distance(polyline, shapely.points(points))


def highest_leftmost_point(points):
    """
    Select the point with the largest Y, breaking ties
    with the smallest X.

    Parameters
    ------------
    points : (n, 2) float
      Points to choose from

    Returns
    ------------
    point : (2,) float
      Topmost, then leftmost point
    """
    points = np.asanyarray(points, dtype=np.float64)
    if not trimesh.util.is_shape(points, (-1, 2)) or len(points) == 0:
        raise ValueError('points must be non-empty (n, 2)!')
    # lexsort keys are last-is-primary
    order = np.lexsort((points[:, 0], -points[:, 1]))
    return points[order[0]].copy()


def random_guide_shape(count, bounds, random=None):
    """
    Create a guide shape from the convex hull of random
    points scattered in a box.

    Parameters
    ------------
    count : int
      Number of random points, at least 3
    bounds : (2, 2) float
      [[xmin, ymin], [xmax, ymax]]
    random : None, int, or numpy.random.Generator
      Source of randomness

    Returns
    ------------
    polyline : shapely.geometry.LineString
      Closed hull of the points
    """
    bounds = np.array(bounds, dtype=np.float64)
    if not trimesh.util.is_shape(bounds, (2, 2)):
        raise ValueError('bounds must be (2, 2)!')
    if count < 3:
        raise DegenerateGuideShape('need at least 3 points for a hull!')

    random = util.generator(random)
    points = np.column_stack([
        [util.random_range(*bounds[:, i], random=random)
         for _ in range(count)]
        for i in range(2)])

    hull = MultiPoint(points).convex_hull
    # collinear points hull to a line which `polyline` rejects
    return polyline(hull)
