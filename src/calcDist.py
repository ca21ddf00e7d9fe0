# calcDist.py
import math
from typing import Sequence, Tuple

import numpy as np

from point import Point, check_coordinates


def planar_distance(p1: Tuple[float, float], p2: Tuple[float, float]) -> float:
    """Straight-line distance between (lat, lon) tuples, in degrees.

    Latitude and longitude are used as Cartesian coordinates; there is no
    great-circle correction.
    """
    delta_x = p1[0] - p2[0]
    delta_y = p1[1] - p2[1]
    return math.sqrt(delta_x * delta_x + delta_y * delta_y)


def build_distance_matrix(points: Sequence[Point]) -> np.ndarray:
    """
    Pairwise planar distances between points.

    Args:
        points: Sequence of points (anything with lat, lon and to_tuple())

    Returns:
        N x N float64 array; the diagonal stays at zero

    Raises:
        InvalidCoordinateError: If any point has a NaN or infinite coordinate
    """
    for p in points:
        check_coordinates(p.lat, p.lon, getattr(p, 'name', ''))

    n = len(points)
    matrix = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            if i != j:
                matrix[i, j] = planar_distance(points[i].to_tuple(), points[j].to_tuple())
    return matrix


def tour_distance(tour: Sequence[Point]) -> float:
    """Sum of the legs between consecutive points of a tour."""
    return sum(planar_distance(a.to_tuple(), b.to_tuple()) for a, b in zip(tour[:-1], tour[1:]))
