# NearestNeighbor.py
import logging
from typing import Dict, List, Optional, Sequence

from calcDist import build_distance_matrix
from point import Point

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when a tour is requested for zero points."""


def _nearest_unvisited(matrix, current: int, unvisited: Dict[int, None]) -> int:
    # min() keeps the first of equal keys, so ties go to the earliest input index
    return min(unvisited, key=lambda j: matrix[current][j])


def nearest_neighbor_tour(points: Sequence[Point], matrix) -> List[Point]:
    """Greedy closed tour starting at points[0]. Returns N+1 points, first == last."""
    n = len(points)
    if n == 0:
        raise EmptyInputError("Cannot build a tour from zero points.")
    if len(matrix) != n or any(len(row) != n for row in matrix):
        raise ValueError(f"Distance matrix does not match {n} points.")

    # dict keeps insertion order and gives O(1) removal
    unvisited = dict.fromkeys(range(1, n))
    current = 0
    tour = [points[0]]

    while unvisited:
        nxt = _nearest_unvisited(matrix, current, unvisited)
        del unvisited[nxt]
        tour.append(points[nxt])
        current = nxt

    tour.append(tour[0])
    logger.debug("Tour over %d points: %s", n, [p.name for p in tour])
    return tour


def solve_nearest_neighbor(points: Sequence[Point], matrix: Optional[Sequence] = None) -> List[Point]:
    if matrix is None:
        matrix = build_distance_matrix(points)
    return nearest_neighbor_tour(points, matrix)
