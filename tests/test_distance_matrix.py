"""
Tests for planar distances and the distance matrix builder.
"""

import math
from types import SimpleNamespace

import numpy as np
import pytest

from calcDist import build_distance_matrix, planar_distance, tour_distance
from point import InvalidCoordinateError, Point


@pytest.fixture
def line_points():
    return [Point("A", 0, 0), Point("B", 0, 1), Point("C", 0, 3), Point("D", 0, 10)]


class TestPlanarDistance:
    def test_pythagorean(self):
        assert planar_distance((0.0, 0.0), (3.0, 4.0)) == 5.0

    def test_same_point(self):
        assert planar_distance((12.5, -7.25), (12.5, -7.25)) == 0.0


class TestBuildDistanceMatrix:
    def test_empty_input_gives_empty_matrix(self):
        matrix = build_distance_matrix([])
        assert matrix.shape == (0, 0)

    def test_single_point(self):
        matrix = build_distance_matrix([Point("A", 5.0, 5.0)])
        assert matrix.shape == (1, 1)
        assert matrix[0, 0] == 0.0

    def test_known_distances(self, line_points):
        matrix = build_distance_matrix(line_points)
        assert matrix.shape == (4, 4)
        assert matrix.dtype == np.float64
        assert matrix[0, 1] == 1.0
        assert matrix[1, 2] == 2.0
        assert matrix[2, 3] == 7.0
        assert matrix[3, 0] == 10.0

    def test_diagonal_is_zero(self, line_points):
        matrix = build_distance_matrix(line_points)
        assert all(matrix[i, i] == 0.0 for i in range(len(line_points)))

    def test_symmetric(self):
        points = [Point("P%d" % i, 0.1 * i * i, -3.7 * i + 0.01) for i in range(7)]
        matrix = build_distance_matrix(points)
        assert np.array_equal(matrix, matrix.T)

    def test_does_not_mutate_input(self, line_points):
        copy = list(line_points)
        build_distance_matrix(line_points)
        assert line_points == copy

    def test_accepts_duck_typed_points(self):
        points = [SimpleNamespace(lat=0.0, lon=0.0, to_tuple=lambda: (0.0, 0.0)),
                  SimpleNamespace(lat=3.0, lon=4.0, to_tuple=lambda: (3.0, 4.0))]
        matrix = build_distance_matrix(points)
        assert matrix[0, 1] == 5.0

    def test_rejects_non_finite_duck_typed_point(self):
        bad = SimpleNamespace(name="bad", lat=math.nan, lon=0.0, to_tuple=lambda: (math.nan, 0.0))
        with pytest.raises(InvalidCoordinateError):
            build_distance_matrix([Point("A", 0, 0), bad])


class TestTourDistance:
    def test_closed_tour(self, line_points):
        tour = line_points + [line_points[0]]
        assert tour_distance(tour) == 1.0 + 2.0 + 7.0 + 10.0

    def test_short_tours(self):
        assert tour_distance([]) == 0.0
        assert tour_distance([Point("A", 1, 1)]) == 0.0
