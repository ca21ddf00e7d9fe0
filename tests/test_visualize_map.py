"""
Tests for the folium and matplotlib tour renderers.
"""

import os

import folium
import pytest

from point import Point
from visualize_map import build_tour_map, get_bounding_box, plot_tour_simple, save_tour_map, tour_stops


@pytest.fixture
def tour():
    a, b, c = Point("Alpha", 10.0, 20.0), Point("Bravo", 11.0, 22.0), Point("Charlie", 12.5, 21.0)
    return [a, b, c, a]


def markers(m):
    return [child for child in m._children.values() if isinstance(child, folium.Marker)]


class TestTourStops:
    def test_drops_closing_point(self, tour):
        assert tour_stops(tour) == tour[:-1]

    def test_single_point_tour(self):
        a = Point("A", 1, 1)
        assert tour_stops([a, a]) == [a]

    def test_open_sequence_unchanged(self, tour):
        assert tour_stops(tour[:-1]) == tour[:-1]


class TestBoundingBox:
    def test_padded(self, tour):
        min_lat, min_lon, max_lat, max_lon = get_bounding_box(tour, padding=0.5)
        assert (min_lat, min_lon, max_lat, max_lon) == (9.5, 19.5, 13.0, 22.5)

    def test_empty(self):
        assert get_bounding_box([]) == (0.0, 0.0, 0.0, 0.0)


class TestBuildTourMap:
    def test_one_marker_per_stop(self, tour):
        m = build_tour_map(tour)
        found = markers(m)
        assert len(found) == 3
        assert [mk.location for mk in found] == [[10.0, 20.0], [11.0, 22.0], [12.5, 21.0]]

    def test_tooltips_in_visiting_order(self, tour):
        html = build_tour_map(tour).get_root().render()
        assert "1. Alpha" in html
        assert "2. Bravo" in html
        assert "3. Charlie" in html

    def test_route_not_drawn(self, tour):
        m = build_tour_map(tour)
        assert not any(isinstance(child, folium.PolyLine) for child in m._children.values())


class TestSaveTourMap:
    def test_writes_html(self, tour, tmp_path):
        target = tmp_path / "map.html"
        path = save_tour_map(tour, str(target))
        assert path == os.path.abspath(str(target))
        content = target.read_text(encoding="utf-8")
        assert "leaflet" in content.lower()
        assert "Charlie" in content

    def test_default_location(self, tour, tmp_path, monkeypatch):
        import config
        monkeypatch.setattr(config, "DATA_DIR", str(tmp_path / "out"))
        path = save_tour_map(tour)
        assert path.endswith(config.DEFAULT_MAP_FILENAME)
        assert (tmp_path / "out" / config.DEFAULT_MAP_FILENAME).exists()


class TestPlotTourSimple:
    def test_saves_png(self, tour, tmp_path):
        target = tmp_path / "tour.png"
        plot_tour_simple(tour, filepath=str(target))
        assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
