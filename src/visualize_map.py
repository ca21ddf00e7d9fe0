# visualize_map.py
import logging
import os
from typing import List, Optional, Sequence, Tuple

import folium
import matplotlib.pyplot as plt

import config
from point import Point

logger = logging.getLogger(__name__)


def tour_stops(tour: Sequence[Point]) -> List[Point]:
    """Tour points without the closing repeat of the start."""
    if len(tour) > 1 and tour[0] == tour[-1]:
        return list(tour[:-1])
    return list(tour)


def get_bounding_box(points: Sequence[Point],
                     padding: float = config.MAP_SETTINGS['bbox_padding']) -> Tuple[float, float, float, float]:
    """(min_lat, min_lon, max_lat, max_lon) around the points, padded in degrees."""
    if not points:
        return (0.0, 0.0, 0.0, 0.0)
    lats = [p.lat for p in points]
    lons = [p.lon for p in points]
    return (min(lats) - padding, min(lons) - padding, max(lats) + padding, max(lons) + padding)


def build_tour_map(tour: Sequence[Point]) -> folium.Map:
    """One marker per stop, numbered in visiting order. The route itself is not drawn."""
    stops = tour_stops(tour)
    min_lat, min_lon, max_lat, max_lon = get_bounding_box(stops)
    center = ((min_lat + max_lat) / 2, (min_lon + max_lon) / 2)

    m = folium.Map(location=center,
                   zoom_start=config.MAP_SETTINGS['zoom_start'],
                   control_scale=config.MAP_SETTINGS['control_scale'],
                   tiles=config.MAP_SETTINGS['tiles'])
    for order, p in enumerate(stops, start=1):
        color = "green" if order == 1 else "blue"
        folium.Marker(location=p.to_tuple(), tooltip=f"{order}. {p.name}", icon=folium.Icon(color=color)).add_to(m)

    if stops:
        m.fit_bounds([[min_lat, min_lon], [max_lat, max_lon]])
    return m


def save_tour_map(tour: Sequence[Point], filepath: Optional[str] = None) -> str:
    filepath = filepath or config.get_output_path(config.DEFAULT_MAP_FILENAME)
    build_tour_map(tour).save(filepath)
    logger.info("Saved map with %d stops to %s", len(tour_stops(tour)), filepath)
    return os.path.abspath(filepath)


def plot_tour_simple(tour: Sequence[Point], filepath: Optional[str] = None):
    settings = config.VISUALIZATION_SETTINGS
    stops = tour_stops(tour)
    fig, ax = plt.subplots(figsize=settings['figsize'])
    fig.patch.set_facecolor(settings['bgcolor'])
    if stops:
        ax.scatter([p.lon for p in stops], [p.lat for p in stops],
                   s=settings['marker_size'], c=settings['marker_color'], zorder=2)
        ax.scatter([stops[0].lon], [stops[0].lat],
                   s=settings['marker_size'] * 2, c=settings['start_color'], zorder=3)
        for order, p in enumerate(stops, start=1):
            ax.annotate(f"{order}. {p.name}", (p.lon, p.lat), fontsize=settings['label_fontsize'],
                        xytext=(4, 4), textcoords="offset points")
    ax.set_xlabel("lon")
    ax.set_ylabel("lat")
    if filepath:
        fig.savefig(filepath, dpi=settings['dpi'])
        plt.close(fig)
    else:
        plt.show()
