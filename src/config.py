import logging
import os
from typing import Any, Dict

DATA_DIR = os.getenv('TSP_DATA_DIR', os.path.join(os.getcwd(), 'data'))


# randomuser.me location provider
RANDOMUSER_URL = os.getenv('RANDOMUSER_URL', "https://api.randomuser.me/")
DEFAULT_LOCATION_COUNT = 5
MAX_LOCATION_COUNT = 100
PROVIDER_TIMEOUT = 10
PROVIDER_RETRIES = 3
PROVIDER_RETRY_DELAY = 1.0

# Nominatim geocoder settings
GEOCODING_USER_AGENT = "nearest_neighbor_tour_app"
GEOCODING_TIMEOUT = 10
GEOCODING_RETRIES = 3


MAP_SETTINGS: Dict[str, Any] = {
    'zoom_start': 13,
    'tiles': "OpenStreetMap",
    'control_scale': True,
    'bbox_padding': 0.1,  # degrees around the outermost markers
    'height': 400,
}

VISUALIZATION_SETTINGS = {
    'dpi': 150,
    'figsize': (8, 8),
    'marker_size': 40,
    'marker_color': 'red',
    'start_color': 'green',
    'label_fontsize': 8,
    'bgcolor': 'white',
}

# Output file names
DEFAULT_MAP_FILENAME = "leaflet-map.html"
DEFAULT_PNG_FILENAME = "tour.png"



STREAMLIT_CONFIG = {
    'page_title': "Nearest Neighbor Tour",
    'page_icon': "🗺️",
    'layout': "wide",
}

UI_TEXT = {
    'app_title': "Nearest Neighbor Tour",
    'tagline': "Greedy TSP tour over random locations | Powered by randomuser.me & OpenStreetMap",
}


def get_output_path(filename: str) -> str:
    """
    Get full path for output file in data directory.

    Args:
        filename: Name of the output file

    Returns:
        Full path to the output file
    """
    os.makedirs(DATA_DIR, exist_ok=True)
    return os.path.join(DATA_DIR, filename)


# Enable debug mode (can be overridden by environment variable)
DEBUG = os.getenv('DEBUG', 'False').lower() in ('true', '1', 'yes')

# Verbose logging
VERBOSE = os.getenv('VERBOSE', 'False').lower() in ('true', '1', 'yes')


def configure_logging():
    if DEBUG:
        level = logging.DEBUG
    elif VERBOSE:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


__version__ = "1.0.0"
__project__ = "Nearest Neighbor Tour"
