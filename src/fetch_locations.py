import logging
import re
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

import requests
from geopy.exc import GeocoderServiceError, GeocoderTimedOut
from geopy.geocoders import Nominatim

import config
from point import Point

logger = logging.getLogger(__name__)


class LocationProviderError(RuntimeError):
    """Raised when locations cannot be fetched or the payload cannot be read."""


# randomuser.me payload

@dataclass
class StreetInfo:
    number: int
    name: str


@dataclass
class Coordinates:
    latitude: str
    longitude: str


@dataclass
class Timezone:
    offset: str
    description: str


@dataclass
class LocationInfo:
    street: StreetInfo
    city: str
    state: str
    country: str
    postcode: Union[int, str]
    coordinates: Coordinates
    timezone: Timezone

    @classmethod
    def from_dict(cls, data: Dict) -> "LocationInfo":
        postcode = data.get('postcode', "")
        if not isinstance(postcode, (int, str)) or isinstance(postcode, bool):
            raise LocationProviderError(f"Unexpected postcode value: {postcode!r}")
        street = data.get('street') or {}
        tz = data.get('timezone') or {}
        coords = data['coordinates']
        return cls(
            street=StreetInfo(number=street.get('number', 0), name=street.get('name', "")),
            city=data['city'],
            state=data.get('state', ""),
            country=data.get('country', ""),
            postcode=postcode,
            coordinates=Coordinates(latitude=str(coords['latitude']), longitude=str(coords['longitude'])),
            timezone=Timezone(offset=tz.get('offset', ""), description=tz.get('description', "")),
        )

    def to_point(self) -> Point:
        return Point(self.city, float(self.coordinates.latitude), float(self.coordinates.longitude))


def parse_location_response(payload: Dict) -> List[Point]:
    """
    Convert a randomuser.me response into points.

    Args:
        payload: Decoded JSON body with a 'results' list

    Returns:
        One point per result, in response order, named after the city

    Raises:
        LocationProviderError: If the payload is missing fields or has bad coordinates
    """
    try:
        results = payload['results']
        return [LocationInfo.from_dict(item['location']).to_point() for item in results]
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        # InvalidCoordinateError is a ValueError too
        raise LocationProviderError(f"Malformed location payload: {e}") from e


def fetch_random_locations(count: int = config.DEFAULT_LOCATION_COUNT,
                           retries: int = config.PROVIDER_RETRIES) -> List[Point]:
    """
    Fetch `count` random locations from randomuser.me.

    Network errors and non-200 responses are retried; a body that is not
    valid JSON fails at once. After the last attempt a LocationProviderError
    is raised.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    params = {'results': count, 'inc': 'location', 'noinfo': ''}
    last_error = None

    for attempt in range(retries):
        try:
            response = requests.get(config.RANDOMUSER_URL, params=params, timeout=config.PROVIDER_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as e:
            last_error = e
            if attempt < retries - 1:
                logger.warning("Location request failed (%s), retrying (%d/%d)...", e, attempt + 1, retries)
                time.sleep(config.PROVIDER_RETRY_DELAY)
            continue

        try:
            payload = response.json()
        except ValueError as e:
            raise LocationProviderError(f"Malformed location payload: {e}") from e
        points = parse_location_response(payload)
        logger.info("Fetched %d locations", len(points))
        return points

    raise LocationProviderError(f"Fetching locations failed after {retries} attempts: {last_error}")


# Manual input

def is_coordinate_string(input_str: str) -> bool:
    """Check if input is in lat,lon format."""
    pattern = r'^-?\d+\.?\d*\s*,\s*-?\d+\.?\d*$'
    return bool(re.match(pattern, input_str.strip()))


def parse_coordinates(coord_str: str) -> Tuple[float, float]:
    """Parse 'lat,lon' string to (lat, lon) tuple."""
    parts = coord_str.strip().split(',')
    if len(parts) != 2:
        raise ValueError(f"Invalid coordinate format: {coord_str}")

    lat = float(parts[0].strip())
    lon = float(parts[1].strip())
    return lat, lon


_geocoder = None


def _get_geocoder() -> Nominatim:
    global _geocoder
    if _geocoder is None:
        _geocoder = Nominatim(user_agent=config.GEOCODING_USER_AGENT)
    return _geocoder


def geocode_place(place: str, retries: int = config.GEOCODING_RETRIES) -> Optional[Tuple[float, float]]:
    """
    Convert a place name to (lat, lon) using Nominatim.

    Returns:
        (lat, lon) tuple, or None if nothing matched

    Raises:
        LocationProviderError: On service errors or repeated timeouts
    """
    for attempt in range(retries):
        try:
            location = _get_geocoder().geocode(place, timeout=config.GEOCODING_TIMEOUT)
        except GeocoderTimedOut as e:
            if attempt < retries - 1:
                logger.warning("Geocoder timeout for '%s', retrying (%d/%d)...", place, attempt + 1, retries)
                time.sleep(1)
                continue
            raise LocationProviderError(f"Geocoding '{place}' timed out after {retries} attempts") from e
        except GeocoderServiceError as e:
            raise LocationProviderError(f"Geocoding service error for '{place}': {e}") from e

        if location is None:
            logger.info("No geocoding result for '%s'", place)
            return None
        return location.latitude, location.longitude
    return None


def parse_location_input(input_str: str, name: Optional[str] = None) -> Point:
    """
    Smart parser: handles both coordinate strings and place names.

    Args:
        input_str: Either "lat,lon" or a place name
        name: Point name; defaults to the input text

    Raises:
        ValueError: If the input is empty or the place cannot be found
    """
    input_str = input_str.strip()
    if not input_str:
        raise ValueError("Empty location input.")
    name = name or input_str

    if is_coordinate_string(input_str):
        lat, lon = parse_coordinates(input_str)
        return Point(name, lat, lon)

    coords = geocode_place(input_str)
    if coords is None:
        raise ValueError(f"Failed to geocode place: '{input_str}'")
    return Point(name, coords[0], coords[1])
