# point.py
import math
from dataclasses import dataclass


class InvalidCoordinateError(ValueError):
    """Raised when a latitude or longitude is NaN or infinite."""


def check_coordinates(lat: float, lon: float, name: str = ""):
    if not (math.isfinite(lat) and math.isfinite(lon)):
        label = f" for '{name}'" if name else ""
        raise InvalidCoordinateError(f"Non-finite coordinates{label}: lat={lat}, lon={lon}")


@dataclass(frozen=True)
class Point:
    """Represents a named location. lat/lon are treated as planar x/y."""
    name: str
    lat: float
    lon: float

    def __post_init__(self):
        check_coordinates(self.lat, self.lon, self.name)

    def to_tuple(self):
        return (self.lat, self.lon)
