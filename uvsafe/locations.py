"""Location search, nearest-city lookup and coordinate validation."""

import math
from collections.abc import Sequence

from uvsafe.config.defaults import DEFAULT_LOCATIONS
from uvsafe.config.schema import LocationConfig

EARTH_RADIUS_KM = 6371.0


class InvalidCoordinatesError(ValueError):
    pass


def validate_coordinates(lat: float, lng: float) -> None:
    if not (math.isfinite(lat) and -90.0 <= lat <= 90.0):
        raise InvalidCoordinatesError(f"Latitude out of range: {lat}")
    if not (math.isfinite(lng) and -180.0 <= lng <= 180.0):
        raise InvalidCoordinatesError(f"Longitude out of range: {lng}")


def location_label(loc: LocationConfig) -> str:
    return f"{loc.city}, {loc.state}"


def search_locations(
    query: str, locations: Sequence[LocationConfig] = DEFAULT_LOCATIONS
) -> list[LocationConfig]:
    """Case-insensitive substring match against "city state"."""
    needle = query.strip().lower()
    return [loc for loc in locations if needle in f"{loc.city} {loc.state}".lower()]


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def nearest_location(
    lat: float, lon: float, locations: Sequence[LocationConfig] = DEFAULT_LOCATIONS
) -> LocationConfig:
    """Closest preset to a coordinate; the earlier preset wins a tie."""
    if not locations:
        raise ValueError("No locations to choose from")
    return min(locations, key=lambda loc: haversine_km(lat, lon, loc.lat, loc.lon))
