"""
Geographic fence for the Greater St. Louis metro area.

Every coordinate this package produces must pass `is_valid_location` before it is
handed to a consumer. The fence never raises; rejections are reported through the
diagnostics sink and returned as `False`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from src.services.diagnostics import EventSink, resolve_sink

LOGGER = logging.getLogger(__name__)

EARTH_RADIUS_MILES = 3959.0
DEFAULT_MAX_DISTANCE_MILES = 50.0


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def to_serializable(self) -> dict[str, float]:
        return {"lat": self.latitude, "lng": self.longitude}


@dataclass(frozen=True)
class BoundingBox:
    north: float
    south: float
    east: float
    west: float

    def contains(self, point: GeoPoint) -> bool:
        return (
            self.south <= point.latitude <= self.north
            and self.west <= point.longitude <= self.east
        )


METRO_CENTER = GeoPoint(38.6270, -90.1994)

# Extended to cover Lincoln (north), Jefferson (south), Franklin/Warren (west) and the
# Illinois side (east).
METRO_BOUNDS = BoundingBox(north=39.10, south=38.20, east=-89.85, west=-91.20)

# The only Illinois area incidents may be attributed to.
EAST_STL_BOUNDS = BoundingBox(north=38.65, south=38.58, east=-89.98, west=-90.15)


def calculate_distance(p1: GeoPoint, p2: GeoPoint) -> float:
    """Great-circle distance between two points in miles (haversine)."""
    d_lat = math.radians(p2.latitude - p1.latitude)
    d_lng = math.radians(p2.longitude - p1.longitude)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(p1.latitude))
        * math.cos(math.radians(p2.latitude))
        * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def distance_from_center(point: GeoPoint) -> float:
    return calculate_distance(point, METRO_CENTER)


def is_within_bounds(point: GeoPoint, events: EventSink | None = None) -> bool:
    """Primary fence: inclusive check against the metro bounding box."""
    within = METRO_BOUNDS.contains(point)
    if not within:
        resolve_sink(events, LOGGER).emit(
            "fence.out_of_bounds",
            "Point (%.4f, %.4f) is outside STL metro bounds",
            point.latitude,
            point.longitude,
            level=logging.WARNING,
            latitude=point.latitude,
            longitude=point.longitude,
        )
    return within


def is_valid_location(
    point: GeoPoint,
    max_distance_miles: float = DEFAULT_MAX_DISTANCE_MILES,
    events: EventSink | None = None,
) -> bool:
    """Point must be inside the metro box AND within `max_distance_miles` of the centroid."""
    if not is_within_bounds(point, events=events):
        return False
    distance = distance_from_center(point)
    if distance > max_distance_miles:
        resolve_sink(events, LOGGER).emit(
            "fence.too_far",
            "Location is %.1f miles from STL center (max: %smi)",
            distance,
            max_distance_miles,
            level=logging.WARNING,
            distance_miles=distance,
            max_distance_miles=max_distance_miles,
        )
        return False
    return True


def is_within_subregion(point: GeoPoint) -> bool:
    """East St. Louis check; no distance test."""
    return EAST_STL_BOUNDS.contains(point)
