from __future__ import annotations

from src.services.diagnostics import RecordingEventSink
from src.services.geofence import (
    METRO_BOUNDS,
    METRO_CENTER,
    GeoPoint,
    calculate_distance,
    distance_from_center,
    is_valid_location,
    is_within_bounds,
    is_within_subregion,
)


def test_metro_center_is_inside_fence() -> None:
    assert is_within_bounds(METRO_CENTER)
    assert is_valid_location(METRO_CENTER)
    assert distance_from_center(METRO_CENTER) == 0


def test_bounds_are_inclusive_on_every_edge() -> None:
    assert is_within_bounds(GeoPoint(METRO_BOUNDS.north, -90.2))
    assert is_within_bounds(GeoPoint(METRO_BOUNDS.south, -90.2))
    assert is_within_bounds(GeoPoint(38.6, METRO_BOUNDS.east))
    assert is_within_bounds(GeoPoint(38.6, METRO_BOUNDS.west))


def test_out_of_bounds_point_emits_event() -> None:
    events = RecordingEventSink()

    assert not is_within_bounds(GeoPoint(40.0, -90.2), events=events)
    assert events.names() == ["fence.out_of_bounds"]
    assert events.events[0].fields["latitude"] == 40.0


def test_point_in_box_but_far_from_center_is_rejected() -> None:
    events = RecordingEventSink()
    far_corner = GeoPoint(38.25, -91.15)

    assert is_within_bounds(far_corner)
    assert not is_valid_location(far_corner, events=events)
    assert events.names() == ["fence.too_far"]
    assert events.events[0].fields["distance_miles"] > 50


def test_max_distance_is_configurable() -> None:
    clayton = GeoPoint(38.6426, -90.3237)

    assert is_valid_location(clayton)
    assert not is_valid_location(clayton, max_distance_miles=1)


def test_calculate_distance_matches_known_span() -> None:
    # Downtown to Lambert airport is roughly 13 miles.
    lambert = GeoPoint(38.7487, -90.3700)
    distance = calculate_distance(METRO_CENTER, lambert)

    assert 11 < distance < 14
    assert calculate_distance(lambert, METRO_CENTER) == distance


def test_subregion_covers_east_st_louis_only() -> None:
    assert is_within_subregion(GeoPoint(38.6160, -90.1300))
    assert not is_within_subregion(GeoPoint(38.6377, -90.2854))
