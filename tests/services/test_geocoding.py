from __future__ import annotations

import random

import pytest

from src.services.diagnostics import RecordingEventSink
from src.services.gazetteer import GAZETTEER, GazetteerEntry
from src.services.geocoding import (
    JITTER_DEGREES,
    MERAMEC_CLAMP_LATITUDE,
    MERAMEC_LATITUDE,
    TextGeocoder,
    confidence_for_score,
    geocode_text,
    is_jefferson_county_location,
    mentions_jefferson_county,
)
from src.services.geofence import GeoPoint, is_valid_location


class FixedRandom:
    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


def make_geocoder(events: RecordingEventSink | None = None, seed: int = 7, **kwargs) -> TextGeocoder:
    return TextGeocoder(rng=random.Random(seed), events=events, **kwargs)


def make_entry(name: str, lat: float, lng: float, place_type: str = "city") -> GazetteerEntry:
    return GazetteerEntry(name=name, aliases=(name.lower(),), location=GeoPoint(lat, lng), place_type=place_type)


def test_intersection_beats_its_component_roads() -> None:
    result = make_geocoder().geocode_text("Crash on I-64 at Kingshighway backs up traffic")

    assert result is not None
    assert result.matched_location_name == "I-64 at Kingshighway"
    assert result.confidence == "high"
    assert abs(result.location.latitude - 38.63) <= JITTER_DEGREES / 2
    assert abs(result.location.longitude - -90.26) <= JITTER_DEGREES / 2


def test_unrelated_text_returns_none() -> None:
    assert make_geocoder().geocode_text("Quarterly earnings beat expectations") is None
    assert make_geocoder().geocode_text("") is None


def test_jefferson_county_mention_keeps_result_south_of_meramec() -> None:
    result = make_geocoder().geocode_text("Shooting reported in Festus, Jefferson County")

    assert result is not None
    assert result.matched_location_name in {"Festus", "Jefferson County"}
    assert 38.20 <= result.location.latitude < MERAMEC_LATITUDE


def test_county_override_prefers_in_county_candidate() -> None:
    gazetteer = (
        make_entry("Northside", 38.70, -90.25, place_type="intersection"),
        make_entry("Hillsboro", 38.2323, -90.5629, place_type="road"),
    )
    geocoder = TextGeocoder(gazetteer=gazetteer, rng=random.Random(1))
    text = "Northside and Hillsboroughs"

    assert geocoder.geocode_text(text).matched_location_name == "Northside"
    # The county boost leaves the town short of the intersection; the override still picks it.
    result = geocoder.geocode_text(f"{text} in Jefferson County")
    assert result is not None
    assert result.matched_location_name == "Hillsboro"


def test_every_result_passes_the_fence() -> None:
    geocoder = make_geocoder()
    texts = [
        "Fire in Soulard",
        "Festival at Forest Park",
        "Storm damage in Belleville",
        "Protest in Ferguson",
        "Crash on I-64 at Kingshighway",
    ]
    for text in texts:
        result = geocoder.geocode_text(text)
        assert result is not None, text
        assert is_valid_location(result.location), text


def test_location_outside_fence_is_rejected_with_event() -> None:
    events = RecordingEventSink()
    result = make_geocoder(events=events).geocode_text("Crash near De Soto")

    assert result is None
    assert "geocode.fence_rejected" in events.names()


def test_repeat_calls_agree_within_jitter() -> None:
    geocoder = make_geocoder()
    first = geocoder.geocode_text("Fire in Soulard")
    second = geocoder.geocode_text("Fire in Soulard")

    assert first is not None and second is not None
    assert first.matched_location_name == second.matched_location_name
    assert first.confidence == second.confidence
    assert abs(first.location.latitude - second.location.latitude) <= JITTER_DEGREES
    assert abs(first.location.longitude - second.location.longitude) <= JITTER_DEGREES


def test_in_county_point_jittered_north_is_clamped() -> None:
    events = RecordingEventSink()
    gazetteer = (make_entry("Riverbend", 38.4499, -90.40),)
    geocoder = TextGeocoder(gazetteer=gazetteer, rng=FixedRandom(0.999), events=events)

    result = geocoder.geocode_text("Flooding at Riverbend")

    assert result is not None
    assert result.location.latitude == MERAMEC_CLAMP_LATITUDE
    assert "geocode.clamped_south" in events.names()


def test_matched_event_carries_score() -> None:
    events = RecordingEventSink()
    make_geocoder(events=events).geocode_text("Crash on I-64 at Kingshighway")

    matched = events.find("geocode.matched")
    assert len(matched) == 1
    assert matched[0].fields["score"] == 35
    assert matched[0].fields["place_type"] == "intersection"


@pytest.mark.parametrize(
    ("score", "expected"),
    [(35, "high"), (20, "high"), (15, "high"), (14, "medium"), (12, "medium"), (10, "medium"), (9, None)],
)
def test_confidence_bands(score: int, expected: str | None) -> None:
    assert confidence_for_score(score) == expected


def test_county_mention_patterns() -> None:
    assert mentions_jefferson_county("Deputies in Jefferson County said")
    assert mentions_jefferson_county("a JeffCo school board vote")
    assert mentions_jefferson_county("Jeff Co. officials")
    assert not mentions_jefferson_county("Jefferson Avenue closure")


def test_county_box_is_south_of_the_river() -> None:
    assert is_jefferson_county_location(GeoPoint(38.2206, -90.3958))
    assert not is_jefferson_county_location(GeoPoint(38.45, -90.40))
    assert not is_jefferson_county_location(GeoPoint(38.30, -90.10))


def test_module_level_geocode_text_uses_default_gazetteer() -> None:
    result = geocode_text("Traffic near Busch Stadium")

    assert result is not None
    assert result.matched_location_name in {entry.name for entry in GAZETTEER}
