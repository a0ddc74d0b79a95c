"""
Lexical geocoder backed by the static St. Louis gazetteer.

Free text is matched against every gazetteer name and alias, candidates are ranked
by how specific the place type is, and the winner is jittered slightly and pushed
through the geographic fence. Anything that cannot be placed confidently returns
`None`; callers drop the article rather than guess a coordinate.
"""

from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass
from typing import List, Literal, Optional, Pattern, Sequence

from src.services.diagnostics import EventSink, resolve_sink
from src.services.gazetteer import GAZETTEER, GazetteerEntry
from src.services.geofence import DEFAULT_MAX_DISTANCE_MILES, GeoPoint, is_valid_location

LOGGER = logging.getLogger(__name__)

ConfidenceLevel = Literal["low", "medium", "high"]

TYPE_SCORES = {
    "intersection": 20,
    "bridge": 18,
    "landmark": 15,
    "neighborhood": 12,
    "city": 10,
    "road": 8,
}
DEFAULT_TYPE_SCORE = 5

NAME_BOUNDARY_BONUS = 15
NAME_SUBSTRING_BONUS = 10
ALIAS_BOUNDARY_BONUS = 10
ALIAS_SUBSTRING_BONUS = 5

COUNTY_NAME_BOOST = 20
COUNTY_LOCATION_BOOST = 15
COUNTY_MIN_SCORE = 10

JITTER_DEGREES = 0.002  # ~200m

# Jefferson County sits south of the Meramec River.
MERAMEC_LATITUDE = 38.45
MERAMEC_CLAMP_LATITUDE = 38.40
JEFFERSON_COUNTY_SOUTH = 38.20
JEFFERSON_COUNTY_WEST = -90.70
JEFFERSON_COUNTY_EAST = -90.20

JEFFERSON_COUNTY_PATTERNS = (
    re.compile(r"\bjefferson\s+county\b", re.IGNORECASE),
    re.compile(r"\bjeff\s+co\b", re.IGNORECASE),
    re.compile(r"\bjeffco\b", re.IGNORECASE),
)


@dataclass(frozen=True)
class GeocodeResult:
    location: GeoPoint
    confidence: ConfidenceLevel
    matched_location_name: str


@dataclass
class _Candidate:
    entry: GazetteerEntry
    score: int


def type_score(place_type: str) -> int:
    return TYPE_SCORES.get(place_type, DEFAULT_TYPE_SCORE)


def confidence_for_score(score: int) -> ConfidenceLevel | None:
    """Map a match score to a confidence tier; `None` means too weak to place."""
    # Both upper bands collapse to "high"; consumers only distinguish low vs. not-low.
    if score >= 20:
        return "high"
    if score >= 15:
        return "high"
    if score >= 12:
        return "medium"
    if score >= 10:
        return "medium"
    return None


def mentions_jefferson_county(text: str) -> bool:
    return any(pattern.search(text) for pattern in JEFFERSON_COUNTY_PATTERNS)


def is_jefferson_county_location(point: GeoPoint) -> bool:
    return (
        JEFFERSON_COUNTY_SOUTH <= point.latitude < MERAMEC_LATITUDE
        and JEFFERSON_COUNTY_WEST <= point.longitude <= JEFFERSON_COUNTY_EAST
    )


def _boundary_pattern(term: str) -> Pattern[str]:
    return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)


class _CompiledEntry:
    __slots__ = ("entry", "name", "name_pattern", "aliases", "in_county", "names_county")

    def __init__(self, entry: GazetteerEntry) -> None:
        self.entry = entry
        self.name = entry.name.lower()
        self.name_pattern = _boundary_pattern(self.name)
        self.aliases = [(alias.lower(), _boundary_pattern(alias.lower())) for alias in entry.aliases]
        self.in_county = is_jefferson_county_location(entry.location)
        self.names_county = "jefferson" in self.name


class TextGeocoder:
    """Resolve free text to a jittered, fence-validated gazetteer coordinate."""

    def __init__(
        self,
        gazetteer: Sequence[GazetteerEntry] = GAZETTEER,
        rng: random.Random | None = None,
        events: EventSink | None = None,
        max_distance_miles: float = DEFAULT_MAX_DISTANCE_MILES,
    ) -> None:
        self._entries = [_CompiledEntry(entry) for entry in gazetteer]
        self.rng = rng or random.Random()
        self.events = resolve_sink(events, LOGGER)
        self.max_distance_miles = max_distance_miles

    def geocode_text(self, text: str) -> Optional[GeocodeResult]:
        if not text:
            return None
        candidates = self._score_candidates(text)
        if not candidates:
            return None
        candidates.sort(key=lambda candidate: candidate.score, reverse=True)
        best = candidates[0]
        if mentions_jefferson_county(text) and not is_jefferson_county_location(best.entry.location):
            county_match = next(
                (c for c in candidates if is_jefferson_county_location(c.entry.location)),
                None,
            )
            if county_match and county_match.score >= COUNTY_MIN_SCORE:
                best = county_match
        return self._build_result(best)

    def _score_candidates(self, text: str) -> List[_Candidate]:
        lowered = text.lower()
        county_mentioned = mentions_jefferson_county(text)
        candidates: List[_Candidate] = []
        for compiled in self._entries:
            score = self._match_score(compiled, lowered, text)
            if score is None:
                continue
            if county_mentioned and compiled.names_county:
                score += COUNTY_NAME_BOOST
            elif county_mentioned and compiled.in_county:
                score += COUNTY_LOCATION_BOOST
            candidates.append(_Candidate(entry=compiled.entry, score=score))
        return candidates

    @staticmethod
    def _match_score(compiled: _CompiledEntry, lowered: str, text: str) -> int | None:
        base = type_score(compiled.entry.place_type)
        if compiled.name in lowered:
            bonus = NAME_BOUNDARY_BONUS if compiled.name_pattern.search(text) else NAME_SUBSTRING_BONUS
            return base + bonus
        for alias, pattern in compiled.aliases:
            if alias in lowered:
                bonus = ALIAS_BOUNDARY_BONUS if pattern.search(text) else ALIAS_SUBSTRING_BONUS
                return base + bonus
        return None

    def _build_result(self, candidate: _Candidate) -> Optional[GeocodeResult]:
        entry = candidate.entry
        confidence = confidence_for_score(candidate.score)
        if confidence is None:
            LOGGER.debug("Best match %s scored %s; too weak to place.", entry.name, candidate.score)
            return None
        latitude = entry.location.latitude + (self.rng.random() - 0.5) * JITTER_DEGREES
        longitude = entry.location.longitude + (self.rng.random() - 0.5) * JITTER_DEGREES
        jittered = GeoPoint(latitude, longitude)
        if not is_valid_location(jittered, self.max_distance_miles, events=self.events):
            self.events.emit(
                "geocode.fence_rejected",
                "Location %s (%.4f, %.4f) failed geographical fence check, rejecting",
                entry.name,
                latitude,
                longitude,
                level=logging.WARNING,
                matched_location_name=entry.name,
            )
            return None
        in_county = is_jefferson_county_location(entry.location)
        if in_county and latitude >= MERAMEC_LATITUDE:
            self.events.emit(
                "geocode.clamped_south",
                "Jefferson County location %s placed too far north (%.4f), adjusting south of Meramec River",
                entry.name,
                latitude,
                level=logging.WARNING,
                matched_location_name=entry.name,
            )
            jittered = GeoPoint(min(latitude, MERAMEC_CLAMP_LATITUDE), longitude)
        self.events.emit(
            "geocode.matched",
            "Matched %r (%s) with %s confidence at (%.4f, %.4f)%s",
            entry.name,
            entry.place_type,
            confidence,
            jittered.latitude,
            jittered.longitude,
            " [Jefferson County]" if in_county else "",
            level=logging.DEBUG,
            matched_location_name=entry.name,
            place_type=entry.place_type,
            confidence=confidence,
            score=candidate.score,
        )
        return GeocodeResult(location=jittered, confidence=confidence, matched_location_name=entry.name)


_DEFAULT_GEOCODER: TextGeocoder | None = None


def geocode_text(text: str) -> Optional[GeocodeResult]:
    """Module-level convenience wrapper over a shared `TextGeocoder`."""
    global _DEFAULT_GEOCODER
    if _DEFAULT_GEOCODER is None:
        _DEFAULT_GEOCODER = TextGeocoder()
    return _DEFAULT_GEOCODER.geocode_text(text)
