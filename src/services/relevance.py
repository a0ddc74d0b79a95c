"""
Dedupe and regional relevance checks applied to parsed feed items before geocoding.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence, Set

from src.services.feed_parser import RawFeedItem
from src.services.gazetteer import GAZETTEER, GazetteerEntry

LOGGER = logging.getLogger(__name__)

# Lower-case substrings that mark an article as St. Louis area news.
REGION_KEYWORDS = [
    "st. louis",
    "st louis",
    "stl",
    "missouri",
    "mo.",
    "downtown",
    "metro",
    "county",
    "city of st",
    "cardinals",
    "blues",
    "gateway arch",
    "busch stadium",
    "i-70",
    "i-64",
    "i-44",
    "i-55",
    "i-270",
    "highway 40",
    "ferguson",
    "clayton",
    "kirkwood",
    "florissant",
    "chesterfield",
    "university city",
    "maplewood",
    "webster groves",
    "ballwin",
    "metrolink",
    "metro transit",
    "lambert",
    "arch",
    "forest park",
    "tower grove",
    "soulard",
    "the hill",
    "central west end",
    "dogtown",
    "the grove",
    "north county",
    "south county",
    "west county",
    "creve coeur",
    "maryland heights",
    "overland",
    "east st. louis",
    "east stl",
    "belleville",
    "collinsville",
    "jefferson county",
    "jeff co",
    "jeffco",
    "jefferson co",
    "festus",
    "crystal city",
    "herculaneum",
    "de soto",
    "hillsboro",
    "pevely",
    "barnhart",
    "imperial",
    "high ridge",
    "house springs",
    "cedar hill",
    "byrnes mill",
    "meramec river",
    "meramec",
]


class SeenUrls:
    """Links already handled in one ingestion run.

    Owned by a single `NewsIngestor.run()` call. Under asyncio the check-and-add
    happens without an await in between, so concurrent source tasks cannot both
    claim the same link.
    """

    def __init__(self) -> None:
        self._urls: Set[str] = set()

    def check_and_add(self, url: str) -> bool:
        """Record `url`; return True only the first time it is seen."""
        if url in self._urls:
            return False
        self._urls.add(url)
        return True

    def __contains__(self, url: object) -> bool:
        return url in self._urls

    def __len__(self) -> int:
        return len(self._urls)


def _gazetteer_terms(gazetteer: Sequence[GazetteerEntry]) -> list[str]:
    terms: list[str] = []
    for entry in gazetteer:
        terms.append(entry.name.lower())
        terms.extend(alias.lower() for alias in entry.aliases)
    return terms


_DEFAULT_TERMS = _gazetteer_terms(GAZETTEER)


def is_region_relevant(
    title: str,
    description: str,
    gazetteer: Sequence[GazetteerEntry] | None = None,
) -> bool:
    text = f"{title} {description}".lower()
    if any(keyword in text for keyword in REGION_KEYWORDS):
        return True
    terms = _DEFAULT_TERMS if gazetteer is None else _gazetteer_terms(gazetteer)
    return any(term in text for term in terms)


def filter_items(
    items: Iterable[RawFeedItem],
    seen: SeenUrls,
    gazetteer: Sequence[GazetteerEntry] | None = None,
) -> Iterator[RawFeedItem]:
    """Yield unseen, region-relevant items. Every link is recorded, kept or not."""
    for item in items:
        if not seen.check_and_add(item.link):
            LOGGER.debug("Skipping duplicate link %s", item.link)
            continue
        if not is_region_relevant(item.title, item.description, gazetteer):
            LOGGER.debug("Skipping non-regional item %r", item.title[:60])
            continue
        yield item
