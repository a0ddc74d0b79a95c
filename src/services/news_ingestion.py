"""
Collect St. Louis local news from RSS/Atom feeds and place each article on the map.

The module exposes a reusable `NewsIngestor` that fetches every configured feed
concurrently, parses, dedupes and filters the items, geocodes them against the
static gazetteer and returns a bounded, time-windowed list of `NewsItem` records.
It can be imported by the API or run directly as a CLI/cron job.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import re
import sys
import time
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, List, Literal, Sequence

import httpx

from src.services.diagnostics import EventSink, resolve_sink
from src.services.feed_parser import parse_feed
from src.services.feed_transport import FeedTransport
from src.services.geocoding import ConfidenceLevel, TextGeocoder
from src.services.geofence import GeoPoint
from src.services.incidents import news_to_incidents
from src.services.relevance import SeenUrls, filter_items
from src.services.settings import MonitorSettings, load_settings
from src.services.weather_alerts import fetch_nws_alerts, weather_alerts_to_incidents

LOGGER = logging.getLogger(__name__)

NEWS_ITEM_NAMESPACE = uuid.UUID("6f1c4f0e-8a55-4d55-9a53-2f1b0c7e9d41")
SUMMARY_MAX_LENGTH = 150


@dataclass(frozen=True)
class FeedSource:
    name: str
    url: str
    fallback_urls: tuple[str, ...] = ()
    feed_type: Literal["rss", "atom"] = "rss"


STL_NEWS_FEEDS: list[FeedSource] = [
    # Post-Dispatch only exposes search-based RSS.
    FeedSource(
        name="St. Louis Post-Dispatch",
        url="https://www.stltoday.com/search/?f=rss&t=article&c=news/local&l=50&s=start_time&sd=desc",
        fallback_urls=("https://www.stltoday.com/rss/",),
    ),
    FeedSource(
        name="KSDK News",
        url="https://www.ksdk.com/feeds/syndication/rss/news/local",
        fallback_urls=("https://www.ksdk.com/rss/",),
    ),
    FeedSource(name="Fox 2 Now", url="https://fox2now.com/feed/"),
    FeedSource(
        name="Riverfront Times",
        url="https://www.riverfronttimes.com/feed",
        fallback_urls=(
            "https://www.riverfronttimes.com/stlouis/Rss.xml",
            "https://www.riverfronttimes.com/rss/",
        ),
    ),
]


@dataclass
class NewsItem:
    id: str
    title: str
    outlet: str
    url: str
    published_at: datetime
    snippet: str
    location: GeoPoint | None = None
    geocoding_confidence: ConfidenceLevel | None = None

    def __post_init__(self) -> None:
        if self.location is not None and self.geocoding_confidence is None:
            raise ValueError(f"NewsItem {self.url!r} has a location but no geocoding confidence")

    def to_serializable(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "outlet": self.outlet,
            "url": self.url,
            "published_at": self.published_at.isoformat(),
            "snippet": self.snippet,
            "location": self.location.to_serializable() if self.location else None,
            "geocoding_confidence": self.geocoding_confidence,
        }


@dataclass
class SourceStats:
    feed: str
    fetched: bool = False
    parsed: int = 0
    relevant: int = 0
    geocoded: int = 0
    items: int = 0
    error: str | None = None
    duration_ms: int = 0

    def to_serializable(self) -> dict[str, Any]:
        return {
            "feed": self.feed,
            "fetched": self.fetched,
            "parsed": self.parsed,
            "relevant": self.relevant,
            "geocoded": self.geocoded,
            "items": self.items,
            "error": self.error,
            "duration_ms": self.duration_ms,
        }


@dataclass
class SourceResult:
    feed: str
    items: List[NewsItem]
    stats: SourceStats


@dataclass
class IngestionSummary:
    sources: List[SourceStats] = field(default_factory=list)
    total_fetched: int = 0
    within_window: int = 0
    returned: int = 0
    high_confidence: int = 0
    medium_confidence: int = 0
    not_geocoded: int = 0

    def to_serializable(self) -> dict[str, Any]:
        return {
            "sources": [stats.to_serializable() for stats in self.sources],
            "total_fetched": self.total_fetched,
            "within_window": self.within_window,
            "returned": self.returned,
            "high_confidence": self.high_confidence,
            "medium_confidence": self.medium_confidence,
            "not_geocoded": self.not_geocoded,
        }


def generate_summary(description: str, max_length: int = SUMMARY_MAX_LENGTH) -> str:
    """Shorten a description to whole sentences within `max_length` characters."""
    if len(description) <= max_length:
        return description
    summary = ""
    for sentence in re.split(r"[.!?]+", description):
        trimmed = sentence.strip()
        if not trimmed:
            continue
        if len(summary) + len(trimmed) > max_length:
            break
        summary += (". " if summary else "") + trimmed
    if summary and not summary.endswith("."):
        summary += "..."
    return summary or description[:max_length] + "..."


def news_item_id(url: str) -> str:
    return str(uuid.uuid5(NEWS_ITEM_NAMESPACE, url))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NewsIngestor:
    """Fetch, filter and geocode every configured feed in one concurrent pass."""

    def __init__(
        self,
        sources: Sequence[FeedSource] | None = None,
        transport: FeedTransport | None = None,
        geocoder: TextGeocoder | None = None,
        events: EventSink | None = None,
        recency_window: timedelta | None = None,
        max_items: int | None = None,
        now: Callable[[], datetime] | None = None,
        settings: MonitorSettings | None = None,
    ) -> None:
        self.settings = settings or MonitorSettings()
        self.sources = list(STL_NEWS_FEEDS if sources is None else sources)
        self.transport = transport
        self.events = resolve_sink(events, LOGGER)
        self.geocoder = geocoder or TextGeocoder(
            events=self.events,
            max_distance_miles=self.settings.max_distance_miles,
        )
        self.recency_window = (
            recency_window if recency_window is not None else timedelta(hours=self.settings.recency_hours)
        )
        self.max_items = max_items if max_items is not None else self.settings.max_items
        self.now = now or _utcnow
        self.last_summary: IngestionSummary | None = None

    async def run(self) -> List[NewsItem]:
        seen = SeenUrls()
        if self.transport is not None:
            results = await self._run_sources(self.transport, seen)
        else:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                transport = FeedTransport(
                    client,
                    timeout=self.settings.request_timeout,
                    user_agent=self.settings.user_agent,
                    events=self.events,
                )
                results = await self._run_sources(transport, seen)

        all_news: List[NewsItem] = []
        summary = IngestionSummary()
        for source, result in zip(self.sources, results):
            if isinstance(result, BaseException):
                LOGGER.error("Feed task for %s rejected: %r", source.name, result)
                summary.sources.append(SourceStats(feed=source.name, error=repr(result)))
                continue
            all_news.extend(result.items)
            summary.sources.append(result.stats)

        all_news.sort(key=lambda item: item.published_at, reverse=True)
        cutoff = self.now() - self.recency_window
        within_window = [item for item in all_news if item.published_at > cutoff]
        returned = within_window[: self.max_items]

        summary.total_fetched = len(all_news)
        summary.within_window = len(within_window)
        summary.returned = len(returned)
        summary.high_confidence = sum(1 for n in within_window if n.location and n.geocoding_confidence == "high")
        summary.medium_confidence = sum(1 for n in within_window if n.location and n.geocoding_confidence == "medium")
        summary.not_geocoded = sum(1 for n in within_window if not n.location)
        self.last_summary = summary
        self._log_summary(summary)
        return returned

    async def _run_sources(self, transport: FeedTransport, seen: SeenUrls) -> list[SourceResult | BaseException]:
        tasks = [self._ingest_source(transport, source, seen) for source in self.sources]
        return await asyncio.gather(*tasks, return_exceptions=True)

    async def _ingest_source(self, transport: FeedTransport, source: FeedSource, seen: SeenUrls) -> SourceResult:
        started = time.monotonic()
        stats = SourceStats(feed=source.name)
        items: List[NewsItem] = []
        try:
            LOGGER.info("Fetching %s...", source.name)
            body = await transport.fetch_source(source)
            if body is None:
                stats.error = "all URLs and transports failed"
                return SourceResult(feed=source.name, items=[], stats=stats)
            stats.fetched = True
            raw_items = parse_feed(body, source.name, events=self.events)
            stats.parsed = len(raw_items)
            for raw in filter_items(raw_items, seen):
                stats.relevant += 1
                result = self.geocoder.geocode_text(f"{raw.title} {raw.description}")
                if result is None or result.confidence == "low":
                    LOGGER.debug("Dropping ungeocodable item %r", raw.title[:60])
                    continue
                stats.geocoded += 1
                items.append(
                    NewsItem(
                        id=news_item_id(raw.link),
                        title=raw.title,
                        outlet=source.name,
                        url=raw.link,
                        published_at=raw.published_at,
                        snippet=generate_summary(raw.description),
                        location=result.location,
                        geocoding_confidence=result.confidence,
                    )
                )
        except Exception as exc:  # noqa: BLE001
            LOGGER.exception("%s: ingestion failed", source.name)
            stats = SourceStats(feed=source.name, error=str(exc) or exc.__class__.__name__)
            items = []
        finally:
            stats.duration_ms = int((time.monotonic() - started) * 1000)
        stats.items = len(items)
        return SourceResult(feed=source.name, items=items, stats=stats)

    def _log_summary(self, summary: IngestionSummary) -> None:
        for stats in summary.sources:
            if stats.fetched and not stats.error:
                self.events.emit(
                    "ingest.source",
                    "%s: %s parsed -> %s relevant -> %s geocoded (%sms)",
                    stats.feed,
                    stats.parsed,
                    stats.relevant,
                    stats.geocoded,
                    stats.duration_ms,
                    **stats.to_serializable(),
                )
            else:
                self.events.emit(
                    "ingest.source",
                    "%s: failed to fetch (%s)",
                    stats.feed,
                    stats.error,
                    level=logging.WARNING,
                    **stats.to_serializable(),
                )
        self.events.emit(
            "ingest.summary",
            "News summary: %s fetched, %s within %s, %s returned (high: %s, medium: %s, not geocoded: %s)",
            summary.total_fetched,
            summary.within_window,
            self.recency_window,
            summary.returned,
            summary.high_confidence,
            summary.medium_confidence,
            summary.not_geocoded,
            total_fetched=summary.total_fetched,
            within_window=summary.within_window,
            returned=summary.returned,
            high_confidence=summary.high_confidence,
            medium_confidence=summary.medium_confidence,
            not_geocoded=summary.not_geocoded,
        )


async def fetch_local_news(**kwargs: Any) -> List[NewsItem]:
    """Run one ingestion pass with a fresh `NewsIngestor`."""
    return await NewsIngestor(**kwargs).run()


async def _collect(args: argparse.Namespace, settings: MonitorSettings) -> list[dict[str, Any]]:
    async with httpx.AsyncClient(follow_redirects=True) as client:
        transport = FeedTransport(client, timeout=settings.request_timeout, user_agent=settings.user_agent)
        ingestor = NewsIngestor(transport=transport, settings=settings)
        news = await ingestor.run()
        if not args.incidents:
            return [item.to_serializable() for item in news]
        incidents = news_to_incidents(news)
        if args.include_weather:
            alerts = await fetch_nws_alerts(
                client,
                user_agent=settings.nws_user_agent,
                timeout=settings.request_timeout,
            )
            incidents = weather_alerts_to_incidents(alerts) + incidents
        return [incident.to_serializable() for incident in incidents]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch and geocode St. Louis local news.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write JSONL records to this file instead of stdout.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: STL_MONITOR_REQUEST_TIMEOUT or 10).",
    )
    parser.add_argument(
        "--max-items",
        type=int,
        default=None,
        help="Maximum number of news items to return (default: 100).",
    )
    parser.add_argument(
        "--recency-hours",
        type=int,
        default=None,
        help="Only keep articles published within this many hours (default: 48).",
    )
    parser.add_argument(
        "--incidents",
        action="store_true",
        help="Emit map incidents instead of raw news items.",
    )
    parser.add_argument(
        "--include-weather",
        action="store_true",
        help="With --incidents, also include active NWS alerts for the metro area.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
    LOGGER.info("Starting news ingestion with args: %s", args)

    settings = load_settings()
    overrides = {
        "request_timeout": args.timeout,
        "max_items": args.max_items,
        "recency_hours": args.recency_hours,
    }
    settings = replace(settings, **{key: value for key, value in overrides.items() if value is not None})

    try:
        records = asyncio.run(_collect(args, settings))
    except Exception:  # noqa: BLE001
        LOGGER.exception("Ingestor run failed.")
        return 1

    lines = "".join(json.dumps(record) + "\n" for record in records)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(lines, encoding="utf-8")
        LOGGER.info("Wrote %s records to %s", len(records), args.output)
    else:
        sys.stdout.write(lines)
    return 0


if __name__ == "__main__":
    sys.exit(main())
