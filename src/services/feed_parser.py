"""
Normalize RSS 2.0 and Atom documents into `RawFeedItem` records.

Parsing is delegated to `feedparser`, which handles both dialects in one pass,
unwraps CDATA and decodes entities. This module applies the field fallbacks
(guid for link, content for description, several timestamp fields), strips markup
from descriptions and skips entries that cannot be used.
"""

from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Optional

import feedparser
from bs4 import BeautifulSoup

from src.services.diagnostics import EventSink, resolve_sink
from src.services.feed_transport import FEED_MARKERS

LOGGER = logging.getLogger(__name__)

MAX_DESCRIPTION_LENGTH = 500

# feedparser honours an HTTP charset over the XML declaration; the text is
# re-encoded as UTF-8 before parsing, so say so explicitly.
_RESPONSE_HEADERS = {"content-type": "application/xml; charset=utf-8"}


@dataclass
class RawFeedItem:
    title: str
    link: str
    description: str
    published_at: datetime


def _clean_html_fragment(value: str | None) -> str:
    """Best-effort HTML to text converter for summaries/descriptions."""
    if not value:
        return ""
    soup = BeautifulSoup(value, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    text = soup.get_text(" ", strip=True)
    return re.sub(r"\s+", " ", text).strip()


def _clean_text(value: str | None) -> str:
    if not value:
        return ""
    return re.sub(r"\s+", " ", value).strip()


def _entry_description(entry: Any) -> str:
    summary = entry.get("summary")
    if summary:
        return summary
    for content in entry.get("content") or []:
        value = content.get("value") if hasattr(content, "get") else None
        if value:
            return value
    return ""


def _entry_timestamp(entry: Any, atom: bool) -> datetime:
    """Return the entry's publish time in UTC, or now when missing/unparseable."""
    fields = ("updated_parsed", "published_parsed") if atom else ("published_parsed", "updated_parsed")
    for field_name in fields:
        # Plain dict lookup; FeedParserDict maps a missing updated_parsed onto published_parsed.
        parsed = dict.get(entry, field_name)
        if not parsed:
            continue
        try:
            return datetime(*parsed[:6], tzinfo=timezone.utc)
        except (TypeError, ValueError):
            LOGGER.debug("Unusable %s value %r", field_name, parsed)
    return datetime.now(timezone.utc)


def _build_item(entry: Any, atom: bool) -> Optional[RawFeedItem]:
    title = _clean_text(entry.get("title"))
    link = _clean_text(entry.get("link") or entry.get("id"))
    if not title or not link:
        return None
    description = _clean_html_fragment(_entry_description(entry))[:MAX_DESCRIPTION_LENGTH]
    return RawFeedItem(
        title=title,
        link=link,
        description=description,
        published_at=_entry_timestamp(entry, atom),
    )


def parse_feed(raw_text: str | None, source_name: str, events: EventSink | None = None) -> List[RawFeedItem]:
    sink = resolve_sink(events, LOGGER)
    items: List[RawFeedItem] = []
    if not raw_text or not raw_text.strip():
        sink.emit("parse.empty", "%s: empty feed body", source_name, level=logging.WARNING, feed=source_name)
        return items
    if not any(marker in raw_text for marker in FEED_MARKERS):
        sink.emit(
            "parse.not_a_feed",
            "%s: response doesn't appear to be RSS/Atom (first 200 chars: %s)",
            source_name,
            raw_text[:200],
            level=logging.WARNING,
            feed=source_name,
        )
        return items

    try:
        parsed = feedparser.parse(io.BytesIO(raw_text.encode("utf-8")), response_headers=_RESPONSE_HEADERS)
    except Exception as exc:  # noqa: BLE001
        sink.emit("parse.failed", "%s: error parsing feed - %s", source_name, exc, level=logging.ERROR, feed=source_name)
        return items
    if parsed.get("bozo"):
        LOGGER.debug("%s: feed is not well-formed: %s", source_name, parsed.get("bozo_exception"))

    atom = str(parsed.get("version") or "").startswith("atom")
    entries = parsed.get("entries") or []
    skipped = 0
    for entry in entries:
        try:
            item = _build_item(entry, atom)
        except Exception as exc:  # noqa: BLE001
            sink.emit(
                "parse.item_failed",
                "%s: error parsing item %r - %s",
                source_name,
                str(entry.get("title", ""))[:50],
                exc,
                level=logging.WARNING,
                feed=source_name,
            )
            continue
        if item is None:
            skipped += 1
            continue
        items.append(item)

    sink.emit(
        "parse.completed",
        "%s: parsed %s items from %s entries (%s skipped)",
        source_name,
        len(items),
        len(entries),
        skipped,
        level=logging.DEBUG,
        feed=source_name,
        entries=len(entries),
        items=len(items),
        skipped=skipped,
    )
    return items
