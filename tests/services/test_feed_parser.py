from __future__ import annotations

import time
import warnings
from datetime import datetime, timedelta, timezone

import feedparser
import pytest

from src.services import feed_parser
from src.services.diagnostics import RecordingEventSink
from src.services.feed_parser import MAX_DESCRIPTION_LENGTH, parse_feed


def make_rss(items: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">'
        "<channel><title>Test Feed</title><link>https://news.example.com</link>"
        f"{items}"
        "</channel></rss>"
    )


def make_item(title: str, link: str, description: str = "", pub_date: str = "Tue, 14 Oct 2025 12:00:00 GMT") -> str:
    return (
        f"<item><title>{title}</title><link>{link}</link>"
        f"<description>{description}</description><pubDate>{pub_date}</pubDate></item>"
    )


def test_two_item_rss_yields_two_items() -> None:
    raw = make_rss(
        make_item("Fire in Soulard", "https://news.example.com/a", "Crews responded overnight.")
        + make_item("Crash on I-64", "https://news.example.com/b", "Lanes reopened.")
    )

    items = parse_feed(raw, "Test Feed")

    assert [item.link for item in items] == ["https://news.example.com/a", "https://news.example.com/b"]
    assert items[0].title == "Fire in Soulard"
    assert items[0].description == "Crews responded overnight."
    assert items[0].published_at == datetime(2025, 10, 14, 12, 0, tzinfo=timezone.utc)


def test_empty_input_yields_nothing() -> None:
    events = RecordingEventSink()

    assert parse_feed("", "Test Feed", events=events) == []
    assert parse_feed("   \n", "Test Feed", events=events) == []
    assert events.names() == ["parse.empty", "parse.empty"]


def test_html_page_is_not_a_feed() -> None:
    events = RecordingEventSink()

    assert parse_feed("<html><body>Access denied</body></html>", "Test Feed", events=events) == []
    assert events.names() == ["parse.not_a_feed"]


def test_cdata_markup_and_entities_are_cleaned() -> None:
    raw = make_rss(
        make_item(
            "Tom &amp; Jerry&#39;s closes in Tower Grove",
            "https://news.example.com/c",
            "<![CDATA[<p>The diner on <b>Grand</b> closed.</p><script>track()</script>]]>",
        )
    )

    items = parse_feed(raw, "Test Feed")

    assert len(items) == 1
    assert items[0].title == "Tom & Jerry's closes in Tower Grove"
    assert "<" not in items[0].description
    assert "track()" not in items[0].description
    assert "Grand" in items[0].description


def test_items_without_title_or_link_are_skipped() -> None:
    events = RecordingEventSink()
    raw = make_rss(
        "<item><title>No link here</title><description>x</description></item>"
        + "<item><link>https://news.example.com/untitled</link></item>"
        + make_item("Kept", "https://news.example.com/kept")
    )

    items = parse_feed(raw, "Test Feed", events=events)

    assert [item.title for item in items] == ["Kept"]
    completed = events.find("parse.completed")
    assert completed[0].fields["skipped"] == 2


def test_guid_stands_in_for_missing_link() -> None:
    raw = make_rss(
        "<item><title>Guid only</title><guid>https://news.example.com/guid-1</guid>"
        "<pubDate>Tue, 14 Oct 2025 12:00:00 GMT</pubDate></item>"
    )

    items = parse_feed(raw, "Test Feed")

    assert len(items) == 1
    assert items[0].link == "https://news.example.com/guid-1"


def test_content_encoded_used_when_description_missing() -> None:
    raw = make_rss(
        "<item><title>Council vote</title><link>https://news.example.com/d</link>"
        "<content:encoded><![CDATA[<p>Aldermen approved the budget.</p>]]></content:encoded></item>"
    )

    items = parse_feed(raw, "Test Feed")

    assert items[0].description == "Aldermen approved the budget."


def test_bad_date_falls_back_to_now() -> None:
    raw = make_rss(make_item("Undated", "https://news.example.com/e", pub_date="sometime last week"))

    before = datetime.now(timezone.utc)
    items = parse_feed(raw, "Test Feed")
    after = datetime.now(timezone.utc)

    assert before - timedelta(seconds=1) <= items[0].published_at <= after + timedelta(seconds=1)


def test_description_is_capped() -> None:
    raw = make_rss(make_item("Long read", "https://news.example.com/f", "word " * 300))

    items = parse_feed(raw, "Test Feed")

    assert len(items[0].description) == MAX_DESCRIPTION_LENGTH


def test_atom_entries_prefer_updated_timestamp() -> None:
    raw = (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<feed xmlns="http://www.w3.org/2005/Atom"><title>Atom Feed</title>'
        "<entry><title>Soulard Mardi Gras parade route set</title>"
        '<link href="https://news.example.com/atom-1"/>'
        "<id>tag:news.example.com,2025:atom-1</id>"
        "<published>2025-10-13T15:30:00Z</published>"
        "<updated>2025-10-14T15:30:00Z</updated>"
        "<summary>Organizers announced the route.</summary></entry></feed>"
    )

    items = parse_feed(raw, "Atom Feed")

    assert len(items) == 1
    assert items[0].link == "https://news.example.com/atom-1"
    assert items[0].description == "Organizers announced the route."
    assert items[0].published_at == datetime(2025, 10, 14, 15, 30, tzinfo=timezone.utc)


def test_failing_item_is_skipped_and_rest_of_feed_kept(monkeypatch: pytest.MonkeyPatch) -> None:
    events = RecordingEventSink()
    original_build = feed_parser._build_item

    def flaky_build(entry, atom):
        if entry.get("title") == "Broken":
            raise KeyError("boom")
        return original_build(entry, atom)

    monkeypatch.setattr(feed_parser, "_build_item", flaky_build)
    raw = make_rss(
        make_item("Broken", "https://news.example.com/broken")
        + make_item("Kept", "https://news.example.com/kept")
    )

    items = parse_feed(raw, "Test Feed", events=events)

    assert [item.title for item in items] == ["Kept"]
    failed = events.find("parse.item_failed")
    assert len(failed) == 1
    assert failed[0].fields["feed"] == "Test Feed"


def test_atom_timestamp_fallback_does_not_warn() -> None:
    published = time.strptime("2025-10-13T15:30:00", "%Y-%m-%dT%H:%M:%S")
    entry = feedparser.FeedParserDict({"published_parsed": published})

    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        stamp = feed_parser._entry_timestamp(entry, atom=True)

    assert stamp == datetime(2025, 10, 13, 15, 30, tzinfo=timezone.utc)
