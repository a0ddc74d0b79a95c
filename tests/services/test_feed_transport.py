from __future__ import annotations

import asyncio
import json
from typing import Callable

import httpx

from src.services.diagnostics import RecordingEventSink
from src.services.feed_transport import (
    FeedTransport,
    ProxyTransport,
    is_valid_feed_content,
    unwrap_json_envelope,
)
from src.services.news_ingestion import FeedSource

FEED_URL = "https://feeds.example.com/rss"
RSS_BODY = '<?xml version="1.0"?><rss version="2.0"><channel><item><title>t</title></item></channel></rss>'
HTML_BODY = "<!DOCTYPE html><html><body>Just a moment... <item>cached</item></body></html>"

PROXIES = [
    ProxyTransport(name="proxy-one", prefix="https://proxy-one.test/raw?url="),
    ProxyTransport(name="proxy-json", prefix="https://proxy-json.test/get?url=", json_envelope=True),
]


def make_transport(handler: Callable[[httpx.Request], httpx.Response], events: RecordingEventSink) -> tuple[FeedTransport, httpx.AsyncClient]:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return FeedTransport(client, proxies=PROXIES, timeout=1.0, events=events), client


def run_fetch(handler, events: RecordingEventSink, url: str = FEED_URL) -> str | None:
    async def _go() -> str | None:
        transport, client = make_transport(handler, events)
        async with client:
            return await transport.fetch(url)

    return asyncio.run(_go())


def test_html_with_item_marker_is_not_valid_feed() -> None:
    assert not is_valid_feed_content(HTML_BODY)
    assert not is_valid_feed_content("")
    assert not is_valid_feed_content("plain text")
    assert is_valid_feed_content(RSS_BODY)


def test_direct_success_skips_proxies() -> None:
    events = RecordingEventSink()
    hosts: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        hosts.append(request.url.host)
        assert request.headers["User-Agent"].startswith("Mozilla/5.0")
        return httpx.Response(200, text=RSS_BODY)

    assert run_fetch(handler, events) == RSS_BODY
    assert hosts == ["feeds.example.com"]
    assert events.names() == []


def test_direct_timeout_falls_back_to_first_proxy() -> None:
    events = RecordingEventSink()
    seen: list[httpx.URL] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        if request.url.host == "feeds.example.com":
            raise httpx.ReadTimeout("timed out", request=request)
        return httpx.Response(200, text=RSS_BODY)

    assert run_fetch(handler, events) == RSS_BODY
    assert events.names() == ["transport.timeout"]
    assert events.events[0].fields["stage"] == "direct"
    assert seen[1].host == "proxy-one.test"
    assert seen[1].params["url"] == FEED_URL


def test_html_interstitial_moves_on_to_json_proxy() -> None:
    events = RecordingEventSink()

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "proxy-json.test":
            assert request.headers["Accept"] == "application/json"
            return httpx.Response(200, text=json.dumps({"contents": RSS_BODY, "status": {"http_code": 200}}))
        return httpx.Response(200, text=HTML_BODY)

    assert run_fetch(handler, events) == RSS_BODY
    invalid = events.find("transport.invalid_content")
    assert [event.fields["stage"] for event in invalid] == ["direct", "proxy-one"]
    assert all(event.fields["html_page"] for event in invalid)


def test_every_channel_failing_returns_none() -> None:
    events = RecordingEventSink()

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "proxy-json.test":
            return httpx.Response(200, text="not json")
        if request.url.host == "proxy-one.test":
            raise httpx.ConnectError("refused", request=request)
        return httpx.Response(503, text="unavailable")

    assert run_fetch(handler, events) is None
    assert events.names() == [
        "transport.http_status",
        "transport.request_error",
        "transport.bad_envelope",
        "transport.exhausted",
    ]
    assert events.events[0].fields["status"] == 503


def test_fallback_url_tried_after_primary_chain() -> None:
    events = RecordingEventSink()
    source = FeedSource(
        name="Test Feed",
        url=FEED_URL,
        fallback_urls=("https://feeds.example.com/backup",),
    )

    def handler(request: httpx.Request) -> httpx.Response:
        if str(request.url) == "https://feeds.example.com/backup":
            return httpx.Response(200, text=RSS_BODY)
        return httpx.Response(404)

    async def _go() -> str | None:
        transport, client = make_transport(handler, events)
        async with client:
            return await transport.fetch_source(source)

    assert asyncio.run(_go()) == RSS_BODY
    assert "transport.fallback_url" in events.names()
    assert events.counts["transport.exhausted"] == 1


def test_unwrap_json_envelope_reads_contents() -> None:
    assert unwrap_json_envelope(json.dumps({"contents": RSS_BODY})) == RSS_BODY
    assert unwrap_json_envelope(json.dumps({"contents": None})) == ""
