"""
Fetch raw feed bodies, falling back through public proxy endpoints.

Many local newsrooms block programmatic clients or sit behind CDNs that answer with
HTML interstitials. `FeedTransport.fetch` tries a direct request first and then each
proxy once, accepting only bodies that look like RSS/Atom. There is no backoff:
a different channel is tried instead of retrying a dead one.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence
from urllib.parse import quote

import httpx

from src.services.diagnostics import EventSink, resolve_sink

if TYPE_CHECKING:
    from src.services.news_ingestion import FeedSource

LOGGER = logging.getLogger(__name__)

FEED_ACCEPT_HEADER = "application/rss+xml, application/xml, text/xml, */*"
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; STLMonitor/1.0)"
DEFAULT_TIMEOUT_SECONDS = 10.0

FEED_MARKERS = ("<rss", "<feed", "<item", "<entry")
HTML_MARKERS = ("<!DOCTYPE", "<html", "<body")


@dataclass(frozen=True)
class ProxyTransport:
    name: str
    prefix: str
    json_envelope: bool = False

    def build_url(self, target: str) -> str:
        return self.prefix + quote(target, safe="")


DEFAULT_PROXIES: tuple[ProxyTransport, ...] = (
    ProxyTransport(name="allorigins-raw", prefix="https://api.allorigins.win/raw?url="),
    ProxyTransport(name="allorigins-get", prefix="https://api.allorigins.win/get?url=", json_envelope=True),
    ProxyTransport(name="corsproxy", prefix="https://corsproxy.io/?"),
    ProxyTransport(name="codetabs", prefix="https://api.codetabs.com/v1/proxy?quest="),
    ProxyTransport(name="thingproxy", prefix="https://thingproxy.freeboard.io/fetch/"),
)


def looks_like_html(text: str) -> bool:
    return any(marker in text for marker in HTML_MARKERS)


def is_valid_feed_content(text: str | None) -> bool:
    """Accept RSS/Atom bodies and reject HTML error pages served with a 200."""
    if not text or not text.strip():
        return False
    has_feed_marker = any(marker in text for marker in FEED_MARKERS)
    return has_feed_marker and not looks_like_html(text)


def unwrap_json_envelope(body: str) -> str:
    """Extract the proxied document from an allorigins-style `{"contents": ...}` payload."""
    payload = json.loads(body)
    if not isinstance(payload, dict):
        raise ValueError("JSON envelope is not an object")
    contents = payload.get("contents") or payload.get("content") or ""
    if not isinstance(contents, str):
        raise ValueError("JSON envelope contents is not a string")
    return contents


class FeedTransport:
    """Direct-then-proxy fetcher bound to a shared `httpx.AsyncClient`."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        proxies: Sequence[ProxyTransport] = DEFAULT_PROXIES,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        events: EventSink | None = None,
    ) -> None:
        self.client = client
        self.proxies = list(proxies)
        self.timeout = timeout
        self.user_agent = user_agent
        self.events = resolve_sink(events, LOGGER)

    async def fetch(self, url: str) -> Optional[str]:
        body = await self._attempt("direct", url, url, json_envelope=False)
        if body is not None:
            return body
        for proxy in self.proxies:
            body = await self._attempt(proxy.name, url, proxy.build_url(url), json_envelope=proxy.json_envelope)
            if body is not None:
                return body
        self.events.emit(
            "transport.exhausted",
            "All transports failed for %s",
            url[:80],
            level=logging.WARNING,
            url=url,
        )
        return None

    async def fetch_source(self, source: "FeedSource") -> Optional[str]:
        """Run the full transport chain on the primary URL, then on each fallback URL."""
        body = await self.fetch(source.url)
        if body is not None:
            return body
        if source.fallback_urls:
            self.events.emit(
                "transport.fallback_url",
                "Primary URL failed for %s, trying %s fallback URL(s)",
                source.name,
                len(source.fallback_urls),
                feed=source.name,
            )
        for fallback_url in source.fallback_urls:
            body = await self.fetch(fallback_url)
            if body is not None:
                LOGGER.info("%s: fallback URL %s succeeded", source.name, fallback_url)
                return body
        return None

    async def _attempt(self, stage: str, target: str, request_url: str, json_envelope: bool) -> Optional[str]:
        headers = {"Accept": "application/json" if json_envelope else FEED_ACCEPT_HEADER}
        if stage == "direct":
            headers["User-Agent"] = self.user_agent
        try:
            response = await asyncio.wait_for(
                self.client.get(request_url, headers=headers, timeout=self.timeout),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            self._fail("transport.timeout", stage, target, "timed out after %.1fs" % self.timeout)
            return None
        except httpx.HTTPError as exc:
            self._fail("transport.request_error", stage, target, f"request error: {exc!r}")
            return None

        if not response.is_success:
            self._fail("transport.http_status", stage, target, f"HTTP {response.status_code}", status=response.status_code)
            return None

        text = response.text
        if json_envelope:
            try:
                text = unwrap_json_envelope(text)
            except ValueError as exc:  # json.JSONDecodeError is a ValueError
                self._fail("transport.bad_envelope", stage, target, f"unreadable JSON envelope: {exc}")
                return None

        if not is_valid_feed_content(text):
            html_page = looks_like_html(text)
            reason = "returned HTML error page" if html_page else "returned non-feed content"
            self._fail("transport.invalid_content", stage, target, reason, html_page=html_page)
            return None

        LOGGER.debug("Transport %s succeeded for %s", stage, target[:80])
        return text

    def _fail(self, name: str, stage: str, target: str, reason: str, **fields: object) -> None:
        self.events.emit(
            name,
            "%s %s for %s",
            stage,
            reason,
            target[:80],
            level=logging.WARNING,
            stage=stage,
            url=target,
            **fields,
        )
