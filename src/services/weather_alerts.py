"""
Active National Weather Service alerts for the St. Louis area, as map incidents.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Sequence

import httpx

from src.services.diagnostics import EventSink, resolve_sink
from src.services.geofence import METRO_CENTER
from src.services.incidents import Incident

LOGGER = logging.getLogger(__name__)

NWS_ALERTS_URL = "https://api.weather.gov/alerts/active?area=MO,IL&status=actual"
NWS_SOURCE = "NWS"
AREA_ZONE_PREFIXES = ("MOZ", "ILZ")

SEVERITY_SCORES = {
    "Extreme": 100,
    "Severe": 80,
    "Moderate": 50,
    "Minor": 30,
}
DEFAULT_SEVERITY_SCORE = 20


@dataclass
class WeatherAlert:
    id: str
    event: str
    headline: str
    description: str
    severity: str
    urgency: str
    effective: datetime
    expires: datetime | None = None
    polygon: dict[str, Any] | None = None


def severity_score(severity: str | None) -> int:
    return SEVERITY_SCORES.get(severity or "", DEFAULT_SEVERITY_SCORE)


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        LOGGER.debug("Unparseable NWS timestamp %r", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_area_alert(properties: dict[str, Any]) -> bool:
    zones = properties.get("affectedZones") or []
    if any(prefix in str(zone) for zone in zones for prefix in AREA_ZONE_PREFIXES):
        return True
    return "st. louis" in str(properties.get("areaDesc") or "").lower()


def parse_alerts(payload: dict[str, Any]) -> List[WeatherAlert]:
    """Turn a GeoJSON FeatureCollection from api.weather.gov into area alerts."""
    alerts: List[WeatherAlert] = []
    features = payload.get("features")
    for feature in features if isinstance(features, list) else []:
        if not isinstance(feature, dict):
            continue
        properties = feature.get("properties")
        if not isinstance(properties, dict):
            continue
        if not is_area_alert(properties):
            continue
        geometry = feature.get("geometry")
        polygon = geometry if isinstance(geometry, dict) and geometry.get("type") == "Polygon" else None
        event = properties.get("event") or "Weather Alert"
        alerts.append(
            WeatherAlert(
                id=str(properties.get("id") or feature.get("id") or ""),
                event=event,
                headline=properties.get("headline") or event,
                description=properties.get("description") or "",
                severity=properties.get("severity") or "Unknown",
                urgency=properties.get("urgency") or "Unknown",
                effective=_parse_timestamp(properties.get("effective")) or datetime.now(timezone.utc),
                expires=_parse_timestamp(properties.get("expires")),
                polygon=polygon,
            )
        )
    return alerts


async def fetch_nws_alerts(
    client: httpx.AsyncClient,
    user_agent: str,
    timeout: float,
    events: EventSink | None = None,
    url: str = NWS_ALERTS_URL,
) -> List[WeatherAlert]:
    """Fetch active alerts; any failure yields an empty list and a `weather.fetch_failed` event."""
    sink = resolve_sink(events, LOGGER)
    headers = {"User-Agent": user_agent, "Accept": "application/geo+json"}
    try:
        response = await asyncio.wait_for(client.get(url, headers=headers, timeout=timeout), timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except (asyncio.TimeoutError, httpx.HTTPError, ValueError) as exc:
        sink.emit(
            "weather.fetch_failed",
            "Failed to fetch NWS alerts: %r",
            exc,
            level=logging.ERROR,
            url=url,
        )
        return []
    if not isinstance(payload, dict) or not isinstance(payload.get("features"), list):
        sink.emit("weather.fetch_failed", "NWS payload is not a FeatureCollection", level=logging.ERROR, url=url)
        return []
    try:
        alerts = parse_alerts(payload)
    except (AttributeError, TypeError) as exc:
        sink.emit("weather.fetch_failed", "Malformed NWS payload: %r", exc, level=logging.ERROR, url=url)
        return []
    LOGGER.info("Fetched %s NWS alerts for the St. Louis area", len(alerts))
    return alerts


def weather_alerts_to_incidents(
    alerts: Sequence[WeatherAlert],
    now: Optional[Callable[[], datetime]] = None,
) -> List[Incident]:
    clock = now or (lambda: datetime.now(timezone.utc))
    return [
        Incident(
            id=f"weather-{alert.id}",
            title=alert.headline,
            description=alert.description,
            category="weather",
            subtype=alert.event,
            severity=severity_score(alert.severity),
            confidence="high",
            status="active",
            # Area alerts are pinned to the metro center; the polygon carries the real extent.
            location=METRO_CENTER,
            polygon=alert.polygon,
            source=NWS_SOURCE,
            created_at=alert.effective,
            updated_at=clock(),
            expires_at=alert.expires,
            metadata={"urgency": alert.urgency},
        )
        for alert in alerts
    ]
