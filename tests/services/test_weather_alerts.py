from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import httpx

from src.services.diagnostics import RecordingEventSink
from src.services.geofence import METRO_CENTER
from src.services.weather_alerts import (
    WeatherAlert,
    fetch_nws_alerts,
    parse_alerts,
    severity_score,
    weather_alerts_to_incidents,
)

POLYGON = {"type": "Polygon", "coordinates": [[[-90.3, 38.5], [-90.1, 38.5], [-90.1, 38.7], [-90.3, 38.5]]]}


def make_feature(alert_id: str, zones: list[str], area: str, severity: str = "Severe", geometry=None) -> dict:
    return {
        "id": f"https://api.weather.gov/alerts/{alert_id}",
        "geometry": geometry,
        "properties": {
            "id": alert_id,
            "event": "Severe Thunderstorm Warning",
            "headline": f"Severe Thunderstorm Warning {alert_id}",
            "description": "Damaging winds expected.",
            "severity": severity,
            "urgency": "Immediate",
            "areaDesc": area,
            "affectedZones": zones,
            "effective": "2025-10-14T13:00:00-05:00",
            "expires": "2025-10-14T14:00:00-05:00",
        },
    }


PAYLOAD = {
    "type": "FeatureCollection",
    "features": [
        make_feature("mo-1", ["https://api.weather.gov/zones/county/MOZ063"], "St. Louis, MO", geometry=POLYGON),
        make_feature("city-1", [], "City of St. Louis"),
        make_feature("ks-1", ["https://api.weather.gov/zones/county/KSZ083"], "Sedgwick, KS"),
    ],
}


def test_parse_alerts_keeps_area_features_only() -> None:
    alerts = parse_alerts(PAYLOAD)

    assert [alert.id for alert in alerts] == ["mo-1", "city-1"]
    assert alerts[0].polygon == POLYGON
    assert alerts[1].polygon is None
    assert alerts[0].effective == datetime(2025, 10, 14, 18, 0, tzinfo=timezone.utc)


def test_fetch_sends_nws_headers() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=PAYLOAD)

    async def _go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await fetch_nws_alerts(client, user_agent="STLMonitor/1.0 (test)", timeout=1.0)

    alerts = asyncio.run(_go())

    assert len(alerts) == 2
    assert requests[0].headers["Accept"] == "application/geo+json"
    assert requests[0].headers["User-Agent"] == "STLMonitor/1.0 (test)"
    assert requests[0].url.params["area"] == "MO,IL"


def test_fetch_failure_returns_empty_list() -> None:
    events = RecordingEventSink()

    async def _go():
        transport = httpx.MockTransport(lambda request: httpx.Response(503))
        async with httpx.AsyncClient(transport=transport) as client:
            return await fetch_nws_alerts(client, user_agent="ua", timeout=1.0, events=events)

    assert asyncio.run(_go()) == []
    assert events.names() == ["weather.fetch_failed"]


def test_alerts_become_weather_incidents() -> None:
    updated = datetime(2025, 10, 14, 18, 30, tzinfo=timezone.utc)
    alerts = parse_alerts(PAYLOAD)

    incidents = weather_alerts_to_incidents(alerts, now=lambda: updated)

    first = incidents[0]
    assert first.id == "weather-mo-1"
    assert first.category == "weather"
    assert first.confidence == "high"
    assert first.severity == 80
    assert first.location == METRO_CENTER
    assert first.polygon == POLYGON
    assert first.source == "NWS"
    assert first.updated_at == updated
    assert first.expires_at == datetime(2025, 10, 14, 19, 0, tzinfo=timezone.utc)


def test_severity_mapping() -> None:
    assert severity_score("Extreme") == 100
    assert severity_score("Severe") == 80
    assert severity_score("Moderate") == 50
    assert severity_score("Minor") == 30
    assert severity_score("Unknown") == 20
    assert severity_score(None) == 20


def test_alert_without_expiry_serializes() -> None:
    alert = WeatherAlert(
        id="x",
        event="Heat Advisory",
        headline="Heat Advisory",
        description="",
        severity="Minor",
        urgency="Expected",
        effective=datetime(2025, 7, 1, tzinfo=timezone.utc),
    )

    payload = weather_alerts_to_incidents([alert])[0].to_serializable()

    assert payload["expires_at"] is None
    assert payload["severity"] == 30


def fetch_with_payload(payload, events: RecordingEventSink) -> list[WeatherAlert]:
    async def _go():
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=payload))
        async with httpx.AsyncClient(transport=transport) as client:
            return await fetch_nws_alerts(client, user_agent="ua", timeout=1.0, events=events)

    return asyncio.run(_go())


def test_null_features_are_skipped() -> None:
    events = RecordingEventSink()
    payload = {"features": [None, {"properties": None}, PAYLOAD["features"][0]]}

    alerts = fetch_with_payload(payload, events)

    assert [alert.id for alert in alerts] == ["mo-1"]
    assert events.names() == []


def test_malformed_payloads_return_empty_list() -> None:
    payloads = [
        {"features": {"a": 1}},
        {"features": [{"properties": {"affectedZones": 5}}]},
        ["not", "an", "object"],
    ]
    for payload in payloads:
        events = RecordingEventSink()

        assert fetch_with_payload(payload, events) == [], payload
        assert events.names() == ["weather.fetch_failed"], payload
