"""
Map-facing incident records and the news -> incident boundary check.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable, List, Literal, Optional, Sequence

from src.services.diagnostics import EventSink, resolve_sink
from src.services.geocoding import ConfidenceLevel
from src.services.geofence import GeoPoint, is_within_bounds

if TYPE_CHECKING:
    from src.services.news_ingestion import NewsItem

LOGGER = logging.getLogger(__name__)

IncidentCategory = Literal["traffic", "weather", "transit", "news", "crime"]
IncidentStatus = Literal["active", "resolving", "cleared"]

NEWS_SEVERITY = 30
NEWS_SOURCE = "Local News"


@dataclass
class Incident:
    id: str
    title: str
    category: IncidentCategory
    severity: int
    confidence: ConfidenceLevel
    status: IncidentStatus
    location: GeoPoint
    source: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    subtype: str | None = None
    source_url: str | None = None
    expires_at: datetime | None = None
    polygon: dict[str, Any] | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_serializable(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "subtype": self.subtype,
            "severity": self.severity,
            "confidence": self.confidence,
            "status": self.status,
            "location": self.location.to_serializable(),
            "polygon": self.polygon,
            "source": self.source,
            "source_url": self.source_url,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
            "metadata": self.metadata,
        }


def news_to_incidents(
    news: Sequence["NewsItem"],
    events: EventSink | None = None,
    now: Optional[Callable[[], datetime]] = None,
) -> List[Incident]:
    """Convert geocoded news into incidents, re-checking the primary fence on the way."""
    sink = resolve_sink(events, LOGGER)
    clock = now or (lambda: datetime.now(timezone.utc))
    incidents: List[Incident] = []
    for item in news:
        location = item.location
        confidence = item.geocoding_confidence
        reason = None
        if location is None:
            reason = "no location"
        elif not confidence or confidence == "low":
            reason = "confidence too low"
        elif not is_within_bounds(location, events=sink):
            reason = "location outside STL bounds (%.4f, %.4f)" % (location.latitude, location.longitude)
        if reason or location is None or confidence is None:
            sink.emit(
                "incident.rejected",
                "Rejecting news item %r - %s",
                item.title[:50],
                reason,
                level=logging.WARNING,
                url=item.url,
                reason=reason,
            )
            continue
        incidents.append(
            Incident(
                id=f"news-{item.id}",
                title=item.title,
                description=item.snippet,
                category="news",
                subtype=item.outlet,
                severity=NEWS_SEVERITY,
                confidence=confidence,
                status="active",
                location=location,
                source=NEWS_SOURCE,
                source_url=item.url,
                created_at=item.published_at,
                updated_at=clock(),
            )
        )
    return incidents

