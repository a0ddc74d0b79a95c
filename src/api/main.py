"""
FastAPI app exposing freshly ingested St. Louis news and map incidents.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Optional

import httpx
from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from src.services.feed_transport import FeedTransport
from src.services.incidents import news_to_incidents
from src.services.news_ingestion import NewsIngestor
from src.services.settings import MonitorSettings, load_settings
from src.services.weather_alerts import fetch_nws_alerts, weather_alerts_to_incidents

DEFAULT_NEWS_LIMIT = 100
MAX_NEWS_LIMIT = 500
LOGGER = logging.getLogger("stl_monitor_api")
if not LOGGER.handlers:
    LOGGER.setLevel(logging.INFO)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    LOGGER.addHandler(stream_handler)


def get_settings() -> MonitorSettings:
    return load_settings()


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(follow_redirects=True) as client:
        yield client


def get_ingestor(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: MonitorSettings = Depends(get_settings),
) -> NewsIngestor:
    transport = FeedTransport(client, timeout=settings.request_timeout, user_agent=settings.user_agent)
    return NewsIngestor(transport=transport, settings=settings)


class GeoPointOut(BaseModel):
    lat: float = Field(..., description="Latitude in decimal degrees")
    lng: float = Field(..., description="Longitude in decimal degrees")


class NewsItemOut(BaseModel):
    id: str
    title: str
    outlet: str
    url: str
    published_at: str
    snippet: str
    location: Optional[GeoPointOut] = None
    geocoding_confidence: Optional[str] = None


class IncidentOut(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    category: str
    subtype: Optional[str] = None
    severity: int = Field(..., ge=0, le=100)
    confidence: str
    status: str
    location: GeoPointOut
    polygon: Optional[dict[str, Any]] = None
    source: str
    source_url: Optional[str] = None
    created_at: str
    updated_at: str
    expires_at: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)


app = FastAPI(title="STL Monitor API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/news", response_model=list[NewsItemOut])
async def get_news(
    limit: int = Query(
        DEFAULT_NEWS_LIMIT,
        ge=1,
        le=MAX_NEWS_LIMIT,
        description="Maximum number of articles to return, newest first.",
    ),
    ingestor: NewsIngestor = Depends(get_ingestor),
) -> list[NewsItemOut]:
    LOGGER.info("Fetching news limit=%s", limit)
    news = await ingestor.run()
    return [NewsItemOut(**item.to_serializable()) for item in news[:limit]]


@app.get("/api/incidents", response_model=list[IncidentOut])
async def get_incidents(
    include_weather: bool = Query(
        False,
        description="Also include active NWS alerts for the metro area.",
    ),
    ingestor: NewsIngestor = Depends(get_ingestor),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: MonitorSettings = Depends(get_settings),
) -> list[IncidentOut]:
    LOGGER.info("Fetching incidents include_weather=%s", include_weather)
    news = await ingestor.run()
    incidents = news_to_incidents(news)
    if include_weather:
        alerts = await fetch_nws_alerts(
            client,
            user_agent=settings.nws_user_agent,
            timeout=settings.request_timeout,
        )
        incidents = weather_alerts_to_incidents(alerts) + incidents
    return [IncidentOut(**incident.to_serializable()) for incident in incidents]
