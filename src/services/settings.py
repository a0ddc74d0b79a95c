"""
Runtime settings for the ingestion core, read from `STL_MONITOR_*` environment
variables (optionally via a `.env` file).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "STL_MONITOR_"
DEFAULT_DOTENV_PATH = Path(__file__).resolve().parents[2] / ".env"


@dataclass(frozen=True)
class MonitorSettings:
    request_timeout: float = 10.0
    max_distance_miles: float = 50.0
    recency_hours: int = 48
    max_items: int = 100
    user_agent: str = "Mozilla/5.0 (compatible; STLMonitor/1.0)"
    nws_user_agent: str = "STLMonitor/1.0 (amer.lol)"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "MonitorSettings":
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            request_timeout=_read_number(env, "REQUEST_TIMEOUT", defaults.request_timeout, float),
            max_distance_miles=_read_number(env, "MAX_DISTANCE_MILES", defaults.max_distance_miles, float),
            recency_hours=_read_number(env, "RECENCY_HOURS", defaults.recency_hours, int),
            max_items=_read_number(env, "MAX_ITEMS", defaults.max_items, int),
            user_agent=env.get(f"{ENV_PREFIX}USER_AGENT") or defaults.user_agent,
            nws_user_agent=env.get(f"{ENV_PREFIX}NWS_USER_AGENT") or defaults.nws_user_agent,
        )


def _read_number(env: Mapping[str, str], key: str, default, cast):
    raw = env.get(f"{ENV_PREFIX}{key}")
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        LOGGER.warning("Ignoring malformed %s%s=%r; using %s", ENV_PREFIX, key, raw, default)
        return default
    if value <= 0:
        LOGGER.warning("Ignoring non-positive %s%s=%r; using %s", ENV_PREFIX, key, raw, default)
        return default
    return value


def load_settings(dotenv_path: Path | None = None) -> MonitorSettings:
    dotenv_loaded = load_dotenv(dotenv_path=dotenv_path or DEFAULT_DOTENV_PATH)
    if dotenv_loaded:
        LOGGER.debug("Loaded environment variables from .env file.")
    return MonitorSettings.from_env()
