from __future__ import annotations

import os

import pytest

from src.services.settings import MonitorSettings, load_settings


def test_defaults() -> None:
    settings = MonitorSettings.from_env({})

    assert settings == MonitorSettings()
    assert settings.request_timeout == 10.0
    assert settings.recency_hours == 48
    assert settings.max_items == 100


def test_env_overrides() -> None:
    settings = MonitorSettings.from_env(
        {
            "STL_MONITOR_REQUEST_TIMEOUT": "2.5",
            "STL_MONITOR_MAX_ITEMS": "20",
            "STL_MONITOR_USER_AGENT": "custom-agent",
        }
    )

    assert settings.request_timeout == 2.5
    assert settings.max_items == 20
    assert settings.user_agent == "custom-agent"


def test_malformed_and_non_positive_values_fall_back() -> None:
    settings = MonitorSettings.from_env(
        {
            "STL_MONITOR_RECENCY_HOURS": "two days",
            "STL_MONITOR_MAX_DISTANCE_MILES": "-5",
            "STL_MONITOR_MAX_ITEMS": "",
        }
    )

    assert settings.recency_hours == 48
    assert settings.max_distance_miles == 50.0
    assert settings.max_items == 100


def test_load_settings_reads_dotenv(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(os, "environ", {})
    env_file = tmp_path / ".env"
    env_file.write_text("STL_MONITOR_RECENCY_HOURS=12\n", encoding="utf-8")

    settings = load_settings(env_file)

    assert settings.recency_hours == 12
