"""Shared fixtures for whitelabel tests."""

from pathlib import Path

import pytest

from whitelabel.config.settings import clear_settings_cache


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch):
    """Point settings at a temp session file and reset the settings cache."""
    monkeypatch.setenv("WHITELABEL_SESSION_FILE", str(tmp_path / "session.json"))
    monkeypatch.setenv("WHITELABEL_OUTPUT_DIR", str(tmp_path / "out"))
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def scenario_document() -> list:
    """Single-brand export list used by the installer scenarios."""
    return [
        {
            "brandId": "b1",
            "config": {
                "appConfig": {
                    "name": "App1",
                    "displayName": "Brand One",
                    "package": "com.b1.app",
                    "version": "1.0.0",
                    "versionCode": 1,
                },
                "colors": {
                    "primary": "#111111",
                    "secondary": "#222222",
                    "background": "#fff",
                    "text": "#000",
                },
                "apiConfig": {"baseUrl": "https://x"},
                "features": {
                    "darkMode": True,
                    "analytics": False,
                    "pushNotifications": False,
                    "biometric": False,
                },
            },
        }
    ]
