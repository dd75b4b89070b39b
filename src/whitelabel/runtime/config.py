"""Brand values as the mobile client sees them after the installer has run."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

FALLBACKS: dict[str, str] = {
    "APP_NAME": "White Label App",
    "DISPLAY_NAME": "My App",
    "PRIMARY_COLOR": "#2563eb",
    "SECONDARY_COLOR": "#7c3aed",
    "BACKGROUND_COLOR": "#ffffff",
    "TEXT_COLOR": "#1e293b",
    "API_BASE_URL": "https://api.example.com",
    "VERSION_NAME": "1.0.0",
    "VERSION_CODE": "1",
    "PACKAGE_NAME": "com.whitelabel.app",
}


class RuntimeFeatures(BaseModel):
    model_config = ConfigDict(frozen=True)

    dark_mode: bool = False
    analytics: bool = False
    push_notifications: bool = False
    biometric: bool = False


class RuntimeBrandConfig(BaseModel):
    """Injected brand values with a hardcoded fallback for each one."""

    model_config = ConfigDict(frozen=True)

    app_name: str
    display_name: str
    primary_color: str
    secondary_color: str
    background_color: str
    text_color: str
    api_base_url: str
    version_name: str
    version_code: str
    package_name: str
    features: RuntimeFeatures

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> RuntimeBrandConfig:
        """Build from env-style values; empty or missing values use the fallbacks.

        A feature is enabled only when its value is exactly ``"true"``.
        """

        def get(key: str) -> str:
            return env.get(key) or FALLBACKS[key]

        return cls(
            app_name=get("APP_NAME"),
            display_name=get("DISPLAY_NAME"),
            primary_color=get("PRIMARY_COLOR"),
            secondary_color=get("SECONDARY_COLOR"),
            background_color=get("BACKGROUND_COLOR"),
            text_color=get("TEXT_COLOR"),
            api_base_url=get("API_BASE_URL"),
            version_name=get("VERSION_NAME"),
            version_code=get("VERSION_CODE"),
            package_name=get("PACKAGE_NAME"),
            features=RuntimeFeatures(
                dark_mode=env.get("FEATURE_DARK_MODE") == "true",
                analytics=env.get("FEATURE_ANALYTICS") == "true",
                push_notifications=env.get("FEATURE_PUSH_NOTIFICATIONS") == "true",
                biometric=env.get("FEATURE_BIOMETRIC") == "true",
            ),
        )


def parse_env(text: str) -> dict[str, str]:
    """Parse ``KEY=value`` lines; blank lines and ``#`` comments are skipped."""
    values: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        values[key.strip()] = value
    return values


def load_env_file(path: Path) -> dict[str, str]:
    """Read an env file written by the installer; a missing file gives no values."""
    if not path.exists():
        logger.debug("Env file %s not found, using fallbacks", path)
        return {}
    return parse_env(path.read_text(encoding="utf-8"))
