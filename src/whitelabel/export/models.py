"""Build configuration document consumed by the mobile build pipeline."""

from __future__ import annotations

from pydantic import Field

from whitelabel.brands.models import BrandColors, BrandFeatures, CamelModel


class AppConfig(CamelModel):
    name: str
    display_name: str
    version: str
    version_code: int
    package: str
    bundle_id: str


class ApiConfig(CamelModel):
    base_url: str


class BuildScripts(CamelModel):
    """Per-platform shell scripts that install the brand and build it."""

    android: str
    ios: str


class BuildConfig(CamelModel):
    """Flattened projection of a brand, regenerated on every export."""

    app_config: AppConfig
    colors: BrandColors
    features: BrandFeatures
    api_config: ApiConfig
    build_scripts: BuildScripts = Field(description="Shell scripts keyed by platform")


class BrandExportEntry(CamelModel):
    """One element of the multi-brand export list."""

    brand_id: str
    config: BuildConfig
