"""Data models for brand configurations.

A brand is an immutable pydantic model. Editing a brand produces a new
record (see ``whitelabel.brands.fields``) so the store can swap the
selection and the matching collection element in one step.

JSON field names are camelCase (``appName``, ``textSecondary``) because
that is the interchange shape consumed by the installer and the mobile
build; Python attributes are snake_case.
"""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator
from pydantic.alias_generators import to_camel

from whitelabel.constants import (
    DEFAULT_COLORS,
    DEFAULT_FEATURES,
    DEFAULT_VERSION,
    DEFAULT_VERSION_CODE,
)


class CamelModel(BaseModel):
    """Frozen base model serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    def to_json_dict(self) -> dict:
        """Dump to a JSON-compatible dict using the camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)


class BrandColors(CamelModel):
    """The six theme colors every brand carries."""

    primary: str = Field(default=DEFAULT_COLORS["primary"])
    secondary: str = Field(default=DEFAULT_COLORS["secondary"])
    background: str = Field(default=DEFAULT_COLORS["background"])
    surface: str = Field(default=DEFAULT_COLORS["surface"])
    text: str = Field(default=DEFAULT_COLORS["text"])
    text_secondary: str = Field(default=DEFAULT_COLORS["textSecondary"])


class BrandFeatures(CamelModel):
    """Feature flags toggled per brand."""

    dark_mode: bool = Field(default=DEFAULT_FEATURES["darkMode"])
    analytics: bool = Field(default=DEFAULT_FEATURES["analytics"])
    push_notifications: bool = Field(default=DEFAULT_FEATURES["pushNotifications"])
    biometric: bool = Field(default=DEFAULT_FEATURES["biometric"])


class BrandAssets(CamelModel):
    """Image assets embedded as ``data:<mime>;base64,...`` URLs, or None if unset."""

    icon: str | None = None
    splash: str | None = None
    logo: str | None = None


class BrandConfig(CamelModel):
    """One white label brand."""

    id: str = Field(description="Opaque identifier, fixed at creation")
    app_name: str = Field(default="", description="Internal app name, e.g. 'App 1'")
    display_name: str = Field(default="", description="Name shown under the launcher icon")
    package_name: str = Field(default="", description="Android package, e.g. 'com.brand1.app'")
    bundle_id: str = Field(default="", description="iOS bundle identifier")
    version: str = Field(default=DEFAULT_VERSION, description="Semantic version string")
    version_code: PositiveInt = Field(default=DEFAULT_VERSION_CODE)
    colors: BrandColors = Field(default_factory=BrandColors)
    features: BrandFeatures = Field(default_factory=BrandFeatures)
    api_base_url: str = Field(default="", description="Backend base URL for the app")
    assets: BrandAssets = Field(default_factory=BrandAssets)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: object) -> object:
        # Ids written by older exports can be numeric timestamps
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def new(cls, position: int, brand_id: str | None = None) -> BrandConfig:
        """Create a brand with defaults derived from its 1-based position in the list."""
        return cls(
            id=brand_id or uuid.uuid4().hex,
            app_name=f"App {position}",
            display_name=f"Brand {position}",
            package_name=f"com.brand{position}.app",
            bundle_id=f"com.brand{position}.app",
        )
