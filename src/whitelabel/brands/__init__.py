"""Brand configuration records and the editor store."""

from .assets import encode_image_data_url
from .fields import (
    AssetUpdate,
    ColorUpdate,
    FeatureUpdate,
    FieldUpdate,
    TextFieldUpdate,
    VersionCodeUpdate,
    apply_update,
    parse_field_path,
)
from .models import BrandAssets, BrandColors, BrandConfig, BrandFeatures
from .session import load_session, save_session
from .store import BrandStore

__all__ = [
    "BrandAssets",
    "BrandColors",
    "BrandConfig",
    "BrandFeatures",
    "BrandStore",
    "FieldUpdate",
    "TextFieldUpdate",
    "VersionCodeUpdate",
    "ColorUpdate",
    "FeatureUpdate",
    "AssetUpdate",
    "apply_update",
    "parse_field_path",
    "encode_image_data_url",
    "load_session",
    "save_session",
]
