"""Runtime side of a branded client: injected values, theme and preferences."""

from .config import FALLBACKS, RuntimeBrandConfig, RuntimeFeatures, load_env_file, parse_env
from .preferences import DEMO_USER, BrandSession, PreferenceStore, User
from .theme import ThemePalette, feature_label, initial

__all__ = [
    "FALLBACKS",
    "RuntimeBrandConfig",
    "RuntimeFeatures",
    "load_env_file",
    "parse_env",
    "DEMO_USER",
    "BrandSession",
    "PreferenceStore",
    "User",
    "ThemePalette",
    "feature_label",
    "initial",
]
