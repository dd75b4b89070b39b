"""Theme colors derived from the injected brand values."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .config import RuntimeBrandConfig

DARK_BACKGROUND = "#1e293b"
DARK_TEXT = "#f8fafc"
DARK_CARD = "#334155"
DARK_BORDER = "#475569"
DARK_MUTED = "#94a3b8"
LIGHT_CARD = "#f8fafc"
LIGHT_BORDER = "#e2e8f0"
LIGHT_MUTED = "#64748b"


@dataclass(frozen=True)
class ThemePalette:
    background: str
    text: str
    card_background: str
    border: str
    muted_text: str
    primary: str
    secondary: str

    @classmethod
    def for_brand(cls, config: RuntimeBrandConfig, dark_mode: bool) -> ThemePalette:
        """Dark mode uses a fixed slate palette; light mode uses the brand's own colors."""
        if dark_mode:
            return cls(
                background=DARK_BACKGROUND,
                text=DARK_TEXT,
                card_background=DARK_CARD,
                border=DARK_BORDER,
                muted_text=DARK_MUTED,
                primary=config.primary_color,
                secondary=config.secondary_color,
            )
        return cls(
            background=config.background_color,
            text=config.text_color,
            card_background=LIGHT_CARD,
            border=LIGHT_BORDER,
            muted_text=LIGHT_MUTED,
            primary=config.primary_color,
            secondary=config.secondary_color,
        )


def feature_label(key: str) -> str:
    """``pushNotifications`` -> ``Push Notifications``."""
    spaced = re.sub(r"([A-Z])", r" \1", key).strip()
    return spaced[:1].upper() + spaced[1:]


def initial(name: str) -> str:
    """Placeholder logo letter for a brand without a logo."""
    return name[:1]
