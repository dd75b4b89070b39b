"""In-memory brand store backing the configuration editor."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .assets import encode_image_data_url
from .fields import AssetKey, FieldUpdate, apply_update, parse_field_path
from .models import BrandConfig

logger = logging.getLogger(__name__)


@dataclass
class BrandStore:
    """Ordered brand list plus the brand currently being edited.

    The selection, when set, is always the element of the list with the same
    id. Updates replace both with one new record.
    """

    _brands: list[BrandConfig] = field(default_factory=list)
    _current_id: str | None = None

    def __post_init__(self) -> None:
        if self._current_id is not None and self.get(self._current_id) is None:
            self._current_id = None

    @property
    def brands(self) -> tuple[BrandConfig, ...]:
        return tuple(self._brands)

    @property
    def current(self) -> BrandConfig | None:
        """The selected brand, or None."""
        if self._current_id is None:
            return None
        return self.get(self._current_id)

    def __len__(self) -> int:
        return len(self._brands)

    def get(self, brand_id: str) -> BrandConfig | None:
        return next((b for b in self._brands if b.id == brand_id), None)

    def _index_of(self, brand_id: str) -> int | None:
        return next((i for i, b in enumerate(self._brands) if b.id == brand_id), None)

    def add_brand(self) -> BrandConfig:
        """Append a brand with defaults numbered after the current list size and select it."""
        brand = BrandConfig.new(len(self._brands) + 1)
        while self.get(brand.id) is not None:
            brand = BrandConfig.new(len(self._brands) + 1)
        self._brands.append(brand)
        self._current_id = brand.id
        logger.debug("Added brand %s (%s)", brand.id, brand.display_name)
        return brand

    def update_field(self, path: str, value: Any, *, from_text: bool = False) -> BrandConfig | None:
        """Set a field of the selected brand by dotted path (``colors.primary``).

        Does nothing and returns None when no brand is selected. Invalid paths
        or values raise before any state changes.
        """
        if self.current is None:
            logger.debug("Ignoring update of %s: no brand selected", path)
            return None
        return self.apply(parse_field_path(path, value, from_text=from_text))

    def apply(self, update: FieldUpdate) -> BrandConfig | None:
        """Apply a typed update to the selected brand."""
        current = self.current
        if current is None:
            return None
        updated = apply_update(current, update)
        idx = self._index_of(current.id)
        if idx is not None:
            self._brands[idx] = updated
        logger.debug("Updated brand %s: %s", current.id, update.kind)
        return updated

    def set_asset_from_file(self, key: AssetKey, path: Path) -> BrandConfig | None:
        """Embed an image file into the selected brand's assets."""
        if self.current is None:
            return None
        return self.update_field(f"assets.{key}", encode_image_data_url(path))

    def delete_brand(self, brand_id: str) -> None:
        """Remove a brand; a deleted selection falls back to the first remaining brand."""
        idx = self._index_of(brand_id)
        if idx is None:
            return
        del self._brands[idx]
        if self._current_id == brand_id:
            self._current_id = self._brands[0].id if self._brands else None
        logger.debug("Deleted brand %s", brand_id)

    def select_brand(self, brand_id: str) -> BrandConfig | None:
        """Select a brand by id.

        An unknown id leaves the previous selection in place and returns None.
        """
        brand = self.get(brand_id)
        if brand is None:
            logger.debug("Brand %s not found; selection unchanged", brand_id)
            return None
        self._current_id = brand.id
        return brand
