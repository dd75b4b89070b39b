"""Brand → build configuration export.

``to_build_config`` is a pure projection. The ``export_*`` functions wrap
serialized output in an ``ExportArtifact`` (filename + bytes) which the
caller writes wherever the user wants it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, Sequence

from whitelabel.brands.models import BrandConfig
from whitelabel.constants import (
    ALL_CONFIGS_FILENAME,
    BUILD_SCRIPT_FILENAME,
    CONFIG_FILENAME_SUFFIX,
    DEFAULT_BRAND_ID,
)
from whitelabel.exceptions import ExportError
from whitelabel.utils.file_utils import dump_json, write_atomically

from .models import ApiConfig, AppConfig, BrandExportEntry, BuildConfig, BuildScripts
from .scripts import render_android_script, render_apk_build_script, render_ios_script

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportArtifact:
    """A named file ready to be saved."""

    filename: str
    content: bytes
    media_type: str

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    def write_to(self, directory: Path) -> Path:
        """Write the artifact into ``directory`` and return the file path.

        Shell scripts are made executable.
        """
        target = directory / self.filename
        mode = 0o755 if self.media_type == "text/x-shellscript" else None
        try:
            write_atomically(target, self.content, mode=mode)
        except OSError as e:
            raise ExportError(f"Failed to write {self.filename}", details=str(e)) from e
        logger.info("Wrote %s (%d bytes)", target, len(self.content))
        return target


def to_build_config(brand: BrandConfig) -> BuildConfig:
    """Project a brand into the build configuration document."""
    return BuildConfig(
        app_config=AppConfig(
            name=brand.app_name,
            display_name=brand.display_name,
            version=brand.version,
            version_code=brand.version_code,
            package=brand.package_name,
            bundle_id=brand.bundle_id,
        ),
        colors=brand.colors,
        features=brand.features,
        api_config=ApiConfig(base_url=brand.api_base_url),
        build_scripts=BuildScripts(
            android=render_android_script(brand),
            ios=render_ios_script(brand),
        ),
    )


def config_filename(brand: BrandConfig) -> str:
    # Falls back to the id when the package name is blank or would escape the directory
    stem = brand.package_name.strip()
    if not stem or "/" in stem or "\\" in stem or stem in (".", ".."):
        stem = brand.id
    return f"{stem}{CONFIG_FILENAME_SUFFIX}"


def export_one(brand: BrandConfig) -> ExportArtifact:
    """Serialize one brand's build configuration as ``<packageName>-config.json``."""
    doc = to_build_config(brand).to_json_dict()
    return ExportArtifact(
        filename=config_filename(brand),
        content=dump_json(doc).encode("utf-8"),
        media_type="application/json",
    )


def export_all(brands: Iterable[BrandConfig]) -> ExportArtifact:
    """Serialize every brand as a list of ``{"brandId", "config"}`` entries."""
    entries = [
        BrandExportEntry(brand_id=b.id, config=to_build_config(b)).to_json_dict() for b in brands
    ]
    return ExportArtifact(
        filename=ALL_CONFIGS_FILENAME,
        content=dump_json(entries).encode("utf-8"),
        media_type="application/json",
    )


def export_build_script(
    brands: Sequence[BrandConfig], generated_at: datetime | None = None
) -> ExportArtifact:
    """Render the APK build script defaulting to the first brand (or ``default``)."""
    default_brand = brands[0].id if brands else DEFAULT_BRAND_ID
    script = render_apk_build_script(default_brand, generated_at)
    return ExportArtifact(
        filename=BUILD_SCRIPT_FILENAME,
        content=script.encode("utf-8"),
        media_type="text/x-shellscript",
    )
