"""Install one brand's build configuration into a mobile project checkout.

Reads an exported configuration document (a list of ``{"brandId", "config"}``
entries or a mapping of brand id to config) and writes:

- ``.env`` with one ``KEY=value`` line per brand value;
- the Android ``strings.xml`` app name, if the resource directory exists;
- the ``name`` field of ``package.json``, if the file exists.

Files are written one after another with no rollback; a failure part way
leaves earlier files in place.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from xml.sax.saxutils import escape

from whitelabel.constants import ENV_FILE_PATH, MANIFEST_PATH, STRINGS_XML_PATH
from whitelabel.exceptions import BrandNotFoundError, InstallError
from whitelabel.utils.file_utils import dump_json, read_json, write_atomically

logger = logging.getLogger(__name__)

# (env key, section, field) in output order
REQUIRED_ENV_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("APP_NAME", "appConfig", "name"),
    ("DISPLAY_NAME", "appConfig", "displayName"),
    ("PACKAGE_NAME", "appConfig", "package"),
    ("VERSION_NAME", "appConfig", "version"),
    ("VERSION_CODE", "appConfig", "versionCode"),
    ("PRIMARY_COLOR", "colors", "primary"),
    ("SECONDARY_COLOR", "colors", "secondary"),
    ("BACKGROUND_COLOR", "colors", "background"),
    ("TEXT_COLOR", "colors", "text"),
    ("API_BASE_URL", "apiConfig", "baseUrl"),
    ("FEATURE_DARK_MODE", "features", "darkMode"),
    ("FEATURE_ANALYTICS", "features", "analytics"),
    ("FEATURE_PUSH_NOTIFICATIONS", "features", "pushNotifications"),
    ("FEATURE_BIOMETRIC", "features", "biometric"),
)
# Written only when the document has them
OPTIONAL_ENV_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("BUNDLE_ID", "appConfig", "bundleId"),
    ("SURFACE_COLOR", "colors", "surface"),
    ("TEXT_SECONDARY_COLOR", "colors", "textSecondary"),
)

STRINGS_XML_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="app_name">{display_name}</string>
</resources>"""


@dataclass
class InstallResult:
    """Outcome of ``install_brand``: which files were written."""

    brand_id: str
    display_name: str
    package: str
    version: str
    version_code: str
    env_path: Path
    strings_path: Path | None = None
    manifest_path: Path | None = None
    written: list[Path] = field(default_factory=list)


def load_config_document(path: Path) -> Any:
    """Read and parse a configuration document.

    Raises:
        InstallError: If the file cannot be read or is not valid JSON.
    """
    try:
        return read_json(path)
    except FileNotFoundError as e:
        raise InstallError(f"Config file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise InstallError(f"Invalid JSON in {path}", details=str(e)) from e
    except OSError as e:
        raise InstallError(f"Failed to read {path}", details=str(e)) from e


def find_brand_config(document: Any, brand_id: str) -> dict:
    """Locate a brand's config in a list or mapping document.

    List entries match on ``brandId`` compared as text, since ids exported
    by other tools may be numbers.

    Raises:
        BrandNotFoundError: If no entry matches.
    """
    config: Any = None
    if isinstance(document, list):
        entry = next(
            (
                e
                for e in document
                if isinstance(e, dict) and "brandId" in e and str(e["brandId"]) == brand_id
            ),
            None,
        )
        config = entry.get("config") if entry else None
    elif isinstance(document, dict):
        config = document.get(brand_id)
    if not config:
        raise BrandNotFoundError(f"Brand configuration not found for ID: {brand_id}")
    if not isinstance(config, dict):
        raise InstallError(f"Configuration for brand {brand_id} is not an object")
    return config


def format_env_value(value: Any) -> str:
    """Render a value the way the mobile runtime expects (``true``/``false`` for flags).

    Raises:
        InstallError: If the value contains a line break, which would split
            it into extra ``KEY=value`` lines.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value)
    if "\n" in text or "\r" in text:
        raise InstallError(f"Value contains a line break: {text!r}")
    return text


def _lookup(config: dict, section: str, key: str) -> Any:
    group = config.get(section)
    if not isinstance(group, dict) or key not in group or group[key] is None:
        raise InstallError(f"Missing field in brand configuration: {section}.{key}")
    return group[key]


def render_env(config: dict) -> str:
    """Render the ``.env`` file content for a brand config.

    Raises:
        InstallError: If a required field is missing.
    """
    lines = [
        f"{env_key}={format_env_value(_lookup(config, section, key))}"
        for env_key, section, key in REQUIRED_ENV_FIELDS
    ]
    for env_key, section, key in OPTIONAL_ENV_FIELDS:
        group = config.get(section)
        if isinstance(group, dict) and group.get(key) is not None:
            lines.append(f"{env_key}={format_env_value(group[key])}")
    return "\n".join(lines)


def render_strings_xml(display_name: str) -> str:
    return STRINGS_XML_TEMPLATE.format(display_name=escape(display_name))


def update_manifest_name(path: Path, name: str) -> None:
    """Set ``name`` in a JSON manifest, keeping all other fields and their order."""
    try:
        manifest = read_json(path)
    except json.JSONDecodeError as e:
        raise InstallError(f"Invalid JSON in {path}", details=str(e)) from e
    except OSError as e:
        raise InstallError(f"Failed to read {path}", details=str(e)) from e
    if not isinstance(manifest, dict):
        raise InstallError(f"Manifest {path} is not a JSON object")
    manifest["name"] = name
    _write(path, dump_json(manifest))


def _write(path: Path, content: str) -> None:
    try:
        write_atomically(path, content)
    except OSError as e:
        raise InstallError(f"Failed to write {path}", details=str(e)) from e


def install_brand(
    config_path: Path,
    brand_id: str,
    root: Path = Path("."),
    *,
    env_file: str = ENV_FILE_PATH,
    strings_xml: str = STRINGS_XML_PATH,
    manifest: str = MANIFEST_PATH,
) -> InstallResult:
    """Write a brand's configuration into the project at ``root``.

    Args:
        config_path: Exported configuration document.
        brand_id: Brand to install.
        root: Project root the output paths are relative to.
        env_file: Relative path of the env file.
        strings_xml: Relative path of the Android strings resource.
        manifest: Relative path of the package manifest.

    Raises:
        BrandNotFoundError: If the brand is not in the document.
        InstallError: On any read, parse or write failure.
    """
    config = find_brand_config(load_config_document(config_path), brand_id)
    app = config.get("appConfig")
    if not isinstance(app, dict):
        raise InstallError("Missing field in brand configuration: appConfig")
    env_content = render_env(config)
    display_name = str(app["displayName"])
    logger.info("Setting up brand: %s", display_name)

    result = InstallResult(
        brand_id=brand_id,
        display_name=display_name,
        package=str(app["package"]),
        version=str(app["version"]),
        version_code=format_env_value(app["versionCode"]),
        env_path=root / env_file,
    )
    _write(result.env_path, env_content)
    result.written.append(result.env_path)
    logger.info("Environment variables written to %s", result.env_path)

    strings_path = root / strings_xml
    if strings_path.parent.is_dir():
        _write(strings_path, render_strings_xml(display_name))
        result.strings_path = strings_path
        result.written.append(strings_path)
        logger.info("Android strings updated: %s", strings_path)
    else:
        logger.debug("Skipping strings.xml: %s does not exist", strings_path.parent)

    manifest_path = root / manifest
    if manifest_path.is_file():
        update_manifest_name(manifest_path, format_env_value(_lookup(config, "appConfig", "name")))
        result.manifest_path = manifest_path
        result.written.append(manifest_path)
        logger.info("Manifest name updated: %s", manifest_path)

    return result
