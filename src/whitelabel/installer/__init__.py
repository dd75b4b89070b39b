"""Brand installer: writes one brand's configuration into a mobile project."""

from .installer import (
    InstallResult,
    find_brand_config,
    format_env_value,
    install_brand,
    load_config_document,
    render_env,
    render_strings_xml,
    update_manifest_name,
)

__all__ = [
    "InstallResult",
    "find_brand_config",
    "format_env_value",
    "install_brand",
    "load_config_document",
    "render_env",
    "render_strings_xml",
    "update_manifest_name",
]
