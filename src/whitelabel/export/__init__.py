"""Build configuration export: JSON documents and build scripts."""

from .exporter import (
    ExportArtifact,
    config_filename,
    export_all,
    export_build_script,
    export_one,
    to_build_config,
)
from .models import ApiConfig, AppConfig, BrandExportEntry, BuildConfig, BuildScripts
from .scripts import (
    GITHUB_ACTIONS_WORKFLOW,
    LOCAL_BUILD_INSTRUCTIONS,
    render_android_script,
    render_apk_build_script,
    render_ios_script,
)

__all__ = [
    "ApiConfig",
    "AppConfig",
    "BrandExportEntry",
    "BuildConfig",
    "BuildScripts",
    "ExportArtifact",
    "GITHUB_ACTIONS_WORKFLOW",
    "LOCAL_BUILD_INSTRUCTIONS",
    "config_filename",
    "export_all",
    "export_build_script",
    "export_one",
    "render_android_script",
    "render_apk_build_script",
    "render_ios_script",
    "to_build_config",
]
