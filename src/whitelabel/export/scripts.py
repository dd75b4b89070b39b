"""Shell script templates for branded builds.

Brand values are inserted with ``shlex.quote`` so a display name or id
containing shell metacharacters stays a single literal word.
"""

from __future__ import annotations

from datetime import datetime, timezone
from shlex import quote

from whitelabel.brands.models import BrandConfig
from whitelabel.constants import ALL_CONFIGS_FILENAME

ANDROID_BUILD_TEMPLATE = """#!/bin/bash
echo {banner}
npm run setup-brand {brand_id}
cd android && ./gradlew assembleRelease"""

IOS_BUILD_TEMPLATE = """#!/bin/bash
echo {banner}
npm run setup-brand {brand_id}
cd ios && xcodebuild -workspace App.xcworkspace -scheme App archive"""

APK_BUILD_TEMPLATE = """#!/bin/bash
# White Label APK Build Script
# Generated on {generated_at}

set -e

BRAND_NAME=${{1:-{default_brand}}}

echo "Building APK for brand: $BRAND_NAME"

# Setup brand configuration
whitelabel install {config_file} "$BRAND_NAME"

# Install dependencies
npm install

# Build Android APK
cd android
./gradlew assembleRelease

echo "Build completed! APK location: android/app/build/outputs/apk/release/"
"""

LOCAL_BUILD_INSTRUCTIONS = """# Setup brand
npm run setup-brand brand-id

# Build Android APK
cd android && ./gradlew assembleRelease

# Build iOS IPA
cd ios && xcodebuild -workspace App.xcworkspace -scheme App archive"""

GITHUB_ACTIONS_WORKFLOW = """name: Build APK
on: [push]
jobs:
  build:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v3
      - name: Build
        run: |
          npm install
          npm run setup-brand ${{ github.event.inputs.brand }}
          cd android && ./gradlew assembleRelease"""


def render_android_script(brand: BrandConfig) -> str:
    return ANDROID_BUILD_TEMPLATE.format(
        banner=quote(f"Building {brand.display_name}..."),
        brand_id=quote(brand.id),
    )


def render_ios_script(brand: BrandConfig) -> str:
    return IOS_BUILD_TEMPLATE.format(
        banner=quote(f"Building {brand.display_name} for iOS..."),
        brand_id=quote(brand.id),
    )


def render_apk_build_script(default_brand: str, generated_at: datetime | None = None) -> str:
    """Render the generic APK build script.

    The brand is taken from the script's first argument, falling back to
    ``default_brand``.
    """
    ts = (generated_at or datetime.now(timezone.utc)).isoformat()
    return APK_BUILD_TEMPLATE.format(
        generated_at=ts,
        default_brand=quote(default_brand),
        config_file=ALL_CONFIGS_FILENAME,
    )
