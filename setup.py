"""
setuptools script for the white label generator.

Usage:
    # Development install with test dependencies:
    pip install -e ".[test]"

    # Then run the CLI:
    whitelabel --help
    whitelabel install white-label-configs.json <brand-id>

Notes:
- Settings are read from WHITELABEL_* environment variables or a .env file
- Run the tests with: pytest
"""

import os
import re

from setuptools import find_packages, setup

_here = os.path.dirname(os.path.abspath(__file__))
with open(os.path.join(_here, "src", "whitelabel", "__init__.py"), encoding="utf-8") as f:
    _version = re.search(r'__version__ = "([^"]+)"', f.read()).group(1)

setup(
    name="whitelabel-generator",
    version=_version,
    description="Manage white label brand configurations and install them into mobile builds",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["whitelabel", "whitelabel.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9",
        "rich>=13.0",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "Pillow>=10.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "whitelabel=whitelabel.cli:main",
        ],
    },
)
