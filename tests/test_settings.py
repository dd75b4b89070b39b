"""Tests for settings and logging setup."""

import logging
import re
from pathlib import Path

import pytest
from pydantic import ValidationError

import whitelabel
from whitelabel.config import logging as wl_logging
from whitelabel.config.settings import Settings, clear_settings_cache, get_settings
from whitelabel.exceptions import ConfigurationError


class TestSettings:
    """Tests for Settings and the settings cache."""

    def test_defaults(self, monkeypatch):
        """Should use the documented defaults."""
        monkeypatch.delenv("WHITELABEL_SESSION_FILE")
        monkeypatch.delenv("WHITELABEL_OUTPUT_DIR")
        settings = Settings(_env_file=None)
        assert settings.log_level == "WARNING"
        assert settings.output_dir == Path(".")
        assert settings.session_file.name == "session.json"
        assert settings.env_file_path == ".env"

    def test_env_override(self, monkeypatch):
        """Should read WHITELABEL_ prefixed variables."""
        monkeypatch.setenv("WHITELABEL_LOG_LEVEL", "DEBUG")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        """Should reject an unknown log level."""
        monkeypatch.setenv("WHITELABEL_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_wraps_invalid_values(self, monkeypatch):
        """Should raise ConfigurationError for invalid values."""
        monkeypatch.setenv("WHITELABEL_LOG_LEVEL", "LOUD")
        clear_settings_cache()
        with pytest.raises(ConfigurationError, match="Invalid configuration values"):
            get_settings()

    def test_cached_until_cleared(self, monkeypatch, tmp_path: Path):
        """Should cache settings until the cache is cleared."""
        first = get_settings()
        assert get_settings() is first
        monkeypatch.setenv("WHITELABEL_OUTPUT_DIR", str(tmp_path / "elsewhere"))
        assert get_settings().output_dir == tmp_path / "out"
        clear_settings_cache()
        assert get_settings().output_dir == tmp_path / "elsewhere"

    def test_describe_keys(self):
        """Should describe settings keyed by env var name."""
        described = get_settings().describe()
        assert list(described)[0] == "WHITELABEL_LOG_LEVEL"
        assert all(isinstance(v, str) for v in described.values())


class TestLogging:
    """Tests for logging setup."""

    def test_setup_is_idempotent(self, monkeypatch):
        """Should add the handler once and only adjust the level after."""
        monkeypatch.setattr(wl_logging, "_CONFIGURED", False)
        pkg_logger = logging.getLogger("whitelabel")
        saved = (list(pkg_logger.handlers), pkg_logger.level, pkg_logger.propagate)
        try:
            wl_logging.setup_logging("DEBUG")
            count = len(pkg_logger.handlers)
            wl_logging.setup_logging("INFO")
            assert len(pkg_logger.handlers) == count
            assert pkg_logger.level == logging.INFO
        finally:
            pkg_logger.handlers[:] = saved[0]
            pkg_logger.setLevel(saved[1])
            pkg_logger.propagate = saved[2]

    def test_get_logger_is_namespaced(self):
        """Should return the named logger."""
        assert wl_logging.get_logger("whitelabel.cli").name == "whitelabel.cli"


def test_version_matches_setup_pattern():
    """Should expose __version__ in the form setup.py reads."""
    source = Path(whitelabel.__file__).read_text(encoding="utf-8")
    match = re.search(r'__version__ = "([^"]+)"', source)
    assert match is not None
    assert match.group(1) == whitelabel.__version__
