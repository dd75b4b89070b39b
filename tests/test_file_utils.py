"""Tests for file utility functions."""

import json
import os
from pathlib import Path

import pytest

from whitelabel.utils.file_utils import dump_json, read_json, write_atomically


class TestWriteAtomically:
    """Tests for write_atomically function."""

    def test_writes_text_content(self, tmp_path: Path):
        """Should write text content to file."""
        fp = tmp_path / ".env"
        write_atomically(fp, "APP_NAME=App1")
        assert fp.read_text() == "APP_NAME=App1"

    def test_writes_bytes_content(self, tmp_path: Path):
        """Should write bytes content to file."""
        fp = tmp_path / "config.json"
        write_atomically(fp, b'{"a": 1}')
        assert fp.read_bytes() == b'{"a": 1}'

    def test_creates_parent_directories(self, tmp_path: Path):
        """Should create parent dirs if they don't exist."""
        fp = tmp_path / "android" / "values" / "strings.xml"
        write_atomically(fp, "<resources/>")
        assert fp.read_text() == "<resources/>"

    def test_sets_file_mode(self, tmp_path: Path):
        """Build scripts are written executable."""
        fp = tmp_path / "build-apk.sh"
        write_atomically(fp, "#!/bin/bash\n", mode=0o755)
        assert (fp.stat().st_mode & 0o777) == 0o755

    def test_cleans_up_temp_on_failure(self, tmp_path: Path, monkeypatch):
        """Should remove temp file if write fails."""
        fp = tmp_path / "test.json"

        def fail_fsync(fd):
            raise OSError("fsync failed")

        monkeypatch.setattr(os, "fsync", fail_fsync)
        with pytest.raises(OSError):
            write_atomically(fp, "content")
        assert not (tmp_path / "test.json.tmp").exists()
        assert not fp.exists()


class TestJsonHelpers:
    """Tests for the JSON read and dump helpers."""

    def test_dump_json_uses_two_space_indent(self):
        """Should pretty-print with a 2-space indent."""
        assert dump_json({"a": [1]}) == '{\n  "a": [\n    1\n  ]\n}'

    def test_dump_json_keeps_unicode(self):
        """Should keep non-ASCII text unescaped."""
        assert "Café" in dump_json({"name": "Café"})

    def test_read_json_round_trip(self, tmp_path: Path):
        """Should read back what dump_json wrote."""
        fp = tmp_path / "doc.json"
        fp.write_text(dump_json({"name": "x"}), encoding="utf-8")
        assert read_json(fp) == {"name": "x"}

    def test_read_json_invalid(self, tmp_path: Path):
        """Should raise JSONDecodeError on malformed content."""
        fp = tmp_path / "bad.json"
        fp.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            read_json(fp)
