"""File helpers for atomic writes and pretty-printed JSON documents."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def write_atomically(path: Path, content: str | bytes, mode: int | None = None) -> None:
    """Atomically write content to file using temp file + fsync + os.replace.

    Args:
        path: Target file path.
        content: Content to write (str or bytes).
        mode: Optional file permissions (e.g., 0o755 for build scripts).
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")

    try:
        data = content.encode("utf-8") if isinstance(content, str) else content
        with open(tmp, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

        if mode is not None:
            os.chmod(tmp, mode)

        os.replace(tmp, path)
    except BaseException:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            pass
        raise


def dump_json(data: Any) -> str:
    """Pretty-print JSON with 2-space indentation, keeping non-ASCII text readable."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def read_json(path: Path) -> Any:
    """Read and parse a UTF-8 JSON file.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the content is not valid JSON.
    """
    return json.loads(path.read_text(encoding="utf-8"))
