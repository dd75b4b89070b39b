"""Explicit import/export of an editor session (brand list + selection) as JSON.

Nothing here runs implicitly; the CLI loads a session before a command and
saves it afterwards.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from whitelabel.exceptions import SessionError
from whitelabel.utils.file_utils import dump_json, read_json, write_atomically

from .models import BrandConfig
from .store import BrandStore

logger = logging.getLogger(__name__)


class SessionFile(BaseModel):
    """On-disk session shape."""

    brands: list[BrandConfig] = Field(default_factory=list)
    current: str | None = None


def load_session(path: Path) -> BrandStore:
    """Load a store from a session file; a missing file gives an empty store.

    Raises:
        SessionError: If the file exists but cannot be read or parsed.
    """
    if not path.exists():
        logger.debug("No session at %s, starting empty", path)
        return BrandStore()
    try:
        data = SessionFile.model_validate(read_json(path))
    except (OSError, json.JSONDecodeError) as e:
        raise SessionError(f"Failed to read session file: {path}", details=str(e)) from e
    except PydanticValidationError as e:
        raise SessionError(f"Invalid session file: {path}", details=str(e)) from e
    logger.debug("Loaded session with %d brands from %s", len(data.brands), path)
    return BrandStore(list(data.brands), data.current)


def save_session(store: BrandStore, path: Path) -> None:
    """Write the store's brands and selection to ``path`` atomically."""
    current = store.current
    doc = {
        "brands": [b.to_json_dict() for b in store.brands],
        "current": current.id if current else None,
    }
    try:
        write_atomically(path, dump_json(doc))
    except OSError as e:
        raise SessionError(f"Failed to save session file: {path}", details=str(e)) from e
    logger.debug("Saved session with %d brands to %s", len(store), path)
