"""Client-side preferences: theme choice and the signed-in user.

Preference storage is best effort. Read or write failures are logged and
the client keeps its current state.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from whitelabel.utils.file_utils import dump_json, write_atomically

from .config import RuntimeBrandConfig
from .theme import ThemePalette

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
USER_KEY = "user"


class User(BaseModel):
    id: str
    name: str
    email: str


# Stand-in account used until the client has a real sign-in flow
DEMO_USER = User(id="1", name="John Doe", email="john@example.com")


class PreferenceStore:
    """String key/value storage persisted as a JSON object."""

    def __init__(self, path: Path):
        self.path = path

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Preferences file {self.path} is not a JSON object")
        return data

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        write_atomically(self.path, dump_json(data))

    def remove_item(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            write_atomically(self.path, dump_json(data))


@dataclass
class BrandSession:
    """Theme and user state of the branded client."""

    config: RuntimeBrandConfig
    storage: PreferenceStore
    dark_mode: bool = False
    user: User | None = None

    @property
    def palette(self) -> ThemePalette:
        return ThemePalette.for_brand(self.config, self.dark_mode)

    def start(self) -> None:
        """Load saved user and theme; call once when the client starts."""
        self.load_user()
        self.load_theme_preference()

    def load_user(self) -> None:
        try:
            raw = self.storage.get_item(USER_KEY)
            if raw:
                self.user = User.model_validate_json(raw)
        except (OSError, ValueError, PydanticValidationError) as e:
            logger.error("Error loading user data: %s", e)

    def load_theme_preference(self) -> None:
        try:
            theme = self.storage.get_item(THEME_KEY)
            if theme == "dark" and self.config.features.dark_mode:
                self.dark_mode = True
        except (OSError, ValueError) as e:
            logger.error("Error loading theme preference: %s", e)

    def toggle_theme(self) -> bool:
        """Flip dark mode if the brand allows it; returns the new setting."""
        if not self.config.features.dark_mode:
            return self.dark_mode
        self.dark_mode = not self.dark_mode
        try:
            self.storage.set_item(THEME_KEY, "dark" if self.dark_mode else "light")
        except (OSError, ValueError) as e:
            logger.error("Error saving theme preference: %s", e)
        return self.dark_mode

    def login(self, user: User = DEMO_USER) -> User:
        self.user = user
        try:
            self.storage.set_item(USER_KEY, user.model_dump_json())
        except (OSError, ValueError) as e:
            logger.error("Error saving user data: %s", e)
        return user

    def logout(self) -> None:
        self.user = None
        try:
            self.storage.remove_item(USER_KEY)
        except (OSError, ValueError) as e:
            logger.error("Error removing user data: %s", e)
