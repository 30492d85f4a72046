# src/todo_list/theme/theme_store.py

from __future__ import annotations

import logging
from enum import StrEnum

from ..core.ports import KeyValueStorage

logger = logging.getLogger(__name__)


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_raw(cls, raw: str | None) -> Theme | None:
        if not raw:
            return None
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return None


class ThemeStore:
    """
    Persisted light/dark preference.

    Built once by the composition root and passed to whoever needs it.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = "theme",
        default: Theme | str = Theme.LIGHT,
    ) -> None:
        self._storage = storage
        self._key = key
        self._default = Theme.from_raw(str(default)) or Theme.LIGHT

    @property
    def default(self) -> Theme:
        return self._default

    def get(self) -> Theme:
        """Saved theme, or the default if nothing valid is stored."""
        try:
            raw = self._storage.get(self._key)
        except Exception:
            logger.exception("Failed to read theme from storage key=%s", self._key)
            return self._default

        theme = Theme.from_raw(raw)
        if theme is None:
            if raw:
                logger.warning("Ignoring unknown stored theme %r", raw)
            return self._default
        return theme

    def set(self, theme: Theme | str) -> Theme:
        parsed = Theme.from_raw(str(theme))
        if parsed is None:
            raise ValueError(f"Unknown theme: {theme!r} (expected 'light' or 'dark')")

        try:
            self._storage.set(self._key, parsed.value)
        except Exception:
            logger.exception("Failed to persist theme=%s", parsed.value)
        else:
            logger.debug("Theme set to %s", parsed.value)
        return parsed

    def toggle(self) -> Theme:
        current = self.get()
        return self.set(Theme.DARK if current is Theme.LIGHT else Theme.LIGHT)
