from __future__ import annotations

"""
Theme Service - light/dark preference that survives between sessions

The stored preference wins; without one the host's ambient colour scheme is
used, and without that the theme is light. Every change is written straight
back to the preference store.
"""

import logging
import os
from enum import StrEnum
from pathlib import Path
from typing import Callable, Mapping, Optional

import yaml

from outlay.errors import PreferenceError

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
THEME_ENV = "OUTLAY_THEME"

# Terminal background colour indexes that read as dark in COLORFGBG
_DARK_BACKGROUNDS = {"0", "1", "2", "3", "4", "5", "6", "8"}


class Theme(StrEnum):
    """Display theme."""

    light = "light"
    dark = "dark"

    def toggled(self) -> Theme:
        return Theme.dark if self is Theme.light else Theme.light


class PreferenceStore:
    """Local key-value store backed by a YAML file."""

    def __init__(self, path: Path):
        """
        Initialize preference store.

        Args:
            path: Path to preferences.yml
        """
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable preference file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        """
        Write a single key, keeping any others in the file.

        Raises:
            PreferenceError: If the file cannot be written
        """
        data = self._read()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=True)
        except OSError as e:
            raise PreferenceError(f"Could not write preferences to {self.path}: {e}") from e


def system_prefers_dark(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Detect if the host environment asks for a dark colour scheme.

    Checks OUTLAY_THEME first, then the COLORFGBG convention set by many
    terminals ("foreground;background" colour indexes).

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        True if dark mode is requested, False otherwise
    """
    env = os.environ if environ is None else environ

    explicit = env.get(THEME_ENV, "").strip().lower()
    if explicit in (Theme.light, Theme.dark):
        return explicit == Theme.dark

    colorfgbg = env.get("COLORFGBG", "")
    if not colorfgbg:
        return False
    background = colorfgbg.split(";")[-1].strip()
    return background in _DARK_BACKGROUNDS


class ThemePreferenceService:
    """Service holding the current theme and persisting changes."""

    def __init__(
        self,
        store: PreferenceStore,
        prefers_dark: Callable[[], bool] = system_prefers_dark,
    ):
        """
        Initialize the theme preference.

        Args:
            store: Where the preference is read from and written to
            prefers_dark: Ambient signal used when nothing is stored
        """
        self._store = store
        self._theme = self._initial_theme(prefers_dark)

    def _initial_theme(self, prefers_dark: Callable[[], bool]) -> Theme:
        stored = self._store.get(THEME_KEY)
        if stored is not None:
            try:
                return Theme(stored)
            except ValueError:
                logger.warning("Ignoring unknown stored theme %r", stored)
        return Theme.dark if prefers_dark() else Theme.light

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def is_dark(self) -> bool:
        return self._theme is Theme.dark

    def set(self, theme: Theme) -> Theme:
        """Set and persist an explicit theme."""
        self._theme = Theme(theme)
        self._store.set(THEME_KEY, self._theme.value)
        logger.debug("Theme set to %s", self._theme)
        return self._theme

    def toggle(self) -> Theme:
        """Flip between light and dark, persist, and return the new theme."""
        return self.set(self._theme.toggled())


__all__ = [
    "PreferenceStore",
    "Theme",
    "ThemePreferenceService",
    "system_prefers_dark",
]
