"""
Light/dark theme preference.

The theme is initialised explicitly by the entry point (``init_theme``) rather
than on import. The stored preference wins over the terminal's reported
background; ``toggle_theme`` flips and persists it.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import click

logger = logging.getLogger(__name__)

APP_NAME = "passwright"
SETTINGS_FILENAME = "settings.json"

DARK = "dark"
LIGHT = "light"


@dataclass(frozen=True)
class ThemeState:
    """Current theme and where the choice came from ("stored" or "system")."""

    dark: bool
    source: str

    @property
    def name(self) -> str:
        return DARK if self.dark else LIGHT


def default_settings_path() -> Path:
    """Settings file inside the per-user application directory."""
    return Path(click.get_app_dir(APP_NAME)) / SETTINGS_FILENAME


class ThemeStore:
    """Persists the theme preference as a small JSON document."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else default_settings_path()

    def load(self) -> Optional[str]:
        """
        Read the stored theme.

        Returns:
            "dark", "light", or None if nothing valid is stored
        """
        if not self.path.exists():
            return None

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return None

        theme = data.get("theme") if isinstance(data, dict) else None
        if theme not in (DARK, LIGHT):
            logger.debug(f"No valid theme stored in {self.path}")
            return None
        return theme

    def save(self, theme: str) -> bool:
        """
        Store the theme preference.

        Returns:
            True if stored successfully, False otherwise
        """
        if theme not in (DARK, LIGHT):
            raise ValueError(f"Unknown theme: {theme!r}")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"theme": theme}), encoding="utf-8")
            logger.debug(f"Theme '{theme}' saved to {self.path}")
            return True
        except OSError as e:
            logger.error(f"Failed to save theme to {self.path}: {e}")
            return False

    def clear(self) -> bool:
        """Forget the stored preference."""
        try:
            self.path.unlink()
            return True
        except FileNotFoundError:
            return True
        except OSError as e:
            logger.error(f"Failed to remove {self.path}: {e}")
            return False


def detect_system_prefers_dark(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Guess whether the terminal uses a dark background.

    Reads ``COLORFGBG`` ("fg;bg", set by rxvt, Konsole and others); background
    colours 0-6 and 8 are dark. Defaults to light when unknown.
    """
    env = os.environ if environ is None else environ
    value = env.get("COLORFGBG", "")
    background = value.rsplit(";", 1)[-1].strip()
    if not background.isdigit():
        return False
    return int(background) in (0, 1, 2, 3, 4, 5, 6, 8)


def init_theme(store: ThemeStore, prefers_dark: Optional[bool] = None) -> ThemeState:
    """
    Resolve the theme once at startup.

    Args:
        store: Where the user's preference is kept
        prefers_dark: System preference; detected from the environment if None

    Returns:
        The resolved theme state
    """
    stored = store.load()
    if stored is not None:
        return ThemeState(dark=stored == DARK, source="stored")

    if prefers_dark is None:
        prefers_dark = detect_system_prefers_dark()
    return ThemeState(dark=prefers_dark, source="system")


def toggle_theme(state: ThemeState, store: ThemeStore) -> ThemeState:
    """
    Flip the theme and persist the new choice.

    Returns:
        The new state, or ``state`` unchanged if the choice could not be saved
    """
    new_state = ThemeState(dark=not state.dark, source="stored")
    if not store.save(new_state.name):
        return state
    return new_state


def reset_theme(store: ThemeStore, prefers_dark: Optional[bool] = None) -> ThemeState:
    """Drop the stored preference and fall back to the system one."""
    store.clear()
    return init_theme(store, prefers_dark)
