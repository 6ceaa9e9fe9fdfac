from __future__ import annotations

from typing import Optional, Tuple

from catalog_browser.core.messages import DEFAULT_MESSAGES, Messages

THEME_LIGHT = "light"
THEME_DARK = "dark"
THEMES = (THEME_LIGHT, THEME_DARK)


def resolve_initial_theme(saved: Optional[str], prefers_dark: Optional[bool]) -> str:
    """
    A saved valid preference wins; otherwise follow the system light/dark signal.
    """
    if saved in THEMES:
        return saved
    return THEME_DARK if prefers_dark else THEME_LIGHT


def toggle_theme(theme: Optional[str]) -> str:
    return THEME_DARK if (theme or THEME_LIGHT) == THEME_LIGHT else THEME_LIGHT


def theme_toggle_content(theme: str, messages: Messages = DEFAULT_MESSAGES) -> Tuple[str, str]:
    """Icon and label for the toggle button: it offers the other theme."""
    if theme == THEME_DARK:
        return "☀️", messages.theme_to_light
    return "🌙", messages.theme_to_dark
