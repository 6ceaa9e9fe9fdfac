from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import dash
from dash import ClientsideFunction, Input, Output, State

from catalog_browser.services.theme import (
    resolve_initial_theme,
    theme_toggle_content,
    toggle_theme,
)
from catalog_browser.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def next_theme(
        triggered_id: Optional[str],
        saved: Optional[str],
        prefers_dark: Optional[bool],
) -> str:
    current = resolve_initial_theme(saved, prefers_dark)
    if triggered_id == IDs.Control.THEME_TOGGLE:
        return toggle_theme(current)
    return current


def register_theme_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # System light/dark signal (browser-only, see assets/theme.js)
    # ---------------------------------------------------------
    app.clientside_callback(
        ClientsideFunction(namespace="catalogBrowser", function_name="prefersDark"),
        Output(IDs.Store.PREFERS_DARK, "data"),
        Input(IDs.Control.ROOT, "id"),
    )

    # ---------------------------------------------------------
    # Resolve / toggle and persist the preference
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.THEME, "data"),
        Input(IDs.Store.PREFERS_DARK, "data"),
        Input(IDs.Control.THEME_TOGGLE, "n_clicks"),
        State(IDs.Store.THEME, "data"),
        prevent_initial_call=True,
    )
    def update_theme(prefers_dark, _n_clicks, saved):
        theme = next_theme(dash.ctx.triggered_id, saved, prefers_dark)
        logger.debug("theme", extra={"theme": theme})
        return theme

    # ---------------------------------------------------------
    # Apply theme to the page
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.ROOT, "className"),
        Output(IDs.Control.THEME_TOGGLE_ICON, "children"),
        Output(IDs.Control.THEME_TOGGLE_LABEL, "children"),
        Input(IDs.Store.THEME, "data"),
    )
    def apply_theme(theme):
        theme = resolve_initial_theme(theme, prefers_dark=False)
        icon, label = theme_toggle_content(theme, ctx.messages)
        return f"cb-root theme-{theme}", icon, label
