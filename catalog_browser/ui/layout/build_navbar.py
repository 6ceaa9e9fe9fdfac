from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from catalog_browser.services.theme import THEME_LIGHT, theme_toggle_content
from catalog_browser.ui.ids import IDs


def build_navbar(ctx: "AppConfig") -> dbc.Navbar:
    title = ctx.global_config.ui_title
    subtitle = ctx.global_config.subtitle

    # Real theme is applied by the theme callbacks once the browser reports it
    icon, label = theme_toggle_content(THEME_LIGHT, ctx.messages)

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                dbc.Button(
                    [
                        html.Span(icon, id=IDs.Control.THEME_TOGGLE_ICON, className="theme-toggle-icon me-2"),
                        html.Span(label, id=IDs.Control.THEME_TOGGLE_LABEL, className="theme-toggle-label"),
                    ],
                    id=IDs.Control.THEME_TOGGLE,
                    color="secondary",
                    outline=True,
                    className="ms-auto theme-toggle",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm cb-navbar",
    )
