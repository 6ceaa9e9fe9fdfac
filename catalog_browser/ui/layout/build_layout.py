from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from catalog_browser.core.view_state import ViewState
from catalog_browser.ui.ids import IDs
from catalog_browser.ui.layout.build_filter_panel import build_filter_panel
from catalog_browser.ui.layout.build_navbar import build_navbar
from catalog_browser.ui.layout.build_table_panel import build_table_panel


def build_layout(ctx: "AppConfig"):
    return dbc.Container(
        id=IDs.Control.ROOT,
        fluid=True,
        className="cb-root theme-light",
        children=[
            build_navbar(ctx),

            # View state is per page: filter/search are not kept across sessions
            dcc.Store(id=IDs.Store.VIEW_STATE, storage_type="memory", data=ViewState().to_dict()),
            dcc.Store(id=IDs.Store.THEME, storage_type="local"),
            dcc.Store(id=IDs.Store.PREFERS_DARK, storage_type="memory"),

            build_filter_panel(ctx),
            build_table_panel(ctx),
        ],
    )
