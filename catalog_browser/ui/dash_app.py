from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List

import dash_bootstrap_components as dbc
from dash import Dash

from catalog_browser.config.loader import load_global_config
from catalog_browser.config.model import GlobalConfig
from catalog_browser.services.catalog_loader import LoadResult, load_catalog
from catalog_browser.ui.callbacks.callbacks_render import register_render_callbacks
from catalog_browser.ui.callbacks.callbacks_sync import register_sync_callbacks
from catalog_browser.ui.callbacks.callbacks_theme import register_theme_callbacks
from catalog_browser.ui.config import AppConfig
from catalog_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def known_statuses(global_config: GlobalConfig, load_result: LoadResult) -> List[str]:
    """
    Configured statuses first, then any extra status found in the catalog,
    so every record stays reachable through a filter chip.
    """
    statuses = list(global_config.statuses)
    extra = [s for s in load_result.catalog.statuses() if s not in statuses]
    if extra:
        logger.warning(
            "Catalog contains statuses missing from config",
            extra={"statuses": extra},
        )
    return statuses + extra


def build_app_config(config_root: Path, load_result: LoadResult | None = None) -> AppConfig:
    """
    Load config and, unless a load result is given, the catalog.
    The load runs once here, before any user interaction is possible.
    """
    config_root = Path(config_root)
    global_config = load_global_config(config_root)
    messages = global_config.build_messages()

    if load_result is None:
        load_result = asyncio.run(
            load_catalog(
                global_config.data_source,
                records_field=global_config.records_field,
                default_category=messages.default_category,
            )
        )

    return AppConfig(
        config_root=config_root,
        global_config=global_config,
        load_result=load_result,
        messages=messages,
        known_statuses=known_statuses(global_config, load_result),
    )


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = build_app_config(Path(config_root))

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = ctx.global_config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_sync_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_theme_callbacks(app, ctx)

    return app
