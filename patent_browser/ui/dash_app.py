from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from patent_browser.config.io import load_global_config
from patent_browser.core.dataset_loader import load_store
from patent_browser.core.view_registry import ViewRegistry
from patent_browser.services.dashboard_service import PatentDashboard
from patent_browser.ui.layout.build_layout import build_layout
from patent_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from patent_browser.ui.callbacks.callbacks_sync import register_sync_callbacks
from patent_browser.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def _build_view_registry() -> ViewRegistry:
    from patent_browser.views import (
        CountryTotalsView,
        CountryShareView,
        YearlyTrendView,
        CountryTrendsView,
        TechnologyDistributionView,
        TechnologyTotalsView,
        AuthorityTotalsView,
    )

    registry = ViewRegistry()
    registry.register(CountryShareView)
    registry.register(CountryTotalsView)
    registry.register(CountryTrendsView)
    registry.register(YearlyTrendView)
    registry.register(TechnologyDistributionView)
    registry.register(TechnologyTotalsView)
    registry.register(AuthorityTotalsView)
    return registry


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load all four extracts (all-or-nothing; raises DatasetLoadError)
    store = load_store(global_config)

    # 3) Startup session: seeds the default country selection once
    dashboard = PatentDashboard(
        store,
        bounds=global_config.year_bounds,
        default_country_count=global_config.default_country_count,
    )

    # 4) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        store=store,
        dashboard=dashboard,
        registry=_build_view_registry(),
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_sync_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "n_views": len(ctx.registry.all_classes())},
    )
    return app
