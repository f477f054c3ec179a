from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from patent_browser.ui.ids import IDs
from patent_browser.ui.layout.build_filter_panel import build_filter_panel
from patent_browser.ui.layout.build_navbar import build_navbar
from patent_browser.ui.layout.build_plot_panel import build_plot_panel
from patent_browser.ui.layout.build_summary_panel import build_summary_panel

if TYPE_CHECKING:
    from patent_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    dashboard = ctx.dashboard
    selection = dashboard.selection

    return dbc.Container(
        fluid=True,
        className="pb-root",
        children=[
            build_navbar(ctx.global_config, dashboard.technology_badge()),

            # Canonical selection; starts from the seeded startup session
            dcc.Store(id=IDs.Store.FILTER_STATE, data=selection.to_dict(), storage_type="memory"),

            build_filter_panel(dashboard),
            build_summary_panel(dashboard.get_summary()),
            build_plot_panel(ctx.registry),

            html.Footer(
                "Data source: OECD Patent Database",
                className="text-center text-muted small my-4",
            ),
        ],
    )
