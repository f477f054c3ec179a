from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from patent_browser.config.model import GlobalConfig
from patent_browser.ui.ids import IDs


def build_navbar(global_config: GlobalConfig, badge_text: str) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    dbc.Badge(
                        f"Filtered by Technologies: {badge_text}" if badge_text else "",
                        id=IDs.Control.TECH_BADGE,
                        color="secondary",
                        className="px-3 py-2",
                        style={} if badge_text else {"display": "none"},
                    ),
                    className="ms-auto",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm pb-navbar",
    )
