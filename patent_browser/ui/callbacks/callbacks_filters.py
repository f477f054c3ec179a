from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from patent_browser.ui.helpers import clicked_value, count_label, searched_options, year_label
from patent_browser.ui.ids import IDs, graph_id

if TYPE_CHECKING:
    from patent_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

# Charts whose points are countries / technologies (click -> focus)
COUNTRY_CLICK_VIEWS = ["country_share", "country_totals", "country_trends"]
TECHNOLOGY_CLICK_VIEWS = ["technology_totals"]


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    store = ctx.store

    # ---------------------------------------------------------
    # Search boxes narrow the offered options (keep selected)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.COUNTRY_SELECT, "options"),
        Input(IDs.Control.COUNTRY_SEARCH, "value"),
        Input(IDs.Control.COUNTRY_SELECT, "value"),
    )
    def update_country_options(search_value, selected):
        return searched_options(store.all_countries(), search_value, selected)

    @app.callback(
        Output(IDs.Control.TECH_SELECT, "options"),
        Input(IDs.Control.TECH_SEARCH, "value"),
        Input(IDs.Control.TECH_SELECT, "value"),
    )
    def update_technology_options(search_value, selected):
        return searched_options(store.all_technologies(), search_value, selected)

    # ---------------------------------------------------------
    # Select all / clear all / click-to-focus (countries)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.COUNTRY_SELECT, "value"),
        Input(IDs.Control.COUNTRY_SELECT_ALL_BTN, "n_clicks"),
        Input(IDs.Control.COUNTRY_CLEAR_BTN, "n_clicks"),
        *[Input(graph_id(v), "clickData") for v in COUNTRY_CLICK_VIEWS],
        State(IDs.Control.COUNTRY_SELECT, "value"),
        prevent_initial_call=True,
    )
    def update_country_selection(*args):
        current = args[-1] or []
        triggered = dash.ctx.triggered_id

        if triggered == IDs.Control.COUNTRY_SELECT_ALL_BTN:
            return store.all_countries()
        if triggered == IDs.Control.COUNTRY_CLEAR_BTN:
            return []

        for view_id, click in zip(COUNTRY_CLICK_VIEWS, args[2:-1]):
            if triggered == graph_id(view_id):
                country = clicked_value(click)
                if country:
                    logger.info("Focus country from chart", extra={"view_id": view_id, "country": country})
                    return [country]

        return current

    # ---------------------------------------------------------
    # Select all / clear all / click-to-focus (technologies)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TECH_SELECT, "value"),
        Input(IDs.Control.TECH_SELECT_ALL_BTN, "n_clicks"),
        Input(IDs.Control.TECH_CLEAR_BTN, "n_clicks"),
        *[Input(graph_id(v), "clickData") for v in TECHNOLOGY_CLICK_VIEWS],
        State(IDs.Control.TECH_SELECT, "value"),
        prevent_initial_call=True,
    )
    def update_technology_selection(*args):
        current = args[-1] or []
        triggered = dash.ctx.triggered_id

        if triggered == IDs.Control.TECH_SELECT_ALL_BTN:
            return store.all_technologies()
        if triggered == IDs.Control.TECH_CLEAR_BTN:
            return []

        for view_id, click in zip(TECHNOLOGY_CLICK_VIEWS, args[2:-1]):
            if triggered == graph_id(view_id):
                technology = clicked_value(click)
                if technology:
                    return [technology]

        return current

    # ---------------------------------------------------------
    # Control labels reflect the canonical selection
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.COUNTRY_LABEL, "children"),
        Output(IDs.Control.TECH_LABEL, "children"),
        Output(IDs.Control.YEAR_LABEL, "children"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_control_labels(fs_data):
        fs_data = fs_data or {}
        year_range = fs_data.get("year_range") or list(ctx.global_config.year_bounds)
        return (
            count_label("Countries", len(store.all_countries()), len(fs_data.get("countries") or [])),
            count_label(
                "Technology Domains",
                len(store.all_technologies()),
                len(fs_data.get("technologies") or []),
            ),
            year_label(year_range),
        )
