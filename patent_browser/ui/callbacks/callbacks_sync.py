from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from patent_browser.core.filter_state import FilterSelection
from patent_browser.ui.ids import IDs

if TYPE_CHECKING:
    from patent_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _validate_and_build_selection(ctx: AppConfig, inputs: dict[str, Any]) -> dict[str, Any]:
    """
    Pure helper to validate UI inputs against the known countries/technologies
    and return a dict ready for FilterSelection.

    Unknown values are dropped, the year range is clamped to the configured
    bounds; nothing here raises for bad input.
    """
    store = ctx.store
    bounds = ctx.global_config.year_bounds

    def get_list(key):
        val = inputs.get(key)
        return [str(v) for v in val] if val else []

    known_countries = set(store.all_countries())
    known_techs = set(store.all_technologies())

    countries = [c for c in get_list("countries") if c in known_countries]
    technologies = [t for t in get_list("technologies") if t in known_techs]

    year_range = inputs.get("year_range") or list(bounds)
    if len(year_range) != 2:
        year_range = list(bounds)

    selection = FilterSelection(
        countries=countries,
        technologies=technologies,
        country_search=inputs.get("country_search") or "",
        technology_search=inputs.get("technology_search") or "",
    ).with_year_range(year_range[0], year_range[1], bounds=bounds)

    return selection.to_dict()


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI -> FilterSelection (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.COUNTRY_SELECT, "value"),
        Input(IDs.Control.YEAR_RANGE, "value"),
        Input(IDs.Control.TECH_SELECT, "value"),
        Input(IDs.Control.COUNTRY_SEARCH, "value"),
        Input(IDs.Control.TECH_SEARCH, "value"),
        prevent_initial_call=True,
    )
    def sync_filter_state_from_ui(country_val, year_val, tech_val, country_search, tech_search):
        inputs = {
            "countries": country_val,
            "year_range": year_val,
            "technologies": tech_val,
            "country_search": country_search,
            "technology_search": tech_search,
        }
        data = _validate_and_build_selection(ctx, inputs)
        logger.debug("Filter state updated", extra={"triggered_id": dash.ctx.triggered_id})
        return data
