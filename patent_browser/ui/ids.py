from __future__ import annotations

__all__ = ["IDs", "graph_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"

    class Control:
        # Country filter
        COUNTRY_SEARCH = "country-search"
        COUNTRY_SELECT = "country-select"
        COUNTRY_SELECT_ALL_BTN = "country-select-all-btn"
        COUNTRY_CLEAR_BTN = "country-clear-btn"
        COUNTRY_LABEL = "country-label"

        # Year filter
        YEAR_RANGE = "year-range"
        YEAR_LABEL = "year-label"

        # Technology filter
        TECH_SEARCH = "technology-search"
        TECH_SELECT = "technology-select"
        TECH_SELECT_ALL_BTN = "technology-select-all-btn"
        TECH_CLEAR_BTN = "technology-clear-btn"
        TECH_LABEL = "technology-label"

        # Header badge
        TECH_BADGE = "technology-badge"

        # Summary cards
        SUMMARY_TOTAL = "summary-total-patents"
        SUMMARY_COUNTRIES = "summary-country-count"
        SUMMARY_TOP_COUNTRY = "summary-top-country"
        SUMMARY_GROWTH = "summary-avg-growth"

        # Tabs + downloads
        CHART_TABS = "chart-tabs"
        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-data-btn"


def graph_id(view_id: str) -> str:
    return f"graph-{view_id}"
