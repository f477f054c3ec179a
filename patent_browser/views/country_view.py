# patent_browser/views/country_view.py

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from patent_browser.core.aggregations import country_totals
from patent_browser.core.base_view import BaseView, COLORS
from patent_browser.core.filter_state import FilterSelection

PIE_SLICES = 8


class CountryTotalsView(BaseView):
    """
    Top 15 countries by summed patents for the current selection.

    Bars carry the country name so a click can focus the selection on it.
    """

    id = "country_totals"
    label = "Top Countries by Patents"
    description = "Hover for details, click a bar to focus on that country"

    def compute_data(self, selection: FilterSelection) -> pd.DataFrame:
        return country_totals(self.filtered(selection).country_year)

    def render_figure(self, data: pd.DataFrame, selection: FilterSelection) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = px.bar(
            data,
            x="country",
            y="patents",
            custom_data=["country"],
            color_discrete_sequence=["#82ca9d"],
        )
        fig.update_layout(
            height=420,
            margin=dict(l=40, r=40, t=60, b=100),
            title=f"{self.label}{self.technology_suffix(selection)}",
            xaxis_title="Country",
            yaxis_title="Patents",
            xaxis_tickangle=-45,
        )
        return fig


class CountryShareView(BaseView):
    """Share of patents among the top 8 countries."""

    id = "country_share"
    label = "Top Countries Distribution"
    description = "Patent share by country - click a segment to focus on it"

    def compute_data(self, selection: FilterSelection) -> pd.DataFrame:
        return country_totals(self.filtered(selection).country_year, limit=PIE_SLICES)

    def render_figure(self, data: pd.DataFrame, selection: FilterSelection) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = go.Figure(
            go.Pie(
                labels=data["country"],
                values=data["patents"],
                customdata=data["country"],
                marker={"colors": COLORS[: len(data)]},
                textinfo="label+percent",
                sort=False,
            )
        )
        fig.update_layout(
            height=420,
            margin=dict(l=20, r=20, t=60, b=20),
            title=f"{self.label}{self.technology_suffix(selection)}",
            showlegend=False,
        )
        return fig
